from resume_optimizer.parsing.schemas import SCORE_RESPONSE
from resume_optimizer.prompts.templates import PromptTemplate

ATS_SYSTEM = (
    "You are an ATS analysis engine. Return only strict JSON following the user schema, "
    "no markdown, no extra prose."
)

ATS_USER = """You are an advanced ATS analysis engine.

TASK:
Analyze the resume against the job description and return a structured ATS report.

EVALUATION DIMENSIONS:
1) Overall ATS compatibility
2) Keyword and skills match
3) Experience alignment with role level and responsibilities
4) Structural and formatting compatibility for ATS parsing

SCORING LOGIC:
- Start from 100 and subtract penalties.
- Missing MUST-HAVE requirements: -5 to -10 each depending on severity.
- Missing NICE-TO-HAVE items: -2 to -4 each.
- Weak or mismatched experience for seniority/role: -10 to -20.
- Major formatting or parsing risks (tables, columns, graphics): -5 to -15.
- Minor formatting issues (inconsistent bullets, mixed date styles): -1 to -3 each.

MATCH LEVEL (based on final score):
- {{EXCELLENT}}-100: "Excellent"
- {{STRONG}}-{{EXCELLENT_BELOW}}: "Strong"
- {{OKAY}}-{{STRONG_BELOW}}: "Okay"
- 0-{{OKAY_BELOW}}: "Weak"

RETURN JSON ONLY IN THIS FORMAT:

{
  "score": 82,
  "match_level": "Strong",
  "dimension_scores": {
    "overall_ats_score": 82,
    "keyword_match_score": 85,
    "experience_alignment_score": 78,
    "formatting_compatibility_score": 88
  },
  "ats_structural_health": ["..."],
  "key_strengths": ["..."],
  "critical_gaps": ["..."],
  "missing_keywords": ["..."],
  "issues": ["..."],
  "suggestions": ["..."]
}

RULES:
- "score" must be an integer from 0 to 100.
- "match_level" must be exactly one of: "Excellent", "Strong", "Okay", "Weak".
- Every list must be a flat JSON array of strings.

RESUME:
{{RESUME}}

JOB DESCRIPTION:
{{JOB_DESCRIPTION}}"""

ATS_PROMPT = PromptTemplate(
    name="ats",
    system=ATS_SYSTEM,
    user=ATS_USER,
    schema=SCORE_RESPONSE,
    temperature=0.2,
)
