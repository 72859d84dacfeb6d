from resume_optimizer.parsing.schemas import (
    CONTACT_RESPONSE,
    FINAL_RESUME_RESPONSE,
    REWRITE_RESPONSE,
)
from resume_optimizer.prompts.templates import PromptTemplate

CONTACT_SYSTEM = (
    "You extract contact info from resumes. The name is ALWAYS at the top. Return only valid JSON."
)

CONTACT_USER = """Extract contact information from this resume.

The full name is usually at the TOP of the resume, often as a header.
Names may be written in Arabic (e.g. "محمد أحمد") or English (e.g. "John Smith").

Return ONLY this JSON format:
{"fullName": "Person Full Name", "email": "email@example.com", "phone": "+966...", "linkedin": "linkedin.com/in/...", "location": "City, Country"}

If a field is not found, use empty string "".

Resume text:
{{RESUME}}"""

REWRITE_SYSTEM = (
    "You are a premium ATS resume optimization engine. You follow all formatting rules, "
    "aim for {{MIN_WORDS}}-{{MAX_WORDS}} words, write impact-focused bullets, and NEVER "
    "fabricate information. Return only valid JSON."
)

_FORMAT_RULES = """SECTION HEADERS MUST BE EXACTLY (IN THIS ORDER):

PROFESSIONAL SUMMARY
CORE COMPETENCIES
PROFESSIONAL EXPERIENCE
EDUCATION
TECHNICAL SKILLS
LANGUAGES
CERTIFICATIONS

Each section header on its own line, all caps. No emojis, no markdown, no "|" characters.
Put ONE empty line between sections. Each bullet or entry on its own line.
Bullet points MUST start with "• ".
For each role, the first line is: Job Title — Company — Dates
Do NOT include email, phone or LinkedIn inside the resume text."""

REWRITE_USER = (
    """You are a senior ATS resume writer.

GOAL:
Create a job-tailored, ATS-optimized resume that stays 100% truthful to the original resume.

TARGET LENGTH:
The FINAL rewritten resume must be between {{MIN_WORDS}} and {{MAX_WORDS}} words (excluding contact info).

CRITICAL RULES:
1. NEVER fabricate skills, experience, or achievements not in the original resume.
2. NEVER add technologies, tools, or certifications the candidate doesn't have.
3. If the original resume lacks details, expand on EXISTING accomplishments only.
4. The job description is ONLY for alignment and keyword phrasing.

"""
    + _FORMAT_RULES
    + """

FINAL JSON RESPONSE FORMAT (MANDATORY):
Return ONLY this JSON object:

{
  "rewritten_resume": "PROFESSIONAL SUMMARY\\n...\\n\\nCORE COMPETENCIES\\n...",
  "word_count": 600
}

ORIGINAL RESUME:
{{RESUME}}

JOB DESCRIPTION:
{{JOB_DESCRIPTION}}"""
)

EXPAND_USER = (
    """The resume below was rewritten for the job description but is too short:
it has {{PREVIOUS_WORD_COUNT}} words and must have between {{MIN_WORDS}} and {{MAX_WORDS}} words.

Expand it using ONLY facts that already appear in the original resume or in the draft.
Unpack responsibilities, scope, tools and outcomes that are already mentioned.
Do NOT invent new employers, projects, tools, certifications or numbers.

"""
    + _FORMAT_RULES
    + """

Return ONLY this JSON object:

{
  "final_resume": "PROFESSIONAL SUMMARY\\n...",
  "word_count": 600,
  "contact": {"fullName": "", "email": "", "phone": "", "linkedin": "", "location": ""}
}

DRAFT TO EXPAND:
{{PREVIOUS_RESUME}}

ORIGINAL RESUME:
{{RESUME}}

JOB DESCRIPTION:
{{JOB_DESCRIPTION}}"""
)

CONTACT_PROMPT = PromptTemplate(
    name="contact",
    system=CONTACT_SYSTEM,
    user=CONTACT_USER,
    schema=CONTACT_RESPONSE,
    temperature=0.0,
)

REWRITE_PROMPT = PromptTemplate(
    name="rewrite",
    system=REWRITE_SYSTEM,
    user=REWRITE_USER,
    schema=REWRITE_RESPONSE,
    temperature=0.35,
)

EXPAND_PROMPT = PromptTemplate(
    name="expand",
    system=REWRITE_SYSTEM,
    user=EXPAND_USER,
    schema=FINAL_RESUME_RESPONSE,
    temperature=0.35,
)
