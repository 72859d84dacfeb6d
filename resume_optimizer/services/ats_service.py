from __future__ import annotations

import logging
from typing import Any, Sequence

from resume_optimizer.ai.fallback import complete_with_fallback
from resume_optimizer.ai.types import CompletionProvider
from resume_optimizer.core.config import settings
from resume_optimizer.core.policy import get_policy_value
from resume_optimizer.parsing.json_recovery import recover
from resume_optimizer.prompts.ats import ATS_PROMPT

logger = logging.getLogger(__name__)

DEFAULT_MATCH_LEVELS = {"excellent": 85, "strong": 70, "okay": 50}


def _match_thresholds() -> dict[str, int]:
    configured = get_policy_value("ats.match_levels", {}) or {}
    thresholds = dict(DEFAULT_MATCH_LEVELS)
    for key in thresholds:
        value = configured.get(key)
        if isinstance(value, int):
            thresholds[key] = value
    return thresholds


def _prompt_values(resume: str, job_description: str, thresholds: dict[str, int]) -> dict[str, Any]:
    return {
        "RESUME": resume,
        "JOB_DESCRIPTION": job_description,
        "EXCELLENT": thresholds["excellent"],
        "EXCELLENT_BELOW": thresholds["excellent"] - 1,
        "STRONG": thresholds["strong"],
        "STRONG_BELOW": thresholds["strong"] - 1,
        "OKAY": thresholds["okay"],
        "OKAY_BELOW": thresholds["okay"] - 1,
    }


def analyze_ats(
    resume: str,
    job_description: str,
    *,
    provider: CompletionProvider,
    models: Sequence[str],
) -> dict[str, Any]:
    thresholds = _match_thresholds()
    messages = ATS_PROMPT.render(_prompt_values(resume, job_description, thresholds))
    raw = complete_with_fallback(
        provider,
        models,
        messages,
        temperature=float(get_policy_value("ats.temperature", ATS_PROMPT.temperature)),
        max_tokens=int(get_policy_value("ats.max_tokens", settings.llm_max_tokens)),
    )

    result = recover(raw, ATS_PROMPT.schema)
    record = dict(result.record)

    logger.info(
        "ats_analysis tier=%s score=%s match_level=%s",
        result.tier,
        record.get("score"),
        record.get("match_level"),
    )
    return record
