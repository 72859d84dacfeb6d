"""
Resume rewriting with word-count acceptance.

The retry loop is a fold over ``AttemptState``: each attempt sees the state
left by the previous one (the "expand" prompt needs the previous text), and
the loop stops as soon as a locally counted result lands inside the strict
band or ``max_attempts`` is spent. ``resolve_outcome`` then maps the final
state to accepted, degraded or failed.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field, replace
from typing import Any, Callable, Literal, Mapping, Sequence

from resume_optimizer.ai.fallback import complete_with_fallback
from resume_optimizer.ai.types import CompletionProvider
from resume_optimizer.core.config import settings
from resume_optimizer.core.policy import get_policy_value
from resume_optimizer.normalize.contact import ContactRecord, enrich_contact
from resume_optimizer.normalize.text import count_words
from resume_optimizer.parsing.json_recovery import RecoveryError, parse_model_json
from resume_optimizer.prompts.rewrite import CONTACT_PROMPT, EXPAND_PROMPT, REWRITE_PROMPT
from resume_optimizer.prompts.templates import PromptTemplate

logger = logging.getLogger(__name__)

RewriteStatus = Literal["accepted", "degraded", "failed"]


@dataclass(frozen=True)
class WordCountPolicy:
    min_words: int = 500
    max_words: int = 700
    warn_threshold: int = 450
    salvage_min: int = 350
    salvage_max: int = 750
    max_attempts: int = 3

    def __post_init__(self) -> None:
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")
        if self.min_words > self.max_words:
            raise ValueError("min_words must not exceed max_words")
        if self.salvage_min > self.min_words or self.salvage_max < self.max_words:
            raise ValueError("salvage band must contain the target band")

    @classmethod
    def from_config(cls) -> "WordCountPolicy":
        band = get_policy_value("rewrite.word_count", {}) or {}
        defaults = cls()
        return cls(
            min_words=int(band.get("min_words", defaults.min_words)),
            max_words=int(band.get("max_words", defaults.max_words)),
            warn_threshold=int(band.get("warn_threshold", defaults.warn_threshold)),
            salvage_min=int(band.get("salvage_min", defaults.salvage_min)),
            salvage_max=int(band.get("salvage_max", defaults.salvage_max)),
            max_attempts=int(get_policy_value("rewrite.max_attempts", defaults.max_attempts)),
        )

    def accepts(self, word_count: int) -> bool:
        return self.min_words <= word_count <= self.max_words

    def salvages(self, word_count: int) -> bool:
        return self.salvage_min <= word_count <= self.salvage_max


@dataclass(frozen=True)
class AttemptOutput:
    text: str
    contact: Mapping[str, Any] = field(default_factory=dict)
    parsed: bool = True


@dataclass(frozen=True)
class AttemptState:
    attempt_number: int = 0
    last_text: str = ""
    last_word_count: int = 0
    last_contact: Mapping[str, Any] = field(default_factory=dict)
    parse_failures: int = 0

    def advance(self, output: AttemptOutput) -> "AttemptState":
        if not output.parsed:
            # Keep the previous text so a later attempt can still expand it.
            return replace(
                self,
                attempt_number=self.attempt_number + 1,
                parse_failures=self.parse_failures + 1,
            )
        return replace(
            self,
            attempt_number=self.attempt_number + 1,
            last_text=output.text,
            last_word_count=count_words(output.text),
            last_contact=dict(output.contact),
        )


AttemptFn = Callable[[AttemptState], AttemptOutput]


def run_attempts(
    policy: WordCountPolicy,
    attempt_fn: AttemptFn,
    initial: AttemptState | None = None,
) -> AttemptState:
    state = initial or AttemptState()
    while state.attempt_number < policy.max_attempts:
        state = state.advance(attempt_fn(state))
        logger.info(
            "rewrite_attempt attempt=%s/%s words=%s",
            state.attempt_number,
            policy.max_attempts,
            state.last_word_count,
        )
        if state.last_text and policy.accepts(state.last_word_count):
            break
        logger.warning(
            "length_constraint_violation attempt=%s/%s words=%s accepted_range=%s-%s",
            state.attempt_number,
            policy.max_attempts,
            state.last_word_count,
            policy.min_words,
            policy.max_words,
        )
    return state


@dataclass(frozen=True)
class RewriteOutcome:
    status: RewriteStatus
    resume_text: str
    word_count: int
    attempts: int
    contact: ContactRecord = field(default_factory=ContactRecord)
    warning: str | None = None
    error: str | None = None

    @property
    def http_status(self) -> int:
        return 422 if self.status == "failed" else 200

    def to_response(self) -> dict[str, Any]:
        if self.status == "failed":
            return {
                "error": self.error,
                "rewritten_resume": self.resume_text,
                "word_count": self.word_count,
                "attempts": self.attempts,
            }
        body: dict[str, Any] = {
            "rewritten_resume": self.resume_text,
            "word_count": self.word_count,
            "contact_info": self.contact.to_response(),
            "attempts": self.attempts,
        }
        if self.warning:
            body["warning"] = self.warning
        return body


def resolve_outcome(
    policy: WordCountPolicy,
    state: AttemptState,
    contact: ContactRecord | None = None,
) -> RewriteOutcome:
    words = state.last_word_count
    base = {
        "resume_text": state.last_text,
        "word_count": words,
        "attempts": state.attempt_number,
        "contact": contact or ContactRecord(),
    }

    below_recommended = None
    if words < policy.warn_threshold:
        below_recommended = f"WORD_COUNT_BELOW_RECOMMENDED_RANGE_{policy.warn_threshold}_{policy.max_words}"

    if state.last_text and policy.accepts(words):
        return RewriteOutcome(status="accepted", warning=below_recommended, **base)

    if state.last_text and policy.salvages(words):
        return RewriteOutcome(
            status="degraded",
            warning=below_recommended
            or f"WORD_COUNT_OUTSIDE_TARGET_RANGE_{policy.min_words}_{policy.max_words}",
            **base,
        )

    return RewriteOutcome(
        status="failed",
        error=f"LENGTH_CONSTRAINT_VIOLATION_AFTER_{state.attempt_number}_ATTEMPTS",
        **base,
    )


def _extract_contact_seed(
    resume: str,
    *,
    provider: CompletionProvider,
    models: Sequence[str],
) -> ContactRecord:
    raw = complete_with_fallback(
        provider,
        models,
        CONTACT_PROMPT.render({"RESUME": resume}),
        temperature=float(get_policy_value("contact.temperature", CONTACT_PROMPT.temperature)),
        max_tokens=int(get_policy_value("contact.max_tokens", 400)),
    )
    try:
        parsed = parse_model_json(raw, CONTACT_PROMPT.schema)
    except RecoveryError as exc:
        logger.warning("contact_extraction_unparseable chars=%s: %s", len(raw), exc)
        parsed = {}
    return ContactRecord.from_mapping(parsed)


def _select_template(
    state: AttemptState,
    policy: WordCountPolicy,
    base_template: PromptTemplate,
    expand_short_attempts: bool,
) -> PromptTemplate:
    if (
        expand_short_attempts
        and state.attempt_number > 0
        and state.last_text
        and state.last_word_count < policy.min_words
    ):
        return EXPAND_PROMPT
    return base_template


def rewrite_for_job(
    resume: str,
    job_description: str,
    *,
    provider: CompletionProvider,
    models: Sequence[str],
    policy: WordCountPolicy | None = None,
    rewrite_prompt: str | None = None,
) -> RewriteOutcome:
    policy = policy or WordCountPolicy.from_config()
    base_template = REWRITE_PROMPT
    if rewrite_prompt and rewrite_prompt.strip():
        base_template = REWRITE_PROMPT.with_user_template(rewrite_prompt)
    expand_short_attempts = bool(get_policy_value("rewrite.expand_short_attempts", True))
    temperature = float(get_policy_value("rewrite.temperature", base_template.temperature))
    max_tokens = int(get_policy_value("rewrite.max_tokens", settings.llm_max_tokens))

    contact = _extract_contact_seed(resume, provider=provider, models=models)
    contact = enrich_contact(resume, contact)

    def attempt(state: AttemptState) -> AttemptOutput:
        template = _select_template(state, policy, base_template, expand_short_attempts)
        values = {
            "RESUME": resume,
            "JOB_DESCRIPTION": job_description,
            "MIN_WORDS": policy.min_words,
            "MAX_WORDS": policy.max_words,
            "PREVIOUS_RESUME": state.last_text,
            "PREVIOUS_WORD_COUNT": state.last_word_count,
        }
        raw = complete_with_fallback(
            provider,
            models,
            template.render(values),
            temperature=temperature,
            max_tokens=max_tokens,
        )
        try:
            record = parse_model_json(raw, template.schema)
        except RecoveryError as exc:
            logger.warning(
                "rewrite_attempt_unparseable attempt=%s template=%s: %s",
                state.attempt_number + 1,
                template.name,
                exc,
            )
            return AttemptOutput(text="", parsed=False)

        text = template.schema.resume_text(record)
        if not text:
            logger.warning(
                "rewrite_attempt_missing_resume attempt=%s template=%s keys=%s",
                state.attempt_number + 1,
                template.name,
                sorted(record),
            )
            return AttemptOutput(text="", parsed=False)
        return AttemptOutput(text=text, contact=template.schema.contact(record))

    state = run_attempts(policy, attempt)
    if not state.last_text and state.parse_failures:
        raise RecoveryError("Could not parse the rewritten resume from the model response")

    contact = contact.merge_missing(ContactRecord.from_mapping(state.last_contact))
    contact = enrich_contact(state.last_text, contact)

    outcome = resolve_outcome(policy, state, contact)
    logger.info(
        "rewrite_outcome status=%s words=%s attempts=%s warning=%s",
        outcome.status,
        outcome.word_count,
        outcome.attempts,
        outcome.warning,
    )
    return outcome
