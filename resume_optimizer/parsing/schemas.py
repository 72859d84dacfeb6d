from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Literal

FieldKind = Literal["int", "str", "str_list", "object"]


@dataclass(frozen=True)
class FieldSpec:
    key: str
    kind: FieldKind


@dataclass(frozen=True)
class ResponseSchema:
    """Expected shape of one prompt template's JSON answer.

    ``salvage`` enables field-by-field regex recovery. It stays off for the
    free-text rewrite shapes, where a partial record would silently corrupt the
    resume body.
    """

    name: str
    fields: tuple[FieldSpec, ...]
    salvage: bool = False
    resume_key: str | None = None
    resume_key_aliases: tuple[str, ...] = field(default_factory=tuple)
    contact_key: str | None = None

    def field_spec(self, key: str) -> FieldSpec | None:
        for spec in self.fields:
            if spec.key == key:
                return spec
        return None

    def conform(self, record: dict[str, Any]) -> dict[str, Any]:
        """Drop known fields whose value has the wrong shape; keep unknown keys."""
        output: dict[str, Any] = {}
        for key, value in record.items():
            spec = self.field_spec(key)
            if spec is None:
                output[key] = value
                continue
            coerced = _coerce(spec.kind, value)
            if coerced is not None:
                output[key] = coerced
        return output

    def resume_text(self, record: dict[str, Any]) -> str:
        if not self.resume_key:
            return ""
        for key in (self.resume_key, *self.resume_key_aliases):
            value = record.get(key)
            if isinstance(value, str) and value.strip():
                return value
        return ""

    def contact(self, record: dict[str, Any]) -> dict[str, Any]:
        if not self.contact_key:
            return {}
        value = record.get(self.contact_key)
        return value if isinstance(value, dict) else {}


def _coerce(kind: FieldKind, value: Any) -> Any:
    if kind == "int":
        if isinstance(value, bool):
            return None
        if isinstance(value, int):
            return value
        if isinstance(value, float):
            return int(round(value))
        if isinstance(value, str) and value.strip().isdigit():
            return int(value.strip())
        return None
    if kind == "str":
        return value if isinstance(value, str) else None
    if kind == "str_list":
        if not isinstance(value, list):
            return None
        if not all(isinstance(item, str) for item in value):
            return None
        return value
    if kind == "object":
        return value if isinstance(value, dict) else None
    return None


SCORE_RESPONSE = ResponseSchema(
    name="score",
    fields=(
        FieldSpec("score", "int"),
        FieldSpec("match_level", "str"),
        FieldSpec("dimension_scores", "object"),
        FieldSpec("ats_structural_health", "str_list"),
        FieldSpec("key_strengths", "str_list"),
        FieldSpec("critical_gaps", "str_list"),
        FieldSpec("missing_keywords", "str_list"),
        FieldSpec("issues", "str_list"),
        FieldSpec("suggestions", "str_list"),
    ),
    salvage=True,
)

CONTACT_RESPONSE = ResponseSchema(
    name="contact",
    fields=(
        FieldSpec("fullName", "str"),
        FieldSpec("email", "str"),
        FieldSpec("phone", "str"),
        FieldSpec("linkedin", "str"),
        FieldSpec("location", "str"),
    ),
    salvage=True,
)

REWRITE_RESPONSE = ResponseSchema(
    name="rewrite",
    fields=(
        FieldSpec("rewritten_resume", "str"),
        FieldSpec("word_count", "int"),
    ),
    resume_key="rewritten_resume",
    resume_key_aliases=("final_resume",),
)

FINAL_RESUME_RESPONSE = ResponseSchema(
    name="final_resume",
    fields=(
        FieldSpec("final_resume", "str"),
        FieldSpec("word_count", "int"),
        FieldSpec("contact", "object"),
    ),
    resume_key="final_resume",
    resume_key_aliases=("rewritten_resume",),
    contact_key="contact",
)
