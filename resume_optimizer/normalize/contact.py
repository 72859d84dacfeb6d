from __future__ import annotations

import re
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from resume_optimizer.normalize.utils import (
    EMAIL_RE,
    is_bullet_like,
    is_known_section_name,
    non_empty_lines,
)

PHONE_RE = re.compile(r"\+?\d[\d \-()]{7,}")
LINKEDIN_URL_RE = re.compile(
    r"(?:https?://(?:[\w-]+\.)?|www\.)linkedin\.com/[^\s,;|()<>\"']+",
    re.IGNORECASE,
)
LINKEDIN_BARE_RE = re.compile(r"\blinkedin\.com/[^\s,;|()<>\"']+", re.IGNORECASE)
_YEAR_RANGE_RE = re.compile(r"(?:19|20)\d{2}\s*-\s*(?:19|20)\d{2}")

_NAME_MAX_CHARS = 60
_NAME_BLOCKLIST = ("resume", "curriculum vitae", "cv")


class ContactRecord(BaseModel):
    """Contact block rendered above the resume. Empty string means unknown."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    full_name: str = Field(default="", alias="fullName")
    email: str = ""
    phone: str = ""
    location: str = ""
    linkedin: str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any] | None) -> "ContactRecord":
        if not data:
            return cls()

        def _text(*keys: str) -> str:
            for key in keys:
                value = data.get(key)
                if isinstance(value, str) and value.strip():
                    return value.strip()
            return ""

        return cls(
            full_name=_text("fullName", "full_name", "name"),
            email=_text("email"),
            phone=_text("phone"),
            location=_text("location"),
            linkedin=_text("linkedin"),
        )

    def merge_missing(self, other: "ContactRecord") -> "ContactRecord":
        updates = {
            name: getattr(other, name)
            for name in type(self).model_fields
            if not getattr(self, name) and getattr(other, name)
        }
        return self.model_copy(update=updates) if updates else self

    def to_response(self) -> dict[str, str]:
        return self.model_dump(by_alias=True)


def find_email(text: str) -> str:
    match = EMAIL_RE.search(text)
    return match.group(0) if match else ""


def find_phone(text: str) -> str:
    for match in PHONE_RE.finditer(text):
        candidate = match.group(0).strip().rstrip("-( ")
        if _YEAR_RANGE_RE.fullmatch(candidate):
            continue
        return candidate
    return ""


def find_linkedin(text: str) -> str:
    match = LINKEDIN_URL_RE.search(text) or LINKEDIN_BARE_RE.search(text)
    if not match:
        return ""
    return match.group(0).rstrip(".")


def is_name_candidate(line: str) -> bool:
    if len(line) > _NAME_MAX_CHARS:
        return False
    if "@" in line:
        return False
    if any(char.isdigit() for char in line):
        return False
    lowered = line.lower()
    if any(marker in lowered for marker in _NAME_BLOCKLIST):
        return False
    if is_bullet_like(line) or is_known_section_name(line):
        return False
    return True


def find_name(text: str) -> str:
    for line in non_empty_lines(text):
        if is_name_candidate(line):
            return line
    return ""


def enrich_contact(text: str | None, contact: ContactRecord | None = None) -> ContactRecord:
    """Fill blank contact fields from ``text``; known fields are never overwritten."""
    record = contact or ContactRecord()
    source = text or ""
    if not source.strip():
        return record

    updates: dict[str, str] = {}
    if not record.email:
        updates["email"] = find_email(source)
    if not record.phone:
        updates["phone"] = find_phone(source)
    if not record.linkedin:
        updates["linkedin"] = find_linkedin(source)
    if not record.full_name:
        updates["full_name"] = find_name(source)

    updates = {key: value for key, value in updates.items() if value}
    return record.model_copy(update=updates) if updates else record
