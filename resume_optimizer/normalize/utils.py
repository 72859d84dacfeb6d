from __future__ import annotations

import re

_BULLET_CHARS = "•◦▪●■◆◇-–—*"
_BULLET_PATTERN = re.compile(rf"^\s*[{re.escape(_BULLET_CHARS)}]\s*")
EMAIL_RE = re.compile(r"[A-Za-z0-9._%+-]+@[A-Za-z0-9.-]+\.[A-Za-z]{2,}")

SECTION_HEADINGS = (
    "PROFESSIONAL SUMMARY",
    "SUMMARY",
    "PROFILE",
    "OBJECTIVE",
    "CORE COMPETENCIES",
    "PROFESSIONAL EXPERIENCE",
    "WORK EXPERIENCE",
    "WORK HISTORY",
    "EXPERIENCE",
    "EDUCATION",
    "TECHNICAL SKILLS",
    "KEY SKILLS",
    "SKILLS",
    "LANGUAGES",
    "LANGUAGE",
    "CERTIFICATIONS",
    "PROJECTS",
    "ACHIEVEMENTS",
    "AWARDS",
    "REFERENCES",
    "CONTACT",
)
_SECTION_RE = re.compile(
    r"^(?:" + "|".join(re.escape(name) for name in SECTION_HEADINGS) + r")\b",
    re.IGNORECASE,
)
_ALL_CAPS_RE = re.compile(r"^[A-Z\s]+:?$")


def normalize_line(line: str) -> str:
    return re.sub(r"\s+", " ", line).strip()


def non_empty_lines(text: str) -> list[str]:
    return [stripped for stripped in (line.strip() for line in text.splitlines()) if stripped]


def is_bullet_like(line: str) -> bool:
    stripped = line.strip()
    return bool(stripped) and stripped[0] in "•-*"


def strip_bullet_prefix(line: str) -> str:
    return _BULLET_PATTERN.sub("", line).strip()


def is_section_heading(line: str) -> bool:
    stripped = normalize_line(line)
    if not stripped:
        return False
    if _ALL_CAPS_RE.match(stripped):
        return True
    return bool(_SECTION_RE.match(stripped))


def section_title(line: str) -> str:
    return normalize_line(line).rstrip(":").upper()


def is_known_section_name(line: str) -> bool:
    return section_title(line) in SECTION_HEADINGS
