from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Literal

from resume_optimizer.normalize.utils import (
    is_bullet_like,
    is_section_heading,
    section_title,
    strip_bullet_prefix,
)

LineKind = Literal["blank", "header", "bullet", "job_title", "text"]

HEADER_SECTION = "HEADER"

PAGE_ONE_SECTIONS = (
    "PROFESSIONAL SUMMARY",
    "SUMMARY",
    "EXPERIENCE",
    "PROFESSIONAL EXPERIENCE",
    "WORK HISTORY",
    "EDUCATION",
    "CERTIFICATIONS",
)

_JOB_TITLE_RE = re.compile(r"\d{4}|present|current|–|—|-", re.IGNORECASE)


@dataclass(frozen=True)
class LayoutLine:
    kind: LineKind
    text: str


@dataclass
class Section:
    title: str
    lines: list[LayoutLine] = field(default_factory=list)

    @property
    def has_content(self) -> bool:
        return any(line.kind != "blank" for line in self.lines)


def classify_line(line: str) -> LineKind:
    stripped = line.strip()
    if not stripped:
        return "blank"
    if is_section_heading(stripped):
        return "header"
    if is_bullet_like(stripped):
        return "bullet"
    if _JOB_TITLE_RE.search(stripped):
        return "job_title"
    return "text"


def layout_line(line: str) -> LayoutLine:
    kind = classify_line(line)
    stripped = line.strip()
    if kind == "header":
        return LayoutLine(kind, section_title(stripped))
    if kind == "bullet":
        return LayoutLine(kind, strip_bullet_prefix(stripped))
    return LayoutLine(kind, stripped)


def build_layout(text: str) -> list[Section]:
    """Group resume lines under their section headers, in document order."""
    sections: list[Section] = [Section(HEADER_SECTION)]
    for raw_line in (text or "").splitlines():
        line = layout_line(raw_line)
        if line.kind == "header":
            sections.append(Section(line.text))
            continue
        sections[-1].lines.append(line)
    return [section for section in sections if section.title != HEADER_SECTION or section.has_content]


def paginate_sections(sections: list[Section]) -> tuple[list[Section], list[Section]]:
    """Split into the first page (summary, experience, education) and everything else."""
    page_one: list[Section] = []
    page_two: list[Section] = []
    for section in sections:
        if section.title == HEADER_SECTION:
            page_one.append(section)
        elif any(name in section.title for name in PAGE_ONE_SECTIONS):
            page_one.append(section)
        else:
            page_two.append(section)
    return page_one, page_two
