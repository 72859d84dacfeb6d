from __future__ import annotations

import logging
import re
from io import BytesIO
from xml.sax.saxutils import escape

from reportlab.lib import colors
from reportlab.lib.enums import TA_CENTER
from reportlab.lib.pagesizes import A4
from reportlab.lib.styles import ParagraphStyle, getSampleStyleSheet
from reportlab.lib.units import mm
from reportlab.platypus import HRFlowable, PageBreak, Paragraph, SimpleDocTemplate, Spacer

from resume_optimizer.normalize.contact import ContactRecord
from resume_optimizer.render.layout import HEADER_SECTION, Section, build_layout, paginate_sections

logger = logging.getLogger(__name__)

DEFAULT_FILENAME = "optimized-resume.pdf"
DEFAULT_DISPLAY_NAME = "Your Name"
_UNSAFE_FILENAME_RE = re.compile(r"[\"\\\/;\x00-\x1f]")


def _styles() -> dict[str, ParagraphStyle]:
    base = getSampleStyleSheet()
    return {
        "name": ParagraphStyle(
            "ResumeName",
            parent=base["Title"],
            fontName="Helvetica-Bold",
            fontSize=22,
            leading=26,
            alignment=TA_CENTER,
            spaceAfter=4,
        ),
        "contact": ParagraphStyle(
            "ResumeContact",
            parent=base["Normal"],
            fontName="Helvetica",
            fontSize=10,
            alignment=TA_CENTER,
            textColor=colors.Color(80 / 255, 80 / 255, 80 / 255),
            spaceAfter=2,
        ),
        "link": ParagraphStyle(
            "ResumeLink",
            parent=base["Normal"],
            fontName="Helvetica",
            fontSize=10,
            alignment=TA_CENTER,
            textColor=colors.Color(0, 102 / 255, 204 / 255),
            spaceAfter=2,
        ),
        "section": ParagraphStyle(
            "ResumeSection",
            parent=base["Heading2"],
            fontName="Helvetica-Bold",
            fontSize=12,
            leading=15,
            spaceBefore=10,
            spaceAfter=2,
            keepWithNext=1,
        ),
        "job_title": ParagraphStyle(
            "ResumeJobTitle",
            parent=base["Normal"],
            fontName="Helvetica-Bold",
            fontSize=11,
            leading=14,
            textColor=colors.Color(50 / 255, 50 / 255, 50 / 255),
            spaceBefore=3,
            spaceAfter=1,
            keepWithNext=1,
        ),
        "bullet": ParagraphStyle(
            "ResumeBullet",
            parent=base["Normal"],
            fontName="Helvetica",
            fontSize=10,
            leading=13,
            leftIndent=10 * mm,
            bulletIndent=5 * mm,
        ),
        "body": ParagraphStyle(
            "ResumeBody",
            parent=base["Normal"],
            fontName="Helvetica",
            fontSize=10,
            leading=13,
        ),
    }


def pdf_filename(contact: ContactRecord | None) -> str:
    name = (contact.full_name if contact else "").strip()
    tokens = _UNSAFE_FILENAME_RE.sub("", name).split()
    if not tokens:
        return DEFAULT_FILENAME
    return f"{'_'.join(tokens)}_Resume.pdf"


def _header_flowables(contact: ContactRecord, styles: dict[str, ParagraphStyle]) -> list:
    display_name = contact.full_name.strip() or DEFAULT_DISPLAY_NAME
    story: list = [Paragraph(escape(display_name), styles["name"])]

    parts = [value for value in (contact.email, contact.phone, contact.location) if value]
    if parts:
        story.append(Paragraph(escape("  |  ".join(parts)), styles["contact"]))
    if contact.linkedin:
        story.append(Paragraph(escape(contact.linkedin), styles["link"]))

    story.append(Spacer(1, 2 * mm))
    story.append(HRFlowable(width="100%", thickness=0.5, color=colors.black, spaceAfter=4 * mm))
    return story


def _section_flowables(section: Section, styles: dict[str, ParagraphStyle]) -> list:
    story: list = []
    if section.title != HEADER_SECTION:
        story.append(Paragraph(escape(section.title), styles["section"]))
        story.append(
            HRFlowable(width="100%", thickness=0.3, color=colors.Color(0.4, 0.4, 0.4), spaceAfter=2 * mm)
        )
    for line in section.lines:
        if line.kind == "blank":
            story.append(Spacer(1, 1.5 * mm))
        elif line.kind == "bullet":
            story.append(Paragraph(escape(line.text), styles["bullet"], bulletText="•"))
        elif line.kind == "job_title":
            story.append(Paragraph(escape(line.text), styles["job_title"]))
        else:
            story.append(Paragraph(escape(line.text), styles["body"]))
    return story


def render_resume_pdf(
    resume_text: str,
    contact: ContactRecord | None = None,
    *,
    two_page: bool = False,
) -> bytes:
    """Render plain resume text into an A4 PDF and return the document bytes.

    With ``two_page`` the summary, experience and education sections go on the
    first page and the remaining sections start on a new page.
    """
    if not resume_text or not resume_text.strip():
        raise ValueError("No resume text to generate PDF")

    contact = contact or ContactRecord()
    styles = _styles()
    buffer = BytesIO()
    doc = SimpleDocTemplate(
        buffer,
        pagesize=A4,
        leftMargin=20 * mm,
        rightMargin=20 * mm,
        topMargin=20 * mm,
        bottomMargin=15 * mm,
        title=pdf_filename(contact),
    )

    sections = build_layout(resume_text)
    story = _header_flowables(contact, styles)
    if two_page:
        page_one, page_two = paginate_sections(sections)
        for section in page_one:
            story.extend(_section_flowables(section, styles))
        if page_two:
            story.append(PageBreak())
            for section in page_two:
                story.extend(_section_flowables(section, styles))
    else:
        for section in sections:
            story.extend(_section_flowables(section, styles))

    doc.build(story)
    logger.info(
        "resume_pdf_rendered sections=%s two_page=%s bytes=%s",
        len(sections),
        two_page,
        buffer.tell(),
    )
    return buffer.getvalue()
