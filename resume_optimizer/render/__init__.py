from .layout import LayoutLine, Section, build_layout, classify_line, paginate_sections
from .pdf import pdf_filename, render_resume_pdf

__all__ = [
    "LayoutLine",
    "Section",
    "build_layout",
    "classify_line",
    "paginate_sections",
    "pdf_filename",
    "render_resume_pdf",
]
