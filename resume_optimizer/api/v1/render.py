from urllib.parse import quote

from fastapi import APIRouter, status
from fastapi.responses import JSONResponse, Response

from resume_optimizer.normalize.contact import ContactRecord
from resume_optimizer.render.pdf import DEFAULT_FILENAME, pdf_filename, render_resume_pdf
from resume_optimizer.schemas.ats import ResumePdfRequest

router = APIRouter()


def _content_disposition(filename: str) -> str:
    ascii_name = filename if filename.isascii() else DEFAULT_FILENAME
    return f"attachment; filename=\"{ascii_name}\"; filename*=UTF-8''{quote(filename)}"


@router.post("/resume/pdf")
def resume_pdf(payload: ResumePdfRequest):
    if not payload.resume_text.strip():
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "No resume text to generate PDF"},
        )

    contact = payload.contact_info or ContactRecord()
    content = render_resume_pdf(
        payload.resume_text,
        contact,
        two_page=payload.layout == "two_page",
    )
    return Response(
        content=content,
        media_type="application/pdf",
        headers={"Content-Disposition": _content_disposition(pdf_filename(contact))},
    )
