import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from fastapi.testclient import TestClient  # noqa: E402

from resume_optimizer.main import app  # noqa: E402
from resume_optimizer.normalize.contact import ContactRecord  # noqa: E402
from resume_optimizer.render.pdf import pdf_filename, render_resume_pdf  # noqa: E402

RESUME_TEXT = (
    "PROFESSIONAL SUMMARY\n"
    "Backend engineer with eight years of API work & <platform> ownership.\n\n"
    "PROFESSIONAL EXPERIENCE\n"
    "Senior Engineer — Acme — 2019 to Present\n"
    "• Cut p95 latency by 40%\n\n"
    "TECHNICAL SKILLS\n"
    "• Python, FastAPI, PostgreSQL\n"
)


class PdfRenderTests(unittest.TestCase):
    def test_renders_pdf_bytes(self):
        contact = ContactRecord(full_name="John Doe", email="john@doe.com", linkedin="linkedin.com/in/johndoe")
        content = render_resume_pdf(RESUME_TEXT, contact)
        self.assertTrue(content.startswith(b"%PDF"))

    def test_two_page_layout_adds_a_page(self):
        single = render_resume_pdf(RESUME_TEXT, ContactRecord(full_name="John Doe"))
        split = render_resume_pdf(RESUME_TEXT, ContactRecord(full_name="John Doe"), two_page=True)
        self.assertIn(b"/Count 1", single)
        self.assertIn(b"/Count 2", split)

    def test_empty_text_is_rejected(self):
        with self.assertRaises(ValueError):
            render_resume_pdf("  \n ")

    def test_filename_from_contact_name(self):
        self.assertEqual(pdf_filename(ContactRecord(full_name="John  Doe-Smith")), "John_Doe-Smith_Resume.pdf")
        self.assertEqual(pdf_filename(ContactRecord()), "optimized-resume.pdf")
        self.assertEqual(pdf_filename(None), "optimized-resume.pdf")

    def test_filename_keeps_accented_letters(self):
        self.assertEqual(pdf_filename(ContactRecord(full_name="José García")), "José_García_Resume.pdf")
        self.assertEqual(pdf_filename(ContactRecord(full_name='Ann "AJ" Lee')), "Ann_AJ_Lee_Resume.pdf")
        self.assertEqual(pdf_filename(ContactRecord(full_name=' "; ')), "optimized-resume.pdf")


class PdfApiTests(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.client = TestClient(app)

    def test_pdf_endpoint_returns_attachment(self):
        response = self.client.post(
            "/v1/resume/pdf",
            json={"resumeText": RESUME_TEXT, "contactInfo": {"fullName": "John Doe", "email": "john@doe.com"}},
        )
        self.assertEqual(response.status_code, 200)
        self.assertEqual(response.headers["content-type"], "application/pdf")
        self.assertIn('filename="John_Doe_Resume.pdf"', response.headers["content-disposition"])
        self.assertTrue(response.content.startswith(b"%PDF"))

    def test_non_ascii_name_keeps_ascii_fallback(self):
        response = self.client.post(
            "/v1/resume/pdf",
            json={"resumeText": RESUME_TEXT, "contactInfo": {"fullName": "محمد أحمد"}, "layout": "two_page"},
        )
        self.assertEqual(response.status_code, 200)
        disposition = response.headers["content-disposition"]
        self.assertIn('filename="optimized-resume.pdf"', disposition)
        self.assertIn("filename*=UTF-8''", disposition)

    def test_accented_name_is_sent_as_utf8_filename(self):
        response = self.client.post(
            "/v1/resume/pdf",
            json={"resumeText": RESUME_TEXT, "contactInfo": {"fullName": "José García"}},
        )
        self.assertEqual(response.status_code, 200)
        disposition = response.headers["content-disposition"]
        self.assertIn('filename="optimized-resume.pdf"', disposition)
        self.assertIn("filename*=UTF-8''Jos%C3%A9_Garc%C3%ADa_Resume.pdf", disposition)

    def test_empty_resume_text_is_rejected(self):
        response = self.client.post("/v1/resume/pdf", json={"resumeText": "   "})
        self.assertEqual(response.status_code, 400)
        self.assertEqual(response.json(), {"error": "No resume text to generate PDF"})


if __name__ == "__main__":
    unittest.main()
