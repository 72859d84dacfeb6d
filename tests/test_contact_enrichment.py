import sys
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_optimizer.normalize.contact import (  # noqa: E402
    ContactRecord,
    enrich_contact,
    find_linkedin,
    find_name,
    find_phone,
)


class ContactEnrichmentTests(unittest.TestCase):
    def test_prefilled_fields_are_never_overwritten(self):
        text = "Jane Roe\njane@other.com\n+44 20 7946 0958\nlinkedin.com/in/jane-roe"
        seeded = ContactRecord(email="a@b.com", full_name="J. Roe")
        enriched = enrich_contact(text, seeded)
        self.assertEqual(enriched.email, "a@b.com")
        self.assertEqual(enriched.full_name, "J. Roe")
        self.assertEqual(enriched.phone, "+44 20 7946 0958")
        self.assertEqual(enriched.linkedin, "linkedin.com/in/jane-roe")

    def test_name_is_first_plausible_line(self):
        text = "John Smith\nSenior Engineer\njohn@x.com"
        self.assertEqual(enrich_contact(text).full_name, "John Smith")

    def test_resume_heading_is_not_a_name(self):
        self.assertEqual(enrich_contact("RESUME\njohn@x.com").full_name, "")
        self.assertEqual(find_name("Curriculum Vitae\n+1 555 123 4567"), "")

    def test_name_rejects_digits_bullets_and_section_titles(self):
        self.assertEqual(find_name("2024 Portfolio\n• Built things\nPROFESSIONAL SUMMARY\nAna Lima"), "Ana Lima")
        self.assertEqual(find_name("x" * 61), "")

    def test_email_is_extracted(self):
        record = enrich_contact("Contact me at dev.ops+jobs@example.co.uk today")
        self.assertEqual(record.email, "dev.ops+jobs@example.co.uk")

    def test_phone_skips_year_ranges(self):
        self.assertEqual(find_phone("Acme Corp 2018 - 2021\nCall +1 555 010 2030"), "+1 555 010 2030")
        self.assertEqual(find_phone("Worked 2019-2023 only"), "")

    def test_linkedin_prefers_full_urls(self):
        text = "see linkedin.com/in/short and https://www.linkedin.com/in/full-profile."
        self.assertEqual(find_linkedin(text), "https://www.linkedin.com/in/full-profile")
        self.assertEqual(find_linkedin("LinkedIn: linkedin.com/in/bare"), "linkedin.com/in/bare")

    def test_blank_text_returns_record_unchanged(self):
        seeded = ContactRecord(location="Riyadh")
        self.assertIs(enrich_contact("   ", seeded), seeded)

    def test_merge_missing_keeps_known_values(self):
        base = ContactRecord(full_name="John Doe", email="")
        other = ContactRecord(full_name="Someone Else", email="john@doe.com")
        merged = base.merge_missing(other)
        self.assertEqual(merged.full_name, "John Doe")
        self.assertEqual(merged.email, "john@doe.com")

    def test_from_mapping_accepts_model_keys(self):
        record = ContactRecord.from_mapping({"fullName": " Sara Ali ", "phone": None, "email": 5})
        self.assertEqual(record.full_name, "Sara Ali")
        self.assertEqual(record.phone, "")
        self.assertEqual(record.email, "")

    def test_response_uses_camel_case_name(self):
        body = ContactRecord(full_name="John Doe").to_response()
        self.assertEqual(
            body,
            {"fullName": "John Doe", "email": "", "phone": "", "location": "", "linkedin": ""},
        )


if __name__ == "__main__":
    unittest.main()
