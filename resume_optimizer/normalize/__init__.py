from .contact import ContactRecord, enrich_contact
from .text import count_words, normalize_tokens

__all__ = ["ContactRecord", "enrich_contact", "count_words", "normalize_tokens"]
