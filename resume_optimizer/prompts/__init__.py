from .ats import ATS_PROMPT
from .rewrite import CONTACT_PROMPT, EXPAND_PROMPT, REWRITE_PROMPT
from .templates import PromptTemplate, fill_placeholders, harden_system_prompt

__all__ = [
    "ATS_PROMPT",
    "CONTACT_PROMPT",
    "EXPAND_PROMPT",
    "REWRITE_PROMPT",
    "PromptTemplate",
    "fill_placeholders",
    "harden_system_prompt",
]
