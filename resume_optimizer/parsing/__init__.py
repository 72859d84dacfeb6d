from .json_recovery import RecoveryError, RecoveryResult, parse_model_json, recover
from .schemas import (
    CONTACT_RESPONSE,
    FINAL_RESUME_RESPONSE,
    REWRITE_RESPONSE,
    SCORE_RESPONSE,
    FieldSpec,
    ResponseSchema,
)

__all__ = [
    "RecoveryError",
    "RecoveryResult",
    "parse_model_json",
    "recover",
    "FieldSpec",
    "ResponseSchema",
    "SCORE_RESPONSE",
    "CONTACT_RESPONSE",
    "REWRITE_RESPONSE",
    "FINAL_RESUME_RESPONSE",
]
