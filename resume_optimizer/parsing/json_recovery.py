"""
Tolerant parsing of model output that is supposed to be a JSON object.

Tiers, each tried only when the previous one fails:

1. strict ``json.loads`` of the trimmed text;
2. strip code fences, slice the outermost ``{ ... }`` and repair raw control
   characters inside ``: "..."`` string values (newlines become ``\\n`` escapes
   so multi-paragraph values keep their line breaks);
3. schema-driven regex salvage of individual fields, for schemas that allow it.

Known limitation: the value repair in tier 2 is a regex over ``: "..."`` spans
and cannot tell an unescaped quote inside a value from the closing quote.
Prefer provider JSON mode when it is available.
"""

from __future__ import annotations

import json
import logging
import re
from dataclasses import dataclass
from typing import Any

from resume_optimizer.parsing.schemas import ResponseSchema

logger = logging.getLogger(__name__)

_FENCE_RE = re.compile(r"```(?:json)?\s*", re.IGNORECASE)
_STRING_VALUE_RE = re.compile(r':\s*"((?:[^"\\]|\\.)*)"', re.DOTALL)
_BACKSLASH_RE = re.compile(r'\\(?:["\\/bfnrt]|u[0-9a-fA-F]{4})|\\')


class RecoveryError(RuntimeError):
    pass


@dataclass(frozen=True)
class RecoveryResult:
    record: dict[str, Any]
    tier: int


def _loads_object(text: str) -> dict[str, Any]:
    value = json.loads(text)
    if not isinstance(value, dict):
        raise RecoveryError("top-level JSON value is not an object")
    return value


def strip_code_fences(text: str) -> str:
    return _FENCE_RE.sub("", text).strip()


def slice_object(text: str) -> str:
    start = text.find("{")
    end = text.rfind("}")
    if start == -1 or end == -1 or end < start:
        raise RecoveryError("no object boundaries")
    return text[start : end + 1]


def _escape_backslash(match: re.Match[str]) -> str:
    token = match.group(0)
    if len(token) > 1:
        return token
    return "\\\\"


def _repair_value(match: re.Match[str]) -> str:
    content = match.group(1)
    content = content.replace("\r", "")
    content = content.replace("\t", " ")
    content = _BACKSLASH_RE.sub(_escape_backslash, content)
    content = content.replace("\n", "\\n")
    return f': "{content}"'


def repair_string_values(text: str) -> str:
    return _STRING_VALUE_RE.sub(_repair_value, text)


def _tier_direct(raw: str) -> dict[str, Any]:
    try:
        return _loads_object(raw.strip())
    except json.JSONDecodeError as exc:
        raise RecoveryError(f"direct parse failed: {exc}") from exc


def _tier_extract(raw: str) -> dict[str, Any]:
    candidate = slice_object(strip_code_fences(raw))
    try:
        return _loads_object(candidate)
    except (json.JSONDecodeError, RecoveryError):
        pass
    try:
        return _loads_object(repair_string_values(candidate))
    except json.JSONDecodeError as exc:
        raise RecoveryError(f"repaired parse failed: {exc}") from exc


def _salvage_fields(raw: str, schema: ResponseSchema) -> dict[str, Any]:
    result: dict[str, Any] = {}
    for spec in schema.fields:
        key = re.escape(spec.key)
        if spec.kind == "int":
            match = re.search(rf'"{key}"\s*:\s*(\d+)', raw, re.IGNORECASE)
            if match:
                result[spec.key] = int(match.group(1))
        elif spec.kind == "str":
            match = re.search(rf'"{key}"\s*:\s*"([^"]*)"', raw, re.IGNORECASE)
            if match:
                result[spec.key] = match.group(1)
        elif spec.kind == "str_list":
            match = re.search(rf'"{key}"\s*:\s*\[([\s\S]*?)\]', raw, re.IGNORECASE)
            if match:
                result[spec.key] = re.findall(r'"([^"]*)"', match.group(1))
    return result


def recover(raw: str | None, schema: ResponseSchema | None = None) -> RecoveryResult:
    text = raw or ""
    schema_name = schema.name if schema else "none"

    try:
        record = _tier_direct(text)
        tier = 1
    except RecoveryError as direct_exc:
        logger.debug("json_recovery tier=1 failed schema=%s: %s", schema_name, direct_exc)
        try:
            record = _tier_extract(text)
            tier = 2
        except RecoveryError as extract_exc:
            logger.debug("json_recovery tier=2 failed schema=%s: %s", schema_name, extract_exc)
            if schema is None or not schema.salvage:
                raise
            record = _salvage_fields(text, schema)
            if not record:
                raise RecoveryError("unparseable") from extract_exc
            tier = 3

    if schema is not None:
        record = schema.conform(record)
    logger.debug("json_recovery tier=%s schema=%s keys=%s", tier, schema_name, sorted(record))
    return RecoveryResult(record=record, tier=tier)


def parse_model_json(raw: str | None, schema: ResponseSchema | None = None) -> dict[str, Any]:
    return recover(raw, schema).record
