from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from resume_optimizer.core.config import settings

_POLICY_CONFIG_CACHE: dict[str, Any] | None = None
_DEFAULT_POLICY_PATH = Path(__file__).resolve().parents[1] / "config" / "rewrite_policy.yaml"


def _policy_path() -> Path:
    if settings.rewrite_policy_path:
        return Path(settings.rewrite_policy_path)
    return _DEFAULT_POLICY_PATH


def get_policy_config() -> dict[str, Any]:
    """Load the rewrite/scoring policy from the YAML policy file and cache it."""
    global _POLICY_CONFIG_CACHE

    if _POLICY_CONFIG_CACHE is not None:
        return _POLICY_CONFIG_CACHE

    path = _policy_path()
    if not path.exists():
        raise RuntimeError(
            f"Policy config not found at '{path}'. "
            "Set REWRITE_POLICY_PATH or restore resume_optimizer/config/rewrite_policy.yaml"
        )

    try:
        raw = path.read_text(encoding="utf-8")
    except OSError as exc:
        raise RuntimeError(f"Failed to read policy config '{path}': {exc}") from exc

    try:
        parsed = yaml.safe_load(raw)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"Invalid YAML in policy config '{path}': {exc}") from exc

    if not isinstance(parsed, dict):
        raise RuntimeError(f"Invalid policy config '{path}': expected a top-level mapping.")

    _POLICY_CONFIG_CACHE = parsed
    return _POLICY_CONFIG_CACHE


def get_policy_value(path: str, default: Any = None) -> Any:
    """Get nested config value using dot path notation, e.g. 'rewrite.word_count.min_words'."""
    if not path:
        return default

    current: Any = get_policy_config()
    for key in path.split("."):
        if not isinstance(current, dict):
            return default
        if key not in current:
            return default
        current = current[key]
    return current


def clear_policy_cache() -> None:
    global _POLICY_CONFIG_CACHE
    _POLICY_CONFIG_CACHE = None
