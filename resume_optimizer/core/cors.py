from __future__ import annotations

import logging
from typing import Any

from resume_optimizer.core.config import Settings, settings as default_settings

logger = logging.getLogger(__name__)


def cors_options(settings: Settings | None = None) -> dict[str, Any]:
    """Keyword arguments for ``CORSMiddleware`` built from settings.

    Browsers reject credentialed responses for a ``*`` origin, so credentials
    are switched off when the origin list is a wildcard.
    """
    cfg = settings or default_settings
    origins = list(cfg.cors_allowed_origins)
    regex = (cfg.cors_allow_origin_regex or "").strip() or None
    allow_credentials = cfg.cors_allow_credentials
    if allow_credentials and "*" in origins:
        logger.warning("cors_credentials_disabled reason=wildcard_origin")
        allow_credentials = False

    return {
        "allow_origins": origins,
        "allow_origin_regex": regex,
        "allow_credentials": allow_credentials,
        "allow_methods": ["POST", "GET", "OPTIONS"],
        "allow_headers": ["*"],
    }
