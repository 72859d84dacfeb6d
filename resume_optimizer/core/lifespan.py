from contextlib import asynccontextmanager
import logging

from resume_optimizer.core.config import settings
from resume_optimizer.core.policy import get_policy_config

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app):
    if not settings.llm_api_key:
        logger.warning("llm_credential_missing: set GROQ_API_KEY or LLM_API_KEY; model calls will fail")

    policy = get_policy_config()
    logger.info(
        "startup models=%s policy_sections=%s",
        ",".join(settings.llm_models),
        ",".join(sorted(policy)),
    )
    yield
