from functools import lru_cache

from resume_optimizer.ai.config import load_ai_config
from resume_optimizer.ai.providers.openai_provider import OpenAIProvider
from resume_optimizer.ai.types import CompletionProvider


@lru_cache(maxsize=1)
def get_completion_provider() -> CompletionProvider:
    cfg = load_ai_config()
    return OpenAIProvider(
        api_key=cfg.api_key,
        base_url=cfg.base_url,
        timeout_s=cfg.timeout_s,
        json_mode=cfg.json_mode,
    )


def get_models() -> tuple[str, ...]:
    return load_ai_config().models
