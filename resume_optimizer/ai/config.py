from dataclasses import dataclass

from resume_optimizer.core.config import Settings, settings as default_settings


@dataclass(frozen=True)
class AIConfig:
    api_key: str | None
    base_url: str
    models: tuple[str, ...]
    timeout_s: float
    json_mode: bool


def load_ai_config(settings: Settings | None = None) -> AIConfig:
    cfg = settings or default_settings
    return AIConfig(
        api_key=cfg.llm_api_key,
        base_url=cfg.llm_base_url,
        models=cfg.llm_models,
        timeout_s=cfg.llm_timeout_s,
        json_mode=cfg.llm_json_mode,
    )
