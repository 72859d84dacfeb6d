from __future__ import annotations

import logging
from typing import Sequence

from resume_optimizer.ai.errors import UpstreamError
from resume_optimizer.ai.types import ChatMessage, CompletionProvider

logger = logging.getLogger(__name__)


def complete_with_fallback(
    provider: CompletionProvider,
    models: Sequence[str],
    messages: Sequence[ChatMessage],
    *,
    temperature: float = 0.5,
    max_tokens: int = 2200,
    json_mode: bool | None = None,
) -> str:
    """Try ``models`` in priority order and return the first successful completion.

    ``UpstreamError`` moves on to the next model. ``ConfigError`` propagates
    at once since no model can succeed without a credential.
    """
    if not models:
        raise ValueError("at least one model is required")

    last_error: UpstreamError | None = None
    for index, model in enumerate(models, start=1):
        try:
            return provider.complete(
                model,
                messages,
                temperature=temperature,
                max_tokens=max_tokens,
                json_mode=json_mode,
            )
        except UpstreamError as exc:
            last_error = exc
            logger.warning(
                "llm_model_failed model=%s position=%s/%s status=%s: %s",
                model,
                index,
                len(models),
                exc.status,
                exc,
            )

    assert last_error is not None
    raise last_error
