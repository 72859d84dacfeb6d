from __future__ import annotations

import logging
import time
from typing import Any, Optional, Sequence

import openai
from openai import OpenAI

from resume_optimizer.ai.errors import ConfigError, EmptyResponseError, UpstreamError
from resume_optimizer.ai.types import ChatMessage

logger = logging.getLogger(__name__)

MISSING_KEY_MESSAGE = "GROQ_API_KEY is missing"


def _error_body(exc: openai.APIStatusError) -> str:
    try:
        return exc.response.text
    except Exception:  # noqa: BLE001 - body is diagnostic only
        return str(exc.body or "")


class OpenAIProvider:
    """Chat completions against any OpenAI-compatible endpoint (Groq by default).

    SDK-level retries are disabled. A failed call surfaces immediately so the
    caller can move on to the next model in its priority list.
    """

    def __init__(
        self,
        api_key: Optional[str],
        base_url: Optional[str] = None,
        timeout_s: float = 60.0,
        json_mode: bool = False,
        client: Any = None,
    ):
        self._json_mode = json_mode
        self._api_key = (api_key or "").strip()
        self._client = client
        if self._client is None and self._api_key:
            self._client = OpenAI(
                api_key=self._api_key,
                base_url=base_url or None,
                timeout=timeout_s,
                max_retries=0,
            )

    @property
    def configured(self) -> bool:
        return self._client is not None

    def complete(
        self,
        model: str,
        messages: Sequence[ChatMessage],
        *,
        temperature: float = 0.5,
        max_tokens: int = 2200,
        json_mode: bool | None = None,
    ) -> str:
        if self._client is None:
            raise ConfigError(MISSING_KEY_MESSAGE)

        create_kwargs: dict[str, Any] = {
            "model": model,
            "messages": [{"role": m.role, "content": m.content} for m in messages],
            "temperature": temperature,
            "max_tokens": max_tokens,
        }
        use_json = self._json_mode if json_mode is None else json_mode
        if use_json:
            create_kwargs["response_format"] = {"type": "json_object"}

        started = time.perf_counter()
        try:
            response = self._client.chat.completions.create(**create_kwargs)
        except openai.APIStatusError as exc:
            body = _error_body(exc)
            raise UpstreamError(
                f"Provider API error ({exc.status_code}): {body}",
                status=exc.status_code,
                body=body,
            ) from exc
        except openai.APIConnectionError as exc:
            raise UpstreamError(f"Provider connection failed: {exc}", body=str(exc)) from exc

        choices = getattr(response, "choices", None) or []
        content = choices[0].message.content if choices else None
        if not content or not str(content).strip():
            raise EmptyResponseError("No content from provider")

        logger.info(
            "llm_completion model=%s latency_ms=%s chars=%s",
            model,
            int((time.perf_counter() - started) * 1000),
            len(content),
        )
        return str(content)
