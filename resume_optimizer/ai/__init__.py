from .errors import ConfigError, EmptyResponseError, UpstreamError
from .fallback import complete_with_fallback
from .types import ChatMessage, CompletionProvider

__all__ = [
    "ChatMessage",
    "CompletionProvider",
    "ConfigError",
    "EmptyResponseError",
    "UpstreamError",
    "complete_with_fallback",
]
