from __future__ import annotations


class ConfigError(RuntimeError):
    """The provider credential is missing. Permanent; never retried."""


class UpstreamError(RuntimeError):
    def __init__(self, message: str, *, status: int | None = None, body: str = ""):
        super().__init__(message)
        self.status = status
        self.body = body


class EmptyResponseError(UpstreamError):
    def __init__(self, message: str = "No content from provider", *, status: int | None = None):
        super().__init__(message, status=status, body="")
