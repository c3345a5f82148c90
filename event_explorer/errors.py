"""Exception hierarchy shared by the services and the HTTP layer."""

from __future__ import annotations


class ExplorerError(Exception):
    """Base class for all event_explorer errors."""

    status_code: int = 500


class ValidationError(ExplorerError):
    """The request is missing or carries malformed input."""

    status_code = 400


class ProviderError(ExplorerError):
    """An external provider (OpenAI or Chroma) call failed."""

    status_code = 500

    def __init__(self, provider: str, message: str) -> None:
        super().__init__(f"{provider}: {message}")
        self.provider = provider


class APIClientError(ExplorerError):
    """A call from the client side to the explorer API failed."""


__all__ = ["ExplorerError", "ValidationError", "ProviderError", "APIClientError"]
