"""Error taxonomy shared by the endpoint and the model client."""

from __future__ import annotations

from typing import Optional


class ReplyStudioError(Exception):
    """Base exception; ``status_code`` is the HTTP status reported to callers."""

    status_code = 500


class ConfigurationError(ReplyStudioError):
    """The model credential is missing or was rejected."""


class UpstreamError(ReplyStudioError):
    """Calling the hosted model failed at the network or API level."""

    status_code = 502


class ParseError(ReplyStudioError):
    """The model response did not contain the expected structure.

    Attributes:
        raw_response: The text that failed to parse.
    """

    status_code = 502

    def __init__(self, message: str, raw_response: Optional[str] = None):
        super().__init__(message)
        self.raw_response = raw_response


class EmptyResultError(ReplyStudioError):
    """The model returned blank content for the primary reply."""
