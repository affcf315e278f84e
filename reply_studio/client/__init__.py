"""Client-side session layer for the mail endpoint."""

from .api_client import MailApiClient, MailApiError
from .session import ReplySession

__all__ = ["MailApiClient", "MailApiError", "ReplySession"]
