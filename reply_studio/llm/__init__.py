"""LLM integration helpers."""

from .base import ChatClient, ChatMessage
from .mail_assistant import MailAssistant
from .openai_client import OpenAIChatClient

__all__ = ["ChatClient", "ChatMessage", "MailAssistant", "OpenAIChatClient"]
