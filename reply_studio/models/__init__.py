"""Typed models shared across the application."""

from .blocks import BlockField, BlockType, InfoBlock, PresetOption
from .document import ActionSlot, Document, ReplyLength, SessionState, Tone
from .mail import (
    BlockCatalogEntry,
    BlockCatalogResponse,
    EnglishTranslationResponse,
    ErrorResponse,
    GenerateRequest,
    GenerateResponse,
    MailRequest,
    OptionEntry,
    TranslateRequest,
    TranslateResponse,
    TranslateToEnglishRequest,
    TranslationResult,
)

__all__ = [
    "ActionSlot",
    "BlockCatalogEntry",
    "BlockCatalogResponse",
    "BlockField",
    "BlockType",
    "Document",
    "EnglishTranslationResponse",
    "ErrorResponse",
    "GenerateRequest",
    "GenerateResponse",
    "InfoBlock",
    "MailRequest",
    "OptionEntry",
    "PresetOption",
    "ReplyLength",
    "SessionState",
    "Tone",
    "TranslateRequest",
    "TranslateResponse",
    "TranslateToEnglishRequest",
    "TranslationResult",
]
