"""Request/response models for the mail endpoint."""

from __future__ import annotations

from typing import Annotated, List, Literal, Optional, Union

from pydantic import AfterValidator, Field

from .base import CamelModel
from .blocks import InfoBlock, PresetOption
from .document import ReplyLength, Tone


def _require_text(value: str) -> str:
    if not value.strip():
        raise ValueError("must contain non-whitespace text")
    return value


RequiredText = Annotated[str, AfterValidator(_require_text)]


class TranslateRequest(CamelModel):
    """Translate a customer mail into Japanese."""

    action: Literal["translate"]
    customer_text: RequiredText


class TranslateToEnglishRequest(CamelModel):
    """Back-translate a finished Japanese reply."""

    action: Literal["translate-to-english"]
    japanese_text: RequiredText


class GenerateRequest(CamelModel):
    """Draft a Japanese reply from the customer mail and attached blocks."""

    action: Literal["generate"]
    customer_text: RequiredText
    translated_customer_text: Optional[str] = None
    info_blocks: List[InfoBlock] = Field(default_factory=list)
    notes: str = ""
    tone: Tone
    length: Optional[ReplyLength] = None


MailRequest = Union[TranslateRequest, TranslateToEnglishRequest, GenerateRequest]


class TranslationResult(CamelModel):
    """Structured translation payload returned by the model."""

    language: str
    translated_text: str


class TranslateResponse(CamelModel):
    translated_text: str
    detected_language: str


class EnglishTranslationResponse(CamelModel):
    translated_text: str


class GenerateResponse(CamelModel):
    reply: str
    english_translation: Optional[str] = None


class ErrorResponse(CamelModel):
    error: str
    details: Optional[List[dict]] = None


class BlockCatalogEntry(CamelModel):
    """One registry entry as exposed to the browser page."""

    type: str
    label: str
    icon: str
    default_fields: List[str]
    presets: List[PresetOption] = Field(default_factory=list)


class OptionEntry(CamelModel):
    value: str
    label: str


class BlockCatalogResponse(CamelModel):
    blocks: List[BlockCatalogEntry]
    tones: List[OptionEntry]
    lengths: List[OptionEntry]
