"""Per-session document and UI state models."""

from __future__ import annotations

from enum import Enum
from typing import FrozenSet, List, Optional

from pydantic import Field

from .base import FrozenCamelModel
from .blocks import InfoBlock


class Tone(str, Enum):
    POLITE = "polite"
    LIGHT = "light"
    CASUAL = "casual"


class ReplyLength(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


class ActionSlot(str, Enum):
    """Network actions that may each have one call in flight."""

    TRANSLATE = "translate"
    GENERATE = "generate"
    REPLY_TRANSLATION = "reply-translation"


class Document(FrozenCamelModel):
    """Everything the operator edits during one page session."""

    customer_text: str = ""
    translated_customer_text: Optional[str] = None
    detected_language: Optional[str] = None
    info_blocks: List[InfoBlock] = Field(default_factory=list)
    notes: str = ""
    tone: Tone = Tone.POLITE
    length: ReplyLength = ReplyLength.MEDIUM
    reply: str = ""
    english_translation: str = ""


class SessionState(FrozenCamelModel):
    """Authoritative session state: the document plus transient UI flags."""

    document: Document = Field(default_factory=Document)
    editing_block_id: Optional[str] = None
    in_flight: FrozenSet[ActionSlot] = frozenset()
    error_message: Optional[str] = None

    def is_busy(self, slot: ActionSlot) -> bool:
        return slot in self.in_flight
