"""Information block models."""

from __future__ import annotations

from enum import Enum
from typing import Dict, List, Optional

from pydantic import Field

from .base import FrozenCamelModel


class BlockType(str, Enum):
    """Fixed catalog of block kinds."""

    BREAKFAST = "breakfast"
    DINNER = "dinner"
    TRANSFER = "transfer"
    CHECKIN = "checkin"
    MASSAGE = "massage"
    SPA = "spa"
    CAKE = "cake"
    SERVICE = "service"
    DECORATION = "decoration"
    MEAL_ADD = "meal_add"
    LUNCH = "lunch"
    FACILITY = "facility"
    OTHER = "other"


class BlockField(FrozenCamelModel):
    """One label/value pair owned by an information block."""

    id: str
    label: str
    value: str
    include_in_reply: bool = True


class InfoBlock(FrozenCamelModel):
    """Typed group of fields the reply must carry verbatim."""

    id: str
    type: BlockType
    title: Optional[str] = None
    fields: List[BlockField]

    def find_field(self, field_id: str) -> Optional[BlockField]:
        return next((field for field in self.fields if field.id == field_id), None)


class PresetOption(FrozenCamelModel):
    """Named bundle of field values keyed by field label."""

    label: str
    values: Dict[str, str] = Field(default_factory=dict)
