"""Reducer over the per-session document.

One ``SessionState`` is authoritative for a page session; the functions here
form the closed set of updates applied to it. Each returns a new state.
"""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional

from reply_studio.config import settings
from reply_studio.models.blocks import BlockType, InfoBlock
from reply_studio.models.document import ActionSlot, ReplyLength, SessionState, Tone
from reply_studio.models.mail import GenerateRequest, GenerateResponse, TranslateResponse

from .block_editor import create_block

logger = logging.getLogger(__name__)


class BlockAddPolicy(str, Enum):
    """What selecting an already-present block type does."""

    TOGGLE = "toggle"
    UNIQUE = "unique"
    APPEND = "append"


class ActionInFlightError(RuntimeError):
    """A call for this action slot is already outstanding."""

    def __init__(self, slot: ActionSlot):
        super().__init__(f"Action '{slot.value}' is already in progress.")
        self.slot = slot


def _with_document(state: SessionState, **changes: Any) -> SessionState:
    document = state.document.model_copy(update=changes)
    return state.model_copy(update={"document": document})


def set_customer_text(state: SessionState, text: str) -> SessionState:
    return _with_document(state, customer_text=text)


def set_notes(state: SessionState, notes: str) -> SessionState:
    return _with_document(state, notes=notes)


def set_tone(state: SessionState, tone: Tone | str) -> SessionState:
    return _with_document(state, tone=Tone(tone))


def set_length(state: SessionState, length: ReplyLength | str) -> SessionState:
    return _with_document(state, length=ReplyLength(length))


def set_reply(state: SessionState, reply: str) -> SessionState:
    return _with_document(state, reply=reply)


def select_block(state: SessionState, block_id: Optional[str]) -> SessionState:
    return state.model_copy(update={"editing_block_id": block_id})


def add_block(
    state: SessionState,
    block_type: BlockType | str,
    policy: Optional[BlockAddPolicy | str] = None,
) -> SessionState:
    """Add a block seeded from its template and open it for editing.

    With ``toggle`` an existing block of the same type is removed instead,
    with ``unique`` the call is a no-op, and ``append`` always adds.
    """
    block_type = BlockType(block_type)
    policy = BlockAddPolicy(policy or settings.block_add_policy)
    existing = next(
        (block for block in state.document.info_blocks if block.type == block_type), None
    )
    if existing is not None:
        if policy is BlockAddPolicy.TOGGLE:
            return remove_block(state, existing.id)
        if policy is BlockAddPolicy.UNIQUE:
            return state

    block = create_block(block_type)
    state = _with_document(state, info_blocks=[*state.document.info_blocks, block])
    return select_block(state, block.id)


def remove_block(state: SessionState, block_id: str) -> SessionState:
    blocks = [block for block in state.document.info_blocks if block.id != block_id]
    state = _with_document(state, info_blocks=blocks)
    if state.editing_block_id == block_id:
        state = select_block(state, None)
    return state


def replace_block(state: SessionState, updated: InfoBlock) -> SessionState:
    blocks = [
        updated if block.id == updated.id else block for block in state.document.info_blocks
    ]
    return _with_document(state, info_blocks=blocks)


def edit_block(
    state: SessionState,
    block_id: str,
    operation: Callable[..., InfoBlock],
    *args: Any,
) -> SessionState:
    """Apply a block editor operation to the block with ``block_id``."""
    block = next((b for b in state.document.info_blocks if b.id == block_id), None)
    if block is None:
        logger.debug("Ignoring edit for unknown block %s", block_id)
        return state
    return replace_block(state, operation(block, *args))


def begin_action(state: SessionState, slot: ActionSlot) -> SessionState:
    if state.is_busy(slot):
        raise ActionInFlightError(slot)
    return state.model_copy(
        update={"in_flight": state.in_flight | {slot}, "error_message": None}
    )


def end_action(
    state: SessionState, slot: ActionSlot, error: Optional[str] = None
) -> SessionState:
    update: Dict[str, Any] = {"in_flight": state.in_flight - {slot}}
    if error is not None:
        update["error_message"] = error
    return state.model_copy(update=update)


def set_error(state: SessionState, message: Optional[str]) -> SessionState:
    return state.model_copy(update={"error_message": message})


def apply_translation(state: SessionState, result: TranslateResponse) -> SessionState:
    return _with_document(
        state,
        translated_customer_text=result.translated_text,
        detected_language=result.detected_language,
    )


def apply_generation(state: SessionState, result: GenerateResponse) -> SessionState:
    return _with_document(
        state, reply=result.reply, english_translation=result.english_translation or ""
    )


def apply_english_translation(state: SessionState, text: str) -> SessionState:
    return _with_document(state, english_translation=text)


def build_generate_payload(state: SessionState) -> Dict[str, Any]:
    """Serialize the subset of the document the generate action needs."""
    document = state.document
    translated = document.translated_customer_text
    request = GenerateRequest(
        action="generate",
        customer_text=document.customer_text,
        translated_customer_text=translated if translated and translated.strip() else None,
        info_blocks=document.info_blocks,
        notes=document.notes,
        tone=document.tone,
        length=document.length,
    )
    return request.model_dump(mode="json", by_alias=True, exclude_none=True)
