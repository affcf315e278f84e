"""Pure edit operations on a single information block.

Every function returns a new ``InfoBlock`` and leaves its input untouched;
the session reducer swaps the result into the document by block id.
"""

from __future__ import annotations

import uuid
from typing import Callable, Dict, Iterable, List, Optional, Sequence

from reply_studio.models.blocks import BlockField, BlockType, InfoBlock, PresetOption
from reply_studio.registry.presets import get_presets
from reply_studio.registry.templates import get_template

NEW_FIELD_LABEL = "新しい項目"


def new_block_id() -> str:
    return f"block-{uuid.uuid4().hex}"


def new_field_id() -> str:
    return f"field-{uuid.uuid4().hex}"


def create_block(block_type: BlockType | str) -> InfoBlock:
    """Seed a block from its template: one empty, included field per default label."""
    template = get_template(block_type)
    return InfoBlock(
        id=new_block_id(),
        type=BlockType(block_type),
        fields=[
            BlockField(id=new_field_id(), label=label, value="", include_in_reply=True)
            for label in template.default_fields
        ],
    )


def _map_field(
    block: InfoBlock, field_id: str, change: Callable[[BlockField], BlockField]
) -> InfoBlock:
    fields = [change(field) if field.id == field_id else field for field in block.fields]
    return block.model_copy(update={"fields": fields})


def add_field(block: InfoBlock) -> InfoBlock:
    field = BlockField(id=new_field_id(), label=NEW_FIELD_LABEL, value="", include_in_reply=True)
    return block.model_copy(update={"fields": [*block.fields, field]})


def delete_field(block: InfoBlock, field_id: str) -> InfoBlock:
    fields = [field for field in block.fields if field.id != field_id]
    return block.model_copy(update={"fields": fields})


def set_field_value(block: InfoBlock, field_id: str, value: str) -> InfoBlock:
    return _map_field(block, field_id, lambda field: field.model_copy(update={"value": value}))


def set_field_label(block: InfoBlock, field_id: str, label: str) -> InfoBlock:
    return _map_field(block, field_id, lambda field: field.model_copy(update={"label": label}))


def toggle_include(block: InfoBlock, field_id: str) -> InfoBlock:
    return _map_field(
        block,
        field_id,
        lambda field: field.model_copy(update={"include_in_reply": not field.include_in_reply}),
    )


def set_title(block: InfoBlock, title: str) -> InfoBlock:
    return block.model_copy(update={"title": title})


def merge_preset_values(
    presets: Sequence[PresetOption], selected_indices: Iterable[int]
) -> Dict[str, str]:
    """Merge the values of the selected presets; later selections win on label clashes.

    Indices must address ``presets`` from the front; anything else raises ``IndexError``.
    """
    merged: Dict[str, str] = {}
    for index in selected_indices:
        if not 0 <= index < len(presets):
            raise IndexError(f"preset index {index} out of range for {len(presets)} presets")
        merged.update(presets[index].values)
    return merged


def apply_presets(
    block: InfoBlock,
    selected_indices: Iterable[int],
    presets: Optional[Sequence[PresetOption]] = None,
) -> InfoBlock:
    """Overwrite field values whose label matches a merged preset key.

    ``presets`` defaults to the registry presets of the block's type. Fields
    whose label has no preset value keep their current value.
    """
    if presets is None:
        presets = get_presets(block.type)
    merged = merge_preset_values(presets, selected_indices)
    fields: List[BlockField] = [
        field.model_copy(update={"value": merged[field.label]}) if field.label in merged else field
        for field in block.fields
    ]
    return block.model_copy(update={"fields": fields})


def update_preset_value(preset: PresetOption, label: str, value: str) -> PresetOption:
    """Transient edit of one preset value; empty ``value`` drops the key."""
    values = dict(preset.values)
    if value:
        values[label] = value
    else:
        values.pop(label, None)
    return preset.model_copy(update={"values": values})
