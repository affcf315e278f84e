"""Block editor operations and the session reducer."""

from .block_editor import (
    add_field,
    apply_presets,
    create_block,
    delete_field,
    merge_preset_values,
    set_field_label,
    set_field_value,
    set_title,
    toggle_include,
    update_preset_value,
)
from .session import ActionInFlightError, BlockAddPolicy

__all__ = [
    "ActionInFlightError",
    "BlockAddPolicy",
    "add_field",
    "apply_presets",
    "create_block",
    "delete_field",
    "merge_preset_values",
    "set_field_label",
    "set_field_value",
    "set_title",
    "toggle_include",
    "update_preset_value",
]
