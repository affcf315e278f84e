"""Read-only registries: block templates, presets and prompt guides."""

from .guides import LENGTH_GUIDES, LENGTH_LABELS, TONE_GUIDES, TONE_LABELS
from .presets import DEFAULT_PRESETS, get_presets, load_presets
from .templates import BLOCK_TEMPLATES, BlockTemplate, get_template, resolve_block_label

__all__ = [
    "BLOCK_TEMPLATES",
    "BlockTemplate",
    "DEFAULT_PRESETS",
    "LENGTH_GUIDES",
    "LENGTH_LABELS",
    "TONE_GUIDES",
    "TONE_LABELS",
    "get_presets",
    "get_template",
    "load_presets",
    "resolve_block_label",
]
