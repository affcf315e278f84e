"""Static catalog of information block types."""

from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Tuple

from reply_studio.models.blocks import BlockType, InfoBlock


@dataclass(frozen=True)
class BlockTemplate:
    label: str
    icon: str
    default_fields: Tuple[str, ...]


BLOCK_TEMPLATES: Mapping[BlockType, BlockTemplate] = MappingProxyType(
    {
        BlockType.BREAKFAST: BlockTemplate("朝食", "🍳", ("料金", "時間", "備考")),
        BlockType.DINNER: BlockTemplate("夕食", "🍽️", ("料金", "時間", "備考")),
        BlockType.TRANSFER: BlockTemplate("送迎", "🚗", ("場所", "時間", "料金")),
        BlockType.CHECKIN: BlockTemplate(
            "チェックイン/アウト", "🏨", ("チェックイン時間", "チェックアウト時間")
        ),
        BlockType.MASSAGE: BlockTemplate("マッサージ", "💆", ("コース", "料金", "時間", "備考")),
        BlockType.SPA: BlockTemplate("スパ", "🧖", ("コース", "料金", "時間")),
        BlockType.CAKE: BlockTemplate("ケーキ", "🎂", ("種類", "サイズ", "料金")),
        BlockType.SERVICE: BlockTemplate("サービス", "✨", ("サービス名", "料金", "備考")),
        BlockType.DECORATION: BlockTemplate("装飾", "🎈", ("内容", "料金")),
        BlockType.MEAL_ADD: BlockTemplate("食事追加", "🍱", ("メニュー", "料金", "時間")),
        BlockType.LUNCH: BlockTemplate("ランチ", "🥗", ("メニュー", "料金", "時間")),
        BlockType.FACILITY: BlockTemplate("施設利用", "🏢", ("項目", "料金", "備考")),
        BlockType.OTHER: BlockTemplate("その他", "📝", ("タイトル", "内容")),
    }
)


def get_template(block_type: BlockType | str) -> BlockTemplate:
    """Return the template for a block type; unknown type tags raise ``ValueError``."""
    return BLOCK_TEMPLATES[BlockType(block_type)]


def resolve_block_label(block: InfoBlock) -> str:
    """Title override, else registry label, else the raw type tag."""
    if block.title and block.title.strip():
        return block.title.strip()
    template = BLOCK_TEMPLATES.get(block.type)
    if template:
        return template.label
    return str(block.type.value)
