"""Preset field values per block type.

Built-in presets can be replaced by a JSON file named by ``PRESETS_PATH``::

    {"breakfast": [{"label": "和朝食", "values": {"料金": "2,200円"}}]}

Types missing from the file keep their built-in presets.
"""

from __future__ import annotations

import json
import logging
from functools import lru_cache
from pathlib import Path
from types import MappingProxyType
from typing import Dict, List, Mapping, Optional, Tuple

from reply_studio.config import settings
from reply_studio.models.blocks import BlockType, PresetOption

logger = logging.getLogger(__name__)


DEFAULT_PRESETS: Mapping[BlockType, Tuple[PresetOption, ...]] = MappingProxyType(
    {
        BlockType.BREAKFAST: (
            PresetOption(label="和朝食", values={"料金": "2,200円", "時間": "7:00~9:30"}),
            PresetOption(label="洋朝食ビュッフェ", values={"料金": "4,400円", "時間": "7:45~10:00"}),
            PresetOption(label="お子様料金", values={"備考": "小学生以下は半額となります"}),
        ),
        BlockType.DINNER: (
            PresetOption(label="会席料理", values={"料金": "11,000円", "時間": "18:00~21:00"}),
            PresetOption(label="アレルギー対応", values={"備考": "事前にご連絡いただければ対応いたします"}),
        ),
        BlockType.TRANSFER: (
            PresetOption(label="最寄り駅", values={"場所": "最寄り駅東口", "時間": "15:00~18:00", "料金": "無料"}),
            PresetOption(label="空港", values={"場所": "空港到着ロビー", "料金": "5,500円"}),
        ),
        BlockType.CHECKIN: (
            PresetOption(
                label="通常",
                values={"チェックイン時間": "15:00", "チェックアウト時間": "11:00"},
            ),
            PresetOption(label="レイトチェックアウト", values={"チェックアウト時間": "13:00"}),
        ),
        BlockType.MASSAGE: (
            PresetOption(label="60分コース", values={"コース": "全身60分", "料金": "9,900円"}),
        ),
        BlockType.CAKE: (
            PresetOption(label="記念日ケーキ", values={"種類": "ショートケーキ", "サイズ": "4号", "料金": "3,850円"}),
        ),
    }
)


def _parse_presets(raw: object) -> Dict[BlockType, Tuple[PresetOption, ...]]:
    if not isinstance(raw, dict):
        raise ValueError("Preset file must contain an object keyed by block type.")
    parsed: Dict[BlockType, Tuple[PresetOption, ...]] = {}
    for type_name, options in raw.items():
        block_type = BlockType(type_name)
        parsed[block_type] = tuple(PresetOption.model_validate(option) for option in options)
    return parsed


def load_presets(path: Optional[Path] = None) -> Dict[BlockType, Tuple[PresetOption, ...]]:
    """Return built-in presets overlaid with the JSON file at ``path`` if given."""
    presets: Dict[BlockType, Tuple[PresetOption, ...]] = dict(DEFAULT_PRESETS)
    if path is None:
        return presets
    with path.open("r", encoding="utf-8") as handle:
        overrides = _parse_presets(json.load(handle))
    logger.info("Loaded presets for %s block types from %s", len(overrides), path)
    presets.update(overrides)
    return presets


@lru_cache(maxsize=1)
def _configured_presets() -> Mapping[BlockType, Tuple[PresetOption, ...]]:
    return MappingProxyType(load_presets(settings.presets_path_obj))


def get_presets(block_type: BlockType | str) -> List[PresetOption]:
    """Presets configured for ``block_type``; empty when none exist."""
    return list(_configured_presets().get(BlockType(block_type), ()))
