"""Tests for block templates, presets and prompt guides."""

import json

import pytest

from reply_studio.config import settings
from reply_studio.models.blocks import BlockField, BlockType, InfoBlock
from reply_studio.models.document import ReplyLength, Tone
from reply_studio.registry import (
    BLOCK_TEMPLATES,
    DEFAULT_PRESETS,
    LENGTH_GUIDES,
    TONE_GUIDES,
    get_presets,
    get_template,
    load_presets,
    resolve_block_label,
)


class TestBlockTemplates:
    def test_every_block_type_has_a_template(self):
        assert set(BLOCK_TEMPLATES) == set(BlockType)

    def test_breakfast_template(self):
        template = get_template(BlockType.BREAKFAST)
        assert template.label == "朝食"
        assert template.icon == "🍳"
        assert template.default_fields == ("料金", "時間", "備考")

    def test_lookup_by_string(self):
        assert get_template("checkin").default_fields == ("チェックイン時間", "チェックアウト時間")

    def test_unknown_type_is_a_programming_error(self):
        with pytest.raises(ValueError):
            get_template("karaoke")

    def test_registry_is_read_only(self):
        with pytest.raises(TypeError):
            BLOCK_TEMPLATES[BlockType.OTHER] = get_template("other")  # type: ignore[index]


class TestResolveBlockLabel:
    def _block(self, title=None):
        return InfoBlock(
            id="b1",
            type=BlockType.DINNER,
            title=title,
            fields=[BlockField(id="f1", label="料金", value="")],
        )

    def test_uses_registry_label_without_title(self):
        assert resolve_block_label(self._block()) == "夕食"

    def test_title_overrides_registry_label(self):
        assert resolve_block_label(self._block("特別ディナー")) == "特別ディナー"

    def test_blank_title_falls_back(self):
        assert resolve_block_label(self._block("   ")) == "夕食"


class TestPresets:
    def test_builtin_presets(self):
        labels = [preset.label for preset in get_presets(BlockType.BREAKFAST)]
        assert labels == [preset.label for preset in DEFAULT_PRESETS[BlockType.BREAKFAST]]

    def test_type_without_presets(self):
        assert get_presets(BlockType.DECORATION) == []

    def test_load_presets_overlays_file(self, tmp_path):
        path = tmp_path / "presets.json"
        path.write_text(
            json.dumps(
                {"spa": [{"label": "岩盤浴", "values": {"コース": "岩盤浴45分", "料金": "3,300円"}}]},
                ensure_ascii=False,
            ),
            encoding="utf-8",
        )

        presets = load_presets(path)

        assert [p.label for p in presets[BlockType.SPA]] == ["岩盤浴"]
        assert presets[BlockType.BREAKFAST] == DEFAULT_PRESETS[BlockType.BREAKFAST]

    def test_configured_presets_path(self, tmp_path, monkeypatch):
        path = tmp_path / "presets.json"
        path.write_text(
            json.dumps({"breakfast": [{"label": "簡易朝食", "values": {"料金": "1,100円"}}]}),
            encoding="utf-8",
        )
        monkeypatch.setattr(settings, "presets_path", str(path))

        presets = get_presets("breakfast")

        assert len(presets) == 1
        assert presets[0].values == {"料金": "1,100円"}

    def test_unknown_type_in_file_is_rejected(self, tmp_path):
        path = tmp_path / "presets.json"
        path.write_text(json.dumps({"karaoke": []}), encoding="utf-8")
        with pytest.raises(ValueError):
            load_presets(path)


class TestGuides:
    def test_every_tone_has_guide(self):
        assert set(TONE_GUIDES) == set(Tone)
        assert all(text.strip() for text in TONE_GUIDES.values())

    def test_every_length_has_guide(self):
        assert set(LENGTH_GUIDES) == set(ReplyLength)
