"""Tests for the session reducer."""

import pytest

from reply_studio.config import settings
from reply_studio.editor import session as reducer
from reply_studio.editor.block_editor import set_field_value, toggle_include
from reply_studio.editor.session import ActionInFlightError, BlockAddPolicy
from reply_studio.models.blocks import BlockType
from reply_studio.models.document import ActionSlot, ReplyLength, SessionState, Tone
from reply_studio.models.mail import GenerateResponse, TranslateResponse


@pytest.fixture
def state():
    return SessionState()


class TestDocumentSetters:
    def test_defaults(self, state):
        doc = state.document
        assert doc.customer_text == ""
        assert doc.info_blocks == []
        assert doc.tone is Tone.POLITE
        assert doc.length is ReplyLength.MEDIUM

    def test_setters_return_new_state(self, state):
        updated = reducer.set_notes(reducer.set_customer_text(state, "Hi"), "謝罪を入れる")
        assert updated.document.customer_text == "Hi"
        assert updated.document.notes == "謝罪を入れる"
        assert state.document.customer_text == ""

    def test_tone_and_length_accept_strings(self, state):
        updated = reducer.set_length(reducer.set_tone(state, "casual"), "short")
        assert updated.document.tone is Tone.CASUAL
        assert updated.document.length is ReplyLength.SHORT

    def test_invalid_tone_rejected(self, state):
        with pytest.raises(ValueError):
            reducer.set_tone(state, "rude")


class TestAddBlock:
    def test_add_opens_block_for_editing(self, state):
        updated = reducer.add_block(state, "breakfast", BlockAddPolicy.APPEND)
        (block,) = updated.document.info_blocks
        assert block.type is BlockType.BREAKFAST
        assert updated.editing_block_id == block.id

    def test_toggle_removes_existing_type(self, state):
        added = reducer.add_block(state, "breakfast", "toggle")
        removed = reducer.add_block(added, "breakfast", "toggle")
        assert removed.document.info_blocks == []
        assert removed.editing_block_id is None

    def test_unique_is_noop_for_existing_type(self, state):
        added = reducer.add_block(state, "dinner", "unique")
        again = reducer.add_block(added, "dinner", "unique")
        assert again == added

    def test_append_allows_duplicates(self, state):
        updated = reducer.add_block(reducer.add_block(state, "spa", "append"), "spa", "append")
        assert [b.type for b in updated.document.info_blocks] == [BlockType.SPA, BlockType.SPA]

    def test_policy_defaults_to_settings(self, state, monkeypatch):
        monkeypatch.setattr(settings, "block_add_policy", "unique")
        added = reducer.add_block(state, "cake")
        assert len(reducer.add_block(added, "cake").document.info_blocks) == 1

    def test_blocks_keep_insertion_order(self, state):
        updated = state
        for block_type in ("transfer", "breakfast", "checkin"):
            updated = reducer.add_block(updated, block_type, "append")
        assert [b.type.value for b in updated.document.info_blocks] == [
            "transfer",
            "breakfast",
            "checkin",
        ]


class TestBlockEditing:
    def test_edit_block_replaces_by_id(self, state):
        updated = reducer.add_block(reducer.add_block(state, "breakfast", "append"), "dinner", "append")
        dinner = updated.document.info_blocks[1]
        edited = reducer.edit_block(updated, dinner.id, set_field_value, dinner.fields[0].id, "8,800円")
        assert edited.document.info_blocks[1].fields[0].value == "8,800円"
        assert edited.document.info_blocks[0] == updated.document.info_blocks[0]

    def test_edit_block_chain(self, state):
        updated = reducer.add_block(state, "breakfast", "append")
        block = updated.document.info_blocks[0]
        updated = reducer.edit_block(updated, block.id, toggle_include, block.fields[2].id)
        assert updated.document.info_blocks[0].fields[2].include_in_reply is False

    def test_edit_unknown_block_is_noop(self, state):
        assert reducer.edit_block(state, "block-missing", toggle_include, "f") == state

    def test_remove_block_keeps_others(self, state):
        updated = reducer.add_block(reducer.add_block(state, "breakfast", "append"), "dinner", "append")
        first = updated.document.info_blocks[0]
        removed = reducer.remove_block(updated, first.id)
        assert [b.type for b in removed.document.info_blocks] == [BlockType.DINNER]
        assert removed.editing_block_id == updated.editing_block_id


class TestActionSlots:
    def test_begin_and_end(self, state):
        busy = reducer.begin_action(state, ActionSlot.TRANSLATE)
        assert busy.is_busy(ActionSlot.TRANSLATE)
        assert not busy.is_busy(ActionSlot.GENERATE)
        done = reducer.end_action(busy, ActionSlot.TRANSLATE)
        assert not done.is_busy(ActionSlot.TRANSLATE)
        assert done.error_message is None

    def test_second_begin_is_rejected(self, state):
        busy = reducer.begin_action(state, ActionSlot.GENERATE)
        with pytest.raises(ActionInFlightError):
            reducer.begin_action(busy, ActionSlot.GENERATE)

    def test_slots_are_independent(self, state):
        busy = reducer.begin_action(reducer.begin_action(state, ActionSlot.GENERATE), ActionSlot.TRANSLATE)
        assert busy.in_flight == {ActionSlot.GENERATE, ActionSlot.TRANSLATE}

    def test_end_with_error_and_begin_clears_it(self, state):
        failed = reducer.end_action(
            reducer.begin_action(state, ActionSlot.TRANSLATE), ActionSlot.TRANSLATE, "翻訳に失敗しました。"
        )
        assert failed.error_message == "翻訳に失敗しました。"
        assert reducer.begin_action(failed, ActionSlot.TRANSLATE).error_message is None


class TestMergeResults:
    def test_apply_translation(self, state):
        updated = reducer.apply_translation(
            state, TranslateResponse(translated_text="こんにちは", detected_language="English")
        )
        assert updated.document.translated_customer_text == "こんにちは"
        assert updated.document.detected_language == "English"

    def test_apply_generation_without_english(self, state):
        updated = reducer.apply_generation(
            reducer.apply_english_translation(state, "old"), GenerateResponse(reply="承知しました。")
        )
        assert updated.document.reply == "承知しました。"
        assert updated.document.english_translation == ""


class TestGeneratePayload:
    def test_payload_shape(self, state):
        updated = reducer.set_customer_text(state, "Is breakfast included?")
        updated = reducer.add_block(updated, "breakfast", "append")
        block = updated.document.info_blocks[0]
        updated = reducer.edit_block(updated, block.id, set_field_value, block.fields[0].id, "4,400円")

        payload = reducer.build_generate_payload(updated)

        assert payload["action"] == "generate"
        assert payload["customerText"] == "Is breakfast included?"
        assert payload["tone"] == "polite"
        assert payload["length"] == "medium"
        assert "translatedCustomerText" not in payload
        field = payload["infoBlocks"][0]["fields"][0]
        assert field == {"id": block.fields[0].id, "label": "料金", "value": "4,400円", "includeInReply": True}

    def test_payload_includes_translation_when_present(self, state):
        updated = reducer.apply_translation(
            reducer.set_customer_text(state, "Hello"),
            TranslateResponse(translated_text="こんにちは", detected_language="English"),
        )
        assert reducer.build_generate_payload(updated)["translatedCustomerText"] == "こんにちは"
