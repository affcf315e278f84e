"""Shared test fixtures for all test modules."""

from __future__ import annotations

from typing import Any, Dict, List, Optional, Sequence, Union

import pytest
from fastapi.testclient import TestClient

from reply_studio.api.main import app, get_mail_assistant
from reply_studio.llm.base import ChatClient, ChatMessage
from reply_studio.llm.mail_assistant import MailAssistant
from reply_studio.registry import presets as presets_module

TRANSLATION_JSON = '{"language": "English", "translatedText": "こんにちは、朝食は含まれていますか？"}'


class StubChatClient(ChatClient):
    """Returns canned responses in order and records every call.

    A response that is an exception instance is raised instead of returned.
    Running out of responses fails the test.
    """

    def __init__(self, responses: Optional[Sequence[Union[str, Exception]]] = None) -> None:
        self.responses: List[Union[str, Exception]] = list(responses or [])
        self.calls: List[Dict[str, Any]] = []

    def complete(
        self,
        messages: List[ChatMessage],
        model: str,
        json_schema: Optional[Dict[str, Any]] = None,
    ) -> str:
        self.calls.append({"messages": messages, "model": model, "json_schema": json_schema})
        if not self.responses:
            raise AssertionError("Unexpected model call")
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response

    @property
    def user_prompts(self) -> List[str]:
        return [call["messages"][-1].content for call in self.calls]


@pytest.fixture
def make_assistant():
    def _make(*responses: Union[str, Exception]) -> tuple[MailAssistant, StubChatClient]:
        stub = StubChatClient(responses)
        assistant = MailAssistant(
            client=stub, translate_model="test-translate", reply_model="test-reply"
        )
        return assistant, stub

    return _make


@pytest.fixture
def api_client(make_assistant):
    """Factory returning a TestClient whose model client is a stub."""

    def _make(*responses: Union[str, Exception]) -> tuple[TestClient, StubChatClient]:
        assistant, stub = make_assistant(*responses)
        app.dependency_overrides[get_mail_assistant] = lambda: assistant
        return TestClient(app), stub

    yield _make
    app.dependency_overrides.clear()


@pytest.fixture(autouse=True)
def _reset_preset_cache():
    presets_module._configured_presets.cache_clear()
    yield
    presets_module._configured_presets.cache_clear()
