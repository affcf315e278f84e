"""Async controller for one editing session.

``ReplySession`` owns the ``SessionState``, applies reducer operations to it,
keeps each network action to a single outstanding call, and debounces
automatic English translation of the reply box.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from reply_studio.config import settings
from reply_studio.editor import session as reducer
from reply_studio.models.document import ActionSlot, SessionState
from reply_studio.utils.debounce import Debouncer

from .api_client import MailApiClient, MailApiError

logger = logging.getLogger(__name__)

CUSTOMER_TEXT_REQUIRED = "お客様メールを入力してください。"


class ReplySession:
    def __init__(
        self,
        api: MailApiClient,
        state: Optional[SessionState] = None,
        debounce_seconds: Optional[float] = None,
    ) -> None:
        self.api = api
        self.state = state or SessionState()
        if debounce_seconds is None:
            debounce_seconds = settings.reply_translate_debounce_seconds
        self._reply_debouncer = Debouncer(debounce_seconds, self._translate_reply)

    def dispatch(self, operation: Callable[..., SessionState], *args: Any) -> SessionState:
        """Apply a reducer operation, e.g. ``dispatch(reducer.set_notes, "...")``."""
        self.state = operation(self.state, *args)
        return self.state

    def _require_customer_text(self) -> bool:
        if self.state.document.customer_text.strip():
            return True
        self.state = reducer.set_error(self.state, CUSTOMER_TEXT_REQUIRED)
        return False

    async def translate(self) -> SessionState:
        """Translate the customer mail and record the detected language."""
        if not self._require_customer_text():
            return self.state
        self.state = reducer.begin_action(self.state, ActionSlot.TRANSLATE)
        error: Optional[str] = None
        try:
            result = await self.api.translate(self.state.document.customer_text)
            self.state = reducer.apply_translation(self.state, result)
        except MailApiError as exc:
            logger.error("Translation failed (%s): %s", exc.status_code, exc.message)
            error = exc.message
        finally:
            self.state = reducer.end_action(self.state, ActionSlot.TRANSLATE, error)
        return self.state

    async def generate(self) -> SessionState:
        """Draft the reply; a pending reply-box translation is superseded."""
        if not self._require_customer_text():
            return self.state
        self.state = reducer.begin_action(self.state, ActionSlot.GENERATE)
        error: Optional[str] = None
        try:
            payload = reducer.build_generate_payload(self.state)
            result = await self.api.generate(payload)
            self._reply_debouncer.cancel()
            self.state = reducer.apply_generation(self.state, result)
        except MailApiError as exc:
            logger.error("Reply generation failed (%s): %s", exc.status_code, exc.message)
            error = exc.message
        finally:
            self.state = reducer.end_action(self.state, ActionSlot.GENERATE, error)
        return self.state

    def edit_reply(self, text: str) -> SessionState:
        """Record an edit of the reply box and schedule its English translation."""
        self.state = reducer.set_reply(self.state, text)
        if not text.strip():
            self._reply_debouncer.cancel()
            self.state = reducer.apply_english_translation(self.state, "")
        else:
            self._reply_debouncer.trigger(text)
        return self.state

    async def _translate_reply(self, text: str) -> None:
        self.state = reducer.begin_action(self.state, ActionSlot.REPLY_TRANSLATION)
        try:
            english = await self.api.translate_to_english(text)
            self.state = reducer.apply_english_translation(self.state, english)
        except MailApiError as exc:
            logger.warning("Automatic reply translation failed: %s", exc.message)
        finally:
            self.state = reducer.end_action(self.state, ActionSlot.REPLY_TRANSLATION)

    @property
    def reply_translation_pending(self) -> bool:
        return self._reply_debouncer.pending

    async def wait_for_reply_translation(self) -> None:
        await self._reply_debouncer.wait()

    def close(self) -> None:
        """Cancel timers owned by the session."""
        self._reply_debouncer.cancel()
