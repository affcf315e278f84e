"""Glue module that turns mail actions into model calls."""

from __future__ import annotations

import logging
from functools import lru_cache
from typing import Optional

import tiktoken

from reply_studio.config import settings
from reply_studio.exceptions import EmptyResultError
from reply_studio.llm.base import ChatClient, ChatMessage
from reply_studio.llm.openai_client import OpenAIChatClient
from reply_studio.llm.prompts import (
    ENGLISH_SYSTEM_PROMPT,
    REPLY_SYSTEM_PROMPT,
    TRANSLATE_SYSTEM_PROMPT,
    TRANSLATION_SCHEMA,
    build_english_prompt,
    build_reply_prompt,
    build_translate_prompt,
    parse_translation,
)
from reply_studio.models.mail import GenerateRequest, GenerateResponse, TranslateResponse

logger = logging.getLogger(__name__)


@lru_cache(maxsize=1)
def _prompt_encoding() -> Optional[tiktoken.Encoding]:
    """cl100k_base for debug token counts; ``None`` means count by whitespace."""
    try:
        return tiktoken.get_encoding("cl100k_base")
    except Exception as exc:
        if not settings.allow_tiktoken_fallback:
            raise RuntimeError(
                f"tiktoken encoding unavailable ({exc}); "
                "set ALLOW_TIKTOKEN_FALLBACK=1 to count prompt tokens by whitespace"
            ) from exc
        logger.warning("tiktoken encoding unavailable (%s); counting by whitespace", exc)
        return None


def prompt_token_count(text: str) -> int:
    encoding = _prompt_encoding()
    if encoding is None:
        return len(text.split())
    return len(encoding.encode(text))


class MailAssistant:
    """Translates customer mail and drafts Japanese replies."""

    def __init__(
        self,
        client: ChatClient | None = None,
        translate_model: Optional[str] = None,
        reply_model: Optional[str] = None,
    ) -> None:
        self.client = client or OpenAIChatClient()
        self.translate_model = translate_model or settings.openai_model_translate
        self.reply_model = reply_model or settings.openai_model_reply

    def _log_prompt(self, kind: str, prompt: str) -> None:
        if logger.isEnabledFor(logging.DEBUG):
            logger.debug("%s prompt (%d tokens):\n%s", kind, prompt_token_count(prompt), prompt)

    def translate(self, customer_text: str) -> TranslateResponse:
        prompt = build_translate_prompt(customer_text)
        self._log_prompt("Translate", prompt)
        raw = self.client.complete(
            [ChatMessage.system(TRANSLATE_SYSTEM_PROMPT), ChatMessage.user(prompt)],
            model=self.translate_model,
            json_schema=TRANSLATION_SCHEMA,
        )
        result = parse_translation(raw)
        return TranslateResponse(
            translated_text=result.translated_text, detected_language=result.language
        )

    def translate_to_english(self, japanese_text: str) -> str:
        prompt = build_english_prompt(japanese_text)
        self._log_prompt("English translation", prompt)
        raw = self.client.complete(
            [ChatMessage.system(ENGLISH_SYSTEM_PROMPT), ChatMessage.user(prompt)],
            model=self.translate_model,
        )
        return raw.strip()

    def generate(self, request: GenerateRequest) -> GenerateResponse:
        """Draft the reply, then back-translate it on a best-effort basis."""
        logger.debug(
            "Generating reply with %d info blocks (tone=%s, length=%s)",
            len(request.info_blocks),
            request.tone.value,
            request.length.value if request.length else None,
        )
        prompt = build_reply_prompt(
            customer_text=request.customer_text,
            info_blocks=request.info_blocks,
            notes=request.notes,
            tone=request.tone,
            length=request.length,
            translated_customer_text=request.translated_customer_text,
        )
        self._log_prompt("Reply", prompt)
        reply = self.client.complete(
            [ChatMessage.system(REPLY_SYSTEM_PROMPT), ChatMessage.user(prompt)],
            model=self.reply_model,
        ).strip()
        if not reply:
            raise EmptyResultError("返信文の生成に失敗しました。AIからの応答が空でした。")

        english: Optional[str] = None
        try:
            english = self.translate_to_english(reply) or None
        except Exception as exc:
            logger.warning("English translation unavailable: %s", exc)
        return GenerateResponse(reply=reply, english_translation=english)
