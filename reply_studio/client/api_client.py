"""Async HTTP client for the mail endpoint."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

import httpx

from reply_studio.config import settings
from reply_studio.models.mail import GenerateResponse, TranslateResponse

logger = logging.getLogger(__name__)

MAIL_PATH = "/api/mail"


class MailApiError(Exception):
    """Non-success response (or transport failure) from the mail endpoint.

    Attributes:
        status_code: HTTP status, or 0 when no response was received.
        message: Human-readable error text from the server.
        details: Field-level validation problems, if any.
    """

    def __init__(
        self,
        status_code: int,
        message: str,
        details: Optional[List[Dict[str, Any]]] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.message = message
        self.details = details


class MailApiClient:
    """Posts mail actions to a running reply studio service."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
        timeout: float = 120.0,
    ) -> None:
        self._client = httpx.AsyncClient(
            base_url=base_url or settings.studio_base_url,
            transport=transport,
            timeout=timeout,
        )

    async def __aenter__(self) -> "MailApiClient":
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def _post(self, payload: Dict[str, Any], failure_message: str) -> Dict[str, Any]:
        logger.debug("POST %s action=%s", MAIL_PATH, payload.get("action"))
        try:
            response = await self._client.post(MAIL_PATH, json=payload)
        except httpx.HTTPError as exc:
            raise MailApiError(0, f"{failure_message} ({exc})") from exc

        if response.is_error:
            try:
                body = response.json()
            except ValueError:
                body = {}
            if not isinstance(body, dict):
                body = {}
            message = body.get("error") or failure_message
            raise MailApiError(response.status_code, message, body.get("details"))
        return response.json()

    async def translate(self, customer_text: str) -> TranslateResponse:
        data = await self._post(
            {"action": "translate", "customerText": customer_text}, "翻訳に失敗しました。"
        )
        return TranslateResponse.model_validate(data)

    async def translate_to_english(self, japanese_text: str) -> str:
        data = await self._post(
            {"action": "translate-to-english", "japaneseText": japanese_text},
            "翻訳に失敗しました",
        )
        return data.get("translatedText") or ""

    async def generate(self, payload: Dict[str, Any]) -> GenerateResponse:
        data = await self._post(payload, "返信文の生成に失敗しました。")
        return GenerateResponse.model_validate(data)
