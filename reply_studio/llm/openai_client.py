"""Thin wrapper around the OpenAI Chat Completions API."""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional

from openai import APIConnectionError, APIError, AuthenticationError, OpenAI, RateLimitError

from reply_studio.config import settings
from reply_studio.exceptions import ConfigurationError, UpstreamError

from .base import ChatClient, ChatMessage

logger = logging.getLogger(__name__)


class OpenAIChatClient(ChatClient):
    """Lazily initializes the OpenAI Python SDK.

    Works with any OpenAI-compatible endpoint via ``base_url``. Retries are
    disabled; failures surface once to the caller.
    """

    def __init__(
        self,
        api_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> None:
        self.api_key = api_key if api_key is not None else settings.openai_api_key
        self.base_url = base_url or settings.openai_base_url
        self.timeout = timeout or settings.openai_timeout_seconds
        self._client: Optional[OpenAI] = None

    def _get_client(self) -> OpenAI:
        if not self.api_key or not self.api_key.strip():
            raise ConfigurationError("OPENAI_API_KEY is not configured in the environment.")
        if self._client is None:
            self._client = OpenAI(
                api_key=self.api_key,
                base_url=self.base_url,
                timeout=self.timeout,
                max_retries=0,
            )
        return self._client

    def complete(
        self,
        messages: List[ChatMessage],
        model: str,
        json_schema: Optional[Dict[str, Any]] = None,
    ) -> str:
        client = self._get_client()
        extra: Dict[str, Any] = {}
        if json_schema is not None:
            extra["response_format"] = {"type": "json_schema", "json_schema": json_schema}
        logger.debug(
            "Sending %d messages to model=%s structured=%s",
            len(messages),
            model,
            json_schema is not None,
        )

        try:
            response = client.chat.completions.create(
                model=model,
                messages=[message.to_dict() for message in messages],  # type: ignore[misc]
                **extra,
            )
        except AuthenticationError as exc:
            raise ConfigurationError(f"Model provider rejected the API key: {exc}") from exc
        except RateLimitError as exc:
            raise UpstreamError(f"Model provider rate limit exceeded: {exc}") from exc
        except APIConnectionError as exc:
            raise UpstreamError(f"Failed to reach the model provider: {exc}") from exc
        except APIError as exc:
            raise UpstreamError(f"Model provider returned an error: {exc}") from exc

        if response.usage:
            logger.debug(
                "Completion received (prompt=%d, completion=%d tokens)",
                response.usage.prompt_tokens,
                response.usage.completion_tokens,
            )
        return self._extract_text(response)

    @staticmethod
    def _extract_text(response) -> str:
        if not response.choices:
            return ""
        return response.choices[0].message.content or ""
