"""Provider-neutral chat completion interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel


class ChatMessage(BaseModel):
    """Role-tagged message sent to the model."""

    role: Literal["system", "user", "assistant"]
    content: str

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str) -> "ChatMessage":
        return cls(role="user", content=content)

    def to_dict(self) -> Dict[str, str]:
        return {"role": self.role, "content": self.content}


class ChatClient(ABC):
    """Anything that turns role-tagged messages into a text completion.

    Implementations map provider exceptions onto ``ConfigurationError`` and
    ``UpstreamError`` and must check their credential before any network call.
    """

    @abstractmethod
    def complete(
        self,
        messages: List[ChatMessage],
        model: str,
        json_schema: Optional[Dict[str, Any]] = None,
    ) -> str:
        """Return the completion text; an empty string when the model sent nothing.

        Args:
            messages: Conversation to send.
            model: Provider model name.
            json_schema: Optional ``{"name": ..., "schema": ...}`` requesting a
                structured JSON response.
        """
