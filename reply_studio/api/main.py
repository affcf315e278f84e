"""FastAPI application entry point."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager
from typing import Annotated, Any, Dict, List

from fastapi import Body, Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from reply_studio.exceptions import ReplyStudioError
from reply_studio.llm.mail_assistant import MailAssistant
from reply_studio.logging_config import configure_logging
from reply_studio.models.document import ReplyLength, Tone
from reply_studio.models.mail import (
    BlockCatalogEntry,
    BlockCatalogResponse,
    EnglishTranslationResponse,
    ErrorResponse,
    GenerateRequest,
    MailRequest,
    OptionEntry,
    TranslateRequest,
    TranslateToEnglishRequest,
)
from reply_studio.registry.guides import LENGTH_LABELS, TONE_LABELS
from reply_studio.registry.presets import get_presets
from reply_studio.registry.templates import BLOCK_TEMPLATES

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(_: FastAPI):
    configure_logging()
    yield


app = FastAPI(
    title="Mail Reply Studio",
    description="Japanese customer mail reply drafting API",
    version="0.1.0",
    lifespan=lifespan,
)

mail_assistant = MailAssistant()


def get_mail_assistant() -> MailAssistant:
    return mail_assistant


def _error_response(status_code: int, error: ErrorResponse) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=error.model_dump(by_alias=True, exclude_none=True),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(_: Request, exc: RequestValidationError) -> JSONResponse:
    details: List[Dict[str, Any]] = [
        {"loc": [str(part) for part in err["loc"]], "msg": err["msg"], "type": err["type"]}
        for err in exc.errors()
    ]
    logger.info("Rejected invalid mail request: %s", details)
    return _error_response(400, ErrorResponse(error="Invalid request", details=details))


@app.exception_handler(ReplyStudioError)
async def reply_studio_error_handler(_: Request, exc: ReplyStudioError) -> JSONResponse:
    logger.error("%s: %s", type(exc).__name__, exc)
    return _error_response(exc.status_code, ErrorResponse(error=str(exc)))


@app.exception_handler(Exception)
async def unexpected_error_handler(_: Request, exc: Exception) -> JSONResponse:
    logger.error("Unhandled error while serving request", exc_info=exc)
    return _error_response(500, ErrorResponse(error="Unexpected server error"))


@app.get("/health")
def health() -> dict[str, str]:
    """Simple readiness probe."""
    return {"status": "ok"}


@app.get("/api/blocks", response_model=BlockCatalogResponse)
def block_catalog() -> BlockCatalogResponse:
    """Block types, presets and tone/length options for the editor page."""
    blocks = [
        BlockCatalogEntry(
            type=block_type.value,
            label=template.label,
            icon=template.icon,
            default_fields=list(template.default_fields),
            presets=get_presets(block_type),
        )
        for block_type, template in BLOCK_TEMPLATES.items()
    ]
    return BlockCatalogResponse(
        blocks=blocks,
        tones=[OptionEntry(value=tone.value, label=TONE_LABELS[tone]) for tone in Tone],
        lengths=[
            OptionEntry(value=length.value, label=LENGTH_LABELS[length]) for length in ReplyLength
        ],
    )


@app.post("/api/mail")
def mail(
    payload: Annotated[MailRequest, Body(discriminator="action")],
    assistant: Annotated[MailAssistant, Depends(get_mail_assistant)],
) -> JSONResponse:
    """Translate a customer mail, back-translate a reply, or draft a reply."""
    if isinstance(payload, TranslateRequest):
        result = assistant.translate(payload.customer_text)
    elif isinstance(payload, TranslateToEnglishRequest):
        result = EnglishTranslationResponse(
            translated_text=assistant.translate_to_english(payload.japanese_text)
        )
    elif isinstance(payload, GenerateRequest):
        result = assistant.generate(payload)
    else:  # pragma: no cover - the discriminated union is closed
        raise TypeError(f"Unsupported mail action: {payload!r}")
    return JSONResponse(content=result.model_dump(by_alias=True, exclude_none=True))
