"""API routes exposing the streaming summariser."""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import PlainTextResponse, StreamingResponse
from pydantic import ValidationError
from starlette.background import BackgroundTask

from newsbrief.models import SummarizeBody
from newsbrief.services.summarizer import ArticleSummarizer

logger = logging.getLogger(__name__)

router = APIRouter()

MISSING_URL_MESSAGE = "No prompt in the request"


def get_summarizer(request: Request) -> ArticleSummarizer:
    """Return the pipeline built by :func:`newsbrief.api.app.create_app`."""

    return request.app.state.summarizer


async def _read_body(request: Request) -> SummarizeBody:
    raw = await request.body()
    return SummarizeBody.model_validate(json.loads(raw) if raw else {})


@router.post("/summarize", response_model=None)
async def summarize(
    request: Request,
    summarizer: ArticleSummarizer = Depends(get_summarizer),
) -> StreamingResponse | PlainTextResponse:
    """Stream a summary of the article named by the JSON body's ``url`` as plain text.

    The body is parsed here rather than by FastAPI so that every failure,
    malformed JSON included, is a plain-text 500.
    """

    try:
        payload = await _read_body(request)
    except ValidationError:
        return PlainTextResponse(MISSING_URL_MESSAGE, status_code=500)
    except ValueError as exc:
        logger.warning("Rejected malformed summarise request: %s", exc)
        return PlainTextResponse(f"Invalid JSON body: {exc}", status_code=500)

    url = payload.url
    if not url:
        return PlainTextResponse(MISSING_URL_MESSAGE, status_code=500)

    try:
        stream = await summarizer.stream_summary(url)
    except Exception as exc:
        logger.exception("Summarisation failed for %s", url)
        return PlainTextResponse(str(exc), status_code=500)

    # Closes the upstream even when the client leaves before the first chunk.
    return StreamingResponse(
        stream,
        media_type="text/plain; charset=utf-8",
        background=BackgroundTask(stream.aclose),
    )
