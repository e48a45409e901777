"""
mcp.py - Tool-call protocol over HTTP.

ENDPOINTS:
- POST /mcp: one JSON-RPC 2.0 request, one response
- GET /mcp: server discovery document, or a single initialized
  notification when the client accepts text/event-stream

A client that sends `Accept: text/event-stream` gets the same payload
framed as a single `event: message` server-sent event. No further events
follow; the stream ends with the response.
"""

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, Response
from starlette.concurrency import run_in_threadpool

from mcpolice.api.deps import get_dispatcher
from mcpolice.mcp.dispatcher import ToolCallDispatcher, parse_error

logger = logging.getLogger(__name__)

router = APIRouter()

EVENT_STREAM = "text/event-stream"


def wants_event_stream(request: Request) -> bool:
    return EVENT_STREAM in request.headers.get("accept", "")


def format_sse(payload: dict[str, Any]) -> str:
    return f"event: message\ndata: {json.dumps(payload)}\n\n"


def render(payload: dict[str, Any], status_code: int, stream: bool) -> Response:
    if stream:
        return Response(
            content=format_sse(payload),
            status_code=status_code,
            media_type=EVENT_STREAM,
            headers={"Cache-Control": "no-cache"},
        )
    return JSONResponse(content=payload, status_code=status_code)


@router.post("", summary="JSON-RPC tool-call endpoint")
async def handle_rpc(
    request: Request,
    dispatcher: ToolCallDispatcher = Depends(get_dispatcher),
) -> Response:
    stream = wants_event_stream(request)
    raw = await request.body()
    try:
        body = json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        logger.warning("Tool-call body is not valid JSON")
        result = parse_error()
        return render(result.payload, result.status_code, stream)

    # Service calls block on the key/value backend
    result = await run_in_threadpool(dispatcher.dispatch, body)
    return render(result.payload, result.status_code, stream)


@router.get("", summary="Tool-call server discovery")
def discover(
    request: Request,
    dispatcher: ToolCallDispatcher = Depends(get_dispatcher),
) -> Response:
    if wants_event_stream(request):
        return render(dispatcher.initialized_notification(), 200, stream=True)
    return JSONResponse(content=dispatcher.discovery())
