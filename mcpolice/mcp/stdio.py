"""
stdio.py - Tool-call protocol over stdin/stdout.

One JSON-RPC message per input line, one response line per message.
stdout carries protocol traffic only; logging goes to stderr.
"""

import json
import logging
from typing import IO

from mcpolice.mcp.dispatcher import ToolCallDispatcher, parse_error

logger = logging.getLogger(__name__)


def handle_line(dispatcher: ToolCallDispatcher, line: str) -> str | None:
    """Dispatch one input line. Returns the response line, or None for blank input."""
    line = line.strip()
    if not line:
        return None
    try:
        body = json.loads(line)
    except json.JSONDecodeError:
        logger.warning("Discarding unparsable stdio message")
        return json.dumps(parse_error().payload)
    return json.dumps(dispatcher.dispatch(body).payload)


def serve_stdio(dispatcher: ToolCallDispatcher, stdin: IO[str], stdout: IO[str]) -> None:
    """Read messages until EOF."""
    logger.info("MCPolice tool-call server running on stdio")
    for line in stdin:
        response = handle_line(dispatcher, line)
        if response is None:
            continue
        stdout.write(response + "\n")
        stdout.flush()
    logger.info("stdin closed, stdio server exiting")
