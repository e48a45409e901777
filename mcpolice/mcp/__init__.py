"""
Tool-call protocol (JSON-RPC 2.0) for AI agents.

Transports:
- HTTP: mcpolice.api.routes.mcp (POST /mcp)
- stdio: mcpolice.mcp.stdio
"""

from mcpolice.mcp.dispatcher import DispatchResult, ToolCallDispatcher

__all__ = ["DispatchResult", "ToolCallDispatcher"]
