"""
jsonrpc.py - Pydantic schemas for the JSON-RPC 2.0 tool-call protocol.

Envelopes are validated here before any dispatch happens. Tool arguments
are parsed into one model per tool, so the dispatcher only ever sees a
typed request.
"""

from enum import IntEnum
from typing import Any, Literal

from pydantic import BaseModel, Field

from mcpolice.models.statute import Severity

JSONRPC_VERSION = "2.0"


class JsonRpcErrorCode(IntEnum):
    """Standard JSON-RPC 2.0 error codes."""

    PARSE_ERROR = -32700
    INVALID_REQUEST = -32600
    METHOD_NOT_FOUND = -32601
    INVALID_PARAMS = -32602
    INTERNAL_ERROR = -32603


RequestId = int | str | None


class JsonRpcRequest(BaseModel):
    """Validated request envelope. `id` must be present (null is allowed)."""

    jsonrpc: Literal["2.0"]
    id: RequestId
    method: str = Field(..., min_length=1)
    params: Any = None


class JsonRpcError(BaseModel):
    code: int
    message: str
    data: Any | None = None


class JsonRpcResponse(BaseModel):
    jsonrpc: Literal["2.0"] = JSONRPC_VERSION
    id: RequestId = None
    result: dict[str, Any] | None = None
    error: JsonRpcError | None = None

    def to_payload(self) -> dict[str, Any]:
        """Serialize, emitting exactly one of `result` / `error`."""
        payload: dict[str, Any] = {"jsonrpc": self.jsonrpc, "id": self.id}
        if self.error is not None:
            payload["error"] = self.error.model_dump(exclude_none=True)
        else:
            payload["result"] = self.result if self.result is not None else {}
        return payload


# --- tools/call ---


class ToolCallParams(BaseModel):
    name: str | None = None
    arguments: dict[str, Any] = Field(default_factory=dict)


class ReportViolationArgs(BaseModel):
    """Presence of the three fields is checked by the service."""

    statute: str | None = None
    responsible_organization: str | None = None
    offending_content: str | None = None


class ListStatutesArgs(BaseModel):
    pass


class GetViolationStatsArgs(BaseModel):
    pass


class ListViolationsArgs(BaseModel):
    limit: int = Field(10, ge=1, description="Maximum number of violations to list")
    severity: Severity | None = Field(None, description="Filter by severity")
