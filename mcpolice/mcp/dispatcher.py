"""
dispatcher.py - JSON-RPC 2.0 dispatch for the tool-call protocol.

Shared by the HTTP endpoint (/mcp) and the stdio transport. Each request
is independent: parse envelope -> route method -> (for tools/call) parse
tool arguments -> call the violation service -> wrap the text result.

ERROR MAPPING (JSON-RPC code / HTTP status):
- unparsable JSON              -> -32700 / 400
- malformed envelope           -> -32600 / 400
- unknown method or tool       -> -32601 / 404
- invalid params, bad report   -> -32602 / 400
- anything else                -> -32603 / 500 (message redacted)
"""

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pydantic import BaseModel
from pydantic import ValidationError as SchemaValidationError

from mcpolice.config import Settings, settings as default_settings
from mcpolice.errors import ProtocolError, UnknownStatuteError, ValidationError
from mcpolice.mcp import tools
from mcpolice.models.statute import get_statute_info
from mcpolice.schemas.jsonrpc import (
    JSONRPC_VERSION,
    JsonRpcError,
    JsonRpcErrorCode,
    JsonRpcRequest,
    JsonRpcResponse,
    ListViolationsArgs,
    ReportViolationArgs,
    RequestId,
    ToolCallParams,
)
from mcpolice.services.violations import ViolationService

logger = logging.getLogger(__name__)


@dataclass
class DispatchResult:
    """A JSON-RPC response payload and the HTTP status to send it with."""

    payload: dict[str, Any]
    status_code: int = 200


def _summarize(error: SchemaValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "params"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def _echoable_id(body: Any) -> RequestId:
    """Request id to put on an error response; ids of the wrong type become null."""
    if not isinstance(body, dict):
        return None
    raw = body.get("id")
    if isinstance(raw, bool) or not isinstance(raw, (int, str)):
        return None
    return raw


def parse_error() -> DispatchResult:
    """Response for a body that is not valid JSON."""
    response = JsonRpcResponse(
        id=None,
        error=JsonRpcError(code=JsonRpcErrorCode.PARSE_ERROR.value, message="Parse error"),
    )
    return DispatchResult(response.to_payload(), 400)


class ToolCallDispatcher:
    def __init__(self, service: ViolationService, settings: Settings | None = None):
        self.service = service
        self.settings = settings or default_settings
        self._methods: dict[str, Callable[[dict[str, Any]], dict[str, Any]]] = {
            "initialize": self._initialize,
            "tools/list": self._list_tools,
            "tools/call": self._call_tool,
        }
        self._tool_handlers: dict[str, Callable[[Any], str]] = {
            tools.REPORT_VIOLATION: self._report_violation,
            tools.LIST_STATUTES: self._list_statutes,
            tools.GET_VIOLATION_STATS: self._get_violation_stats,
            tools.LIST_VIOLATIONS: self._list_violations,
        }

    def dispatch(self, body: Any) -> DispatchResult:
        """Handle one decoded JSON-RPC message. Never raises."""
        request_id = _echoable_id(body)
        try:
            request = self._parse_envelope(body)
            request_id = request.id
            result = self._route(request)
            return DispatchResult(JsonRpcResponse(id=request_id, result=result).to_payload())

        except ProtocolError as e:
            logger.warning("Tool-call rejected (%d): %s", e.rpc_code, e.message)
            response = JsonRpcResponse(
                id=request_id,
                error=JsonRpcError(code=e.rpc_code, message=e.message),
            )
            return DispatchResult(response.to_payload(), e.status_code)

        except Exception as e:
            logger.exception("Tool-call internal error: %s", str(e))
            response = JsonRpcResponse(
                id=request_id,
                error=JsonRpcError(
                    code=JsonRpcErrorCode.INTERNAL_ERROR.value,
                    message=f"Internal error: {type(e).__name__}",
                ),
            )
            return DispatchResult(response.to_payload(), 500)

    # =========================================================
    # ENVELOPE + ROUTING
    # =========================================================

    def _parse_envelope(self, body: Any) -> JsonRpcRequest:
        if (
            not isinstance(body, dict)
            or body.get("jsonrpc") != JSONRPC_VERSION
            or not body.get("method")
            or "id" not in body
        ):
            raise ProtocolError(
                JsonRpcErrorCode.INVALID_REQUEST,
                "Invalid Request - must be JSON-RPC 2.0 format",
            )
        try:
            return JsonRpcRequest.model_validate(body)
        except SchemaValidationError as e:
            raise ProtocolError(
                JsonRpcErrorCode.INVALID_REQUEST,
                f"Invalid Request - {_summarize(e)}",
            ) from e

    def _route(self, request: JsonRpcRequest) -> dict[str, Any]:
        handler = self._methods.get(request.method)
        if handler is None:
            raise ProtocolError(
                JsonRpcErrorCode.METHOD_NOT_FOUND,
                f"Method '{request.method}' not found",
                status_code=404,
            )
        params = request.params if request.params is not None else {}
        if not isinstance(params, dict):
            raise ProtocolError(
                JsonRpcErrorCode.INVALID_PARAMS, "Invalid params - params must be an object"
            )
        return handler(params)

    # =========================================================
    # METHODS
    # =========================================================

    def _initialize(self, params: dict[str, Any]) -> dict[str, Any]:
        return {
            "protocolVersion": params.get("protocolVersion")
            or self.settings.DEFAULT_PROTOCOL_VERSION,
            "capabilities": {"tools": {}},
            "serverInfo": {
                "name": self.settings.SERVER_NAME,
                "version": self.settings.SERVER_VERSION,
            },
        }

    def _list_tools(self, params: dict[str, Any]) -> dict[str, Any]:
        # Pagination cursors are accepted and ignored; the list fits one page
        return {"tools": tools.listed_tools()}

    def _call_tool(self, params: dict[str, Any]) -> dict[str, Any]:
        try:
            call = ToolCallParams.model_validate(params)
        except SchemaValidationError as e:
            raise ProtocolError(
                JsonRpcErrorCode.INVALID_PARAMS, f"Invalid params - {_summarize(e)}"
            ) from e

        if not call.name:
            raise ProtocolError(
                JsonRpcErrorCode.INVALID_PARAMS, "Invalid params - missing tool name"
            )

        tool = tools.TOOLS.get(call.name)
        if tool is None:
            raise ProtocolError(
                JsonRpcErrorCode.METHOD_NOT_FOUND,
                f"Tool '{call.name}' not found",
                status_code=404,
            )

        args = self._parse_args(tool.args_model, call.arguments)
        text = self._tool_handlers[tool.name](args)
        return {"content": [{"type": "text", "text": text}], "isError": False}

    @staticmethod
    def _parse_args(model: type[BaseModel], arguments: dict[str, Any]) -> BaseModel:
        try:
            return model.model_validate(arguments)
        except SchemaValidationError as e:
            raise ProtocolError(
                JsonRpcErrorCode.INVALID_PARAMS, f"Invalid params - {_summarize(e)}"
            ) from e

    # =========================================================
    # TOOLS
    # =========================================================

    def _report_violation(self, args: ReportViolationArgs) -> str:
        try:
            record = self.service.submit(
                statute=args.statute,
                responsible_organization=args.responsible_organization,
                offending_content=args.offending_content,
            )
        except ValidationError as e:
            raise ProtocolError(JsonRpcErrorCode.INVALID_PARAMS, e.message) from e
        except UnknownStatuteError as e:
            raise ProtocolError(
                JsonRpcErrorCode.INVALID_PARAMS,
                f"{e.message}. Use list_statutes tool to see available statutes.",
            ) from e

        return tools.render_report(record, get_statute_info(record.statute))

    def _list_statutes(self, args: Any) -> str:
        return tools.render_statutes(self.service.list_statutes())

    def _get_violation_stats(self, args: Any) -> str:
        return tools.render_stats(self.service.stats())

    def _list_violations(self, args: ListViolationsArgs) -> str:
        page = self.service.query(severity=args.severity, limit=args.limit, offset=0)
        return tools.render_violations(page.violations, page.total)

    # =========================================================
    # DISCOVERY
    # =========================================================

    def discovery(self) -> dict[str, Any]:
        """Server descriptor returned by GET /mcp."""
        return {
            "name": self.settings.SERVER_NAME,
            "version": self.settings.SERVER_VERSION,
            "description": self.settings.SERVER_DESCRIPTION,
            "protocol": "mcp",
            "protocolVersion": self.settings.DISCOVERY_PROTOCOL_VERSION,
            "capabilities": {"tools": True},
            "transports": ["streamable-http"],
            "endpoints": {"primary": "/mcp"},
        }

    def initialized_notification(self) -> dict[str, Any]:
        """Notification sent to clients opening an event stream on GET /mcp."""
        return {
            "jsonrpc": JSONRPC_VERSION,
            "method": "notifications/initialized",
            "params": {
                "protocolVersion": self.settings.DISCOVERY_PROTOCOL_VERSION,
                "capabilities": {"tools": {"listChanged": False}},
                "serverInfo": {
                    "name": self.settings.SERVER_NAME,
                    "version": self.settings.SERVER_VERSION,
                    "description": self.settings.SERVER_DESCRIPTION,
                },
            },
        }
