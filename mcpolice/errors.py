"""
errors.py - Error taxonomy.

FAILURE SEMANTICS:
- ValidationError / UnknownStatuteError -> 400, message surfaced to caller
- NotFoundError -> 404
- StoreError -> 500, generic message (backend error text is only logged)
- ProtocolError -> JSON-RPC error object with its own code and HTTP status
"""

from typing import Any

REQUIRED_REPORT_FIELDS = ("statute", "responsible_organization", "offending_content")


class ViolationServiceError(Exception):
    """Base exception for violation service failures."""

    code = "ERROR"
    status_code = 500

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ValidationError(ViolationServiceError):
    """400 - a required report field is missing or empty."""

    code = "MISSING_REQUIRED_FIELD"
    status_code = 400

    def __init__(self, missing: list[str]):
        super().__init__(
            "Missing required fields: " + ", ".join(REQUIRED_REPORT_FIELDS),
            details={"missing": missing},
        )
        self.missing = missing


class UnknownStatuteError(ViolationServiceError):
    """400 - the statute has no registry entry."""

    code = "UNKNOWN_STATUTE"
    status_code = 400

    def __init__(self, statute: str):
        super().__init__(f"Unknown statute: {statute}", details={"statute": statute})
        self.statute = statute


class NotFoundError(ViolationServiceError):
    """404 - no violation stored under the id."""

    code = "NOT_FOUND"
    status_code = 404

    def __init__(self, violation_id: str):
        super().__init__("Violation not found", details={"id": violation_id})
        self.violation_id = violation_id


class StoreError(ViolationServiceError):
    """500 - the key/value backend failed."""

    code = "STORE_ERROR"
    status_code = 500


class ProtocolError(ViolationServiceError):
    """Tool-call protocol failure, rendered as a JSON-RPC error object."""

    code = "PROTOCOL_ERROR"

    def __init__(
        self,
        rpc_code: int,
        message: str,
        status_code: int = 400,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message, details)
        self.rpc_code = int(rpc_code)
        self.status_code = status_code
