"""
deps.py - FastAPI dependencies.

The service and dispatcher are built once per application by create_app()
and stored on app.state; routes receive them through Depends().
"""

from fastapi import Request

from mcpolice.mcp.dispatcher import ToolCallDispatcher
from mcpolice.services.violations import ViolationService


def get_violation_service(request: Request) -> ViolationService:
    return request.app.state.violation_service


def get_dispatcher(request: Request) -> ToolCallDispatcher:
    return request.app.state.dispatcher
