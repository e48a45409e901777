#!/usr/bin/env python3
"""
mcpolice/cli.py - Command-Line Interface

Usage:
    mcpolice serve --port 8000
    mcpolice stdio
    mcpolice statutes --json
    mcpolice clear

Exit Codes:
    0 = success
    1 = storage backend failure
"""
import argparse
import json
import logging
import sys

from mcpolice.config import settings
from mcpolice.errors import StoreError
from mcpolice.mcp.dispatcher import ToolCallDispatcher
from mcpolice.mcp.stdio import serve_stdio
from mcpolice.models.statute import get_all_statutes
from mcpolice.services.violations import ViolationService
from mcpolice.store import ViolationStore, get_store_backend

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mcpolice",
        description="MCPolice - International AI Compliance Monitoring System",
    )
    parser.add_argument(
        "--log-level",
        default=settings.LOG_LEVEL,
        help="Logging level (default: %(default)s)",
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default=settings.API_HOST)
    serve_parser.add_argument("--port", type=int, default=settings.API_PORT)

    subparsers.add_parser("stdio", help="Run the tool-call protocol on stdin/stdout")

    statutes_parser = subparsers.add_parser("statutes", help="Print the statute registry")
    statutes_parser.add_argument(
        "--json", action="store_true", help="Print as JSON instead of text"
    )

    subparsers.add_parser("clear", help="Delete every stored violation")

    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)

    # stderr only: stdout belongs to the protocol in stdio mode
    logging.basicConfig(
        level=args.log_level.upper(),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
        stream=sys.stderr,
    )

    if args.command == "serve":
        return run_serve(args)
    if args.command == "stdio":
        return run_stdio(args)
    if args.command == "statutes":
        return run_statutes(args)
    if args.command == "clear":
        return run_clear(args)
    return 2


def _build_service() -> ViolationService:
    return ViolationService(ViolationStore(get_store_backend(settings)))


def run_serve(args: argparse.Namespace) -> int:
    import uvicorn

    from mcpolice.api.app import create_app

    logger.info("Starting MCPolice API on %s:%d", args.host, args.port)
    uvicorn.run(create_app(_build_service()), host=args.host, port=args.port)
    return 0


def run_stdio(args: argparse.Namespace) -> int:
    dispatcher = ToolCallDispatcher(_build_service(), settings)
    serve_stdio(dispatcher, sys.stdin, sys.stdout)
    return 0


def run_statutes(args: argparse.Namespace) -> int:
    statutes = get_all_statutes()
    if args.json:
        print(json.dumps([s.to_dict() for s in statutes], indent=2))
        return 0

    for s in statutes:
        print(f"{s.article} ({s.organization}) [{s.severity.value}]")
        print(f"  Jurisdiction: {', '.join(s.jurisdiction)}")
    return 0


def run_clear(args: argparse.Namespace) -> int:
    try:
        count = _build_service().clear()
    except StoreError as e:
        print(f"Failed to clear data: {e.message}", file=sys.stderr)
        return 1
    print(f"Cleared {count} violations from database")
    return 0


if __name__ == "__main__":
    sys.exit(main())
