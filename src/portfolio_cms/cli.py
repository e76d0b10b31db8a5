"""Command line entry point: seed the content store or serve the API."""

from __future__ import annotations

import argparse
import asyncio
import logging
import os
from collections.abc import Sequence

from portfolio_cms.data.store import SqlDocumentStore
from portfolio_cms.services import InitializationReport, initialize_all

logger = logging.getLogger(__name__)


def configure_logging() -> None:
    """Configure root logging from PORTFOLIO_LOG_LEVEL (default INFO)."""
    level_name = os.getenv("PORTFOLIO_LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    if not isinstance(level, int):
        level = logging.INFO
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="portfolio-cms",
        description="Portfolio content store and API",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    subparsers.add_parser("seed", help="Insert default content into empty collections")

    serve = subparsers.add_parser("serve", help="Run the HTTP API")
    serve.add_argument("--host", default="0.0.0.0", help="Bind address (default: 0.0.0.0)")
    serve.add_argument("--port", type=int, default=8000, help="Port (default: 8000)")
    serve.add_argument("--reload", action="store_true", help="Reload on code changes")
    return parser


async def seed(database_url: str | None = None) -> InitializationReport:
    """Create the schema and seed every empty collection."""
    store = SqlDocumentStore.from_url(database_url)
    try:
        await store.create_schema()
        return await initialize_all(store)
    finally:
        await store.close()


def print_report(report: InitializationReport) -> None:
    print("=" * 60)
    print("Content initialization")
    print("=" * 60)
    for collection, count in sorted(report.inserted.items()):
        status = f"{count} inserted" if count else "already populated"
        print(f"  ✅ {collection}: {status}")
    for collection, error in sorted(report.failed.items()):
        print(f"  ❌ {collection}: {error}")


def run_cli(argv: Sequence[str] | None = None) -> int:
    """Parse *argv* and run the selected command.

    Returns:
        Exit code (0 for success, 1 for failure).
    """
    args = build_parser().parse_args(argv)
    configure_logging()

    if args.command == "seed":
        report = asyncio.run(seed())
        print_report(report)
        return 0 if report.ok else 1

    from portfolio_cms.api.main import main as serve_api

    serve_api(host=args.host, port=args.port, reload=args.reload)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point for the CLI application."""
    try:
        return run_cli(argv)
    except KeyboardInterrupt:
        print("\n\n⚠️  Interrupted by user. Exiting.")
        return 130
    except Exception as exc:
        logger.exception("Command failed")
        print(f"\n❌ Unexpected error: {exc}")
        return 1
