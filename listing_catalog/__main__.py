"""Command line entry point.

``listing-catalog serve`` runs the API under uvicorn;
``listing-catalog export`` dumps every assembled property as JSON lines.
"""

import argparse
import signal
import sys
from pathlib import Path

import uvicorn

from listing_catalog.core.config import settings
from listing_catalog.core.logging import setup_logging
from listing_catalog.main import create_application
from listing_catalog.services.database import PropertyDatabase
from listing_catalog.services.properties import get_all_properties


def _exit_on_signal(signum, frame) -> None:
    # Normal exit so atexit and finally blocks close the datastore
    sys.exit(128 + signum)


def install_exit_handlers(*names: str) -> None:
    """Turn the named termination signals into a normal interpreter exit."""
    for name in names:
        if hasattr(signal, name):
            signal.signal(getattr(signal, name), _exit_on_signal)


def serve(args: argparse.Namespace) -> int:
    database = PropertyDatabase(args.db, echo=settings.DEBUG) if args.db else None
    # uvicorn handles SIGINT and SIGTERM itself
    install_exit_handlers("SIGHUP")

    uvicorn.run(
        create_application(database),
        host=args.host,
        port=args.port,
        log_config=None,
    )
    return 0


def export(args: argparse.Namespace) -> int:
    install_exit_handlers("SIGHUP", "SIGTERM")
    database = PropertyDatabase(args.db or settings.DATABASE_PATH)
    try:
        with database.session() as db:
            for view in get_all_properties(db):
                sys.stdout.write(view.model_dump_json(by_alias=True) + "\n")
    finally:
        database.close()
    return 0


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="listing-catalog",
        description="Read-only real-estate listing catalog",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser("serve", help="Run the HTTP API")
    serve_parser.add_argument("--host", default="127.0.0.1")
    serve_parser.add_argument("--port", type=int, default=8000)
    serve_parser.add_argument("--db", type=Path, default=None, help="Listing datastore path")
    serve_parser.set_defaults(func=serve)

    export_parser = subparsers.add_parser("export", help="Write all properties as JSON lines")
    export_parser.add_argument("--db", type=Path, default=None, help="Listing datastore path")
    export_parser.set_defaults(func=export)

    args = parser.parse_args(argv)
    setup_logging()
    return args.func(args)


if __name__ == "__main__":
    sys.exit(main())
