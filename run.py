"""Entry point for the Book Store API.

This script serves the FastAPI application with Uvicorn.  The
listening address and log level come from the environment (see
``book_store_api.app.core.config``) and may be overridden on the
command line.

Usage:
    python run.py [--host HOST] [--port PORT] [--log-level LEVEL]
"""
import argparse
import asyncio
import logging
from typing import List, Optional

from uvicorn import Config, Server

from book_store_api.app.core.config import settings
from book_store_api.app.core.logging_config import setup_logging
from book_store_api.app.main import app

LOG_LEVELS = ["critical", "error", "warning", "info", "debug"]


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Serve the Book Store API")
    parser.add_argument("--host", default=settings.host, help="Interface to bind (default: %(default)s)")
    parser.add_argument("--port", type=int, default=settings.port, help="Port to listen on (default: %(default)s)")
    parser.add_argument(
        "--log-level",
        type=str.lower,
        choices=LOG_LEVELS,
        default=settings.log_level.lower(),
        help="Log level name (default: %(default)s)",
    )
    return parser.parse_args(argv)


async def serve(host: str, port: int, log_level: str) -> None:
    """Start the API using Uvicorn."""
    setup_logging(log_level, settings.log_file or None)
    logging.getLogger(__name__).info("Book API listening at http://%s:%d", host, port)
    config = Config(app=app, host=host, port=port, reload=False, log_level=log_level)
    server = Server(config)
    await server.serve()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    try:
        asyncio.run(serve(args.host, args.port, args.log_level))
    except (KeyboardInterrupt, SystemExit):
        pass


if __name__ == "__main__":
    main()
