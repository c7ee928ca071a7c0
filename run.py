"""Entry point for the Records API server.

Launches the FastAPI application under uvicorn.  Intended to be
executed from the project root, for example under Docker or a process
supervisor where you only specify a single Python file to run.

Configuration such as the database path, storage backend and log
level is read from environment variables (see
``records_api.app.core.config``).  Host and port come from
``API_HOST``/``API_PORT`` unless given on the command line.

Usage:
    python run.py [--host 0.0.0.0] [--port 8000] [--reload]
"""
import argparse
import asyncio
import logging
import os
from typing import List, Optional

from uvicorn import Config, Server

APP_PATH = "records_api.app.main:app"


def parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    ap = argparse.ArgumentParser(description="Run the Records API.")
    ap.add_argument("--host", default=os.getenv("API_HOST", "0.0.0.0"), help="Interface to bind")
    ap.add_argument("--port", type=int, default=int(os.getenv("API_PORT", "8000")), help="Port to listen on")
    ap.add_argument("--reload", action="store_true", help="Restart on code changes (development only)")
    return ap.parse_args(argv)


async def run_api(host: str, port: int) -> None:
    """Start the API using a uvicorn ``Server`` on the running loop."""
    config = Config(app=APP_PATH, host=host, port=port, reload=False, log_level="info")
    server = Server(config)
    await server.serve()


def main(argv: Optional[List[str]] = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(level=logging.INFO)
    if args.reload:
        # Reload needs uvicorn's supervisor process, which owns its own loop.
        import uvicorn

        uvicorn.run(APP_PATH, host=args.host, port=args.port, reload=True, log_level="info")
        return
    try:
        asyncio.run(run_api(args.host, args.port))
    except KeyboardInterrupt:
        logging.info("Shutting down")


if __name__ == "__main__":
    main()
