"""
Run the task API with uvicorn.

Usage:
  python -m taskapi [--host 127.0.0.1] [--port 3000] [--backend memory|json|sql] [--data-file tasks.json]
"""
from __future__ import annotations

import argparse
import dataclasses
import logging
import sys

import uvicorn

from taskapi.app import create_app
from taskapi.core.config import BACKENDS, get_settings
from taskapi.core.logging_setup import setup_logging

logger = logging.getLogger("taskapi")


def build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="taskapi", description="Serve the task CRUD API")
    ap.add_argument("--host", help="Bind address (default: HOST or 127.0.0.1)")
    ap.add_argument("--port", type=int, help="Bind port (default: PORT or 3000)")
    ap.add_argument("--backend", choices=BACKENDS, help="Task store (default: TASKS_BACKEND or memory)")
    ap.add_argument("--data-file", help="JSON file for the json backend")
    ap.add_argument("--database-url", help="SQLAlchemy URL for the sql backend")
    ap.add_argument("--log-level", help="Logging level (default: LOG_LEVEL or INFO)")
    return ap


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    overrides = {
        "host": args.host,
        "port": args.port,
        "tasks_backend": args.backend,
        "tasks_data_file": args.data_file,
        "database_url": args.database_url,
        "log_level": args.log_level.upper() if args.log_level else None,
    }
    settings = dataclasses.replace(settings, **{k: v for k, v in overrides.items() if v is not None})

    setup_logging(settings.log_level)
    app = create_app(settings=settings)
    logger.info("Server running at http://%s:%s/", settings.host, settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    try:
        main()
    except KeyboardInterrupt:  # pragma: no cover - CLI usage
        sys.exit(0)
