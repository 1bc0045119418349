"""Command that loads the configuration and serves the HTTP API."""

from __future__ import annotations

import argparse
import logging
import signal
import sys
from pathlib import Path
from wsgiref.simple_server import make_server

from .config import build_dependencies, read_config
from .http_api import create_app


def _configure_logging(service_name: str) -> None:
    safe_name = service_name.replace("%", "%%")
    logging.basicConfig(
        level=logging.INFO,
        stream=sys.stdout,
        format=f"%(asctime)s %(levelname)s service={safe_name} %(message)s",
    )


def _interrupt(signum, frame):
    raise KeyboardInterrupt


def main(argv: list[str] | None = None) -> None:
    """Start the service and serve until interrupted or terminated."""
    parser = argparse.ArgumentParser(prog="followers-service")
    parser.add_argument(
        "--config-dir",
        type=Path,
        default=None,
        help="directory holding <ENVIRONMENT>.json",
    )
    args = parser.parse_args(argv)

    try:
        config = read_config(args.config_dir)
    except (OSError, ValueError) as exc:
        raise RuntimeError(f"fatal error loading config file: {exc}") from exc

    _configure_logging(config.service_name)

    try:
        dependencies = build_dependencies(config)
    except Exception as exc:
        raise RuntimeError(f"fatal error building dependencies: {exc}") from exc

    app = create_app(config, dependencies)
    port = int(config.port) if config.port else 0
    server = make_server("", port, app)
    print(f"starting server on port: {config.port}")

    previous = signal.signal(signal.SIGTERM, _interrupt)
    try:
        server.serve_forever()
    except KeyboardInterrupt:
        pass
    finally:
        signal.signal(signal.SIGTERM, previous)
        server.server_close()