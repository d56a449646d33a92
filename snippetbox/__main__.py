"""
Snippetbox: Command Line Entry Point
=======================================

Usage:
    python -m snippetbox                      # listen on :4000
    python -m snippetbox -addr :8080          # custom port, all interfaces
    python -m snippetbox -addr 127.0.0.1:4000 # loopback only

Startup sequence:
    1. argparse reads the -addr flag (falls back to ADDR / the default)
    2. Logging is configured (structured lines on stdout)
    3. The application is built with the logger injected
    4. uvicorn serves it until interrupted

Exit status:
    0  server stopped by a signal (Ctrl+C, SIGTERM)
    1  server failed to start (e.g. address already in use) or crashed
    2  invalid command line
"""

import argparse
import sys
from typing import List, Optional, Tuple

import uvicorn

from snippetbox import __version__
from snippetbox.config import Settings
from snippetbox.log import setup_logging
from snippetbox.main import create_app


def parse_addr(addr: str) -> Tuple[str, int]:
    """
    Split a "[host]:port" network address.

    ":4000"          → ("0.0.0.0", 4000)   empty host listens on all interfaces
    "localhost:4000" → ("localhost", 4000)
    "[::1]:4000"     → ("::1", 4000)

    Raises: ValueError when the port is missing or not in 0-65535.
    """
    host, sep, port_text = addr.rpartition(":")
    if not sep:
        raise ValueError(f"missing port in address '{addr}'")
    if host.startswith("[") and host.endswith("]"):
        host = host[1:-1]
    if not port_text.isdigit():
        raise ValueError(f"invalid port in address '{addr}'")
    port = int(port_text)
    if port > 65535:
        raise ValueError(f"invalid port in address '{addr}'")
    return host or "0.0.0.0", port


def _address(value: str) -> str:
    try:
        parse_addr(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc
    return value


def build_parser(settings: Settings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="snippetbox",
        description="Snippetbox web application",
    )
    parser.add_argument(
        "-addr", "--addr",
        dest="addr",
        type=_address,
        default=settings.addr,
        help=f"HTTP network address (default: {settings.addr})",
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"%(prog)s {__version__}",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Parse flags, wire dependencies, and run the HTTP server.

    Returns the process exit status instead of calling sys.exit itself so
    tests can drive it directly.
    """
    settings = Settings()
    args = build_parser(settings).parse_args(argv)
    settings.addr = args.addr

    logger = setup_logging(settings)
    host, port = parse_addr(settings.addr)
    app = create_app(settings=settings, logger=logger)

    config = uvicorn.Config(
        app,
        host=host,
        port=port,
        log_config=None,   # keep the handlers installed by setup_logging()
        access_log=False,  # RequestLoggingMiddleware logs every request
    )
    server = uvicorn.Server(config)

    logger.info("starting server", extra={"addr": settings.addr})
    try:
        server.run()
    except SystemExit as exc:
        # uvicorn logs the bind error itself, then exits the event loop this way
        logger.error("server failed to start", extra={"addr": settings.addr, "code": exc.code})
        return 1
    except Exception as exc:
        logger.error("server stopped unexpectedly", exc_info=exc, extra={"addr": settings.addr})
        return 1

    if not server.started:
        logger.error("server failed to start", extra={"addr": settings.addr})
        return 1

    logger.info("server stopped", extra={"addr": settings.addr})
    return 0


if __name__ == "__main__":
    sys.exit(main())
