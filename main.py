from __future__ import annotations

import argparse
import logging

import uvicorn

from app.utils.env import get_log_level


def _parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Network statistics relay server.")
    parser.add_argument(
        "--host",
        default="0.0.0.0",
        help="Interface to bind the HTTP server to.",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=8080,
        help="Port to listen on.",
    )
    parser.add_argument(
        "--reload",
        action="store_true",
        help="Restart the server when source files change.",
    )
    return parser.parse_args()


def _main() -> int:
    args = _parse_args()
    level = get_log_level()
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    uvicorn.run(
        "app.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(_main())
