# start_app.py
"""Launch the order API server."""

from __future__ import annotations

import argparse
import os
import sys

import uvicorn
from dotenv import load_dotenv

import config


def main(argv: list[str] | None = None) -> None:
    """Load settings, then start the API."""

    parser = argparse.ArgumentParser()
    parser.add_argument(
        "--seed-demo",
        action="store_true",
        help="Start with the demo orders already in the store",
    )
    parser.add_argument(
        "--port",
        type=int,
        default=int(os.getenv("PORT", "8000")),
        help="Port to bind (default: $PORT or 8000)",
    )
    args = parser.parse_args(argv)

    load_dotenv()  # load environment variables from a .env file

    if args.seed_demo:
        os.environ["SEED_DEMO_ORDERS"] = "true"

    config.get_settings.cache_clear()
    config.get_settings()  # ensure settings are initialized with any override

    try:
        uvicorn.run(
            "kitchenpos.app.main:app",
            host="0.0.0.0",  # nosec B104: bind for local development
            port=args.port,
            log_level="info",
        )
    except ModuleNotFoundError as exc:
        missing = exc.name or str(exc)
        print(
            f"Missing dependency: {missing}. Install it with 'pip install {missing}'",
            file=sys.stderr,
        )
        raise SystemExit(1)


if __name__ == "__main__":
    main()
