"""Run the File Relay API with uvicorn."""

from __future__ import annotations

import argparse

import uvicorn

from filerelay.infrastructure import configure_logging, get_settings


def main() -> int:
    settings = get_settings()

    parser = argparse.ArgumentParser(description="Serve the File Relay API")
    parser.add_argument("--host", default=settings.api_host, help=f"Bind address (default: {settings.api_host})")
    parser.add_argument("--port", type=int, default=settings.api_port, help=f"Port (default: {settings.api_port})")
    parser.add_argument("--reload", action="store_true", help="Reload on code changes (development only)")
    args = parser.parse_args()

    configure_logging(settings.log_level)

    uvicorn.run(
        "filerelay.api.main:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        log_level=settings.log_level.lower(),
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
