from __future__ import annotations

import argparse

import uvicorn

from uber_service.config import get_settings
from uber_service.main import StartupError, create_app, start


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(description="Fake Uber echo service")
    parser.add_argument("--host", default=None, help="Bind address (default: HOST setting)")
    parser.add_argument("--port", type=int, default=None, help="Bind port (default: PORT setting)")
    parser.add_argument("--log-level", default=None, help="Log level name (default: LOG_LEVEL setting)")
    args = parser.parse_args(argv)

    try:
        settings = get_settings()
    except Exception as exc:
        parser.exit(status=1, message=f"Failed to start Uber service: failed to load configuration: {exc}\n")

    overrides = {
        "host": args.host,
        "port": args.port,
        "log_level": args.log_level,
    }
    settings = settings.model_copy(update={k: v for k, v in overrides.items() if v is not None})

    try:
        service = start(settings)
    except StartupError as exc:
        parser.exit(status=1, message=f"Failed to start Uber service: {exc}\n")

    # Keep our logging config; access log off since the handler logs each request.
    uvicorn.run(create_app(service), host=settings.host, port=settings.port, access_log=False, log_config=None)


if __name__ == "__main__":
    main()
