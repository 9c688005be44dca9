from __future__ import annotations

import argparse

import uvicorn

from pubsuffix.config import get_service_host, get_service_port
from pubsuffix.logging_utils import configure_logging


def serve(host: str, port: int) -> None:
    uvicorn.run("pubsuffix.service.api:app", host=host, port=port, reload=False, log_config=None)


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the pubsuffix inspection service")
    parser.add_argument("--host", default=get_service_host())
    parser.add_argument("--port", type=int, default=get_service_port())
    args = parser.parse_args()
    configure_logging()
    serve(args.host, args.port)


if __name__ == "__main__":
    main()
