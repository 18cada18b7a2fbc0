"""
Command line interface for the smart plug board.

Usage:
    plugboard serve --port 8000
    plugboard turn-on --device tv
    plugboard make-service payment_gateway --directory services
"""

import argparse
import os
import sys
from typing import List, Optional

import structlog

from plugboard.cli.make_service import make_service
from plugboard.core.domain.devices import PowerInterface
from plugboard.core.use_cases.power_control import PowerController
from plugboard.infrastructure.di.container import PowerServiceProvider, build_container
from plugboard.infrastructure.logging.config import configure_logging
from plugboard.shared.exceptions import PlugBoardError

logger = structlog.get_logger(__name__)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="plugboard",
        description="Smart plug board: a binding container demo",
    )
    parser.add_argument("--log-level", default=None, help="Log level (default: LOG_LEVEL or INFO)")
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve = subparsers.add_parser("serve", help="Run the HTTP server")
    serve.add_argument("--host", default=os.getenv("API_HOST", "0.0.0.0"))
    serve.add_argument("--port", type=int, default=int(os.getenv("API_PORT", "8000")))
    serve.add_argument("--reload", action="store_true",
                       default=os.getenv("API_RELOAD", "false").lower() == "true")

    turn_on = subparsers.add_parser("turn-on", help="Turn on a device from the command line")
    turn_on.add_argument("--device", default=None, help="fan, light or tv (default: fan)")

    make = subparsers.add_parser("make-service", help="Create a new service module")
    make.add_argument("name", help="Service name, converted to StudlyCase")
    make.add_argument("--directory", default="services", help="Target directory (default: services)")

    return parser


def run_turn_on(device: Optional[str]) -> str:
    """Bind, resolve and drive the power capability without the web stack."""
    container = build_container(PowerServiceProvider(selector=lambda: device))
    controller = PowerController(container.make(PowerInterface))
    return controller.show().message


def run_serve(host: str, port: int, reload: bool) -> None:
    import uvicorn

    uvicorn.run(
        "plugboard.main:app",
        host=host,
        port=port,
        reload=reload,
        log_config=None,
        access_log=False,
    )


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(level=args.log_level)

    try:
        if args.command == "serve":
            run_serve(args.host, args.port, args.reload)
        elif args.command == "turn-on":
            print(run_turn_on(args.device))
        elif args.command == "make-service":
            path = make_service(args.name, args.directory)
            print(f"Service created: {path}")
    except PlugBoardError as e:
        print(e.message, file=sys.stderr)
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
