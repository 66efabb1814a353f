"""
Gateway main entry point.

Loads settings, configures logging and serves the HTTP API with aiohttp.

Commands:
    serve (default)  Start the server
    init             Write the default config file if missing and exit
"""

import argparse
import asyncio
import sys
from pathlib import Path

from aiohttp import web
from loguru import logger

from gateway.config.settings import (
    DEFAULT_CONFIG_FILE,
    Settings,
    load_settings,
    write_default_config,
)
from gateway.utils.exceptions import ConfigError
from server.initialization import create_app
from server.initialization.logging import setup_logging


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Withdrawal gateway")
    parser.add_argument(
        "command",
        nargs="?",
        default="serve",
        choices=("serve", "init"),
        help="serve the API (default) or write the default config and exit",
    )
    parser.add_argument(
        "--config",
        type=Path,
        default=Path(DEFAULT_CONFIG_FILE),
        help=f"path to the JSON config file (default: {DEFAULT_CONFIG_FILE})",
    )
    return parser.parse_args(argv)


async def serve(settings: Settings) -> None:
    """
    Run the HTTP server until cancelled.

    Args:
        settings: Gateway settings
    """
    app = create_app(settings)
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, settings.bind_host, settings.bind_port)
    await site.start()

    logger.info(f"Listening on {settings.address}")

    try:
        await asyncio.Event().wait()
    finally:
        await runner.cleanup()


def run(argv: list[str] | None = None) -> int:
    """
    Console entry point.

    Returns:
        Process exit code
    """
    args = parse_args(argv)

    if args.command == "init":
        if not args.config.exists():
            write_default_config(args.config)
        return 0

    try:
        settings = load_settings(args.config)
    except ConfigError as e:
        logger.error(str(e))
        return 1

    setup_logging(settings)

    try:
        asyncio.run(serve(settings))
    except KeyboardInterrupt:
        logger.info("Gateway stopped by user")
    return 0


if __name__ == "__main__":
    sys.exit(run())
