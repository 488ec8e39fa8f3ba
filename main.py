"""Main entry point for Goal Assistant."""

import argparse
import asyncio
from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from goal_assistant.api import create_fastapi_app
from goal_assistant.app import Application
from goal_assistant.client.console import run_console
from goal_assistant.config import load_settings
from goal_assistant.logging_config import setup_logging


def main():
    """Run the API server or the terminal chat."""
    parser = argparse.ArgumentParser(description="Goal-setting assistant")
    parser.add_argument(
        "mode",
        nargs="?",
        choices=["serve", "chat"],
        default="serve",
        help="serve: run the turn endpoint; chat: talk to a running server",
    )
    args = parser.parse_args()

    load_dotenv(Path(__file__).resolve().parent / ".env")
    settings = load_settings()

    if args.mode == "chat":
        setup_logging(settings.log_level, settings.log_file, console=False)
        asyncio.run(run_console(settings.api_url, timeout=settings.client_timeout))
        return

    setup_logging(settings.log_level, settings.log_file)
    app = create_fastapi_app(Application(settings=settings))

    uvicorn.run(
        app,
        host=settings.api_host,
        port=settings.api_port,
        log_level="info",
    )


if __name__ == "__main__":
    main()
