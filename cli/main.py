"""CLI entry point and argument parsing"""

import argparse
import asyncio
import logging
import os
import sys
from typing import List, Optional

import httpx
from rich.console import Console
from rich.prompt import Prompt

import settings
from cli.status_display import show_tokens
from games.graphql import PersistedQuery
from nso_oauth import generate_login_url
from pipeline import login, login_with_session_token, splatoon3_session
from utils.errors import NSOError

console = Console()
logger = logging.getLogger(__name__)


def setup_logging(debug: bool) -> None:
    """Configure the root logger from LOG_LEVEL, or DEBUG with a log file"""
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    console_handler = logging.StreamHandler()
    console_handler.setFormatter(formatter)
    root_logger.addHandler(console_handler)

    if debug:
        root_logger.setLevel(logging.DEBUG)
        log_file = os.path.abspath('nso_debug.log')
        file_handler = logging.FileHandler(log_file, mode='a', encoding='utf-8')
        file_handler.setFormatter(formatter)
        root_logger.addHandler(file_handler)
        logger.info(f"Debug logging enabled - appending to {log_file}")
    else:
        root_logger.setLevel(settings.LOG_LEVEL)


async def run(session_token: Optional[str], queries: List[PersistedQuery], reveal: bool) -> None:
    """Drive the Splatoon 3 pipeline and print the requested queries"""
    timeout = httpx.Timeout(settings.REQUEST_TIMEOUT, connect=settings.CONNECT_TIMEOUT)
    async with httpx.AsyncClient(timeout=timeout) as client:
        if session_token:
            nso = await login_with_session_token(session_token, client)
        else:
            context = generate_login_url()
            console.print("\n[bold]Step 1:[/bold] Open this URL and log in:")
            console.print(context.redirect_url, soft_wrap=True)
            console.print("\n[bold]Step 2:[/bold] Right-click 'Select this person' and copy the link")
            console.print(f"[dim]The URL should start with: {settings.REDIRECT_URI}#[/dim]\n")
            select_url = Prompt.ask("Select URL")
            nso = await login(select_url, context.verifier, client)

        splatoon3 = await splatoon3_session(nso, client)
        show_tokens(nso, splatoon3, console, reveal=reveal)

        for query in queries:
            response = await splatoon3.query(query, client=client)
            console.print(f"\n[bold]{query.name}[/bold] ({response.status_code})")
            console.print(response.text, soft_wrap=True, markup=False)


def main():
    """Entry point for the CLI"""
    parser = argparse.ArgumentParser(description="Nintendo Switch Online token pipeline demo")
    parser.add_argument("--debug", "-d", action="store_true", help="Enable debug logging")
    parser.add_argument(
        "--session-token",
        type=str,
        default=None,
        help="Reuse an existing session_token instead of logging in through the browser"
    )
    parser.add_argument(
        "--query",
        "-q",
        action="append",
        choices=[query.name.lower() for query in PersistedQuery],
        default=None,
        help="Persisted query to run after login (repeatable, default: schedules)"
    )
    parser.add_argument(
        "--show-tokens",
        action="store_true",
        help="Print full token values instead of redacted prefixes"
    )

    args = parser.parse_args()
    setup_logging(args.debug)

    queries = [PersistedQuery[name.upper()] for name in (args.query or ["schedules"])]

    try:
        asyncio.run(run(args.session_token, queries, args.show_tokens))
    except KeyboardInterrupt:
        console.print("\n[yellow]Cancelled by user[/yellow]")
        sys.exit(130)
    except NSOError as e:
        console.print(f"[red]ERROR:[/red] {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
