#!/usr/bin/env python3
"""Dream Vacation Planner - command line client."""

import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import httpx
from rich.console import Console
from rich.prompt import Prompt

from planner.api_client import DestinationsClient
from planner.app import VacationPlanner
from planner.config import get_planner_settings
from planner.render import print_destinations, vacation_types_table
from planner.vacation_types import VacationType

logger = logging.getLogger(__name__)

console = Console()

VACATION_TYPE_VALUES = [t.value for t in VacationType]


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="dreamvacation", description="Plan your perfect getaway")
    parser.add_argument("--api-url", help="API base URL (defaults to $API_URL)")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")

    sub = parser.add_subparsers(dest="command", required=True)
    sub.add_parser("types", help="Show vacation types")
    sub.add_parser("list", help="List saved destinations")
    sub.add_parser("status", help="Check the API is running")

    add = sub.add_parser("add", help="Add a destination")
    add.add_argument("country")
    add.add_argument("--type", dest="vacation_type", choices=VACATION_TYPE_VALUES)

    remove = sub.add_parser("remove", help="Remove a destination")
    remove.add_argument("id", type=int)

    sub.add_parser("interactive", help="Pick a vacation type and add destinations")
    return parser


async def interactive(planner: VacationPlanner):
    """Prompt loop mirroring the web form"""
    await planner.load()
    console.print(vacation_types_table())
    choice = Prompt.ask("Vacation type", choices=VACATION_TYPE_VALUES)
    planner.select_vacation_type(choice)
    console.print(vacation_types_table(planner.selected_vacation_type))

    while planner.show_form:
        print_destinations(console, planner.destinations)
        entry = Prompt.ask("Country ('rm <id>' to remove, 'q' to quit)").strip()
        if entry in ("q", "quit"):
            break
        if entry.startswith("rm "):
            try:
                destination_id = int(entry[3:])
            except ValueError:
                console.print("[red]Usage: rm <id>[/red]")
                continue
            await planner.delete(destination_id)
            continue
        if not entry:
            continue
        planner.country = entry
        await planner.submit()


async def run(args: argparse.Namespace) -> int:
    settings = get_planner_settings()
    api_url = args.api_url or settings.API_URL

    if args.command == "types":
        console.print(vacation_types_table())
        return 0

    async with DestinationsClient(api_url, timeout=settings.REQUEST_TIMEOUT) as client:
        planner = VacationPlanner(client)

        if args.command == "status":
            try:
                info = await client.info()
            except httpx.HTTPError as e:
                logger.error(f"API not reachable at {api_url}: {e}")
                return 1
            console.print(f"[green]{info.get('message')}[/green]")
            return 0

        if args.command == "list":
            ok = await planner.load()
            print_destinations(console, planner.destinations)
            return 0 if ok else 1

        if args.command == "add":
            if args.vacation_type:
                planner.select_vacation_type(args.vacation_type)
            planner.country = args.country
            ok = await planner.submit()
            print_destinations(console, planner.destinations)
            return 0 if ok else 1

        if args.command == "remove":
            ok = await planner.delete(args.id)
            print_destinations(console, planner.destinations)
            return 0 if ok else 1

        if args.command == "interactive":
            await interactive(planner)
            return 0

    return 2


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    )
    return asyncio.run(run(args))


if __name__ == "__main__":
    sys.exit(main())
