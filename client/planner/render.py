"""
Rich rendering for the planner
"""
from typing import Any, Dict, List, Optional

from rich.console import Console
from rich.table import Table

from planner.vacation_types import VACATION_TYPES, VacationType, vacation_emoji


def format_population(population: Optional[int]) -> str:
    if population is None:
        return "-"
    return f"{population:,}"


def vacation_types_table(selected: Optional[VacationType] = None) -> Table:
    table = Table(title="🏖️ Dream Vacation Planner", caption="Plan your perfect getaway!")
    table.add_column("", width=3)
    table.add_column("Type", style="bold")
    table.add_column("Title")
    table.add_column("Description", style="dim")

    for choice in VACATION_TYPES:
        marker = "[green]✔[/green] " if choice.type == selected else ""
        table.add_row(choice.icon, f"{marker}{choice.type.value}", choice.title, choice.description)
    return table


def destinations_table(destinations: List[Dict[str, Any]]) -> Table:
    table = Table(title="Your Dream Destinations")
    table.add_column("", width=3)
    table.add_column("ID", justify="right")
    table.add_column("Country", style="bold")
    table.add_column("Capital")
    table.add_column("Population", justify="right")
    table.add_column("Region")
    table.add_column("Type")

    for dest in destinations:
        table.add_row(
            vacation_emoji(dest.get("vacationType")),
            str(dest["id"]),
            dest.get("country") or "",
            dest.get("capital") or "",
            format_population(dest.get("population")),
            dest.get("region") or "",
            dest.get("vacationType") or "",
        )
    return table


def print_destinations(console: Console, destinations: List[Dict[str, Any]]):
    if not destinations:
        console.print("[dim]No destinations yet.[/dim]")
        return
    console.print(destinations_table(destinations))
