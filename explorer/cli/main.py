"""Main CLI entry point."""

import asyncio
from typing import Optional

import typer
from rich.console import Console
from rich.table import Table

from config import get_settings
from explorer.services._types import DelegateRowDict, HomeViewDict, VoteRowDict
from explorer.services.delegates import fetch_delegates, fetch_votes
from explorer.services.home import HomeController, HomeStore
from explorer.services.location import LocationState
from explorer.services.node_client import NodeClient
from explorer.services.result import Err, Ok, Result
from explorer.services.views import render_delegates, render_home, render_votes

app = typer.Typer(
    name="explorer",
    help="Node explorer CLI",
    add_completion=False
)

console = Console()


def _fail(message: str) -> None:
    console.print(message, style="red", markup=False)
    raise typer.Exit(code=1)


async def _load_home(location: LocationState, api_url: Optional[str]) -> HomeViewDict:
    async with NodeClient(api_url=api_url) as client:
        store = HomeStore()
        await asyncio.gather(*HomeController(store, client).fetch(location))
    return render_home(store.state, location, get_settings().currency_symbol)


@app.command()
def home(
    address: list[str] = typer.Option(..., "--address", "-a", help="Account address (repeatable)"),
    api_url: Optional[str] = typer.Option(None, "--api-url", help="Override NODE_API_URL")
):
    """Show balances and recent transactions for one or more addresses."""
    location = LocationState.from_query(address)
    with console.status("Fetching from node..."):
        view = asyncio.run(_load_home(location, api_url))

    if view["error_message"]:
        console.print(view["error_message"], style="red", markup=False)

    overview = view["overview"]
    table = Table(title="Overview")
    table.add_column("Field", style="cyan")
    table.add_column("Value", style="green")

    table.add_row("Block #", overview["block_number"])
    table.add_row("Block time", overview["block_time"])
    table.add_row("Coinbase", overview["coinbase"])
    table.add_row("Available", overview["available"])
    table.add_row("Locked", overview["locked"])
    table.add_row("Total Balance", overview["total_balance"])

    console.print(table)

    txs = Table(title="Transactions")
    txs.add_column("Type")
    txs.add_column("Time")
    txs.add_column("From -> To")
    txs.add_column("Amount", justify="right")
    for row in view["transactions"]:
        kind = row["icon"].rsplit("/", 1)[-1].removesuffix(".png")
        txs.add_row(kind, row["time"], row["transfer"], row["amount"])

    console.print(txs)

    if view["error_message"]:
        raise typer.Exit(code=1)


async def _load_delegates(api_url: Optional[str]) -> Result[list[DelegateRowDict]]:
    async with NodeClient(api_url=api_url) as client:
        result = await fetch_delegates(client)
    return result.map(lambda ds: render_delegates(ds, get_settings().currency_symbol))


@app.command()
def delegates(
    validators_only: bool = typer.Option(False, "--validators", help="Only show validators"),
    api_url: Optional[str] = typer.Option(None, "--api-url", help="Override NODE_API_URL")
):
    """List delegates with votes and forging rate."""
    with console.status("Fetching delegates..."):
        result = asyncio.run(_load_delegates(api_url))

    match result:
        case Err(message):
            _fail(message)
        case Ok(rows):
            table = Table(title="Delegates")
            table.add_column("Name", style="cyan")
            table.add_column("Address")
            table.add_column("Votes", justify="right", style="green")
            table.add_column("Forged", justify="right")
            table.add_column("Rate", justify="right")
            table.add_column("Validator")

            for row in rows:
                if validators_only and not row["validator"]:
                    continue
                table.add_row(
                    row["name"],
                    row["address"],
                    row["votes"],
                    str(row["blocks_forged"]),
                    row["rate"],
                    "yes" if row["validator"] else "",
                )

            console.print(table)


async def _load_votes(address: str, api_url: Optional[str]) -> Result[list[VoteRowDict]]:
    async with NodeClient(api_url=api_url) as client:
        result = await fetch_votes(client, address)
    return result.map(lambda vs: render_votes(vs, get_settings().currency_symbol))


@app.command()
def votes(
    address: str = typer.Argument(..., help="Voter address"),
    api_url: Optional[str] = typer.Option(None, "--api-url", help="Override NODE_API_URL")
):
    """List the votes an account has cast."""
    with console.status("Fetching votes..."):
        result = asyncio.run(_load_votes(address, api_url))

    match result:
        case Err(message):
            _fail(message)
        case Ok(rows):
            table = Table(title=f"Votes of {address}")
            table.add_column("Delegate", style="cyan")
            table.add_column("Votes", justify="right", style="green")
            for row in rows:
                table.add_row(row["delegate"], row["votes"])
            console.print(table)


if __name__ == "__main__":
    app()
