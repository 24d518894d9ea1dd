"""
Unisearch CLI - Search, insert, and pin Unicode characters.

Usage:
    unisearch search "hot bev"
    unisearch insert ☕
    unisearch pin ★
    unisearch pins
    unisearch lookup coffee
"""

import asyncio
import subprocess
from pathlib import Path
from typing import Optional

import click
from loguru import logger

from unisearch.config import load_settings
from unisearch.panels.pins import PinPanel
from unisearch.panels.search import SearchPanel
from unisearch.search.matching import to_null_match
from unisearch.search.session import SearchSession
from unisearch.services.catalog import CharacterService, load_unicode_catalog
from unisearch.services.lookup import UnicodeLookupService
from unisearch.services.usage import UsageStore


class UnisearchCliError(click.ClickException):
    """Click exception for bad user input."""


def copy_to_clipboard(text: str) -> None:
    """Copy text to the clipboard using wl-copy."""
    try:
        subprocess.run(
            ["wl-copy", text],
            stdout=subprocess.DEVNULL,
            stderr=subprocess.DEVNULL,
            check=False,
        )
    except FileNotFoundError:
        logger.debug("wl-copy not found, cannot copy to clipboard")


def _single_character(value: str) -> str:
    value = value.strip()
    if not value:
        raise UnisearchCliError("Expected a character, got an empty string.")
    if value.upper().startswith("U+"):
        try:
            return chr(int(value[2:], 16))
        except (ValueError, OverflowError):
            raise UnisearchCliError(f"Invalid codepoint '{value}'.") from None
    return value


def _build_service(settings: dict) -> CharacterService:
    store = UsageStore(Path(settings["storage"]["db_path"]).expanduser())
    ranges = [tuple(r) for r in settings["catalog"]["ranges"]]
    return CharacterService(store, catalog_loader=lambda: load_unicode_catalog(ranges))


@click.group()
@click.option("--settings", "settings_path", type=click.Path(path_type=Path), default=None,
              help="Settings TOML file.")
@click.pass_context
def main(ctx: click.Context, settings_path: Optional[Path]) -> None:
    """Search Unicode characters, ranked by your usage."""
    ctx.ensure_object(dict)
    settings = load_settings(settings_path)
    ctx.obj["settings"] = settings
    ctx.obj["service"] = _build_service(settings)


@main.command()
@click.argument("query", required=False, default="")
@click.option("--limit", "-n", type=int, default=None, help="Number of results.")
@click.pass_obj
def search(obj: dict, query: str, limit: Optional[int]) -> None:
    """List characters matching QUERY (all characters if omitted)."""
    max_results = limit if limit is not None else obj["settings"]["search"]["max_results"]
    panel = SearchPanel(SearchSession(obj["service"]), max_results=max_results)

    rows = asyncio.run(panel.get_rows(query))
    if not rows:
        click.echo("No matching characters.")
        return
    for row in rows:
        click.echo(SearchPanel.format_row(row))


@main.command()
@click.argument("character")
@click.pass_obj
def insert(obj: dict, character: str) -> None:
    """Copy CHARACTER to the clipboard and record its use."""
    codepoint = _single_character(character)
    service: CharacterService = obj["service"]

    async def _insert() -> None:
        found = await service.get_character(codepoint)
        if found is None:
            raise UnisearchCliError(f"'{codepoint}' is not in the catalog.")
        session = SearchSession(service, insert=copy_to_clipboard)
        await session.choose(to_null_match(found))

    asyncio.run(_insert())
    click.echo(codepoint)


@main.command()
@click.argument("character")
@click.pass_obj
def pin(obj: dict, character: str) -> None:
    """Pin CHARACTER so it is always listed first."""
    codepoint = _single_character(character)
    if not asyncio.run(PinPanel(obj["service"]).toggle(codepoint, True)):
        raise UnisearchCliError(f"Could not pin '{codepoint}'.")
    click.echo(f"Pinned {codepoint}")


@main.command()
@click.argument("character")
@click.pass_obj
def unpin(obj: dict, character: str) -> None:
    """Unpin CHARACTER."""
    codepoint = _single_character(character)
    if not asyncio.run(PinPanel(obj["service"]).toggle(codepoint, False)):
        raise UnisearchCliError(f"Could not unpin '{codepoint}'.")
    click.echo(f"Unpinned {codepoint}")


@main.command()
@click.pass_obj
def pins(obj: dict) -> None:
    """Show pin candidates from your usage history."""
    sections = asyncio.run(PinPanel(obj["service"]).sections())
    for title, entries in sections:
        click.echo(title)
        for entry in entries:
            mark = "*" if entry.pinned else " "
            click.echo(f"  [{mark}] {entry.character.codepoint}  {entry.character.name}")


@main.command()
@click.argument("query")
@click.pass_obj
def lookup(obj: dict, query: str) -> None:
    """Search unicode-table.com for QUERY."""
    lookup_settings = obj["settings"]["lookup"]
    service = UnicodeLookupService(
        base_url=lookup_settings["base_url"],
        timeout=float(lookup_settings["timeout"]),
    )

    async def _lookup():
        try:
            return await service.search(query)
        finally:
            await service.close()

    rows = asyncio.run(_lookup())
    if not rows:
        click.echo("No results.")
        return
    for row in rows:
        click.echo(f"{row.code}  {row.description}")


if __name__ == "__main__":
    main()
