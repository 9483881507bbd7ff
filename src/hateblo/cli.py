"""CLI entry point."""

from __future__ import annotations

import asyncio
import logging

import typer
from pydantic import ValidationError as SettingsError
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from hateblo.blog import Blog
from hateblo.core.config import Settings, get_settings
from hateblo.core.exceptions import HatebloError

app = typer.Typer(
    name="hateblo",
    help="Hatena Blog AtomPub client",
    no_args_is_help=True,
)
console = Console()


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level.upper(),
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
    )


def _load_settings() -> Settings:
    try:
        settings = get_settings()
    except SettingsError as e:
        console.print(f"[red]Invalid configuration:[/red] {e}")
        raise typer.Exit(code=1) from e
    _configure_logging(settings.log_level)
    return settings


def make_blog(settings: Settings) -> Blog:
    """Build the blog the commands operate on."""
    return Blog.from_settings(settings)


def _run(coro) -> None:
    try:
        asyncio.run(coro)
    except HatebloError as e:
        console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(code=1) from e


@app.command()
def version() -> None:
    """Show version."""
    from hateblo import __version__

    console.print(f"hateblo {__version__}")


@app.command()
def entries(
    limit: int = typer.Option(20, "--limit", "-n", min=1, help="Maximum entries to list"),
    interval: float | None = typer.Option(
        None, "--interval", min=0.0, help="Seconds between page requests"
    ),
) -> None:
    """List entries, newest first."""
    settings = _load_settings()
    min_interval = settings.min_interval if interval is None else interval

    async def list_entries() -> None:
        blog = make_blog(settings)
        table = Table(title=f"{blog.blog_id} entries")
        table.add_column("ID", style="cyan")
        table.add_column("Updated")
        table.add_column("Title")
        table.add_column("Draft")

        async with blog.client, blog.entries(min_interval) as stream:
            async for entry in stream:
                table.add_row(
                    entry.id,
                    str(entry.update_time),
                    entry.title,
                    "yes" if entry.is_draft else "",
                )
                if table.row_count >= limit:
                    break
        console.print(table)

    _run(list_entries())


@app.command()
def show(entry_id: str = typer.Argument(..., help="Entry ID")) -> None:
    """Show a single entry."""
    settings = _load_settings()

    async def show_entry() -> None:
        blog = make_blog(settings)
        async with blog.client:
            entry = await blog.get_entry(entry_id)
        console.print(f"[bold]{entry.title}[/bold]")
        console.print(f"ID: {entry.id}")
        console.print(f"Updated: {entry.update_time}  Published: {entry.publication_time}")
        console.print(f"Format: {entry.content.type.value}  Draft: {entry.is_draft}")
        if entry.categories:
            console.print(f"Categories: {', '.join(sorted(entry.categories))}")
        console.print()
        console.print(entry.content.text, markup=False)

    _run(show_entry())


@app.command()
def categories() -> None:
    """List the blog's categories."""
    settings = _load_settings()

    async def list_categories() -> None:
        blog = make_blog(settings)
        async with blog.client:
            terms = await blog.categories()
        for term in terms:
            console.print(term, markup=False)

    _run(list_categories())


if __name__ == "__main__":
    app()
