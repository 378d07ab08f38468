"""Typer-based CLI entry point.

Runs the library view headless: one mount, optional search, and the
projected rows printed with ``rich``.  Handy for checking a backend without
starting the web shell.
"""

from __future__ import annotations

import asyncio
import functools
import logging
from pathlib import Path
from typing import List, Optional

import typer
from rich import print
from rich.table import Table

from tsundoc.application.library_service import LibraryService
from tsundoc.di import Container, bootstrap
from tsundoc.domain.models import FetchStatus, ViewMode
from tsundoc.errors import FetchError, SettingsError, TsundocError, ValidationError
from tsundoc.gui.factories import ViewModelFactory
from tsundoc.gui.layout.projections import CardProps, SpineProps
from tsundoc.gui.responsive import StaticViewportSource
from tsundoc.gui.utils.console_logger import ensure_console_logger
from tsundoc.settings.manager import SettingsManager

app = typer.Typer(help="Browse and save items in your tsundoc library")


def _handle_errors(func):
    @functools.wraps(func)
    def wrapper(*args, **kwargs):
        try:
            return func(*args, **kwargs)
        except (FetchError, ValidationError, SettingsError) as exc:
            message = getattr(exc, "user_message", None) or str(exc)
            typer.echo(f"Error: {message}", err=True)
            raise typer.Exit(1) from exc
        except TsundocError as exc:
            typer.echo(f"Unexpected error: {exc}", err=True)
            raise typer.Exit(1) from exc

    return wrapper


def _build_container(settings_path: Optional[Path]) -> Container:
    settings = SettingsManager(path=settings_path)
    settings.load()
    return bootstrap(Container(), settings)


def _render_rows(rows: list, mode: ViewMode) -> None:
    for index, row in enumerate(rows, start=1):
        table = Table(title=f"{mode.value} row {index}", show_header=False, expand=True)
        for _ in row:
            table.add_column(ratio=1)
        cells = []
        for props in row:
            lines = [f"[bold]{props.title}[/bold]"]
            if props.tags:
                lines.append(" ".join(f"#{tag}" for tag in props.tags))
            if isinstance(props, SpineProps):
                lines.append(f"[dim]height {props.height}[/dim]")
            if isinstance(props, CardProps) and props.created_label:
                lines.append(f"[dim]{props.created_label}[/dim]")
            cells.append("\n".join(lines))
        table.add_row(*cells)
        print(table)


async def _list_items(
    factory: ViewModelFactory,
    keyword: Optional[str],
    mode: Optional[ViewMode],
    width: int,
) -> int:
    vm = factory.create_library_vm(viewport=StaticViewportSource(width), mode=mode)
    await vm.mount()
    try:
        if keyword:
            vm.set_keyword(keyword)
            await vm.coordinator.wait_idle()
        state = vm.state
        if state.status.value is FetchStatus.ERROR:
            print(f"[red]Error: {state.error_message.value}")
            return 1
        if vm.is_empty:
            print("[yellow]No books found. Try a different search or save your first book!")
            return 0
        _render_rows(vm.rows, state.mode.value)
        print(f"[green]{len(vm.filtered)} items, {state.columns.value} columns")
        return 0
    finally:
        vm.unmount()


@app.callback()
def main(verbose: bool = typer.Option(False, "--verbose", "-v", help="Log fetch activity")) -> None:
    level = logging.DEBUG if verbose else logging.WARNING
    ensure_console_logger(logging.getLogger("tsundoc"), "tsundoc-cli", level=level)


@app.command("list")
@_handle_errors
def list_command(
    keyword: Optional[str] = typer.Option(None, "--keyword", "-k", help="Search keyword"),
    mode: Optional[ViewMode] = typer.Option(None, "--mode", "-m", help="cover, shelf or card"),
    width: int = typer.Option(1280, "--width", "-w", help="Viewport width in pixels"),
    settings_path: Optional[Path] = typer.Option(None, "--settings", help="Settings file"),
) -> None:
    """Load the library and print it the way the view would lay it out."""

    container = _build_container(settings_path)
    factory = ViewModelFactory(container)
    code = asyncio.run(_list_items(factory, keyword, mode, width))
    if code:
        raise typer.Exit(code)


@app.command()
@_handle_errors
def save(
    content: str = typer.Argument(..., help="Text to save"),
    title: Optional[str] = typer.Option(None, "--title", "-t"),
    tags: List[str] = typer.Option([], "--tag", help="Tag, repeatable"),
    settings_path: Optional[Path] = typer.Option(None, "--settings", help="Settings file"),
) -> None:
    """Save a new item to the library."""

    container = _build_container(settings_path)
    service = container.resolve(LibraryService)
    item = asyncio.run(service.save_item(content, title=title, tags=tags))
    print(f"[green]Saved {item.title} ({item.id})")


if __name__ == "__main__":  # pragma: no cover
    app()
