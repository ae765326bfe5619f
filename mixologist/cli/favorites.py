"""
Favorites CLI Commands
======================

CLI commands for browsing and pruning saved favorite cocktails.
"""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import typer
from rich import print as rprint
from rich.console import Console

from mixologist.cli.display import print_profile, profile_table
from mixologist.config import Settings
from mixologist.exceptions import FavoritesStoreError
from mixologist.services.favorites import FavoritesStore, create_favorites_store

console = Console()
favorites_app = typer.Typer(help="Favorite cocktail commands")


def _open_store() -> FavoritesStore:
    return create_favorites_store(Settings.from_env())


@contextmanager
def _store_errors() -> Iterator[None]:
    """Report store failures as a CLI error instead of a traceback."""
    try:
        yield
    except FavoritesStoreError as e:
        rprint(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@favorites_app.command("list")
def list_favorites() -> None:
    """
    List saved favorites.

    Examples:
        mixologist favorites list
    """
    with _store_errors():
        favorites = _open_store().get_all()
    if not favorites:
        rprint("[yellow]No favorites saved yet[/yellow]")
        return
    console.print(profile_table(favorites, title="Favorites"))


@favorites_app.command("show")
def show_favorite(
    name: str = typer.Argument(..., help="Cocktail name"),
) -> None:
    """
    Show the full recipe of a favorite.

    Examples:
        mixologist favorites show negroni
    """
    with _store_errors():
        profile = _open_store().get(name)
    if profile is None:
        rprint(f"[red]Error:[/red] Favorite '{name}' not found")
        raise typer.Exit(1)
    print_profile(console, profile)


@favorites_app.command("remove")
def remove_favorite(
    name: str = typer.Argument(..., help="Cocktail name"),
) -> None:
    """
    Remove a favorite.

    Examples:
        mixologist favorites remove "dry martini"
    """
    with _store_errors():
        removed = _open_store().delete(name)
    if not removed:
        rprint(f"[red]Error:[/red] Favorite '{name}' not found")
        raise typer.Exit(1)
    rprint(f"[green]Removed[/green] {name}")
