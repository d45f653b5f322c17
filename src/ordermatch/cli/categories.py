#!/usr/bin/env python3
"""
Categories CLI - Target Name List Commands
"""

import click

from ..core.config import get_config
from ..core.datastore_mixin import PersistenceFailureError
from ..rules.categories import CategoryStore


def _store() -> CategoryStore:
    return CategoryStore(get_config().rules.categories_file)


@click.group()
def categories() -> None:
    """Target name (category) list commands."""
    pass


@categories.command("list")
def list_categories() -> None:
    """List categories in display order."""
    for position, name in enumerate(_store().load()):
        click.echo(f"{position:>3}  {name}")


@categories.command()
@click.argument("name")
def add(name: str) -> None:
    """Add a category to the end of the list."""
    if not name.strip():
        raise click.ClickException("Category name must not be blank")
    try:
        _store().add(name)
    except PersistenceFailureError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Added category '{name.strip()}'")


@categories.command()
@click.argument("name")
def remove(name: str) -> None:
    """Remove a category."""
    try:
        _store().remove(name)
    except PersistenceFailureError as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Removed category '{name}'")


@categories.command()
@click.argument("name")
@click.argument("position", type=int)
def move(name: str, position: int) -> None:
    """Move a category to a zero-based position."""
    try:
        _store().move(name, position)
    except (ValueError, PersistenceFailureError) as e:
        raise click.ClickException(str(e)) from e
    click.echo(f"Moved '{name}' to position {position}")
