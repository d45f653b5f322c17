#!/usr/bin/env python3
"""
Rules CLI - Matching Rule Management Commands

Inspect and edit saved rule groups, and back them up or restore them.
"""

from pathlib import Path

import click

from ..core.config import get_config
from ..orders.identifier import split_identifier
from ..orders.models import OrderRecord
from ..rules.backup import InvalidBackupFormatError
from ..rules.datastore import RuleSetStore
from ..rules.editor import EmptyTargetNameError, InvalidWeightError, RuleGroupNotFoundError
from ..rules.weights import resolve_weight
from ..session import MatchingSession


def _open_session() -> MatchingSession:
    session = MatchingSession(RuleSetStore(get_config().rules.rules_file))
    session.load_rules()
    return session


def _finish(session: MatchingSession, message: str) -> None:
    """Report a rule change, failing if it could not be saved."""
    if session.last_error:
        raise click.ClickException(session.last_error)
    click.echo(message)


@click.group()
def rules() -> None:
    """Matching rule management commands."""
    pass


@rules.command("list")
def list_rules() -> None:
    """List all rule groups in match precedence order."""
    session = _open_session()

    if not session.rules:
        click.echo("No matching rules saved")
        return

    for group in session.rules:
        click.echo(
            f"{group.id}  {group.target_name}  "
            f"(weight {group.default_weight}, {group.member_count} identifiers)"
        )


@rules.command()
@click.argument("group_id")
def show(group_id: str) -> None:
    """Show the identifiers and weights of one rule group."""
    session = _open_session()
    group = next((g for g in session.rules if g.id == group_id), None)
    if group is None:
        raise click.ClickException(f"Rule group not found: {group_id}")

    click.echo(f"Target: {group.target_name}")
    click.echo(f"Default weight: {group.default_weight}")
    click.echo(f"Identifiers ({group.member_count}):")
    for member in group.members:
        seller, product_number, product_name, option_name = split_identifier(member)
        weight = resolve_weight(group, member)
        marker = "*" if group.override_for(member) is not None else " "
        click.echo(f"  {marker} x{weight}  {seller} | {product_number} | {product_name} | {option_name}")


@rules.command()
@click.option("--seller", default="", help="Seller (판매처)")
@click.option("--product-number", default="", help="Product number (상품번호)")
@click.option("--product-name", default="", help="Product name (상품명)")
@click.option("--option-name", default="", help="Option name (옵션명)")
@click.option("--target", required=True, help="Target product/category name")
@click.option("--weight", type=int, default=1, show_default=True, help="Default weight for a new group")
@click.option("--member-weight", type=int, help="Weight for this identifier only")
def create(
    seller: str,
    product_number: str,
    product_name: str,
    option_name: str,
    target: str,
    weight: int,
    member_weight: int | None,
) -> None:
    """
    Create a rule for an order identity, merging into a same-named group.

    Example:
      ordermatch rules create --seller 쿠팡 --product-number 100
        --product-name 사과 --option-name 5kg --target 과일류 --member-weight 2
    """
    session = _open_session()
    order = OrderRecord(
        seller=seller,
        product_number=product_number,
        product_name=product_name,
        option_name=option_name,
        quantity=0,
    )
    if not order.has_identity:
        raise click.ClickException("At least one of seller, product number, product name, option name is required")

    try:
        session.create_rule(order, target, default_weight=weight, member_weight=member_weight)
    except (EmptyTargetNameError, InvalidWeightError) as e:
        raise click.ClickException(str(e)) from e

    _finish(session, f"Rule saved under '{target.strip()}'")


@rules.command()
@click.argument("group_id")
@click.option("--target", help="New target name")
@click.option("--weight", type=int, help="New default weight")
def edit(group_id: str, target: str | None, weight: int | None) -> None:
    """Change a rule group's target name and/or default weight."""
    session = _open_session()
    group = next((g for g in session.rules if g.id == group_id), None)
    if group is None:
        raise click.ClickException(f"Rule group not found: {group_id}")

    try:
        session.update_rule(
            group_id,
            target if target is not None else group.target_name,
            weight if weight is not None else group.default_weight,
        )
    except (EmptyTargetNameError, InvalidWeightError) as e:
        raise click.ClickException(str(e)) from e

    _finish(session, f"Rule group {group_id} updated")


@rules.command("set-weight")
@click.argument("group_id")
@click.argument("identifier")
@click.argument("weight", type=int)
def set_weight(group_id: str, identifier: str, weight: int) -> None:
    """Set the weight of one identifier within a group."""
    session = _open_session()
    try:
        session.set_member_weight(group_id, identifier, weight)
    except (InvalidWeightError, KeyError) as e:
        raise click.ClickException(str(e)) from e

    _finish(session, f"Weight of '{identifier}' set to {weight}")


@rules.command("remove-member")
@click.argument("group_id")
@click.argument("identifier")
def remove_member(group_id: str, identifier: str) -> None:
    """Remove one identifier from a group (deletes the group when empty)."""
    session = _open_session()
    try:
        session.remove_member(group_id, identifier)
    except RuleGroupNotFoundError as e:
        raise click.ClickException(f"Rule group not found: {group_id}") from e

    _finish(session, f"Removed '{identifier}' from {group_id}")


@rules.command()
@click.argument("group_id")
@click.confirmation_option(prompt="Delete this rule group?")
def delete(group_id: str) -> None:
    """Delete a rule group."""
    session = _open_session()
    try:
        session.delete_rule(group_id)
    except RuleGroupNotFoundError as e:
        raise click.ClickException(f"Rule group not found: {group_id}") from e

    _finish(session, f"Rule group {group_id} deleted")


@rules.command()
@click.option("--output-dir", type=click.Path(file_okay=False, path_type=Path), help="Override backup directory")
def backup(output_dir: Path | None) -> None:
    """Write a v1 backup of the rule set."""
    session = _open_session()
    if not session.rules:
        raise click.ClickException("No matching rules to back up")

    output_file = session.write_backup(output_dir or get_config().rules.backup_dir)
    click.echo(f"Backup of {len(session.rules)} rule groups saved to: {output_file}")


@rules.command()
@click.argument("backup_file", type=click.Path(exists=True, dir_okay=False, path_type=Path))
def restore(backup_file: Path) -> None:
    """Replace the rule set with a backup file."""
    session = _open_session()
    try:
        session.restore_backup(backup_file)
    except InvalidBackupFormatError as e:
        raise click.ClickException(str(e)) from e

    _finish(session, f"Restored {len(session.rules)} rule groups from {backup_file.name}")
