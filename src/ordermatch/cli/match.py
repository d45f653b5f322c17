#!/usr/bin/env python3
"""
Match CLI - Order Sheet Aggregation

Runs one aggregation pass over an order sheet with the saved rules and writes
the CSV result.
"""

from pathlib import Path

import click

from ..aggregation.metrics import original_quantity
from ..core.config import get_config
from ..orders.loader import OrderSheetError
from ..rules.datastore import RuleSetStore
from ..session import MatchingSession


@click.command()
@click.argument("sheet", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.option("--output-dir", type=click.Path(file_okay=False, path_type=Path), help="Override export directory")
@click.option("--no-export", is_flag=True, help="Print the summary without writing a CSV file")
@click.option("--show-rows", is_flag=True, help="List every aggregated row")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose output")
@click.pass_context
def match(
    ctx: click.Context,
    sheet: Path,
    output_dir: Path | None,
    no_export: bool,
    show_rows: bool,
    verbose: bool,
) -> None:
    """
    Aggregate an order sheet against the saved matching rules.

    Examples:
      ordermatch match orders.xlsx
      ordermatch match orders.xlsx --show-rows --no-export
      ordermatch match orders.csv --output-dir ./exports
    """
    config = get_config()
    verbose = verbose or ctx.obj.get("verbose", False)

    session = MatchingSession(RuleSetStore(config.rules.rules_file))
    rules = session.load_rules()

    if verbose:
        click.echo("Order Sheet Matching")
        click.echo(f"Sheet: {sheet}")
        click.echo(f"Rules: {config.rules.rules_file} ({len(rules)} groups)")
        click.echo()

    try:
        rows = session.process_file(sheet)
    except OrderSheetError as e:
        raise click.ClickException(str(e)) from e

    summary = session.summary()
    click.echo(
        f"Processed {summary.total_orders} orders into {summary.item_count} rows "
        f"({summary.matched_count} matched, {summary.unmatched_count} unmatched)"
    )
    click.echo(f"   Quantity: {summary.total_original_quantity} ordered, {summary.total_quantity} weighted")
    click.echo(f"   Payment total: {summary.payment_amount}")

    if show_rows:
        click.echo()
        for row in rows:
            status = "매칭" if row.is_matched else "미매칭"
            click.echo(
                f"  [{status}] {row.display_name}: {row.order_count} orders, "
                f"{original_quantity(row, session.rules)} -> {row.quantity}"
            )
            if verbose and not row.is_matched:
                click.echo(f"      identifier: {row.identifier}")

    if not no_export:
        export_dir = output_dir or config.export.output_dir
        output_file = session.export_csv(
            export_dir,
            suffix=config.export.result_suffix,
            default_basename=config.export.default_basename,
        )
        click.echo(f"   Results saved to: {output_file}")
