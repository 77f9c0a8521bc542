"""Display implementation that prints to the terminal with click."""

from __future__ import annotations

import click

from pos.application.display import Display
from pos.application.dto import BillSummaryView, BillView, ProductListView


class TerminalDisplay(Display):

    def display_product_rows(self, view: ProductListView) -> None:
        click.echo("Products")
        if view.placeholder:
            click.echo(f"  {view.placeholder}")
            return

        click.echo(f"  {'ID':<4} {'Name':<20} {'Price':>10} {'Unit':>8}")
        click.echo(f"  {'-'*45}")
        for row in view.rows:
            click.echo(
                f"  {row.product_id:<4} {row.name:<20} {row.price_field:>10} {row.unit_label_field:>8}"
            )

    def display_bill_rows(self, view: BillView) -> None:
        click.echo("Bill")
        if view.placeholder:
            click.echo(f"  {view.placeholder}")
        else:
            click.echo(f"  {'ID':<4} {'Item':<26} {'Amount':>12}")
            click.echo(f"  {'-'*44}")
            for row in view.rows:
                click.echo(f"  {row.product_id:<4} {row.label:<26} {row.amount:>12}")
            click.echo(f"  {'-'*44}")
        click.echo(f"  {'Total':<31} {view.total:>12}")
        if not view.generate_enabled:
            click.echo("  (generate unavailable: bill is empty)")

    def display_summary(self, view: BillSummaryView) -> None:
        click.echo("=" * 46)
        click.echo(f"{'BILL SUMMARY':^46}")
        click.echo("=" * 46)
        for row in view.rows:
            click.echo(f"  {row.label:<30} {row.amount:>12}")
        click.echo(f"  {'-'*43}")
        click.echo(f"  {'Total':<30} {view.total:>12}")
        click.echo("=" * 46)
        click.echo("Type 'close' to finish and start the next customer.")

    def hide_summary(self) -> None:
        click.echo("Bill closed.")

    def display_validation_error(self, message: str) -> None:
        click.secho(f"Error: {message}", fg="red", err=True)
