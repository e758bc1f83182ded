#!/usr/bin/env python3
"""
Post CLI - Interactive CSV to YNAB Split Posting

Loads the CSV export, walks the user through budget/account/row/memo
selection, and posts the chosen rows as one parent transaction with
subtransactions.

Exit codes:
    0  completed, or nothing to do (no budgets, no active accounts, no rows selected)
    1  fatal error before posting (configuration, CSV, listing failure, user abort)
    2  the post itself failed; nothing was retried
"""

import logging
from pathlib import Path

import click

from ..core.config import Config, get_config
from ..core.currency import format_milliunits
from ..core.errors import CsvSplitError, RemoteError, SplitCalculationError
from ..core.json_utils import format_json
from ..csv_import.loader import load_csv_rows
from ..selection import SelectionFlow
from ..ynab.client import YnabClient
from ..ynab.split_builder import build_split_transaction, create_split_summary

logger = logging.getLogger(__name__)

POST_FAILURE_EXIT_CODE = 2


def create_client(config: Config, api_token: str) -> YnabClient:
    """Build the YNAB client from configuration."""
    return YnabClient(api_token, base_url=config.ynab.base_url, timeout=config.ynab.timeout)


@click.command()
@click.option(
    "--csv-file",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Transactions CSV (default: transactions.csv or CSVSPLIT_CSV_PATH)",
)
@click.option("--dry-run", is_flag=True, help="Show the transaction payload without posting it")
@click.pass_context
def post(ctx: click.Context, csv_file: Path | None, dry_run: bool) -> None:
    """
    Post selected CSV rows to YNAB as one split transaction.

    Examples:
      csvsplit post
      csvsplit post --csv-file exports/march.csv --dry-run
    """
    obj = ctx.obj or {}
    config: Config = obj.get("config") or get_config()
    csv_path = csv_file or config.csv_import.csv_path

    click.echo("🚀 Starting YNAB transaction processing...\n")

    # Configuration and CSV problems abort before any remote call
    try:
        api_token = config.require_api_token()
        rows = load_csv_rows(csv_path)
    except CsvSplitError as e:
        logger.error("Startup failed: %s", e)
        raise click.ClickException(str(e)) from e

    click.echo(f"✅ Loaded {len(rows)} transactions from CSV\n")

    with create_client(config, api_token) as client:
        try:
            selection = SelectionFlow(client, rows).run()
        except CsvSplitError as e:
            logger.error("Selection failed: %s", e)
            raise click.ClickException(str(e)) from e

        if not selection.completed:
            logger.info("Nothing to post: %s", selection.outcome.value)
            return

        if selection.budget is None or selection.account is None or selection.memo is None:
            raise click.ClickException("Selection incomplete; nothing posted")

        if not selection.selected_rows:
            click.echo("No transactions selected; nothing to post.")
            return

        try:
            transaction = build_split_transaction(
                selection.selected_rows, selection.account.id, selection.memo
            )
        except SplitCalculationError as e:
            raise click.ClickException(str(e)) from e

        if dry_run:
            click.echo("Dry run - transaction not posted:")
            click.echo(format_json({"transaction": transaction.to_api_dict()}))
            return

        click.echo("🔄 Posting transactions as subtransactions to YNAB...")
        try:
            receipt = client.create_transaction(selection.budget.id, transaction)
        except RemoteError as e:
            logger.error("Posting to budget %s failed: %s", selection.budget.id, e)
            click.echo("\n❌ Error posting transactions to YNAB:", err=True)
            click.echo(f"   {e}", err=True)
            ctx.exit(POST_FAILURE_EXIT_CODE)

        summary = create_split_summary(transaction)
        click.echo(
            f"\n🎉 Successfully posted 1 parent transaction with "
            f"{summary['split_count']} subtransactions to YNAB!\n"
        )
        click.echo(f"💰 Total amount: {format_milliunits(-summary['total_amount'])}")
        click.echo(f"📝 Parent memo: {transaction.memo}")
        click.echo(f"📊 Account: {selection.account.name}")
        click.echo(f"🏦 Budget: {selection.budget.name}")
        click.echo(f"🔢 Subtransactions: {summary['split_count']}")
        logger.debug("YNAB transaction id: %s", receipt.get("id"))


if __name__ == "__main__":
    post()
