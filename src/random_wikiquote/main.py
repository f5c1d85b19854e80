# ABOUTME: Main CLI application entry point using asyncclick for native async support
# ABOUTME: Provides commands for fetching a random quote and inspecting the logging setup

import json

import asyncclick as click
from rich.console import Console
from rich.markup import escape

from random_wikiquote.config import QuoteFilterConfig, get_config
from random_wikiquote.core.service import RandomQuoteService
from random_wikiquote.utils.logging import (
    LoggingMode,
    configure_logging,
    get_logging_status,
    with_pipeline_context,
)
from random_wikiquote.utils.retry import RetryExhaustedError
from random_wikiquote.utils.rich_tables import (
    create_attempts_table,
    create_logging_status_table,
    create_quote_panel,
    print_rich_table,
)

console = Console()


def _build_filter_config(
    min_length: int | None, max_length: int | None, numeric_limit: float | None
) -> QuoteFilterConfig:
    """Start from the configured thresholds and apply any command line overrides."""
    filter_config = QuoteFilterConfig.from_config(get_config())
    if min_length is not None:
        filter_config.set_min_length(min_length)
    if max_length is not None:
        filter_config.set_max_length(max_length)
    if numeric_limit is not None:
        filter_config.set_numeric_limit(numeric_limit)
    return filter_config


@click.command()
@click.option("--min-length", type=click.IntRange(min=0), help="Shortest accepted quote, in characters")
@click.option("--max-length", type=click.IntRange(min=0), help="Longest accepted quote, in characters")
@click.option(
    "--numeric-limit", type=click.FloatRange(0.0, 1.0), help="Highest accepted share of digits (0.0-1.0)"
)
@click.option("--attempts", type=click.IntRange(min=1), help="Full pipeline attempts before giving up")
@click.pass_context
async def quote(
    ctx,
    min_length: int | None,
    max_length: int | None,
    numeric_limit: float | None,
    attempts: int | None,
):
    """
    💬 Print a random quote from a random Wikiquote page.
    """
    json_output = ctx.obj["json_output"]
    filter_config = _build_filter_config(min_length, max_length, numeric_limit)

    failure: RetryExhaustedError | None = None

    with with_pipeline_context("cli_quote") as logger:
        async with RandomQuoteService(filter_config, attempt_limit=attempts) as service:
            try:
                if json_output:
                    result = await service.get_random_quote()
                else:
                    with console.status("🔎 Searching Wikiquote..."):
                        result = await service.get_random_quote()
            except RetryExhaustedError as e:
                logger.warning("No quote found", attempts=e.attempts, reason=e.last_reason)
                failure = e

    if failure is not None:
        if json_output:
            payload = {"error": "retry_exhausted", "attempts": failure.attempts, "reason": failure.last_reason}
            click.echo(json.dumps(payload))
        else:
            console.print(f"[red]❌ {escape(str(failure))}[/red]")
            print_rich_table(console, create_attempts_table(failure.outcomes))
        ctx.exit(1)

    if json_output:
        click.echo(result.model_dump_json())
    else:
        console.print(create_quote_panel(result))


def _initialize_logging(json_output: bool, log_level: str | None = None, log_file: str | None = None) -> None:
    """Initialize logging configuration."""
    config = get_config()
    mode = LoggingMode.PRODUCTION if json_output else LoggingMode.INTERACTIVE

    # Use config defaults when CLI parameters are not provided
    final_log_level = log_level or config.log_level
    final_log_file = log_file or (str(config.log_file) if config.log_file else None)

    configure_logging(mode=mode, log_level=final_log_level, log_file=final_log_file)


@click.command(name="logging-status")
def logging_status():
    """
    📊 Show current logging configuration and status.
    """
    status = get_logging_status()
    logging_table = create_logging_status_table(status)
    print_rich_table(console, logging_table)


@click.group(invoke_without_command=True)
@click.option("--json", is_flag=True, help="Output JSON instead of the rich interface")
@click.option("--log-level", default=None, help="Logging level (DEBUG, INFO, WARNING, ERROR)")
@click.option("--log-file", help="Custom log file path")
@click.pass_context
def app(ctx, json: bool, log_level: str | None, log_file: str | None):
    """
    🎲 Random Wikiquote - random, validated quotes from English Wikiquote

    Picks a random page, finds the sections that hold its quotes, scrapes them
    and keeps trying until one passes the length and digit filters.
    """
    # Store global options in context for commands to access
    ctx.ensure_object(dict)
    ctx.obj["json_output"] = json

    # Initialize logging once here instead of in each command
    _initialize_logging(json, log_level, log_file)

    # Show help if no command provided
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


# Add commands to the main group
app.add_command(quote)
app.add_command(logging_status)


if __name__ == "__main__":
    app()
