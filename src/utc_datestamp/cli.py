"""Command-line interface for utc-datestamp."""

from __future__ import annotations

import logging
from datetime import datetime
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from utc_datestamp.config import DatestampConfig, FormattingConfig
from utc_datestamp.utils import (
    Instant,
    InvalidDateError,
    format_utc_date,
    format_utc_timestamp,
    utc_now,
    utc_today,
)

LOGGER = logging.getLogger(__name__)

console = Console()


def parse_instant(value: str, *, epoch: bool, formatting: FormattingConfig) -> Instant:
    """Turn a command-line argument into an instant.

    ISO 8601 text goes through ``datetime.fromisoformat``; a trailing ``Z`` is
    read as ``+00:00``. With ``epoch`` the value is a number in the configured
    epoch unit.
    """
    text = value.strip()
    if epoch:
        try:
            number: float = int(text)
        except ValueError:
            number = float(text)
        return formatting.to_milliseconds(number)
    if text.endswith(("Z", "z")):
        text = f"{text[:-1]}+00:00"
    return datetime.fromisoformat(text)


def render_value(value: str, *, epoch: bool, timestamp: bool, formatting: FormattingConfig) -> str:
    instant = parse_instant(value, epoch=epoch, formatting=formatting)
    if timestamp:
        return format_utc_timestamp(instant, assume_utc=formatting.assume_utc)
    return format_utc_date(instant, assume_utc=formatting.assume_utc)


@click.group()
@click.option("--verbose", is_flag=True, help="Enable debug logging.")
def cli(verbose: bool) -> None:
    """UTC date formatting CLI."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


@cli.command(name="format")
@click.argument("values", nargs=-1, required=True)
@click.option("--config", "config_path", type=click.Path(path_type=Path), default=Path("configs/datestamp.yaml"))
@click.option("--epoch", is_flag=True, help="Treat values as epoch numbers in the configured unit.")
@click.option("--timestamp", is_flag=True, help="Print the full UTC timestamp instead of the date.")
def format_command(values: tuple[str, ...], config_path: Path, epoch: bool, timestamp: bool) -> None:
    """Print the UTC calendar date of each VALUE, one per line."""
    config = DatestampConfig.from_file(config_path)
    failures = 0
    for value in values:
        LOGGER.debug("Formatting %r (epoch=%s, timestamp=%s)", value, epoch, timestamp)
        try:
            rendered = render_value(value, epoch=epoch, timestamp=timestamp, formatting=config.formatting)
        except (InvalidDateError, TypeError, ValueError) as exc:
            failures += 1
            LOGGER.warning("Rejected value %r: %s", value, exc)
            console.print(f"[red]Invalid date[/red] {escape(value)}: {escape(str(exc))}")
            continue
        console.print(rendered, highlight=False)
    if failures:
        raise click.exceptions.Exit(1)


@cli.command()
@click.option("--timestamp", is_flag=True, help="Print the full UTC timestamp instead of the date.")
def today(timestamp: bool) -> None:
    """Print today's date in UTC."""
    console.print(format_utc_timestamp(utc_now()) if timestamp else utc_today(), highlight=False)


if __name__ == "__main__":  # pragma: no cover
    cli()
