"""
AForm CLI

Run AForm entry points against a value from the command line, the same
way a form field action would.

Usage:
    # Format a number as currency with parentheses for negatives
    aform call AFNumber_Format -- -1234.5 2 0 2 0 '$' true

    # Commit a value to an SSN field
    aform call AFSpecial_Keystroke 12a456789 3 --commit

    # Type one more character into a phone field
    aform call AFSpecial_Keystroke 555-12 2 --change 3

    # Sum two other fields
    aform call AFSimple_Calculate "" SUM "f1, f2" --set f1=3 --set f2=x

    # Show the preset tables
    aform presets
"""

import sys
from pathlib import Path
from typing import Any, Optional

import click
import yaml
from loguru import logger
from rich.console import Console
from rich.table import Table

from . import __version__
from .aform import AForm, EVENT_ENTRY_POINTS, UTILITY_ENTRY_POINTS
from .config import load_config
from .constants import SPECIAL_MASKS, PHONE_WITH_AREA_MASK
from .event import FieldEvent
from .host import RecordingApp, SimpleDocument, SimpleField


console = Console()


def setup_logging(verbose: bool = False, log_file: Optional[Path] = None):
    """
    Route loguru output for one CLI invocation.

    Alerts are already shown in the result table, so stderr only carries
    warnings unless --verbose is given. A log file collects the full
    trace of every call appended to it.
    """
    logger.remove()
    logger.add(
        sys.stderr,
        format="<level>{level: <8}</level> {message}",
        level="DEBUG" if verbose else "WARNING",
    )

    if log_file:
        logger.add(
            log_file,
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} {level: <8} {name}:{line} {message}",
            level="DEBUG",
            mode="a",
            encoding="utf-8",
        )


def decode_argument(text: str) -> Any:
    """
    Decode a command line argument into a script value.

    Numbers, booleans and lists are decoded as YAML; anything else is
    kept as the literal string.
    """
    try:
        value = yaml.safe_load(text)
    except yaml.YAMLError:
        return text

    if isinstance(value, (bool, int, float)):
        return value
    if isinstance(value, list) and all(isinstance(v, (str, int, float)) for v in value):
        return value
    return text


def parse_assignments(assignments: tuple[str, ...]) -> SimpleDocument:
    """Build a document from NAME=VALUE pairs; repeated names add widget instances."""
    grouped: dict[str, list[str]] = {}
    for assignment in assignments:
        if '=' not in assignment:
            raise click.BadParameter(f"Expected NAME=VALUE, got {assignment!r}")
        name, value = assignment.split('=', 1)
        grouped.setdefault(name.strip(), []).append(value)

    document = SimpleDocument()
    for name, values in grouped.items():
        if len(values) == 1:
            document.add_field(name, values[0])
        else:
            document.add_field(name, values[0], instances=values)
    return document


def print_event(event: FieldEvent, alerts: list[str]) -> None:
    """Print the event state after an entry point ran."""
    table = Table(show_header=False)
    table.add_column("Key", style="bold")
    table.add_column("Value")

    table.add_row("value", repr(event.value))
    rc_style = "green" if event.rc else "red"
    table.add_row("rc", f"[{rc_style}]{event.rc}[/]")
    if event.target is not None and event.target.text_color is not None:
        table.add_row("textColor", str(event.target.text_color))
    for alert in alerts:
        table.add_row("alert", f"[yellow]{alert}[/]")

    console.print(table)


@click.group()
@click.version_option(__version__)
@click.option('--verbose', '-v', is_flag=True, help='Enable debug logging')
@click.option(
    '--log-file',
    type=click.Path(path_type=Path),
    help='Write a debug log to this file'
)
def cli(verbose: bool, log_file: Optional[Path]):
    """AForm field scripting tools."""
    setup_logging(verbose, log_file)


@cli.command()
@click.argument('function')
@click.argument('value')
@click.argument('args', nargs=-1)
@click.option('--commit/--typing', default=False, help='Commit the value or type into it')
@click.option('--change', default='', help='Text typed at the end of VALUE')
@click.option('--field', 'field_name', default='Field', help='Name of the target field')
@click.option('--set', 'assignments', multiple=True, help='Other field as NAME=VALUE')
@click.option(
    '--config', '-c',
    type=click.Path(exists=True, path_type=Path),
    help='YAML file overriding messages and preset tables'
)
def call(
    function: str,
    value: str,
    args: tuple[str, ...],
    commit: bool,
    change: str,
    field_name: str,
    assignments: tuple[str, ...],
    config: Optional[Path],
):
    """Run FUNCTION for a field holding VALUE, with ARGS as its arguments."""
    if function not in EVENT_ENTRY_POINTS and function not in UTILITY_ENTRY_POINTS:
        console.print(f"[bold red]Unknown entry point: {function}[/]")
        sys.exit(2)

    try:
        app = RecordingApp()
        aform = AForm(
            document=parse_assignments(assignments),
            app=app,
            config=load_config(config),
        )
        decoded = [decode_argument(arg) for arg in args]

        if function in UTILITY_ENTRY_POINTS:
            result = aform.call(function, *decoded)
            console.print(repr(result))
            return

        event = FieldEvent(
            value=value,
            will_commit=commit,
            target=SimpleField(name=field_name, value=value),
            change=change,
            sel_start=len(value),
            sel_end=len(value),
        )
        aform.call(function, *decoded, event=event)
        print_event(event, app.alerts)

    except (ValueError, TypeError) as e:
        console.print(f"[bold red]Error: {e}[/]")
        sys.exit(1)


@cli.command()
@click.option(
    '--config', '-c',
    type=click.Path(exists=True, path_type=Path),
    help='YAML file overriding messages and preset tables'
)
def presets(config: Optional[Path]):
    """List the date, time and mask presets."""
    settings = load_config(config)

    for title, formats in (
        ("Date formats", settings.date_formats),
        ("Time formats", settings.time_formats),
    ):
        table = Table(title=title)
        table.add_column("Index", justify="right")
        table.add_column("Format")
        for index, fmt in enumerate(formats):
            table.add_row(str(index), fmt)
        console.print(table)

    table = Table(title="Special masks")
    table.add_column("psf", justify="right")
    table.add_column("Mask")
    for psf, mask in SPECIAL_MASKS.items():
        if psf == 2:
            mask = f"{mask} / {PHONE_WITH_AREA_MASK}"
        table.add_row(str(psf), mask)
    console.print(table)


def main():
    """Entry point for ``python -m aform``."""
    cli()


if __name__ == '__main__':
    main()
