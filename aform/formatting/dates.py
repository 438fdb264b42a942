"""
Date and Time Formatting Module

Format and keystroke handlers for date and time fields. Parsing goes
through the host's ``scand`` in non-strict mode first; when that fails
the text is handed to dateutil's generic parser, mirroring how viewers
fall back to the runtime's own date parsing.

Time fields share the same parse/format mechanism and differ only in the
preset table their indexed handlers read.
"""

from datetime import datetime
from typing import Any, Optional

from dateutil import parser as date_parser
from loguru import logger

from ..context import FormContext
from ..event import FieldEvent


class DateTimeFormatter:
    """
    Date and time field handlers.

    Usage:
        formatter = DateTimeFormatter(FormContext())
        event = FieldEvent(value="2024-01-05")
        formatter.format_ex(event, "mmmm d, yyyy")
        event.value   # "January 5, 2024"
    """

    def __init__(self, context: FormContext):
        self.context = context

    @property
    def date_formats(self) -> list[str]:
        return self.context.config.date_formats

    @property
    def time_formats(self) -> list[str]:
        return self.context.config.time_formats

    def parse_date(self, fmt: Any, text: Any) -> Optional[datetime]:
        """
        Parse date text, falling back to generic parsing.

        Returns:
            The parsed datetime, or None
        """
        date = None
        try:
            date = self.context.util.scand(fmt, text, False)
        except (ValueError, TypeError, KeyError) as e:
            logger.debug(f"scand failed for {text!r} with format {fmt!r}: {e}")
        if date:
            return date

        try:
            return date_parser.parse(str(text))
        except (ValueError, OverflowError) as e:
            logger.debug(f"Could not parse date: {text!r} ({e})")
            return None

    def format_ex(self, event: FieldEvent, fmt: Any) -> None:
        """Reformat the event value through a date format."""
        value = event.value
        if not value:
            return

        date = self.parse_date(fmt, value)
        if date is not None:
            event.value = self.context.util.printd(fmt, date)

    def keystroke_ex(self, event: FieldEvent, fmt: Any) -> None:
        """Reject a committed value that is not a date."""
        if not event.will_commit:
            return

        value = self.context.merge_change(event)
        if not value:
            return

        if self.parse_date(fmt, value) is None:
            err = (
                f"{self.context.message('IDS_INVALID_DATE')} {event.target_name}"
                f"{self.context.message('IDS_INVALID_DATE2')}{fmt}"
            )
            self.context.alert(err)
            event.rc = False

    def format(self, event: FieldEvent, index: Any) -> None:
        """
        Format with a preset date format.

        An index outside the table is used as the format itself.
        """
        self.format_ex(event, _lookup(self.date_formats, index))

    def keystroke(self, event: FieldEvent, index: Any) -> None:
        """Validate with a preset date format; unknown indices are ignored."""
        position = _preset_index(self.date_formats, index)
        if position is not None:
            self.keystroke_ex(event, self.date_formats[position])

    def time_format_ex(self, event: FieldEvent, fmt: Any) -> None:
        self.format_ex(event, fmt)

    def time_format(self, event: FieldEvent, index: Any) -> None:
        self.format_ex(event, _lookup(self.time_formats, index))

    def time_keystroke_ex(self, event: FieldEvent, fmt: Any) -> None:
        self.keystroke_ex(event, fmt)

    def time_keystroke(self, event: FieldEvent, index: Any) -> None:
        position = _preset_index(self.time_formats, index)
        if position is not None:
            self.keystroke_ex(event, self.time_formats[position])


def _preset_index(table: list[str], index: Any) -> Optional[int]:
    """Table position for a preset index given as a number or digit string."""
    if isinstance(index, str) and index.isascii() and index.isdigit():
        index = int(index)
    if isinstance(index, bool) or not isinstance(index, (int, float)):
        return None
    if 0 <= index < len(table) and index == int(index):
        return int(index)
    return None


def _lookup(table: list[str], index: Any) -> Any:
    position = _preset_index(table, index)
    if position is not None:
        return table[position]
    return index
