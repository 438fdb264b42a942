"""
Percent Formatting Module

Percent fields store a fraction (0.25) and display it scaled by 100
("25.00%"). Keystroke validation is the number field's, with no currency
and the plain minus-sign style.
"""

import math
from typing import Any

from loguru import logger

from ..constants import MAX_PERCENT_DECIMALS
from ..context import FormContext
from ..event import FieldEvent
from ..parser.numbers import is_number, make_number
from .number import NumberFormatter, NumberStyle


class PercentFormatter:
    """Percent field handlers."""

    def __init__(self, context: FormContext, number_formatter: NumberFormatter = None):
        self.context = context
        self.number_formatter = number_formatter or NumberFormatter(context)

    def format(
        self,
        event: FieldEvent,
        n_dec: Any,
        sep_style: Any,
        percent_prepend: bool = False,
    ) -> None:
        """
        Render the event value as a percentage.

        Raises:
            ValueError: If n_dec is negative
        """
        if not is_number(n_dec) or not is_number(sep_style):
            logger.debug(
                f"Ignoring percent format with non-numeric arguments: "
                f"{n_dec!r}, {sep_style!r}"
            )
            return
        if n_dec < 0:
            raise ValueError("Invalid n_dec value in percent format")

        if n_dec > MAX_PERCENT_DECIMALS:
            event.value = "%"
            return

        style = NumberStyle(n_dec=math.floor(n_dec), sep_style=sep_style)

        value = make_number(event.value)
        if value is None:
            event.value = "%"
            return

        text = self.context.util.printf(style.printf_format(), value * 100)
        event.value = f"%{text}" if percent_prepend else f"{text}%"

    def keystroke(self, event: FieldEvent, n_dec: Any, sep_style: Any) -> None:
        """Accept or reject a keystroke in a percent field."""
        self.number_formatter.keystroke(event, n_dec, sep_style, 0, "", True)
