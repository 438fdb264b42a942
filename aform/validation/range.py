"""
Range Validation Module

Bounds check for numeric fields, run after a value is committed. At most
one alert is shown per call:

- both bounds active: "greater than or equal to X and less than or equal to Y"
- lower bound only:   "greater than or equal to X"
- otherwise:          "less than or equal to Y"

Empty or unparsable values are left alone; the keystroke handler is
responsible for rejecting malformed numbers.
"""

from typing import Any

from loguru import logger

from ..context import FormContext
from ..event import FieldEvent
from ..parser.numbers import make_number


class RangeValidator:
    """Validate handler for numeric bounds."""

    def __init__(self, context: FormContext):
        self.context = context

    def validate(
        self,
        event: FieldEvent,
        has_min: Any,
        min_value: Any,
        has_max: Any,
        max_value: Any,
    ) -> None:
        """
        Reject the event value when it falls outside the active bounds.

        Args:
            event: Field event holding the committed value
            has_min: Whether the lower bound is active
            min_value: Lower bound (inclusive)
            has_max: Whether the upper bound is active
            max_value: Upper bound (inclusive)
        """
        if not event.value:
            return

        value = make_number(event.value)
        if value is None:
            return

        has_min = bool(has_min)
        has_max = bool(has_max)

        if has_min:
            min_value = make_number(min_value)
            if min_value is None:
                return

        if has_max or not has_min:
            max_value = make_number(max_value)
            if max_value is None:
                return

        printf = self.context.util.printf
        err = ""
        if has_min and has_max:
            if value < min_value or value > max_value:
                err = printf(self.context.message('IDS_GT_AND_LT'), min_value, max_value)
        elif has_min:
            if value < min_value:
                err = printf(self.context.message('IDS_GREATER_THAN'), min_value)
        elif value > max_value:
            err = printf(self.context.message('IDS_LESS_THAN'), max_value)

        if err:
            logger.debug(f"Value {value} out of range: {err}")
            self.context.alert(err)
            event.rc = False
