"""
Formatting Package

Format and keystroke handlers for number, percent, date and time fields.

Usage:
    from aform.context import FormContext
    from aform.event import FieldEvent
    from aform.formatting import NumberFormatter

    event = FieldEvent(value="1234.5")
    NumberFormatter(FormContext()).format(event, 2, 0, 0, "", False)
    event.value   # "1,234.50"
"""

from .number import NumberFormatter, NumberStyle
from .percent import PercentFormatter
from .dates import DateTimeFormatter

__all__ = [
    'NumberFormatter',
    'NumberStyle',
    'PercentFormatter',
    'DateTimeFormatter',
]
