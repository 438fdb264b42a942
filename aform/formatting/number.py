"""
Number Formatting Module

Format and keystroke handlers for number and currency fields.

Format builds a printf format string around the value:

    [-][(][currency]%,<sep>.<nDec>f[currency][)]

Negative styles:
    0: leading minus sign
    1: red text, no sign
    2: parentheses
    3: parentheses and red text

Keystroke validation accepts partial numbers while the user types and
requires a complete number on commit. Separator styles 2 and above use a
comma as the decimal character.
"""

import math
import re
from typing import Any

from loguru import logger
from pydantic import BaseModel, field_validator

from ..constants import Color
from ..context import FormContext
from ..event import FieldEvent
from ..parser.numbers import make_number, parse_float, js_to_string


class NumberStyle(BaseModel):
    """
    Presentation settings for a number field.

    Built from the positional arguments of each call; digit counts are
    floored and the separator style is clamped into [0, 4].
    """
    n_dec: int = 2
    sep_style: int = 0
    neg_style: int = 0
    currency: str = ""
    currency_prepend: bool = False

    @field_validator('n_dec', mode='before')
    @classmethod
    def floor_decimals(cls, v):
        number = make_number(v)
        if number is None:
            raise ValueError(f'Decimal count must be a number, got {v!r}')
        return max(0, math.floor(number))

    @field_validator('sep_style', mode='before')
    @classmethod
    def clamp_separator(cls, v):
        number = make_number(v)
        if number is None:
            raise ValueError(f'Separator style must be a number, got {v!r}')
        return min(max(0, math.floor(number)), 4)

    @field_validator('neg_style', mode='before')
    @classmethod
    def floor_negative_style(cls, v):
        number = make_number(v)
        if number is None:
            raise ValueError(f'Negative style must be a number, got {v!r}')
        return math.floor(number)

    @field_validator('currency', mode='before')
    @classmethod
    def currency_text(cls, v):
        if v is None:
            return ""
        return js_to_string(v)

    @field_validator('currency_prepend', mode='before')
    @classmethod
    def truthy(cls, v):
        return bool(v)

    @property
    def uses_parentheses(self) -> bool:
        return self.neg_style in (2, 3)

    @property
    def uses_color(self) -> bool:
        return self.neg_style in (1, 3)

    def printf_format(self) -> str:
        """The printf conversion for the number itself."""
        return f"%,{self.sep_style}.{self.n_dec}f"


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


class NumberFormatter:
    """
    Number field handlers.

    Usage:
        formatter = NumberFormatter(FormContext())
        event = FieldEvent(value="-1234.5")
        formatter.format(event, 2, 0, 2, "$", True)
        event.value   # "($1,234.50)"
    """

    # Complete numbers, checked on commit
    DOT_COMMIT = re.compile(r'^[+-]?(\d+(\.\d*)?|\.\d+)$', re.ASCII)
    COMMA_COMMIT = re.compile(r'^[+-]?(\d+(,\d*)?|,\d+)$', re.ASCII)

    # Anything that can still become a number, checked while typing
    DOT_TYPING = re.compile(r'^[+-]?\d*\.?\d*$', re.ASCII)
    COMMA_TYPING = re.compile(r'^[+-]?\d*,?\d*$', re.ASCII)

    def __init__(self, context: FormContext):
        self.context = context

    def format(
        self,
        event: FieldEvent,
        n_dec: Any,
        sep_style: Any,
        neg_style: Any,
        currency: Any = "",
        currency_prepend: Any = False,
    ) -> None:
        """
        Render the event value as a number or currency string.

        Unparsable values clear the field.
        """
        style = NumberStyle(
            n_dec=n_dec,
            sep_style=sep_style,
            neg_style=neg_style,
            currency=currency,
            currency_prepend=currency_prepend,
        )

        value = make_number(event.value)
        if value is None:
            logger.debug(f"Clearing unparsable number: {event.value!r}")
            event.value = ""
            return

        sign = _sign(value)
        buf = []
        has_paren = False

        if sign == -1 and style.currency_prepend and style.neg_style == 0:
            buf.append("-")

        if style.uses_parentheses and sign == -1:
            buf.append("(")
            has_paren = True

        if style.currency_prepend:
            buf.append(style.currency)

        buf.append(style.printf_format())

        if not style.currency_prepend:
            buf.append(style.currency)

        if has_paren:
            buf.append(")")

        if style.uses_color and event.target is not None:
            # Zero is drawn red as well; only positive values are black
            event.target.text_color = Color.BLACK if sign == 1 else Color.RED

        if (style.neg_style != 0 or style.currency_prepend) and sign == -1:
            value = -value

        event.value = self.context.util.printf(''.join(buf), value)

    def keystroke(
        self,
        event: FieldEvent,
        n_dec: Any,
        sep_style: Any,
        neg_style: Any = 0,
        currency: Any = "",
        currency_prepend: Any = False,
    ) -> None:
        """
        Accept or reject a keystroke in a number field.

        Only the separator style matters here; the other arguments are
        kept so every number handler shares one signature.
        """
        value = self.context.merge_change(event)
        if not value:
            return
        value = value.strip()

        sep = make_number(sep_style)
        comma_decimal = sep is not None and sep > 1
        if comma_decimal:
            pattern = self.COMMA_COMMIT if event.will_commit else self.COMMA_TYPING
        else:
            pattern = self.DOT_COMMIT if event.will_commit else self.DOT_TYPING

        if not pattern.fullmatch(value):
            if event.will_commit:
                err = f"{self.context.message('IDS_INVALID_VALUE')} {event.target_name}"
                self.context.alert(err)
            logger.debug(f"Rejected number input: {value!r}")
            event.rc = False

        if event.will_commit and comma_decimal:
            event.value = parse_float(value.replace(",", ".", 1))
