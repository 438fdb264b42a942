"""
Number Parsing Module

Turns raw field text into numbers or digit groups. Every other AForm
component goes through these helpers, so their quirks are deliberate and
match the scripting runtime forms were written against:

- The first comma is treated as a decimal point ("3,14" -> 3.14)
- Parsing takes the longest numeric prefix ("12abc" -> 12)
- Booleans are not numbers
- Infinite results are rejected

Field text like "1.234,56" is therefore NOT normalized to 1234.56; callers
that need separator-aware parsing validate the text first.
"""

import math
import re
from typing import Any, Optional, Union

from loguru import logger


Number = Union[int, float]

# Longest prefix accepted by the runtime's parseFloat
_FLOAT_PREFIX = re.compile(
    r'[+-]?(?:Infinity|(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)',
    re.ASCII,
)
_DIGIT_RUN = re.compile(r'\d+', re.ASCII)
_LIST_SEPARATOR = re.compile(r', ?')


def is_number(value: Any) -> bool:
    """True for int/float values, excluding bools."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def parse_float(text: str) -> float:
    """
    Parse the longest numeric prefix of a string.

    Returns NaN when the string does not start with a number.
    """
    match = _FLOAT_PREFIX.match(text.lstrip())
    if not match:
        return math.nan
    token = match.group(0)
    if token.lstrip('+-') == 'Infinity':
        return -math.inf if token.startswith('-') else math.inf
    return float(token)


def make_number(value: Any) -> Optional[Number]:
    """
    Convert field input to a number.

    Args:
        value: Number or field text

    Returns:
        The number, or None when the input is not a finite number
    """
    if is_number(value):
        return value
    if not isinstance(value, str):
        return None

    text = value.strip().replace(',', '.', 1)
    number = parse_float(text)
    if math.isnan(number) or math.isinf(number):
        logger.debug(f"Not a number: {value!r}")
        return None

    return number


def extract_nums(value: Any) -> Optional[list]:
    """
    Extract the runs of digits from field text.

    A number is returned as a single-element list. Text starting with a
    decimal separator gets a leading zero so ".5" yields ["0", "5"].
    """
    if is_number(value):
        return [value]
    if not value or not isinstance(value, str):
        return None

    if value[0] in '.,':
        value = f"0{value}"

    numbers = _DIGIT_RUN.findall(value)
    if not numbers:
        return None

    return numbers


def make_array_from_list(value: Any) -> Any:
    """Split a comma separated list of names; sequences pass through."""
    if isinstance(value, str):
        return _LIST_SEPARATOR.split(value)
    return value


def js_to_string(value: Any) -> str:
    """Render a value the way the scripting runtime stringifies it."""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer() and abs(value) < 1e21:
            return str(int(value))
        text = repr(value)
        if 'e' in text:
            # 1e-07 -> 1e-7, 1e+22 stays
            mantissa, exponent = text.split('e')
            sign = '-' if exponent.startswith('-') else '+'
            digits = exponent.lstrip('+-').lstrip('0') or '0'
            return f"{mantissa}e{sign}{digits}"
        return text
    if value is None:
        return "null"
    return str(value)
