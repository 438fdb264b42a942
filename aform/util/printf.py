"""
String Formatting Primitives

``printf`` and ``printx`` as provided by the form scripting host. Number
formatting in AForm is expressed as printf format strings, so the
behaviour here has to match the host exactly, including:

- The ``%,N`` separator-style flag (N in 0..4)
- Half-up rounding of the exact binary value (0.125 -> "0.13")
- Rounding that carries into the integer part ("0.999" -> "1.00")
- Values in (-1, 0) losing their sign ("%.2f" of -0.5 -> "0.50")

Separator styles:
    0: 1,234.56    1: 1234.56    2: 1.234,56    3: 1234,56    4: 1'234.56
"""

import math
import re
from decimal import Decimal, ROUND_HALF_UP, localcontext
from typing import Any

from ..parser.numbers import is_number, make_number, js_to_string


SEPARATORS = {
    '0': (',', '.'),
    '1': ('', '.'),
    '2': ('.', ','),
    '3': ('', ','),
    '4': ("'", '.'),
}

_PRINTF_PATTERN = re.compile(
    r'%(,[0-4])?([+ 0#]+)?(\d+)?(\.\d+)?(.)', re.ASCII | re.DOTALL
)
_CARRY_PATTERN = re.compile(r'1\.0+')

# printf flag bits
PLUS = 1
SPACE = 2
ZERO = 4
HASH = 8

_FLAG_BITS = {'+': PLUS, ' ': SPACE, '0': ZERO, '#': HASH}


def to_fixed(value: float, digits: int) -> str:
    """Format a non-negative float with a fixed number of decimals, rounding half up."""
    quantum = Decimal(1).scaleb(-digits)
    with localcontext() as ctx:
        ctx.prec = max(28, digits + 24)
        return str(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))


def _as_number(arg: Any) -> float:
    if is_number(arg):
        return arg
    number = make_number(arg) if isinstance(arg, str) else None
    return math.nan if number is None else number


def _sign(value: float) -> int:
    return (value > 0) - (value < 0)


def _convert(match: re.Match, values: list) -> str:
    dec_sep, flag_text, width, precision, conv = match.groups()

    if conv not in 'dfsx':
        return '%' + ''.join(
            part for part in (dec_sep, flag_text, width, precision, conv) if part
        )

    if not values:
        return ''
    arg = values.pop(0)

    if conv == 's':
        return js_to_string(arg)

    flags = 0
    for flag in flag_text or '':
        flags |= _FLAG_BITS[flag]
    width = int(width) if width else None

    number = _as_number(arg)
    if math.isnan(number) or math.isinf(number):
        return js_to_string(float(number))

    int_part = math.trunc(number)

    if conv == 'x':
        hex_text = format(abs(int_part), 'X')
        if width is not None:
            hex_text = hex_text.rjust(width, '0' if flags & ZERO else ' ')
        return f"0x{hex_text}"

    thousand_sep, decimal_sep = SEPARATORS[dec_sep[1:] if dec_sep else '0']

    dec_part = ''
    if conv == 'f':
        fraction = abs(number - int_part)
        if precision:
            dec_text = to_fixed(fraction, int(precision[1:]))
        else:
            dec_text = js_to_string(float(fraction))

        if len(dec_text) > 2:
            if _CARRY_PATTERN.fullmatch(dec_text):
                int_part += _sign(number)
                dec_part = f"{decimal_sep}{dec_text.split('.')[1]}"
            else:
                dec_part = f"{decimal_sep}{dec_text[2:]}"
        else:
            if dec_text == '1':
                int_part += _sign(number)
            dec_part = '.' if flags & HASH else ''

    sign = ''
    if int_part < 0:
        sign = '-'
        int_part = -int_part
    elif flags & PLUS:
        sign = '+'
    elif flags & SPACE:
        sign = ' '

    if thousand_sep and int_part >= 1000:
        int_text = f"{int_part:,}".replace(',', thousand_sep)
    else:
        int_text = str(int_part)

    text = f"{int_text}{dec_part}"
    if width is not None:
        text = text.rjust(width - len(sign), '0' if flags & ZERO else ' ')

    return f"{sign}{text}"


def printf(fmt: str, *args: Any) -> str:
    """
    Format values into a printf-style string.

    Supported conversions are d, f, s and x; any other conversion is
    copied to the output unchanged. Missing arguments render as "".

    Examples:
        printf("%,0.2f", 1234.5)    # "1,234.50"
        printf("%,2.2f", 1234.5)    # "1.234,50"
        printf("%.0f", 0.5)         # "1"
    """
    values = list(args)
    return _PRINTF_PATTERN.sub(lambda m: _convert(m, values), fmt)


def _is_alpha(char: str) -> bool:
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z')


def _is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def printx(fmt: str, source: Any) -> str:
    """
    Format source text through a picture mask.

    Mask commands:
        ?   copy the next character
        X   copy the next letter or digit (skipping others)
        A   copy the next letter
        9   copy the next digit
        *   copy the rest of the source
        \\   output the next mask character literally
        >   upper case from here on
        <   lower case from here on
        =   preserve case from here on

    Any other mask character is output as-is. Output stops when the
    source text is exhausted.
    """
    source = '' if source is None else js_to_string(source)
    case_handlers = {
        '=': lambda c: c,
        '>': str.upper,
        '<': str.lower,
    }
    convert_case = case_handlers['=']

    buf = []
    i = 0
    escaped = False

    for command in fmt:
        if escaped:
            buf.append(command)
            escaped = False
            continue
        if i >= len(source):
            break

        if command == '?':
            buf.append(convert_case(source[i]))
            i += 1
        elif command in 'XA9':
            accept = {
                'X': lambda c: _is_alpha(c) or _is_digit(c),
                'A': _is_alpha,
                '9': _is_digit,
            }[command]
            while i < len(source):
                char = source[i]
                i += 1
                if accept(char):
                    buf.append(convert_case(char))
                    break
        elif command == '*':
            buf.append(convert_case(source[i:]))
            i = len(source)
        elif command == '\\':
            escaped = True
        elif command in case_handlers:
            convert_case = case_handlers[command]
        else:
            buf.append(command)

    return ''.join(buf)
