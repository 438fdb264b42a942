"""
Date Formatting Primitives

``printd`` renders a datetime through a picture format and ``scand``
parses text back through the same kind of format.

Format tokens:
    mmmm  full month name         dddd  full day name
    mmm   abbreviated month       ddd   abbreviated day
    mm    2-digit month           dd    2-digit day
    m     month                   d     day
    yyyy  4-digit year            yy    2-digit year (2000 + yy)
    HH/H  24-hour hour            hh/h  12-hour hour
    MM/M  minutes                 ss/s  seconds
    tt    am/pm                   t     a/p
    \\x    literal x

Integer formats select presets (0, 1, 2); any other integer is used as
its literal text.
"""

import re
from datetime import datetime
from typing import Any, Callable, Optional, Union

from loguru import logger

from ..constants import DAY_NAMES, MONTH_NAMES, GlobalConstants


DATE_PRESETS = {
    0: "D:yyyymmddHHMMss",
    1: "yyyy.mm.dd HH:MM:ss",
    2: "m/d/yy h:MM:ss tt",
}

_TOKEN_PATTERN = re.compile(
    r'(mmmm|mmm|mm|m|dddd|ddd|dd|d|yyyy|yy|HH|H|hh|h|MM|M|ss|s|tt|t|\\.)'
)
_DIGIT_RUN = re.compile(r'\d+', re.ASCII)

DateFormat = Union[str, int]


def resolve_format(fmt: DateFormat) -> str:
    """Map preset indices to their format string."""
    if isinstance(fmt, int) and not isinstance(fmt, bool):
        return DATE_PRESETS.get(fmt, str(fmt))
    return str(fmt)


def _twelve_hour(hours: int) -> int:
    return 1 + (hours + 11) % 12


_PRINTD_HANDLERS: dict[str, Callable[[datetime], str]] = {
    'mmmm': lambda d: MONTH_NAMES[d.month - 1],
    'mmm': lambda d: MONTH_NAMES[d.month - 1][:3],
    'mm': lambda d: f"{d.month:02d}",
    'm': lambda d: str(d.month),
    'dddd': lambda d: DAY_NAMES[(d.weekday() + 1) % 7],
    'ddd': lambda d: DAY_NAMES[(d.weekday() + 1) % 7][:3],
    'dd': lambda d: f"{d.day:02d}",
    'd': lambda d: str(d.day),
    'yyyy': lambda d: str(d.year),
    'yy': lambda d: f"{d.year % 100:02d}",
    'HH': lambda d: f"{d.hour:02d}",
    'H': lambda d: str(d.hour),
    'hh': lambda d: f"{_twelve_hour(d.hour):02d}",
    'h': lambda d: str(_twelve_hour(d.hour)),
    'MM': lambda d: f"{d.minute:02d}",
    'M': lambda d: str(d.minute),
    'ss': lambda d: f"{d.second:02d}",
    's': lambda d: str(d.second),
    'tt': lambda d: GlobalConstants.IDS_AM if d.hour < 12 else GlobalConstants.IDS_PM,
    't': lambda d: (GlobalConstants.IDS_AM if d.hour < 12 else GlobalConstants.IDS_PM)[0],
}


def printd(fmt: DateFormat, date: datetime) -> str:
    """
    Render a datetime through a picture format.

    Examples:
        printd("mmmm d, yyyy", datetime(2024, 1, 5))   # "January 5, 2024"
        printd("h:MM tt", datetime(2024, 1, 5, 15, 7)) # "3:07 pm"
    """
    fmt = resolve_format(fmt)

    def render(match: re.Match) -> str:
        token = match.group(0)
        if token.startswith('\\'):
            return token[1:]
        return _PRINTD_HANDLERS[token](date)

    return _TOKEN_PATTERN.sub(render, fmt)


def _month_from_name(text: str) -> Optional[int]:
    lowered = text.lower()
    for index, name in enumerate(MONTH_NAMES):
        if lowered == name.lower() or lowered == name[:3].lower():
            return index + 1
    return None


# token -> (regex, field it sets)
_SCAND_TOKENS = {
    'mmmm': ('(?i:(' + '|'.join(MONTH_NAMES) + '))', 'month_name'),
    'mmm': ('(?i:(' + '|'.join(n[:3] for n in MONTH_NAMES) + '))', 'month_name'),
    'mm': (r'(\d{2})', 'month'),
    'm': (r'(\d{1,2})', 'month'),
    'dddd': ('(?i:(' + '|'.join(DAY_NAMES) + '))', None),
    'ddd': ('(?i:(' + '|'.join(n[:3] for n in DAY_NAMES) + '))', None),
    'dd': (r'(\d{2})', 'day'),
    'd': (r'(\d{1,2})', 'day'),
    'yyyy': (r'(\d{4})', 'year'),
    'yy': (r'(\d{2})', 'short_year'),
    'HH': (r'(\d{2})', 'hour'),
    'H': (r'(\d{1,2})', 'hour'),
    'hh': (r'(\d{2})', 'hour'),
    'h': (r'(\d{1,2})', 'hour'),
    'MM': (r'(\d{2})', 'minute'),
    'M': (r'(\d{1,2})', 'minute'),
    'ss': (r'(\d{2})', 'second'),
    's': (r'(\d{1,2})', 'second'),
    'tt': ('(?i:([ap]m))', 'meridiem'),
    't': ('(?i:([ap]))', 'meridiem'),
}

# Field kind each token contributes to, used by the best-guess parser
_TOKEN_KIND = {
    'mmmm': 'm', 'mmm': 'm', 'mm': 'm', 'm': 'm',
    'dd': 'd', 'd': 'd',
    'yyyy': 'y', 'yy': 'y',
    'HH': 'H', 'H': 'H', 'hh': 'H', 'h': 'H',
    'MM': 'M', 'M': 'M',
    'ss': 's', 's': 's',
}


def _compile_scand(fmt: str) -> tuple[re.Pattern, list[Optional[str]]]:
    parts = []
    actions = []
    pos = 0
    for match in _TOKEN_PATTERN.finditer(fmt):
        parts.append(re.escape(fmt[pos:match.start()]))
        token = match.group(0)
        if token.startswith('\\'):
            parts.append(re.escape(token[1:]))
        else:
            regex, action = _SCAND_TOKENS[token]
            parts.append(regex)
            actions.append(action)
        pos = match.end()
    parts.append(re.escape(fmt[pos:]))
    return re.compile(''.join(parts), re.ASCII), actions


def _build_date(data: dict) -> Optional[datetime]:
    hour = data['hour']
    meridiem = data.get('meridiem')
    if meridiem:
        hour %= 12
        if meridiem.lower().startswith('p'):
            hour += 12
    try:
        return datetime(
            data['year'], data['month'], data['day'],
            hour, data['minute'], data['second'],
        )
    except (ValueError, OverflowError) as e:
        logger.debug(f"Date does not exist: {data} ({e})")
        return None


def _new_fields() -> dict:
    return {
        'year': datetime.now().year,
        'month': 1,
        'day': 1,
        'hour': 0,
        'minute': 0,
        'second': 0,
    }


def _guess_date(fmt: str, text: str) -> Optional[datetime]:
    """
    Best-effort parse for text that does not follow the format exactly.

    Digit runs are assigned to year/month/day in the order the format
    names them, then to hour/minute/second. A month name anywhere in the
    text fills the month.
    """
    order = []
    for match in _TOKEN_PATTERN.finditer(fmt):
        kind = _TOKEN_KIND.get(match.group(0))
        if kind and kind not in order:
            order.append(kind)

    if not order:
        return None

    data = _new_fields()
    date_order = [k for k in order if k in 'ymd']
    time_order = [k for k in order if k in 'HMs']

    if 'm' in date_order:
        for word in re.findall(r'[A-Za-z]+', text):
            month = _month_from_name(word)
            if month:
                data['month'] = month
                date_order.remove('m')
                break

    numbers = [int(n) for n in _DIGIT_RUN.findall(text)]
    if len(numbers) < len(date_order) or not numbers:
        return None

    fields = {'y': 'year', 'm': 'month', 'd': 'day',
              'H': 'hour', 'M': 'minute', 's': 'second'}
    for kind, number in zip(date_order + time_order, numbers):
        if kind == 'y' and number < 100:
            number += 2000
        data[fields[kind]] = number

    lowered = text.lower()
    if re.search(r'\d\s*p\.?m?\b', lowered):
        data['meridiem'] = 'pm'
    elif re.search(r'\d\s*a\.?m?\b', lowered):
        data['meridiem'] = 'am'

    return _build_date(data)


def scand(fmt: DateFormat, text: str, strict: bool = False) -> Optional[datetime]:
    """
    Parse date text through a picture format.

    Args:
        fmt: Format string or preset index
        text: Date text to parse
        strict: When False, text that does not match the format is
            parsed on a best-guess basis

    Returns:
        The parsed datetime, or None
    """
    fmt = resolve_format(fmt)
    text = str(text)
    pattern, actions = _compile_scand(fmt)

    match = pattern.fullmatch(text)
    if not match:
        return None if strict else _guess_date(fmt, text)

    data = _new_fields()
    for action, value in zip(actions, match.groups()):
        if action is None:
            continue
        if action == 'month_name':
            data['month'] = _month_from_name(value)
        elif action == 'short_year':
            data['year'] = 2000 + int(value)
        elif action == 'meridiem':
            data['meridiem'] = value
        else:
            data[action] = int(value)

    return _build_date(data)
