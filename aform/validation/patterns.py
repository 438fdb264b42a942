"""
Pattern Validation Module

E-mail syntax check and whole-string pattern matching.

``exact_match`` keeps the legacy return values scripts depend on: a single
pattern yields ``True`` or ``0`` (not ``False``), a list of patterns
yields the 1-based index of the first full match or ``0``.
"""

import re
from typing import Pattern, Sequence, Union

from loguru import logger

from ..constants import EMAIL_PATTERN


PatternLike = Union[str, Pattern]

_EMAIL_RE = re.compile(EMAIL_PATTERN)


def email_validate(text: str, pattern: PatternLike = _EMAIL_RE) -> bool:
    """Check that text is a syntactically valid e-mail address."""
    if not isinstance(text, str):
        return False
    return re.fullmatch(pattern, text) is not None


def _full_match(pattern: PatternLike, text: str) -> bool:
    """True when the first match of the pattern spans the whole text."""
    match = re.search(pattern, text)
    return match is not None and match.group(0) == text


def exact_match(patterns: Union[PatternLike, Sequence[PatternLike]], text: str):
    """
    Match text against one pattern or an ordered list of patterns.

    Args:
        patterns: A pattern, or a sequence of patterns tried in order
        text: Text to match

    Returns:
        For one pattern: True on a full match, else 0.
        For a sequence: 1-based index of the first full match, else 0.
    """
    if isinstance(patterns, (str, re.Pattern)):
        return _full_match(patterns, text) or 0

    for index, pattern in enumerate(patterns, start=1):
        if _full_match(pattern, text):
            return index

    logger.debug(f"No pattern matched {text!r}")
    return 0
