"""
Mask Validation Module

Positional character masks for structured input such as zip codes, phone
numbers and social security numbers.

Mask characters:
    9   ASCII digit
    A   ASCII letter
    O   ASCII letter or digit
    X   any character
    *   any other character is a literal that must match exactly

While the user types, input is checked against the mask prefix of the same
length, so "555-1" is fine against "999-9999". On commit the input must
cover the whole mask.

Keystrokes are first probed against a simplified mask holding only the
wildcards (so "5551234" passes "999-9999"); only when that probe fails is
the full mask applied, with an alert on failure.
"""

import re
from dataclasses import dataclass
from enum import Enum, auto
from typing import Any, Callable, Optional

from loguru import logger

from ..constants import (
    PHONE_MASK,
    PHONE_WITH_AREA_MASK,
    SPECIAL_MASKS,
    SSN_MASK,
    ZIP_MASK,
    ZIP_PLUS_FOUR_MASK,
)
from ..context import FormContext
from ..event import FieldEvent
from ..parser.numbers import make_number


def _is_digit(char: str) -> bool:
    return '0' <= char <= '9'


def _is_letter(char: str) -> bool:
    return ('a' <= char <= 'z') or ('A' <= char <= 'Z')


CHECKERS: dict[str, Callable[[str], bool]] = {
    '9': _is_digit,
    'A': _is_letter,
    'O': lambda char: _is_letter(char) or _is_digit(char),
    'X': lambda char: True,
}

# Punctuation ignored when probing phone numbers
_PHONE_PUNCTUATION = re.compile(r'([-()]|\s)+')
_NON_WILDCARD = re.compile(r'[^9AOX]')
_DIGIT = re.compile(r'\d', re.ASCII)

PHONE_DIGIT_THRESHOLD = 7


class MaskStatus(Enum):
    """Outcome of checking input against a mask."""
    ACCEPT = auto()
    REJECT_SILENT = auto()
    REJECT_WITH_MESSAGE = auto()


@dataclass
class MaskOutcome:
    """
    Result of a mask check.

    ``suffix`` holds the literal mask characters past the end of the input,
    appended to the field on a successful commit.
    """
    status: MaskStatus
    mask: str = ""
    message: Optional[str] = None
    suffix: str = ""

    @property
    def accepted(self) -> bool:
        return self.status is MaskStatus.ACCEPT


def matches_mask(value: str, mask: str) -> bool:
    """Check each input character against the mask character at its position."""
    for char, mask_char in zip(value, mask):
        checker = CHECKERS.get(mask_char)
        if checker:
            if not checker(char):
                return False
        elif mask_char != char:
            return False
    return len(value) <= len(mask)


def simplify_mask(mask: str) -> str:
    """Keep only the wildcard characters of a mask."""
    return _NON_WILDCARD.sub('', mask)


def check_mask(
    value: str,
    mask: str,
    will_commit: bool,
    warn: bool,
    message: str = "",
) -> MaskOutcome:
    """
    Check input against a mask without touching any event.

    Args:
        value: Prospective field text
        mask: Mask to check against
        will_commit: Whether the input is being committed
        warn: Whether a rejection should carry an alert message
        message: Alert prefix; the mask is appended to it

    Returns:
        MaskOutcome describing acceptance and any alert to show
    """
    if not mask or not value:
        return MaskOutcome(MaskStatus.ACCEPT, mask)

    rejection = MaskOutcome(
        MaskStatus.REJECT_WITH_MESSAGE if warn else MaskStatus.REJECT_SILENT,
        mask,
        f'{message} = "{mask}"' if warn else None,
    )

    if len(value) > len(mask):
        return rejection

    if will_commit:
        if len(value) < len(mask) or not matches_mask(value, mask):
            return rejection
        return MaskOutcome(MaskStatus.ACCEPT, mask, suffix=mask[len(value):])

    if not matches_mask(value, mask[:len(value)]):
        return rejection
    return MaskOutcome(MaskStatus.ACCEPT, mask)


def count_digits(value: str) -> int:
    return len(_DIGIT.findall(value))


def select_phone_mask(value: str) -> str:
    """Pick the phone mask with an area code once more than seven digits are typed."""
    if count_digits(value) > PHONE_DIGIT_THRESHOLD:
        return PHONE_WITH_AREA_MASK
    return PHONE_MASK


class MaskValidator:
    """
    Keystroke and format handlers for masked fields.

    Usage:
        validator = MaskValidator(FormContext())
        event = FieldEvent(value="123456789", will_commit=True)
        validator.special_keystroke(event, 3)   # SSN
        event.rc   # True
    """

    def __init__(self, context: FormContext):
        self.context = context

    def _check(self, event: FieldEvent, mask: str, value: Optional[str], warn: bool) -> MaskOutcome:
        value = value or self.context.merge_change(event)
        return check_mask(
            value,
            mask,
            event.will_commit,
            warn,
            self.context.message('IDS_INVALID_VALUE'),
        )

    def _apply(self, event: FieldEvent, outcome: MaskOutcome) -> None:
        """Write a mask outcome back to the event."""
        if outcome.accepted:
            if event.will_commit and outcome.suffix:
                event.value = f"{event.value}{outcome.suffix}"
            return

        if outcome.status is MaskStatus.REJECT_WITH_MESSAGE:
            self.context.alert(outcome.message)
        logger.debug(f"Rejected input for mask {outcome.mask!r}")
        event.rc = False

    def keystroke_ex(self, event: FieldEvent, mask: str) -> None:
        """
        Validate a keystroke against a custom mask.

        The simplified mask is tried silently first; if it rejects the
        input the full mask decides, alerting on failure.
        """
        outcome = self._check(event, simplify_mask(mask), None, warn=False)
        if outcome.accepted:
            self._apply(event, outcome)
            return

        event.rc = True
        self._apply(event, self._check(event, mask, None, warn=True))

    def special_keystroke(self, event: FieldEvent, psf: Any) -> None:
        """
        Validate a keystroke against a preset mask.

        Args:
            psf: 0 zip, 1 zip+4, 2 phone, 3 SSN

        Raises:
            ValueError: If psf is not a known preset
        """
        psf = make_number(psf)
        if psf not in SPECIAL_MASKS:
            raise ValueError(f"Invalid psf in special keystroke: {psf!r}")

        value = self.context.merge_change(event)
        masks = [SPECIAL_MASKS[psf]]
        if masks[0] == PHONE_MASK:
            masks.append(PHONE_WITH_AREA_MASK)

        for mask in masks:
            outcome = self._check(event, mask, value, warn=False)
            if outcome.accepted:
                self._apply(event, outcome)
                return

        value = _PHONE_PUNCTUATION.sub('', value)
        for mask in masks:
            outcome = self._check(
                event, _PHONE_PUNCTUATION.sub('', mask), value, warn=False
            )
            if outcome.accepted:
                self._apply(event, outcome)
                return

        if len(masks) > 1:
            mask = select_phone_mask(value)
        else:
            mask = masks[0]
        self.keystroke_ex(event, mask)

    def special_format(self, event: FieldEvent, psf: Any) -> None:
        """
        Format the event value through a preset mask.

        Raises:
            ValueError: If psf is not a known preset
        """
        if not event.value:
            return

        psf = make_number(psf)
        printx = self.context.util.printx

        if psf == 0:
            mask = ZIP_MASK
        elif psf == 1:
            mask = ZIP_PLUS_FOUR_MASK
        elif psf == 2:
            if len(printx("9999999999", event.value)) >= 10:
                mask = PHONE_WITH_AREA_MASK
            else:
                mask = PHONE_MASK
        elif psf == 3:
            mask = SSN_MASK
        else:
            raise ValueError(f"Invalid psf in special format: {psf!r}")

        event.value = printx(mask, event.value)
