"""
Validation Package

Validate and keystroke handlers that accept or reject field input:
- Numeric range checks
- Positional character masks (zip, phone, SSN, custom)
- E-mail syntax and exact pattern matching
"""

from .range import RangeValidator
from .mask import (
    CHECKERS,
    MaskStatus,
    MaskOutcome,
    MaskValidator,
    check_mask,
    matches_mask,
    simplify_mask,
    select_phone_mask,
)
from .patterns import email_validate, exact_match

__all__ = [
    'RangeValidator',
    'CHECKERS',
    'MaskStatus',
    'MaskOutcome',
    'MaskValidator',
    'check_mask',
    'matches_mask',
    'simplify_mask',
    'select_phone_mask',
    'email_validate',
    'exact_match',
]
