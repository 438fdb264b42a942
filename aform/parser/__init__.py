"""
Parser Package

Turns raw field text into numbers, digit groups and name lists.

Usage:
    from aform.parser import make_number, extract_nums

    make_number("3,14")     # 3.14
    extract_nums(".5")      # ["0", "5"]
"""

from .numbers import (
    Number,
    is_number,
    parse_float,
    make_number,
    extract_nums,
    make_array_from_list,
    js_to_string,
)

__all__ = [
    'Number',
    'is_number',
    'parse_float',
    'make_number',
    'extract_nums',
    'make_array_from_list',
    'js_to_string',
]
