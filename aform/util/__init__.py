"""
Util Package

Host string primitives the AForm API formats through:
- printf: numeric/string formatting with separator styles
- printx: picture-mask formatting of text
- printd / scand: date rendering and parsing through picture formats
"""

from .printf import printf, printx, to_fixed, SEPARATORS
from .dates import printd, scand, resolve_format, DATE_PRESETS


class FormatUtil:
    """
    Bundles the string primitives behind one object.

    Hosts with their own primitives can pass a replacement exposing the
    same four methods to ``AForm``.
    """

    def printf(self, fmt, *args):
        return printf(fmt, *args)

    def printx(self, fmt, source):
        return printx(fmt, source)

    def printd(self, fmt, date):
        return printd(fmt, date)

    def scand(self, fmt, text, strict=False):
        return scand(fmt, text, strict)


__all__ = [
    'FormatUtil',
    'printf',
    'printx',
    'to_fixed',
    'SEPARATORS',
    'printd',
    'scand',
    'resolve_format',
    'DATE_PRESETS',
]
