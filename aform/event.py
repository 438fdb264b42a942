"""
Field Event Module

The FieldEvent is the one mutable record shared between the host and an
AForm entry point. The host builds it for a single interaction, passes it
to exactly one operation and reads back ``value`` and ``rc`` afterwards:

- ``value``: text (or number) the field will display or store
- ``rc``: whether the keystroke / commit is accepted
- ``will_commit``: False while the user is typing, True on commit
- ``change``, ``sel_start``, ``sel_end``: the pending keystroke, used to
  compute the prospective value while typing
"""

from typing import Any, Optional, Union
from dataclasses import dataclass

from .parser.numbers import js_to_string


@dataclass
class FieldEvent:
    """Per-interaction record passed into every AForm operation."""
    value: Union[str, int, float] = ""
    will_commit: bool = False
    rc: bool = True
    target: Optional[Any] = None        # FieldRef: exposes .name and .text_color
    change: str = ""                    # Text inserted by the keystroke
    sel_start: int = -1                 # Selection replaced by the keystroke
    sel_end: int = -1
    name: Optional[str] = None          # Event name (Keystroke, Format, ...)

    @property
    def target_name(self) -> str:
        """Bracketed target field name used inside alert messages."""
        if self.target is None:
            return ""
        return f"[ {self.target.name} ]"


def default_merge_change(event: FieldEvent) -> str:
    """
    Compute the text the field would hold once the pending keystroke
    replaces the current selection.
    """
    value = event.value
    if isinstance(value, (list, tuple)):
        value = value[0] if value else ""
    if not isinstance(value, str):
        value = js_to_string(value)

    prefix = value[:event.sel_start] if event.sel_start >= 0 else ""
    postfix = (
        value[event.sel_end:]
        if 0 <= event.sel_end <= len(value)
        else ""
    )
    return f"{prefix}{event.change}{postfix}"

