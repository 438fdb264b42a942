"""
Host Module

Minimal in-memory stand-ins for the objects a form host supplies: fields,
the document that looks them up, and the application alert surface. The
CLI runs on these, and they are convenient for embedding AForm in tests or
batch tools that have no real viewer behind them.
"""

from typing import Any, Optional
from dataclasses import dataclass, field

from loguru import logger


@dataclass
class SimpleField:
    """
    A form field with an optional set of widget instances.

    ``get_array()`` returns the widgets when there are any, otherwise the
    field itself, so aggregates see every displayed value.
    """
    name: str
    value: Any = ""
    text_color: Any = None
    kids: list['SimpleField'] = field(default_factory=list)

    def get_array(self) -> list['SimpleField']:
        """Get the field instances carrying values."""
        if self.kids:
            return list(self.kids)
        return [self]


class SimpleDocument:
    """Field lookup by fully qualified name."""

    def __init__(self, fields: Optional[dict[str, Any]] = None):
        self._fields: dict[str, SimpleField] = {}
        for name, value in (fields or {}).items():
            self.add_field(name, value)

    def add_field(self, name: str, value: Any = "", instances: Optional[list] = None) -> SimpleField:
        """
        Add a field.

        Args:
            name: Field name
            value: Field value
            instances: Values of individual widget instances, if the
                field has more than one
        """
        kids = [SimpleField(name=name, value=v) for v in instances or []]
        field_ref = SimpleField(name=name, value=value, kids=kids)
        self._fields[name] = field_ref
        return field_ref

    def get_field(self, name: str) -> Optional[SimpleField]:
        """Get a field by name, or None."""
        return self._fields.get(name)

    def __contains__(self, name: str) -> bool:
        return name in self._fields


class RecordingApp:
    """Alert surface that records messages instead of showing a dialog."""

    def __init__(self):
        self.alerts: list[str] = []

    def alert(self, message: str) -> None:
        logger.info(f"Alert shown: {message}")
        self.alerts.append(message)

    def clear(self) -> None:
        self.alerts.clear()
