"""
Form Context Module

Bundles the host collaborators every AForm component talks to:

- app: alert surface (``app.alert(message)``)
- document: field lookup (``document.get_field(name)``)
- dispatcher: keystroke merge (``dispatcher.merge_change(event)``)
- util: string primitives (printf, printx, printd, scand)
- config: messages and preset tables

The context holds no per-event state; the FieldEvent is always passed
explicitly, so one context can serve any number of events.
"""

from typing import Any, Optional
from dataclasses import dataclass, field

from loguru import logger

from .config import AFormConfig
from .event import FieldEvent, default_merge_change
from .parser.numbers import js_to_string
from .util import FormatUtil


@dataclass
class FormContext:
    """Host collaborators shared by the AForm components."""
    app: Optional[Any] = None
    document: Optional[Any] = None
    dispatcher: Optional[Any] = None
    util: Any = field(default_factory=FormatUtil)
    config: AFormConfig = field(default_factory=AFormConfig)

    def alert(self, message: str) -> None:
        """Show a message to the user through the host."""
        logger.debug(f"Alert: {message}")
        if self.app is not None:
            self.app.alert(message)

    def message(self, key: str) -> str:
        """Get a configured alert message."""
        return self.config.message(key)

    def merge_change(self, event: FieldEvent) -> str:
        """
        Get the prospective field text for an event.

        On commit this is the event value itself; while typing it is the
        current text with the pending keystroke applied.
        """
        if event.will_commit:
            return js_to_string(event.value)

        if self.dispatcher is not None:
            return self.dispatcher.merge_change(event)
        return default_merge_change(event)
