"""
AForm Field Scripting

Formatting, validation and masking of interactive form field input,
compatible with the AForm scripting API that document forms call from
their field actions.

Features:
- Number, currency and percent formatting with separator/negative styles
- Date and time formatting and validation
- Numeric range validation
- Cross-field aggregate calculation (AVG, SUM, PRD, MIN, MAX)
- Character masks for zip codes, phone numbers, SSNs and custom masks
- E-mail syntax validation and exact pattern matching

Quick Start:
    from aform import AForm, FieldEvent
    from aform.host import SimpleDocument, RecordingApp

    aform = AForm(document=SimpleDocument(), app=RecordingApp())

    event = FieldEvent(value="-1234.5")
    aform.AFNumber_Format(2, 0, 2, 0, "$", True, event=event)
    print(event.value)  # ($1,234.50)

    event = FieldEvent(value="12a456789", will_commit=True)
    aform.AFSpecial_Keystroke(3, event=event)
    print(event.rc)     # False

CLI Usage:
    aform call AFPercent_Format 0.4567 2 0
    aform call AFSpecial_Keystroke 555-1234 2 --commit
    aform presets
"""

__version__ = '1.0.0'

from .aform import AForm, EVENT_ENTRY_POINTS, UTILITY_ENTRY_POINTS
from .event import FieldEvent
from .context import FormContext
from .config import AFormConfig, ConfigLoader, load_config
from .constants import Color, GlobalConstants, DATE_FORMATS, TIME_FORMATS
from .exceptions import AFormError, NoEventError

__all__ = [
    '__version__',
    'AForm',
    'EVENT_ENTRY_POINTS',
    'UTILITY_ENTRY_POINTS',
    'FieldEvent',
    'FormContext',
    'AFormConfig',
    'ConfigLoader',
    'load_config',
    'Color',
    'GlobalConstants',
    'DATE_FORMATS',
    'TIME_FORMATS',
    'AFormError',
    'NoEventError',
]
