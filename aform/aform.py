"""
AForm Entry Points

The legacy AForm API under the names form scripts call it by
(``AFNumber_Format``, ``AFSpecial_Keystroke``, ...). Each entry point
forwards to the component that implements it.

The field event is never global. Pass it explicitly:

    aform = AForm(document=doc, app=app)
    aform.AFNumber_Format(2, 0, 0, 0, "$", True, event=event)

or bind it for the duration of one dispatch:

    with aform.dispatch(event):
        aform.AFNumber_Keystroke(2, 0, 0, 0, "$", True)
"""

import re
from contextlib import contextmanager
from typing import Any, Iterator, Optional

from loguru import logger

from .calculate import AggregateCalculator, simple
from .config import AFormConfig
from .context import FormContext
from .event import FieldEvent
from .exceptions import NoEventError
from .formatting import DateTimeFormatter, NumberFormatter, PercentFormatter
from .parser.numbers import extract_nums, make_array_from_list, make_number
from .util import FormatUtil
from .validation import MaskValidator, RangeValidator, email_validate, exact_match


# Entry points that act on a field event
EVENT_ENTRY_POINTS = (
    'AFNumber_Format',
    'AFNumber_Keystroke',
    'AFPercent_Format',
    'AFPercent_Keystroke',
    'AFDate_FormatEx',
    'AFDate_Format',
    'AFDate_KeystrokeEx',
    'AFDate_Keystroke',
    'AFTime_FormatEx',
    'AFTime_Format',
    'AFTime_KeystrokeEx',
    'AFTime_Keystroke',
    'AFRange_Validate',
    'AFSimple_Calculate',
    'AFSpecial_Format',
    'AFSpecial_Keystroke',
    'AFSpecial_KeystrokeEx',
    'AFMergeChange',
)

# Entry points that only compute a result
UTILITY_ENTRY_POINTS = (
    'AFSimple',
    'AFParseDateEx',
    'AFExtractNums',
    'AFMakeNumber',
    'AFMakeArrayFromList',
    'AFExactMatch',
    'eMailValidate',
)


class AForm:
    """
    The AForm scripting API.

    Args:
        document: Field lookup (``get_field(name)``)
        app: Alert surface (``alert(message)``)
        util: String primitives; defaults to the bundled implementation
        dispatcher: Keystroke merge (``merge_change(event)``); defaults to
            merging the event's change into its selection
        config: Messages and preset tables
    """

    def __init__(
        self,
        document: Optional[Any] = None,
        app: Optional[Any] = None,
        util: Optional[Any] = None,
        dispatcher: Optional[Any] = None,
        config: Optional[AFormConfig] = None,
    ):
        self.context = FormContext(
            app=app,
            document=document,
            dispatcher=dispatcher,
            util=util or FormatUtil(),
            config=config or AFormConfig(),
        )
        self.numbers = NumberFormatter(self.context)
        self.percents = PercentFormatter(self.context, self.numbers)
        self.dates = DateTimeFormatter(self.context)
        self.ranges = RangeValidator(self.context)
        self.masks = MaskValidator(self.context)
        self.aggregates = AggregateCalculator(self.context)
        self._email_re = re.compile(self.context.config.email_pattern)
        self._event: Optional[FieldEvent] = None

    @contextmanager
    def dispatch(self, event: FieldEvent) -> Iterator[FieldEvent]:
        """Bind an event to entry points called without ``event=``."""
        previous = self._event
        self._event = event
        try:
            yield event
        finally:
            self._event = previous

    def call(self, name: str, *args: Any, event: Optional[FieldEvent] = None) -> Any:
        """Invoke an entry point by name."""
        if name in EVENT_ENTRY_POINTS:
            return getattr(self, name)(*args, event=event)
        if name in UTILITY_ENTRY_POINTS:
            return getattr(self, name)(*args)
        raise AttributeError(f"Unknown AForm entry point: {name}")

    def _event_for(self, event: Optional[FieldEvent], name: str) -> FieldEvent:
        event = event if event is not None else self._event
        if event is None:
            raise NoEventError(name)
        logger.debug(f"{name}: value={event.value!r} commit={event.will_commit}")
        return event

    # Parsing helpers

    def AFMergeChange(self, event: Optional[FieldEvent] = None) -> str:
        return self.context.merge_change(self._event_for(event, 'AFMergeChange'))

    def AFParseDateEx(self, text, order):
        return self.dates.parse_date(order, text)

    def AFExtractNums(self, text):
        return extract_nums(text)

    def AFMakeNumber(self, text):
        return make_number(text)

    def AFMakeArrayFromList(self, text):
        return make_array_from_list(text)

    # Number and percent

    def AFNumber_Format(self, n_dec, sep_style, neg_style, curr_style=None,
                        currency="", currency_prepend=False, *, event=None):
        self.numbers.format(
            self._event_for(event, 'AFNumber_Format'),
            n_dec, sep_style, neg_style, currency, currency_prepend,
        )

    def AFNumber_Keystroke(self, n_dec, sep_style, neg_style=0, curr_style=None,
                           currency="", currency_prepend=False, *, event=None):
        self.numbers.keystroke(
            self._event_for(event, 'AFNumber_Keystroke'),
            n_dec, sep_style, neg_style, currency, currency_prepend,
        )

    def AFPercent_Format(self, n_dec, sep_style, percent_prepend=False, *, event=None):
        self.percents.format(
            self._event_for(event, 'AFPercent_Format'),
            n_dec, sep_style, percent_prepend,
        )

    def AFPercent_Keystroke(self, n_dec, sep_style, *, event=None):
        self.percents.keystroke(
            self._event_for(event, 'AFPercent_Keystroke'), n_dec, sep_style
        )

    # Date and time

    def AFDate_FormatEx(self, fmt, *, event=None):
        self.dates.format_ex(self._event_for(event, 'AFDate_FormatEx'), fmt)

    def AFDate_Format(self, index, *, event=None):
        self.dates.format(self._event_for(event, 'AFDate_Format'), index)

    def AFDate_KeystrokeEx(self, fmt, *, event=None):
        self.dates.keystroke_ex(self._event_for(event, 'AFDate_KeystrokeEx'), fmt)

    def AFDate_Keystroke(self, index, *, event=None):
        self.dates.keystroke(self._event_for(event, 'AFDate_Keystroke'), index)

    def AFTime_FormatEx(self, fmt, *, event=None):
        self.dates.time_format_ex(self._event_for(event, 'AFTime_FormatEx'), fmt)

    def AFTime_Format(self, index, *, event=None):
        self.dates.time_format(self._event_for(event, 'AFTime_Format'), index)

    def AFTime_KeystrokeEx(self, fmt, *, event=None):
        self.dates.time_keystroke_ex(self._event_for(event, 'AFTime_KeystrokeEx'), fmt)

    def AFTime_Keystroke(self, index, *, event=None):
        self.dates.time_keystroke(self._event_for(event, 'AFTime_Keystroke'), index)

    # Validation and calculation

    def AFRange_Validate(self, has_min, min_value, has_max, max_value, *, event=None):
        self.ranges.validate(
            self._event_for(event, 'AFRange_Validate'),
            has_min, min_value, has_max, max_value,
        )

    def AFSimple(self, function, value1, value2):
        return simple(function, value1, value2)

    def AFSimple_Calculate(self, function, fields, *, event=None):
        self.aggregates.calculate(
            self._event_for(event, 'AFSimple_Calculate'), function, fields
        )

    # Masks

    def AFSpecial_Format(self, psf, *, event=None):
        self.masks.special_format(self._event_for(event, 'AFSpecial_Format'), psf)

    def AFSpecial_Keystroke(self, psf, *, event=None):
        self.masks.special_keystroke(self._event_for(event, 'AFSpecial_Keystroke'), psf)

    def AFSpecial_KeystrokeEx(self, mask, *, event=None):
        self.masks.keystroke_ex(self._event_for(event, 'AFSpecial_KeystrokeEx'), mask)

    # Patterns

    def eMailValidate(self, text):
        return email_validate(text, self._email_re)

    def AFExactMatch(self, patterns, text):
        return exact_match(patterns, text)
