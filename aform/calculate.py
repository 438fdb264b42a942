"""
Calculation Module

Calculate handlers that derive a field value from other fields.

Supported operators:
    AVG  arithmetic mean
    SUM  sum
    PRD  product
    MIN  minimum
    MAX  maximum

Every widget instance of every named field contributes one value;
unparsable values count as 0. Results are rounded to six decimals.
"""

import math
from typing import Any, Callable, Iterable

from loguru import logger

from .context import FormContext
from .event import FieldEvent
from .parser.numbers import make_number, make_array_from_list


OPERATORS: dict[str, Callable[[list], float]] = {
    'AVG': lambda values: sum(values) / len(values),
    'SUM': lambda values: sum(values),
    'PRD': lambda values: math.prod(values),
    'MIN': lambda values: min(values),
    'MAX': lambda values: max(values),
}


def round_half_up(value: float, places: int = 6) -> float:
    """Round to a number of decimals, ties toward positive infinity."""
    scaled = 10 ** places * value
    if not math.isfinite(scaled):
        return value
    return math.floor(scaled + 0.5) / 10 ** places


def simple(function: str, value1: Any, value2: Any) -> float:
    """
    Apply an operator to two values.

    Raises:
        ValueError: If an operand is not a number or the operator is unknown
    """
    number1 = make_number(value1)
    if number1 is None:
        raise ValueError("Invalid value1 in simple calculation")

    number2 = make_number(value2)
    if number2 is None:
        raise ValueError("Invalid value2 in simple calculation")

    if function not in OPERATORS:
        raise ValueError(f"Invalid function in simple calculation: {function!r}")

    return OPERATORS[function]([number1, number2])


class AggregateCalculator:
    """
    Calculate handler reducing a set of fields with one operator.

    Usage:
        calculator = AggregateCalculator(FormContext(document=doc))
        event = FieldEvent()
        calculator.calculate(event, "SUM", "price, tax")
    """

    def __init__(self, context: FormContext):
        self.context = context

    def collect(self, names: Iterable[str]) -> list[float]:
        """Collect the numeric values of every instance of the named fields."""
        values = []
        document = self.context.document

        for name in names:
            field_ref = document.get_field(name) if document is not None else None
            if not field_ref:
                logger.debug(f"Field not found for calculation: {name}")
                continue
            for child in field_ref.get_array():
                number = make_number(child.value)
                values.append(0 if number is None else number)

        return values

    def calculate(self, event: FieldEvent, function: str, fields: Any) -> None:
        """
        Set the event value to an aggregate over the named fields.

        Args:
            event: Field event receiving the result
            function: One of AVG, SUM, PRD, MIN, MAX
            fields: Field names as a list or comma separated string

        Raises:
            TypeError: If the operator is unknown
        """
        if function not in OPERATORS:
            raise TypeError(f"Invalid function in aggregate calculation: {function!r}")

        values = self.collect(make_array_from_list(fields))
        if not values:
            event.value = 0
            return

        result = OPERATORS[function](values)
        event.value = round_half_up(result)
