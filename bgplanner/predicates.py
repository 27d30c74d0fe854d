"""Predicate builders for parsed conditions."""

import operator
from typing import Callable

from bgplanner.columns import ValueKind, extract
from bgplanner.models import GameRecord
from bgplanner.query_parser import Condition, Operator

Predicate = Callable[[GameRecord], bool]

# Comparison functions for every operator except CONTAINS
_COMPARATORS = {
    Operator.EQUALS: operator.eq,
    Operator.NOT_EQUALS: operator.ne,
    Operator.GREATER_THAN: operator.gt,
    Operator.LESS_THAN: operator.lt,
    Operator.GREATER_EQUAL: operator.ge,
    Operator.LESS_EQUAL: operator.le,
}


def build_predicate(condition: Condition) -> Predicate:
    """Build a reusable test for one condition."""
    if condition.column.kind is ValueKind.TEXT:
        return _text_predicate(condition)
    return _numeric_predicate(condition)


def _text_predicate(condition: Condition) -> Predicate:
    column = condition.column
    needle = str(condition.literal).lower()

    if condition.operator is Operator.CONTAINS:
        def contains(record: GameRecord) -> bool:
            return needle in extract(column, record).lower()
        return contains

    compare = _COMPARATORS[condition.operator]

    def text_compare(record: GameRecord) -> bool:
        return compare(extract(column, record).lower(), needle)
    return text_compare


def _numeric_predicate(condition: Condition) -> Predicate:
    column = condition.column
    # Exact float comparison; == has no tolerance
    target = float(condition.literal)
    compare = _COMPARATORS[condition.operator]

    def numeric_compare(record: GameRecord) -> bool:
        return compare(extract(column, record), target)
    return numeric_compare
