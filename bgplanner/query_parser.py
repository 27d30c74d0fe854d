"""Filter string parser.

Parses comma-separated ``column operator value`` clauses such as
``name~=Go,minPlayers>2`` into Condition objects.
"""

from dataclasses import dataclass
from enum import Enum

from bgplanner import columns
from bgplanner.columns import Column, ValueKind
from bgplanner.errors import (
    SUPPORTED_SYNTAX,
    InvalidOperatorError,
    InvalidValueError,
    MalformedClauseError,
    QueryError,
    UnknownColumnError,
)

__all__ = [
    "Condition",
    "ConditionParser",
    "InvalidOperatorError",
    "InvalidValueError",
    "MalformedClauseError",
    "OPERATOR_PRECEDENCE",
    "Operator",
    "QueryError",
    "SUPPORTED_SYNTAX",
    "UnknownColumnError",
    "find_operator",
    "split_filter",
]

CLAUSE_SEPARATOR = ","
QUOTE_CHARS = "\"'"


class Operator(Enum):
    """Comparison operators, valued by their symbol."""

    EQUALS = "=="
    NOT_EQUALS = "!="
    CONTAINS = "~="
    GREATER_THAN = ">"
    LESS_THAN = "<"
    GREATER_EQUAL = ">="
    LESS_EQUAL = "<="

    @property
    def symbol(self) -> str:
        return self.value


# Tie-break order for operators starting at the same position (two-character operators first)
OPERATOR_PRECEDENCE = (
    Operator.EQUALS,
    Operator.NOT_EQUALS,
    Operator.GREATER_EQUAL,
    Operator.LESS_EQUAL,
    Operator.CONTAINS,
    Operator.GREATER_THAN,
    Operator.LESS_THAN,
)

ALLOWED_OPERATORS = {
    ValueKind.TEXT: frozenset(Operator),
    ValueKind.NUMERIC: frozenset(Operator) - {Operator.CONTAINS},
}


@dataclass(frozen=True)
class Condition:
    """A parsed clause: literal is a str for text columns, a float otherwise."""

    column: Column
    operator: Operator
    literal: str | float

    def __str__(self) -> str:
        return f"{self.column.name.lower()}{self.operator.symbol}{self.literal}"


def find_operator(clause: str) -> Operator | None:
    """Return the operator that occurs leftmost in the clause.

    Operators starting at the same position are resolved in precedence
    order, so "name>=Go" is >= rather than >.
    """
    found: Operator | None = None
    found_at = -1
    for op in OPERATOR_PRECEDENCE:
        position = clause.find(op.symbol)
        if position != -1 and (found is None or position < found_at):
            found, found_at = op, position
    return found


def split_filter(filter_str: str) -> list[str]:
    """Split a filter string into its raw clause strings."""
    return filter_str.split(CLAUSE_SEPARATOR)


def _strip_quotes(value: str) -> str:
    if len(value) >= 2 and value[0] == value[-1] and value[0] in QUOTE_CHARS:
        return value[1:-1]
    return value


class ConditionParser:
    """Parser for single clauses and whole filter strings."""

    def parse(self, clause: str) -> Condition:
        """Parse one clause into a Condition.

        Args:
            clause: A fragment like "minPlayers >= 2" or 'name=="Go Fish"'

        Returns:
            The parsed Condition

        Raises:
            MalformedClauseError: No operator, or an empty column or value side
            UnknownColumnError: Column name does not resolve
            InvalidOperatorError: Operator not allowed for the column's kind
            InvalidValueError: Numeric literal does not parse
        """
        text = clause.strip()
        op = find_operator(text)
        if op is None:
            raise MalformedClauseError(
                f"No operator found in clause '{text}'",
                hint="Use one of == != >= <= ~= > <",
            )

        column_part, _, value_part = text.partition(op.symbol)
        column_part = column_part.strip()
        value_part = value_part.strip()
        if not column_part or not value_part:
            raise MalformedClauseError(
                f"Clause '{text}' is missing a column or a value",
                hint="Clauses look like column operator value, e.g. rating>=7",
            )
        value_part = _strip_quotes(value_part)

        column = columns.resolve(column_part)
        kind = columns.value_kind(column)
        if op not in ALLOWED_OPERATORS[kind]:
            raise InvalidOperatorError(
                f"Operator '{op.symbol}' cannot be used with {kind.value} column "
                f"'{column.name.lower()}'",
                hint="~= (contains) only works on text columns such as name",
            )

        if kind is ValueKind.NUMERIC:
            try:
                literal: str | float = float(value_part)
            except ValueError:
                raise InvalidValueError(
                    f"'{value_part}' is not a number",
                    hint=f"Column '{column.name.lower()}' needs a numeric value, e.g. {column_part}{op.symbol}3",
                ) from None
        else:
            literal = value_part

        return Condition(column=column, operator=op, literal=literal)

    def parse_filter(self, filter_str: str) -> list[Condition]:
        """Parse every clause of a filter string.

        Fails on the first bad clause; no partial result is returned.
        """
        return [self.parse(clause) for clause in split_filter(filter_str)]
