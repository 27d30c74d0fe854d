"""Column registry.

Maps case-insensitive column names and aliases to GameRecord fields, and
declares whether each column is compared as text or as a number.
"""

from enum import Enum
from typing import Any, Callable

from bgplanner.errors import UnknownColumnError
from bgplanner.models import GameRecord


class ValueKind(Enum):
    """How a column's values are compared."""

    TEXT = "text"
    NUMERIC = "numeric"


class Column(Enum):
    """Filterable and sortable columns of a GameRecord.

    Each member carries the record attribute it reads, its value kind, and
    the normalized aliases that resolve to it.
    """

    NAME = ("name", ValueKind.TEXT, ("name", "objectname"))
    MIN_PLAYERS = ("min_players", ValueKind.NUMERIC, ("minplayers",))
    MAX_PLAYERS = ("max_players", ValueKind.NUMERIC, ("maxplayers",))
    MIN_TIME = ("min_play_time", ValueKind.NUMERIC, ("mintime", "minplaytime"))
    MAX_TIME = ("max_play_time", ValueKind.NUMERIC, ("maxtime", "maxplaytime"))
    RATING = ("rating", ValueKind.NUMERIC, ("rating", "average"))
    DIFFICULTY = ("difficulty", ValueKind.NUMERIC, ("difficulty", "averageweight", "weight"))
    RANK = ("rank", ValueKind.NUMERIC, ("rank",))
    YEAR = ("year_published", ValueKind.NUMERIC, ("year", "yearpublished"))
    ID = ("id", ValueKind.NUMERIC, ("id",))

    def __init__(self, attribute: str, kind: ValueKind, aliases: tuple[str, ...]):
        self.attribute = attribute
        self.kind = kind
        self.aliases = aliases


def normalize_column_name(raw_name: str) -> str:
    """Trim, lowercase, and drop underscores and spaces."""
    return raw_name.strip().lower().replace("_", "").replace(" ", "")


# Alias -> Column lookup (built once from the enum)
_ALIASES: dict[str, Column] = {
    alias: column for column in Column for alias in column.aliases
}


def resolve(raw_name: str) -> Column:
    """Resolve a column name or alias.

    Args:
        raw_name: Column name as typed by the user (e.g. "min_players", "MinPlayers")

    Returns:
        The matching Column

    Raises:
        UnknownColumnError: If no alias matches
    """
    column = _ALIASES.get(normalize_column_name(raw_name))
    if column is None:
        raise UnknownColumnError(
            f"Unknown column '{raw_name.strip()}'",
            hint="Valid columns: " + ", ".join(c.name.lower() for c in Column),
        )
    return column


def value_kind(column: Column) -> ValueKind:
    """Whether a column compares as text or as a number."""
    return column.kind


def extract(column: Column, record: GameRecord) -> str | float:
    """Read a column from a record: str for text columns, float otherwise."""
    value = getattr(record, column.attribute)
    if column.kind is ValueKind.TEXT:
        return str(value)
    return float(value)


def sort_key(column: Column) -> Callable[[GameRecord], Any]:
    """Key function giving the column's natural ordering.

    Text sorts case-insensitively; numeric columns sort by value.
    """
    if column.kind is ValueKind.TEXT:
        return lambda record: extract(column, record).lower()
    return lambda record: extract(column, record)
