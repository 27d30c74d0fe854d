"""Board game planner: an in-memory catalog with a filter/sort query language."""

__version__ = "0.1.0"

from bgplanner.columns import Column, ValueKind
from bgplanner.errors import (
    InvalidOperatorError,
    InvalidValueError,
    MalformedClauseError,
    QueryError,
    UnknownColumnError,
)
from bgplanner.game_list import GameList
from bgplanner.models import GameRecord
from bgplanner.planner import Planner, query

__all__ = [
    "Column",
    "GameList",
    "GameRecord",
    "InvalidOperatorError",
    "InvalidValueError",
    "MalformedClauseError",
    "Planner",
    "QueryError",
    "UnknownColumnError",
    "ValueKind",
    "__version__",
    "query",
]
