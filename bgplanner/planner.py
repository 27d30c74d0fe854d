"""Query engine: filter a game collection and sort the result."""

import logging
from typing import Iterable

from bgplanner import columns
from bgplanner.columns import Column
from bgplanner.errors import MalformedClauseError
from bgplanner.models import GameRecord
from bgplanner.predicates import build_predicate
from bgplanner.query_parser import ConditionParser

logger = logging.getLogger(__name__)

SORT_SEPARATOR = ":"
SORT_DIRECTIONS = {"asc": True, "ascending": True, "desc": False, "descending": False}

_parser = ConditionParser()


def query(
    records: Iterable[GameRecord],
    filter_str: str | None = None,
    sort_column: Column | str = Column.NAME,
    ascending: bool = True,
) -> list[GameRecord]:
    """Filter and sort a collection of games.

    Every call works from the full input; nothing carries over between
    calls. The input is copied on entry and never modified.

    Args:
        records: Games to search (any iterable, e.g. a GameList)
        filter_str: Comma-separated clauses ANDed together; None or blank
            keeps every record
        sort_column: Column (or column name) to sort on
        ascending: Sort direction

    Returns:
        A new list of the matching records, stably sorted

    Raises:
        QueryError: If any clause is invalid (no partial results)
    """
    snapshot = list(records)
    if isinstance(sort_column, str):
        sort_column = columns.resolve(sort_column)

    if filter_str is None or not filter_str.strip():
        matched = snapshot
    else:
        predicates = [build_predicate(c) for c in _parser.parse_filter(filter_str)]
        matched = [r for r in snapshot if all(p(r) for p in predicates)]
        logger.debug(
            "Filter %r (%d clauses) matched %d of %d games",
            filter_str, len(predicates), len(matched), len(snapshot),
        )

    # reverse=True keeps equal elements in input order, like a reversed comparator
    return sorted(matched, key=columns.sort_key(sort_column), reverse=not ascending)


def parse_sort_spec(spec: str | None) -> tuple[Column, bool]:
    """Parse "column[:asc|desc]" into (Column, ascending).

    An empty spec sorts by name ascending.
    """
    if spec is None or not spec.strip():
        return Column.NAME, True

    column_part, _, direction_part = spec.partition(SORT_SEPARATOR)
    column = columns.resolve(column_part)

    direction = direction_part.strip().lower()
    if not direction:
        return column, True
    if direction not in SORT_DIRECTIONS:
        raise MalformedClauseError(
            f"Unknown sort direction '{direction_part.strip()}'",
            hint="Use asc or desc, e.g. rating:desc",
        )
    return column, SORT_DIRECTIONS[direction]


class Planner:
    """Runs queries against a fixed base collection of games."""

    def __init__(self, games: Iterable[GameRecord]):
        self._games = tuple(dict.fromkeys(games))
        logger.debug("Planner initialized with %d games", len(self._games))

    def __len__(self) -> int:
        return len(self._games)

    @property
    def games(self) -> tuple[GameRecord, ...]:
        return self._games

    def filter(
        self,
        filter_str: str | None = None,
        sort_on: Column | str = Column.NAME,
        ascending: bool = True,
    ) -> list[GameRecord]:
        """Query the full base collection."""
        return query(self._games, filter_str, sort_on, ascending)

    def find(self, name: str) -> GameRecord | None:
        """Look up a game by name, ignoring case."""
        key = name.strip().lower()
        for game in self._games:
            if game.key == key:
                return game
        return None
