"""Catalog import: load full game records from CSV or JSON exports."""

import csv
import logging
from pathlib import Path
from typing import Any, Callable, Iterable, Mapping

import ijson

from bgplanner.models import GameRecord

logger = logging.getLogger(__name__)

SUPPORTED_SUFFIXES = (".csv", ".json")


class CatalogError(Exception):
    """A catalog file could not be read."""


def _row_name(row: Mapping[str, Any]) -> Any:
    for key, value in row.items():
        if isinstance(key, str) and key.strip().lower() in ("name", "objectname"):
            return value
    return None


def _records_from_rows(
    rows: Iterable[Mapping[str, Any]],
    source: Path,
    progress_callback: Callable[[int], None] | None = None,
) -> list[GameRecord]:
    """Convert raw rows to unique GameRecords, keeping the first of any duplicate."""
    games: dict[str, GameRecord] = {}
    for line_no, row in enumerate(rows, start=1):
        if not isinstance(row, Mapping):
            raise CatalogError(f"{source.name} row {line_no}: expected an object")
        name = _row_name(row)
        if name is None or not str(name).strip():
            logger.warning("%s row %d: skipping game with no name", source.name, line_no)
            continue
        try:
            game = GameRecord.from_dict(row)
        except (TypeError, ValueError) as e:
            raise CatalogError(f"{source.name} row {line_no}: {e}") from e
        if game.key in games:
            logger.warning("%s row %d: duplicate game '%s' ignored", source.name, line_no, game.name)
            continue
        games[game.key] = game
        if progress_callback:
            progress_callback(len(games))
    return list(games.values())


def load_csv(
    csv_file: Path,
    progress_callback: Callable[[int], None] | None = None,
) -> list[GameRecord]:
    """Load games from a CSV file with a header row."""
    with open(csv_file, newline="", encoding="utf-8-sig") as f:
        return _records_from_rows(csv.DictReader(f), Path(csv_file), progress_callback)


def load_json(
    json_file: Path,
    progress_callback: Callable[[int], None] | None = None,
) -> list[GameRecord]:
    """Load games from a JSON array using a streaming parser.

    ijson reads the array one object at a time, so large exports are never
    held in memory as raw JSON. Numbers arrive as Decimal and are converted
    by GameRecord.from_dict.
    """
    with open(json_file, "rb") as f:
        try:
            return _records_from_rows(ijson.items(f, "item"), Path(json_file), progress_callback)
        except ijson.JSONError as e:
            raise CatalogError(f"{Path(json_file).name}: invalid JSON: {e}") from e


def load_catalog(
    path: Path,
    progress_callback: Callable[[int], None] | None = None,
) -> list[GameRecord]:
    """Load a catalog file, choosing the format from its suffix.

    Args:
        path: A .csv or .json catalog export
        progress_callback: Optional callback(game_count) called as games load

    Returns:
        Unique games in file order

    Raises:
        CatalogError: Unsupported suffix or malformed data
        FileNotFoundError: If path does not exist
    """
    path = Path(path)
    suffix = path.suffix.lower()
    if suffix == ".csv":
        games = load_csv(path, progress_callback)
    elif suffix == ".json":
        games = load_json(path, progress_callback)
    else:
        raise CatalogError(
            f"Unsupported catalog format '{suffix or path.name}' "
            f"(expected one of {', '.join(SUPPORTED_SUFFIXES)})"
        )
    logger.info("Loaded %d games from %s", len(games), path)
    return games
