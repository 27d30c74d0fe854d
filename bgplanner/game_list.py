"""User's game list: a set of games keyed on case-insensitive name."""

import logging
import re
import tempfile
from pathlib import Path
from typing import Iterable, Iterator, Sequence

from bgplanner.models import GameRecord

logger = logging.getLogger(__name__)

# Selector that addresses every game
ADD_ALL = "all"

_INDEX_RE = re.compile(r"^\d+$")
_RANGE_RE = re.compile(r"^(\d+)\s*-\s*(\d+)$")


class ListSelectionError(ValueError):
    """Selector does not address any game."""


def _select(selector: str, games: Sequence[GameRecord]) -> list[GameRecord]:
    """Resolve an index ("3"), range ("2-5") or name against an ordered sequence.

    Indices are 1-based and ranges inclusive.
    """
    text = selector.strip()

    if _INDEX_RE.match(text):
        index = int(text) - 1
        if index < 0 or index >= len(games):
            raise ListSelectionError(f"Invalid index {text} (1-{len(games)})")
        return [games[index]]

    match = _RANGE_RE.match(text)
    if match:
        start = int(match.group(1)) - 1
        end = int(match.group(2)) - 1
        if start < 0 or end >= len(games) or start > end:
            raise ListSelectionError(f"Invalid range {text} (1-{len(games)})")
        return list(games[start:end + 1])

    key = text.lower()
    return [g for g in games if g.key == key][:1]


class GameList:
    """Ordered set of games with case-insensitive identity."""

    def __init__(self, games: Iterable[GameRecord] = ()):
        self._games: dict[str, GameRecord] = {}
        for game in games:
            self.add(game)

    def __len__(self) -> int:
        return len(self._games)

    def __iter__(self) -> Iterator[GameRecord]:
        return iter(list(self._games.values()))

    def __contains__(self, game: object) -> bool:
        return isinstance(game, GameRecord) and self.contains(game)

    def add(self, game: GameRecord) -> bool:
        """Add a game. Returns False if a same-named game is already present."""
        if game.key in self._games:
            return False
        self._games[game.key] = game
        return True

    def remove(self, game: GameRecord) -> bool:
        """Remove a game. Returns False if it was not present."""
        return self._games.pop(game.key, None) is not None

    def contains(self, game: GameRecord) -> bool:
        return game.key in self._games

    def all(self) -> list[GameRecord]:
        """Snapshot of the games in insertion order."""
        return list(self._games.values())

    def clear(self) -> None:
        self._games.clear()

    def sorted_games(self) -> list[GameRecord]:
        return sorted(self._games.values(), key=lambda g: g.key)

    def names(self) -> list[str]:
        """Game names sorted case-insensitively."""
        return [g.name for g in self.sorted_games()]

    def game_info(self, name: str) -> str | None:
        game = self._games.get(name.strip().lower())
        return game.describe() if game else None

    def add_from(self, selector: str, filtered: Sequence[GameRecord]) -> int:
        """Add games picked from a query result.

        Args:
            selector: "all", a 1-based index, an inclusive range "N-M", or a name
            filtered: The query result the selector refers to, in display order

        Returns:
            Number of games actually added (already-present games are skipped)

        Raises:
            ListSelectionError: Empty result, bad index/range, or unknown name
        """
        if not filtered:
            raise ListSelectionError("No games to add")

        if selector.strip().lower() == ADD_ALL:
            chosen = list(filtered)
        else:
            chosen = _select(selector, filtered)
            if not chosen:
                raise ListSelectionError(f"Game not found: {selector.strip()}")

        added = sum(1 for game in chosen if self.add(game))
        logger.debug("Added %d of %d selected games", added, len(chosen))
        return added

    def remove_by(self, selector: str) -> int:
        """Remove games by "all", index, range or name.

        Indices refer to the name-sorted list shown by names(). An unknown
        name removes nothing.

        Returns:
            Number of games removed
        """
        if selector.strip().lower() == ADD_ALL:
            count = len(self._games)
            self.clear()
            return count

        chosen = _select(selector, self.sorted_games())
        return sum(1 for game in chosen if self.remove(game))

    def save(self, path: Path) -> None:
        """Write the sorted names, one per line, atomically.

        Writes to a temp file in the target directory, then renames it over
        the destination.
        """
        path = Path(path)
        temp_fd, temp_path = tempfile.mkstemp(
            dir=path.parent,
            prefix=".games_",
            suffix=".tmp",
        )
        try:
            with open(temp_fd, "w", encoding="utf-8") as f:
                for name in self.names():
                    f.write(name + "\n")
            Path(temp_path).replace(path)
        except Exception:
            # Clean up temp file on error
            try:
                Path(temp_path).unlink()
            except OSError:
                pass
            raise
        logger.info("Saved %d games to %s", len(self._games), path)
