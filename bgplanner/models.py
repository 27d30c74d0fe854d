"""Game record value object."""

from dataclasses import dataclass
from typing import Any, Mapping

# External catalog column names -> GameRecord field names
FIELD_ALIASES = {
    "objectname": "name",
    "minplayers": "min_players",
    "maxplayers": "max_players",
    "minplaytime": "min_play_time",
    "maxplaytime": "max_play_time",
    "average": "rating",
    "averageweight": "difficulty",
    "yearpublished": "year_published",
}

_INT_FIELDS = frozenset({
    "min_players", "max_players", "min_play_time", "max_play_time",
    "rank", "year_published", "id",
})
_FLOAT_FIELDS = frozenset({"rating", "difficulty"})
_NON_NEGATIVE_FIELDS = ("min_players", "max_players", "min_play_time", "max_play_time")


def _to_int(value: Any) -> int:
    if value is None or value == "":
        return 0
    number = float(value)
    if not number.is_integer():
        raise ValueError(f"expected a whole number, got {value!r}")
    return int(number)


def _to_float(value: Any) -> float:
    if value is None or value == "":
        return 0.0
    return float(value)


@dataclass(frozen=True, eq=False)
class GameRecord:
    """A single board game.

    Identity is the lower-cased name: two records whose names differ only in
    case compare equal and hash the same, so sets and dicts of records keep
    at most one entry per game.
    """

    name: str
    min_players: int = 0
    max_players: int = 0
    min_play_time: int = 0
    max_play_time: int = 0
    rating: float = 0.0
    difficulty: float = 0.0
    rank: int = 0
    year_published: int = 0
    id: int = 0

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Game name must not be empty")
        for field_name in _NON_NEGATIVE_FIELDS:
            if getattr(self, field_name) < 0:
                raise ValueError(f"{field_name} must not be negative")

    @property
    def key(self) -> str:
        """Case-insensitive identity key."""
        return self.name.lower()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, GameRecord):
            return NotImplemented
        return self.key == other.key

    def __hash__(self) -> int:
        return hash(self.key)

    def describe(self) -> str:
        """Short human-readable summary."""
        return (
            f"{self.name} ({self.min_players}-{self.max_players} players, "
            f"{self.min_play_time} minutes)"
        )

    @classmethod
    def from_dict(cls, row: Mapping[str, Any]) -> "GameRecord":
        """Build a record from a mapping.

        Keys may be the field names of this class or the column names used
        by external catalog exports (objectname, minplayers, average, ...).
        Unknown keys are ignored.

        Raises:
            ValueError: If the name is blank or a numeric field is malformed
        """
        kwargs: dict[str, Any] = {"name": ""}
        for raw_key, value in row.items():
            if not isinstance(raw_key, str):
                continue
            key = raw_key.strip().lower()
            field_name = FIELD_ALIASES.get(key, key)
            if field_name == "name":
                kwargs["name"] = str(value or "").strip()
            elif field_name in _INT_FIELDS:
                kwargs[field_name] = _to_int(value)
            elif field_name in _FLOAT_FIELDS:
                kwargs[field_name] = _to_float(value)
        return cls(**kwargs)
