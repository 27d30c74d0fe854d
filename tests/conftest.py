"""Shared test fixtures for the board game planner."""

import pytest

from bgplanner.models import GameRecord


@pytest.fixture
def sample_games() -> list[GameRecord]:
    """Eight games with distinct values in every numeric column.

    Names mix case on purpose ("golang", "GoRami") so ordering and matching
    are exercised case-insensitively.
    """
    return [
        GameRecord("17 days", 1, 8, 70, 70, 9.0, 9.0, 600, 2005, 6),
        GameRecord("Chess", 2, 2, 10, 20, 10.0, 10.0, 700, 2006, 7),
        GameRecord("Go", 2, 5, 30, 30, 7.5, 8.0, 100, 2000, 1),
        GameRecord("Go Fish", 2, 10, 20, 120, 6.5, 3.0, 200, 2001, 2),
        GameRecord("golang", 2, 7, 50, 55, 9.5, 7.0, 400, 2003, 4),
        GameRecord("GoRami", 6, 6, 40, 42, 8.5, 5.0, 300, 2002, 3),
        GameRecord("Monopoly", 6, 10, 20, 1000, 5.0, 1.0, 800, 2007, 8),
        GameRecord("Tucano", 10, 20, 60, 90, 8.0, 6.0, 500, 2004, 5),
    ]


@pytest.fixture
def go_games() -> list[GameRecord]:
    """Small collection: (name, min players, max players, rating)."""
    return [
        GameRecord("Go", min_players=2, max_players=5, rating=7.5),
        GameRecord("Go Fish", min_players=2, max_players=10, rating=6.5),
        GameRecord("golang", min_players=2, max_players=7, rating=9.5),
        GameRecord("GoRami", min_players=6, max_players=6, rating=8.5),
        GameRecord("Chess", min_players=2, max_players=2, rating=10.0),
    ]
