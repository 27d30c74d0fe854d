"""Tests for the user's game list."""

import tempfile
from pathlib import Path

import pytest

from bgplanner.game_list import ADD_ALL, GameList, ListSelectionError
from bgplanner.models import GameRecord
from bgplanner.planner import query


class TestGameListBasics:
    """add/remove/contains with case-insensitive identity."""

    def test_add(self):
        games = GameList()
        assert games.add(GameRecord("Go")) is True
        assert len(games) == 1

    def test_add_same_name_different_case(self):
        """Re-adding an existing identity is a no-op returning False."""
        games = GameList()
        games.add(GameRecord("Go", rating=7.5))
        assert games.add(GameRecord("GO", rating=1.0)) is False
        assert len(games) == 1
        assert games.all()[0].rating == 7.5

    def test_remove(self):
        games = GameList([GameRecord("Go")])
        assert games.remove(GameRecord("go")) is True
        assert len(games) == 0

    def test_remove_missing(self):
        assert GameList().remove(GameRecord("Go")) is False

    def test_contains(self):
        games = GameList([GameRecord("GoRami")])
        assert games.contains(GameRecord("gorami"))
        assert GameRecord("GORAMI") in games
        assert not games.contains(GameRecord("Go"))
        assert "GoRami" not in games

    def test_all_is_snapshot(self):
        games = GameList([GameRecord("Go")])
        snapshot = games.all()
        games.add(GameRecord("Chess"))
        assert len(snapshot) == 1

    def test_names_sorted_case_insensitively(self, sample_games):
        games = GameList(reversed(sample_games))
        assert games.names() == [
            "17 days", "Chess", "Go", "Go Fish", "golang", "GoRami", "Monopoly", "Tucano",
        ]

    def test_clear(self, sample_games):
        games = GameList(sample_games)
        games.clear()
        assert len(games) == 0

    def test_game_info(self, sample_games):
        games = GameList(sample_games)
        assert games.game_info("go fish") == "Go Fish (2-10 players, 20 minutes)"
        assert games.game_info("Catan") is None


class TestAddFrom:
    """Adding from a query result by selector."""

    def test_add_all(self, sample_games):
        games = GameList()
        assert games.add_from(ADD_ALL, query(sample_games, "name~=go")) == 4
        assert len(games) == 4

    def test_add_all_case_insensitive(self, sample_games):
        games = GameList()
        games.add_from("ALL", sample_games)
        assert len(games) == 8

    def test_add_by_index(self, sample_games):
        games = GameList()
        games.add_from("2", query(sample_games))
        assert games.names() == ["Chess"]

    def test_add_by_range(self, sample_games):
        games = GameList()
        assert games.add_from("1-3", query(sample_games)) == 3
        assert games.names() == ["17 days", "Chess", "Go"]

    def test_add_by_name(self, sample_games):
        games = GameList()
        games.add_from("gorami", sample_games)
        assert games.names() == ["GoRami"]

    def test_add_existing_counts_zero(self, sample_games):
        games = GameList([GameRecord("Chess")])
        assert games.add_from("Chess", sample_games) == 0

    def test_empty_result(self):
        with pytest.raises(ListSelectionError, match="No games"):
            GameList().add_from("all", [])

    @pytest.mark.parametrize("selector", ["0", "9", "3-1", "0-2", "7-9"])
    def test_bad_index_or_range(self, sample_games, selector):
        with pytest.raises(ListSelectionError):
            GameList().add_from(selector, query(sample_games))

    def test_unknown_name(self, sample_games):
        with pytest.raises(ListSelectionError, match="not found"):
            GameList().add_from("Catan", sample_games)

    def test_selection_error_is_value_error(self):
        with pytest.raises(ValueError):
            GameList().add_from("1", [])


class TestRemoveBy:
    """Removing by selector against the name-sorted list."""

    def test_remove_all(self, sample_games):
        games = GameList(sample_games)
        assert games.remove_by("all") == 8
        assert len(games) == 0

    def test_remove_by_index(self, sample_games):
        games = GameList(sample_games)
        games.remove_by("1")
        assert "17 days" not in games.names()
        assert len(games) == 7

    def test_remove_by_range(self, sample_games):
        games = GameList(sample_games)
        assert games.remove_by("2-4") == 3
        assert games.names() == ["17 days", "golang", "GoRami", "Monopoly", "Tucano"]

    def test_remove_by_name(self, sample_games):
        games = GameList(sample_games)
        assert games.remove_by("MONOPOLY") == 1
        assert "Monopoly" not in games.names()

    def test_remove_unknown_name_is_noop(self, sample_games):
        games = GameList(sample_games)
        assert games.remove_by("Catan") == 0
        assert len(games) == 8

    def test_remove_bad_index(self, sample_games):
        with pytest.raises(ListSelectionError):
            GameList(sample_games).remove_by("20")


class TestSave:
    """Persisting names to a text file."""

    def test_save_sorted_names(self, sample_games):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "games.txt"
            GameList(reversed(sample_games)).save(path)

            lines = path.read_text(encoding="utf-8").splitlines()
            assert lines == [
                "17 days", "Chess", "Go", "Go Fish", "golang", "GoRami", "Monopoly", "Tucano",
            ]

    def test_save_overwrites(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "games.txt"
            path.write_text("old\n")
            GameList([GameRecord("Go")]).save(path)
            assert path.read_text(encoding="utf-8") == "Go\n"

    def test_save_leaves_no_temp_files(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "games.txt"
            GameList([GameRecord("Go")]).save(path)
            assert [p.name for p in Path(tmpdir).iterdir()] == ["games.txt"]

    def test_save_empty_list(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "games.txt"
            GameList().save(path)
            assert path.read_text(encoding="utf-8") == ""

    def test_save_missing_directory(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            with pytest.raises(OSError):
                GameList([GameRecord("Go")]).save(Path(tmpdir) / "missing" / "games.txt")
