"""Command line for browsing a board game catalog."""

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence, TextIO

from bgplanner import __version__
from bgplanner.catalog import CatalogError, load_catalog
from bgplanner.errors import QueryError
from bgplanner.game_list import GameList, ListSelectionError
from bgplanner.models import GameRecord
from bgplanner.planner import Planner, parse_sort_spec

DEFAULT_CATALOG = Path("./games.csv")
PROMPT = "> "
SORT_DELIMITER = "|"

SHELL_HELP = """\
Commands:
  filter [FILTER] [| COLUMN[:asc|desc]]  show matching games (always from the full catalog)
  list add SELECTOR                      add from the last filter result (all, 3, 2-5, or a name)
  list remove SELECTOR                   remove from your list (all, 3, 2-5, or a name)
  list show                              show your list
  list save FILE                         save your list's names to FILE
  info NAME                              show details for one game
  help                                   show this message
  exit                                   leave the shell

Filter examples: name~=Go   minPlayers>2,rating>=7   maxTime<=60 | rating:desc"""


def format_error(error: Exception) -> str:
    """Format an error for display."""
    return f"Error: {error}"


def print_games(games: Sequence[GameRecord], out: TextIO, numbered: bool = False) -> None:
    """Print one game name per line, optionally numbered from 1."""
    for i, game in enumerate(games, start=1):
        if numbered:
            out.write(f"{i}. {game.name}\n")
        else:
            out.write(f"{game.name}\n")


class Shell:
    """Line-based interactive session over a catalog.

    Holds the user's GameList and the most recent filter result, which
    "list add" selects from. Each filter command queries the full catalog.
    """

    def __init__(self, planner: Planner, out: TextIO | None = None):
        self.planner = planner
        self.game_list = GameList()
        self.last_result: list[GameRecord] = list(planner.filter())
        self.out = out or sys.stdout

    def _write(self, text: str) -> None:
        self.out.write(text + "\n")

    def handle(self, line: str) -> bool:
        """Run one command line. Returns False when the session should end."""
        command, _, rest = line.strip().partition(" ")
        command = command.lower()
        rest = rest.strip()

        if not command:
            return True
        if command in ("exit", "quit"):
            return False

        try:
            if command == "help":
                self._write(SHELL_HELP)
            elif command == "filter":
                self._filter(rest)
            elif command == "list":
                self._list(rest)
            elif command == "info":
                self._info(rest)
            else:
                self._write(f"Unknown command '{command}'. Type 'help' for commands.")
        except (QueryError, ListSelectionError, OSError) as e:
            self._write(format_error(e))
        return True

    def _filter(self, args: str) -> None:
        filter_str, _, sort_spec = args.partition(SORT_DELIMITER)
        column, ascending = parse_sort_spec(sort_spec)
        self.last_result = self.planner.filter(filter_str, column, ascending)
        if not self.last_result:
            self._write("No games match.")
            return
        print_games(self.last_result, self.out, numbered=True)

    def _list(self, args: str) -> None:
        action, _, value = args.partition(" ")
        action = action.lower()
        value = value.strip()

        if action == "add":
            added = self.game_list.add_from(value, self.last_result)
            self._write(f"Added {added} game(s). List has {len(self.game_list)}.")
        elif action == "remove":
            removed = self.game_list.remove_by(value)
            self._write(f"Removed {removed} game(s). List has {len(self.game_list)}.")
        elif action in ("show", ""):
            if not len(self.game_list):
                self._write("Your list is empty.")
                return
            for i, name in enumerate(self.game_list.names(), start=1):
                self._write(f"{i}. {name}")
        elif action == "save":
            if not value:
                self._write("Usage: list save FILE")
                return
            self.game_list.save(Path(value))
            self._write(f"Saved {len(self.game_list)} game(s) to {value}")
        else:
            self._write("Usage: list add|remove|show|save ...")

    def _info(self, name: str) -> None:
        game = self.planner.find(name)
        if game is None:
            self._write(f"No game named '{name}'")
        else:
            self._write(game.describe())

    def run(self, stdin: TextIO | None = None) -> None:
        """Read commands until exit or end of input."""
        stdin = stdin or sys.stdin
        self._write(f"Board game planner {__version__}: {len(self.planner)} games. Type 'help'.")
        while True:
            self.out.write(PROMPT)
            self.out.flush()
            line = stdin.readline()
            if not line:
                self._write("")
                break
            if not self.handle(line):
                break


def run_query(planner: Planner, filter_str: str, sort_spec: str | None) -> int:
    """Print the names matching a filter. Returns a process exit code."""
    try:
        column, ascending = parse_sort_spec(sort_spec)
        games = planner.filter(filter_str, column, ascending)
    except QueryError as e:
        print(format_error(e), file=sys.stderr)
        return 2
    print_games(games, sys.stdout)
    return 0


def show_info(planner: Planner, name: str) -> int:
    """Print details for one game. Returns a process exit code."""
    game = planner.find(name)
    if game is None:
        print(f"Error: No game named '{name}'", file=sys.stderr)
        return 1
    print(game.describe())
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="bgplanner",
        description="Board game planner - filter and sort a board game catalog",
    )

    parser.add_argument(
        "--catalog",
        type=Path,
        default=DEFAULT_CATALOG,
        help="Catalog file, .csv or .json (default: ./games.csv)",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Query command
    query_parser = subparsers.add_parser(
        "query",
        help="Print games matching a filter",
    )
    query_parser.add_argument(
        "filter",
        nargs="?",
        default="",
        help="Filter, e.g. 'minPlayers>2,rating>=7' (default: all games)",
    )
    query_parser.add_argument(
        "--sort",
        default=None,
        help="Sort column and direction, e.g. rating:desc (default: name:asc)",
    )

    # Info command
    info_parser = subparsers.add_parser(
        "info",
        help="Show details for one game",
    )
    info_parser.add_argument("name", help="Game name (case-insensitive)")

    # Shell command
    subparsers.add_parser(
        "shell",
        help="Start an interactive session",
    )

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    """Main CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        planner = Planner(load_catalog(args.catalog))
    except (CatalogError, OSError) as e:
        print(format_error(e), file=sys.stderr)
        return 1

    if args.command == "query":
        return run_query(planner, args.filter, args.sort)
    if args.command == "info":
        return show_info(planner, args.name)
    Shell(planner).run()
    return 0


if __name__ == "__main__":
    sys.exit(main())
