"""Error taxonomy for filter strings and sort specifications."""

# Supported syntax for error messages
SUPPORTED_SYNTAX = [
    "conditions: column operator value, e.g. name~=Go, minPlayers>2",
    "operators: == != >= <= ~= > < (~= is text only)",
    "combine: clauses separated by ',' are ANDed",
    "text columns: name",
    "numeric columns: minPlayers, maxPlayers, minTime, maxTime, rating, "
    "difficulty, rank, year, id",
    "quotes: name==\"Go Fish\" (optional, stripped when wrapping the value)",
    "sort: column[:asc|desc], e.g. rating:desc",
]


class QueryError(Exception):
    """Error parsing a query with helpful hints."""

    def __init__(
        self,
        message: str,
        hint: str | None = None,
        supported_syntax: list[str] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.hint = hint or "Check the query syntax"
        self.supported_syntax = supported_syntax or SUPPORTED_SYNTAX

    def __str__(self) -> str:
        return f"{self.message}. Hint: {self.hint}"


class UnknownColumnError(QueryError):
    """Column name does not match any known alias."""


class InvalidOperatorError(QueryError):
    """Operator is not legal for the column's value kind."""


class InvalidValueError(QueryError):
    """Literal cannot be parsed for a numeric column."""


class MalformedClauseError(QueryError):
    """Clause has no operator, or an empty column or value side."""
