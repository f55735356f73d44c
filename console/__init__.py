"""Terminal front end for Race to 21."""

from console.table import ConsoleCardTable, parse_player_count, parse_yes_no

__all__ = [
    "ConsoleCardTable",
    "parse_player_count",
    "parse_yes_no",
]
