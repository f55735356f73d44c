"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_optional_int(name: str) -> int | None:
    """Parse an optional integer environment variable."""
    raw = os.getenv(name, "").strip()
    if not raw:
        return None
    return int(raw)


def _parse_bool(name: str, default: str = "false") -> bool:
    """Parse a true/false environment variable."""
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")


@dataclass(frozen=True)
class GameConfig:
    """Session setup. The rules themselves (target 21, card values) are fixed."""

    seed: int | None = field(default_factory=lambda: _parse_optional_int("RACE21_SEED"))
    max_players: int = field(
        default_factory=lambda: int(os.getenv("RACE21_MAX_PLAYERS", "8"))
    )
    show_deck: bool = field(default_factory=lambda: _parse_bool("RACE21_SHOW_DECK"))

    def __post_init__(self) -> None:
        """Validate settings."""
        if self.max_players < 1:
            raise ValueError("max_players must be at least 1")


@dataclass(frozen=True)
class LoggingConfig:
    """Logging configuration."""

    level: str = field(
        default_factory=lambda: os.getenv("RACE21_LOG_LEVEL", "WARNING").upper()
    )
    format: str = "%(asctime)s %(levelname)s %(name)s: %(message)s"


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    game: GameConfig = field(default_factory=GameConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Global configuration instance
config = AppConfig()
