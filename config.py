"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse BLACKJACK_SEED; unset or blank means an unseeded generator."""
    seed = os.getenv("BLACKJACK_SEED", "").strip()
    return int(seed) if seed else None


def _default_log_level() -> str:
    """Use LOG_LEVEL if set, otherwise DEBUG in debug mode and WARNING elsewhere."""
    level = os.getenv("LOG_LEVEL")
    if level:
        return level.upper()
    return "DEBUG" if os.getenv("DEBUG", "false").lower() == "true" else "WARNING"


@dataclass(frozen=True)
class GameConfig:
    """Default game configuration."""

    num_packs: int = field(
        default_factory=lambda: int(os.getenv("BLACKJACK_PACKS", "6"))
    )
    dealer_pause: float = field(
        default_factory=lambda: float(os.getenv("BLACKJACK_DEALER_PAUSE", "1.0"))
    )
    seed: int | None = field(default_factory=_parse_seed)
    dealer_stands_on: int = 17


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=_default_log_level)

    game: GameConfig = field(default_factory=GameConfig)
