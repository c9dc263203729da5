"""Configuration management with environment variable support."""

import os
from dataclasses import dataclass, field


def _parse_seed() -> int | None:
    """Parse GAME_SEED environment variable."""
    seed = os.getenv("GAME_SEED", "").strip()
    return int(seed) if seed else None


@dataclass(frozen=True)
class GameConfig:
    """Betting and deck configuration."""

    starting_balance: int = field(
        default_factory=lambda: int(os.getenv("STARTING_BALANCE", "10000"))
    )
    default_bet: int = field(default_factory=lambda: int(os.getenv("DEFAULT_BET", "100")))
    bet_step: int = field(default_factory=lambda: int(os.getenv("BET_STEP", "50")))
    seed: int | None = field(default_factory=_parse_seed)


@dataclass(frozen=True)
class DisplayConfig:
    """Window and animation configuration."""

    width: int = field(default_factory=lambda: int(os.getenv("SCREEN_WIDTH", "1200")))
    height: int = field(default_factory=lambda: int(os.getenv("SCREEN_HEIGHT", "800")))
    fps: int = field(default_factory=lambda: int(os.getenv("TARGET_FPS", "30")))
    card_speed: float = field(default_factory=lambda: float(os.getenv("CARD_SPEED", "40")))


@dataclass(frozen=True)
class AppConfig:
    """Application configuration."""

    debug: bool = field(default_factory=lambda: os.getenv("DEBUG", "false").lower() == "true")
    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO").upper())

    game: GameConfig = field(default_factory=GameConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)

    @property
    def effective_log_level(self) -> str:
        """Log level to configure, forced to DEBUG in debug mode."""
        return "DEBUG" if self.debug else self.log_level


# Global configuration instance
config = AppConfig()
