"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, field_validator

from wizards_tags.models.card import hand_size_for
from wizards_tags.models.game_state import Difficulty


class GameConfig(BaseModel):
    """Game configuration."""

    player_count: int = 4
    bot_count: int = 3
    difficulty: Difficulty = Difficulty.HARD
    seed: int | None = None  # Fixed seed for reproducible games

    # Discard the first eligible tag for human winners too
    auto_discard: bool = True

    @field_validator("player_count")
    @classmethod
    def _check_player_count(cls, value: int) -> int:
        hand_size_for(value)
        return value


class TimingConfig(BaseModel):
    """Delays (seconds) for bot thinking time and result display."""

    bot_bid_delay: float = Field(default=0.8, ge=0)
    bot_play_delay: float = Field(default=1.0, ge=0)
    trick_result_delay: float = Field(default=1.0, ge=0)
    round_end_delay: float = Field(default=3.0, ge=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_hands: bool = False
    game_events: bool = True


class Config(BaseModel):
    """Root configuration."""

    game: GameConfig = GameConfig()
    timing: TimingConfig = TimingConfig()
    logging: LoggingConfig = LoggingConfig()


def load_config(path: Path | str | None = None) -> Config:
    """Load configuration from YAML file.

    Args:
        path: Path to config file. If None, uses default config.

    Returns:
        Config object.
    """
    if path is None:
        return Config()

    config_path = Path(path)
    if not config_path.exists():
        return Config()

    with open(config_path) as f:
        data = yaml.safe_load(f)

    return Config(**data) if data else Config()
