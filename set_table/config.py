"""Configuration management."""

from pathlib import Path

import yaml
from pydantic import BaseModel, Field, model_validator


class TableConfig(BaseModel):
    """Table configuration."""

    # 20 cards can be open without a Set, so 21 slots always suffice
    capacity: int = Field(default=21, gt=0)
    default_open: int = Field(default=12, gt=0)
    seed: int | None = None  # Deck shuffle seed

    @model_validator(mode="after")
    def check_capacity(self) -> "TableConfig":
        if self.capacity < self.default_open:
            raise ValueError(
                f"capacity ({self.capacity}) must be >= default_open ({self.default_open})"
            )
        return self


class GameConfig(BaseModel):
    """Game configuration."""

    num_games: int = Field(default=1, gt=0)


class LoggingConfig(BaseModel):
    """Logging configuration."""

    level: str = "INFO"
    show_table: bool = False


class GameLogConfig(BaseModel):
    """Configuration for the JSONL replay log."""

    enabled: bool = False
    output_path: str = "game_log.jsonl"


class Config(BaseModel):
    """Root configuration."""

    table: TableConfig = TableConfig()
    game: GameConfig = GameConfig()
    logging: LoggingConfig = LoggingConfig()
    game_log: GameLogConfig = GameLogConfig()


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
