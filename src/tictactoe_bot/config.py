"""Configuration for the Tic-Tac-Toe bot."""

from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, ValidationError, field_validator

from tictactoe_bot.exceptions import ConfigurationError
from tictactoe_bot.models import Marker

STRATEGIES = ["random", "perfect"]


class BotConfig(BaseModel):
    """Bot behaviour configuration."""

    marker: str = Field(default="o", description="Marker the bot plays")
    strategy: str = Field(default="random", description="Move selection strategy")
    seed: Optional[int] = Field(default=None, description="Seed for random play")
    validate_boards: bool = Field(
        default=True, description="Check board shape before deciding"
    )
    log_file: Optional[str] = Field(default=None, description="Decision log file")

    @field_validator("marker")
    @classmethod
    def validate_marker(cls, v: str) -> str:
        """Validate marker."""
        v = v.lower()
        if v not in [m.value for m in Marker]:
            raise ValueError("marker must be 'x' or 'o'")
        return v

    @field_validator("strategy")
    @classmethod
    def validate_strategy(cls, v: str) -> str:
        """Validate strategy."""
        if v not in STRATEGIES:
            raise ValueError(f"strategy must be one of: {', '.join(STRATEGIES)}")
        return v

    @field_validator("seed")
    @classmethod
    def validate_seed(cls, v: Optional[int]) -> Optional[int]:
        """Validate seed."""
        if v is not None and v < 0:
            raise ValueError("seed must be non-negative")
        return v

    @property
    def bot_marker(self) -> Marker:
        return Marker(self.marker)

    @property
    def use_random(self) -> bool:
        return self.strategy == "random"

    def get_log_file(self) -> Optional[Path]:
        """Get the decision log file as a Path object."""
        if self.log_file is None:
            return None
        return Path(self.log_file).expanduser().resolve()


def create_config(**overrides: Any) -> BotConfig:
    """Create a bot configuration.

    Args:
        **overrides: Field values replacing the defaults

    Returns:
        Validated configuration

    Raises:
        ConfigurationError: If a value is invalid
    """
    try:
        return BotConfig(**overrides)
    except ValidationError as e:
        raise ConfigurationError(f"Configuration validation failed: {e}") from e
