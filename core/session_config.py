"""Typing session configuration with Pydantic validation."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class InputMode(str, Enum):
    """How the host feeds keystrokes to the engine."""

    STREAMING = "streaming"
    DISCRETE = "discrete"


class SessionConfig(BaseModel):
    """Configuration for TypingEngine with validation."""

    session_length_sec: int = Field(
        default=60,
        gt=0,
        description="Length of one timed test (seconds)",
    )
    input_mode: InputMode = Field(
        default=InputMode.STREAMING,
        description="Whole-buffer streaming input or per-word discrete input",
    )
    base_points_for_level_2: int = Field(
        default=100,
        gt=0,
        description="Points needed to go from level 1 to level 2",
    )
    level_threshold_multiplier: float = Field(
        default=1.5,
        ge=1.0,
        description="Growth factor of each following level threshold",
    )
    min_word_length_for_points: int = Field(
        default=3,
        ge=1,
        description="Words shorter than this score no points",
    )
    length_bonus_per_extra_letter: float = Field(
        default=0.15,
        ge=0.0,
        description="Score bonus factor per letter beyond the minimum length",
    )

    model_config = ConfigDict(extra="ignore")


__all__ = ["InputMode", "SessionConfig"]
