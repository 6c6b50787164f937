"""Pydantic models for TypeLadder data structures."""

from pydantic import BaseModel, ConfigDict, Field

from core.session_clock import SessionPhase
from core.word_ledger import WordStatus


class JudgedWord(BaseModel):
    """A word committed by the input judge."""

    index: int = Field(..., ge=0, description="Position of the word in the passage")
    target: str = Field(..., description="Word the user was asked to type")
    typed: str = Field(..., description="What the user actually typed")
    correct: bool = Field(..., description="Whether typed matches target exactly")

    model_config = ConfigDict(extra="ignore")


class LevelUp(BaseModel):
    """A single level reached while awarding points."""

    level: int = Field(..., ge=2, description="Level that was just reached")
    carried_points: int = Field(
        ..., ge=0, description="Points carried over into the new level"
    )
    points_for_next_level: int = Field(
        ..., ge=0, description="Threshold to leave the new level"
    )

    model_config = ConfigDict(extra="ignore")


class Results(BaseModel):
    """Final metrics of a finished test."""

    wpm: int = Field(..., ge=0, description="Words per minute")
    accuracy_percent: int = Field(
        ..., ge=0, le=100, description="Correct words over judged words, in percent"
    )
    correct_word_count: int = Field(..., ge=0, description="Correctly typed words")
    total_words_judged: int = Field(..., ge=0, description="All committed words")

    model_config = ConfigDict(frozen=True, extra="ignore")


class SessionSnapshot(BaseModel):
    """Observable engine state handed to the host after each trigger."""

    phase: SessionPhase = Field(..., description="Idle, running or finished")
    seconds_remaining: int = Field(..., ge=0, description="Countdown value")
    words: list[str] = Field(default_factory=list, description="Current passage")
    statuses: list[WordStatus] = Field(
        default_factory=list, description="Status per passage word"
    )
    active_index: int | None = Field(
        default=None, description="Index of the active word, if any"
    )
    passage_number: int = Field(
        default=1, ge=1, description="How many passages were loaded this session"
    )
    clear_input: bool = Field(
        default=False, description="Passage rotated; host must empty its input"
    )
    correct_word_count: int = Field(default=0, ge=0)
    total_words_judged: int = Field(default=0, ge=0)
    wpm: int = Field(default=0, ge=0, description="Final WPM, 0 until finished")
    accuracy_percent: int = Field(
        default=0, ge=0, le=100, description="Final accuracy, 0 until finished"
    )
    level: int = Field(default=1, ge=1)
    points: int = Field(default=0, ge=0)
    points_for_next_level: int = Field(default=0, ge=0)

    model_config = ConfigDict(frozen=True, extra="ignore")
