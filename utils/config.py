"""Configuration management for TypeLadder."""

import json
import sqlite3
from pathlib import Path
from typing import Any, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError

from core.session_config import InputMode, SessionConfig


class AppSettings(BaseModel):
    """Application settings with validation."""

    # Test settings
    session_length_sec: int = Field(
        default=60, gt=0, description="Length of one timed test (seconds)"
    )
    input_mode: InputMode = Field(
        default=InputMode.STREAMING,
        description="Input judging mode (streaming or discrete)",
    )
    tick_interval_ms: int = Field(
        default=1000, gt=0, description="Interval of the countdown tick (ms)"
    )

    # Leveling settings
    base_points_for_level_2: int = Field(
        default=100, gt=0, description="Points needed to reach level 2"
    )
    level_threshold_multiplier: float = Field(
        default=1.5, ge=1.0, description="Growth factor of each level threshold"
    )
    min_word_length_for_points: int = Field(
        default=3, ge=1, description="Words shorter than this score no points"
    )
    length_bonus_per_extra_letter: float = Field(
        default=0.15, ge=0.0, description="Score bonus per letter beyond the minimum"
    )

    # Passage settings
    passage_source: Literal["snippets", "random", "file"] = Field(
        default="snippets", description="Passage source (snippets, random or file)"
    )
    random_word_count: int = Field(
        default=30, ge=1, description="Words per passage for the random source"
    )

    model_config = ConfigDict(extra="ignore", use_enum_values=True)


class Config:
    """Configuration manager using SQLite for persistence with Pydantic validation."""

    def __init__(self, db_path: Path):
        """Initialize config with database connection.

        Args:
            db_path: Path to SQLite database
        """
        self.db_path = db_path
        self._init_settings_table()
        self._ensure_defaults()

    def _get_connection(self) -> sqlite3.Connection:
        return sqlite3.connect(self.db_path)

    def _init_settings_table(self) -> None:
        """Create settings table if not exists."""
        with self._get_connection() as conn:
            conn.execute("""
                CREATE TABLE IF NOT EXISTS settings (
                    key TEXT PRIMARY KEY,
                    value TEXT NOT NULL
                )
            """)
            conn.commit()

    def _ensure_defaults(self) -> None:
        """Ensure all default settings exist in database."""
        defaults = AppSettings().model_dump()

        with self._get_connection() as conn:
            cursor = conn.cursor()
            for key, value in defaults.items():
                cursor.execute(
                    """
                    INSERT OR IGNORE INTO settings (key, value)
                    VALUES (?, ?)
                """,
                    (key, self._serialize_value(value)),
                )
            conn.commit()

    def _serialize_value(self, value: Any) -> str:
        """Convert value to string for storage."""
        if isinstance(value, bool):
            return "True" if value else "False"
        if isinstance(value, (list, dict)):
            return json.dumps(value)
        return str(value)

    def _simple_parse(self, value: str) -> Any:
        """Parse a stored string back into int, float, bool, JSON or str."""
        if value.startswith("[") or value.startswith("{"):
            try:
                return json.loads(value)
            except json.JSONDecodeError:
                pass

        try:
            return int(value)
        except ValueError:
            pass

        try:
            return float(value)
        except ValueError:
            pass

        if value.lower() in ("true", "yes", "on"):
            return True
        if value.lower() in ("false", "no", "off"):
            return False

        return value

    def set(self, key: str, value: Any) -> None:
        """Set configuration value with pydantic validation.

        Args:
            key: Setting key
            value: Setting value

        Raises:
            ValueError: If value fails validation
        """
        if key in AppSettings.model_fields:
            try:
                validated = AppSettings(**{key: value})
                value = getattr(validated, key)
            except ValidationError as e:
                raise ValueError(f"Invalid value for {key}: {e}")

        with self._get_connection() as conn:
            conn.execute(
                """
                INSERT OR REPLACE INTO settings (key, value)
                VALUES (?, ?)
            """,
                (key, self._serialize_value(value)),
            )
            conn.commit()

    def get_all(self) -> dict[str, Any]:
        """Get all settings as dictionary."""
        with self._get_connection() as conn:
            cursor = conn.cursor()
            cursor.execute("SELECT key, value FROM settings")
            rows = cursor.fetchall()
        return {key: self._simple_parse(value) for key, value in rows}

    def settings(self, overrides: Optional[dict[str, Any]] = None) -> AppSettings:
        """Load stored settings into a validated AppSettings.

        Args:
            overrides: Values taking precedence over stored ones; None
                values are skipped

        Raises:
            ValidationError: If a stored value or override is invalid
        """
        values = {
            key: value for key, value in self.get_all().items()
            if key in AppSettings.model_fields
        }
        for key, value in (overrides or {}).items():
            if value is not None:
                values[key] = value
        return AppSettings(**values)

    def session_config(self, overrides: Optional[dict[str, Any]] = None) -> SessionConfig:
        """Build the engine configuration from stored settings and overrides."""
        return SessionConfig(**self.settings(overrides).model_dump())
