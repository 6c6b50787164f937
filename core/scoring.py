"""Word scoring and level progression."""

import logging
import math
from typing import List

from core.models import LevelUp
from core.session_config import SessionConfig

log = logging.getLogger("typeladder.scoring")

# Scrabble-like letter rarity values
LETTER_VALUES: dict[str, int] = {
    **dict.fromkeys("AEIOULNRST", 1),
    **dict.fromkeys("DG", 2),
    **dict.fromkeys("BCMP", 3),
    **dict.fromkeys("FHVWY", 4),
    "K": 5,
    **dict.fromkeys("JX", 8),
    **dict.fromkeys("QZ", 10),
}

MIN_WORD_LENGTH_FOR_POINTS = 3
LENGTH_BONUS_PER_EXTRA_LETTER = 0.15
BASE_POINTS_FOR_LEVEL_2 = 100
LEVEL_THRESHOLD_MULTIPLIER = 1.5


def score_word(
    word: str,
    min_length: int = MIN_WORD_LENGTH_FOR_POINTS,
    length_bonus: float = LENGTH_BONUS_PER_EXTRA_LETTER,
) -> int:
    """Calculate points for a correctly typed word.

    Letter values are summed over the upper-cased word, then scaled by a
    length bonus of `length_bonus` per letter beyond `min_length`.

    Example: "quiz" = (10 + 1 + 1 + 10) * 1.15 = 25.3 -> 25 points

    Args:
        word: The word to score
        min_length: Words shorter than this score 0
        length_bonus: Bonus factor per extra letter

    Returns:
        Points, 0 for short words and at least 1 otherwise
    """
    if not word or len(word.strip()) < min_length:
        return 0

    upper = word.upper()
    base_score = sum(LETTER_VALUES.get(ch, 0) for ch in upper)
    length_factor = 1.0 + (len(upper) - min_length) * length_bonus
    return max(1, math.floor(base_score * length_factor))


def points_required_for_level(
    level: int,
    base_points: int = BASE_POINTS_FOR_LEVEL_2,
    multiplier: float = LEVEL_THRESHOLD_MULTIPLIER,
) -> int:
    """Points needed to go from (level - 1) to level.

    Level 1 needs nothing, level 2 needs `base_points`, and every further
    level needs `multiplier` times the previous one.

    Args:
        level: Target level
        base_points: Threshold for reaching level 2
        multiplier: Geometric growth per level

    Returns:
        Threshold in points
    """
    if level <= 1:
        return 0
    return math.floor(base_points * multiplier ** (level - 2))


class Progression:
    """Level and points carried within the current level."""

    def __init__(self, config: SessionConfig | None = None):
        self.config = config or SessionConfig()
        self.level = 1
        self.points = 0

    @property
    def points_for_next_level(self) -> int:
        return points_required_for_level(
            self.level + 1,
            self.config.base_points_for_level_2,
            self.config.level_threshold_multiplier,
        )

    def reset(self) -> None:
        self.level = 1
        self.points = 0

    def score(self, word: str) -> int:
        return score_word(
            word,
            self.config.min_word_length_for_points,
            self.config.length_bonus_per_extra_letter,
        )

    def award(self, points: int) -> List[LevelUp]:
        """Add points and apply every level-up they pay for.

        Excess points carry over into the next level, so one large award
        can jump several levels.

        Args:
            points: Points to add (non-positive awards are ignored)

        Returns:
            One LevelUp per level gained, in order
        """
        if points <= 0:
            return []

        self.points += points
        level_ups = []
        while self.points >= self.points_for_next_level:
            self.points -= self.points_for_next_level
            self.level += 1
            level_ups.append(
                LevelUp(
                    level=self.level,
                    carried_points=self.points,
                    points_for_next_level=self.points_for_next_level,
                )
            )
            log.info(f"Level up! Reached level {self.level}")

        log.debug(
            f"Level: {self.level} | Points: {self.points} / {self.points_for_next_level}"
        )
        return level_ups
