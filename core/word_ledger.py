"""Per-word status tracking for the current passage."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

log = logging.getLogger("typeladder.word_ledger")


class WordStatus(str, Enum):
    """Judgement state of a single passage word."""

    PENDING = "pending"
    ACTIVE = "active"
    CORRECT = "correct"
    INCORRECT = "incorrect"


class WordIndexOutOfRange(IndexError):
    """Raised when a word index falls outside the loaded passage."""

    pass


@dataclass
class WordEntry:
    """One target word and its current status."""
    target_text: str
    status: WordStatus = WordStatus.PENDING


class WordLedger:
    """Ordered target words of a passage with one status each."""

    def __init__(self, words: Optional[List[str]] = None):
        self.entries: List[WordEntry] = []
        if words:
            self.load(words)

    def load(self, words: List[str]) -> None:
        """Replace the passage.

        The first word becomes active and every other word pending.

        Args:
            words: Target words in passage order
        """
        self.entries = [WordEntry(target_text=w) for w in words]
        if self.entries:
            self.entries[0].status = WordStatus.ACTIVE
        log.debug(f"Loaded passage with {len(self.entries)} words")

    def __len__(self) -> int:
        return len(self.entries)

    def _check_index(self, index: int) -> None:
        if not 0 <= index < len(self.entries):
            raise WordIndexOutOfRange(
                f"Word index {index} outside passage of {len(self.entries)} words"
            )

    def word_at(self, index: int) -> str:
        """Get the target text at index.

        Raises:
            WordIndexOutOfRange: If index is outside [0, len)
        """
        self._check_index(index)
        return self.entries[index].target_text

    def status_at(self, index: int) -> WordStatus:
        self._check_index(index)
        return self.entries[index].status

    def set_status(self, index: int, status: WordStatus) -> None:
        self._check_index(index)
        self.entries[index].status = status

    def reset_statuses(self) -> None:
        """Mark every word pending, except the first which becomes active."""
        for i, entry in enumerate(self.entries):
            entry.status = WordStatus.ACTIVE if i == 0 else WordStatus.PENDING

    @property
    def words(self) -> List[str]:
        return [e.target_text for e in self.entries]

    @property
    def statuses(self) -> List[WordStatus]:
        return [e.status for e in self.entries]
