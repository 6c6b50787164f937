"""Input judging for streaming and discrete interaction modes."""

import logging
from dataclasses import dataclass, field
from typing import List

from core.models import JudgedWord
from core.word_ledger import WordLedger, WordStatus

log = logging.getLogger("typeladder.input_judge")


def is_boundary(ch: str) -> bool:
    """Any whitespace character ends a word."""
    return bool(ch) and ch.isspace()


@dataclass
class JudgeOutcome:
    """Words committed by one input event."""
    committed: List[JudgedWord] = field(default_factory=list)
    passage_complete: bool = False


def _in_progress_status(target: str, typed: str) -> WordStatus:
    # A diverged prefix is already known wrong before the word is submitted.
    return WordStatus.ACTIVE if target.startswith(typed) else WordStatus.INCORRECT


def _completes_passage(ledger: WordLedger, index: int, typed: str) -> bool:
    """Whether typing `typed` at index finishes the last word without a boundary."""
    if index != len(ledger) - 1 or not typed:
        return False
    return len(typed) >= len(ledger.word_at(index))


class StreamingJudge:
    """Re-evaluates the whole typed buffer on every keystroke.

    Each word is committed once, the first time the buffer completes it.
    Editing the buffer afterwards re-colours the word but does not count it
    again, so statuses follow the current buffer while the engine's counters
    keep the first verdict. A committed "cat" edited to "cax " shows
    INCORRECT yet still counts as correct.
    """

    def __init__(self, ledger: WordLedger):
        self.ledger = ledger
        self.cursor = 0
        self.committed_count = 0

    def reset(self) -> None:
        """Forget commits; call after the ledger has been reloaded."""
        self.cursor = 0
        self.committed_count = 0

    def evaluate(self, buffer: str) -> JudgeOutcome:
        """Classify every passage word against the typed buffer.

        Args:
            buffer: Full text typed so far for the current passage

        Returns:
            JudgeOutcome listing words committed for the first time
        """
        ledger = self.ledger
        word_count = len(ledger)
        if word_count == 0:
            return JudgeOutcome()

        typed = buffer.split()
        if not typed:
            ledger.reset_statuses()
            self.cursor = 0
            return JudgeOutcome()

        if is_boundary(buffer[-1:]):
            completed = len(typed)
        else:
            completed = len(typed) - 1
            if _completes_passage(ledger, completed, typed[completed]):
                completed += 1
        completed = min(completed, word_count)

        for i in range(word_count):
            target = ledger.word_at(i)
            if i < completed:
                status = WordStatus.CORRECT if typed[i] == target else WordStatus.INCORRECT
            elif i == completed and i < len(typed):
                status = _in_progress_status(target, typed[i])
            elif i == completed:
                status = WordStatus.ACTIVE
            else:
                status = WordStatus.PENDING
            ledger.set_status(i, status)

        self.cursor = completed
        outcome = JudgeOutcome(passage_complete=completed == word_count)
        for i in range(self.committed_count, completed):
            target = ledger.word_at(i)
            judged = JudgedWord(
                index=i, target=target, typed=typed[i], correct=typed[i] == target
            )
            log.debug(f"Committed word {i}: {typed[i]!r} vs {target!r}")
            outcome.committed.append(judged)
        self.committed_count = max(self.committed_count, completed)
        return outcome


class DiscreteJudge:
    """Judges one word at a time; a boundary commits the active word."""

    def __init__(self, ledger: WordLedger):
        self.ledger = ledger
        self.cursor = 0
        self.buffer = ""

    def reset(self) -> None:
        self.cursor = 0
        self.buffer = ""

    def update_partial(self, text: str) -> JudgeOutcome:
        """Re-colour the active word from its partially typed text.

        Args:
            text: Characters typed so far for the active word

        Returns:
            JudgeOutcome, non-empty only if this finished the last word
        """
        if self.cursor >= len(self.ledger):
            return JudgeOutcome()
        if _completes_passage(self.ledger, self.cursor, text):
            return self.commit(text)

        self.buffer = text
        if not text:
            self.ledger.set_status(self.cursor, WordStatus.ACTIVE)
        else:
            target = self.ledger.word_at(self.cursor)
            self.ledger.set_status(self.cursor, _in_progress_status(target, text))
        return JudgeOutcome()

    def commit(self, word: str) -> JudgeOutcome:
        """Compare a finished word against the active target and advance.

        An empty word (e.g. a doubled space) commits nothing.
        """
        word = word.strip()
        self.buffer = ""
        word_count = len(self.ledger)
        if not word or self.cursor >= word_count:
            return JudgeOutcome()

        index = self.cursor
        target = self.ledger.word_at(index)
        correct = word == target
        self.ledger.set_status(
            index, WordStatus.CORRECT if correct else WordStatus.INCORRECT
        )
        log.debug(f"Committed word {index}: {word!r} vs {target!r}")

        self.cursor += 1
        if self.cursor < word_count:
            self.ledger.set_status(self.cursor, WordStatus.ACTIVE)
        return JudgeOutcome(
            committed=[JudgedWord(index=index, target=target, typed=word, correct=correct)],
            passage_complete=self.cursor == word_count,
        )

    def type_char(self, ch: str) -> JudgeOutcome:
        """Feed one raw character; whitespace commits."""
        if is_boundary(ch):
            return self.commit(self.buffer)
        return self.update_partial(self.buffer + ch)

    def backspace(self) -> JudgeOutcome:
        """Remove the last character of the active word."""
        return self.update_partial(self.buffer[:-1])
