"""Typing session engine tying ledger, judge, clock and scoring together."""

import logging
from typing import Callable, List, Optional

from core.input_judge import DiscreteJudge, JudgeOutcome, StreamingJudge
from core.models import LevelUp, Results, SessionSnapshot
from core.passage_store import PassageStore, SnippetPassageStore
from core.results import calculate_results
from core.scoring import Progression
from core.session_clock import SessionClock, SessionPhase, TickSource
from core.session_config import InputMode, SessionConfig
from core.word_ledger import WordLedger, WordStatus

log = logging.getLogger("typeladder.engine")


class InputModeMismatch(RuntimeError):
    """Raised when input is submitted through the other mode's API."""

    pass


class TypingEngine:
    """A timed typing test with word judging, scoring and levels.

    The host drives it with three kinds of triggers: input (submit_*),
    clock ticks (tick) and reset. Every trigger mutates state synchronously
    and then pushes exactly one snapshot to `on_change`.
    """

    def __init__(self, passage_store: Optional[PassageStore] = None,
                 config: Optional[SessionConfig] = None,
                 tick_source: Optional[TickSource] = None,
                 on_change: Optional[Callable[[SessionSnapshot], None]] = None,
                 on_level_up: Optional[Callable[[LevelUp], None]] = None,
                 on_finished: Optional[Callable[[Results], None]] = None):
        """Initialize engine and load the first passage.

        Args:
            passage_store: Passage source (default: bundled snippets)
            config: Session configuration (default: 60s streaming test)
            tick_source: Started with the test, cancelled on finish and reset
            on_change: Called with a snapshot after every trigger
            on_level_up: Called once per level gained
            on_finished: Called once with the results when time runs out
        """
        self.config = config or SessionConfig()
        self.passage_store = passage_store or SnippetPassageStore()
        self.on_change = on_change
        self.on_level_up = on_level_up
        self.on_finished = on_finished

        self.ledger = WordLedger()
        self.clock = SessionClock(
            length_sec=self.config.session_length_sec,
            tick_source=tick_source,
            on_finished=self._end_test,
        )
        self.progression = Progression(self.config)
        if self.config.input_mode == InputMode.DISCRETE:
            self.judge = DiscreteJudge(self.ledger)
        else:
            self.judge = StreamingJudge(self.ledger)

        self.correct_word_count = 0
        self.total_words_judged = 0
        self.passage_number = 0
        self.results: Optional[Results] = None
        self._clear_input = False
        self._reset_state()

    # ========== Observable state ==========

    @property
    def input_mode(self) -> InputMode:
        return self.config.input_mode

    @property
    def phase(self) -> SessionPhase:
        return self.clock.phase

    @property
    def seconds_remaining(self) -> int:
        return self.clock.seconds_remaining

    @property
    def words(self) -> List[str]:
        return self.ledger.words

    @property
    def statuses(self) -> List[WordStatus]:
        return self.ledger.statuses

    @property
    def active_index(self) -> Optional[int]:
        """Index of the word currently being typed."""
        if self.judge.cursor >= len(self.ledger):
            return None
        return self.judge.cursor

    @property
    def wpm(self) -> int:
        return self.results.wpm if self.results else 0

    @property
    def accuracy_percent(self) -> int:
        return self.results.accuracy_percent if self.results else 0

    @property
    def level(self) -> int:
        return self.progression.level

    @property
    def points(self) -> int:
        return self.progression.points

    @property
    def points_for_next_level(self) -> int:
        return self.progression.points_for_next_level

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(
            phase=self.phase,
            seconds_remaining=self.seconds_remaining,
            words=self.words,
            statuses=self.statuses,
            active_index=self.active_index,
            passage_number=self.passage_number,
            clear_input=self._clear_input,
            correct_word_count=self.correct_word_count,
            total_words_judged=self.total_words_judged,
            wpm=self.wpm,
            accuracy_percent=self.accuracy_percent,
            level=self.level,
            points=self.points,
            points_for_next_level=self.points_for_next_level,
        )

    # ========== Input ==========

    def submit_input(self, buffer: str) -> SessionSnapshot:
        """Streaming mode: judge the whole typed buffer.

        Args:
            buffer: Everything typed for the current passage, in-progress
                word included
        """
        self._require_mode(InputMode.STREAMING)
        if not self._accept_input():
            return self._notify()
        return self._apply(self.judge.evaluate(buffer))

    def submit_partial_input(self, text: str) -> SessionSnapshot:
        """Discrete mode: update the active word from its partial text."""
        self._require_mode(InputMode.DISCRETE)
        if not self._accept_input():
            return self._notify()
        return self._apply(self.judge.update_partial(text))

    def submit_completed_word(self, word: str) -> SessionSnapshot:
        """Discrete mode: commit a finished word against the active target."""
        self._require_mode(InputMode.DISCRETE)
        if not self._accept_input():
            return self._notify()
        return self._apply(self.judge.commit(word))

    def submit_key(self, ch: str) -> SessionSnapshot:
        """Discrete mode: feed one character; any whitespace commits."""
        self._require_mode(InputMode.DISCRETE)
        if not self._accept_input():
            return self._notify()
        return self._apply(self.judge.type_char(ch))

    def submit_backspace(self) -> SessionSnapshot:
        """Discrete mode: delete the last character of the active word."""
        self._require_mode(InputMode.DISCRETE)
        if not self._accept_input():
            return self._notify()
        return self._apply(self.judge.backspace())

    def _require_mode(self, mode: InputMode) -> None:
        if self.config.input_mode != mode:
            raise InputModeMismatch(
                f"Engine runs in {self.config.input_mode.value} mode, "
                f"not {mode.value}"
            )

    def _accept_input(self) -> bool:
        """Start the clock on first input; refuse input once finished."""
        self._clear_input = False
        if self.clock.is_finished:
            log.debug("Ignoring input after test finished")
            return False
        self.clock.start()
        return True

    def _apply(self, outcome: JudgeOutcome) -> SessionSnapshot:
        for judged in outcome.committed:
            self.total_words_judged += 1
            if not judged.correct:
                continue
            self.correct_word_count += 1
            points = self.progression.score(judged.target)
            if points:
                log.debug(f"+{points} points for {judged.target!r}")
            for level_up in self.progression.award(points):
                if self.on_level_up:
                    self.on_level_up(level_up)

        if outcome.passage_complete:
            self._load_next_passage()
        return self._notify()

    # ========== Clock ==========

    def tick(self) -> SessionSnapshot:
        """Advance the countdown by one second."""
        self._clear_input = False
        self.clock.tick()
        return self._notify()

    def _end_test(self) -> None:
        self.results = calculate_results(
            self.correct_word_count,
            self.total_words_judged,
            self.config.session_length_sec,
        )
        log.info(
            f"WPM: {self.results.wpm} | Accuracy: {self.results.accuracy_percent}% | "
            f"Level: {self.level} | Points: {self.points} / {self.points_for_next_level}"
        )
        if self.on_finished:
            self.on_finished(self.results)

    # ========== Lifecycle ==========

    def reset(self) -> SessionSnapshot:
        """Stop any running test and start over from the first passage."""
        self._reset_state()
        return self._notify()

    def _reset_state(self) -> None:
        self.clock.reset()
        self.progression.reset()
        self.correct_word_count = 0
        self.total_words_judged = 0
        self.results = None
        self.passage_number = 0
        self.passage_store.rewind()
        self._load_next_passage()

    def _load_next_passage(self) -> None:
        words = self.passage_store.next_passage()
        self.ledger.load(words)
        self.judge.reset()
        self.passage_number += 1
        self._clear_input = True
        log.info(f"Loaded passage {self.passage_number} ({len(words)} words)")

    def _notify(self) -> SessionSnapshot:
        snapshot = self.snapshot()
        if self.on_change:
            self.on_change(snapshot)
        return snapshot
