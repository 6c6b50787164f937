#!/usr/bin/env python3
"""TypeLadder - timed typing practice with points and levels.

Runs a console typing test: the passage is printed, every line you enter is
judged word by word, and the countdown starts with your first input.

Commands while running:
    :reset   start over with the first passage
    :quit    exit
"""

import argparse
import logging
import os
import signal
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import TextIO

from PySide6.QtCore import QCoreApplication, QObject, QSocketNotifier

from core.engine import TypingEngine
from core.models import LevelUp, Results, SessionSnapshot
from core.passage_store import (
    PassageStore,
    RandomWordPassageStore,
    SnippetPassageStore,
    TextFilePassageStore,
)
from core.session_clock import SessionPhase
from core.session_config import InputMode, SessionConfig
from core.session_timer import SessionTimer
from core.word_ledger import WordStatus
from utils.config import AppSettings, Config

log = logging.getLogger("typeladder")


def setup_logging(verbose: bool = False) -> None:
    """Log to a rotating file in the XDG state directory and to stderr."""
    xdg_state_home = os.environ.get("XDG_STATE_HOME", str(Path.home() / ".local" / "state"))
    log_dir = Path(xdg_state_home) / "typeladder"
    log_dir.mkdir(parents=True, exist_ok=True)

    # 5MB max, keep 5 backups
    file_handler = RotatingFileHandler(
        log_dir / "typeladder.log",
        maxBytes=5 * 1024 * 1024,
        backupCount=5,
    )
    stream_handler = logging.StreamHandler()
    stream_handler.setLevel(logging.DEBUG if verbose else logging.WARNING)

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[file_handler, stream_handler],
    )


def build_passage_store(settings: AppSettings, text_file: Path | None = None,
                        seed: int | None = None) -> PassageStore:
    """Create the passage source named by the settings."""
    if settings.passage_source == "random":
        return RandomWordPassageStore(word_count=settings.random_word_count, seed=seed)
    if settings.passage_source == "file":
        if text_file is None:
            raise ValueError("passage source 'file' needs --file")
        return TextFilePassageStore(text_file)
    return SnippetPassageStore()


class ConsoleSession(QObject):
    """Feeds input lines and timer ticks into a TypingEngine."""

    def __init__(self, app: QCoreApplication, session_config: SessionConfig,
                 passage_store: PassageStore, tick_interval_ms: int = 1000,
                 stream: TextIO | None = None):
        super().__init__()
        self.app = app
        self.stream = stream or sys.stdin
        self.buffer = ""
        self.notifier: QSocketNotifier | None = None

        self.timer = SessionTimer(interval_ms=tick_interval_ms, parent=self)
        self.engine = TypingEngine(
            passage_store=passage_store,
            config=session_config,
            tick_source=self.timer,
            on_level_up=self.on_level_up,
            on_finished=self.on_finished,
        )
        self.timer.ticked.connect(self.on_tick)

    def start(self) -> None:
        print(__doc__.split("\n\n", 1)[1])
        self.print_passage(self.engine.snapshot())

    def listen(self) -> None:
        """Read a line from the input stream whenever one is ready."""
        self.notifier = QSocketNotifier(
            self.stream.fileno(), QSocketNotifier.Type.Read, self
        )
        self.notifier.activated.connect(self.on_stdin_ready)

    def print_passage(self, snapshot: SessionSnapshot) -> None:
        print(f"\n--- Passage {snapshot.passage_number} ---")
        print(" ".join(snapshot.words))
        print()

    def print_status(self, snapshot: SessionSnapshot) -> None:
        wrong = [
            word for word, status in zip(snapshot.words, snapshot.statuses)
            if status == WordStatus.INCORRECT
        ]
        print(
            f"Level: {snapshot.level} | "
            f"Points: {snapshot.points} / {snapshot.points_for_next_level} | "
            f"Correct: {snapshot.correct_word_count}/{snapshot.total_words_judged} | "
            f"Time left: {snapshot.seconds_remaining}s"
        )
        if wrong:
            print(f"Mistyped: {', '.join(wrong)}")

    def on_stdin_ready(self) -> None:
        line = self.stream.readline()
        if not line or line.strip() == ":quit":
            self.app.quit()
            return
        if line.strip() == ":reset":
            self.buffer = ""
            self.print_passage(self.engine.reset())
            return
        if self.engine.phase == SessionPhase.FINISHED:
            print("Time is up. Type :reset to try again or :quit to exit.")
            return

        snapshot = self.engine.snapshot()
        for word in line.split():
            if self.engine.input_mode == InputMode.STREAMING:
                self.buffer += word + " "
                snapshot = self.engine.submit_input(self.buffer)
            else:
                snapshot = self.engine.submit_completed_word(word)
            if snapshot.phase == SessionPhase.FINISHED:
                break
            if snapshot.clear_input:
                self.buffer = ""
                self.print_passage(snapshot)
        if snapshot.phase != SessionPhase.FINISHED:
            self.print_status(snapshot)

    def on_tick(self) -> None:
        snapshot = self.engine.tick()
        if snapshot.phase == SessionPhase.RUNNING and snapshot.seconds_remaining % 10 == 0:
            print(f"{snapshot.seconds_remaining}s left")

    def on_level_up(self, level_up: LevelUp) -> None:
        print(f"LEVEL UP! You've reached Level {level_up.level}!")

    def on_finished(self, results: Results) -> None:
        print("\n=== Time is up ===")
        print(f"WPM:      {results.wpm}")
        print(f"Accuracy: {results.accuracy_percent}%")
        print(f"Level:    {self.engine.level}")
        print(f"Points:   {self.engine.points} / {self.engine.points_for_next_level}")
        print("Type :reset to try again or :quit to exit.")


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Timed typing practice with points and levels")
    parser.add_argument("--mode", choices=[m.value for m in InputMode],
                        help="Input judging mode")
    parser.add_argument("--duration", type=int, help="Test length in seconds")
    parser.add_argument("--source", choices=["snippets", "random", "file"],
                        help="Where passages come from")
    parser.add_argument("--file", type=Path, help="Text file for --source file")
    parser.add_argument("--words", type=int, help="Words per passage for --source random")
    parser.add_argument("--seed", type=int, help="Random seed for --source random")
    parser.add_argument("--db", type=Path,
                        default=Path.home() / ".local" / "share" / "typeladder" / "settings.db",
                        help="Settings database path")
    parser.add_argument("--save", action="store_true",
                        help="Store the given options as new defaults")
    parser.add_argument("--verbose", action="store_true", help="Log debug output to stderr")
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    setup_logging(args.verbose)

    args.db.parent.mkdir(parents=True, exist_ok=True)
    config = Config(args.db)

    overrides = {
        "input_mode": args.mode,
        "session_length_sec": args.duration,
        "passage_source": args.source or ("file" if args.file else None),
        "random_word_count": args.words,
    }
    try:
        if args.save:
            for key, value in overrides.items():
                if value is not None:
                    config.set(key, value)
            log.info(f"Saved settings to {args.db}")
        settings = config.settings(overrides)
        session_config = config.session_config(overrides)
        passage_store = build_passage_store(settings, args.file, args.seed)
    except (OSError, ValueError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1
    log.info(f"Starting session with settings: {settings.model_dump()}")

    app = QCoreApplication(sys.argv[:1])
    signal.signal(signal.SIGINT, signal.SIG_DFL)

    session = ConsoleSession(app, session_config, passage_store,
                             tick_interval_ms=settings.tick_interval_ms)
    session.start()
    session.listen()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
