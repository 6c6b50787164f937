"""Shared test fixtures for TypeLadder tests."""

import pytest
import tempfile
from pathlib import Path

from PySide6.QtCore import QCoreApplication

from core.engine import TypingEngine
from core.passage_store import SnippetPassageStore
from core.session_config import InputMode, SessionConfig


class FakeTickSource:
    """Records start/cancel calls instead of scheduling real ticks."""

    def __init__(self):
        self.active = False
        self.starts = 0
        self.cancels = 0

    def start(self) -> None:
        self.active = True
        self.starts += 1

    def cancel(self) -> None:
        self.active = False
        self.cancels += 1


@pytest.fixture
def temp_db_path():
    """Create a temporary database path and clean up afterwards."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir) / "test.db"


@pytest.fixture(scope="session")
def qt_app():
    """Qt core application needed by QTimer."""
    app = QCoreApplication.instance() or QCoreApplication([])
    yield app


@pytest.fixture
def tick_source():
    return FakeTickSource()


@pytest.fixture
def make_engine(tick_source):
    """Build an engine over fixed passages."""

    def factory(*passages, mode=InputMode.STREAMING, config=None, **kwargs):
        store = SnippetPassageStore(list(passages) or ["cat dog"])
        return TypingEngine(
            passage_store=store,
            config=config or SessionConfig(input_mode=mode),
            tick_source=tick_source,
            **kwargs,
        )

    return factory
