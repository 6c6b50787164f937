"""Qt one-second tick source for the session clock."""

import logging

from PySide6.QtCore import QObject, QTimer, Signal

log = logging.getLogger("typeladder.session_timer")


class SessionTimer(QObject):
    """Emits `ticked` once per interval until cancelled."""

    ticked = Signal()

    def __init__(self, interval_ms: int = 1000, parent=None):
        super().__init__(parent)
        self._timer = QTimer(self)
        self._timer.setInterval(interval_ms)
        self._timer.timeout.connect(self.ticked)

    @property
    def interval_ms(self) -> int:
        return self._timer.interval()

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        if not self._timer.isActive():
            self._timer.start()
            log.debug(f"Tick source started ({self.interval_ms}ms)")

    def cancel(self) -> None:
        if self._timer.isActive():
            self._timer.stop()
            log.debug("Tick source cancelled")
