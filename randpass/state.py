"""
Generator state shared by the window: current settings, the last password
and the transient copy status.
"""

from __future__ import annotations

import logging
import random
from typing import Callable, Optional

from PySide6.QtCore import QObject, QTimer, Signal
from PySide6.QtGui import QGuiApplication

from .config import (
    COPY_STATUS_COPIED,
    COPY_STATUS_FAILED,
    COPY_STATUS_IDLE,
    COPY_STATUS_RESET_MS,
    DEFAULT_LENGTH,
    GeneratorConfig,
    clamp_length,
)
from .generator import generate

logger = logging.getLogger(__name__)


def qt_clipboard_writer(text: str) -> None:
    """
    Place text on the application clipboard.
    """
    clipboard = QGuiApplication.clipboard()
    if clipboard is None:
        raise RuntimeError("No clipboard available (is a QGuiApplication running?)")
    clipboard.setText(text)


class GeneratorState(QObject):
    """
    Owns the generator settings and regenerates the password after every
    change to them.

    Copy requests report "copied" or "failed" through `copy_status`, which
    falls back to "" once the reset timer fires.
    """

    passwordChanged = Signal(str)
    copyStatusChanged = Signal(str)

    def __init__(
        self,
        length: int = DEFAULT_LENGTH,
        include_digits: bool = False,
        include_symbols: bool = False,
        rng: random.Random | None = None,
        reset_ms: int = COPY_STATUS_RESET_MS,
        parent: Optional[QObject] = None,
    ) -> None:
        super().__init__(parent)
        self._length = clamp_length(length)
        self._include_digits = bool(include_digits)
        self._include_symbols = bool(include_symbols)
        self._rng = rng

        self.password = ""
        self.copy_status = COPY_STATUS_IDLE

        self._status_timer = QTimer(self)
        self._status_timer.setSingleShot(True)
        self._status_timer.setInterval(reset_ms)
        self._status_timer.timeout.connect(self._on_status_timeout)

        self.regenerate()

    # -- settings --

    @property
    def length(self) -> int:
        return self._length

    @property
    def include_digits(self) -> bool:
        return self._include_digits

    @property
    def include_symbols(self) -> bool:
        return self._include_symbols

    @property
    def config(self) -> GeneratorConfig:
        return GeneratorConfig(
            length=self._length,
            include_digits=self._include_digits,
            include_symbols=self._include_symbols,
        )

    @property
    def status_timer(self) -> QTimer:
        return self._status_timer

    def set_length(self, length: int) -> None:
        clamped = clamp_length(length)
        if clamped != length:
            logger.warning("Length %d out of range, clamped to %d", length, clamped)
        self._length = clamped
        self.regenerate()

    def set_include_digits(self, enabled: bool) -> None:
        self._include_digits = bool(enabled)
        self.regenerate()

    def set_include_symbols(self, enabled: bool) -> None:
        self._include_symbols = bool(enabled)
        self.regenerate()

    def toggle_digits(self) -> None:
        self.set_include_digits(not self._include_digits)

    def toggle_symbols(self) -> None:
        self.set_include_symbols(not self._include_symbols)

    # -- actions --

    def regenerate(self) -> str:
        """
        Draw a new password from the current settings.

        A fresh password invalidates any pending copy status.
        """
        self.password = generate(self.config, self._rng)
        self.passwordChanged.emit(self.password)

        self._status_timer.stop()
        self._set_copy_status(COPY_STATUS_IDLE)
        return self.password

    def copy_to_clipboard(
        self, writer: Callable[[str], None] | None = None
    ) -> str:
        """
        Put the current password on the clipboard and return the new status.

        Failures are reported through the status, never raised. Either way the
        status is cleared once the reset timer fires; a later copy restarts it.
        """
        write = writer or qt_clipboard_writer
        try:
            write(self.password)
        except Exception:
            logger.error("Failed to copy password to clipboard", exc_info=True)
            self._set_copy_status(COPY_STATUS_FAILED)
        else:
            self._set_copy_status(COPY_STATUS_COPIED)

        self._status_timer.start()
        return self.copy_status

    def _on_status_timeout(self) -> None:
        self._set_copy_status(COPY_STATUS_IDLE)

    def _set_copy_status(self, status: str) -> None:
        if status == self.copy_status:
            return
        self.copy_status = status
        self.copyStatusChanged.emit(status)
