"""
Input Method Watcher
====================
Tracks whether the platform soft input method (on-screen keyboard) is shown.

The converter screen hides its button panel while the keyboard is up, the
same way a phone layout would. On desktop platforms without a soft keyboard
the signal simply never fires.

Classes:
    InputMethodWatcher: Subscribes to QInputMethod.visibleChanged.
"""
from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal
from PySide6.QtGui import QGuiApplication, QInputMethod

logger = logging.getLogger(__name__)


class InputMethodWatcher(QObject):
    visibility_changed = Signal(bool)

    def __init__(self, input_method: Optional[QInputMethod] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self._input_method = input_method
        self._active = False

    @property
    def active(self) -> bool:
        return self._active

    def _source(self) -> QInputMethod:
        if self._input_method is None:
            self._input_method = QGuiApplication.inputMethod()
        return self._input_method

    def is_visible(self) -> bool:
        return self._source().isVisible()

    def start(self) -> None:
        if self._active:
            return
        self._source().visibleChanged.connect(self._on_visible_changed)
        self._active = True
        logger.debug("Input method watcher started.")

    def stop(self) -> None:
        if not self._active:
            return
        self._source().visibleChanged.disconnect(self._on_visible_changed)
        self._active = False
        logger.debug("Input method watcher stopped.")

    def __enter__(self) -> InputMethodWatcher:
        self.start()
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.stop()

    # --- SLOTS ---

    def _on_visible_changed(self) -> None:
        visible = self.is_visible()
        logger.debug(f"Input method visible: {visible}")
        self.visibility_changed.emit(visible)
