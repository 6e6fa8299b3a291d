from __future__ import annotations

from typing import Optional

from PySide6.QtCore import Signal
from PySide6.QtWidgets import QPushButton, QSizePolicy, QWidget


class InsertButton(QPushButton):
    """Large button that inserts a single digit into the input."""
    digit_pressed = Signal(str)

    def __init__(self, digit: str, parent: Optional[QWidget] = None) -> None:
        super().__init__(digit, parent)
        self.digit = digit
        self.setObjectName("insertButton")
        self.setMinimumHeight(80)
        self.setSizePolicy(QSizePolicy.Expanding, QSizePolicy.Expanding)
        self.clicked.connect(lambda: self.digit_pressed.emit(self.digit))
