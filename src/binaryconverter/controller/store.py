from __future__ import annotations

import logging
from typing import Optional

from PySide6.QtCore import QObject, Signal

from binaryconverter.controller import converter
from binaryconverter.model.errors import ValidationError
from binaryconverter.model.state import ConverterState

logger = logging.getLogger(__name__)


class ConverterStore(QObject):
    """Owns the converter state and emits signals for view sync."""
    input_changed = Signal(str)
    result_changed = Signal(str)
    limit_changed = Signal(bool)
    validation_failed = Signal(str)

    def __init__(self, state: Optional[ConverterState] = None, parent: Optional[QObject] = None) -> None:
        super().__init__(parent)
        self.state = state if state is not None else ConverterState()

    # --- PROPERTIES ---

    @property
    def input_value(self) -> str:
        return self.state.input_value

    @property
    def result_value(self) -> str:
        return self.state.result_value

    @property
    def digits_limit_enabled(self) -> bool:
        return self.state.digits_limit_enabled

    @property
    def digits_limit(self) -> int:
        return self.state.digits_limit

    @property
    def max_length(self) -> Optional[int]:
        return self.state.max_length

    # --- EDITS ---

    def _set_input(self, value: str) -> None:
        if value != self.state.input_value:
            self.state.input_value = value
            self.input_changed.emit(value)

    def set_input_text(self, text: str) -> bool:
        """Apply a text field edit. Returns False when it was rejected as invalid."""
        try:
            value = converter.validate_and_append(
                self.state.input_value,
                text,
                self.state.digits_limit_enabled,
                self.state.digits_limit,
                self.state.rules,
            )
        except ValidationError as e:
            self.validation_failed.emit(e.message)
            return False

        self._set_input(value)
        return True

    def insert_digit(self, digit: str) -> None:
        try:
            value = converter.append_digit(
                self.state.input_value,
                digit,
                self.state.digits_limit_enabled,
                self.state.digits_limit,
                self.state.rules,
            )
        except ValidationError as e:
            self.validation_failed.emit(e.message)
            return

        self._set_input(value)

    def convert(self) -> str:
        try:
            result = converter.convert(self.state.input_value)
        except ValidationError as e:
            self.validation_failed.emit(e.message)
            return self.state.result_value

        logger.debug(f"Converted '{self.state.input_value}' -> {result}")
        self.state.result_value = result
        self.result_changed.emit(result)
        return result

    def clear(self) -> None:
        self.state.reset()
        self.input_changed.emit(self.state.input_value)
        self.result_changed.emit(self.state.result_value)

    # --- LIMIT TOGGLE ---

    def set_digits_limit_enabled(self, enabled: bool) -> None:
        if enabled != self.state.digits_limit_enabled:
            self.state.digits_limit_enabled = enabled
            logger.info(f"Digit limit {'enabled' if enabled else 'disabled'}.")
            self.limit_changed.emit(enabled)

    def toggle_digits_limit(self) -> None:
        self.set_digits_limit_enabled(not self.state.digits_limit_enabled)
