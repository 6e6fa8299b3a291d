"""
Converter State (Data Model)
============================
This module defines the data structure owned by the converter screen.

Why is this file needed?
------------------------
1. State Management: It holds the binary input, the last conversion result
   and the digit-limit settings in one place.
2. Decoupling: Views read from this object; the store writes to it.

Nothing here is persisted. The state lives as long as the screen does.

Classes:
    CompatibilityMode: Selects corrected or original input rules.
    ConverterState: The main container class.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import StrEnum
import logging
from typing import Optional

logger = logging.getLogger(__name__)

DIGITS_LIMIT = 8


class CompatibilityMode(StrEnum):
    """
    STRICT: every character must be binary, length is capped at the limit.
    LEGACY: one binary character anywhere is enough, and the `<=` boundary
            lets the input grow one character past the limit.
    """
    STRICT = "strict"
    LEGACY = "legacy"


@dataclass
class ConverterState:
    input_value: str = ""
    # Snapshot of the last conversion, "" when nothing was converted yet.
    result_value: str = ""

    digits_limit_enabled: bool = True
    digits_limit: int = DIGITS_LIMIT

    rules: CompatibilityMode = CompatibilityMode.STRICT

    def __post_init__(self) -> None:
        if self.digits_limit < 1:
            raise ValueError(f"Digits limit must be positive, got {self.digits_limit}.")

    @property
    def max_length(self) -> Optional[int]:
        """Length cap for the text field, None when unlimited."""
        return self.digits_limit if self.digits_limit_enabled else None

    def reset(self) -> None:
        """Clear the input and the result. Limit settings are kept."""
        self.input_value = ""
        self.result_value = ""
        logger.info("Converter state has been reset.")
