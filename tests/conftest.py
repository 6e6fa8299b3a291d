"""
Pytest configuration for binaryconverter tests.
"""

import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtCore import QObject, Signal
from PySide6.QtTest import QSignalSpy
from PySide6.QtWidgets import QApplication

from binaryconverter.model.state import ConverterState, CompatibilityMode
from binaryconverter.controller.store import ConverterStore


@pytest.fixture(scope="session")
def qapp():
    """Single QApplication shared by all Qt tests."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


@pytest.fixture
def store(qapp) -> ConverterStore:
    return ConverterStore(ConverterState())


@pytest.fixture
def legacy_store(qapp) -> ConverterStore:
    return ConverterStore(ConverterState(rules=CompatibilityMode.LEGACY))


class SignalRecorder:
    """Wraps QSignalSpy and exposes the first argument of every emission."""

    def __init__(self, signal) -> None:
        self.spy = QSignalSpy(signal)

    @property
    def calls(self) -> list:
        return [self.spy.at(i)[0] for i in range(self.spy.count())]


@pytest.fixture
def recorder():
    return SignalRecorder


class FakeInputMethod(QObject):
    """Stands in for QInputMethod so tests can raise and dismiss the keyboard."""
    visibleChanged = Signal()

    def __init__(self) -> None:
        super().__init__()
        self.visible = False

    def isVisible(self) -> bool:
        return self.visible

    def show_keyboard(self, visible: bool) -> None:
        self.visible = visible
        self.visibleChanged.emit()


@pytest.fixture
def keyboard(qapp) -> FakeInputMethod:
    return FakeInputMethod()
