"""
Main Application Window
=======================
The converter screen: result board on top, button panel below.

Why is this file needed?
------------------------
1. Layout: It organizes the input field, result display and controls.
2. Routing: It connects widget signals to the ConverterStore and reflects
   store signals back into the widgets.
"""
from typing import Optional

from PySide6.QtCore import Qt
from PySide6.QtGui import QCloseEvent
from PySide6.QtWidgets import (
    QMainWindow, QWidget, QVBoxLayout, QHBoxLayout, QLabel, QLineEdit,
    QPushButton, QCheckBox, QMessageBox, QFrame
)

from binaryconverter.config import VISIBLE_APP_NAME
from binaryconverter.controller.input_method import InputMethodWatcher
from binaryconverter.controller.store import ConverterStore
from binaryconverter.view.widgets.insert_button import InsertButton

# QLineEdit's own default, i.e. no practical limit
UNLIMITED_LENGTH = 32767

STYLE_SHEET = """
    #resultBoard { background-color: #f5e1a2; }
    #controlsPanel { background-color: #e0cf96; }
    QLabel#labelTitle { font-size: 24px; font-weight: bold; }
    QLineEdit, QLabel#resultValue {
        font-size: 34px; font-weight: bold; min-height: 64px;
        border: 2px solid #E9C46A; border-radius: 10px; padding-left: 5px;
    }
    QPushButton { color: white; font-size: 36px; font-weight: bold; border-radius: 10px; }
    QPushButton#insertButton { background-color: #264653; }
    QPushButton#convertButton { background-color: #2A9D8F; }
    QPushButton#clearButton { background-color: #E76F51; font-size: 22px; }
"""


class MainWindow(QMainWindow):
    def __init__(self, store: ConverterStore, watcher: Optional[InputMethodWatcher] = None) -> None:
        super().__init__()
        self.store = store
        self.watcher = watcher if watcher is not None else InputMethodWatcher(parent=self)

        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(420, 720)
        self.setStyleSheet(STYLE_SHEET)

        main_widget = QWidget()
        self.setCentralWidget(main_widget)
        main_layout = QVBoxLayout(main_widget)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        # --- 1. RESULT BOARD ---
        board = QFrame()
        board.setObjectName("resultBoard")
        board_layout = QVBoxLayout(board)
        board_layout.setContentsMargins(24, 24, 24, 24)

        board_layout.addWidget(self._title_label("INPUT"))
        self.input_edit = QLineEdit()
        self.input_edit.setInputMethodHints(Qt.ImhDigitsOnly)
        board_layout.addWidget(self.input_edit)
        board_layout.addSpacing(24)

        board_layout.addWidget(self._title_label("RESULT"))
        self.result_label = QLabel(self.store.result_value)
        self.result_label.setObjectName("resultValue")
        self.result_label.setTextInteractionFlags(Qt.TextSelectableByMouse)
        board_layout.addWidget(self.result_label)

        main_layout.addWidget(board, 1)

        # --- 2. CONTROLS PANEL ---
        self.controls_panel = QFrame()
        self.controls_panel.setObjectName("controlsPanel")
        controls_layout = QVBoxLayout(self.controls_panel)
        controls_layout.setContentsMargins(24, 24, 24, 8)

        self.chk_limit = QCheckBox(f"Enable {self.store.digits_limit}-digit limit")
        self.chk_limit.setChecked(self.store.digits_limit_enabled)
        controls_layout.addWidget(self.chk_limit)

        insert_row = QHBoxLayout()
        insert_row.setSpacing(24)
        self.btn_zero = InsertButton("0")
        self.btn_one = InsertButton("1")
        insert_row.addWidget(self.btn_zero)
        insert_row.addWidget(self.btn_one)
        controls_layout.addLayout(insert_row, 1)

        action_row = QHBoxLayout()
        self.btn_convert = QPushButton("CONVERT!")
        self.btn_convert.setObjectName("convertButton")
        self.btn_convert.setMinimumHeight(80)
        self.btn_clear = QPushButton("Clear inputs")
        self.btn_clear.setObjectName("clearButton")
        self.btn_clear.setMinimumHeight(80)
        action_row.addWidget(self.btn_convert, 65)
        action_row.addWidget(self.btn_clear, 25)
        controls_layout.addLayout(action_row, 1)

        main_layout.addWidget(self.controls_panel, 1)

        # --- SIGNAL CONNECTIONS ---
        # Widgets -> Store
        self.input_edit.textEdited.connect(self.on_text_edited)
        self.chk_limit.toggled.connect(self.store.set_digits_limit_enabled)
        self.btn_zero.digit_pressed.connect(self.store.insert_digit)
        self.btn_one.digit_pressed.connect(self.store.insert_digit)
        self.btn_convert.clicked.connect(self.store.convert)
        self.btn_clear.clicked.connect(self.store.clear)

        # Store -> Widgets
        self.store.input_changed.connect(self.on_input_changed)
        self.store.result_changed.connect(self.result_label.setText)
        self.store.limit_changed.connect(self.on_limit_changed)
        self.store.validation_failed.connect(self.show_validation_error)

        # Soft keyboard hides the controls
        self.watcher.visibility_changed.connect(self.on_input_method_visibility)
        self.watcher.start()

        self.on_input_changed(self.store.input_value)

    @staticmethod
    def _title_label(text: str) -> QLabel:
        label = QLabel(text)
        label.setObjectName("labelTitle")
        return label

    def _apply_max_length(self) -> None:
        limit = self.store.max_length
        if limit is None:
            self.input_edit.setMaxLength(UNLIMITED_LENGTH)
        else:
            # Legacy rules can push the input one past the limit; keep it visible
            self.input_edit.setMaxLength(max(limit, len(self.store.input_value)))

    # --- SLOTS ---

    def on_text_edited(self, text: str) -> None:
        self.store.set_input_text(text)
        if self.input_edit.text() != self.store.input_value:
            # Rejected or clipped edit, restore what the store holds
            cursor = self.input_edit.cursorPosition() - (len(text) - len(self.store.input_value))
            self.input_edit.setText(self.store.input_value)
            self.input_edit.setCursorPosition(max(0, cursor))

    def on_input_changed(self, value: str) -> None:
        self._apply_max_length()
        if self.input_edit.text() != value:
            self.input_edit.setText(value)

    def on_limit_changed(self, enabled: bool) -> None:
        if self.chk_limit.isChecked() != enabled:
            self.chk_limit.setChecked(enabled)
        self._apply_max_length()

    def on_input_method_visibility(self, visible: bool) -> None:
        self.controls_panel.setVisible(not visible)

    def show_validation_error(self, message: str) -> None:
        QMessageBox.warning(self, VISIBLE_APP_NAME, message)

    def closeEvent(self, event: QCloseEvent) -> None:
        self.watcher.stop()
        super().closeEvent(event)
