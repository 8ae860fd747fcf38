"""
Qt GUI for RandPass.

A single generator panel: password field with a copy button, a length
slider, digit/symbol toggles and a Regenerate button.
"""

from __future__ import annotations

import random
import sys
from typing import Optional

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QFont, QKeySequence, QShortcut
from PySide6.QtWidgets import (
    QApplication,
    QCheckBox,
    QGroupBox,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMainWindow,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from .config import (
    COPY_STATUS_COPIED,
    COPY_STATUS_FAILED,
    DEFAULT_CONFIG,
    MAX_LENGTH,
    MIN_LENGTH,
    GeneratorConfig,
)
from .generator import describe_strength
from .state import GeneratorState

COPY_BUTTON_TEXT = {
    COPY_STATUS_COPIED: "Copied!",
    COPY_STATUS_FAILED: "Failed to copy.",
}


class GeneratorTab(QWidget):
    """
    Generator panel: controls + password display, bound to a GeneratorState.
    """

    def __init__(
        self,
        state: Optional[GeneratorState] = None,
        parent: Optional[QWidget] = None,
    ) -> None:
        super().__init__(parent)
        self.state = state if state is not None else GeneratorState(parent=self)

        layout = QVBoxLayout(self)
        layout.setContentsMargins(20, 20, 20, 20)
        layout.setSpacing(16)

        layout.addWidget(self._build_password_group())
        layout.addWidget(self._build_config_group())

        self.state.passwordChanged.connect(self._on_password_changed)
        self.state.copyStatusChanged.connect(self._on_copy_status_changed)

        self._on_password_changed(self.state.password)
        self._on_copy_status_changed(self.state.copy_status)

    # -- groups --

    def _build_password_group(self) -> QGroupBox:
        group = QGroupBox("Password")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(8)

        row = QHBoxLayout()

        self.password_field = QLineEdit()
        self.password_field.setReadOnly(True)
        pw_font = QFont("Consolas")
        pw_font.setPointSize(14)
        self.password_field.setFont(pw_font)
        self.password_field.setPlaceholderText("Your new password")
        row.addWidget(self.password_field, 1)

        self.copy_button = QPushButton("Copy")
        self.copy_button.setCursor(Qt.PointingHandCursor)
        self.copy_button.clicked.connect(self.on_copy_clicked)
        row.addWidget(self.copy_button)

        self.strength_label = QLabel("Password strength: –")
        self.strength_label.setAlignment(Qt.AlignCenter)

        layout.addLayout(row)
        layout.addWidget(self.strength_label)

        group.setLayout(layout)
        return group

    def _build_config_group(self) -> QGroupBox:
        group = QGroupBox("Configuration")
        layout = QVBoxLayout()
        layout.setContentsMargins(12, 12, 12, 12)
        layout.setSpacing(10)

        # Password length
        length_row = QHBoxLayout()
        self.length_slider = QSlider(Qt.Horizontal)
        self.length_slider.setRange(MIN_LENGTH, MAX_LENGTH)
        self.length_slider.setValue(self.state.length)
        self.length_slider.setAccessibleName("Password length slider")
        self.length_value_label = QLabel(f"Length: {self.state.length}")
        self.length_value_label.setAlignment(Qt.AlignRight | Qt.AlignVCenter)
        self.length_slider.valueChanged.connect(self.on_length_changed)
        length_row.addWidget(self.length_slider, 1)
        length_row.addWidget(self.length_value_label)
        layout.addLayout(length_row)

        # Pool toggles + regenerate
        options_row = QHBoxLayout()
        self.digits_check = QCheckBox("Numbers")
        self.digits_check.setChecked(self.state.include_digits)
        self.digits_check.toggled.connect(self.state.set_include_digits)

        self.symbols_check = QCheckBox("Characters")
        self.symbols_check.setChecked(self.state.include_symbols)
        self.symbols_check.toggled.connect(self.state.set_include_symbols)

        self.regenerate_button = QPushButton("Regenerate")
        regen_font = self.regenerate_button.font()
        regen_font.setBold(True)
        self.regenerate_button.setFont(regen_font)
        self.regenerate_button.setCursor(Qt.PointingHandCursor)
        self.regenerate_button.clicked.connect(self.on_regenerate_clicked)

        options_row.addWidget(self.digits_check)
        options_row.addWidget(self.symbols_check)
        options_row.addStretch()
        options_row.addWidget(self.regenerate_button)
        layout.addLayout(options_row)

        group.setLayout(layout)
        return group

    # -- actions --

    @Slot(int)
    def on_length_changed(self, value: int) -> None:
        self.length_value_label.setText(f"Length: {value}")
        self.state.set_length(value)

    def on_regenerate_clicked(self) -> None:
        self.state.regenerate()

    def on_copy_clicked(self) -> None:
        self.password_field.selectAll()
        self.state.copy_to_clipboard()

    @Slot(str)
    def _on_password_changed(self, password: str) -> None:
        self.password_field.setText(password)

        self.strength_label.setText(
            f"Password strength: {describe_strength(self.state.config)}"
        )

    @Slot(str)
    def _on_copy_status_changed(self, status: str) -> None:
        self.copy_button.setText(COPY_BUTTON_TEXT.get(status, "Copy"))


class GeneratorWindow(QMainWindow):
    def __init__(self, state: Optional[GeneratorState] = None) -> None:
        super().__init__()

        self.setWindowTitle("RandPass")
        self.setMinimumSize(560, 300)

        self._apply_base_style()

        self.generator_tab = GeneratorTab(state)
        self.setCentralWidget(self.generator_tab)

        # Keyboard shortcuts for the two actions
        self.copy_shortcut = QShortcut(QKeySequence("Ctrl+Shift+C"), self)
        self.copy_shortcut.activated.connect(self.generator_tab.on_copy_clicked)
        self.regenerate_shortcut = QShortcut(QKeySequence("Ctrl+R"), self)
        self.regenerate_shortcut.activated.connect(
            self.generator_tab.on_regenerate_clicked
        )

    def _apply_base_style(self) -> None:
        self.setStyleSheet(
            """
            QMainWindow {
                background-color: #0f172a;
            }
            QWidget {
                color: #e5e7eb;
                background-color: #0f172a;
                font-family: Segoe UI, Arial, sans-serif;
            }
            QGroupBox {
                border: 1px solid #334155;
                border-radius: 10px;
                margin-top: 16px;
                background-color: #111827;
            }
            QGroupBox::title {
                subcontrol-origin: margin;
                subcontrol-position: top left;
                padding: 2px 8px;
                color: #22d3ee;
                font-weight: 600;
                font-size: 10pt;
            }
            QLineEdit {
                border: 1px solid #334155;
                border-radius: 6px;
                padding: 6px 8px;
                color: #111827;
                background-color: #e2e8f0;
            }
            QPushButton {
                border-radius: 8px;
                padding: 6px 14px;
                background-color: #2563eb;
                color: #ffffff;
                border: none;
            }
            QPushButton:hover {
                background-color: #1d4ed8;
            }
            QPushButton:pressed {
                background-color: #1e40af;
            }
            QLabel {
                font-size: 10pt;
                color: #93c5fd;
            }
            QCheckBox {
                spacing: 6px;
                color: #cbd5e1;
            }
            """
        )


def main(
    config: Optional[GeneratorConfig] = None,
    rng: Optional[random.Random] = None,
) -> None:
    """
    Open the window with `config` as the initial settings.
    """
    cfg = config or DEFAULT_CONFIG
    app = QApplication.instance() or QApplication(sys.argv)
    state = GeneratorState(
        length=cfg.length,
        include_digits=cfg.include_digits,
        include_symbols=cfg.include_symbols,
        rng=rng,
    )
    window = GeneratorWindow(state)
    window.show()
    sys.exit(app.exec())
