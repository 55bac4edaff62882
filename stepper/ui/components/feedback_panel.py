# -*- coding: utf-8 -*-
"""
Feedback panel component.
"""

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QProgressBar
from PyQt5.QtCore import Qt

from stepper.ui.design_system import DEFAULT_THEME, Spacing, StepperTheme


class FeedbackPanel(QWidget):
    """Transition message with an indeterminate progress indicator."""

    def __init__(self, theme: StepperTheme = DEFAULT_THEME, parent=None):
        super().__init__(parent)
        self.theme = theme
        self._setup_ui()

    def _setup_ui(self):
        layout = QVBoxLayout(self)
        layout.setAlignment(Qt.AlignCenter)
        layout.setContentsMargins(Spacing.LG, Spacing.LG, Spacing.LG, Spacing.LG)
        layout.setSpacing(Spacing.MD)

        # Message label
        self.message_label = QLabel("")
        self.message_label.setAlignment(Qt.AlignCenter)
        self.message_label.setWordWrap(True)
        self.message_label.setStyleSheet(f"font-size: 12pt; color: {self.theme.text_color};")
        layout.addWidget(self.message_label)

        # Progress bar, indeterminate
        self.progress_bar = QProgressBar()
        self.progress_bar.setTextVisible(False)
        self.progress_bar.setRange(0, 0)
        self.progress_bar.setFixedWidth(240)
        self.progress_bar.setMinimumHeight(6)
        layout.addWidget(self.progress_bar, 0, Qt.AlignCenter)

    def set_message(self, message: str):
        self.message_label.setText(message)

    def message(self) -> str:
        return self.message_label.text()
