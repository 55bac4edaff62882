# -*- coding: utf-8 -*-
"""
Step Button Bar Component - Back/Cancel/Skip/Next buttons of a stepper.
"""

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QPushButton
from PyQt5.QtCore import pyqtSignal

from stepper.app.config import Config
from stepper.ui.design_system import DEFAULT_THEME, Spacing, StepperTheme


class StepButtonBar(QWidget):
    """
    Reusable stepper button bar.

    Signals:
        back_clicked: Emitted when Back button is clicked
        cancel_clicked: Emitted when Cancel button is clicked
        skip_clicked: Emitted when Skip button is clicked
        next_clicked: Emitted when Next button is clicked

    Usage:
        bar = StepButtonBar(theme=theme)
        bar.next_clicked.connect(stepper.next)
        bar.update_for(back=True, cancel=False, skip=True, next=True)
    """

    # Signals
    back_clicked = pyqtSignal()
    cancel_clicked = pyqtSignal()
    skip_clicked = pyqtSignal()
    next_clicked = pyqtSignal()

    def __init__(self, theme: StepperTheme = DEFAULT_THEME, parent=None):
        super().__init__(parent)
        self.theme = theme

        self._setup_ui()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(Spacing.MD, Spacing.SM, Spacing.MD, Spacing.SM)
        layout.setSpacing(Spacing.SM)

        # Left side (Back)
        self.btn_back = QPushButton(Config.BACK_TEXT)
        self.btn_back.setStyleSheet(self.theme.secondary_button_stylesheet())
        self.btn_back.clicked.connect(self.back_clicked.emit)
        layout.addWidget(self.btn_back)

        layout.addStretch()

        # Right side (Cancel, Skip, Next)
        self.btn_cancel = QPushButton(Config.CANCEL_TEXT)
        self.btn_cancel.setStyleSheet(self.theme.secondary_button_stylesheet())
        self.btn_cancel.clicked.connect(self.cancel_clicked.emit)
        layout.addWidget(self.btn_cancel)

        self.btn_skip = QPushButton(Config.SKIP_TEXT)
        self.btn_skip.setStyleSheet(self.theme.secondary_button_stylesheet())
        self.btn_skip.clicked.connect(self.skip_clicked.emit)
        layout.addWidget(self.btn_skip)

        self.btn_next = QPushButton(Config.NEXT_TEXT)
        self.btn_next.setStyleSheet(self.theme.primary_button_stylesheet())
        self.btn_next.clicked.connect(self.next_clicked.emit)
        layout.addWidget(self.btn_next)

    def update_for(self, back: bool, cancel: bool, skip: bool, next: bool):
        """Set which buttons are offered."""
        self.btn_back.setVisible(back)
        self.btn_cancel.setVisible(cancel)
        self.btn_skip.setVisible(skip)
        self.btn_next.setVisible(next)

    def set_buttons_enabled(self, enabled: bool):
        """Enable/disable all buttons (used while the stepper is locked)."""
        for button in (self.btn_back, self.btn_cancel, self.btn_skip, self.btn_next):
            button.setEnabled(enabled)

    def set_next_text(self, text: str):
        """Update next button text."""
        self.btn_next.setText(text)
