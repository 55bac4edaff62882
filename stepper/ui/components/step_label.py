# -*- coding: utf-8 -*-
"""
Step Label Component - Icon, caption and description of a single step.

Labels are pure views: the LabelProvider decides what they show.
"""

from typing import Optional

from PyQt5.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel
from PyQt5.QtCore import Qt, pyqtSignal
from PyQt5.QtGui import QFont

from stepper.ui.design_system import DEFAULT_THEME, Spacing, StepperTheme


class StepLabel(QWidget):
    """
    Step label widget.

    Signals:
        clicked: Emitted when the label is clicked with the left mouse button
    """

    clicked = pyqtSignal()

    def __init__(self, theme: StepperTheme = DEFAULT_THEME, parent=None):
        super().__init__(parent)
        self.theme = theme
        self._active = False
        self._disabled = False
        self._complete = False
        self._error: Optional[str] = None
        self._description = ""

        self._setup_ui()

    def _setup_ui(self):
        layout = QHBoxLayout(self)
        layout.setContentsMargins(Spacing.SM, Spacing.SM, Spacing.SM, Spacing.SM)
        layout.setSpacing(Spacing.SM)

        self.icon_label = QLabel()
        self.icon_label.setAlignment(Qt.AlignCenter)
        self.icon_label.setFixedSize(self.theme.icon_size, self.theme.icon_size)
        layout.addWidget(self.icon_label, 0, Qt.AlignTop)

        text_layout = QVBoxLayout()
        text_layout.setContentsMargins(0, 0, 0, 0)
        text_layout.setSpacing(2)

        self.caption_label = QLabel()
        text_layout.addWidget(self.caption_label)

        self.description_label = QLabel()
        self.description_label.setWordWrap(True)
        text_layout.addWidget(self.description_label)

        layout.addLayout(text_layout, 1)
        self._apply_style()

    # =========================================================================
    # Setters used by the LabelProvider
    # =========================================================================

    def set_caption(self, caption: str):
        self.caption_label.setText(caption)

    def set_description(self, description: str):
        self._description = description
        if self._error is None:
            self.description_label.setText(description)
            self.description_label.setVisible(bool(description))

    def set_icon_text(self, text: str):
        self.icon_label.setText(text)

    def icon_text(self) -> str:
        return self.icon_label.text()

    def set_active(self, active: bool):
        self._active = active
        self._apply_style()

    def set_complete(self, complete: bool):
        self._complete = complete
        self._apply_style()

    def set_disabled(self, disabled: bool):
        self._disabled = disabled
        self._apply_style()

    def set_error(self, message: Optional[str]):
        """Show an error message in place of the description (None hides it)."""
        self._error = message
        if message is not None:
            self.description_label.setText(message)
            self.description_label.setVisible(True)
        else:
            self.description_label.setText(self._description)
            self.description_label.setVisible(bool(self._description))
        self._apply_style()

    def is_active(self) -> bool:
        return self._active

    def get_error(self) -> Optional[str]:
        return self._error

    # =========================================================================
    # Styling
    # =========================================================================

    def _icon_color(self) -> str:
        if self._error is not None:
            return self.theme.error_color
        if self._active:
            return self.theme.active_color
        if self._complete:
            return self.theme.complete_color
        return self.theme.inactive_color

    def _apply_style(self):
        self.icon_label.setStyleSheet(f"""
            QLabel {{
                background-color: {self._icon_color()};
                color: white;
                border-radius: {self.theme.icon_radius()}px;
            }}
        """)

        caption_font = QFont()
        caption_font.setBold(self._active)
        self.caption_label.setFont(caption_font)

        if self._disabled:
            caption_color = self.theme.disabled_text_color
        elif self._error is not None:
            caption_color = self.theme.error_color
        else:
            caption_color = self.theme.text_color
        self.caption_label.setStyleSheet(f"background: transparent; color: {caption_color};")

        description_color = self.theme.error_color if self._error is not None else self.theme.secondary_text_color
        self.description_label.setStyleSheet(f"background: transparent; color: {description_color};")

        self.setCursor(Qt.ArrowCursor if self._disabled else Qt.PointingHandCursor)

    def mouseReleaseEvent(self, event):
        if event.button() == Qt.LeftButton:
            self.clicked.emit()
        super().mouseReleaseEvent(event)
