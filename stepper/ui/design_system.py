# -*- coding: utf-8 -*-
"""
Stepper Design System

Design tokens for the stepper renderers. Renderers receive a StepperTheme
instance instead of reading global style names, so two steppers in the same
window can be styled independently.
"""

from dataclasses import dataclass, replace
from enum import Enum


class Colors:
    """
    Default color palette (Material Design stepper colors)
    """
    # Primary Colors
    PRIMARY = "#1976D2"  # Active step icon
    PRIMARY_DARK = "#115293"
    SURFACE = "#FFFFFF"

    # Text Colors
    TEXT_PRIMARY = "#212121"
    TEXT_SECONDARY = "#757575"
    TEXT_DISABLED = "#BDBDBD"
    TEXT_ON_PRIMARY = "#FFFFFF"

    # Border & Divider Colors
    BORDER_DEFAULT = "#E0E0E0"
    DIVIDER = "#BDBDBD"

    # Status Colors
    SUCCESS = "#388E3C"  # Completed step icon
    ERROR = "#D32F2F"  # Step with error
    INACTIVE = "#9E9E9E"  # Unvisited step icon

    # Button States
    BUTTON_PRIMARY = "#1976D2"
    BUTTON_PRIMARY_HOVER = "#1565C0"
    BUTTON_SECONDARY = "#FFFFFF"
    BUTTON_SECONDARY_HOVER = "#F5F5F5"
    BUTTON_DISABLED = "#E0E0E0"


class IconShape(Enum):
    CIRCULAR = "circular"
    SQUARE = "square"


class Spacing:
    """Spacing scale (px)."""
    XS = 4
    SM = 8
    MD = 16
    LG = 24


@dataclass(frozen=True)
class StepperTheme:
    """Theming table passed to stepper renderers."""

    active_color: str = Colors.PRIMARY
    complete_color: str = Colors.SUCCESS
    error_color: str = Colors.ERROR
    inactive_color: str = Colors.INACTIVE
    text_color: str = Colors.TEXT_PRIMARY
    secondary_text_color: str = Colors.TEXT_SECONDARY
    disabled_text_color: str = Colors.TEXT_DISABLED
    divider_color: str = Colors.DIVIDER
    border_color: str = Colors.BORDER_DEFAULT
    background_color: str = Colors.SURFACE

    icon_shape: IconShape = IconShape.CIRCULAR
    icon_size: int = 24
    borderless: bool = False
    show_divider: bool = True

    def with_options(self, **changes) -> "StepperTheme":
        """Return a copy with the given fields replaced."""
        return replace(self, **changes)

    def icon_radius(self) -> int:
        if self.icon_shape is IconShape.CIRCULAR:
            return self.icon_size // 2
        return 2

    def container_stylesheet(self) -> str:
        border = "none" if self.borderless else f"1px solid {self.border_color}"
        return f"""
            QWidget#stepperRoot {{
                background-color: {self.background_color};
                border: {border};
            }}
        """

    def primary_button_stylesheet(self) -> str:
        return f"""
            QPushButton {{
                background-color: {Colors.BUTTON_PRIMARY};
                color: {Colors.TEXT_ON_PRIMARY};
                border: none;
                border-radius: 4px;
                padding: 8px 16px;
            }}
            QPushButton:hover {{
                background-color: {Colors.BUTTON_PRIMARY_HOVER};
            }}
            QPushButton:disabled {{
                background-color: {Colors.BUTTON_DISABLED};
                color: {self.disabled_text_color};
            }}
        """

    def secondary_button_stylesheet(self) -> str:
        return f"""
            QPushButton {{
                background-color: {Colors.BUTTON_SECONDARY};
                color: {self.text_color};
                border: 1px solid {self.border_color};
                border-radius: 4px;
                padding: 8px 16px;
            }}
            QPushButton:hover {{
                background-color: {Colors.BUTTON_SECONDARY_HOVER};
            }}
            QPushButton:disabled {{
                color: {self.disabled_text_color};
            }}
        """


DEFAULT_THEME = StepperTheme()
