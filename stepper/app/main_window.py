# -*- coding: utf-8 -*-
"""
Demo window: a properties panel on the left, the configured stepper on the right.
"""

from typing import Optional

from PyQt5.QtWidgets import (
    QMainWindow, QWidget, QHBoxLayout, QVBoxLayout, QFormLayout,
    QComboBox, QCheckBox, QSlider, QPushButton, QLabel, QFrame
)
from PyQt5.QtCore import Qt, pyqtSignal

from .config import Config
from .demo_steps import create_demo_steps, create_extra_step
from stepper.services.exceptions import StepperException
from stepper.services.step_iterator import StepIterator
from stepper.ui.design_system import DEFAULT_THEME, IconShape
from stepper.ui.error_handler import ErrorHandler
from stepper.ui.stepper import (
    AbstractStepper,
    HorizontalStepper,
    LabelIconStrategy,
    LabelProvider,
    ListStepper,
    VerticalStepper,
)
from stepper.utils.logger import get_logger

logger = get_logger(__name__)

STEPPER_TYPES = ("Horizontal", "Vertical", "List")
ICON_SHAPES = {"Circular": IconShape.CIRCULAR, "Square": IconShape.SQUARE}
ICON_STRATEGIES = {"Default": LabelIconStrategy.DEFAULT, "Numbers only": LabelIconStrategy.NUMBERS_ONLY}


class MainWindow(QMainWindow):
    """Demo window showing one stepper and the properties it was built with."""

    stepper_created = pyqtSignal(object)  # AbstractStepper

    def __init__(self, parent=None):
        super().__init__(parent)
        self.stepper: Optional[AbstractStepper] = None
        self._extra_steps = 0

        self._setup_window()
        self._create_widgets()
        self._setup_layout()
        self._connect_signals()

        self.create_stepper()

    def _setup_window(self):
        """Configure window properties."""
        self.setWindowTitle(f"{Config.APP_TITLE} {Config.VERSION}")
        self.resize(1200, 720)

    def _create_widgets(self):
        """Create the properties panel widgets."""
        self.stepper_type_box = QComboBox()
        self.stepper_type_box.addItems(list(STEPPER_TYPES))

        self.icon_shape_box = QComboBox()
        self.icon_shape_box.addItems(list(ICON_SHAPES))

        self.icon_strategy_box = QComboBox()
        self.icon_strategy_box.addItems(list(ICON_STRATEGIES))

        self.divider_ratio_slider = QSlider(Qt.Horizontal)
        self.divider_ratio_slider.setRange(0, 500)
        self.divider_ratio_slider.setValue(int(Config.DIVIDER_EXPAND_RATIO * 100))

        self.linear_box = QCheckBox("Linear stepper")
        self.linear_box.setChecked(Config.DEFAULT_LINEAR)
        self.borderless_box = QCheckBox("Borderless")
        self.no_divider_box = QCheckBox("No divider")
        self.read_only_box = QCheckBox("Read-only")
        self.locked_box = QCheckBox("Locked")

        self.btn_add_step = QPushButton("Add step after current")
        self.btn_remove_step = QPushButton("Remove current step")
        self.btn_feedback = QPushButton("Show feedback message")
        self.btn_hide_feedback = QPushButton("Hide feedback message")

        self.hints_label = QLabel("Properties marked with * recreate the stepper.")
        self.hints_label.setWordWrap(True)

    def _setup_layout(self):
        central = QWidget()
        main_layout = QHBoxLayout(central)
        main_layout.setContentsMargins(0, 0, 0, 0)
        main_layout.setSpacing(0)

        properties = QWidget()
        properties.setFixedWidth(300)
        form = QFormLayout(properties)
        form.addRow("Stepper type *", self.stepper_type_box)
        form.addRow("Icon style *", self.icon_shape_box)
        form.addRow("Label icons", self.icon_strategy_box)
        form.addRow("Divider ratio", self.divider_ratio_slider)
        form.addRow(self.linear_box)
        form.addRow(self.borderless_box)
        form.addRow(self.no_divider_box)
        form.addRow(self.read_only_box)
        form.addRow(self.locked_box)
        form.addRow(self.btn_add_step)
        form.addRow(self.btn_remove_step)
        form.addRow(self.btn_feedback)
        form.addRow(self.btn_hide_feedback)
        form.addRow(self.hints_label)
        main_layout.addWidget(properties)

        separator = QFrame()
        separator.setFrameShape(QFrame.VLine)
        main_layout.addWidget(separator)

        self.stepper_container = QVBoxLayout()
        main_layout.addLayout(self.stepper_container, 1)

        self.setCentralWidget(central)

    def _connect_signals(self):
        for box in (self.stepper_type_box, self.icon_shape_box):
            box.currentIndexChanged.connect(lambda _index: self.create_stepper())
        for box in (self.linear_box, self.borderless_box, self.no_divider_box):
            box.toggled.connect(lambda _checked: self.create_stepper())

        self.icon_strategy_box.currentIndexChanged.connect(lambda _index: self._update_icon_strategy())
        self.divider_ratio_slider.valueChanged.connect(self._update_divider_ratio)
        self.read_only_box.toggled.connect(self._update_read_only)
        self.locked_box.toggled.connect(self._update_locked)

        self.btn_add_step.clicked.connect(self._add_step)
        self.btn_remove_step.clicked.connect(self._remove_step)
        self.btn_feedback.clicked.connect(
            lambda: self.stepper.show_feedback_message("Processing step, please wait...")
        )
        self.btn_hide_feedback.clicked.connect(lambda: self.stepper.hide_feedback_message())

    # =========================================================================
    # Stepper creation
    # =========================================================================

    def create_stepper(self):
        """Build a new stepper from the current properties."""
        if self.stepper is not None:
            self.stepper_container.removeWidget(self.stepper)
            self.stepper.deleteLater()

        stepper_type = self.stepper_type_box.currentText()
        theme = DEFAULT_THEME.with_options(
            icon_shape=ICON_SHAPES[self.icon_shape_box.currentText()],
            borderless=self.borderless_box.isChecked(),
            show_divider=not self.no_divider_box.isChecked(),
        )

        step_iterator = StepIterator(create_demo_steps(), linear=self.linear_box.isChecked())
        label_provider = LabelProvider(
            step_iterator,
            icon_strategy=ICON_STRATEGIES[self.icon_strategy_box.currentText()],
            theme=theme,
        )

        if stepper_type == "Horizontal":
            stepper = HorizontalStepper(
                step_iterator, label_provider,
                divider_expand_ratio=self.divider_ratio_slider.value() / 100,
            )
        elif stepper_type == "Vertical":
            stepper = VerticalStepper(step_iterator, label_provider)
        elif stepper_type == "List":
            stepper = ListStepper(step_iterator, label_provider)
        else:
            raise ValueError(f"Unsupported stepper type: {stepper_type}")

        stepper.stepper_completed.connect(self._on_stepper_completed)
        stepper.step_cancelled.connect(self._on_step_cancelled)

        self.divider_ratio_slider.setEnabled(isinstance(stepper, HorizontalStepper))
        self.no_divider_box.setEnabled(not isinstance(stepper, VerticalStepper))

        self.stepper = stepper
        self.stepper_container.addWidget(stepper)
        stepper.start()
        stepper.set_read_only(self.read_only_box.isChecked())
        if self.locked_box.isChecked():
            stepper.lock_stepper()

        logger.info(f"Created {stepper_type} stepper (linear={step_iterator.is_linear()})")
        self.stepper_created.emit(stepper)

    # =========================================================================
    # Property handlers
    # =========================================================================

    def _update_icon_strategy(self):
        self.stepper.label_provider.set_icon_strategy(
            ICON_STRATEGIES[self.icon_strategy_box.currentText()]
        )

    def _update_divider_ratio(self, value: int):
        if isinstance(self.stepper, HorizontalStepper):
            self.stepper.set_divider_expand_ratio(value / 100)

    def _update_read_only(self, read_only: bool):
        self.stepper.set_read_only(read_only)

    def _update_locked(self, locked: bool):
        if locked:
            self.stepper.lock_stepper()
        else:
            self.stepper.unlock_stepper()

    def _add_step(self):
        self._extra_steps += 1
        self.stepper.step_iterator.add(create_extra_step(self._extra_steps))

    def _remove_step(self):
        try:
            self.stepper.step_iterator.remove()
        except StepperException as e:
            ErrorHandler.handle(e, self.stepper, context="remove")

    def _on_stepper_completed(self, stepper: AbstractStepper):
        self.statusBar().showMessage("Congratulations, you finished the stepper.", 5000)

    def _on_step_cancelled(self, step):
        self.statusBar().showMessage(f"{step.caption} cancelled.", 5000)
