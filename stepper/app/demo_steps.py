# -*- coding: utf-8 -*-
"""Steps shown by the demo window."""

from typing import List

from PyQt5.QtWidgets import QWidget, QVBoxLayout, QLabel, QLineEdit

from stepper.models.step import Step


def _content(title: str, text: str, with_input: bool = False) -> QWidget:
    widget = QWidget()
    layout = QVBoxLayout(widget)
    layout.setContentsMargins(16, 16, 16, 16)
    layout.setSpacing(12)

    title_label = QLabel(title)
    title_label.setStyleSheet("font-size: 16pt; font-weight: 600;")
    layout.addWidget(title_label)

    text_label = QLabel(text)
    text_label.setWordWrap(True)
    layout.addWidget(text_label)

    if with_input:
        line_edit = QLineEdit()
        line_edit.setPlaceholderText("Enter any value")
        layout.addWidget(line_edit)

    layout.addStretch()
    return widget


def create_demo_steps() -> List[Step]:
    """Create the steps introducing the stepper features."""
    return [
        Step(
            caption="Step 1",
            description="Introduction",
            content=_content(
                "Welcome",
                "Use Next to complete a step. In a linear stepper the steps "
                "have to be completed one after another.",
            ),
        ),
        Step(
            caption="Step 2",
            description="Step Attributes",
            editable=True,
            content=_content(
                "Step Attributes",
                "Steps can be optional (to be able to skip them), editable "
                "(come back after completing them), disabled or cancellable.",
                with_input=True,
            ),
        ),
        Step(
            caption="Step 3",
            description="Optional",
            optional=True,
            cancellable=True,
            content=_content(
                "Optional Step",
                "This step may be skipped. Skipped steps are not completed.",
            ),
        ),
        Step(
            caption="Step 4",
            description="Feedback",
            content=_content(
                "Feedback",
                "A stepper can show a feedback message while a step is processed.",
            ),
        ),
    ]


def create_extra_step(number: int) -> Step:
    return Step(
        caption=f"Extra {number}",
        description="Added at runtime",
        editable=True,
        content=_content(f"Extra step {number}", "This step was added after the current step."),
    )
