#!/usr/bin/env python
# -*- coding: utf-8 -*-
"""
MD Stepper - Demo application entry point
"""

import sys

from PyQt5.QtWidgets import QApplication
from PyQt5.QtCore import Qt

from stepper.app.config import Config
from stepper.app.main_window import MainWindow
from stepper.utils.logger import setup_logger


def main():
    """Demo application entry point."""

    # Set Qt attributes BEFORE creating QApplication
    QApplication.setAttribute(Qt.AA_EnableHighDpiScaling, True)  # type: ignore
    QApplication.setAttribute(Qt.AA_UseHighDpiPixmaps, True)  # type: ignore

    # Initialize logging
    logger = setup_logger()

    try:
        app = QApplication(sys.argv)
        app.setApplicationName(Config.APP_NAME)
        app.setApplicationVersion(Config.VERSION)

        logger.info("=" * 80)
        logger.info(f"Starting {Config.APP_NAME} {Config.VERSION}")
        logger.info("=" * 80)

        window = MainWindow()
        window.show()

        sys.exit(app.exec_())

    except Exception as e:
        logger.critical(f"Fatal error: {e}", exc_info=True)
        raise


if __name__ == "__main__":
    main()
