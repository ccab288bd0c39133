"""
gui_entry.py - GUI Entry

Launch PySide6 GUI application
"""

import sys
from typing import Optional

from PySide6.QtWidgets import QApplication
from PySide6.QtCore import Qt

from core import AppConfig, configure_logging

from .gui_mainwindow import MainWindow


def main(config: Optional[AppConfig] = None):
    """GUI main entry"""
    if config is None:
        config = AppConfig()

    configure_logging()

    # High DPI support
    QApplication.setHighDpiScaleFactorRoundingPolicy(
        Qt.HighDpiScaleFactorRoundingPolicy.PassThrough
    )

    app = QApplication(sys.argv)
    app.setApplicationName(config.title)
    app.setApplicationVersion(config.version)

    app.setStyle("Fusion")

    window = MainWindow(config)
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
