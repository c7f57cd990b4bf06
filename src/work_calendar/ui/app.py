from __future__ import annotations

import logging
import sys
from typing import Optional

from PyQt6.QtWidgets import QApplication

from ..bootstrap import configure_logging
from ..config import AppPalette, get_settings
from ..services import AppState
from .main_window import MainWindow
from .styles.theme import apply_palette


def run_gui(*, log_level: Optional[str] = None) -> None:
    configure_logging(level=log_level)
    settings = get_settings()
    app = QApplication.instance() or QApplication(sys.argv)
    app.setApplicationName(settings.ui.app_name)
    app.setOrganizationName(settings.ui.organization)
    apply_palette(app, AppPalette())

    window = MainWindow(state=AppState(), settings=settings)
    window.show()
    logging.getLogger(__name__).info("Work calendar window opened")
    sys.exit(app.exec())
