from __future__ import annotations

from PyQt6.QtGui import QColor, QPalette
from PyQt6.QtWidgets import QApplication

from ...config import AppPalette

Role = QPalette.ColorRole


def palette_roles(palette: AppPalette) -> dict[QPalette.ColorRole, str]:
    return {
        Role.Window: palette.background_primary,
        Role.Base: palette.background_primary,
        Role.AlternateBase: palette.background_secondary,
        Role.Text: palette.text_primary,
        Role.WindowText: palette.text_primary,
        Role.PlaceholderText: palette.text_secondary,
        Role.Button: palette.accent_primary,
        Role.ButtonText: palette.background_primary,
        # Selected hour rows and event list entries.
        Role.Highlight: palette.selection,
        Role.HighlightedText: palette.text_primary,
        Role.ToolTipBase: palette.surface,
        Role.ToolTipText: palette.text_primary,
    }


def apply_palette(app: QApplication, palette: AppPalette) -> None:
    qt_palette = QPalette()
    for role, color in palette_roles(palette).items():
        qt_palette.setColor(role, QColor(color))
    app.setPalette(qt_palette)
    app.setStyleSheet(palette.as_stylesheet())
