from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class AppPalette:
    background_primary: str = "#ffffff"
    background_secondary: str = "#f9fafb"
    surface: str = "#ffffff"
    accent_primary: str = "#111827"
    accent_danger: str = "#dc2626"
    selection: str = "#c7c5ef"
    text_primary: str = "#111827"
    text_secondary: str = "#6b7280"
    border_subtle: str = "#e5e7eb"
    border_strong: str = "#d1d5db"

    def as_stylesheet(self) -> str:
        """Global stylesheet for the calendar window."""

        return f"""
        QWidget {{
            background-color: {self.background_primary};
            color: {self.text_primary};
            font-size: 14px;
        }}
        QPushButton {{
            background-color: {self.accent_primary};
            color: {self.background_primary};
            border: none;
            padding: 8px 14px;
            border-radius: 6px;
            font-weight: 600;
        }}
        QPushButton:disabled {{
            background-color: {self.border_subtle};
            color: {self.text_secondary};
        }}
        QPushButton#dangerButton {{
            background-color: {self.accent_danger};
        }}
        QLineEdit, QComboBox {{
            background-color: {self.background_primary};
            border: 1px solid {self.border_strong};
            padding: 6px 8px;
        }}
        QLineEdit[invalid="true"] {{
            border: 1px solid {self.accent_danger};
        }}
        QListView, QTableView {{
            background-color: {self.background_secondary};
            border: 1px solid {self.border_subtle};
            selection-background-color: {self.selection};
            selection-color: {self.text_primary};
        }}
        QLabel#title {{
            font-size: 28px;
            font-weight: 700;
        }}
        QLabel#quote {{
            font-size: 12px;
            font-style: italic;
            color: {self.text_secondary};
        }}
        QLabel#sectionTitle {{
            font-size: 20px;
            font-weight: 600;
        }}
        QFrame#card {{
            background-color: {self.surface};
            border: 1px solid {self.border_subtle};
            border-radius: 12px;
        }}
        QDialog#eventDialog {{
            border-radius: 12px;
        }}
        """
