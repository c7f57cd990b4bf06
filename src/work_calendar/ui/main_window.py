from __future__ import annotations

import logging
from datetime import date, datetime, timedelta
from typing import Optional

from PyQt6.QtWidgets import (
    QFrame,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QMessageBox,
    QPushButton,
    QScrollArea,
    QVBoxLayout,
    QWidget,
)

from ..config.settings import AppSettings
from ..domain import WorkCalendarError, pick_quote
from ..services import AppState
from .components.calendar_panel import CalendarPanel
from .components.event_dialog import EventDialog
from .components.summary_chart import SummaryChart

logger = logging.getLogger(__name__)


class MainWindow(QMainWindow):
    def __init__(self, *, state: Optional[AppState] = None, settings: AppSettings, quote: Optional[str] = None) -> None:
        super().__init__()
        self.state = state or AppState()
        self.settings = settings
        self.quote = quote or pick_quote()

        self.setWindowTitle(settings.ui.app_name)
        self.resize(1200, 900)

        body = QWidget()
        layout = QVBoxLayout(body)
        layout.setContentsMargins(24, 24, 24, 24)
        layout.setSpacing(12)

        title = QLabel(settings.ui.app_name)
        title.setObjectName("title")
        layout.addWidget(title)

        quote_label = QLabel(self.quote)
        quote_label.setObjectName("quote")
        layout.addWidget(quote_label)

        self.calendar_panel = CalendarPanel(
            hours=settings.schedule.hours,
            color_for=self.state.categories.color_for,
            starts_on_monday=settings.ui.starts_on_monday,
        )
        self.calendar_panel.setMinimumHeight(500)
        layout.addWidget(self.calendar_panel)

        card = QFrame()
        card.setObjectName("card")
        card_layout = QVBoxLayout(card)
        header = QHBoxLayout()
        chart_title = QLabel("📊 每月工作時間佔比")
        chart_title.setObjectName("sectionTitle")
        header.addWidget(chart_title)
        header.addStretch(1)
        clear_button = QPushButton("清除全部")
        clear_button.clicked.connect(self.clear_events)
        header.addWidget(clear_button)
        card_layout.addLayout(header)

        self.chart = SummaryChart(font_families=settings.chart.font_families)
        self.chart.setMinimumHeight(300)
        card_layout.addWidget(self.chart)
        self.total_label = QLabel("")
        card_layout.addWidget(self.total_label)
        layout.addWidget(card)

        scroll = QScrollArea()
        scroll.setWidgetResizable(True)
        scroll.setWidget(body)
        self.setCentralWidget(scroll)

        self.calendar_panel.day_changed.connect(self.load_day)
        self.calendar_panel.month_changed.connect(self._highlight_month)
        self.calendar_panel.slot_selected.connect(self.open_new_event)
        self.calendar_panel.event_selected.connect(self.open_existing_event)

        self.refresh()

    # ------------------------------------------------------------------ rendering

    def refresh(self) -> None:
        """Redraw the calendar surface and recompute the summary from the store."""

        self.load_day(self.calendar_panel.selected_day)
        page = self.calendar_panel.calendar_widget
        self._highlight_month(page.yearShown(), page.monthShown())
        slices = self.state.calendar.summary()
        self.chart.show_summary(slices)
        self.total_label.setText(f"總計 {self.state.calendar.total_hours():.2f} 小時")

    def load_day(self, day: date) -> None:
        self.calendar_panel.set_day(day)
        self.calendar_panel.populate_day(self.state.calendar.list_for_day(day))

    def _highlight_month(self, year: int, month: int) -> None:
        first = date(year, month, 1)
        following = date(year + 1, 1, 1) if month == 12 else date(year, month + 1, 1)
        last = following - timedelta(days=1)
        self.calendar_panel.highlight_days(self.state.calendar.day_marks(first, last))

    # ------------------------------------------------------------------ gestures

    def open_new_event(self, start: datetime, end: datetime) -> None:
        self.state.editor.open_for_slot(start, end)
        self._run_editor()

    def open_existing_event(self, event_id: str) -> None:
        event = self.state.calendar.fetch(event_id)
        if event is None:
            logger.warning("Selected event %s is no longer in the store", event_id)
            self.refresh()
            return
        self.state.editor.open_for_event(event)
        self._run_editor()

    def _run_editor(self) -> None:
        session = self.state.editor
        while session.dialog_open:
            dialog = EventDialog(session=session, categories=self.state.categories.list_categories(), parent=self)
            result = dialog.exec()
            try:
                if result == EventDialog.SAVE:
                    self.state.calendar.save_draft(session)
                elif result == EventDialog.DELETE:
                    self.state.calendar.delete_draft(session)
                else:
                    session.dismiss()
            except WorkCalendarError as exc:
                QMessageBox.warning(self, "無法儲存", str(exc))
        self.refresh()

    def clear_events(self) -> None:
        if not len(self.state.context.store):
            return
        answer = QMessageBox.question(self, "清除全部", "確定要刪除所有工作嗎？")
        if answer != QMessageBox.StandardButton.Yes:
            return
        self.state.calendar.clear()
        self.refresh()
