from __future__ import annotations

from collections.abc import Callable
from datetime import date, datetime, time, timedelta
from typing import Iterable, Mapping

from PyQt6.QtCore import QDate, Qt, pyqtSignal
from PyQt6.QtGui import QColor, QTextCharFormat
from PyQt6.QtWidgets import (
    QAbstractItemView,
    QCalendarWidget,
    QHBoxLayout,
    QLabel,
    QListWidget,
    QListWidgetItem,
    QPushButton,
    QTableWidget,
    QTableWidgetItem,
    QVBoxLayout,
    QWidget,
)

from ...domain import Event


def _to_qdate(day: date) -> QDate:
    return QDate(day.year, day.month, day.day)


class CalendarPanel(QWidget):
    """Month grid, hourly slots and the event list for the selected day."""

    day_changed = pyqtSignal(object)
    month_changed = pyqtSignal(int, int)
    slot_selected = pyqtSignal(object, object)
    event_selected = pyqtSignal(str)

    def __init__(
        self,
        *,
        hours: range,
        color_for: Callable[[str], str],
        starts_on_monday: bool = False,
    ) -> None:
        super().__init__()
        self.setObjectName("calendarPanel")
        self._hours = hours
        self._color_for = color_for
        self._day = date.today()

        layout = QHBoxLayout(self)
        layout.setContentsMargins(0, 0, 0, 0)
        layout.setSpacing(16)

        left = QVBoxLayout()
        self.date_label = QLabel("")
        self.date_label.setObjectName("sectionTitle")
        left.addWidget(self.date_label)

        self.calendar_widget = QCalendarWidget()
        self.calendar_widget.setGridVisible(True)
        self.calendar_widget.setFirstDayOfWeek(
            Qt.DayOfWeek.Monday if starts_on_monday else Qt.DayOfWeek.Sunday
        )
        self.calendar_widget.selectionChanged.connect(self._emit_day_change)
        self.calendar_widget.currentPageChanged.connect(self.month_changed)
        left.addWidget(self.calendar_widget)

        left.addWidget(QLabel("當日工作"))
        self.event_list = QListWidget()
        self.event_list.itemClicked.connect(self._on_event_clicked)
        left.addWidget(self.event_list, stretch=1)
        layout.addLayout(left, stretch=1)

        right = QVBoxLayout()
        self.slot_table = QTableWidget(len(hours), 1)
        self.slot_table.setHorizontalHeaderLabels(["工作"])
        self.slot_table.setVerticalHeaderLabels([f"{hour:02d}:00" for hour in hours])
        self.slot_table.horizontalHeader().setStretchLastSection(True)
        self.slot_table.setEditTriggers(QAbstractItemView.EditTrigger.NoEditTriggers)
        self.slot_table.setSelectionBehavior(QAbstractItemView.SelectionBehavior.SelectRows)
        self.slot_table.setSelectionMode(QAbstractItemView.SelectionMode.ContiguousSelection)
        self.slot_table.cellDoubleClicked.connect(self._emit_slot_selection)
        right.addWidget(self.slot_table, stretch=1)

        new_event = QPushButton("新增工作")
        new_event.clicked.connect(self._emit_slot_selection)
        right.addWidget(new_event)
        layout.addLayout(right, stretch=1)

        self.set_day(self._day)

    @property
    def selected_day(self) -> date:
        return self._day

    def set_day(self, day: date) -> None:
        self._day = day
        self.date_label.setText(day.strftime("%Y-%m-%d (%a)"))
        qdate = _to_qdate(day)
        if self.calendar_widget.selectedDate() != qdate:
            self.calendar_widget.setSelectedDate(qdate)

    def populate_day(self, events: Iterable[Event]) -> None:
        events = list(events)
        self.event_list.clear()
        for event in events:
            label = f"{event.start.strftime('%H:%M')}–{event.end.strftime('%H:%M')}  {event.title or '(未命名)'}  ·  {event.category}"
            item = QListWidgetItem(label)
            item.setForeground(QColor(self._color_for(event.category)).darker(160))
            item.setBackground(QColor(self._color_for(event.category)).lighter(130))
            item.setData(Qt.ItemDataRole.UserRole, event.id)
            self.event_list.addItem(item)
        self._paint_slots(events)

    def highlight_days(self, marks: Mapping[date, str]) -> None:
        """Mark each day with the color of the category it maps to."""

        # A null date clears every per-day format.
        self.calendar_widget.setDateTextFormat(QDate(), QTextCharFormat())
        for day, category in marks.items():
            fmt = QTextCharFormat()
            fmt.setFontWeight(700)
            fmt.setBackground(QColor(self._color_for(category)).lighter(120))
            self.calendar_widget.setDateTextFormat(_to_qdate(day), fmt)

    def _slot_start(self, row: int) -> datetime:
        return datetime.combine(self._day, time()) + timedelta(hours=self._hours[row])

    def _paint_slots(self, events: list[Event]) -> None:
        for row in range(len(self._hours)):
            slot_start = self._slot_start(row)
            slot_end = slot_start + timedelta(hours=1)
            overlapping = [event for event in events if event.start < slot_end and event.end > slot_start]
            item = QTableWidgetItem(", ".join(event.title or event.category for event in overlapping))
            if overlapping:
                item.setBackground(QColor(self._color_for(overlapping[0].category)).lighter(120))
                item.setToolTip("\n".join(f"{event.category}: {event.title}" for event in overlapping))
            self.slot_table.setItem(row, 0, item)

    def _emit_day_change(self) -> None:
        self._day = self.calendar_widget.selectedDate().toPyDate()
        self.date_label.setText(self._day.strftime("%Y-%m-%d (%a)"))
        self.day_changed.emit(self._day)

    def _emit_slot_selection(self, *_args: object) -> None:
        rows = sorted({index.row() for index in self.slot_table.selectionModel().selectedRows()})
        if not rows:
            current = self.slot_table.currentRow()
            rows = [current if current >= 0 else 0]
        start = self._slot_start(rows[0])
        end = self._slot_start(rows[-1]) + timedelta(hours=1)
        self.slot_selected.emit(start, end)

    def _on_event_clicked(self, item: QListWidgetItem) -> None:
        event_id = item.data(Qt.ItemDataRole.UserRole)
        if event_id:
            self.event_selected.emit(str(event_id))
