from __future__ import annotations

from typing import Callable, Iterable

from PyQt6.QtWidgets import (
    QComboBox,
    QDialog,
    QFormLayout,
    QHBoxLayout,
    QLabel,
    QLineEdit,
    QMessageBox,
    QPushButton,
    QVBoxLayout,
)

from ...core import EditorSession
from ...domain import Category, DateTimeFormatError


class EventDialog(QDialog):
    """Modal form bound to an open :class:`EditorSession`."""

    SAVE = 1
    DELETE = 2

    def __init__(self, *, session: EditorSession, categories: Iterable[Category], parent=None) -> None:
        super().__init__(parent)
        self.session = session
        self.setObjectName("eventDialog")
        self.setModal(True)
        self.setMinimumWidth(400)
        heading = "編輯工作" if session.can_delete else "新增工作"
        self.setWindowTitle(heading)

        layout = QVBoxLayout(self)
        title = QLabel(heading)
        title.setObjectName("sectionTitle")
        layout.addWidget(title)

        form = QFormLayout()
        draft = session.draft

        self.title_input = QLineEdit(draft.title)
        self.title_input.setPlaceholderText("工作內容")
        self.title_input.textEdited.connect(session.set_title)
        form.addRow(self.title_input)

        self.category_box = QComboBox()
        for category in categories:
            self.category_box.addItem(category.label, category.name)
        index = self.category_box.findData(draft.category)
        if index >= 0:
            self.category_box.setCurrentIndex(index)
        self.category_box.currentIndexChanged.connect(self._on_category_changed)
        form.addRow(self.category_box)

        self.start_input = QLineEdit(session.start_text)
        self.start_input.setPlaceholderText("YYYY-MM-DDTHH:mm")
        self.start_input.textEdited.connect(self._on_start_edited)
        form.addRow("開始時間", self.start_input)

        self.end_input = QLineEdit(session.end_text)
        self.end_input.setPlaceholderText("YYYY-MM-DDTHH:mm")
        self.end_input.textEdited.connect(self._on_end_edited)
        form.addRow("結束時間", self.end_input)
        layout.addLayout(form)

        buttons = QHBoxLayout()
        save_button = QPushButton("儲存")
        save_button.setDefault(True)
        save_button.clicked.connect(self._on_save)
        buttons.addWidget(save_button)
        buttons.addStretch(1)
        if session.can_delete:
            delete_button = QPushButton("刪除")
            delete_button.setObjectName("dangerButton")
            delete_button.clicked.connect(lambda: self.done(self.DELETE))
            buttons.addWidget(delete_button)
        layout.addLayout(buttons)

    def _on_category_changed(self, _index: int) -> None:
        name = self.category_box.currentData()
        if name is not None:
            self.session.set_category(str(name))

    def _on_start_edited(self, text: str) -> None:
        self._apply_timestamp(self.start_input, self.session.set_start_text, text)

    def _on_end_edited(self, text: str) -> None:
        self._apply_timestamp(self.end_input, self.session.set_end_text, text)

    @staticmethod
    def _apply_timestamp(widget: QLineEdit, setter: Callable[[str], None], text: str) -> None:
        try:
            setter(text)
        except DateTimeFormatError:
            valid = False
        else:
            valid = True
        widget.setProperty("invalid", not valid)
        widget.style().unpolish(widget)
        widget.style().polish(widget)

    def _invalid_inputs(self) -> list[str]:
        labels = {"開始時間": self.start_input, "結束時間": self.end_input}
        return [label for label, widget in labels.items() if widget.property("invalid")]

    def _on_save(self) -> None:
        invalid = self._invalid_inputs()
        if invalid:
            QMessageBox.warning(self, "時間格式錯誤", f"{'、'.join(invalid)}需為 YYYY-MM-DDTHH:mm 格式。")
            return
        self.done(self.SAVE)
