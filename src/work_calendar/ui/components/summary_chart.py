from __future__ import annotations

import logging
from typing import Sequence

from matplotlib.backends.backend_qtagg import FigureCanvasQTAgg
from matplotlib.figure import Figure
from matplotlib.patches import Patch
from PyQt6.QtGui import QCursor
from PyQt6.QtWidgets import QToolTip

from ...core import CategorySlice, chart_slices
from .chart_fonts import prefer_fonts

logger = logging.getLogger(__name__)


class SummaryChart(FigureCanvasQTAgg):
    """Pie chart of hours per category, with a legend and hover tooltips."""

    def __init__(self, *, font_families: Sequence[str] = (), parent=None) -> None:
        prefer_fonts(font_families)
        super().__init__(Figure(figsize=(5.5, 3.5), tight_layout=True))
        if parent is not None:
            self.setParent(parent)
        self.axes = self.figure.add_subplot(111)
        self._wedges: list = []
        self._drawn: list[CategorySlice] = []
        self.mpl_connect("motion_notify_event", self._on_hover)

    def show_summary(self, slices: Sequence[CategorySlice]) -> None:
        self.axes.clear()
        drawn = chart_slices(slices)
        if drawn:
            wedges, _texts = self.axes.pie(
                [item.value for item in drawn],
                labels=[item.label for item in drawn],
                colors=[item.color for item in drawn],
                startangle=90,
                counterclock=False,
            )
            self.axes.axis("equal")
        else:
            wedges = []
            self.axes.text(0.5, 0.5, "尚無工作紀錄", ha="center", va="center", transform=self.axes.transAxes)
            self.axes.set_axis_off()

        handles = [Patch(facecolor=item.color, label=item.label) for item in slices]
        self.axes.legend(handles=handles, loc="center left", bbox_to_anchor=(1.0, 0.5), frameon=False)

        self._wedges = list(wedges)
        self._drawn = drawn
        logger.debug("Rendered summary chart with %d wedges", len(drawn))
        self.draw_idle()

    def _on_hover(self, event) -> None:
        if event.inaxes is not self.axes:
            QToolTip.hideText()
            return
        for wedge, item in zip(self._wedges, self._drawn):
            contains, _details = wedge.contains(event)
            if contains:
                QToolTip.showText(QCursor.pos(), f"{item.label}: {item.value:.2f} 小時", self)
                return
        QToolTip.hideText()
