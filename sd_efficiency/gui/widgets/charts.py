"""Chart widgets painted directly with QPainter.

Both charts take plain model objects and redraw themselves on
``set_data``. Colours come from the active theme, except the series
colours which are fixed so good and bad keep their meaning.
"""

from PyQt6.QtCore import QPointF, QRectF, Qt
from PyQt6.QtGui import QColor, QFont, QPainter, QPainterPath, QPen
from PyQt6.QtWidgets import QSizePolicy, QWidget

from sd_efficiency.gui.resources.styles import FONT_SIZES, SPACING
from sd_efficiency.gui.resources.styles.theme import Theme
from sd_efficiency.models import CompositionSlice, TrendPoint
from sd_efficiency.utils import format_hours, format_percent, format_time

SLICE_LABELS = {"good": "Useful (Good)", "bad": "Wasted (Bad)"}

# Trend values are percentages, the axis is fixed to the full range
TREND_MIN = 0.0
TREND_MAX = 100.0


def slice_angles(slices: list[CompositionSlice]) -> list[tuple[float, float]]:
    """Start and span angles, in degrees, for each slice of a donut.

    Slices with a non-positive value get a zero span. An all-zero input
    yields all-zero spans.
    """
    total = sum(max(part.value, 0.0) for part in slices)
    angles = []
    start = 90.0
    for part in slices:
        span = 0.0 if total <= 0 else -360.0 * max(part.value, 0.0) / total
        angles.append((start, span))
        start += span
    return angles


def trend_y(efficiency: float, top: float, height: float) -> float:
    """Map an efficiency percentage to a pixel row, clamped to the axis range."""
    clamped = min(max(efficiency, TREND_MIN), TREND_MAX)
    return top + height * (1 - (clamped - TREND_MIN) / (TREND_MAX - TREND_MIN))


class CompositionChart(QWidget):
    """Donut chart of useful versus wasted hours with a legend."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._slices: list[CompositionSlice] = []
        self.setMinimumHeight(220)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setAccessibleName("Data health ratio")

    def set_data(self, slices: list[CompositionSlice]) -> None:
        self._slices = list(slices)
        self.update()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        colors = Theme.get_colors()

        legend_height = (FONT_SIZES.caption + SPACING.xs) * max(len(self._slices), 1)
        side = min(self.width(), self.height() - legend_height) - 2 * SPACING.md
        if side <= 0:
            painter.end()
            return

        ring = max(side * 0.18, 8)
        rect = QRectF(
            (self.width() - side) / 2 + ring / 2,
            SPACING.md + ring / 2,
            side - ring,
            side - ring,
        )

        pen = QPen(QColor(colors["chart_grid"]), ring)
        pen.setCapStyle(Qt.PenCapStyle.FlatCap)
        painter.setPen(pen)
        painter.drawArc(rect, 0, 360 * 16)

        for part, (start, span) in zip(self._slices, slice_angles(self._slices)):
            if span == 0:
                continue
            pen.setColor(QColor(Theme.CHART_COLORS.get(part.label, colors["chart_axis"])))
            painter.setPen(pen)
            painter.drawArc(rect, int(start * 16), int(span * 16))

        font = QFont()
        font.setPixelSize(FONT_SIZES.caption)
        painter.setFont(font)
        y = SPACING.md + side + SPACING.xs
        for part in self._slices:
            painter.setPen(Qt.PenStyle.NoPen)
            painter.setBrush(
                QColor(Theme.CHART_COLORS.get(part.label, colors["chart_axis"]))
            )
            painter.drawEllipse(QRectF(SPACING.md, y + 2, 8, 8))
            painter.setPen(QColor(colors["text_secondary"]))
            painter.drawText(
                QPointF(SPACING.md + SPACING.sm, y + FONT_SIZES.caption - 2),
                f"{SLICE_LABELS.get(part.label, part.label)}  {format_hours(part.value)}",
            )
            y += FONT_SIZES.caption + SPACING.xs

        painter.end()


class TrendChart(QWidget):
    """Line chart of per-entry efficiency, oldest entry on the left."""

    def __init__(self, parent=None):
        super().__init__(parent)
        self._points: list[TrendPoint] = []
        self.setMinimumHeight(220)
        self.setSizePolicy(QSizePolicy.Policy.Expanding, QSizePolicy.Policy.Expanding)
        self.setAccessibleName("Efficiency trend")

    def set_data(self, points: list[TrendPoint]) -> None:
        self._points = list(points)
        latest = self._points[-1].efficiency if self._points else None
        self.setToolTip(f"Latest: {format_percent(latest)}" if latest is not None else "")
        self.update()

    def paintEvent(self, event) -> None:
        painter = QPainter(self)
        painter.setRenderHint(QPainter.RenderHint.Antialiasing)
        colors = Theme.get_colors()

        font = QFont()
        font.setPixelSize(FONT_SIZES.small)
        painter.setFont(font)

        left = SPACING.xl + SPACING.xs
        top = SPACING.md
        width = self.width() - left - SPACING.md
        height = self.height() - top - SPACING.xl
        if width <= 0 or height <= 0:
            painter.end()
            return

        # Grid and y-axis labels every 25 %
        for tick in range(0, 101, 25):
            y = trend_y(tick, top, height)
            painter.setPen(QPen(QColor(colors["chart_grid"]), 1, Qt.PenStyle.DashLine))
            painter.drawLine(QPointF(left, y), QPointF(left + width, y))
            painter.setPen(QColor(colors["chart_axis"]))
            painter.drawText(QPointF(SPACING.xxs, y + 4), f"{tick}%")

        if not self._points:
            painter.end()
            return

        step = width / (len(self._points) - 1) if len(self._points) > 1 else 0
        positions = [
            QPointF(
                left + (index * step if step else width / 2),
                trend_y(point.efficiency, top, height),
            )
            for index, point in enumerate(self._points)
        ]

        path = QPainterPath(positions[0])
        for position in positions[1:]:
            path.lineTo(position)
        painter.setPen(QPen(QColor(Theme.CHART_COLORS["trend"]), 3))
        painter.setBrush(Qt.BrushStyle.NoBrush)
        painter.drawPath(path)

        painter.setBrush(QColor(Theme.CHART_COLORS["trend"]))
        for point, position in zip(self._points, positions):
            painter.setPen(Qt.PenStyle.NoPen)
            painter.drawEllipse(position, 4, 4)
            painter.setPen(QColor(colors["chart_axis"]))
            painter.drawText(
                QPointF(position.x() - 14, top + height + SPACING.md),
                format_time(point.timestamp),
            )

        painter.end()
