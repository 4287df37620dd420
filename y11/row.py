"""A layout widget that places its children side by side."""

from y11.common import (
    Arrangement,
    AutoSizeHint,
    Dimension,
    DimensionUnit,
    Sizing,
    VerticalAlignment,
)
from y11.composite import Composite
from y11.geometry import Padding, Rect
from y11.layout import Layout
from y11.widget import LayoutVisitor

# Pixel dimensions resolve to the same value whatever total they are given.
_ANY_TOTAL = 2137

_SPACED = frozenset(
    {Arrangement.SPACE_BETWEEN, Arrangement.SPACE_EVENLY, Arrangement.SPACE_AROUND}
)


def _trunc_div(numerator, denominator):
    """Integer division rounding toward zero."""
    quotient = abs(numerator) // abs(denominator)
    return quotient if (numerator >= 0) == (denominator >= 0) else -quotient


def _gaps(gap, count):
    return gap * max(0, count - 1)


def _arrangement_offset(unused, count, arrangement):
    if arrangement is Arrangement.END:
        return unused
    if arrangement is Arrangement.CENTER:
        return unused // 2
    if arrangement is Arrangement.SPACE_BETWEEN:
        return unused // (count - 1) if count > 1 else 0
    if arrangement is Arrangement.SPACE_EVENLY:
        return unused // (count + 1)
    if arrangement is Arrangement.SPACE_AROUND:
        return unused // (count * 2) if count > 0 else 0
    return 0


def _arrangement_shift(offset, index, arrangement):
    if arrangement in (Arrangement.END, Arrangement.CENTER):
        return offset
    if arrangement is Arrangement.SPACE_BETWEEN:
        return offset * index
    if arrangement is Arrangement.SPACE_EVENLY:
        return offset + offset * index
    if arrangement is Arrangement.SPACE_AROUND:
        return offset + offset * index * 2
    return 0


class _RowLayoutVisitor(LayoutVisitor):
    """Places a row's children one after another inside its content box."""

    def __init__(self, row):
        self._row = row
        m = row.layout_metadata
        self._inner = Rect(m.content_x, m.content_y, m.content_width, m.content_height)
        self._current_x = self._inner.x
        self._ignore_gap = row.arrangement in _SPACED
        # Percent and expanding children collapse to their measured width
        # when the row itself grows with its content.
        self._width_grows = row.width.is_fit_content()
        self._free_space = 0

        if not self._width_grows:
            children = list(row)
            used = sum(child.measure_width() for child in children)
            free = self._inner.width - used - _gaps(row.gap, len(children))

            # Space is shared among all percent-sized children, so that two
            # children of 100% each get half of what is left.
            total_percent = 0.0
            for child in children:
                if child.width.unit is DimensionUnit.PERCENT:
                    total_percent += child.width.value
                elif child.vertical_sizing() is Sizing.EXPAND:
                    total_percent += 1.0
            if total_percent > 1.0:
                free = int(free / total_percent)
            self._free_space = free

    def visit(self, widget, metadata):
        inner = self._inner
        row = self._row
        padding = widget.padding

        v_sizing = widget.vertical_sizing()
        if v_sizing is Sizing.FIT_CONTENT:
            height = widget.measure_height()
        elif v_sizing is Sizing.EXPAND:
            height = inner.height
        else:
            height = widget.height.pixel_value(inner.height)

        if height > inner.height:
            metadata.overflow = True

        metadata.y = inner.y
        metadata.height = max(0, height)
        metadata.content_height = max(0, metadata.height - padding.total_vertical())

        if row.alignment is VerticalAlignment.BOTTOM:
            metadata.y = inner.y + inner.height - metadata.height
        elif row.alignment is VerticalAlignment.CENTER:
            metadata.y = inner.y + _trunc_div(inner.height - metadata.height, 2)
        metadata.content_y = metadata.y + padding.top

        width = widget.measure_width()
        if not self._width_grows:
            h_sizing = widget.horizontal_sizing()
            if h_sizing is Sizing.PERCENT:
                width = widget.width.pixel_value(self._free_space)
            elif h_sizing is Sizing.EXPAND:
                width = Dimension.percent(1.0).pixel_value(self._free_space)

        metadata.x = self._current_x
        metadata.content_x = metadata.x + padding.left
        metadata.width = max(0, width)
        metadata.content_width = max(0, metadata.width - padding.total_horizontal())

        self._current_x += metadata.width + (0 if self._ignore_gap else row.gap)

    def unused_space(self):
        space = self._inner.width - self._current_x
        if not self._ignore_gap:
            # The last child added a trailing gap.
            space += self._row.gap
        return max(0, space)


class _RowArrangementVisitor(LayoutVisitor):
    """Shifts already placed children right according to an arrangement."""

    def __init__(self, unused, count, arrangement):
        self._arrangement = arrangement
        self._offset = _arrangement_offset(unused, count, arrangement)
        self._index = 0

    def visit(self, widget, metadata):
        shift = _arrangement_shift(self._offset, self._index, self._arrangement)
        metadata.x += shift
        metadata.content_x += shift
        self._index += 1


class Row(Layout, Composite):
    """Places children left to right, with a gap, alignment and arrangement."""

    def __init__(
        self,
        width=Dimension(),
        height=Dimension(),
        *,
        gap=0,
        alignment=VerticalAlignment.TOP,
        arrangement=Arrangement.START,
        padding=Padding(),
        widget_id=0,
    ):
        super().__init__(width, height, padding=padding, widget_id=widget_id)
        self.gap = gap
        self.alignment = alignment
        self.arrangement = arrangement

    def width_auto_size_hint(self):
        return AutoSizeHint.EXPAND

    def measure_width(self):
        width = 0
        sizing = self.horizontal_sizing()
        if sizing is Sizing.PIXEL:
            width = max(0, self.width.pixel_value(_ANY_TOTAL))
        elif sizing is Sizing.FIT_CONTENT:
            children = list(self)
            return (
                self.padding.total_horizontal()
                + _gaps(self.gap, len(children))
                + sum(child.measure_width() for child in children)
            )
        return max(self.padding.total_horizontal(), width)

    def measure_height(self):
        height = 0
        if self.height.unit is DimensionUnit.PIXEL:
            height = max(0, self.height.pixel_value(_ANY_TOTAL))
        elif self.vertical_sizing() is Sizing.FIT_CONTENT:
            tallest = max((child.measure_height() for child in self), default=0)
            return self.padding.total_vertical() + tallest
        return max(self.padding.total_vertical(), height)

    def accept_renderer(self, visitor):
        visitor.visit_row(self, self.layout_metadata)

    def apply_layout(self):
        visitor = _RowLayoutVisitor(self)
        for child in self:
            child.accept_layout(visitor)

        unused = visitor.unused_space()
        if unused <= 0:
            return

        arranger = _RowArrangementVisitor(unused, len(self), self.arrangement)
        for child in self:
            child.accept_layout(arranger)

    def set_gap(self, gap):
        self.gap = gap
        return self

    def set_alignment(self, alignment):
        self.alignment = alignment
        return self

    def set_arrangement(self, arrangement):
        self.arrangement = arrangement
        return self