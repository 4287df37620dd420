"""A layout widget that stacks its children vertically."""

from y11.common import (
    Arrangement,
    AutoSizeHint,
    Dimension,
    DimensionUnit,
    HorizontalAlignment,
    Sizing,
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


class _ColumnLayoutVisitor(LayoutVisitor):
    """Places a column's children one below another inside its content box."""

    def __init__(self, column):
        self._column = column
        m = column.layout_metadata
        self._inner = Rect(m.content_x, m.content_y, m.content_width, m.content_height)
        self._current_y = self._inner.y
        self._ignore_gap = column.arrangement in _SPACED
        # Percent and expanding children collapse to their measured height
        # when the column itself grows with its content.
        self._height_grows = column.height.is_auto() or column.height.is_fit_content()
        self._free_space = 0

        if not self._height_grows:
            children = list(column)
            used = sum(child.measure_height() for child in children)
            free = self._inner.height - used - _gaps(column.gap, len(children))

            # Space is shared among all percent-sized children, so that two
            # children of 100% each get half of what is left.
            total_percent = 0.0
            for child in children:
                if child.height.unit is DimensionUnit.PERCENT:
                    total_percent += child.height.value
                elif child.vertical_sizing() is Sizing.EXPAND:
                    total_percent += 1.0
            if total_percent > 1.0:
                free = int(free / total_percent)
            self._free_space = free

    def visit(self, widget, metadata):
        inner = self._inner
        column = self._column
        padding = widget.padding

        h_sizing = widget.horizontal_sizing()
        if h_sizing is Sizing.FIT_CONTENT:
            width = widget.measure_width()
        elif h_sizing is Sizing.EXPAND:
            width = inner.width
        else:
            width = widget.width.pixel_value(inner.width)

        if width > inner.width:
            metadata.overflow = True

        metadata.x = inner.x
        metadata.width = max(0, width)
        metadata.content_width = max(0, metadata.width - padding.total_horizontal())

        if column.alignment is HorizontalAlignment.RIGHT:
            metadata.x = inner.x + inner.width - metadata.width
        elif column.alignment is HorizontalAlignment.CENTER:
            metadata.x = inner.x + _trunc_div(inner.width - metadata.width, 2)
        metadata.content_x = metadata.x + padding.left

        height = widget.measure_height()
        if not self._height_grows:
            v_sizing = widget.vertical_sizing()
            if v_sizing is Sizing.PERCENT:
                height = widget.height.pixel_value(self._free_space)
            elif v_sizing is Sizing.EXPAND:
                height = Dimension.percent(1.0).pixel_value(self._free_space)

        metadata.y = self._current_y
        metadata.content_y = metadata.y + padding.top
        metadata.height = max(0, height)
        metadata.content_height = max(0, metadata.height - padding.total_vertical())

        self._current_y += metadata.height + (0 if self._ignore_gap else column.gap)

    def unused_space(self):
        space = self._inner.height - self._current_y
        if not self._ignore_gap:
            # The last child added a trailing gap.
            space += self._column.gap
        return max(0, space)


class _ColumnArrangementVisitor(LayoutVisitor):
    """Shifts already placed children down according to an arrangement."""

    def __init__(self, unused, count, arrangement):
        self._arrangement = arrangement
        self._offset = _arrangement_offset(unused, count, arrangement)
        self._index = 0

    def visit(self, widget, metadata):
        shift = _arrangement_shift(self._offset, self._index, self._arrangement)
        metadata.y += shift
        metadata.content_y += shift
        self._index += 1


class Column(Layout, Composite):
    """Stacks children top to bottom, with a gap, alignment and arrangement."""

    def __init__(
        self,
        width=Dimension(),
        height=Dimension(),
        *,
        gap=0,
        alignment=HorizontalAlignment.LEFT,
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
        if self.width.unit is DimensionUnit.PIXEL:
            width = max(0, self.width.pixel_value(_ANY_TOTAL))
        elif self.width.unit is DimensionUnit.FIT_CONTENT:
            widest = max((child.measure_width() for child in self), default=0)
            return self.padding.total_horizontal() + widest
        return max(self.padding.total_horizontal(), width)

    def measure_height(self):
        height = 0
        sizing = self.vertical_sizing()
        if sizing is Sizing.PIXEL:
            height = max(0, self.height.pixel_value(_ANY_TOTAL))
        elif sizing is Sizing.FIT_CONTENT:
            children = list(self)
            return (
                self.padding.total_vertical()
                + _gaps(self.gap, len(children))
                + sum(child.measure_height() for child in children)
            )
        return max(height, self.padding.total_vertical())

    def accept_renderer(self, visitor):
        visitor.visit_column(self, self.layout_metadata)

    def apply_layout(self):
        visitor = _ColumnLayoutVisitor(self)
        for child in self:
            child.accept_layout(visitor)

        unused = visitor.unused_space()
        if unused <= 0:
            return

        arranger = _ColumnArrangementVisitor(unused, len(self), self.arrangement)
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