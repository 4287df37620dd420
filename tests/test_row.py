import pytest

from y11.common import Arrangement, AutoSizeHint, Dimension, VerticalAlignment, pc, px
from y11.geometry import Padding, Rect
from y11.root import Root
from y11.row import Row
from y11.shapes import Rectangle

ROW_WIDTH = 300
ROW_HEIGHT = 100


def lay_out(row, width=ROW_WIDTH, height=ROW_HEIGHT):
    root = Root()
    root.add_widget(row)
    root.set_layout_rect(Rect(0, 0, width, height))
    root.apply_layout()
    return row


def make_children(row):
    return [
        row.add_widget(Rectangle(px(20), px(30))),
        row.add_widget(Rectangle(px(40), px(50))),
        row.add_widget(Rectangle(px(10), px(10))),
    ]


def right_edge(widget):
    return widget.pos().x + widget.size().width


def test_start_places_children_with_gap():
    row = Row(height=px(ROW_HEIGHT)).set_gap(10)
    kids = make_children(row)
    lay_out(row)
    assert kids[0].pos().x == 0
    for a, b in zip(kids, kids[1:]):
        assert b.pos().x == right_edge(a) + 10


def test_children_keep_their_pixel_widths():
    row = Row(height=px(ROW_HEIGHT))
    kids = make_children(row)
    lay_out(row)
    assert [k.size().width for k in kids] == [20, 40, 10]
    assert [k.size().height for k in kids] == [30, 50, 10]


def test_end_arrangement_touches_right_edge():
    row = Row(height=px(ROW_HEIGHT)).set_arrangement(Arrangement.END).set_gap(5)
    kids = make_children(row)
    lay_out(row)
    assert right_edge(kids[-1]) == ROW_WIDTH


def test_center_arrangement_balances_margins():
    row = Row(height=px(ROW_HEIGHT)).set_arrangement(Arrangement.CENTER)
    kids = make_children(row)
    lay_out(row)
    left = kids[0].pos().x
    right = ROW_WIDTH - right_edge(kids[-1])
    assert abs(left - right) <= 1
    assert left > 0


def test_space_evenly_uses_equal_spacing():
    row = Row(height=px(ROW_HEIGHT)).set_arrangement(Arrangement.SPACE_EVENLY)
    kids = make_children(row)
    lay_out(row)
    lead = kids[0].pos().x
    assert lead > 0
    for a, b in zip(kids, kids[1:]):
        assert b.pos().x - right_edge(a) == lead
    assert ROW_WIDTH - right_edge(kids[-1]) >= lead


def test_space_between_starts_at_left_edge():
    row = Row(height=px(ROW_HEIGHT)).set_arrangement(Arrangement.SPACE_BETWEEN)
    kids = make_children(row)
    lay_out(row)
    assert kids[0].pos().x == 0
    spacings = [b.pos().x - right_edge(a) for a, b in zip(kids, kids[1:])]
    assert spacings[0] == spacings[1]
    assert 0 <= ROW_WIDTH - right_edge(kids[-1]) < len(kids)


def test_top_alignment():
    row = Row(height=px(ROW_HEIGHT))
    kids = make_children(row)
    lay_out(row)
    assert all(k.pos().y == 0 for k in kids)


def test_bottom_alignment():
    row = Row(height=px(ROW_HEIGHT)).set_alignment(VerticalAlignment.BOTTOM)
    kids = make_children(row)
    lay_out(row)
    assert all(k.pos().y + k.size().height == ROW_HEIGHT for k in kids)


def test_center_alignment():
    row = Row(height=px(ROW_HEIGHT)).set_alignment(VerticalAlignment.CENTER)
    kids = make_children(row)
    lay_out(row)
    for k in kids:
        top = k.pos().y
        bottom = ROW_HEIGHT - (top + k.size().height)
        assert abs(top - bottom) <= 1


def test_percent_children_share_free_space():
    row = Row(height=px(ROW_HEIGHT))
    fixed = row.add_widget(Rectangle(px(100), px(10)))
    first = row.add_widget(Rectangle(pc(1.0), px(10)))
    second = row.add_widget(Rectangle(pc(1.0), px(10)))
    lay_out(row)
    assert first.size().width == second.size().width
    assert fixed.size().width + first.size().width + second.size().width == ROW_WIDTH


def test_fit_content_row_collapses_percent_children():
    row = Row(Dimension.fit_content(), px(ROW_HEIGHT))
    child = row.add_widget(Rectangle(pc(0.5), px(10)))
    lay_out(row)
    assert child.size().width == 0


def test_tall_child_overflows():
    row = Row(height=px(50))
    tall = row.add_widget(Rectangle(px(10), px(200)))
    short = row.add_widget(Rectangle(px(10), px(20)))
    lay_out(row)
    assert tall.layout_metadata.overflow is True
    assert short.layout_metadata.overflow is False


def test_padding_offsets_content():
    row = Row(height=px(ROW_HEIGHT), padding=Padding(5))
    child = row.add_widget(Rectangle(px(10), px(10)))
    lay_out(row)
    assert child.pos().x == 5
    assert child.pos().y == 5


def test_measure_width_fit_content():
    row = Row(Dimension.fit_content(), gap=4, padding=Padding(2, 3))
    kids = make_children(row)
    expected = row.padding.total_horizontal() + 4 * (len(kids) - 1) + sum(k.measure_width() for k in kids)
    assert row.measure_width() == expected


def test_measure_height_auto_uses_tallest_child():
    row = Row(padding=Padding(1, 0))
    kids = make_children(row)
    assert row.measure_height() == row.padding.total_vertical() + max(k.measure_height() for k in kids)


def test_measure_pixel_sizes():
    row = Row(px(120), px(40))
    make_children(row)
    assert row.measure_width() == 120
    assert row.measure_height() == 40


def test_auto_width_measures_to_padding_only():
    row = Row(padding=Padding(0, 7))
    make_children(row)
    assert row.measure_width() == row.padding.total_horizontal()


def test_width_hint_expands():
    assert Row().width_auto_size_hint() is AutoSizeHint.EXPAND


def test_setters_chain():
    row = Row()
    result = row.set_gap(3).set_alignment(VerticalAlignment.BOTTOM).set_arrangement(Arrangement.END)
    assert result is row
    assert (row.gap, row.alignment, row.arrangement) == (3, VerticalAlignment.BOTTOM, Arrangement.END)


@pytest.mark.parametrize("arrangement", list(Arrangement))
def test_single_child_stays_inside_row(arrangement):
    row = Row(height=px(ROW_HEIGHT)).set_arrangement(arrangement)
    child = row.add_widget(Rectangle(px(30), px(30)))
    lay_out(row)
    assert 0 <= child.pos().x
    assert right_edge(child) <= ROW_WIDTH