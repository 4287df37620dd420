import pytest

from y11.geometry import Color, LayoutMetadata, Padding, Point, Rect, Size


def test_default_color_is_opaque_red():
    assert Color() == Color(r=255, g=0, b=0, a=255)


def test_three_channel_color_is_opaque():
    assert Color(10, 20, 30).a == 255


def test_from_raw_unpacks_channels():
    color = Color.from_raw(0x80112233)
    assert (color.a, color.r, color.g, color.b) == (0x80, 0x11, 0x22, 0x33)


@pytest.mark.parametrize("raw", [0, 0xFFFFFFFF, 0x80112233, 0x01020304])
def test_raw_round_trip(raw):
    assert Color.from_raw(raw).raw() == raw


def test_color_round_trip_through_raw():
    color = Color(12, 34, 56, 78)
    assert Color.from_raw(color.raw()) == color


@pytest.mark.parametrize("channels", [(256, 0, 0), (0, -1, 0), (0, 0, 0, 300)])
def test_color_rejects_out_of_range(channels):
    with pytest.raises(ValueError):
        Color(*channels)


def test_padding_single_value_applies_to_all_sides():
    padding = Padding(5)
    assert (padding.top, padding.right, padding.bottom, padding.left) == (5, 5, 5, 5)


def test_padding_two_values_are_vertical_then_horizontal():
    padding = Padding(1, 2)
    assert (padding.top, padding.right, padding.bottom, padding.left) == (1, 2, 1, 2)


def test_padding_four_values_in_clockwise_order():
    padding = Padding(1, 2, 3, 4)
    assert (padding.top, padding.right, padding.bottom, padding.left) == (1, 2, 3, 4)


def test_padding_totals():
    padding = Padding(1, 2, 3, 4)
    assert padding.total_horizontal() == padding.left + padding.right
    assert padding.total_vertical() == padding.top + padding.bottom


def test_default_padding_is_zero():
    assert Padding() == Padding(0, 0, 0, 0)


def test_padding_rejects_three_values():
    with pytest.raises(TypeError):
        Padding(1, 2, 3)


def test_rect_position_and_size():
    rect = Rect(3, 4, 50, 60)
    assert rect.position() == Point(3, 4)
    assert rect.size() == Size(50, 60)


def test_layout_metadata_defaults():
    metadata = LayoutMetadata()
    assert (metadata.x, metadata.y, metadata.width, metadata.height) == (0, 0, 0, 0)
    assert metadata.overflow is False