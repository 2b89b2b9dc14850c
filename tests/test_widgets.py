import pytest

from fateseekers.widgets import (
    BUTTON_TEXT_COLOR,
    NOTIFICATION_ERROR_TEXT_COLOR,
    NOTIFICATION_INFO_TEXT_COLOR,
    Color,
    NineSlice,
    limit_input,
    nine_slice,
)


def test_colors_from_source():
    assert BUTTON_TEXT_COLOR.as_tuple() == (11, 16, 37, 255)
    assert NOTIFICATION_ERROR_TEXT_COLOR.as_tuple() == (245, 0, 0, 255)
    assert NOTIFICATION_INFO_TEXT_COLOR.as_tuple() == (255, 255, 255, 255)


def test_color_rejects_out_of_range():
    with pytest.raises(ValueError):
        Color(256, 0, 0)
    with pytest.raises(ValueError):
        Color(0, -1, 0)


@pytest.mark.parametrize(
    "width, height, center_width, center_height",
    [(48, 48, 16, 15), (40, 20, 12, -10), (33, 17, 10, 10), (30, 30, 10, 10)],
)
def test_nine_slice_parts_sum_to_size(width, height, center_width, center_height):
    result = nine_slice(width, height, center_width, center_height)
    assert sum(result.widths) == width
    assert sum(result.heights) == height
    assert result.widths[1] == center_width
    assert result.heights[1] == center_height


def test_nine_slice_even_split_is_symmetric():
    result = nine_slice(30, 30, 10, 10)
    assert result.widths[0] == result.widths[2]
    assert result.heights[0] == result.heights[2]


def test_nine_slice_odd_remainder_goes_to_far_edge():
    result = nine_slice(33, 33, 10, 10)
    assert result.widths[2] == result.widths[0] + 1


def test_nine_slice_truncates_toward_zero():
    result = nine_slice(3, 3, 6, 6)
    assert result.widths[0] == -1
    assert result == NineSlice(result.widths, result.widths)


def test_limit_input_accepts_single_character():
    assert limit_input("ab", "abc", 20) == "abc"


def test_limit_input_takes_one_character_of_paste():
    assert limit_input("ab", "abxyz", 20) == "abx"


def test_limit_input_refuses_at_limit():
    current = "a" * 19
    assert limit_input(current, current + "b", 20) == current


def test_limit_input_allows_deletion():
    assert limit_input("abc", "ab", 20) == "ab"


def test_limit_input_never_reaches_limit():
    text = ""
    for char in "abcdefghijklmnopqrstuvwxyz":
        text = limit_input(text, text + char, 5)
        assert len(text) < 5
    assert text == "abcd"