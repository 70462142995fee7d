import pytest

from promptparts.segment import Segment, Style


def test_plain_style_leaves_text_unchanged():
    assert Style().paint("hello") == "hello"


def test_foreground_red_escape():
    assert Style(foreground="red").paint("hi") == "\x1b[31mhi\x1b[0m"


def test_bold_comes_before_colour():
    painted = Style(foreground="blue", bold=True).paint("x")
    assert painted.startswith("\x1b[1;")
    assert painted.endswith("x\x1b[0m")


def test_painted_text_contains_value():
    painted = Style(foreground=(1, 2, 3), underline=True).paint("value")
    assert "value" in painted
    assert painted != "value"


def test_unknown_colour_name_raises():
    with pytest.raises(ValueError):
        Style(foreground="chartreuse-ish")


def test_fixed_colour_out_of_range_raises():
    with pytest.raises(ValueError):
        Style(background=300)


def test_segment_without_style_is_raw_value():
    segment = Segment("symbol", value="abc")
    assert segment.ansi_string() == "abc"
    assert str(segment) == "abc"


def test_segment_with_style_uses_style_paint():
    style = Style(foreground="green")
    segment = Segment("version", style=style, value="v1.0")
    assert segment.ansi_string() == style.paint("v1.0")
    assert str(segment) == segment.ansi_string()


def test_segment_default_value_is_empty():
    assert Segment("name").is_empty() is True


@pytest.mark.parametrize("value", ["", " ", "\t\n  "])
def test_whitespace_only_is_empty(value):
    assert Segment("s", value=value).is_empty() is True


def test_non_blank_is_not_empty():
    assert Segment("s", value=" x ").is_empty() is False