import pytest

from luna.markup import (
    named_color,
    parse_hex_color,
    render_ansi,
    strip_ansi,
    update_theme_vars,
)

BOLD = "\x1b[1m"
ITALIC = "\x1b[3m"


@pytest.fixture(autouse=True)
def clear_theme_vars():
    update_theme_vars({})
    yield
    update_theme_vars({})


def test_named_color():
    out = render_ansi("<red>hello</red> world")
    assert "hello" in out
    assert "\x1b[38;2;" in out


def test_hex_color():
    out = render_ansi("<#ff0000>hello</color>")
    assert "hello" in out
    assert out == "\x1b[38;2;255;0;0mhello\x1b[39m"


def test_gradient():
    out = render_ansi("<gradient from=#ff0000 to=#0000ff>Hello</gradient>")
    assert "\x1b[38;2;" in out
    assert out.count("\x1b[38;2;") == 5


def test_strip():
    plain = strip_ansi("<red>hello</red> <gradient from=#ff0000 to=#0000ff>world</gradient>")
    assert plain == "hello world"


def test_bold_italic():
    out = render_ansi("<bold><italic>wow</italic></bold>")
    assert BOLD in out
    assert ITALIC in out
    assert out == "\x1b[1m\x1b[3mwow\x1b[23m\x1b[22m"


def test_named_color_exact_output():
    assert render_ansi("<red>hi</red>") == "\x1b[38;2;205;49;49mhi\x1b[39m"


def test_nested_colors_restore_outer():
    out = render_ansi("<red><blue>x</blue>y</red>")
    assert out == (
        "\x1b[38;2;205;49;49m\x1b[38;2;36;114;200mx"
        "\x1b[38;2;205;49;49my\x1b[39m"
    )


def test_gradient_two_chars_exact():
    out = render_ansi("<gradient from=#ff0000 to=#0000ff>ab</gradient>")
    assert out == "\x1b[38;2;255;0;0ma\x1b[38;2;0;0;255mb\x1b[39m"


def test_gradient_midpoint_rounds_half_up():
    out = render_ansi("<gradient from=#000000 to=#ffffff>abc</gradient>")
    assert "\x1b[38;2;128;128;128mb" in out


def test_unclosed_gradient_is_flushed():
    assert render_ansi("<gradient from=#ff0000 to=#0000ff>x") == "\x1b[38;2;255;0;0mx"


def test_unknown_tag_is_literal():
    assert render_ansi("a <foo> b") == "a <foo> b"
    assert strip_ansi("a <foo> b") == "a <foo> b"


def test_lone_angle_bracket_is_literal():
    assert render_ansi("a < b") == "a < b"


def test_background_color():
    assert render_ansi("<bg:red>x</bg>") == "\x1b[48;2;205;49;49mx\x1b[49m"


def test_reset():
    assert render_ansi("<red>x<reset>y") == "\x1b[38;2;205;49;49mx\x1b[0my"


def test_unknown_close_pops_foreground():
    assert render_ansi("<red>x</whatever>") == "\x1b[38;2;205;49;49mx\x1b[39m"


def test_invalid_gradient_is_literal():
    text = "<gradient from=#zz to=#000>x"
    assert strip_ansi(text) == text


def test_theme_var_resolution():
    update_theme_vars({"color_primary": "#112233"})
    assert render_ansi("<primary>x") == "\x1b[38;2;17;34;51mx"
    assert render_ansi("<color_primary>x") == "\x1b[38;2;17;34;51mx"


def test_theme_var_named_value():
    update_theme_vars({"color_warn": "yellow"})
    assert render_ansi("<warn>!") == "\x1b[38;2;229;229;16m!"


def test_missing_theme_var_is_literal():
    assert render_ansi("<color_border>x") == "<color_border>x"


@pytest.mark.parametrize(
    "text, expected",
    [
        ("#ff0000", (255, 0, 0)),
        ("00ff00", (0, 255, 0)),
        ("#abc", (0xAA, 0xBB, 0xCC)),
        ("#12345", None),
        ("#gg0000", None),
    ],
)
def test_parse_hex_color(text, expected):
    assert parse_hex_color(text) == expected


@pytest.mark.parametrize(
    "name, expected",
    [
        ("RED", (205, 49, 49)),
        ("grey", (128, 128, 128)),
        ("gray", (128, 128, 128)),
        ("brightwhite", (255, 255, 255)),
        ("nope", None),
    ],
)
def test_named_color_lookup(name, expected):
    assert named_color(name) == expected


def test_strip_keeps_plain_text():
    assert strip_ansi("<bold>a</bold><bg:#000>b</bg><#fff>c</color>") == "abc"