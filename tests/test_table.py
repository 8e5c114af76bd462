from luna.markup import strip_ansi
from luna.table import Table


def test_empty_table_renders_nothing():
    assert Table().render() == ""


def test_worked_example():
    table = Table(["a", "bb"])
    table.add_row(["xxx", "y"])
    expected = (
        "a    bb\n"
        "<color_border>───</color_border>  <color_border>──</color_border>\n"
        "xxx  y \n"
    )
    assert table.render() == expected


def test_rows_align_to_same_width():
    table = Table(["name", "size"])
    table.add_row(["a", "1"])
    table.add_row(["longer-name", "12345"])
    lines = table.render().splitlines()
    body = [lines[0]] + lines[2:]
    assert len({len(line) for line in body}) == 1


def test_markup_cells_measured_by_visible_text():
    table = Table(["h"])
    table.add_row(["<red>ab</red>"])
    lines = table.render().splitlines()
    assert strip_ansi(lines[2]) == "ab"
    assert lines[0] == "h "


def test_headerless_table_uses_first_row_columns():
    table = Table()
    table.add_row(["one", "two"])
    table.add_row(["x", "y", "ignored"])
    out = table.render()
    assert "ignored" not in out
    assert out.splitlines()[1].startswith("x  ")


def test_alternating_rows_wrap_odd_rows():
    table = Table(["c"], alternating_rows=True)
    for cell in ("a", "b", "c"):
        table.add_row([cell])
    lines = table.render().splitlines()
    assert lines[2] == "a"
    assert lines[3] == "<bg:#1e1e2e>b</bg>"
    assert lines[4] == "c"


def test_no_alternating_by_default():
    table = Table(["c"])
    table.add_row(["a"])
    table.add_row(["b"])
    assert "<bg:" not in table.render()