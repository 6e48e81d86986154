import pytest

from glasstty.fonts_ge import GE_CURSOR, GE_HEIGHT, GE_WIDTH, ge_glyph

ALL_CODES = range(0, GE_CURSOR + 1)


@pytest.mark.parametrize("code", ALL_CODES)
def test_every_glyph_fills_the_cell(code):
    glyph = ge_glyph(code)
    assert len(glyph) == GE_HEIGHT
    assert all(len(row) == GE_WIDTH for row in glyph)
    assert set("".join(glyph)) <= {"*", " "}


@pytest.mark.parametrize("code", [0, 0o12, 0o37, 0o40, ord("@"), ord("^")])
def test_blank_codes(code):
    assert all(row.strip() == "" for row in ge_glyph(code))


@pytest.mark.parametrize("code", [ord(c) for c in "!#0123456789AHMQWZ"])
def test_printable_glyphs_have_dots(code):
    assert any("*" in row for row in ge_glyph(code))


def test_letters_are_distinct():
    glyphs = [ge_glyph(ord(c)) for c in "ABCDEFGHIJKLMNOPQRSTUVWXYZ"]
    assert len(set(glyphs)) == len(glyphs)


def test_digits_are_distinct():
    glyphs = [ge_glyph(ord(c)) for c in "0123456789"]
    assert len(set(glyphs)) == len(glyphs)


def test_cursor_is_underline():
    glyph = ge_glyph(GE_CURSOR)
    lit = [i for i, row in enumerate(glyph) if "*" in row]
    assert lit == [8, 9]
    assert glyph[8] == "  *******   "


def test_left_border_fills_every_row():
    assert ge_glyph(ord("[")) == ("**          ",) * GE_HEIGHT


def test_left_and_right_borders_mirror():
    left = ge_glyph(ord("["))
    right = ge_glyph(ord("]"))
    assert [row[::-1] for row in left] == list(right)


def test_top_border_is_two_full_rows():
    glyph = ge_glyph(ord("\\"))
    assert glyph[0] == glyph[1] == "*" * GE_WIDTH
    assert all(row.strip() == "" for row in glyph[2:])


def test_corner_combines_top_and_left_borders():
    corner = ge_glyph(ord("_"))
    top = ge_glyph(ord("\\"))
    left = ge_glyph(ord("["))
    merged = tuple(
        "".join("*" if "*" in (a, b) else " " for a, b in zip(t, l)) for t, l in zip(top, left)
    )
    assert corner == merged


def test_q_has_a_tail_below_the_baseline():
    glyph = ge_glyph(ord("Q"))
    assert "*" in glyph[10]
    assert all("*" not in ge_glyph(ord("O"))[row] for row in range(10, GE_HEIGHT))


@pytest.mark.parametrize("code", [-1, GE_CURSOR + 1, 0o200])
def test_out_of_range_codes_raise(code):
    with pytest.raises(ValueError):
        ge_glyph(code)