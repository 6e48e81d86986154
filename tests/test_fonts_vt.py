import pytest

from glasstty.fonts_vt import vt05_glyph, vt50_glyph, vt52_glyph

VT05_CODES = range(0o40, 0o140)
VT50_CODES = range(0o40, 0o140)
VT52_CODES = range(0, 0o200)


def test_vt05_exclamation_matches_rom():
    assert vt05_glyph(ord("!")) == ("  *  ", "  *  ", "  *  ", "  *  ", "  *  ", "     ", "  *  ")


def test_vt05_last_glyph_is_left_arrow():
    assert vt05_glyph(0o137) == ("     ", "  *  ", " *   ", "*****", " *   ", "  *  ", "     ")


def test_vt50_exclamation_decoded_from_bytes():
    assert vt50_glyph(ord("!")) == ("     ", "  *  ", "  *  ", "  *  ", "  *  ", "  *  ", "     ", "  *  ")


def test_vt50_underscore_bottom_row_is_full():
    glyph = vt50_glyph(ord("_"))
    assert glyph[-1] == "*****"
    assert all(row == "     " for row in glyph[:-1])


def test_vt52_solid_block_is_all_lit():
    assert vt52_glyph(2) == ("*******",) * 8


def test_vt52_letter_a_top_rows():
    glyph = vt52_glyph(ord("A"))
    assert glyph[0] == "       "
    assert glyph[1] == "   *   "


@pytest.mark.parametrize(
    "lookup, codes, width, height",
    [
        (vt05_glyph, VT05_CODES, 5, 7),
        (vt50_glyph, VT50_CODES, 5, 8),
        (vt52_glyph, VT52_CODES, 7, 8),
    ],
)
def test_glyph_shapes(lookup, codes, width, height):
    for code in codes:
        glyph = lookup(code)
        assert len(glyph) == height
        assert all(len(row) == width and set(row) <= {"*", " "} for row in glyph)


@pytest.mark.parametrize("lookup", [vt05_glyph, vt50_glyph, vt52_glyph])
def test_space_is_blank(lookup):
    assert all(set(row) == {" "} for row in lookup(ord(" ")))


def test_vt52_rubout_is_blank():
    assert all(set(row) == {" "} for row in vt52_glyph(0o177))


@pytest.mark.parametrize("lookup", [vt05_glyph, vt50_glyph])
def test_printable_letters_are_not_blank(lookup):
    for code in range(ord("A"), ord("Z") + 1):
        assert any("*" in row for row in lookup(code))


def test_vt52_lowercase_differs_from_uppercase():
    for lower in "abcdefghijklmnopqrstuvwxyz":
        assert vt52_glyph(ord(lower)) != vt52_glyph(ord(lower.upper()))


@pytest.mark.parametrize(
    "lookup, code",
    [
        (vt05_glyph, 0o37),
        (vt05_glyph, 0o140),
        (vt50_glyph, 0o37),
        (vt50_glyph, 0o140),
        (vt52_glyph, -1),
        (vt52_glyph, 0o200),
    ],
)
def test_out_of_range_codes_raise(lookup, code):
    with pytest.raises(ValueError):
        lookup(code)