import pytest

from glasstty.fonts_dm import DM_CURSOR, DM_HEIGHT, DM_WIDTH, dm_glyph


def test_every_glyph_has_the_cell_shape():
    for code in range(DM_CURSOR + 1):
        glyph = dm_glyph(code)
        assert len(glyph) == DM_HEIGHT
        assert all(len(row) == DM_WIDTH and set(row) <= {"*", " "} for row in glyph)


def test_control_codes_and_space_are_blank():
    for code in range(0o41):
        assert all(row.strip() == "" for row in dm_glyph(code))


def test_printable_characters_light_some_dots():
    for code in range(0o41, DM_CURSOR + 1):
        assert any("*" in row for row in dm_glyph(code))


def test_cursor_is_underline_in_bottom_rows():
    glyph = dm_glyph(DM_CURSOR)
    assert glyph[-2:] == ("*****", "*****")
    assert all(row.strip() == "" for row in glyph[:-2])


def test_letter_a_matches_rom():
    assert dm_glyph(ord("A")) == (
        "  *  ", " * * ", "*   *", "*   *", "*****", "*   *", "*   *", "     ", "     ",
    )


def test_descenders_use_the_bottom_rows():
    for letter in "gjpqy":
        assert "*" in dm_glyph(ord(letter))[-1]
    for letter in "acemnorsuvwxz":
        assert dm_glyph(ord(letter))[-2:] == ("     ", "     ")


def test_lower_case_differs_from_upper_case():
    for letter in "abcdefghijklmnopqrstuvwxyz":
        assert dm_glyph(ord(letter)) != dm_glyph(ord(letter.upper()))


@pytest.mark.parametrize("code", [-1, DM_CURSOR + 1])
def test_out_of_range_code_raises(code):
    with pytest.raises(ValueError):
        dm_glyph(code)