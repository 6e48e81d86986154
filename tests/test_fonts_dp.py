import pytest

from glasstty.fonts_dp import DP_CURSOR, DP_HEIGHT, DP_WIDTH, dp_glyph

TMS4151_LAST = 0o140
TMS4100_LAST = 0o142


@pytest.mark.parametrize("alternate, last", [(False, TMS4151_LAST), (True, TMS4100_LAST)])
def test_every_glyph_has_the_cell_shape(alternate, last):
    for code in range(last + 1):
        glyph = dp_glyph(code, alternate)
        assert len(glyph) == DP_HEIGHT
        assert all(len(row) == DP_WIDTH and set(row) <= {"*", " "} for row in glyph)


@pytest.mark.parametrize("alternate", [False, True])
def test_control_codes_and_space_are_blank(alternate):
    for code in range(0o41):
        assert all(row.strip() == "" for row in dp_glyph(code, alternate))


@pytest.mark.parametrize("alternate", [False, True])
def test_cursor_is_a_solid_block(alternate):
    assert dp_glyph(DP_CURSOR, alternate) == ("*****",) * DP_HEIGHT


def test_letter_a_matches_rom():
    assert dp_glyph(ord("A")) == (" *** ", "*   *", "*   *", "*****", "*   *", "*   *", "*   *")


def test_roms_differ_only_where_documented():
    differing = {code for code in range(0o40, 0o140) if dp_glyph(code) != dp_glyph(code, True)}
    assert differing == {ord("'"), ord("3"), ord("Q"), ord("^"), ord("_")}


def test_tms4151_draws_arrows_in_place_of_caret_and_underscore():
    assert dp_glyph(ord("^")) == dp_glyph(0o141, True)
    assert dp_glyph(ord("_")) == dp_glyph(0o142, True)


def test_tms4100_underscore_is_bottom_line():
    glyph = dp_glyph(ord("_"), True)
    assert glyph[-1] == "*****"
    assert all(row == "     " for row in glyph[:-1])


@pytest.mark.parametrize("alternate, code", [(False, -1), (False, TMS4151_LAST + 1), (True, TMS4100_LAST + 1)])
def test_out_of_range_code_raises(alternate, code):
    with pytest.raises(ValueError):
        dp_glyph(code, alternate)