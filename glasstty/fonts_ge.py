"""Character generator contents of the GE Datanet 760 console.

Each glyph is a tuple of sixteen row strings, twelve dots wide, top row
first, where ``*`` marks a lit dot and a space a dark one.  Codes below 0o40
are blank; code 0o140 is the underline cursor.
"""

from __future__ import annotations

from glasstty.fonts_vt import Glyph

GE_WIDTH = 12
GE_HEIGHT = 16
GE_CURSOR = 0o140
"""Code of the cursor glyph (one past the last printable character)."""

_E = " " * GE_WIDTH
_BLANK: Glyph = (_E,) * GE_HEIGHT


def _g(*rows: str) -> Glyph:
    """Build a glyph from its top rows, padding the rest with dark rows."""
    if len(rows) > GE_HEIGHT or any(len(row) != GE_WIDTH for row in rows):
        raise ValueError("glyph rows do not fit the 12x16 cell")
    return tuple(rows) + (_E,) * (GE_HEIGHT - len(rows))


_PRINTABLE: tuple[Glyph, ...] = (
    _BLANK,  # space
    _g(  # !
        "     *      ", "     *      ", "     *      ", "     *      ",
        "     *      ", "     *      ", "     *      ", _E,
        "    ***     ", "    ***     ",
    ),
    _g("    * *     ", "    * *     ", "    * *     "),  # "
    _g(  # #
        _E, "    * *     ", "    * *     ", "  *******   ", "    * *     ",
        "    * *     ", "  *******   ", "    * *     ", "    * *     ",
    ),
    _g(  # $
        "     *      ", "   ******   ", "  *  *      ", "  *  *      ",
        "   *****    ", "     *  *   ", "     *  *   ", "  ******    ",
        "     *      ",
    ),
    _g(  # %
        _E, "  ***       ", "  * *   *   ", "  ***  *    ", "      *     ",
        "     *      ", "    *       ", "   *  ***   ", "  *   * *   ",
        "      ***   ",
    ),
    _g(  # &
        "     *      ", "     *      ", "    ***     ", "    *       ",
        "    **      ", "    *       ", "    ***     ", "     *      ",
    ),
    _g("     **     ", "     **     ", "      *     ", "     *      ", "    *       "),  # '
    _g(  # (
        "     ***    ", "    ****    ", "    **      ", "    **      ",
        "    **      ", "    **      ", "    **      ", "    **      ",
        "    ****    ", "     ***    ",
    ),
    _g(  # )
        "    ***     ", "    ****    ", "      **    ", "      **    ",
        "      **    ", "      **    ", "      **    ", "      **    ",
        "    ****    ", "    ***     ",
    ),
    _g(  # *
        _E, "     *      ", "   * * *    ", "    ***     ", "  *******   ",
        "    ***     ", "   * * *    ", "     *      ",
    ),
    _g(  # +
        _E, "     *      ", "     *      ", "     *      ", "  *******   ",
        "     *      ", "     *      ", "     *      ",
    ),
    _g(  # ,
        _E, _E, _E, _E, "     **     ", "     **     ", "      *     ",
        "      *     ", "     *      ", "    *       ",
    ),
    _g(_E, _E, _E, _E, "  *******   "),  # -
    _g(_E, _E, _E, _E, _E, _E, _E, _E, "     **     ", "     **     "),  # .
    _g(  # /
        "         *  ", "        **  ", "       **   ", "      **    ",
        "     **     ", "    **      ", "   **       ", "  **        ",
        "  *         ",
    ),
    _g(  # 0
        "   *****    ", "  *******   ", "  ** * **   ", "  ** * **   ",
        "  ** * **   ", "  ** * **   ", "  ** * **   ", "  ** * **   ",
        "  *******   ", "   *****    ",
    ),
    _g(  # 1
        "     **     ", "    ***     ", "   ****     ", "     **     ",
        "     **     ", "     **     ", "     **     ", "     **     ",
        "   ******   ", "   ******   ",
    ),
    _g(  # 2
        "  ******    ", "  *******   ", "       **   ", "       **   ",
        "   ******   ", "  ******    ", "  **        ", "  **        ",
        "  *******   ", "  *******   ",
    ),
    _g(  # 3
        "   *****    ", "  *******   ", "       **   ", "       **   ",
        "    ****    ", "    ****    ", "       **   ", "       **   ",
        "  *******   ", "   *****    ",
    ),
    _g(  # 4
        "  **        ", "  **  **    ", "  **  **    ", "  **  **    ",
        "  *******   ", "  *******   ", "      **    ", "      **    ",
        "      **    ", "      **    ",
    ),
    _g(  # 5
        "  *******   ", "  *******   ", "  **        ", "  ******    ",
        "  *******   ", "  *    **   ", "       **   ", "       **   ",
        "  *******   ", "  ******    ",
    ),
    _g(  # 6
        "   ******   ", "  *******   ", "  **        ", "  **        ",
        "  ******    ", "  *******   ", "  **   **   ", "  **   **   ",
        "  *******   ", "   *****    ",
    ),
    _g(  # 7
        "  *******   ", "  *******   ", "  *    **   ", "      **    ",
        "     **     ", "     **     ", "     **     ", "     **     ",
        "     **     ", "     **     ",
    ),
    _g(  # 8
        "   *****    ", "  *******   ", "  **   **   ", "  **   **   ",
        "   *****    ", "   *****    ", "  **   **   ", "  **   **   ",
        "  *******   ", "   *****    ",
    ),
    _g(  # 9
        "   *****    ", "  *******   ", "  **   **   ", "  **   **   ",
        "  *******   ", "   ******   ", "       **   ", "       **   ",
        "  *******   ", "  ******    ",
    ),
    _g("     **     ", "     **     ", _E, _E, _E, "     **     ", "     **     "),  # :
    _g(  # ;
        "     **     ", "     **     ", _E, _E, _E, "     **     ",
        "     **     ", "      *     ", "     *      ", "    *       ",
    ),
    _g(  # <
        "       **   ", "      **    ", "     **     ", "    **      ",
        "   **       ", "    **      ", "     **     ", "      **    ",
        "       **   ",
    ),
    _g(_E, _E, _E, _E, "  *******   ", _E, "  *******   "),  # =
    _g(  # >
        "   **       ", "    **      ", "     **     ", "      **    ",
        "       **   ", "      **    ", "     **     ", "    **      ",
        "   **       ",
    ),
    _g(  # ?
        "    ****    ", "        *   ", "        *   ", "        *   ",
        "    ****    ", "    *       ", "    *       ", "    *       ",
        _E, "    *       ",
    ),
    _BLANK,  # @
    _g(  # A
        "    ***     ", "   *****    ", "  **   **   ", "  **   **   ",
        "  *******   ", "  *******   ", "  **   **   ", "  **   **   ",
        "  **   **   ", "  **   **   ",
    ),
    _g(  # B
        "  *****     ", "  ******    ", "  **  **    ", "  **  **    ",
        "  *****     ", "  ******    ", "  **   **   ", "  **   **   ",
        "  *******   ", "  ******    ",
    ),
    _g(  # C
        "   *****    ", "  *******   ", "  **   **   ", "  **        ",
        "  **        ", "  **        ", "  **        ", "  **   **   ",
        "  *******   ", "   *****    ",
    ),
    _g(  # D
        "  ******    ", "  *******   ", "  **    **  ", "  **    **  ",
        "  **    **  ", "  **    **  ", "  **    **  ", "  **    **  ",
        "  *******   ", "  ******    ",
    ),
    _g(  # E
        "  *******   ", "  *******   ", "  **        ", "  **        ",
        "  *****     ", "  *****     ", "  **        ", "  **        ",
        "  *******   ", "  *******   ",
    ),
    _g(  # F
        "  *******   ", "  *******   ", "  **        ", "  **        ",
        "  *****     ", "  *****     ", "  **        ", "  **        ",
        "  **        ", "  **        ",
    ),
    _g(  # G
        "   *****    ", "  *******   ", "  **   **   ", "  **        ",
        "  **        ", "  **  ****  ", "  **  ****  ", "  **   **   ",
        "  *******   ", "   ******   ",
    ),
    _g(  # H
        "  **   **   ", "  **   **   ", "  **   **   ", "  **   **   ",
        "  *******   ", "  *******   ", "  **   **   ", "  **   **   ",
        "  **   **   ", "  **   **   ",
    ),
    _g(  # I
        "    ****    ", "    ****    ", "     **     ", "     **     ",
        "     **     ", "     **     ", "     **     ", "     **     ",
        "    ****    ", "    ****    ",
    ),
    _g(  # J
        "       **   ", "       **   ", "       **   ", "       **   ",
        "       **   ", "       **   ", "       **   ", "  **   **   ",
        "  *******   ", "   *****    ",
    ),
    _g(  # K
        "  **    *   ", "  **   **   ", "  **  **    ", "  ** **     ",
        "  ****      ", "  ****      ", "  ** **     ", "  **  **    ",
        "  **   **   ", "  **    *   ",
    ),
    _g(  # L
        "  **        ", "  **        ", "  **        ", "  **        ",
        "  **        ", "  **        ", "  **        ", "  **        ",
        "  *******   ", "  *******   ",
    ),
    _g(  # M
        "  **   **   ", "  *** ***   ", "  *******   ", "  ** * **   ",
        "  **   **   ", "  **   **   ", "  **   **   ", "  **   **   ",
        "  **   **   ", "  **   **   ",
    ),
    _g(  # N
        "  **   **   ", "  **   **   ", "  ***  **   ", "  **** **   ",
        "  *******   ", "  ** ****   ", "  **  ***   ", "  **   **   ",
        "  **   **   ", "  **   **   ",
    ),
    _g(  # O
        "   *****    ", "  *******   ", "  **   **   ", "  **   **   ",
        "  **   **   ", "  **   **   ", "  **   **   ", "  **   **   ",
        "  *******   ", "   *****    ",
    ),
    _g(  # P
        "  ******    ", "  *******   ", "  **   **   ", "  **   **   ",
        "  *******   ", "  ******    ", "  **        ", "  **        ",
        "  **        ", "  **        ",
    ),
    _g(  # Q
        "   *****    ", "  *******   ", "  **   **   ", "  **   **   ",
        "  **   **   ", "  **   **   ", "  ** * **   ", "  **  ***   ",
        "  ******    ", "   *** **   ", "        **  ",
    ),
    _g(  # R
        "  ******    ", "  *******   ", "  **   **   ", "  **   **   ",
        "  *******   ", "  ******    ", "  ** **     ", "  **  **    ",
        "  **   **   ", "  **   **   ",
    ),
    _g(  # S
        "   *****    ", "  *******   ", "  **    *   ", "  **        ",
        "  ******    ", "   ******   ", "       **   ", "  *    **   ",
        "  *******   ", "   *****    ",
    ),
    _g(  # T
        "   ******   ", "   ******   ", "     **     ", "     **     ",
        "     **     ", "     **     ", "     **     ", "     **     ",
        "     **     ", "     **     ",
    ),
    _g(  # U
        "  **   **   ", "  **   **   ", "  **   **   ", "  **   **   ",
        "  **   **   ", "  **   **   ", "  **   **   ", "  **   **   ",
        "  *******   ", "   *****    ",
    ),
    _g(  # V
        "  **   **   ", "  **   **   ", "  **   **   ", "  **   **   ",
        "   ** **    ", "   ** **    ", "   ** **    ", "    * *     ",
        "     *      ", "     *      ",
    ),
    _g(  # W
        "  **   **   ", "  **   **   ", "  **   **   ", "  **   **   ",
        "  **   **   ", "  **   **   ", "  ** * **   ", "  *******   ",
        "  *** ***   ", "  **   **   ",
    ),
    _g(  # X
        "  **   **   ", "  **   **   ", "   ** **    ", "   ** **    ",
        "    ***     ", "    ***     ", "   ** **    ", "   ** **    ",
        "  **   **   ", "  **   **   ",
    ),
    _g(  # Y
        "  **   **   ", "  **   **   ", "   ** **    ", "   ** **    ",
        "    ***     ", "    ***     ", "     *      ", "     *      ",
        "     *      ", "    ***     ",
    ),
    _g(  # Z
        "  *******   ", "  *******   ", "       **   ", "      **    ",
        "     **     ", "    **      ", "   **       ", "  **        ",
        "  *******   ", "  *******   ",
    ),
    ("**          ",) * GE_HEIGHT,  # [ : left border
    _g("************", "************"),  # backslash : top border
    ("          **",) * GE_HEIGHT,  # ] : right border
    _BLANK,  # ^
    ("************", "************") + ("**          ",) * (GE_HEIGHT - 2),  # _ : top-left corner
)

_CURSOR: Glyph = _g(_E, _E, _E, _E, _E, _E, _E, _E, "  *******   ", "  *******   ")

_FONT: tuple[Glyph, ...] = (_BLANK,) * 0o40 + _PRINTABLE + (_CURSOR,)


def ge_glyph(code: int) -> Glyph:
    """Return the 12x16 glyph for ``code`` (0 to 0o140, where 0o140 is the cursor)."""
    if not 0 <= code < len(_FONT):
        raise ValueError(
            f"Datanet 760 has no glyph for code {code:#o}; codes run from 0 to {len(_FONT) - 1:#o}"
        )
    return _FONT[code]