"""Character generator contents of the Datapoint 3300.

Two character ROMs are known: the TMS 4151 (the default) and the TMS 4100
(the alternate).  Each glyph is a tuple of row strings, top row first, where
``*`` marks a lit dot and a space a dark one.  Codes below 0o40 are blank.
"""

from __future__ import annotations

from typing import Mapping, Sequence

from glasstty.fonts_vt import Glyph

DP_WIDTH = 5
DP_HEIGHT = 7
DP_CURSOR = 0o140
"""Code of the block cursor glyph (one past the last printable character)."""

_BLANK: Glyph = ("     ",) * DP_HEIGHT

# Glyphs 0o40 to 0o135, as in the TMS 4151.
_SHARED: tuple[Glyph, ...] = (
    _BLANK,  # space
    ("  *  ", "  *  ", "  *  ", "  *  ", "     ", "     ", "  *  "),  # !
    (" * * ", " * * ", " * * ", "     ", "     ", "     ", "     "),  # "
    (" * * ", " * * ", "*****", " * * ", "*****", " * * ", " * * "),  # #
    ("  *  ", " ****", "* *  ", " *** ", "  * *", "**** ", "  *  "),  # $
    ("**  *", "**  *", "   * ", "  *  ", " *   ", "*  **", "*  **"),  # %
    ("  *  ", " * * ", " * * ", " **  ", "* * *", "*  * ", " ** *"),  # &
    ("   * ", "  *  ", " *   ", "     ", "     ", "     ", "     "),  # '
    ("   * ", "  *  ", " *   ", " *   ", " *   ", "  *  ", "   * "),  # (
    (" *   ", "  *  ", "   * ", "   * ", "   * ", "  *  ", " *   "),  # )
    ("     ", "  *  ", "* * *", " *** ", "* * *", "  *  ", "     "),  # *
    ("     ", "  *  ", "  *  ", "*****", "  *  ", "  *  ", "     "),  # +
    ("     ", "     ", "     ", "     ", " *   ", " *   ", "*    "),  # ,
    ("     ", "     ", "     ", "*****", "     ", "     ", "     "),  # -
    ("     ", "     ", "     ", "     ", "     ", "     ", "*    "),  # .
    ("    *", "    *", "   * ", "  *  ", " *   ", "*    ", "*    "),  # /
    (" *** ", "*   *", "*  **", "* * *", "**  *", "*   *", " *** "),  # 0
    ("  *  ", " **  ", "* *  ", "  *  ", "  *  ", "  *  ", "*****"),  # 1
    (" *** ", "*   *", "    *", "   * ", " **  ", "*    ", "*****"),  # 2
    ("**** ", "    *", "   * ", "  *  ", "   * ", "*   *", " *** "),  # 3
    ("   * ", "  ** ", " * * ", "*  * ", "*****", "   * ", "   * "),  # 4
    ("*****", "*    ", "**** ", "    *", "    *", "*   *", " *** "),  # 5
    ("  ***", " *   ", "*    ", "**** ", "*   *", "*   *", " *** "),  # 6
    ("*****", "    *", "   * ", "  *  ", " *   ", " *   ", " *   "),  # 7
    (" *** ", "*   *", "*   *", " *** ", "*   *", "*   *", " *** "),  # 8
    (" *** ", "*   *", "*   *", " ****", "    *", "   * ", "***  "),  # 9
    ("     ", "     ", "  *  ", "     ", "     ", "     ", "  *  "),  # :
    ("     ", "     ", " *   ", "     ", " *   ", " *   ", "*    "),  # ;
    ("   **", "  *  ", " *   ", "*    ", " *   ", "  *  ", "   **"),  # <
    ("     ", "     ", "*****", "     ", "*****", "     ", "     "),  # =
    ("**   ", "  *  ", "   * ", "    *", "   * ", "  *  ", "**   "),  # >
    (" *** ", "*   *", "    *", "   * ", "  *  ", "     ", "  *  "),  # ?
    (" *** ", "*   *", "* ***", "* * *", "* ***", "*    ", " *** "),  # @
    (" *** ", "*   *", "*   *", "*****", "*   *", "*   *", "*   *"),  # A
    ("**** ", "*   *", "*   *", "**** ", "*   *", "*   *", "**** "),  # B
    (" *** ", "*   *", "*    ", "*    ", "*    ", "*   *", " *** "),  # C
    ("***  ", "*  * ", "*   *", "*   *", "*   *", "*  * ", "***  "),  # D
    ("*****", "*    ", "*    ", "**** ", "*    ", "*    ", "*****"),  # E
    ("*****", "*    ", "*    ", "**** ", "*    ", "*    ", "*    "),  # F
    (" *** ", "*   *", "*    ", "*  **", "*   *", "*   *", " ****"),  # G
    ("*   *", "*   *", "*   *", "*****", "*   *", "*   *", "*   *"),  # H
    (" *** ", "  *  ", "  *  ", "  *  ", "  *  ", "  *  ", " *** "),  # I
    ("  ***", "   * ", "   * ", "   * ", "*  * ", "*  * ", " **  "),  # J
    ("*   *", "*  * ", "* *  ", "**   ", "* *  ", "*  * ", "*   *"),  # K
    ("*    ", "*    ", "*    ", "*    ", "*    ", "*    ", "*****"),  # L
    ("*   *", "** **", "* * *", "* * *", "*   *", "*   *", "*   *"),  # M
    ("*   *", "**  *", "**  *", "* * *", "*  **", "*  **", "*   *"),  # N
    (" *** ", "*   *", "*   *", "*   *", "*   *", "*   *", " *** "),  # O
    ("**** ", "*   *", "*   *", "**** ", "*    ", "*    ", "*    "),  # P
    (" *** ", "*   *", "*   *", "*   *", "* * *", "*  * ", " ** *"),  # Q
    ("**** ", "*   *", "*   *", "**** ", "* *  ", "*  * ", "*   *"),  # R
    (" ****", "*    ", "*    ", " *** ", "    *", "    *", "**** "),  # S
    ("*****", "  *  ", "  *  ", "  *  ", "  *  ", "  *  ", "  *  "),  # T
    ("*   *", "*   *", "*   *", "*   *", "*   *", "*   *", " *** "),  # U
    ("*   *", "*   *", "*   *", " * * ", " * * ", "  *  ", "  *  "),  # V
    ("*   *", "*   *", "*   *", "* * *", "* * *", "** **", "*   *"),  # W
    ("*   *", "*   *", " * * ", "  *  ", " * * ", "*   *", "*   *"),  # X
    ("*   *", "*   *", "*   *", " *** ", "  *  ", "  *  ", "  *  "),  # Y
    ("*****", "    *", "   * ", "  *  ", " *   ", "*    ", "*****"),  # Z
    ("***  ", "*    ", "*    ", "*    ", "*    ", "*    ", "***  "),  # [
    ("*    ", "*    ", " *   ", "  *  ", "   * ", "    *", "    *"),  # backslash
    ("  ***", "    *", "    *", "    *", "    *", "    *", "  ***"),  # ]
)

_CURSOR: Glyph = ("*****",) * DP_HEIGHT
_UP_ARROW: Glyph = ("  *  ", " *** ", "* * *", "  *  ", "  *  ", "  *  ", "  *  ")
_LEFT_ARROW: Glyph = ("     ", "  *  ", " *   ", "*****", " *   ", "  *  ", "     ")


def _with(table: Sequence[Glyph], changes: Mapping[int, Glyph]) -> tuple[Glyph, ...]:
    """Return ``table`` (starting at 0o40) with the glyphs of some codes replaced."""
    return tuple(changes.get(0o40 + offset, glyph) for offset, glyph in enumerate(table))


_TMS4151: tuple[Glyph, ...] = (
    (_BLANK,) * 0o40 + _SHARED + (_UP_ARROW, _LEFT_ARROW, _CURSOR)
)

_TMS4100: tuple[Glyph, ...] = (
    (_BLANK,) * 0o40
    + _with(
        _SHARED,
        {
            ord("'"): ("  *  ", " *   ", "*    ", "     ", "     ", "     ", "     "),
            ord("3"): ("**** ", "    *", "   * ", "  *  ", "   * ", "    *", "**** "),
            ord("Q"): (" *** ", "*   *", "*   *", "*   *", "* *  ", "*  * ", " ** *"),
        },
    )
    + (
        (" *** ", "*   *", "     ", "     ", "     ", "     ", "     "),  # ^
        ("     ", "     ", "     ", "     ", "     ", "     ", "*****"),  # _
        _CURSOR,
        _UP_ARROW,
        _LEFT_ARROW,
    )
)


def dp_glyph(code: int, alternate: bool = False) -> Glyph:
    """Return the 5x7 glyph for ``code``; ``alternate`` selects the TMS 4100 ROM."""
    table = _TMS4100 if alternate else _TMS4151
    if not 0 <= code < len(table):
        rom = "TMS 4100" if alternate else "TMS 4151"
        raise ValueError(f"{rom} has no glyph for code {code:#o}; codes run from 0 to {len(table) - 1:#o}")
    return table[code]