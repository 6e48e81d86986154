"""Character generator contents of the Datamedia Elite 2500.

Each glyph is a tuple of nine row strings, top row first, where ``*`` marks a
lit dot and a space a dark one.  Codes below 0o40 are blank; code 0o200 is the
underline cursor.
"""

from __future__ import annotations

from glasstty.fonts_vt import Glyph

DM_WIDTH = 5
DM_HEIGHT = 9
DM_CURSOR = 0o200

_E = "     "
_BLANK: Glyph = (_E,) * DM_HEIGHT

_PRINTABLE: tuple[Glyph, ...] = (
    _BLANK,  # space
    ("  *  ", "  *  ", "  *  ", "  *  ", "  *  ", _E, "  *  ", _E, _E),  # !
    (" * * ", " * * ", " * * ", _E, _E, _E, _E, _E, _E),  # "
    (" * * ", " * * ", "** **", _E, "** **", " * * ", " * * ", _E, _E),  # #
    ("  *  ", " ****", "* *  ", " *** ", "  * *", "**** ", "  *  ", _E, _E),  # $
    ("**  *", "**  *", "   * ", "  *  ", " *   ", "*  **", "*  **", _E, _E),  # %
    (" *   ", "* *  ", "* *  ", " *   ", "* * *", "*  * ", " ** *", _E, _E),  # &
    (" **  ", " **  ", " **  ", _E, _E, _E, _E, _E, _E),  # '
    ("   * ", "  *  ", " *   ", " *   ", " *   ", "  *  ", "   * ", _E, _E),  # (
    (" *   ", "  *  ", "   * ", "   * ", "   * ", "  *  ", " *   ", _E, _E),  # )
    ("  *  ", "* * *", " *** ", "*****", " *** ", "* * *", "  *  ", _E, _E),  # *
    (_E, "  *  ", "  *  ", "*****", "  *  ", "  *  ", _E, _E, _E),  # +
    (_E, _E, _E, _E, _E, " **  ", " **  ", "  *  ", " *   "),  # ,
    (_E, _E, _E, "*****", _E, _E, _E, _E, _E),  # -
    (_E, _E, _E, _E, _E, " **  ", " **  ", _E, _E),  # .
    ("    *", "    *", "   * ", "  *  ", " *   ", "*    ", "*    ", _E, _E),  # /
    (" **  ", "*  * ", "*  * ", "*  * ", "*  * ", "*  * ", " **  ", _E, _E),  # 0
    ("  *  ", " **  ", "  *  ", "  *  ", "  *  ", "  *  ", " *** ", _E, _E),  # 1
    (" *** ", "*   *", "    *", " *** ", "*    ", "*    ", "*****", _E, _E),  # 2
    (" *** ", "*   *", "    *", "  ** ", "    *", "*   *", " *** ", _E, _E),  # 3
    ("   * ", "  ** ", " * * ", "*  * ", "*****", "   * ", "   * ", _E, _E),  # 4
    ("*****", "*    ", "**** ", "    *", "    *", "*   *", " *** ", _E, _E),  # 5
    ("  ** ", " *   ", "*    ", "**** ", "*   *", "*   *", " *** ", _E, _E),  # 6
    ("*****", "    *", "   * ", "  *  ", " *   ", "*    ", "*    ", _E, _E),  # 7
    (" *** ", "*   *", "*   *", " *** ", "*   *", "*   *", " *** ", _E, _E),  # 8
    (" *** ", "*   *", "*   *", " ****", "    *", "   * ", " **  ", _E, _E),  # 9
    (_E, " **  ", " **  ", _E, _E, " **  ", " **  ", _E, _E),  # :
    (_E, " **  ", " **  ", _E, _E, " **  ", " **  ", "  *  ", " *   "),  # ;
    ("    *", "   * ", "  *  ", " *   ", "  *  ", "   * ", "    *", _E, _E),  # <
    (_E, _E, "*****", _E, "*****", _E, _E, _E, _E),  # =
    ("*    ", " *   ", "  *  ", "   * ", "  *  ", " *   ", "*    ", _E, _E),  # >
    (" **  ", "*  * ", "   * ", "  *  ", "  *  ", _E, "  *  ", _E, _E),  # ?
    (" *** ", "*   *", "    *", " ** *", "* * *", "* * *", " *** ", _E, _E),  # @
    ("  *  ", " * * ", "*   *", "*   *", "*****", "*   *", "*   *", _E, _E),  # A
    ("**** ", " *  *", " *  *", " *** ", " *  *", " *  *", "**** ", _E, _E),  # B
    (" *** ", "*   *", "*    ", "*    ", "*    ", "*   *", " *** ", _E, _E),  # C
    ("**** ", " *  *", " *  *", " *  *", " *  *", " *  *", "**** ", _E, _E),  # D
    ("*****", "*    ", "*    ", "***  ", "*    ", "*    ", "*****", _E, _E),  # E
    ("*****", "*    ", "*    ", "***  ", "*    ", "*    ", "*    ", _E, _E),  # F
    (" ****", "*    ", "*    ", "*  **", "*   *", "*   *", " ****", _E, _E),  # G
    ("*   *", "*   *", "*   *", "*****", "*   *", "*   *", "*   *", _E, _E),  # H
    (" *** ", "  *  ", "  *  ", "  *  ", "  *  ", "  *  ", " *** ", _E, _E),  # I
    ("    *", "    *", "    *", "    *", "    *", "*   *", " *** ", _E, _E),  # J
    ("*   *", "*  * ", "* *  ", "**   ", "* *  ", "*  * ", "*   *", _E, _E),  # K
    ("*    ", "*    ", "*    ", "*    ", "*    ", "*    ", "*****", _E, _E),  # L
    ("*   *", "** **", "* * *", "* * *", "*   *", "*   *", "*   *", _E, _E),  # M
    ("*   *", "**  *", "* * *", "*  **", "*   *", "*   *", "*   *", _E, _E),  # N
    ("*****", "*   *", "*   *", "*   *", "*   *", "*   *", "*****", _E, _E),  # O
    ("**** ", "*   *", "*   *", "**** ", "*    ", "*    ", "*    ", _E, _E),  # P
    (" *** ", "*   *", "*   *", "*   *", "* * *", "*  * ", " ** *", _E, _E),  # Q
    ("**** ", "*   *", "*   *", "**** ", "* *  ", "*  * ", "*   *", _E, _E),  # R
    (" *** ", "*   *", "*    ", " *** ", "    *", "*   *", " *** ", _E, _E),  # S
    ("*****", "  *  ", "  *  ", "  *  ", "  *  ", "  *  ", "  *  ", _E, _E),  # T
    ("*   *", "*   *", "*   *", "*   *", "*   *", "*   *", " *** ", _E, _E),  # U
    ("*   *", "*   *", "*   *", " * * ", " * * ", "  *  ", "  *  ", _E, _E),  # V
    ("*   *", "*   *", "*   *", "*   *", "* * *", "** **", "*   *", _E, _E),  # W
    ("*   *", "*   *", " * * ", "  *  ", " * * ", "*   *", "*   *", _E, _E),  # X
    ("*   *", "*   *", " * * ", "  *  ", "  *  ", "  *  ", "  *  ", _E, _E),  # Y
    ("*****", "    *", "   * ", "  *  ", " *   ", "*    ", "*****", _E, _E),  # Z
    (" *** ", " *   ", " *   ", " *   ", " *   ", " *   ", " *** ", _E, _E),  # [
    ("*    ", "*    ", " *   ", "  *  ", "   * ", "    *", "    *", _E, _E),  # backslash
    (" *** ", "   * ", "   * ", "   * ", "   * ", "   * ", " *** ", _E, _E),  # ]
    ("  *  ", " *** ", "* * *", "  *  ", "  *  ", "  *  ", "  *  ", _E, _E),  # up arrow
    (_E, _E, "  *  ", " *   ", "*****", " *   ", "  *  ", _E, _E),  # left arrow
    ("*    ", " *   ", "  *  ", _E, _E, _E, _E, _E, _E),  # `
    (_E, _E, " **  ", "*  * ", "*  * ", "*  * ", " ****", _E, _E),  # a
    ("*    ", "*    ", "* ** ", "**  *", "*   *", "*   *", "**** ", _E, _E),  # b
    (_E, _E, " ****", "*    ", "*    ", "*    ", " ****", _E, _E),  # c
    ("    *", "    *", " ** *", "*  **", "*   *", "*   *", " ****", _E, _E),  # d
    (_E, _E, " *** ", "*   *", "**** ", "*    ", " *** ", _E, _E),  # e
    ("  ** ", " *  *", "***  ", " *   ", " *   ", " *   ", " *   ", _E, _E),  # f
    (_E, _E, " ** *", "*  **", "*   *", "*   *", " ****", "    *", " *** "),  # g
    ("*    ", "*    ", "* ** ", "**  *", "*   *", "*   *", "*   *", _E, _E),  # h
    (" *   ", _E, " *   ", " *   ", " *   ", " * * ", "  *  ", _E, _E),  # i
    ("   * ", _E, "   * ", "   * ", "   * ", "   * ", "   * ", " * * ", "  *  "),  # j
    ("*    ", "*    ", "*   *", "*  * ", "* *  ", "** * ", "*   *", _E, _E),  # k
    (" *   ", "  *  ", "  *  ", "  *  ", "  *  ", "  *  ", "   * ", _E, _E),  # l
    (_E, _E, "** * ", "* * *", "* * *", "* * *", "* * *", _E, _E),  # m
    (_E, _E, "* ** ", "**  *", "*   *", "*   *", "*   *", _E, _E),  # n
    (_E, _E, " *** ", "*   *", "*   *", "*   *", " *** ", _E, _E),  # o
    (_E, _E, "* ** ", "**  *", "*   *", "*   *", "**** ", "*    ", "*    "),  # p
    (_E, _E, " ** *", "*  **", "*   *", "*   *", " ****", "    *", "    *"),  # q
    (_E, _E, "* ** ", "**  *", "*    ", "*    ", "*    ", _E, _E),  # r
    (_E, _E, " ****", "*    ", " *** ", "    *", "**** ", _E, _E),  # s
    (" *   ", "**** ", " *   ", " *   ", " *   ", " *  *", "  ** ", _E, _E),  # t
    (_E, _E, "*   *", "*   *", "*   *", "*  **", " ** *", _E, _E),  # u
    (_E, _E, "*   *", "*   *", " * * ", " * * ", "  *  ", _E, _E),  # v
    (_E, _E, "*   *", "*   *", "* * *", "* * *", " * * ", _E, _E),  # w
    (_E, _E, "*   *", " * * ", "  *  ", " * * ", "*   *", _E, _E),  # x
    (_E, _E, "*   *", "*   *", "*   *", "*  **", " ** *", "    *", " *** "),  # y
    (_E, _E, "*****", "   * ", "  *  ", " *   ", "*****", _E, _E),  # z
    ("   * ", "  *  ", "  *  ", " *   ", "  *  ", "  *  ", "   * ", _E, _E),  # {
    ("  *  ", "  *  ", "  *  ", _E, "  *  ", "  *  ", "  *  ", _E, _E),  # |
    (" *   ", "  *  ", "  *  ", "   * ", "  *  ", "  *  ", " *   ", _E, _E),  # }
    (_E, _E, "    *", " *** ", "*    ", _E, _E, _E, _E),  # ~
    (" * * ", "* * *", " * * ", "* * *", " * * ", "* * *", " * * ", _E, _E),  # rubout
)

_CURSOR: Glyph = (_E,) * 7 + ("*****", "*****")

_FONT: tuple[Glyph, ...] = (_BLANK,) * 0o40 + _PRINTABLE + (_CURSOR,)


def dm_glyph(code: int) -> Glyph:
    """Return the 5x9 glyph for ``code`` (0 to 0o200, where 0o200 is the cursor)."""
    if not 0 <= code < len(_FONT):
        raise ValueError(f"Elite 2500 has no glyph for code {code:#o}; codes run from 0 to {len(_FONT) - 1:#o}")
    return _FONT[code]