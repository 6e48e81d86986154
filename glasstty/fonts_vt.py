"""Character generator contents of the DEC VT05, VT50 and VT52.

Each glyph is a tuple of row strings, top row first, where ``*`` marks a lit
dot and a space a dark one.
"""

from __future__ import annotations

from typing import Sequence

Glyph = tuple[str, ...]

VT05_WIDTH = 5
VT05_HEIGHT = 7
VT05_FIRST = 0o40

VT50_WIDTH = 5
VT50_HEIGHT = 8
VT50_FIRST = 0o40

VT52_WIDTH = 7
VT52_HEIGHT = 8

_VT05: tuple[Glyph, ...] = (
    ("     ", "     ", "     ", "     ", "     ", "     ", "     "),  # space
    ("  *  ", "  *  ", "  *  ", "  *  ", "  *  ", "     ", "  *  "),  # !
    (" * * ", " * * ", " * * ", "     ", "     ", "     ", "     "),  # "
    (" * * ", " * * ", "** **", "     ", "** **", " * * ", " * * "),  # #
    ("  *  ", " ****", "*    ", " *** ", "    *", "**** ", "  *  "),  # $
    ("**  *", "**  *", "   * ", "  *  ", " *   ", "*  **", "*  **"),  # %
    ("  *  ", " * * ", " * * ", " **  ", "* * *", "*  * ", " ** *"),  # &
    (" **  ", " **  ", " **  ", "     ", "     ", "     ", "     "),  # '
    ("   * ", "  *  ", " *   ", " *   ", " *   ", "  *  ", "   * "),  # (
    (" *   ", "  *  ", "   * ", "   * ", "   * ", "  *  ", " *   "),  # )
    ("* * *", " *** ", "*****", " *** ", "* * *", "     ", "     "),  # *
    ("     ", "  *  ", "  *  ", "*****", "  *  ", "  *  ", "     "),  # +
    ("     ", "     ", "     ", " **  ", " **  ", "  *  ", "*    "),  # ,
    ("     ", "     ", "     ", "*****", "     ", "     ", "     "),  # -
    ("     ", "     ", "     ", "     ", "     ", " **  ", " **  "),  # .
    ("    *", "    *", "   * ", "  *  ", " *   ", "*    ", "*    "),  # /
    (" *** ", "*   *", "*   *", "*   *", "*   *", "*   *", " *** "),  # 0
    ("  *  ", " **  ", "  *  ", "  *  ", "  *  ", "  *  ", " *** "),  # 1
    (" *** ", "*   *", "    *", " *** ", "*    ", "*    ", "*****"),  # 2
    (" *** ", "*   *", "    *", "  ** ", "    *", "*   *", " *** "),  # 3
    ("   * ", "  ** ", " * * ", "*  * ", "*****", "   * ", "   * "),  # 4
    ("*****", "*    ", "**** ", "    *", "    *", "*   *", " *** "),  # 5
    ("  ** ", " *   ", "*    ", "**** ", "*   *", "*   *", " *** "),  # 6
    ("*****", "    *", "   * ", "  *  ", " *   ", "*    ", "*    "),  # 7
    (" *** ", "*   *", "*   *", " *** ", "*   *", "*   *", " *** "),  # 8
    (" *** ", "*   *", "*   *", " ****", "    *", "   * ", " **  "),  # 9
    ("     ", " **  ", " **  ", "     ", " **  ", " **  ", "     "),  # :
    (" **  ", " **  ", "     ", " **  ", " **  ", "  *  ", " *   "),  # ;
    ("    *", "   * ", "  *  ", " *   ", "  *  ", "   * ", "    *"),  # <
    ("     ", "     ", "*****", "     ", "*****", "     ", "     "),  # =
    ("*    ", " *   ", "  *  ", "   * ", "  *  ", " *   ", "*    "),  # >
    (" **  ", "*  * ", "   * ", "  *  ", "  *  ", "     ", "  *  "),  # ?
    (" *** ", "*   *", "    *", " ** *", "* * *", "* * *", " *** "),  # @
    ("  *  ", " * * ", "*   *", "*****", "*   *", "*   *", "*   *"),  # A
    ("**** ", " *  *", " *  *", " *** ", " *  *", " *  *", "**** "),  # B
    (" *** ", "*   *", "*    ", "*    ", "*    ", "*   *", " *** "),  # C
    ("**** ", " *  *", " *  *", " *  *", " *  *", " *  *", "**** "),  # D
    ("*****", "*    ", "*    ", "***  ", "*    ", "*    ", "*****"),  # E
    ("*****", "*    ", "*    ", "***  ", "*    ", "*    ", "*    "),  # F
    (" ****", "*    ", "*    ", "*  **", "*   *", "*   *", " ****"),  # G
    ("*   *", "*   *", "*   *", "*****", "*   *", "*   *", "*   *"),  # H
    (" *** ", "  *  ", "  *  ", "  *  ", "  *  ", "  *  ", " *** "),  # I
    ("    *", "    *", "    *", "    *", "    *", "*   *", " *** "),  # J
    ("*   *", "*  * ", "* *  ", "**   ", "* *  ", "*  * ", "*   *"),  # K
    ("*    ", "*    ", "*    ", "*    ", "*    ", "*    ", "*****"),  # L
    ("*   *", "** **", "* * *", "* * *", "*   *", "*   *", "*   *"),  # M
    ("*   *", "**  *", "* * *", "*  **", "*   *", "*   *", "*   *"),  # N
    ("*****", "*   *", "*   *", "*   *", "*   *", "*   *", "*****"),  # O
    ("**** ", "*   *", "*   *", "**** ", "*    ", "*    ", "*    "),  # P
    (" *** ", "*   *", "*   *", "*   *", "* * *", "*  * ", " ** *"),  # Q
    ("**** ", "*   *", "*   *", "**** ", "* *  ", "*  * ", "*   *"),  # R
    (" *** ", "*   *", " *   ", "  *  ", "   * ", "*   *", " *** "),  # S
    ("*****", "  *  ", "  *  ", "  *  ", "  *  ", "  *  ", "  *  "),  # T
    ("*   *", "*   *", "*   *", "*   *", "*   *", "*   *", " *** "),  # U
    ("*   *", "*   *", "*   *", " * * ", " * * ", "  *  ", "  *  "),  # V
    ("*   *", "*   *", "*   *", "*   *", "* * *", "** **", "*   *"),  # W
    ("*   *", "*   *", " * * ", "  *  ", " * * ", "*   *", "*   *"),  # X
    ("*   *", "*   *", " * * ", "  *  ", "  *  ", "  *  ", "  *  "),  # Y
    ("*****", "    *", "   * ", "  *  ", " *   ", "*    ", "*****"),  # Z
    (" *** ", " *   ", " *   ", " *   ", " *   ", " *   ", " *** "),  # [
    ("*    ", "*    ", " *   ", "  *  ", "   * ", "    *", "    *"),  # backslash
    (" *** ", "   * ", "   * ", "   * ", "   * ", "   * ", " *** "),  # ]
    ("  *  ", " *** ", "* * *", "  *  ", "  *  ", "  *  ", "  *  "),  # up arrow
    ("     ", "  *  ", " *   ", "*****", " *   ", "  *  ", "     "),  # left arrow
)

_VT50_ROM: tuple[tuple[int, ...], ...] = (
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),  # ' '
    (0x00, 0x04, 0x04, 0x04, 0x04, 0x04, 0x00, 0x04),  # '!'
    (0x00, 0x0A, 0x0A, 0x0A, 0x00, 0x00, 0x00, 0x00),  # '"'
    (0x00, 0x0A, 0x0A, 0x1F, 0x0A, 0x1F, 0x0A, 0x0A),  # '#'
    (0x00, 0x04, 0x0F, 0x14, 0x0E, 0x05, 0x1E, 0x04),  # '$'
    (0x00, 0x18, 0x19, 0x02, 0x04, 0x08, 0x13, 0x03),  # '%'
    (0x00, 0x08, 0x14, 0x14, 0x08, 0x15, 0x12, 0x0D),  # '&'
    (0x00, 0x04, 0x04, 0x04, 0x00, 0x00, 0x00, 0x00),  # "'"
    (0x00, 0x04, 0x08, 0x10, 0x10, 0x10, 0x08, 0x04),  # '('
    (0x00, 0x04, 0x02, 0x01, 0x01, 0x01, 0x02, 0x04),  # ')'
    (0x00, 0x04, 0x15, 0x0E, 0x04, 0x0E, 0x15, 0x04),  # '*'
    (0x00, 0x00, 0x04, 0x04, 0x1F, 0x04, 0x04, 0x00),  # '+'
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x04, 0x04, 0x08),  # ','
    (0x00, 0x00, 0x00, 0x00, 0x1F, 0x00, 0x00, 0x00),  # '-'
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x04),  # '.'
    (0x00, 0x00, 0x01, 0x02, 0x04, 0x08, 0x10, 0x00),  # '/'
    (0x00, 0x0E, 0x11, 0x13, 0x15, 0x19, 0x11, 0x0E),  # '0'
    (0x00, 0x04, 0x0C, 0x04, 0x04, 0x04, 0x04, 0x0E),  # '1'
    (0x00, 0x0E, 0x11, 0x01, 0x06, 0x08, 0x10, 0x1F),  # '2'
    (0x00, 0x1F, 0x01, 0x02, 0x06, 0x01, 0x11, 0x0E),  # '3'
    (0x00, 0x02, 0x06, 0x0A, 0x12, 0x1F, 0x02, 0x02),  # '4'
    (0x00, 0x1F, 0x10, 0x1E, 0x01, 0x01, 0x11, 0x0E),  # '5'
    (0x00, 0x07, 0x08, 0x10, 0x1E, 0x11, 0x11, 0x0E),  # '6'
    (0x00, 0x1F, 0x01, 0x02, 0x04, 0x08, 0x08, 0x08),  # '7'
    (0x00, 0x0E, 0x11, 0x11, 0x0E, 0x11, 0x11, 0x0E),  # '8'
    (0x00, 0x0E, 0x11, 0x11, 0x0F, 0x01, 0x02, 0x1C),  # '9'
    (0x00, 0x00, 0x00, 0x04, 0x00, 0x04, 0x00, 0x00),  # ':'
    (0x00, 0x00, 0x00, 0x04, 0x00, 0x04, 0x04, 0x08),  # ';'
    (0x00, 0x02, 0x04, 0x08, 0x10, 0x08, 0x04, 0x02),  # '<'
    (0x00, 0x00, 0x00, 0x1F, 0x00, 0x1F, 0x00, 0x00),  # '='
    (0x00, 0x08, 0x04, 0x02, 0x01, 0x02, 0x04, 0x08),  # '>'
    (0x00, 0x0E, 0x11, 0x02, 0x04, 0x04, 0x00, 0x04),  # '?'
    (0x00, 0x0E, 0x11, 0x15, 0x17, 0x16, 0x10, 0x0F),  # '@'
    (0x00, 0x04, 0x0A, 0x11, 0x11, 0x1F, 0x11, 0x11),  # 'A'
    (0x00, 0x1E, 0x11, 0x11, 0x1E, 0x11, 0x11, 0x1E),  # 'B'
    (0x00, 0x0E, 0x11, 0x10, 0x10, 0x10, 0x11, 0x0E),  # 'C'
    (0x00, 0x1E, 0x11, 0x11, 0x11, 0x11, 0x11, 0x1E),  # 'D'
    (0x00, 0x1F, 0x10, 0x10, 0x1E, 0x10, 0x10, 0x1F),  # 'E'
    (0x00, 0x1F, 0x10, 0x10, 0x1E, 0x10, 0x10, 0x10),  # 'F'
    (0x00, 0x0F, 0x10, 0x10, 0x10, 0x13, 0x11, 0x0F),  # 'G'
    (0x00, 0x11, 0x11, 0x11, 0x1F, 0x11, 0x11, 0x11),  # 'H'
    (0x00, 0x0E, 0x04, 0x04, 0x04, 0x04, 0x04, 0x0E),  # 'I'
    (0x00, 0x01, 0x01, 0x01, 0x01, 0x01, 0x11, 0x0E),  # 'J'
    (0x00, 0x11, 0x12, 0x14, 0x18, 0x14, 0x12, 0x11),  # 'K'
    (0x00, 0x10, 0x10, 0x10, 0x10, 0x10, 0x10, 0x1F),  # 'L'
    (0x00, 0x11, 0x1B, 0x15, 0x15, 0x11, 0x11, 0x11),  # 'M'
    (0x00, 0x11, 0x11, 0x19, 0x15, 0x13, 0x11, 0x11),  # 'N'
    (0x00, 0x0E, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E),  # 'O'
    (0x00, 0x1E, 0x11, 0x11, 0x1E, 0x10, 0x10, 0x10),  # 'P'
    (0x00, 0x0E, 0x11, 0x11, 0x11, 0x15, 0x12, 0x0D),  # 'Q'
    (0x00, 0x1E, 0x11, 0x11, 0x1E, 0x14, 0x12, 0x11),  # 'R'
    (0x00, 0x0E, 0x11, 0x10, 0x0E, 0x01, 0x11, 0x0E),  # 'S'
    (0x00, 0x1F, 0x04, 0x04, 0x04, 0x04, 0x04, 0x04),  # 'T'
    (0x00, 0x11, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E),  # 'U'
    (0x00, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0A, 0x04),  # 'V'
    (0x00, 0x11, 0x11, 0x11, 0x15, 0x15, 0x1B, 0x11),  # 'W'
    (0x00, 0x11, 0x11, 0x0A, 0x04, 0x0A, 0x11, 0x11),  # 'X'
    (0x00, 0x11, 0x11, 0x0A, 0x04, 0x04, 0x04, 0x04),  # 'Y'
    (0x00, 0x1F, 0x01, 0x02, 0x04, 0x08, 0x10, 0x1F),  # 'Z'
    (0x00, 0x1F, 0x18, 0x18, 0x18, 0x18, 0x18, 0x1F),  # '['
    (0x00, 0x00, 0x10, 0x08, 0x04, 0x02, 0x01, 0x00),  # backslash
    (0x00, 0x1F, 0x03, 0x03, 0x03, 0x03, 0x03, 0x1F),  # ']'
    (0x00, 0x00, 0x00, 0x04, 0x0A, 0x11, 0x00, 0x00),  # '^'
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x1F),  # '_'
)

_VT52_ROM: tuple[tuple[int, ...], ...] = (
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),  # 0
    (0x00, 0x30, 0x40, 0x41, 0x31, 0x07, 0x09, 0x07),  # 1
    (0x7F, 0x7F, 0x7F, 0x7F, 0x7F, 0x7F, 0x7F, 0x7F),  # 2
    (0x00, 0x21, 0x61, 0x22, 0x22, 0x74, 0x04, 0x08),  # 3
    (0x00, 0x71, 0x09, 0x32, 0x0A, 0x74, 0x04, 0x08),  # 4
    (0x00, 0x79, 0x41, 0x72, 0x0A, 0x74, 0x04, 0x08),  # 5
    (0x00, 0x79, 0x09, 0x12, 0x22, 0x44, 0x04, 0x08),  # 6
    (0x00, 0x18, 0x24, 0x18, 0x00, 0x00, 0x00, 0x00),  # 7
    (0x00, 0x00, 0x08, 0x08, 0x7F, 0x08, 0x08, 0x7F),  # 8
    (0x00, 0x00, 0x04, 0x02, 0x7F, 0x02, 0x04, 0x00),  # 9
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x49),  # 10
    (0x00, 0x00, 0x08, 0x00, 0x7F, 0x00, 0x08, 0x00),  # 11
    (0x00, 0x08, 0x08, 0x49, 0x2A, 0x1C, 0x08, 0x00),  # 12
    (0x7F, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),  # 13
    (0x00, 0x7F, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),  # 14
    (0x00, 0x00, 0x7F, 0x00, 0x00, 0x00, 0x00, 0x00),  # 15
    (0x00, 0x00, 0x00, 0x7F, 0x00, 0x00, 0x00, 0x00),  # 16
    (0x00, 0x00, 0x00, 0x00, 0x7F, 0x00, 0x00, 0x00),  # 17
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x7F, 0x00, 0x00),  # 18
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x7F, 0x00),  # 19
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x7F),  # 20
    (0x00, 0x00, 0x00, 0x30, 0x48, 0x48, 0x48, 0x30),  # 21
    (0x00, 0x00, 0x00, 0x20, 0x60, 0x20, 0x20, 0x70),  # 22
    (0x00, 0x00, 0x00, 0x70, 0x08, 0x30, 0x40, 0x78),  # 23
    (0x00, 0x00, 0x00, 0x70, 0x08, 0x30, 0x08, 0x70),  # 24
    (0x00, 0x00, 0x00, 0x10, 0x30, 0x50, 0x78, 0x10),  # 25
    (0x00, 0x00, 0x00, 0x78, 0x40, 0x70, 0x08, 0x70),  # 26
    (0x00, 0x00, 0x00, 0x38, 0x40, 0x70, 0x48, 0x30),  # 27
    (0x00, 0x00, 0x00, 0x78, 0x08, 0x10, 0x20, 0x40),  # 28
    (0x00, 0x00, 0x00, 0x30, 0x48, 0x30, 0x48, 0x30),  # 29
    (0x00, 0x00, 0x00, 0x30, 0x48, 0x38, 0x08, 0x70),  # 30
    (0x00, 0x3F, 0x7A, 0x7A, 0x3A, 0x0A, 0x0A, 0x0A),  # 31
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),  # ' '
    (0x00, 0x08, 0x08, 0x08, 0x08, 0x08, 0x00, 0x08),  # '!'
    (0x00, 0x14, 0x14, 0x14, 0x00, 0x00, 0x00, 0x00),  # '"'
    (0x00, 0x14, 0x14, 0x7F, 0x14, 0x7F, 0x14, 0x14),  # '#'
    (0x00, 0x08, 0x3E, 0x48, 0x3E, 0x09, 0x3E, 0x08),  # '$'
    (0x00, 0x61, 0x62, 0x04, 0x08, 0x10, 0x23, 0x43),  # '%'
    (0x00, 0x1C, 0x22, 0x14, 0x08, 0x15, 0x22, 0x1D),  # '&'
    (0x00, 0x0C, 0x08, 0x10, 0x00, 0x00, 0x00, 0x00),  # "'"
    (0x00, 0x04, 0x08, 0x10, 0x10, 0x10, 0x08, 0x04),  # '('
    (0x00, 0x10, 0x08, 0x04, 0x04, 0x04, 0x08, 0x10),  # ')'
    (0x00, 0x08, 0x49, 0x2A, 0x1C, 0x2A, 0x49, 0x08),  # '*'
    (0x00, 0x00, 0x08, 0x08, 0x7F, 0x08, 0x08, 0x00),  # '+'
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x18, 0x10, 0x20),  # ','
    (0x00, 0x00, 0x00, 0x00, 0x7F, 0x00, 0x00, 0x00),  # '-'
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x18, 0x18),  # '.'
    (0x00, 0x01, 0x02, 0x04, 0x08, 0x10, 0x20, 0x40),  # '/'
    (0x00, 0x1C, 0x22, 0x45, 0x49, 0x51, 0x22, 0x1C),  # '0'
    (0x00, 0x08, 0x18, 0x28, 0x08, 0x08, 0x08, 0x3E),  # '1'
    (0x00, 0x3C, 0x42, 0x01, 0x0E, 0x30, 0x40, 0x7F),  # '2'
    (0x00, 0x7F, 0x02, 0x04, 0x0E, 0x01, 0x41, 0x3E),  # '3'
    (0x00, 0x04, 0x0C, 0x14, 0x24, 0x7F, 0x04, 0x04),  # '4'
    (0x00, 0x7F, 0x40, 0x5E, 0x61, 0x01, 0x41, 0x3E),  # '5'
    (0x00, 0x1E, 0x21, 0x40, 0x5E, 0x61, 0x21, 0x1E),  # '6'
    (0x00, 0x7F, 0x01, 0x02, 0x04, 0x08, 0x10, 0x20),  # '7'
    (0x00, 0x3E, 0x41, 0x41, 0x3E, 0x41, 0x41, 0x3E),  # '8'
    (0x00, 0x3C, 0x42, 0x43, 0x3D, 0x01, 0x42, 0x3C),  # '9'
    (0x00, 0x00, 0x18, 0x18, 0x00, 0x00, 0x18, 0x18),  # ':'
    (0x00, 0x00, 0x18, 0x18, 0x00, 0x18, 0x10, 0x20),  # ';'
    (0x00, 0x02, 0x04, 0x08, 0x10, 0x08, 0x04, 0x02),  # '<'
    (0x00, 0x00, 0x00, 0x7F, 0x00, 0x7F, 0x00, 0x00),  # '='
    (0x00, 0x20, 0x10, 0x08, 0x04, 0x08, 0x10, 0x20),  # '>'
    (0x00, 0x3E, 0x41, 0x01, 0x0E, 0x08, 0x00, 0x08),  # '?'
    (0x00, 0x3E, 0x41, 0x45, 0x49, 0x4E, 0x40, 0x3E),  # '@'
    (0x00, 0x08, 0x14, 0x22, 0x41, 0x7F, 0x41, 0x41),  # 'A'
    (0x00, 0x7E, 0x21, 0x21, 0x3E, 0x21, 0x21, 0x7E),  # 'B'
    (0x00, 0x1E, 0x21, 0x40, 0x40, 0x40, 0x21, 0x1E),  # 'C'
    (0x00, 0x7E, 0x21, 0x21, 0x21, 0x21, 0x21, 0x7E),  # 'D'
    (0x00, 0x7F, 0x40, 0x40, 0x78, 0x40, 0x40, 0x7F),  # 'E'
    (0x00, 0x7F, 0x40, 0x40, 0x78, 0x40, 0x40, 0x40),  # 'F'
    (0x00, 0x3E, 0x41, 0x40, 0x47, 0x41, 0x41, 0x3E),  # 'G'
    (0x00, 0x41, 0x41, 0x41, 0x7F, 0x41, 0x41, 0x41),  # 'H'
    (0x00, 0x3E, 0x08, 0x08, 0x08, 0x08, 0x08, 0x3E),  # 'I'
    (0x00, 0x01, 0x01, 0x01, 0x01, 0x01, 0x41, 0x3E),  # 'J'
    (0x00, 0x41, 0x46, 0x58, 0x60, 0x58, 0x46, 0x41),  # 'K'
    (0x00, 0x40, 0x40, 0x40, 0x40, 0x40, 0x40, 0x7F),  # 'L'
    (0x00, 0x41, 0x63, 0x55, 0x49, 0x41, 0x41, 0x41),  # 'M'
    (0x00, 0x41, 0x61, 0x51, 0x49, 0x45, 0x43, 0x41),  # 'N'
    (0x00, 0x3E, 0x41, 0x41, 0x41, 0x41, 0x41, 0x3E),  # 'O'
    (0x00, 0x7E, 0x41, 0x41, 0x7E, 0x40, 0x40, 0x40),  # 'P'
    (0x00, 0x3E, 0x41, 0x41, 0x41, 0x45, 0x42, 0x3D),  # 'Q'
    (0x00, 0x7E, 0x41, 0x41, 0x7E, 0x44, 0x42, 0x41),  # 'R'
    (0x00, 0x3E, 0x41, 0x40, 0x3E, 0x01, 0x41, 0x3E),  # 'S'
    (0x00, 0x7F, 0x08, 0x08, 0x08, 0x08, 0x08, 0x08),  # 'T'
    (0x00, 0x41, 0x41, 0x41, 0x41, 0x41, 0x41, 0x3E),  # 'U'
    (0x00, 0x41, 0x41, 0x22, 0x22, 0x14, 0x14, 0x08),  # 'V'
    (0x00, 0x41, 0x41, 0x41, 0x49, 0x49, 0x55, 0x22),  # 'W'
    (0x00, 0x41, 0x22, 0x14, 0x08, 0x14, 0x22, 0x41),  # 'X'
    (0x00, 0x41, 0x22, 0x14, 0x08, 0x08, 0x08, 0x08),  # 'Y'
    (0x00, 0x7F, 0x02, 0x04, 0x08, 0x10, 0x20, 0x7F),  # 'Z'
    (0x00, 0x3C, 0x30, 0x30, 0x30, 0x30, 0x30, 0x3C),  # '['
    (0x00, 0x40, 0x20, 0x10, 0x08, 0x04, 0x02, 0x01),  # backslash
    (0x00, 0x1E, 0x06, 0x06, 0x06, 0x06, 0x06, 0x1E),  # ']'
    (0x00, 0x08, 0x14, 0x22, 0x00, 0x00, 0x00, 0x00),  # '^'
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x7F),  # '_'
    (0x00, 0x18, 0x08, 0x04, 0x00, 0x00, 0x00, 0x00),  # '`'
    (0x00, 0x00, 0x00, 0x3E, 0x01, 0x3F, 0x41, 0x3F),  # 'a'
    (0x00, 0x40, 0x40, 0x5E, 0x61, 0x41, 0x61, 0x5E),  # 'b'
    (0x00, 0x00, 0x00, 0x3E, 0x41, 0x40, 0x40, 0x3F),  # 'c'
    (0x00, 0x01, 0x01, 0x3D, 0x43, 0x41, 0x43, 0x3D),  # 'd'
    (0x00, 0x00, 0x00, 0x3C, 0x42, 0x7F, 0x40, 0x3E),  # 'e'
    (0x00, 0x0E, 0x11, 0x7C, 0x10, 0x10, 0x10, 0x10),  # 'f'
    (0x00, 0x00, 0x00, 0x1D, 0x22, 0x1E, 0x42, 0x3C),  # 'g'
    (0x00, 0x40, 0x40, 0x7E, 0x41, 0x41, 0x41, 0x41),  # 'h'
    (0x00, 0x08, 0x00, 0x18, 0x08, 0x08, 0x08, 0x3E),  # 'i'
    (0x00, 0x01, 0x00, 0x01, 0x01, 0x01, 0x41, 0x3E),  # 'j'
    (0x00, 0x40, 0x40, 0x44, 0x48, 0x50, 0x44, 0x41),  # 'k'
    (0x00, 0x18, 0x08, 0x08, 0x08, 0x08, 0x08, 0x1C),  # 'l'
    (0x00, 0x00, 0x00, 0x76, 0x49, 0x49, 0x49, 0x49),  # 'm'
    (0x00, 0x00, 0x00, 0x5E, 0x61, 0x41, 0x41, 0x41),  # 'n'
    (0x00, 0x00, 0x00, 0x3E, 0x41, 0x41, 0x41, 0x3E),  # 'o'
    (0x00, 0x00, 0x00, 0x5E, 0x61, 0x7E, 0x40, 0x40),  # 'p'
    (0x00, 0x00, 0x00, 0x3D, 0x43, 0x3F, 0x01, 0x01),  # 'q'
    (0x00, 0x00, 0x00, 0x4E, 0x31, 0x20, 0x20, 0x20),  # 'r'
    (0x00, 0x00, 0x00, 0x3E, 0x40, 0x3E, 0x01, 0x7E),  # 's'
    (0x00, 0x10, 0x10, 0x7C, 0x10, 0x10, 0x12, 0x0C),  # 't'
    (0x00, 0x00, 0x00, 0x42, 0x42, 0x42, 0x42, 0x3D),  # 'u'
    (0x00, 0x00, 0x00, 0x41, 0x41, 0x22, 0x14, 0x08),  # 'v'
    (0x00, 0x00, 0x00, 0x41, 0x41, 0x49, 0x55, 0x22),  # 'w'
    (0x00, 0x00, 0x00, 0x42, 0x24, 0x18, 0x24, 0x42),  # 'x'
    (0x00, 0x00, 0x00, 0x41, 0x22, 0x14, 0x08, 0x70),  # 'y'
    (0x00, 0x00, 0x00, 0x7F, 0x02, 0x1C, 0x20, 0x7F),  # 'z'
    (0x00, 0x07, 0x08, 0x08, 0x70, 0x08, 0x08, 0x07),  # '{'
    (0x00, 0x08, 0x08, 0x08, 0x00, 0x08, 0x08, 0x08),  # '|'
    (0x00, 0x70, 0x08, 0x08, 0x07, 0x08, 0x08, 0x70),  # '}'
    (0x00, 0x11, 0x2A, 0x44, 0x00, 0x00, 0x00, 0x00),  # '~'
    (0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00, 0x00),  # 127
)


def _decode(rows: Sequence[int], width: int) -> Glyph:
    """Turn ROM bytes (most significant used bit leftmost) into row strings."""
    top = 1 << (width - 1)
    return tuple("".join("*" if row & (top >> j) else " " for j in range(width)) for row in rows)


_VT50: tuple[Glyph, ...] = tuple(_decode(rows, VT50_WIDTH) for rows in _VT50_ROM)
_VT52: tuple[Glyph, ...] = tuple(_decode(rows, VT52_WIDTH) for rows in _VT52_ROM)


def _lookup(table: Sequence[Glyph], first: int, code: int, name: str) -> Glyph:
    index = code - first
    if not 0 <= index < len(table):
        raise ValueError(
            f"{name} has no glyph for code {code:#o}; codes run from "
            f"{first:#o} to {first + len(table) - 1:#o}"
        )
    return table[index]


def vt05_glyph(code: int) -> Glyph:
    """Return the VT05 5x7 glyph for character ``code`` (0o40 to 0o137)."""
    return _lookup(_VT05, VT05_FIRST, code, "VT05")


def vt50_glyph(code: int) -> Glyph:
    """Return the VT50 5x8 glyph for character ``code`` (0o40 to 0o137)."""
    return _lookup(_VT50, VT50_FIRST, code, "VT50")


def vt52_glyph(code: int) -> Glyph:
    """Return the VT52 7x8 glyph for ROM position ``code`` (0 to 0o177)."""
    return _lookup(_VT52, 0, code, "VT52")