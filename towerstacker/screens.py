"""Pixel masks for the 64x32 LED matrix: title, play field, result screens."""

from __future__ import annotations

from collections.abc import Sequence

MAX_LAYERS = 8
BLOCK_HEIGHT = 6
BLOCK_WIDTH = 6
BLOCK_GAP = 7

# Each glyph row is a 5-bit pattern, most significant bit on the left.
FONT_T = (0x1F, 0x04, 0x04, 0x04, 0x04, 0x04, 0x04)
FONT_O = (0x00, 0x00, 0x0E, 0x11, 0x11, 0x11, 0x0E)
FONT_W_LOWER = (0x00, 0x00, 0x11, 0x11, 0x15, 0x15, 0x0A)
FONT_E = (0x00, 0x00, 0x07, 0x04, 0x07, 0x04, 0x07)
FONT_R = (0x00, 0x00, 0x06, 0x09, 0x08, 0x08, 0x08)
FONT_S_UPPER = (0x0E, 0x11, 0x10, 0x0E, 0x01, 0x11, 0x0E)
FONT_T_LOWER = (0x04, 0x04, 0x1F, 0x04, 0x04, 0x04, 0x04)
FONT_A = (0x00, 0x00, 0x0E, 0x01, 0x0F, 0x11, 0x0F)
FONT_K = (0x08, 0x09, 0x0A, 0x0C, 0x0C, 0x0A, 0x09, 0x08)

FONT_Y = (0x11, 0x11, 0x0A, 0x04, 0x04, 0x04, 0x04)
FONT_U = (0x00, 0x00, 0x11, 0x11, 0x11, 0x11, 0x0E)
FONT_L = (0x08, 0x08, 0x08, 0x08, 0x08, 0x08, 0x0F)
FONT_S_LOWER = (0x00, 0x00, 0x0E, 0x10, 0x0E, 0x01, 0x0E)
FONT_EXCLAMATION = (0x04, 0x04, 0x04, 0x04, 0x04, 0x00, 0x04)
FONT_W_UPPER = (0x11, 0x11, 0x11, 0x15, 0x15, 0x15, 0x0A)
FONT_I = (0x04, 0x00, 0x04, 0x04, 0x04, 0x04, 0x04)
FONT_N = (0x00, 0x00, 0x16, 0x19, 0x11, 0x11, 0x11)

FONT_DIGITS = (
    (0x0E, 0x11, 0x11, 0x11, 0x11, 0x11, 0x0E),
    (0x04, 0x0C, 0x04, 0x04, 0x04, 0x04, 0x0E),
    (0x0E, 0x11, 0x01, 0x02, 0x04, 0x08, 0x1F),
    (0x0E, 0x11, 0x01, 0x06, 0x01, 0x11, 0x0E),
    (0x02, 0x06, 0x0A, 0x12, 0x1F, 0x02, 0x02),
    (0x1F, 0x10, 0x1E, 0x01, 0x01, 0x11, 0x0E),
    (0x0E, 0x11, 0x10, 0x1E, 0x11, 0x11, 0x0E),
    (0x1F, 0x01, 0x02, 0x04, 0x08, 0x08, 0x08),
    (0x0E, 0x11, 0x11, 0x0E, 0x11, 0x11, 0x0E),
)

# (first column, glyph) pairs; a glyph occupies five columns from its start.
_YOU_ROW = ((2, FONT_Y), (8, FONT_O), (14, FONT_U))
_LOST_ROW = (
    (2, FONT_L),
    (8, FONT_O),
    (14, FONT_S_LOWER),
    (20, FONT_T_LOWER),
    (26, FONT_EXCLAMATION),
)
_WIN_ROW = ((2, FONT_W_UPPER), (8, FONT_I), (14, FONT_N), (20, FONT_EXCLAMATION))
_TOWER_ROW = (
    (2, FONT_T),
    (7, FONT_O),
    (14, FONT_W_LOWER),
    (19, FONT_E),
    (25, FONT_R),
)
_STACKER_ROW = (
    (2, FONT_S_UPPER),
    (7, FONT_T_LOWER),
    (12, FONT_A),
    (17, FONT_K),
    (21, FONT_E),
    (26, FONT_R),
)


def _glyph_bit(glyph: Sequence[int], row: int, column: int) -> bool:
    return bool((glyph[row] >> (4 - column)) & 1)


def _text_row(placements, row: int, rx: int) -> bool:
    """Lit state of column ``rx`` in a line of glyphs; the first match wins."""
    for start, glyph in placements:
        if start <= rx < start + 5:
            return _glyph_bit(glyph, row, rx - start)
    return False


def _result_screen(x: int, y: int, second_line) -> bool:
    rx, ry = y, x
    if ry in (17, 41) and 0 <= rx <= 31:
        return True
    if 19 <= ry <= 25:
        return _text_row(_YOU_ROW, ry - 19, rx)
    if 33 <= ry <= 39:
        return _text_row(second_line, ry - 33, rx)
    return False


def you_lost(x: int, y: int) -> bool:
    """The "You Lost!" screen between two horizontal rules."""
    return _result_screen(x, y, _LOST_ROW)


def you_win(x: int, y: int) -> bool:
    """The "You Win!" screen between two horizontal rules."""
    return _result_screen(x, y, _WIN_ROW)


def _title_word(x: int, y: int, placements) -> bool:
    rx, ry = y, x
    if ry < 4 or ry > 10:
        return False
    return _text_row(placements, ry - 4, rx)


def title_tower(x: int, y: int) -> bool:
    """The word "Tower" on the title screen."""
    return _title_word(x, y, _TOWER_ROW)


def title_stacker(x: int, y: int) -> bool:
    """The word "Stacker" on the title screen."""
    return _title_word(x, y, _STACKER_ROW)


def line_1(x: int, y: int) -> bool:
    return 4 <= y <= 28 and x == 12


def line_2(x: int, y: int) -> bool:
    return 4 <= y <= 28 and x == 24


def line_3(x: int, y: int) -> bool:
    return 4 <= y <= 26 and x == 58


def box_1(x: int, y: int) -> bool:
    return 50 <= x <= 56 and 4 <= y <= 10


def box_2(x: int, y: int) -> bool:
    return 50 <= x <= 56 and 12 <= y <= 18


def box_3(x: int, y: int) -> bool:
    return 50 <= x <= 56 and 20 <= y <= 26


def box_4(x: int, y: int) -> bool:
    return 42 <= x <= 48 and 20 <= y <= 26


def box_5(x: int, y: int) -> bool:
    return 42 <= x <= 48 and 12 <= y <= 18


def box_6(x: int, y: int) -> bool:
    return 34 <= x <= 40 and 12 <= y <= 18


def anim_line(x: int, y: int) -> bool:
    """The thick floor bar on the play screen."""
    return 0 <= y <= 32 and 59 <= x <= 63


def mid_line(x: int, y: int) -> bool:
    return 0 <= y <= 32 and x == 29


def line_14(x: int, y: int) -> bool:
    return 0 <= y <= 32 and x == 7


def block(x: int, y: int, b_y: int, x_start: int, x_end: int) -> bool:
    """A block spanning ``[x_start, x_end)`` and ``BLOCK_HEIGHT`` rows from ``b_y``."""
    return x_start <= x < x_end and b_y <= y < b_y + BLOCK_HEIGHT


def col_x_start(col: int) -> int:
    """Left edge of the layer ``col``; layers grow towards x = 0."""
    xs = 52 - col * (BLOCK_WIDTH + 1)
    if col in (4, 5, 6):
        xs -= 1
    elif col == 7:
        xs -= 2
    return max(xs, 0)


def block_pair(x: int, y: int, b_y: int, xs: int, col: int) -> bool:
    """A layer's blocks: two stacked blocks for the first four layers, one after."""
    if block(x, y, b_y, xs, xs + BLOCK_WIDTH):
        return True
    return col < 4 and block(x, y, b_y + BLOCK_GAP, xs, xs + BLOCK_WIDTH)


def high_score_digit(x: int, y: int, score: int) -> bool:
    """The high score as one digit, clamped to 0..8."""
    rx, ry = y, x
    score = min(max(score, 0), 8)
    start_y, start_x = 40, 4
    if start_y <= ry <= start_y + 6 and start_x <= rx <= start_x + 4:
        return _glyph_bit(FONT_DIGITS[score], ry - start_y, rx - start_x)
    return False