import pytest

from towerstacker import screens


@pytest.mark.parametrize("rx", range(0, 32))
def test_result_screens_have_rules(rx):
    for ry in (17, 41):
        assert screens.you_lost(ry, rx) is True
        assert screens.you_win(ry, rx) is True


def test_result_rule_stops_at_column_31():
    assert screens.you_lost(17, 32) is False
    assert screens.you_win(41, 32) is False


def test_tower_capital_t_top_bar_is_full():
    assert [screens.title_tower(4, rx) for rx in range(2, 7)] == [True] * 5


def test_tower_capital_t_stem_is_centred():
    lit = [rx for rx in range(2, 7) if screens.title_tower(5, rx)]
    assert lit == [4]


def test_title_words_limited_to_rows_4_to_10():
    for rx in range(64):
        assert screens.title_tower(3, rx) is False
        assert screens.title_tower(11, rx) is False
        assert screens.title_stacker(3, rx) is False
        assert screens.title_stacker(11, rx) is False


def test_stacker_capital_s_matches_font():
    for row, bits in enumerate(screens.FONT_S_UPPER):
        got = [screens.title_stacker(4 + row, 2 + c) for c in range(5)]
        assert got == [bool(bits & (1 << (4 - c))) for c in range(5)]


def test_lost_and_win_share_you_line():
    for ry in range(19, 26):
        for rx in range(32):
            assert screens.you_lost(ry, rx) == screens.you_win(ry, rx)


def test_exclamation_gap_row_in_lost():
    # glyph row 5 of "!" is blank, others light the centre column
    assert screens.you_lost(33 + 5, 28) is False
    assert screens.you_lost(33, 28) is True


def test_block_is_half_open():
    assert screens.block(10, 5, 5, 10, 16)
    assert not screens.block(16, 5, 5, 10, 16)
    assert screens.block(15, 5 + screens.BLOCK_HEIGHT - 1, 5, 10, 16)
    assert not screens.block(15, 5 + screens.BLOCK_HEIGHT, 5, 10, 16)


def test_col_x_start_first_layer():
    assert screens.col_x_start(0) == 52


def test_col_x_start_never_negative_and_decreasing():
    values = [screens.col_x_start(c) for c in range(screens.MAX_LAYERS)]
    assert all(v >= 0 for v in values)
    assert values == sorted(values, reverse=True)
    assert len(set(values)) == len(values)
    assert screens.col_x_start(20) == 0


def test_layers_do_not_overlap():
    starts = [screens.col_x_start(c) for c in range(screens.MAX_LAYERS)]
    for left, right in zip(starts[1:], starts):
        assert left + screens.BLOCK_WIDTH <= right


def test_block_pair_has_second_block_for_early_layers():
    xs = screens.col_x_start(0)
    assert screens.block_pair(xs, 0 + screens.BLOCK_GAP, 0, xs, 0)
    xs4 = screens.col_x_start(4)
    lower_only = screens.BLOCK_GAP + screens.BLOCK_HEIGHT - 1
    assert not screens.block_pair(xs4, lower_only, 0, xs4, 4)
    assert screens.block_pair(xs4, 0, 0, xs4, 4)


@pytest.mark.parametrize("score", range(9))
def test_high_score_digit_matches_font(score):
    glyph = screens.FONT_DIGITS[score]
    for row in range(7):
        got = [screens.high_score_digit(40 + row, 4 + c, score) for c in range(5)]
        assert got == [bool(glyph[row] & (1 << (4 - c))) for c in range(5)]


def test_high_score_clamps():
    for row in range(7):
        for c in range(5):
            assert screens.high_score_digit(40 + row, 4 + c, -3) == \
                screens.high_score_digit(40 + row, 4 + c, 0)
            assert screens.high_score_digit(40 + row, 4 + c, 99) == \
                screens.high_score_digit(40 + row, 4 + c, 8)


def test_fixed_lines_and_boxes():
    assert screens.line_1(12, 4) and not screens.line_1(12, 29)
    assert screens.line_2(24, 28) and not screens.line_2(23, 10)
    assert screens.line_3(58, 26) and not screens.line_3(58, 27)
    assert screens.box_1(50, 4) and not screens.box_1(57, 4)
    assert screens.box_2(56, 18) and not screens.box_2(56, 19)
    assert screens.box_3(53, 20) and not screens.box_3(53, 19)
    assert screens.box_4(42, 26) and not screens.box_4(41, 26)
    assert screens.box_5(48, 12) and not screens.box_5(49, 12)
    assert screens.box_6(34, 15) and not screens.box_6(33, 15)
    assert screens.anim_line(59, 0) and not screens.anim_line(58, 0)
    assert screens.mid_line(29, 32) and not screens.mid_line(29, 33)
    assert screens.line_14(7, 0) and not screens.line_14(8, 0)