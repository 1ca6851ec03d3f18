"""Tests for patterns.py - pattern detection and exclusions"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from beijing_mahjong.core.hand import Hand
from beijing_mahjong.core.meld import Meld
from beijing_mahjong.core.tile import (
    Dragon, DragonTile, NumberedTile, Suit, Wind, WindTile, make_tiles_from_string,
)
from beijing_mahjong.rules.patterns import (
    EXCLUSIONS, Pattern, WinContext, apply_exclusions, count_dragon_pungs,
    detect_patterns, has_round_wind_pung, has_seat_wind_pung, is_all_chows,
    is_all_honors, is_all_pongs, is_all_terminals, is_big_three_dragons,
    is_half_flush, is_little_three_dragons, is_mixed_terminals, is_pure_hand,
)
from beijing_mahjong.rules.decompose import decompose_hand


def t(s):
    return make_tiles_from_string(s)


def decomposed(s):
    """Hand carrying the last standard decomposition found."""
    tiles = t(s)
    return Hand(tiles).with_melds(decompose_hand(tiles)[-1])


RED = DragonTile(Dragon.RED)
GREEN = DragonTile(Dragon.GREEN)
WHITE = DragonTile(Dragon.WHITE)
EAST = WindTile(Wind.EAST)


def dots(n):
    return NumberedTile(Suit.DOTS, n)


class TestPatternTable:
    def test_points(self):
        assert Pattern.BASIC_WIN.points == 1
        assert Pattern.ALL_PONGS.points == 2
        assert Pattern.HALF_FLUSH.points == 3
        assert Pattern.SEVEN_PAIRS.points == 4
        assert Pattern.PURE_HAND.points == 6
        assert Pattern.ALL_HONORS.points == 8
        assert Pattern.BIG_THREE_DRAGONS.points == 10
        assert Pattern.THIRTEEN_ORPHANS.points == 13

    def test_labels(self):
        assert Pattern.PURE_HAND.label() == "清一色"
        assert Pattern.PURE_HAND.label("en") == "Pure Hand"

    def test_by_points(self):
        ordered = Pattern.by_points()
        assert ordered[0] == Pattern.THIRTEEN_ORPHANS
        assert len(ordered) == len(Pattern)

    def test_exclusions_are_symmetric_for_shapes(self):
        assert Pattern.ALL_PONGS in EXCLUSIONS[Pattern.ALL_CHOWS]
        assert Pattern.ALL_CHOWS in EXCLUSIONS[Pattern.ALL_PONGS]


class TestApplyExclusions:
    def test_mutual_removal(self):
        assert apply_exclusions([Pattern.ALL_CHOWS, Pattern.ALL_PONGS]) == []

    def test_pure_hand_removes_half_flush(self):
        result = apply_exclusions([Pattern.BASIC_WIN, Pattern.PURE_HAND, Pattern.HALF_FLUSH])
        assert result == [Pattern.BASIC_WIN, Pattern.PURE_HAND]

    def test_duplicates_kept(self):
        result = apply_exclusions([Pattern.DRAGON_PUNG, Pattern.DRAGON_PUNG])
        assert result == [Pattern.DRAGON_PUNG, Pattern.DRAGON_PUNG]

    def test_thirteen_orphans_removes_concealed(self):
        result = apply_exclusions([Pattern.CONCEALED_HAND, Pattern.THIRTEEN_ORPHANS])
        assert result == [Pattern.THIRTEEN_ORPHANS]


class TestMeldPredicates:
    def test_all_chows(self):
        melds = [Meld.chow(dots(1)), Meld.chow(dots(4)), Meld.pair(EAST)]
        assert is_all_chows(melds)
        assert not is_all_pongs(melds)

    def test_all_pongs_ignores_pair(self):
        melds = [Meld.pong(dots(1)), Meld.kong(RED), Meld.pair(dots(5))]
        assert is_all_pongs(melds)
        assert not is_all_chows(melds)

    def test_only_pairs_is_neither(self):
        melds = [Meld.pair(dots(n)) for n in range(1, 8)]
        assert not is_all_chows(melds)
        assert not is_all_pongs(melds)

    def test_dragon_pungs(self):
        melds = [Meld.pong(RED), Meld.kong(GREEN), Meld.pair(WHITE), Meld.chow(dots(1))]
        assert count_dragon_pungs(melds) == 2
        assert is_little_three_dragons(melds)
        assert not is_big_three_dragons(melds)

    def test_big_three_dragons(self):
        melds = [Meld.pong(RED), Meld.pong(GREEN), Meld.pong(WHITE)]
        assert is_big_three_dragons(melds)
        assert not is_little_three_dragons(melds)

    def test_wind_pungs(self):
        melds = [Meld.pong(EAST)]
        assert has_seat_wind_pung(melds, Wind.EAST)
        assert has_round_wind_pung(melds, Wind.EAST)
        assert not has_seat_wind_pung(melds, Wind.SOUTH)
        assert not has_round_wind_pung(melds, None)

    def test_wind_pair_does_not_count(self):
        assert not has_seat_wind_pung([Meld.pair(EAST)], Wind.EAST)


class TestSuitPredicates:
    def test_pure_hand(self):
        assert is_pure_hand(t("123456789p"))
        assert not is_pure_hand(t("123p4s"))
        assert not is_pure_hand(t("123p东"))
        assert not is_pure_hand([])

    def test_half_flush(self):
        assert is_half_flush(t("123p东"))
        assert not is_half_flush(t("123p"))
        assert not is_half_flush(t("东南"))
        assert not is_half_flush(t("1p1s东"))

    def test_all_honors(self):
        assert is_all_honors(t("东南中"))
        assert not is_all_honors(t("东1p"))

    def test_terminals(self):
        assert is_all_terminals(t("19p19s"))
        assert not is_all_terminals(t("19p东"))
        assert is_mixed_terminals(t("19p东"))
        assert not is_mixed_terminals(t("19p"))
        assert not is_mixed_terminals(t("东南"))
        assert not is_mixed_terminals(t("12p东"))


class TestDetectPatterns:
    def test_basic_concealed_all_chows(self):
        patterns = detect_patterns(decomposed("123456p234s567m东东"), WinContext.DEFAULT)
        assert patterns == [Pattern.BASIC_WIN, Pattern.CONCEALED_HAND, Pattern.ALL_CHOWS]

    def test_self_draw_exposed(self):
        patterns = detect_patterns(decomposed("123456p234s567m东东"),
                                   WinContext.exposed(is_self_draw=True))
        assert patterns == [Pattern.BASIC_WIN, Pattern.SELF_DRAW, Pattern.ALL_CHOWS]

    def test_dragon_pung_per_pung(self):
        patterns = detect_patterns(decomposed("123p55s中中中发发发白白白"), WinContext.DEFAULT)
        assert patterns.count(Pattern.DRAGON_PUNG) == 3
        assert Pattern.BIG_THREE_DRAGONS in patterns
        assert Pattern.LITTLE_THREE_DRAGONS not in patterns

    def test_little_three_dragons(self):
        patterns = detect_patterns(decomposed("123456p中中中发发发白白"), WinContext.DEFAULT)
        assert patterns.count(Pattern.DRAGON_PUNG) == 2
        assert Pattern.LITTLE_THREE_DRAGONS in patterns
        assert Pattern.HALF_FLUSH in patterns

    def test_seat_and_round_wind_stack(self):
        context = WinContext(seat_wind=Wind.EAST, round_wind=Wind.EAST)
        patterns = detect_patterns(decomposed("123p456s789m东东东北北"), context)
        assert Pattern.SEAT_WIND_PUNG in patterns
        assert Pattern.ROUND_WIND_PUNG in patterns

    def test_all_terminals_excludes_all_pongs(self):
        patterns = detect_patterns(decomposed("111999p111999s11m"), WinContext.DEFAULT)
        assert Pattern.ALL_TERMINALS in patterns
        assert Pattern.ALL_PONGS not in patterns
        assert Pattern.MIXED_TERMINALS not in patterns

    def test_thirteen_orphans_only(self):
        hand = Hand(t("19p19s19m东南西北中发白中"))
        patterns = detect_patterns(hand, WinContext.SELF_DRAW)
        assert patterns == [Pattern.BASIC_WIN, Pattern.SELF_DRAW, Pattern.THIRTEEN_ORPHANS]

    def test_seven_pairs_without_melds(self):
        patterns = detect_patterns(Hand(t("1122p3344s5566m东东")), WinContext.DEFAULT)
        assert patterns == [Pattern.BASIC_WIN, Pattern.CONCEALED_HAND, Pattern.SEVEN_PAIRS]

    def test_seven_pairs_excludes_all_chows(self):
        patterns = detect_patterns(decomposed("11223344556677p"), WinContext.DEFAULT)
        assert Pattern.SEVEN_PAIRS in patterns
        assert Pattern.ALL_CHOWS not in patterns
        assert Pattern.PURE_HAND in patterns

    def test_rare_context_flags_do_not_score(self):
        context = WinContext(is_last_tile=True, is_kong_draw=True, is_robbing_kong=True)
        patterns = detect_patterns(decomposed("123456p234s567m东东"), context)
        assert patterns == [Pattern.BASIC_WIN, Pattern.CONCEALED_HAND, Pattern.ALL_CHOWS]
