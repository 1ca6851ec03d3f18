"""Tests for scoring.py"""

import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from beijing_mahjong.core.hand import Hand
from beijing_mahjong.core.meld import Meld
from beijing_mahjong.core.tile import (
    Dragon, DragonTile, NumberedTile, Suit, UnknownTileError, Wind, make_tiles_from_string,
)
from beijing_mahjong.rules.decompose import decompose_hand
from beijing_mahjong.rules.patterns import Pattern, WinContext
from beijing_mahjong.rules.scoring import (
    Score, ScoreItem, calculate_score, calculate_score_for_tiles,
    calculate_score_self_draw, get_all_possible_scores, score_tile_ids,
)


def hand(s, **kwargs):
    return Hand(make_tiles_from_string(s), **kwargs)


def dots(n):
    return NumberedTile(Suit.DOTS, n)


class TestScoreValue:
    def test_zero(self):
        assert Score.ZERO.total_points == 0
        assert not Score.ZERO.is_win
        assert Score.ZERO.items == ()
        assert Score.ZERO.chinese_summary == ""

    def test_from_patterns(self):
        score = Score.from_patterns([Pattern.BASIC_WIN, Pattern.DRAGON_PUNG, Pattern.DRAGON_PUNG])
        assert score.total_points == 3
        assert score.is_win
        assert score.patterns == [Pattern.BASIC_WIN, Pattern.DRAGON_PUNG, Pattern.DRAGON_PUNG]

    def test_item_text(self):
        item = ScoreItem(Pattern.PURE_HAND, 6)
        assert item.chinese_text == "清一色 +6"
        assert item.english_text == "Pure Hand +6"

    def test_summaries(self):
        score = Score.from_patterns([Pattern.BASIC_WIN, Pattern.SELF_DRAW])
        assert score.chinese_summary == "胡 自摸"
        assert score.english_summary == "Basic Win, Self Draw"
        assert score.summary("en") == score.english_summary

    def test_breakdowns(self):
        score = Score.from_patterns([Pattern.BASIC_WIN, Pattern.SELF_DRAW])
        assert score.chinese_breakdown == "胡 +1\n自摸 +1\n总分: 2"
        assert score.english_breakdown.endswith("Total: 2")
        assert score.breakdown() == score.chinese_breakdown


class TestCalculateScore:
    def test_best_decomposition_wins(self):
        score = calculate_score(hand("111222333444p55p"))
        assert score.total_points == 10
        assert Pattern.ALL_PONGS in score.patterns
        assert Pattern.PURE_HAND in score.patterns
        assert score.melds[-1] == Meld.pair(dots(5))

    def test_self_draw(self):
        assert calculate_score(hand("111222333444p55p"), WinContext.SELF_DRAW).total_points == 11

    def test_attached_decomposition_scored_as_is(self):
        melds = [Meld.chow(dots(1))] * 3 + [Meld.pong(dots(4)), Meld.pair(dots(5))]
        score = calculate_score(hand("111222333444p55p", melds=melds))
        assert score.total_points == 8
        assert score.melds == tuple(melds)

    def test_big_three_dragons(self):
        assert calculate_score(hand("123p55s中中中发发发白白白")).total_points == 15

    def test_big_three_dragons_exposed(self):
        score = calculate_score(hand("123p55s中中中发发发白白白"), WinContext.exposed())
        assert score.total_points == 14
        assert Pattern.CONCEALED_HAND not in score.patterns

    def test_little_three_dragons(self):
        assert calculate_score(hand("123456p中中中发发发白白")).total_points == 13

    def test_thirteen_orphans(self):
        assert calculate_score(hand("19p19s19m东南西北中发白中")).total_points == 14
        assert calculate_score(hand("19p19s19m东南西北中发白中"),
                               WinContext.SELF_DRAW).total_points == 15

    def test_seven_pairs_pure(self):
        score = calculate_score(hand("11223344556677p"))
        assert score.total_points == 12
        assert Pattern.SEVEN_PAIRS in score.patterns

    def test_all_chows(self):
        assert calculate_score(hand("123456p234s567m东东")).total_points == 3

    def test_half_flush(self):
        assert calculate_score(hand("123p456p789p东东东南南")).total_points == 5

    def test_all_honors(self):
        assert calculate_score(hand("东东东南南南西西西北北北中中")).total_points == 12

    def test_all_honors_with_winds(self):
        context = WinContext(seat_wind=Wind.EAST, round_wind=Wind.EAST)
        score = calculate_score(hand("东东东南南南西西西北北北中中"), context)
        assert score.total_points == 14

    def test_all_terminals(self):
        score = calculate_score(hand("111999p111999s11m"))
        assert score.total_points == 10
        assert Pattern.ALL_PONGS not in score.patterns

    def test_mixed_terminals(self):
        assert calculate_score(hand("111999p111s东东东北北")).total_points == 10

    def test_tie_keeps_first_decomposition(self):
        tiles = make_tiles_from_string("11223344556677p")
        decompositions = decompose_hand(tiles)
        score = calculate_score(Hand(tiles))
        # Every decomposition of this hand totals 12
        assert len(decompositions) == 4
        assert score.melds == tuple(decompositions[0])
        assert get_all_possible_scores(Hand(tiles))[0].melds == tuple(decompositions[0])

    def test_attached_orphans_pair_scored_without_coverage(self):
        orphans = hand("19p19s19m东南西北中发白中", melds=[Meld.pair(DragonTile(Dragon.RED))])
        assert not orphans.melds_cover_tiles
        assert calculate_score(orphans).total_points == 14

    def test_no_output_without_logging_setup(self, capsys):
        calculate_score(hand("111222333444p55p"))
        calculate_score(hand("123p"))
        captured = capsys.readouterr()
        assert captured.out == ""
        assert captured.err == ""

    def test_wind_pungs(self):
        context = WinContext(seat_wind=Wind.EAST, round_wind=Wind.EAST)
        assert calculate_score(hand("123p456s789m东东东北北"), context).total_points == 4


class TestInvalidHands:
    def test_not_winning(self):
        assert calculate_score(hand("1357p2468s1357m东南")) == Score.ZERO

    def test_empty(self):
        assert calculate_score(Hand([])).total_points == 0

    def test_13_tiles(self):
        assert calculate_score(hand("111222333444p5p")).total_points == 0

    def test_invalid_hand_with_melds(self):
        melds = [Meld.pair(dots(1))]
        assert calculate_score(hand("1357p2468s1357m东南", melds=melds)) == Score.ZERO


class TestAllPossibleScores:
    def test_distinct_totals_descending(self):
        scores = get_all_possible_scores(hand("111222333444p55p"))
        assert [s.total_points for s in scores] == [10, 8]

    def test_single_total(self):
        scores = get_all_possible_scores(hand("11223344556677p"))
        assert [s.total_points for s in scores] == [12]
        assert Pattern.SEVEN_PAIRS in scores[0].patterns

    def test_invalid(self):
        assert get_all_possible_scores(hand("1357p2468s1357m东南")) == []
        assert get_all_possible_scores(hand("123p")) == []


class TestConvenience:
    def test_for_tiles(self):
        assert calculate_score_for_tiles(make_tiles_from_string("123456p234s567m东东")).total_points == 3

    def test_self_draw(self):
        assert calculate_score_self_draw(make_tiles_from_string("123456p234s567m东东")).total_points == 4

    def test_tile_ids(self):
        ids = ["DOTS_1", "DOTS_2", "DOTS_3", "DOTS_4", "DOTS_5", "DOTS_6",
               "BAMBOO_2", "BAMBOO_3", "BAMBOO_4",
               "CHARACTERS_5", "CHARACTERS_6", "CHARACTERS_7",
               "WIND_EAST", "WIND_EAST"]
        assert score_tile_ids(ids).total_points == 3

    def test_tile_ids_unknown(self):
        with pytest.raises(UnknownTileError):
            score_tile_ids(["DOTS_1"] * 13 + ["BOGUS"])
