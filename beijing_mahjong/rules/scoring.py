"""Score calculation - decompose, detect patterns, keep the best total."""

from dataclasses import dataclass, field
from typing import Iterable, List, Optional, Sequence, Tuple

from beijing_mahjong.core.hand import Hand
from beijing_mahjong.core.meld import Meld
from beijing_mahjong.core.tile import Tile, tiles_from_ids
from beijing_mahjong.logging import get_logger
from beijing_mahjong.rules.decompose import decompose_hand
from beijing_mahjong.rules.patterns import Pattern, WinContext, detect_patterns

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScoreItem:
    """A single scoring item (pattern and its point value)."""
    pattern: Pattern
    points: int

    @property
    def chinese_text(self) -> str:
        return f"{self.pattern.chinese} +{self.points}"

    @property
    def english_text(self) -> str:
        return f"{self.pattern.english} +{self.points}"


@dataclass(frozen=True)
class Score:
    """Score breakdown for one decomposition of a winning hand.

    Attributes:
        items: Scoring items in detection order (Dragon Pung once per pung)
        total_points: Sum of item points
        melds: The decomposition that produced this score
    """
    items: Tuple[ScoreItem, ...]
    total_points: int
    melds: Tuple[Meld, ...] = field(default=())

    @property
    def is_win(self) -> bool:
        return self.total_points > 0

    @property
    def patterns(self) -> List[Pattern]:
        return [item.pattern for item in self.items]

    @property
    def chinese_summary(self) -> str:
        return " ".join(item.pattern.chinese for item in self.items)

    @property
    def english_summary(self) -> str:
        return ", ".join(item.pattern.english for item in self.items)

    @property
    def chinese_breakdown(self) -> str:
        lines = [item.chinese_text for item in self.items]
        lines.append(f"总分: {self.total_points}")
        return "\n".join(lines)

    @property
    def english_breakdown(self) -> str:
        lines = [item.english_text for item in self.items]
        lines.append(f"Total: {self.total_points}")
        return "\n".join(lines)

    def summary(self, lang: str = "zh") -> str:
        return self.english_summary if lang == "en" else self.chinese_summary

    def breakdown(self, lang: str = "zh") -> str:
        return self.english_breakdown if lang == "en" else self.chinese_breakdown

    @classmethod
    def from_patterns(cls, patterns: Iterable[Pattern],
                      melds: Iterable[Meld] = ()) -> 'Score':
        items = tuple(ScoreItem(p, p.points) for p in patterns)
        return cls(items, sum(item.points for item in items), tuple(melds))


Score.ZERO = Score((), 0)


def calculate_score(hand: Hand, context: WinContext = WinContext.DEFAULT) -> Score:
    """Calculate the score for a winning hand.

    An attached decomposition is scored as-is. Otherwise every decomposition
    is scored and the highest total wins (first found on ties). Invalid
    hands score Score.ZERO.
    """
    if not hand.is_complete:
        logger.debug("hand rejected", reason="tile_count", tile_count=hand.tile_count)
        return Score.ZERO

    decompositions = decompose_hand(hand.tiles)
    if not decompositions:
        logger.debug("hand rejected", reason="no_decomposition")
        return Score.ZERO

    if hand.melds is not None:
        return _score_decomposition(hand, context)

    logger.debug("decompositions found", count=len(decompositions))
    best: Optional[Score] = None
    for melds in decompositions:
        score = _score_decomposition(hand.with_melds(melds), context)
        if best is None or score.total_points > best.total_points:
            best = score

    logger.debug("best decomposition selected", total_points=best.total_points,
                 patterns=[p.name for p in best.patterns])
    return best


def get_all_possible_scores(hand: Hand,
                            context: WinContext = WinContext.DEFAULT) -> List[Score]:
    """One score per distinct total across all decompositions, highest first."""
    if not hand.is_complete:
        return []

    by_total = {}
    for melds in decompose_hand(hand.tiles):
        score = _score_decomposition(hand.with_melds(melds), context)
        by_total.setdefault(score.total_points, score)
    return [by_total[total] for total in sorted(by_total, reverse=True)]


def calculate_score_for_tiles(tiles: Sequence[Tile]) -> Score:
    """Quick score for a discard win with a concealed hand."""
    return calculate_score(Hand(tiles), WinContext.DEFAULT)


def calculate_score_self_draw(tiles: Sequence[Tile]) -> Score:
    """Quick score for a self-drawn win with a concealed hand."""
    return calculate_score(Hand(tiles), WinContext.SELF_DRAW)


def score_tile_ids(tile_ids: Sequence[str],
                   context: WinContext = WinContext.DEFAULT) -> Score:
    """Score a hand given as tile identifiers (e.g. 'DOTS_1', 'WIND_EAST')."""
    return calculate_score(Hand(tiles_from_ids(tile_ids)), context)


def _score_decomposition(hand: Hand, context: WinContext) -> Score:
    patterns = detect_patterns(hand, context)
    return Score.from_patterns(patterns, hand.melds)
