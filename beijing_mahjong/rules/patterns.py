"""Scoring pattern (番种) detection for Beijing Mahjong.

detect_patterns() collects every applicable pattern for one decomposed hand,
then removes the patterns superseded by others (see EXCLUSIONS).
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, List, Optional, Sequence, Set

from beijing_mahjong.core.hand import Hand
from beijing_mahjong.core.meld import Meld, MeldType
from beijing_mahjong.core.tile import DragonTile, NumberedTile, Tile, Wind, WindTile
from beijing_mahjong.rules.decompose import is_seven_pairs, is_thirteen_orphans


class Pattern(Enum):
    # How you won
    BASIC_WIN = ("胡", "Basic Win", 1, "Completing a winning hand")
    SELF_DRAW = ("自摸", "Self Draw", 1, "Drew the winning tile yourself")
    CONCEALED_HAND = ("门清", "Concealed Hand", 1, "All tiles concealed (no exposed melds)")

    # Meld shapes
    ALL_CHOWS = ("平胡", "All Chows", 1, "All melds are Chows, no Pongs or Kongs")
    ALL_PONGS = ("碰碰胡", "All Pongs", 2, "Hand contains only Pongs and Kongs, no Chows")

    # Honor melds
    DRAGON_PUNG = ("三元牌", "Dragon Pung", 1, "Pung or Kong of a dragon tile")
    SEAT_WIND_PUNG = ("门风刻", "Seat Wind Pung", 1, "Pung or Kong of your seat wind")
    ROUND_WIND_PUNG = ("圈风刻", "Round Wind Pung", 1, "Pung or Kong of the round wind")

    # Suits
    HALF_FLUSH = ("混一色", "Half Flush", 3, "One numbered suit plus honor tiles")
    PURE_HAND = ("清一色", "Pure Hand", 6, "All tiles from one numbered suit, no honors")
    ALL_HONORS = ("字一色", "All Honors", 8, "Only wind and dragon tiles")

    # Terminals
    MIXED_TERMINALS = ("混老头", "Mixed Terminals", 6, "Only terminal tiles (1s and 9s) plus honor tiles")
    ALL_TERMINALS = ("清老头", "All Terminals", 8, "Only terminal tiles (1s and 9s)")

    # Dragon combinations
    LITTLE_THREE_DRAGONS = ("小三元", "Little Three Dragons", 6, "Two dragon Pungs and one dragon Pair")
    BIG_THREE_DRAGONS = ("大三元", "Big Three Dragons", 10, "Pungs of all three dragons")

    # Special hands
    SEVEN_PAIRS = ("七对子", "Seven Pairs", 4, "Seven pairs instead of four sets and one pair")
    THIRTEEN_ORPHANS = ("十三幺", "Thirteen Orphans", 13,
                        "One of each terminal and honor tile, plus one duplicate")

    def __init__(self, chinese: str, english: str, points: int, description: str):
        self.chinese = chinese
        self.english = english
        self.points = points
        self.description = description

    def label(self, lang: str = "zh") -> str:
        return self.english if lang == "en" else self.chinese

    @classmethod
    def by_points(cls) -> List['Pattern']:
        """Patterns sorted by point value, highest first."""
        return sorted(cls, key=lambda p: p.points, reverse=True)


# When a pattern is present, every pattern in its set is removed.
EXCLUSIONS: Dict[Pattern, Set[Pattern]] = {
    Pattern.ALL_CHOWS: {Pattern.ALL_PONGS},
    Pattern.ALL_PONGS: {Pattern.ALL_CHOWS},
    Pattern.PURE_HAND: {Pattern.HALF_FLUSH, Pattern.MIXED_TERMINALS},
    Pattern.ALL_HONORS: {Pattern.HALF_FLUSH, Pattern.MIXED_TERMINALS},
    Pattern.ALL_TERMINALS: {Pattern.ALL_PONGS, Pattern.MIXED_TERMINALS},
    Pattern.MIXED_TERMINALS: {Pattern.PURE_HAND, Pattern.ALL_HONORS, Pattern.ALL_TERMINALS},
    Pattern.BIG_THREE_DRAGONS: {Pattern.LITTLE_THREE_DRAGONS},
    Pattern.THIRTEEN_ORPHANS: {
        Pattern.ALL_PONGS, Pattern.ALL_CHOWS, Pattern.HALF_FLUSH,
        Pattern.PURE_HAND, Pattern.CONCEALED_HAND,
    },
    Pattern.SEVEN_PAIRS: {Pattern.ALL_PONGS, Pattern.ALL_CHOWS},
}


@dataclass(frozen=True)
class WinContext:
    """How the hand was won."""
    is_self_draw: bool = False
    is_concealed: bool = True
    seat_wind: Optional[Wind] = None
    round_wind: Optional[Wind] = None
    is_last_tile: bool = False      # 海底捞月 / 河底捞鱼
    is_kong_draw: bool = False      # 杠上开花
    is_robbing_kong: bool = False   # 抢杠

    @classmethod
    def exposed(cls, is_self_draw: bool = False) -> 'WinContext':
        """Context for a hand with exposed melds."""
        return cls(is_self_draw=is_self_draw, is_concealed=False)


WinContext.DEFAULT = WinContext()
WinContext.SELF_DRAW = WinContext(is_self_draw=True)


def detect_patterns(hand: Hand, context: WinContext) -> List[Pattern]:
    """Detect all applicable patterns for the hand, after exclusions."""
    patterns = [Pattern.BASIC_WIN]

    if context.is_self_draw:
        patterns.append(Pattern.SELF_DRAW)
    if context.is_concealed:
        patterns.append(Pattern.CONCEALED_HAND)

    # Thirteen orphans scores on its own name only
    if is_thirteen_orphans(hand.tiles):
        patterns.append(Pattern.THIRTEEN_ORPHANS)
        return apply_exclusions(patterns)

    if is_seven_pairs(hand.tiles):
        patterns.append(Pattern.SEVEN_PAIRS)

    if hand.melds is not None:
        melds = hand.melds
        if is_all_chows(melds):
            patterns.append(Pattern.ALL_CHOWS)
        if is_all_pongs(melds):
            patterns.append(Pattern.ALL_PONGS)

        patterns.extend([Pattern.DRAGON_PUNG] * count_dragon_pungs(melds))

        # Seat and round wind stack when they are the same wind
        if has_seat_wind_pung(melds, context.seat_wind):
            patterns.append(Pattern.SEAT_WIND_PUNG)
        if has_round_wind_pung(melds, context.round_wind):
            patterns.append(Pattern.ROUND_WIND_PUNG)

        if is_big_three_dragons(melds):
            patterns.append(Pattern.BIG_THREE_DRAGONS)
        elif is_little_three_dragons(melds):
            patterns.append(Pattern.LITTLE_THREE_DRAGONS)

    # First match only; order matters for hands matching two predicates
    suit_checks = [
        (is_all_honors, Pattern.ALL_HONORS),
        (is_all_terminals, Pattern.ALL_TERMINALS),
        (is_mixed_terminals, Pattern.MIXED_TERMINALS),
        (is_pure_hand, Pattern.PURE_HAND),
        (is_half_flush, Pattern.HALF_FLUSH),
    ]
    for check, pattern in suit_checks:
        if check(hand.tiles):
            patterns.append(pattern)
            break

    return apply_exclusions(patterns)


def apply_exclusions(patterns: List[Pattern]) -> List[Pattern]:
    """Remove every pattern superseded by another pattern in the list."""
    to_remove: Set[Pattern] = set()
    for pattern in patterns:
        to_remove |= EXCLUSIONS.get(pattern, set())
    return [p for p in patterns if p not in to_remove]


# === Meld-based patterns ===

def is_all_chows(melds: Sequence[Meld]) -> bool:
    sets = [m for m in melds if m.is_set]
    return len(sets) > 0 and all(m.meld_type == MeldType.CHOW for m in sets)


def is_all_pongs(melds: Sequence[Meld]) -> bool:
    """All sets are pongs or kongs; the pair does not count."""
    sets = [m for m in melds if m.is_set]
    return len(sets) > 0 and all(m.is_pong_or_kong for m in sets)


def count_dragon_pungs(melds: Sequence[Meld]) -> int:
    return sum(1 for m in melds if m.is_pong_or_kong and isinstance(m.tile, DragonTile))


def _has_wind_pung(melds: Sequence[Meld], wind: Optional[Wind]) -> bool:
    if wind is None:
        return False
    return any(m.is_pong_or_kong and m.tile == WindTile(wind) for m in melds)


def has_seat_wind_pung(melds: Sequence[Meld], seat_wind: Optional[Wind]) -> bool:
    return _has_wind_pung(melds, seat_wind)


def has_round_wind_pung(melds: Sequence[Meld], round_wind: Optional[Wind]) -> bool:
    return _has_wind_pung(melds, round_wind)


def is_little_three_dragons(melds: Sequence[Meld]) -> bool:
    """Two dragon pungs plus a dragon pair."""
    has_dragon_pair = any(
        m.meld_type == MeldType.PAIR and isinstance(m.tile, DragonTile) for m in melds
    )
    return count_dragon_pungs(melds) == 2 and has_dragon_pair


def is_big_three_dragons(melds: Sequence[Meld]) -> bool:
    return count_dragon_pungs(melds) == 3


# === Suit-based patterns (over all tiles) ===

def is_pure_hand(tiles: Sequence[Tile]) -> bool:
    """All tiles numbered, one suit."""
    if not tiles:
        return False
    if not all(isinstance(t, NumberedTile) for t in tiles):
        return False
    return len({t.suit for t in tiles}) == 1


def is_half_flush(tiles: Sequence[Tile]) -> bool:
    """One numbered suit plus honors, at least one of each."""
    numbered = [t for t in tiles if isinstance(t, NumberedTile)]
    honors = [t for t in tiles if t.is_honor]
    if not numbered or not honors:
        return False
    return len({t.suit for t in numbered}) == 1


def is_all_honors(tiles: Sequence[Tile]) -> bool:
    return len(tiles) > 0 and all(t.is_honor for t in tiles)


def is_all_terminals(tiles: Sequence[Tile]) -> bool:
    return len(tiles) > 0 and all(t.is_terminal for t in tiles)


def is_mixed_terminals(tiles: Sequence[Tile]) -> bool:
    """Only terminals and honors, with at least one of each."""
    if not tiles:
        return False
    has_terminal = any(t.is_terminal for t in tiles)
    has_honor = any(t.is_honor for t in tiles)
    return has_terminal and has_honor and all(t.is_terminal_or_honor for t in tiles)
