"""Meld data structures: Pair / Pong / Kong / Chow."""

from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Tuple

from .tile import NumberedTile, Tile


class MeldType(Enum):
    PAIR = "pair"    # 对
    PONG = "pong"    # 碰
    KONG = "kong"    # 杠
    CHOW = "chow"    # 吃


class InvalidMeldError(ValueError):
    """Raised when a meld is constructed from tiles that cannot form it."""


@dataclass(frozen=True)
class Meld:
    """A frozen meld.

    Attributes:
        meld_type: Shape of the meld
        tile: The repeated tile (pair/pong/kong) or the lowest tile (chow)
        is_concealed: Concealed (暗杠) vs exposed (明杠) kong; display only
    """
    meld_type: MeldType
    tile: Tile
    is_concealed: bool = False

    def __post_init__(self):
        if self.meld_type == MeldType.CHOW:
            if not isinstance(self.tile, NumberedTile):
                raise InvalidMeldError(f"chow must start with a numbered tile, got {self.tile.id}")
            if self.tile.number > 7:
                raise InvalidMeldError(f"chow must start with tile 1-7, got {self.tile.number}")

    @classmethod
    def pair(cls, tile: Tile) -> 'Meld':
        return cls(MeldType.PAIR, tile)

    @classmethod
    def pong(cls, tile: Tile) -> 'Meld':
        return cls(MeldType.PONG, tile)

    @classmethod
    def kong(cls, tile: Tile, is_concealed: bool = False) -> 'Meld':
        return cls(MeldType.KONG, tile, is_concealed)

    @classmethod
    def chow(cls, start: Tile) -> 'Meld':
        return cls(MeldType.CHOW, start)

    @property
    def tiles(self) -> Tuple[Tile, ...]:
        if self.meld_type == MeldType.CHOW:
            return tuple(NumberedTile(self.tile.suit, n) for n in self.numbers)
        if self.meld_type == MeldType.PAIR:
            return (self.tile,) * 2
        if self.meld_type == MeldType.PONG:
            return (self.tile,) * 3
        return (self.tile,) * 4

    @property
    def size(self) -> int:
        return len(self.tiles)

    @property
    def numbers(self) -> List[int]:
        """The three numbers of a chow (e.g. [2, 3, 4]); empty for other melds."""
        if self.meld_type != MeldType.CHOW:
            return []
        start = self.tile.number
        return [start, start + 1, start + 2]

    @property
    def is_set(self) -> bool:
        return self.meld_type != MeldType.PAIR

    @property
    def is_pong_or_kong(self) -> bool:
        return self.meld_type in (MeldType.PONG, MeldType.KONG)

    @property
    def chinese_name(self) -> str:
        if self.meld_type == MeldType.KONG:
            return "暗杠" if self.is_concealed else "明杠"
        return {MeldType.PAIR: "对", MeldType.PONG: "碰", MeldType.CHOW: "吃"}[self.meld_type]

    @property
    def english_name(self) -> str:
        if self.meld_type == MeldType.KONG:
            return "Concealed Kong" if self.is_concealed else "Exposed Kong"
        return self.meld_type.name.capitalize()


def try_pair(t1: Tile, t2: Tile) -> Optional[Meld]:
    """Pair from two identical tiles, or None."""
    return Meld.pair(t1) if t1 == t2 else None


def try_pong(t1: Tile, t2: Tile, t3: Tile) -> Optional[Meld]:
    """Pong from three identical tiles, or None."""
    return Meld.pong(t1) if t1 == t2 == t3 else None


def try_kong(t1: Tile, t2: Tile, t3: Tile, t4: Tile,
             is_concealed: bool = False) -> Optional[Meld]:
    """Kong from four identical tiles, or None."""
    return Meld.kong(t1, is_concealed) if t1 == t2 == t3 == t4 else None


def try_chow(t1: Tile, t2: Tile, t3: Tile) -> Optional[Meld]:
    """Chow from three consecutive numbered tiles of one suit (any order), or None."""
    tiles = [t1, t2, t3]
    if not all(isinstance(t, NumberedTile) for t in tiles):
        return None
    if len({t.suit for t in tiles}) != 1:
        return None
    low, mid, high = sorted(tiles, key=lambda t: t.number)
    if mid.number != low.number + 1 or high.number != mid.number + 1:
        return None
    return Meld.chow(low)
