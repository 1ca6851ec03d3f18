"""Tile definitions for Beijing Mahjong (34 tile types, no flowers).

Tiles are organized into:
- Numbered tiles (1-9): Dots, Bamboo, Characters (27 tiles)
- Honor tiles: Winds (4) + Dragons (3) = 7 tiles
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Optional, Union


class Suit(Enum):
    DOTS = ("筒", "Dots", True)          # 筒子
    BAMBOO = ("条", "Bamboo", True)      # 条子
    CHARACTERS = ("万", "Characters", True)  # 万子
    WIND = ("风", "Wind", False)         # 风牌
    DRAGON = ("箭", "Dragon", False)     # 箭牌

    def __init__(self, chinese: str, english: str, is_numbered: bool):
        self.chinese = chinese
        self.english = english
        self.is_numbered = is_numbered

    @property
    def is_honor(self) -> bool:
        return not self.is_numbered


NUMBERED_SUITS = (Suit.DOTS, Suit.BAMBOO, Suit.CHARACTERS)


class Wind(Enum):
    EAST = ("东", "East")
    SOUTH = ("南", "South")
    WEST = ("西", "West")
    NORTH = ("北", "North")

    def __init__(self, chinese: str, english: str):
        self.chinese = chinese
        self.english = english


class Dragon(Enum):
    RED = ("中", "Red")      # 红中
    GREEN = ("发", "Green")  # 发财
    WHITE = ("白", "White")  # 白板

    def __init__(self, chinese: str, english: str):
        self.chinese = chinese
        self.english = english


CHINESE_NUMERALS = ["一", "二", "三", "四", "五", "六", "七", "八", "九"]


class UnknownTileError(ValueError):
    """Raised when an identifier or shorthand does not name a tile."""


@dataclass(frozen=True)
class NumberedTile:
    suit: Suit
    number: int

    def __post_init__(self):
        if not self.suit.is_numbered:
            raise ValueError(f"suit must be DOTS, BAMBOO or CHARACTERS, got {self.suit.name}")
        if not (1 <= self.number <= 9):
            raise ValueError(f"number must be 1..9, got {self.number}")

    @property
    def id(self) -> str:
        return f"{self.suit.name}_{self.number}"

    @property
    def name(self) -> str:
        return f"{self.number} {self.suit.english}"

    @property
    def chinese_name(self) -> str:
        return f"{CHINESE_NUMERALS[self.number - 1]}{self.suit.chinese}"

    @property
    def index34(self) -> int:
        return NUMBERED_SUITS.index(self.suit) * 9 + self.number - 1

    @property
    def is_terminal(self) -> bool:
        return self.number in (1, 9)

    @property
    def is_simple(self) -> bool:
        return 2 <= self.number <= 8

    @property
    def is_honor(self) -> bool:
        return False

    @property
    def is_terminal_or_honor(self) -> bool:
        return self.is_terminal

    def __repr__(self):
        return f"Tile({self.id})"


@dataclass(frozen=True)
class WindTile:
    wind: Wind

    @property
    def suit(self) -> Suit:
        return Suit.WIND

    @property
    def id(self) -> str:
        return f"WIND_{self.wind.name}"

    @property
    def name(self) -> str:
        return f"{self.wind.english} Wind"

    @property
    def chinese_name(self) -> str:
        return self.wind.chinese

    @property
    def index34(self) -> int:
        return 27 + list(Wind).index(self.wind)

    @property
    def is_terminal(self) -> bool:
        return False

    @property
    def is_honor(self) -> bool:
        return True

    @property
    def is_terminal_or_honor(self) -> bool:
        return True

    def __repr__(self):
        return f"Tile({self.id})"


@dataclass(frozen=True)
class DragonTile:
    dragon: Dragon

    @property
    def suit(self) -> Suit:
        return Suit.DRAGON

    @property
    def id(self) -> str:
        return f"DRAGON_{self.dragon.name}"

    @property
    def name(self) -> str:
        return f"{self.dragon.english} Dragon"

    @property
    def chinese_name(self) -> str:
        return self.dragon.chinese

    @property
    def index34(self) -> int:
        return 31 + list(Dragon).index(self.dragon)

    @property
    def is_terminal(self) -> bool:
        return False

    @property
    def is_honor(self) -> bool:
        return True

    @property
    def is_terminal_or_honor(self) -> bool:
        return True

    def __repr__(self):
        return f"Tile({self.id})"


Tile = Union[NumberedTile, WindTile, DragonTile]


# Catalog order: Dots 1-9, Bamboo 1-9, Characters 1-9, winds, dragons.
# Every deterministic enumeration (decomposition, seven pairs) follows it.
ALL_TILES: List[Tile] = (
    [NumberedTile(suit, n) for suit in NUMBERED_SUITS for n in range(1, 10)]
    + [WindTile(w) for w in Wind]
    + [DragonTile(d) for d in Dragon]
)

NUMBERED_TILES: List[NumberedTile] = [t for t in ALL_TILES if isinstance(t, NumberedTile)]
TERMINAL_TILES: List[NumberedTile] = [t for t in NUMBERED_TILES if t.is_terminal]
HONOR_TILES: List[Tile] = [t for t in ALL_TILES if t.is_honor]
WIND_TILES: List[WindTile] = [t for t in ALL_TILES if isinstance(t, WindTile)]
DRAGON_TILES: List[DragonTile] = [t for t in ALL_TILES if isinstance(t, DragonTile)]

_TILES_BY_ID: Dict[str, Tile] = {t.id: t for t in ALL_TILES}

# Short names for 34 encoding (p=Dots 筒, s=Bamboo 条, m=Characters 万)
TILE_NAMES_34 = [
    "1p", "2p", "3p", "4p", "5p", "6p", "7p", "8p", "9p",
    "1s", "2s", "3s", "4s", "5s", "6s", "7s", "8s", "9s",
    "1m", "2m", "3m", "4m", "5m", "6m", "7m", "8m", "9m",
    "东", "南", "西", "北", "中", "发", "白",
]


def tile_from_id(tile_id: str) -> Optional[Tile]:
    """Find a tile by its identifier. Returns None if no tile has that id."""
    return _TILES_BY_ID.get(tile_id)


def tiles_from_ids(tile_ids: Iterable[str]) -> List[Tile]:
    """Resolve a list of identifiers, failing on the first unknown one."""
    tiles = []
    for tile_id in tile_ids:
        tile = tile_from_id(tile_id)
        if tile is None:
            raise UnknownTileError(f"unknown tile id: {tile_id!r}")
        tiles.append(tile)
    return tiles


def tiles_of_suit(suit: Suit) -> List[Tile]:
    """Get all tiles of a specific suit."""
    return [t for t in ALL_TILES if t.suit == suit]


def tile_34_to_name(index34: int) -> str:
    """Get tile short name from 34 encoding."""
    return TILE_NAMES_34[index34]


def tiles_to_34_array(tiles: Iterable[Tile]) -> List[int]:
    """Convert list of tiles to 34-length count array."""
    arr = [0] * 34
    for t in tiles:
        arr[t.index34] += 1
    return arr


_SUIT_CHARS = {'p': Suit.DOTS, 's': Suit.BAMBOO, 'm': Suit.CHARACTERS}

_HONOR_CHARS = {
    '东': WindTile(Wind.EAST), '東': WindTile(Wind.EAST), 'E': WindTile(Wind.EAST),
    '南': WindTile(Wind.SOUTH), 'S': WindTile(Wind.SOUTH),
    '西': WindTile(Wind.WEST), 'W': WindTile(Wind.WEST),
    '北': WindTile(Wind.NORTH), 'N': WindTile(Wind.NORTH),
    '中': DragonTile(Dragon.RED), 'R': DragonTile(Dragon.RED),
    '发': DragonTile(Dragon.GREEN), '發': DragonTile(Dragon.GREEN), 'G': DragonTile(Dragon.GREEN),
    '白': DragonTile(Dragon.WHITE), 'H': DragonTile(Dragon.WHITE),
}


def make_tiles_from_string(s: str) -> List[Tile]:
    """Parse a shorthand string like '123p456s789m东东' into tiles.

    Digits are collected until a suit letter: p (Dots), s (Bamboo),
    m (Characters). Honors are written as their Chinese character or as
    E/S/W/N and R/G/H (Red/Green/White dragon). Whitespace is ignored.
    """
    tiles: List[Tile] = []
    numbers: List[int] = []
    for ch in s:
        if ch.isspace():
            continue
        if ch.isdigit():
            if ch == '0':
                raise UnknownTileError(f"tile number must be 1..9 in {s!r}")
            numbers.append(int(ch))
        elif ch in _SUIT_CHARS:
            if not numbers:
                raise UnknownTileError(f"suit letter {ch!r} without numbers in {s!r}")
            tiles.extend(NumberedTile(_SUIT_CHARS[ch], n) for n in numbers)
            numbers = []
        elif ch in _HONOR_CHARS:
            if numbers:
                raise UnknownTileError(f"numbers without suit letter in {s!r}")
            tiles.append(_HONOR_CHARS[ch])
        else:
            raise UnknownTileError(f"unknown tile character {ch!r} in {s!r}")
    if numbers:
        raise UnknownTileError(f"numbers without suit letter in {s!r}")
    return tiles
