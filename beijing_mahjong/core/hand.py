"""Winning hand: the 14 closed tiles plus an optional chosen decomposition."""

from collections import Counter
from dataclasses import dataclass, replace
from typing import Dict, Iterable, List, Optional, Tuple

from .meld import Meld
from .tile import Tile, tiles_to_34_array


@dataclass(frozen=True)
class Hand:
    """One player's hand at the moment of winning.

    Attributes:
        tiles: All tiles of the hand (14 for a complete hand)
        melds: One decomposition of the tiles, or None if not yet decomposed
        winning_tile: The tile that completed the hand (informational)
        is_concealed: Whether no melds were exposed
    """
    tiles: Tuple[Tile, ...]
    melds: Optional[Tuple[Meld, ...]] = None
    winning_tile: Optional[Tile] = None
    is_concealed: bool = True

    def __post_init__(self):
        # Stored as tuples regardless of what the caller passed
        object.__setattr__(self, 'tiles', tuple(self.tiles))
        if self.melds is not None:
            object.__setattr__(self, 'melds', tuple(self.melds))

    @property
    def tile_count(self) -> int:
        return len(self.tiles)

    @property
    def is_complete(self) -> bool:
        return len(self.tiles) == 14

    @property
    def tile_counts(self) -> Dict[str, int]:
        """Count of each tile id in the hand."""
        return dict(Counter(t.id for t in self.tiles))

    def to_34_array(self) -> List[int]:
        return tiles_to_34_array(self.tiles)

    @property
    def melds_cover_tiles(self) -> bool:
        """Whether the attached melds use every tile exactly once.

        Caller-side check for a decomposition built by hand. Scoring does
        not consult it: the thirteen orphans decomposition is only its pair.
        """
        if self.melds is None:
            return False
        meld_tiles = [t for m in self.melds for t in m.tiles]
        return tiles_to_34_array(meld_tiles) == self.to_34_array()

    def with_melds(self, melds: Iterable[Meld]) -> 'Hand':
        """Copy of this hand carrying the given decomposition."""
        return replace(self, melds=tuple(melds))
