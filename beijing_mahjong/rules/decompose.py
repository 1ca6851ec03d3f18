"""Win (胡牌) detection - standard form, seven pairs, thirteen orphans.

Returns all possible decompositions for a winning hand. Decompositions are
lists of Meld; search works on 34-length count arrays in catalog order.
"""

from typing import List, Optional, Sequence

from beijing_mahjong.core.meld import Meld
from beijing_mahjong.core.tile import (
    ALL_TILES, HONOR_TILES, TERMINAL_TILES, NumberedTile, Tile, tiles_to_34_array,
)

Decomposition = List[Meld]

# Terminal + honor tile indices in 34 encoding
ORPHAN_INDICES = sorted(t.index34 for t in TERMINAL_TILES + HONOR_TILES)

SETS_NEEDED = 4


def decompose_hand(tiles: Sequence[Tile]) -> List[Decomposition]:
    """Find every legal decomposition of a 14-tile hand.

    Seven pairs comes first, then thirteen orphans, then one standard
    decomposition per viable pair. Returns [] if the hand is not 14 tiles
    or cannot win.
    """
    if len(tiles) != 14:
        return []

    tiles_34 = tiles_to_34_array(tiles)
    results: List[Decomposition] = []

    seven_pairs = _parse_seven_pairs(tiles_34)
    if seven_pairs is not None:
        results.append(seven_pairs)

    orphans = _parse_thirteen_orphans(tiles_34)
    if orphans is not None:
        results.append(orphans)

    results.extend(decompose_standard(tiles_34))
    return results


def is_valid_winning_hand(tiles: Sequence[Tile]) -> bool:
    """Check if the tiles form a winning hand (any form)."""
    return len(decompose_hand(tiles)) > 0


def decompose_standard(tiles_34: List[int]) -> List[Decomposition]:
    """Find standard decompositions (4 sets + 1 pair).

    Each tile with count >= 2 is tried as the pair; the remaining 12 tiles
    are covered greedily (pong before chow), keeping the first cover found.
    """
    if sum(tiles_34) != 14:
        return []

    results = []
    for pair_idx in range(34):
        if tiles_34[pair_idx] < 2:
            continue
        remaining = list(tiles_34)
        remaining[pair_idx] -= 2
        sets: List[Meld] = []
        if _extract_sets(remaining, SETS_NEEDED, sets):
            results.append(sets + [Meld.pair(ALL_TILES[pair_idx])])
    return results


def _extract_sets(tiles: List[int], needed: int, result: List[Meld]) -> bool:
    """Extract exactly 'needed' sets from tiles (greedy, finds one solution).

    Counts are decremented in place and restored when a branch fails.
    """
    if needed == 0:
        return all(c == 0 for c in tiles)

    idx = 0
    while idx < 34 and tiles[idx] == 0:
        idx += 1

    if idx >= 34:
        return False

    tile = ALL_TILES[idx]

    # Try pong
    if tiles[idx] >= 3:
        tiles[idx] -= 3
        result.append(Meld.pong(tile))
        if _extract_sets(tiles, needed - 1, result):
            return True
        result.pop()
        tiles[idx] += 3

    # Try chow - numbered tiles 1..7 only
    if isinstance(tile, NumberedTile) and tile.number <= 7:
        if tiles[idx + 1] >= 1 and tiles[idx + 2] >= 1:
            tiles[idx] -= 1
            tiles[idx + 1] -= 1
            tiles[idx + 2] -= 1
            result.append(Meld.chow(tile))
            if _extract_sets(tiles, needed - 1, result):
                return True
            result.pop()
            tiles[idx] += 1
            tiles[idx + 1] += 1
            tiles[idx + 2] += 1

    return False


def _parse_seven_pairs(tiles_34: List[int]) -> Optional[Decomposition]:
    # Exactly 7 distinct tiles, each exactly twice; 4-of-a-kind is not two pairs
    if sum(tiles_34) != 14:
        return None
    if any(c not in (0, 2) for c in tiles_34):
        return None
    return [Meld.pair(ALL_TILES[i]) for i, c in enumerate(tiles_34) if c == 2]


def _parse_thirteen_orphans(tiles_34: List[int]) -> Optional[Decomposition]:
    """One of each terminal/honor plus one duplicate.

    Represented as the single pair; the 12 singles are implicit.
    """
    if sum(tiles_34) != 14:
        return None
    pair_idx = None
    for idx in ORPHAN_INDICES:
        if tiles_34[idx] == 0:
            return None
        if tiles_34[idx] == 2:
            pair_idx = idx
    if pair_idx is None:
        return None
    return [Meld.pair(ALL_TILES[pair_idx])]


def is_seven_pairs(tiles: Sequence[Tile]) -> bool:
    """Check seven pairs (七对子) form."""
    return _parse_seven_pairs(tiles_to_34_array(tiles)) is not None


def is_thirteen_orphans(tiles: Sequence[Tile]) -> bool:
    """Check thirteen orphans (十三幺) form."""
    return _parse_thirteen_orphans(tiles_to_34_array(tiles)) is not None


def get_hand_type(tiles: Sequence[Tile]) -> Optional[str]:
    """Determine the winning shape: 'thirteen_orphans', 'seven_pairs', 'standard', or None."""
    if len(tiles) != 14:
        return None
    if is_thirteen_orphans(tiles):
        return 'thirteen_orphans'
    if is_seven_pairs(tiles):
        return 'seven_pairs'
    if decompose_standard(tiles_to_34_array(tiles)):
        return 'standard'
    return None
