"""Tile display formatting with colors for terminal output."""

from typing import Sequence

from rich.text import Text

from beijing_mahjong.core.meld import Meld
from beijing_mahjong.core.tile import Suit, Tile, tile_34_to_name


# Color schemes
SUIT_COLORS = {
    Suit.DOTS: "blue",
    Suit.BAMBOO: "green",
    Suit.CHARACTERS: "red",
    Suit.WIND: "yellow",
    Suit.DRAGON: "yellow",
}


def tile_to_simple_str(tile: Tile) -> str:
    """Short name like '1p', '9m', '东' (stable, language-independent)."""
    return tile_34_to_name(tile.index34)


def tile_to_display_str(tile: Tile, lang: str = "zh") -> str:
    """Full tile name for the chosen label language."""
    return tile.name if lang == "en" else tile.chinese_name


def tile_to_rich_text(tile: Tile) -> Text:
    """Convert a tile to a Rich Text object with appropriate colors."""
    style = f"bold {SUIT_COLORS[tile.suit]}"
    return Text(f"[{tile_to_simple_str(tile)}]", style=style)


def tiles_to_rich_text(tiles: Sequence[Tile], separator: str = " ") -> Text:
    """Convert a list of tiles to Rich Text."""
    result = Text()
    for i, tile in enumerate(tiles):
        if i > 0:
            result.append(separator)
        result.append_text(tile_to_rich_text(tile))
    return result


def meld_to_rich_text(meld: Meld, lang: str = "zh") -> Text:
    """Tiles of a meld followed by its name, e.g. '[1p][2p][3p] 吃'."""
    name = meld.english_name if lang == "en" else meld.chinese_name
    result = tiles_to_rich_text(meld.tiles, separator="")
    result.append(f" {name}", style="dim")
    return result
