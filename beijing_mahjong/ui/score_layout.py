"""Score rendering using Rich."""

from typing import List, Sequence

from rich.console import Console
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from beijing_mahjong.core.tile import Tile
from beijing_mahjong.rules.patterns import WinContext
from beijing_mahjong.rules.scoring import Score
from beijing_mahjong.ui.tile_display import meld_to_rich_text, tiles_to_rich_text

LABELS = {
    "zh": {
        "hand": "手牌",
        "not_win": "不是和牌",
        "patterns": "番种",
        "pattern": "番名",
        "points": "分数",
        "total": "总分",
        "melds": "牌型",
        "all_scores": "所有可能得分",
        "self_draw": "自摸",
        "discard": "点和",
        "concealed": "门清",
        "exposed": "有副露",
        "seat_wind": "门风",
        "round_wind": "圈风",
        "none": "无",
    },
    "en": {
        "hand": "Hand",
        "not_win": "Not a winning hand",
        "patterns": "Patterns",
        "pattern": "Pattern",
        "points": "Points",
        "total": "Total",
        "melds": "Melds",
        "all_scores": "All possible scores",
        "self_draw": "Self draw",
        "discard": "Discard win",
        "concealed": "Concealed",
        "exposed": "Exposed",
        "seat_wind": "Seat wind",
        "round_wind": "Round wind",
        "none": "none",
    },
}


def label(key: str, lang: str = "zh") -> str:
    return LABELS.get(lang, LABELS["zh"])[key]


def render_hand(console: Console, tiles: Sequence[Tile], lang: str = "zh"):
    """Render the tiles of a hand on one line."""
    line = Text(f"  {label('hand', lang)}: ")
    line.append_text(tiles_to_rich_text(list(tiles)))
    console.print(line)


def render_context(console: Console, context: WinContext, lang: str = "zh"):
    """Render the win context as a single dim line."""
    def wind_name(wind):
        if wind is None:
            return label("none", lang)
        return wind.english if lang == "en" else wind.chinese

    parts = [
        label("self_draw" if context.is_self_draw else "discard", lang),
        label("concealed" if context.is_concealed else "exposed", lang),
        f"{label('seat_wind', lang)}: {wind_name(context.seat_wind)}",
        f"{label('round_wind', lang)}: {wind_name(context.round_wind)}",
    ]
    console.print(f"  [dim]{' | '.join(parts)}[/dim]")


def render_score(console: Console, score: Score, lang: str = "zh"):
    """Render a score breakdown, or a notice for a non-winning hand."""
    console.print()
    if not score.is_win:
        console.print(Panel(f"[bold yellow]{label('not_win', lang)}[/bold yellow]",
                            border_style="yellow"))
        return

    if score.melds:
        melds_line = Text(f"  {label('melds', lang)}: ")
        for i, meld in enumerate(score.melds):
            if i > 0:
                melds_line.append("  ")
            melds_line.append_text(meld_to_rich_text(meld, lang))
        console.print(melds_line)

    table = Table(title=label("patterns", lang), show_header=True, border_style="cyan")
    table.add_column(label("pattern", lang), style="bold")
    table.add_column(label("points", lang), justify="right")

    for item in score.items:
        table.add_row(item.pattern.label(lang), f"+{item.points}")
    table.add_row(label("total", lang), str(score.total_points), style="bold green")

    console.print(table)
    console.print()


def render_all_scores(console: Console, scores: List[Score], lang: str = "zh"):
    """Render every distinct total a hand can reach, highest first."""
    if not scores:
        render_score(console, Score.ZERO, lang)
        return

    table = Table(title=label("all_scores", lang), border_style="cyan")
    table.add_column(label("total", lang), justify="right", style="bold")
    table.add_column(label("patterns", lang))

    for score in scores:
        table.add_row(str(score.total_points), score.summary(lang))

    console.print(table)
    console.print()
