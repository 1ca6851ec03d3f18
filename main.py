#!/usr/bin/env python3
"""Beijing Mahjong Scorer - Terminal CLI

Usage:
    python main.py                          # interactive menu
    python main.py 111222333444p55p         # score one hand
    python main.py 123p456p234s567m东东 --self-draw --seat-wind E --lang en
"""

import argparse
from dataclasses import replace
from typing import List, Optional

from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from beijing_mahjong.config import ScorerConfig, parse_wind
from beijing_mahjong.core.hand import Hand
from beijing_mahjong.core.tile import make_tiles_from_string
from beijing_mahjong.logging import setup_logging
from beijing_mahjong.rules.patterns import WinContext
from beijing_mahjong.rules.scoring import calculate_score, get_all_possible_scores
from beijing_mahjong.ui.score_layout import (
    render_all_scores, render_context, render_hand, render_score,
)

console = Console()


class Session:
    """Interactive state: the win context being edited and the label language."""

    def __init__(self, config: ScorerConfig):
        self.language = config.language
        self.context = config.win_context()

    def toggle_self_draw(self):
        self.context = replace(self.context, is_self_draw=not self.context.is_self_draw)

    def toggle_concealed(self):
        self.context = replace(self.context, is_concealed=not self.context.is_concealed)

    def set_seat_wind(self, value: str):
        self.context = replace(self.context, seat_wind=parse_wind(value))

    def set_round_wind(self, value: str):
        self.context = replace(self.context, round_wind=parse_wind(value))

    def switch_language(self):
        self.language = "en" if self.language == "zh" else "zh"


def score_hand(hand_str: str, context: WinContext, lang: str = "zh",
               show_all: bool = False) -> bool:
    """Parse, score and render one hand. Returns whether it is a winning hand.

    Raises ValueError (UnknownTileError) for unparseable input.
    """
    tiles = make_tiles_from_string(hand_str)
    hand = Hand(tiles, is_concealed=context.is_concealed)

    render_hand(console, hand.tiles, lang)
    render_context(console, context, lang)

    score = calculate_score(hand, context)
    render_score(console, score, lang)
    if show_all and score.is_win:
        render_all_scores(console, get_all_possible_scores(hand, context), lang)
    return score.is_win


def show_menu(session: Session) -> int:
    """Show the menu and return the chosen option."""
    console.print()
    console.print(Panel(
        "[bold cyan]北京麻将计分 / Beijing Mahjong Scorer[/bold cyan]\n"
        "[dim]例 / e.g. 123p456p234s567m东东, 111p999s东东东中中中北北[/dim]",
        border_style="cyan",
        padding=(1, 4),
    ))
    render_context(console, session.context, session.language)
    console.print()
    console.print("    1. 计分 / Score a hand")
    console.print("    2. 所有可能得分 / All possible scores")
    console.print("    3. 切换自摸 / Toggle self-draw")
    console.print("    4. 切换门清 / Toggle concealed")
    console.print("    5. 设置门风 / Set seat wind")
    console.print("    6. 设置圈风 / Set round wind")
    console.print("    7. 切换语言 / Switch language")
    console.print("    0. 退出 / Quit")
    console.print()

    while True:
        try:
            choice = int(console.input("  > 0-7: ").strip())
            if 0 <= choice <= 7:
                return choice
        except ValueError:
            pass
        console.print("  [red]Invalid / 无效[/red]")


def run_menu(session: Session):
    """Interactive loop until the user quits."""
    while True:
        choice = show_menu(session)
        if choice == 0:
            console.print("\n  再见 / Bye\n")
            return
        try:
            if choice in (1, 2):
                hand_str = console.input("  手牌 / Hand: ")
                score_hand(hand_str, session.context, session.language,
                           show_all=choice == 2)
            elif choice == 3:
                session.toggle_self_draw()
            elif choice == 4:
                session.toggle_concealed()
            elif choice == 5:
                session.set_seat_wind(console.input("  门风 / Seat wind (E/S/W/N, empty=none): "))
            elif choice == 6:
                session.set_round_wind(console.input("  圈风 / Round wind (E/S/W/N, empty=none): "))
            elif choice == 7:
                session.switch_language()
        except ValueError as e:
            console.print(f"  [red]{escape(str(e))}[/red]")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Score a Beijing Mahjong hand")
    parser.add_argument("hand", nargs="?", help="shorthand hand, e.g. 123p456p234s567m东东")
    parser.add_argument("--self-draw", action="store_true", help="won by self-draw")
    parser.add_argument("--exposed", action="store_true", help="hand has exposed melds")
    parser.add_argument("--seat-wind", help="seat wind (E/S/W/N)")
    parser.add_argument("--round-wind", help="round wind (E/S/W/N)")
    parser.add_argument("--lang", choices=["zh", "en"], help="label language")
    parser.add_argument("--all", action="store_true", help="also list all possible scores")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    args = build_parser().parse_args(argv)
    config = ScorerConfig.from_env()
    setup_logging(config.log_level, config.log_format)
    session = Session(config)

    if args.lang:
        session.language = args.lang
    if args.self_draw or args.exposed:
        session.context = replace(
            session.context,
            is_self_draw=args.self_draw,
            is_concealed=not args.exposed,
        )

    try:
        if args.seat_wind is not None:
            session.set_seat_wind(args.seat_wind)
        if args.round_wind is not None:
            session.set_round_wind(args.round_wind)
        if args.hand:
            score_hand(args.hand, session.context, session.language, show_all=args.all)
            return 0
    except ValueError as e:
        console.print(f"  [red]{escape(str(e))}[/red]")
        return 2

    try:
        run_menu(session)
    except (KeyboardInterrupt, EOFError):
        console.print("\n\n  [dim]再见 / Bye[/dim]\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
