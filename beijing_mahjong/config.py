"""Scorer configuration."""

import os
from typing import Optional

from beijing_mahjong.core.tile import Wind
from beijing_mahjong.logging import resolve_json_mode, resolve_log_level
from beijing_mahjong.rules.patterns import WinContext

LANGUAGES = ("zh", "en")


def parse_wind(value: Optional[str]) -> Optional[Wind]:
    """Parse a wind name ('east'), letter ('E') or character ('东'). Empty -> None."""
    if value is None or not value.strip():
        return None
    value = value.strip()
    for wind in Wind:
        if value.upper() in (wind.name, wind.name[0]) or value in (wind.chinese, wind.english):
            return wind
    if value == '東':
        return Wind.EAST
    raise ValueError(f"unknown wind: {value!r}")


class ScorerConfig:
    """Scorer configuration."""

    def __init__(
        self,
        language: str = "zh",
        seat_wind: Optional[Wind] = None,
        round_wind: Optional[Wind] = None,
        log_level: str = "WARNING",
        log_format: str = "",
    ):
        if language not in LANGUAGES:
            raise ValueError(f"language must be one of {LANGUAGES}, got {language!r}")
        resolve_log_level(log_level)
        resolve_json_mode(log_format)

        self.language = language
        self.seat_wind = seat_wind
        self.round_wind = round_wind
        self.log_level = log_level.upper()
        self.log_format = log_format.lower()

    @classmethod
    def from_env(cls) -> 'ScorerConfig':
        """Build from MAHJONG_LANG, MAHJONG_SEAT_WIND, MAHJONG_ROUND_WIND, LOG_LEVEL, LOG_FORMAT."""
        return cls(
            language=os.environ.get("MAHJONG_LANG", "zh").lower(),
            seat_wind=parse_wind(os.environ.get("MAHJONG_SEAT_WIND")),
            round_wind=parse_wind(os.environ.get("MAHJONG_ROUND_WIND")),
            log_level=os.environ.get("LOG_LEVEL", "WARNING"),
            log_format=os.environ.get("LOG_FORMAT", ""),
        )

    def win_context(self, is_self_draw: bool = False, is_concealed: bool = True) -> WinContext:
        """WinContext carrying the configured winds."""
        return WinContext(
            is_self_draw=is_self_draw,
            is_concealed=is_concealed,
            seat_wind=self.seat_wind,
            round_wind=self.round_wind,
        )
