"""World time: the day/night clock, seasons and seasonal festivals."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum
from typing import NamedTuple


class Season(IntEnum):
    """The four seasons, in the order they follow each other."""

    SPRING = 0
    SUMMER = 1
    AUTUMN = 2
    WINTER = 3

    def following(self) -> Season:
        """The season that comes after this one."""
        return Season((self + 1) % len(Season))


DEFAULT_DAY_LENGTH = 600.0
DEFAULT_DAYS_PER_SEASON = 30
NIGHT_ENDS = 0.25
NIGHT_BEGINS = 0.75

FESTIVAL_DESCRIPTION = "Your kingdom celebrates the change of seasons with a grand festival."
FESTIVAL_GOLD_COST_PER_TIER = 100.0

_FESTIVAL_NAMES = {
    Season.SPRING: "Spring Bloom Festival",
    Season.SUMMER: "Summer Solstice Celebration",
    Season.AUTUMN: "Autumn Harvest Feast",
    Season.WINTER: "Winter's Eve Ceremony",
}

_SEASONAL_BONUS = {
    Season.SPRING: ("FoodProduction", 15.0),
    Season.SUMMER: ("CombatRenown", 15.0),
    Season.AUTUMN: ("ResourceProduction", 15.0),
    Season.WINTER: ("QuestRenown", 15.0),
}


def festival_name(season: Season | int) -> str:
    """Name of the festival held when the given season begins."""
    return _FESTIVAL_NAMES[Season(season)]


def festival_outcomes(season: Season | int, tier_level: int) -> dict[str, float]:
    """Effects of a seasonal festival; its gold cost grows with the kingdom tier."""
    bonus_key, bonus_value = _SEASONAL_BONUS[Season(season)]
    return {
        "KingdomHappiness": 10.0,
        "FollowerAttraction": 5.0,
        "Gold": -FESTIVAL_GOLD_COST_PER_TIER * int(tier_level),
        bonus_key: bonus_value,
    }


class TimeAdvance(NamedTuple):
    """What happened during one call to WorldClock.advance."""

    day_passed: bool
    season_changed: bool


DayListener = Callable[[int], None]
SeasonListener = Callable[[Season], None]


@dataclass
class WorldClock:
    """Tracks the time of day, the day within the season and the season."""

    time_scale: float = 1.0
    day_length: float = DEFAULT_DAY_LENGTH
    days_per_season: int = DEFAULT_DAYS_PER_SEASON
    current_day_time: float = 0.0
    current_day: int = 1
    current_season: Season = Season.SPRING
    day_listeners: list[DayListener] = field(default_factory=list, repr=False, compare=False)
    season_listeners: list[SeasonListener] = field(default_factory=list, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.day_length <= 0:
            raise ValueError("day_length must be positive")
        if self.days_per_season < 1:
            raise ValueError("days_per_season must be at least 1")
        self.current_season = Season(self.current_season)

    def advance(self, delta_time: float) -> TimeAdvance:
        """Move the clock forward by scaled time; at most one day turns per call."""
        self.current_day_time += delta_time * self.time_scale
        if self.current_day_time < self.day_length:
            return TimeAdvance(False, False)

        self.current_day_time -= self.day_length
        self.current_day += 1
        for listener in list(self.day_listeners):
            listener(self.current_day)

        if self.current_day <= self.days_per_season:
            return TimeAdvance(True, False)

        self.current_day = 1
        self.current_season = self.current_season.following()
        for listener in list(self.season_listeners):
            listener(self.current_season)
        return TimeAdvance(True, True)

    def time_of_day(self) -> float:
        """Fraction of the current day that has elapsed."""
        return self.current_day_time / self.day_length

    def is_night(self) -> bool:
        """Whether it is currently night (early or late in the day)."""
        fraction = self.time_of_day()
        return fraction < NIGHT_ENDS or fraction > NIGHT_BEGINS