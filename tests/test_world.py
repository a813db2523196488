import pytest

from oathkeep.world import (
    Season,
    TimeAdvance,
    WorldClock,
    festival_name,
    festival_outcomes,
)


def test_default_clock_starts_on_first_day_of_spring():
    clock = WorldClock()
    assert clock.day_length == 600.0
    assert clock.days_per_season == 30
    assert (clock.current_day, clock.current_season) == (1, Season.SPRING)


def test_advance_within_day_only_moves_time():
    clock = WorldClock(day_length=100.0)
    result = clock.advance(40.0)
    assert result == TimeAdvance(False, False)
    assert clock.current_day_time == pytest.approx(40.0)
    assert clock.current_day == 1


def test_advance_full_day_increments_day():
    clock = WorldClock(day_length=100.0)
    result = clock.advance(100.0)
    assert result == TimeAdvance(True, False)
    assert clock.current_day == 2
    assert clock.current_day_time == pytest.approx(0.0)


def test_time_scale_multiplies_elapsed_time():
    clock = WorldClock(day_length=100.0, time_scale=2.0)
    clock.advance(30.0)
    assert clock.current_day_time == pytest.approx(60.0)


def test_only_one_day_passes_per_call():
    clock = WorldClock(day_length=100.0)
    clock.advance(300.0)
    assert clock.current_day == 2
    assert clock.current_day_time == pytest.approx(200.0)


def test_season_rolls_over_after_days_per_season():
    clock = WorldClock(day_length=10.0, days_per_season=2)
    assert clock.advance(10.0) == TimeAdvance(True, False)
    assert clock.advance(10.0) == TimeAdvance(True, True)
    assert clock.current_day == 1
    assert clock.current_season is Season.SUMMER


def test_winter_wraps_to_spring():
    clock = WorldClock(day_length=10.0, days_per_season=1, current_season=Season.WINTER)
    clock.advance(10.0)
    assert clock.current_season is Season.SPRING


def test_listeners_receive_day_and_season():
    clock = WorldClock(day_length=10.0, days_per_season=1)
    days, seasons = [], []
    clock.day_listeners.append(days.append)
    clock.season_listeners.append(seasons.append)
    clock.advance(10.0)
    assert days == [2]
    assert seasons == [Season.SUMMER]


def test_time_of_day_fraction():
    clock = WorldClock(day_length=200.0)
    clock.advance(50.0)
    assert clock.time_of_day() == pytest.approx(50.0 / 200.0)


@pytest.mark.parametrize("elapsed, night", [(0.0, True), (50.0, False), (90.0, True)])
def test_is_night(elapsed, night):
    clock = WorldClock(day_length=100.0)
    clock.advance(elapsed)
    assert clock.is_night() is night


@pytest.mark.parametrize("kwargs", [{"day_length": 0.0}, {"days_per_season": 0}])
def test_invalid_configuration_rejected(kwargs):
    with pytest.raises(ValueError):
        WorldClock(**kwargs)


def test_season_following_cycles_through_all():
    seen = []
    season = Season.SPRING
    for _ in range(4):
        season = season.following()
        seen.append(season)
    assert seen == [Season.SUMMER, Season.AUTUMN, Season.WINTER, Season.SPRING]


@pytest.mark.parametrize(
    "season, name",
    [
        (Season.SPRING, "Spring Bloom Festival"),
        (Season.SUMMER, "Summer Solstice Celebration"),
        (Season.AUTUMN, "Autumn Harvest Feast"),
        (Season.WINTER, "Winter's Eve Ceremony"),
    ],
)
def test_festival_name(season, name):
    assert festival_name(season) == name
    assert festival_name(int(season)) == name


def test_festival_name_rejects_unknown_season():
    with pytest.raises(ValueError):
        festival_name(7)


def test_festival_gold_cost_scales_with_tier():
    assert festival_outcomes(Season.SPRING, 0)["Gold"] == 0
    one = festival_outcomes(Season.SPRING, 1)["Gold"]
    three = festival_outcomes(Season.SPRING, 3)["Gold"]
    assert one < 0
    assert three == pytest.approx(3 * one)


@pytest.mark.parametrize(
    "season, key",
    [
        (Season.SPRING, "FoodProduction"),
        (Season.SUMMER, "CombatRenown"),
        (Season.AUTUMN, "ResourceProduction"),
        (Season.WINTER, "QuestRenown"),
    ],
)
def test_festival_seasonal_bonus(season, key):
    outcomes = festival_outcomes(season, 1)
    assert key in outcomes
    assert set(outcomes) == {"KingdomHappiness", "FollowerAttraction", "Gold", key}


def test_festival_common_outcomes_same_every_season():
    values = {
        (festival_outcomes(s, 2)["KingdomHappiness"], festival_outcomes(s, 2)["FollowerAttraction"])
        for s in Season
    }
    assert len(values) == 1
    assert festival_outcomes(Season.WINTER, 2)["KingdomHappiness"] == 10.0