# oathkeep

oathkeep holds the rules of a kingdom-building role-playing game as plain Python
objects. It has no graphics and no engine. Each object holds state and applies
the game's formulas, so you can drive it from a simulation, a server or a test.
It has no dependencies beyond the standard library.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Modules

### `oathkeep.building`

`BuildingData` describes a building type: `name`, `size`, `max_occupants`,
`daily_resource_contribution` (a dict of resource name to amount) and
`daily_gold_contribution`.

`Building` is a placed building.

- `set_building_data(data)` installs the data and sets maximum health to
  100 × `size`. It puts the building back under construction.
- `take_damage(amount)` and `repair(amount)` change health within
  `0..max_health_points`. Both do nothing while `under_construction` is true.
  The module never clears that flag, so your code sets
  `under_construction = False` when construction is done.
- `assign_follower(follower)` and `remove_follower(follower)` return `False` in
  three cases: the follower is already assigned, the building is full, or the
  follower is not there to remove.
- `update_efficiency()` computes the health fraction times the staffing
  fraction. The staffing fraction is never below 0.25 when the building has
  occupant slots.
- `resource_output(resource_type)` and `gold_output()` scale the daily amounts
  by `efficiency`.
- `subscribe(callback)` registers `callback(under_construction, health_fraction)`.
  It is called on data changes, damage and repair.

### `oathkeep.reputation`

`Reputation` tracks `combat_renown`, `quest_renown`, `kingdom_reputation` and
`faction_reputations`.

- `gain_combat_renown`, `gain_quest_renown` and `gain_kingdom_reputation` each
  take `(amount, notify=True)`.
- `modify_faction_reputation(faction_name, amount, notify=True)` clamps the
  faction's reputation to [-100, 100].
- `subscribe(callback)` registers `callback(reputation_type, old, new)`. The
  type is `"Combat"`, `"Quest"`, `"Kingdom"` or `"Faction:<name>"`.
- Callbacks in `milestone_listeners` receive `(kind, milestone)` whenever combat
  or quest renown passes 100, 500, 1000, 2500, 5000 or 10000.
- Callbacks in `threshold_listeners` receive `(faction_name, threshold, increased)`
  whenever a faction's reputation crosses a multiple of 25. Crossings are only
  reported after that faction's first change.
- Kingdom tiers: `kingdom_tier()` returns 0 to 4 and `kingdom_tier_name()`
  returns Camp, Village, Town, City or Kingdom. The tiers start at 0, 100, 500,
  1500 and 5000 reputation. `max_followers_for_tier()`,
  `max_buildings_for_tier()` and `reputation_needed_for_next_tier()` go with them.
- `faction_reputation(name)` returns a faction's reputation.
  `faction_standing_name(name)` returns one of Exalted, Honored, Friendly,
  Neutral, Unfriendly, Hostile or Hated.

### `oathkeep.effects`

`StatusEffect` has an `effect_id`, a `StatusEffectType` (`DAMAGE`, `HEALING`,
`SPEED_BOOST`, `ATTACK_BOOST`), a strength, a remaining duration and an
`applies_over_time` flag.

`ActiveEffects` holds the effects on one bearer. The bearer is the optional
`target` and provides `apply_immediate(effect)`,
`apply_over_time(effect, delta_time)` and `revert(effect)`.

- `add(effect)` stores a copy. An effect with the same id is replaced. A new
  one-off effect is applied at once.
- `remove(effect_id)` reverts the effect, removes it and returns it. It returns
  `None` if no effect has that id.
- `tick(delta_time)` ages every effect and applies the over-time ones. It
  removes the expired effects and returns them.
- `added_listeners` and `removed_listeners` hold callbacks that receive the effect.

### `oathkeep.world`

`WorldClock` keeps the time of day, the day of the season and the `Season`. The
defaults are a 600-second day and 30 days per season.

- `advance(delta_time)` scales the time by `time_scale` and turns at most one
  day per call. It returns a `TimeAdvance(day_passed, season_changed)`.
- Callbacks in `day_listeners` receive the new day. Callbacks in
  `season_listeners` receive the new season.
- `time_of_day()` returns the fraction of the day that has passed.
- `is_night()` is true before 0.25 and after 0.75 of the day.

`festival_name(season)` gives the name of each season's festival.
`festival_outcomes(season, tier_level)` gives its effects, including a gold
cost of 100 per tier level.

## Example

```python
from oathkeep.building import Building, BuildingData
from oathkeep.reputation import Reputation
from oathkeep.world import WorldClock

farm = Building()
farm.set_building_data(BuildingData(
    name="Farm", size=2, max_occupants=4,
    daily_resource_contribution={"Food": 20.0}, daily_gold_contribution=5.0,
))
farm.under_construction = False
farm.assign_follower("Ada")
farm.assign_follower("Bram")
print(farm.resource_output("Food"))      # 10.0

rep = Reputation()
rep.gain_kingdom_reputation(120)
print(rep.kingdom_tier_name(), rep.reputation_needed_for_next_tier())  # Village 380.0

clock = WorldClock(day_length=60.0)
print(clock.advance(90.0))               # TimeAdvance(day_passed=True, season_changed=False)
```

## What it does not do

oathkeep covers buildings, reputation, status effects and time. It has none of
the following:

- an inventory, items, loot or gold handling
- enemies, weapons or a player character
- combat
- saving or loading game state
- a command-line program or any user interface

Where these rules need such things, for example a bearer for status effects or
followers for a building, your code supplies them.