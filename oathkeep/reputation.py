"""Renown, kingdom reputation and faction standing for a player."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field

COMBAT = "Combat"
QUEST = "Quest"
KINGDOM = "Kingdom"
FACTION_PREFIX = "Faction:"

RENOWN_MILESTONES = (100.0, 500.0, 1000.0, 2500.0, 5000.0, 10000.0)
FACTION_THRESHOLDS = (-100.0, -75.0, -50.0, -25.0, 0.0, 25.0, 50.0, 75.0, 100.0)
FACTION_MIN = -100.0
FACTION_MAX = 100.0

# Lower bound of each kingdom tier, in tier order.
TIER_THRESHOLDS = (0.0, 100.0, 500.0, 1500.0, 5000.0)
TIER_NAMES = ("Camp", "Village", "Town", "City", "Kingdom")
MAX_FOLLOWERS = (5, 15, 30, 50, 100)
MAX_BUILDINGS = (3, 10, 25, 50, 100)

# Standing names with the lowest reputation that earns them, best first.
FACTION_STANDINGS = (
    (75.0, "Exalted"),
    (50.0, "Honored"),
    (25.0, "Friendly"),
    (0.0, "Neutral"),
    (-25.0, "Unfriendly"),
    (-50.0, "Hostile"),
)
LOWEST_STANDING = "Hated"

ChangeListener = Callable[[str, float, float], None]
MilestoneListener = Callable[[str, float], None]
ThresholdListener = Callable[[str, float, bool], None]


@dataclass
class Reputation:
    """Tracks renown and reputation values and reports milestones crossed."""

    combat_renown: float = 0.0
    quest_renown: float = 0.0
    kingdom_reputation: float = 0.0
    faction_reputations: dict[str, float] = field(default_factory=dict)
    combat_renown_multiplier: float = 1.0
    quest_renown_multiplier: float = 1.0
    milestone_listeners: list[MilestoneListener] = field(default_factory=list, repr=False, compare=False)
    threshold_listeners: list[ThresholdListener] = field(default_factory=list, repr=False, compare=False)
    _listeners: list[ChangeListener] = field(default_factory=list, repr=False, compare=False)
    _previous_combat: float = field(default=0.0, repr=False, compare=False)
    _previous_quest: float = field(default=0.0, repr=False, compare=False)
    _previous_factions: dict[str, float] = field(default_factory=dict, repr=False, compare=False)

    def subscribe(self, callback: ChangeListener) -> ChangeListener:
        """Register a callback taking (reputation_type, old_value, new_value)."""
        self._listeners.append(callback)
        return callback

    def _notify(self, reputation_type: str, old: float, new: float) -> None:
        for listener in list(self._listeners):
            listener(reputation_type, old, new)

    def _reach_milestones(self, kind: str, current: float, previous: float) -> None:
        for milestone in RENOWN_MILESTONES:
            if current >= milestone > previous or (current >= milestone and previous < milestone):
                for listener in list(self.milestone_listeners):
                    listener(kind, milestone)

    def gain_combat_renown(self, amount: float, notify: bool = True) -> None:
        """Add combat renown and report any milestones passed."""
        old = self.combat_renown
        self.combat_renown += amount
        if notify:
            self._notify(COMBAT, old, self.combat_renown)
        self._reach_milestones(COMBAT, self.combat_renown, self._previous_combat)
        self._previous_combat = self.combat_renown

    def gain_quest_renown(self, amount: float, notify: bool = True) -> None:
        """Add quest renown and report any milestones passed."""
        old = self.quest_renown
        self.quest_renown += amount
        if notify:
            self._notify(QUEST, old, self.quest_renown)
        self._reach_milestones(QUEST, self.quest_renown, self._previous_quest)
        self._previous_quest = self.quest_renown

    def gain_kingdom_reputation(self, amount: float, notify: bool = True) -> None:
        """Add kingdom reputation."""
        old = self.kingdom_reputation
        self.kingdom_reputation += amount
        if notify:
            self._notify(KINGDOM, old, self.kingdom_reputation)

    def modify_faction_reputation(self, faction_name: str, amount: float, notify: bool = True) -> None:
        """Shift a faction's reputation, clamped to [-100, 100]."""
        old = self.faction_reputations.setdefault(faction_name, 0.0)
        new = min(max(old + amount, FACTION_MIN), FACTION_MAX)
        self.faction_reputations[faction_name] = new
        if notify:
            self._notify(f"{FACTION_PREFIX}{faction_name}", old, new)
        self._check_faction_thresholds(faction_name)

    def _check_faction_thresholds(self, faction_name: str) -> None:
        current = self.faction_reputations[faction_name]
        previous = self._previous_factions.get(faction_name)
        if previous is not None:
            for threshold in FACTION_THRESHOLDS:
                rose = current >= threshold > previous or (current >= threshold and previous < threshold)
                fell = current < threshold <= previous
                if rose or fell:
                    for listener in list(self.threshold_listeners):
                        listener(faction_name, threshold, current > previous)
        self._previous_factions[faction_name] = current

    def kingdom_tier(self) -> int:
        """Tier index: 0 Camp, 1 Village, 2 Town, 3 City, 4 Kingdom."""
        tier = 0
        for index, lower in enumerate(TIER_THRESHOLDS):
            if self.kingdom_reputation >= lower:
                tier = index
        return tier

    def faction_reputation(self, faction_name: str) -> float:
        """Reputation with a faction; 0 if never met."""
        return self.faction_reputations.get(faction_name, 0.0)

    def faction_standing_name(self, faction_name: str) -> str:
        """Named standing for the current reputation with a faction."""
        rep = self.faction_reputation(faction_name)
        return next((name for lower, name in FACTION_STANDINGS if rep >= lower), LOWEST_STANDING)

    def kingdom_tier_name(self) -> str:
        """Name of the current kingdom tier."""
        return TIER_NAMES[self.kingdom_tier()]

    def max_followers_for_tier(self) -> int:
        """Follower cap for the current kingdom tier."""
        return MAX_FOLLOWERS[self.kingdom_tier()]

    def max_buildings_for_tier(self) -> int:
        """Building cap for the current kingdom tier."""
        return MAX_BUILDINGS[self.kingdom_tier()]

    def reputation_needed_for_next_tier(self) -> float:
        """Kingdom reputation still needed to reach the next tier; 0 at the top."""
        tier = self.kingdom_tier()
        if tier + 1 >= len(TIER_THRESHOLDS):
            return 0.0
        return TIER_THRESHOLDS[tier + 1] - self.kingdom_reputation