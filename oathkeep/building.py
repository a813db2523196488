"""Kingdom buildings: health, staffing and daily output."""

from __future__ import annotations

import logging
from collections.abc import Callable, Hashable
from dataclasses import dataclass, field

log = logging.getLogger(__name__)

HEALTH_PER_SIZE = 100
MIN_STAFFING_EFFICIENCY = 0.25

StatusListener = Callable[[bool, float], None]


@dataclass
class BuildingData:
    """Static description of a building type."""

    name: str = ""
    size: int = 1
    max_occupants: int = 0
    daily_resource_contribution: dict[str, float] = field(default_factory=dict)
    daily_gold_contribution: float = 0.0


@dataclass
class Building:
    """A placed building whose efficiency depends on health and staffing."""

    data: BuildingData = field(default_factory=BuildingData)
    health_points: int = 100
    max_health_points: int = 100
    efficiency: float = 1.0
    assigned_followers: list[Hashable] = field(default_factory=list)
    under_construction: bool = True
    construction_progress: float = 0.0
    _listeners: list[StatusListener] = field(default_factory=list, repr=False, compare=False)

    def subscribe(self, callback: StatusListener) -> StatusListener:
        """Register a callback taking (under_construction, health_fraction)."""
        self._listeners.append(callback)
        return callback

    def _notify(self, health_fraction: float) -> None:
        for listener in list(self._listeners):
            listener(self.under_construction, health_fraction)

    @property
    def health_fraction(self) -> float:
        if self.max_health_points <= 0:
            return 0.0
        return self.health_points / self.max_health_points

    def set_building_data(self, data: BuildingData) -> None:
        """Install new data, reset health from size and restart construction."""
        self.data = data
        self.max_health_points = HEALTH_PER_SIZE * data.size
        self.health_points = self.max_health_points
        self.under_construction = True
        self.construction_progress = 0.0
        self._notify(1.0)

    def take_damage(self, amount: int) -> None:
        """Lose health; buildings under construction cannot be damaged."""
        if self.under_construction:
            return
        self.health_points = max(0, self.health_points - amount)
        self.update_efficiency()
        self._notify(self.health_fraction)
        log.info("Building %s took %d damage, health: %d/%d",
                 self.data.name, amount, self.health_points, self.max_health_points)

    def repair(self, amount: int) -> None:
        """Restore health up to the maximum; not while under construction."""
        if self.under_construction:
            return
        self.health_points = min(self.max_health_points, self.health_points + amount)
        self.update_efficiency()
        self._notify(self.health_fraction)
        log.info("Building %s repaired by %d points, health: %d/%d",
                 self.data.name, amount, self.health_points, self.max_health_points)

    def assign_follower(self, follower: Hashable) -> bool:
        """Staff the building; fails if already assigned or at capacity."""
        if follower in self.assigned_followers:
            return False
        if len(self.assigned_followers) >= self.data.max_occupants:
            return False
        self.assigned_followers.append(follower)
        self.update_efficiency()
        return True

    def remove_follower(self, follower: Hashable) -> bool:
        """Unassign a follower; return whether it was assigned."""
        if follower not in self.assigned_followers:
            return False
        self.assigned_followers.remove(follower)
        self.update_efficiency()
        return True

    def update_efficiency(self) -> None:
        """Recompute efficiency as health fraction times staffing fraction."""
        staffing = 1.0
        if self.data.max_occupants > 0:
            staffing = max(
                MIN_STAFFING_EFFICIENCY,
                len(self.assigned_followers) / self.data.max_occupants,
            )
        self.efficiency = self.health_fraction * staffing
        log.debug("Building %s efficiency updated: %.2f", self.data.name, self.efficiency)

    def resource_output(self, resource_type: str) -> float:
        """Daily output of a resource, scaled by efficiency."""
        base = self.data.daily_resource_contribution.get(resource_type)
        return 0.0 if base is None else base * self.efficiency

    def gold_output(self) -> float:
        """Daily gold output, scaled by efficiency."""
        return self.data.daily_gold_contribution * self.efficiency