"""Timed status effects such as damage over time, healing and stat boosts."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator
from dataclasses import dataclass, field
from enum import Enum
from typing import Protocol


class StatusEffectType(Enum):
    """What a status effect does to its bearer."""

    DAMAGE = "Damage"
    HEALING = "Healing"
    SPEED_BOOST = "SpeedBoost"
    ATTACK_BOOST = "AttackBoost"


@dataclass
class StatusEffect:
    """A named effect with a strength and remaining duration in seconds."""

    effect_id: str
    effect_type: StatusEffectType
    effect_strength: float = 0.0
    remaining_duration: float = 0.0
    applies_over_time: bool = False


class EffectTarget(Protocol):
    """What a bearer of status effects must be able to do."""

    def apply_immediate(self, effect: StatusEffect) -> None: ...

    def apply_over_time(self, effect: StatusEffect, delta_time: float) -> None: ...

    def revert(self, effect: StatusEffect) -> None: ...


EffectListener = Callable[[StatusEffect], None]


@dataclass
class ActiveEffects:
    """The status effects currently active on one bearer."""

    target: EffectTarget | None = None
    effects: list[StatusEffect] = field(default_factory=list)
    added_listeners: list[EffectListener] = field(default_factory=list, repr=False, compare=False)
    removed_listeners: list[EffectListener] = field(default_factory=list, repr=False, compare=False)

    def __iter__(self) -> Iterator[StatusEffect]:
        return iter(self.effects)

    def __len__(self) -> int:
        return len(self.effects)

    def __contains__(self, effect_id: object) -> bool:
        return any(effect.effect_id == effect_id for effect in self.effects)

    def add(self, effect: StatusEffect) -> None:
        """Add an effect, or refresh the existing one with the same id."""
        effect = dataclasses.replace(effect)
        for index, existing in enumerate(self.effects):
            if existing.effect_id == effect.effect_id:
                self.effects[index] = effect
                return
        self.effects.append(effect)
        if not effect.applies_over_time and self.target is not None:
            self.target.apply_immediate(effect)
        for listener in list(self.added_listeners):
            listener(effect)

    def remove(self, effect_id: str) -> StatusEffect | None:
        """Remove an effect by id, reverting its changes; return it or None."""
        for index, effect in enumerate(self.effects):
            if effect.effect_id == effect_id:
                if self.target is not None:
                    self.target.revert(effect)
                del self.effects[index]
                for listener in list(self.removed_listeners):
                    listener(effect)
                return effect
        return None

    def tick(self, delta_time: float) -> list[StatusEffect]:
        """Age every effect, apply over-time ones and drop the expired; return those dropped."""
        expired: list[StatusEffect] = []
        for effect in self.effects:
            effect.remaining_duration -= delta_time
            if effect.remaining_duration <= 0.0:
                expired.append(effect)
            elif effect.applies_over_time and self.target is not None:
                self.target.apply_over_time(effect, delta_time)
        removed = (self.remove(effect.effect_id) for effect in expired)
        return [effect for effect in removed if effect is not None]