import pytest

from oathkeep.effects import ActiveEffects, StatusEffect, StatusEffectType


class RecordingTarget:
    def __init__(self):
        self.immediate = []
        self.over_time = []
        self.reverted = []

    def apply_immediate(self, effect):
        self.immediate.append(effect.effect_id)

    def apply_over_time(self, effect, delta_time):
        self.over_time.append((effect.effect_id, delta_time))

    def revert(self, effect):
        self.reverted.append(effect.effect_id)


@pytest.fixture
def target():
    return RecordingTarget()


@pytest.fixture
def effects(target):
    return ActiveEffects(target=target)


def boost(duration=5.0, strength=0.5):
    return StatusEffect("boost", StatusEffectType.ATTACK_BOOST, strength, duration)


def poison(duration=3.0):
    return StatusEffect("poison", StatusEffectType.DAMAGE, 2.0, duration, applies_over_time=True)


def test_add_immediate_effect_applies_and_notifies(effects, target):
    added = []
    effects.added_listeners.append(added.append)
    effects.add(boost())
    assert target.immediate == ["boost"]
    assert [e.effect_id for e in added] == ["boost"]
    assert "boost" in effects
    assert len(effects) == 1


def test_over_time_effect_not_applied_immediately(effects, target):
    effects.add(poison())
    assert target.immediate == []
    assert "poison" in effects


def test_duplicate_id_refreshes_without_reapplying(effects, target):
    added = []
    effects.added_listeners.append(added.append)
    effects.add(boost(duration=1.0))
    effects.add(boost(duration=9.0, strength=0.8))
    assert len(effects) == 1
    assert target.immediate == ["boost"]
    assert len(added) == 1
    stored = next(iter(effects))
    assert stored.remaining_duration == 9.0
    assert stored.effect_strength == 0.8


def test_add_copies_the_effect(effects):
    original = boost(duration=2.0)
    effects.add(original)
    effects.tick(0.5)
    assert original.remaining_duration == 2.0


def test_remove_reverts_and_notifies(effects, target):
    removed = []
    effects.removed_listeners.append(removed.append)
    effects.add(boost())
    result = effects.remove("boost")
    assert result is not None and result.effect_id == "boost"
    assert target.reverted == ["boost"]
    assert [e.effect_id for e in removed] == ["boost"]
    assert "boost" not in effects


def test_remove_missing_returns_none(effects, target):
    assert effects.remove("nothing") is None
    assert target.reverted == []


def test_tick_applies_over_time_effects(effects, target):
    effects.add(poison(duration=3.0))
    assert effects.tick(1.0) == []
    assert target.over_time == [("poison", 1.0)]
    assert next(iter(effects)).remaining_duration == pytest.approx(2.0)


def test_tick_expires_effects(effects, target):
    effects.add(boost(duration=1.0))
    effects.add(poison(duration=10.0))
    expired = effects.tick(1.0)
    assert [e.effect_id for e in expired] == ["boost"]
    assert target.reverted == ["boost"]
    assert "boost" not in effects
    assert "poison" in effects


def test_expired_over_time_effect_is_not_applied(effects, target):
    effects.add(poison(duration=0.5))
    effects.tick(1.0)
    assert target.over_time == []
    assert len(effects) == 0


def test_works_without_target():
    effects = ActiveEffects()
    effects.add(boost(duration=1.0))
    assert [e.effect_id for e in effects.tick(2.0)] == ["boost"]
    assert len(effects) == 0