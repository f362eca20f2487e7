import pytest
from pydantic import ValidationError

from arena.components import Equipment, Experience, FighterStats, Health, Shield, Shovel, Weapon


def test_health_clamps():
    h = Health(current=150, max_hp=100)
    assert h.current == 100

    dealt = h.take_damage(30)
    assert dealt == 30
    assert h.current == 70

    dealt = h.take_damage(500)
    assert dealt == 70
    assert h.current == 0
    assert h.is_dead


def test_negative_damage_is_ignored():
    h = Health()
    assert h.take_damage(-5) == 0
    assert h.current == 100


def test_experience_accumulates():
    xp = Experience()
    assert xp.add_exp(50) == 50
    assert xp.add_exp(25) == 75


def test_stats_validation():
    with pytest.raises(ValidationError):
        FighterStats(strength=-1)


def test_equipment_bonuses():
    eq = Equipment()
    assert (eq.damage_bonus, eq.protection_bonus, eq.range_bonus) == (0, 0, 0.0)

    eq.weapon = Weapon(name="Bow", damage=8, range=4.0)
    eq.shield = Shield(name="Aegis", protection=12)
    eq.second_hand = Shovel()

    assert eq.damage_bonus == 8
    assert eq.protection_bonus == 12
    assert eq.range_bonus == 4.0
    assert eq.holds(Shovel)
    assert isinstance(eq.second_hand, Shovel)


def test_equipment_slot_types():
    eq = Equipment()
    with pytest.raises(ValidationError):
        eq.weapon = Shield()
