from arena.components import Flying, Movable, Shield, Shovel, Weapon
from arena.fighters import Hero, create_hero, create_monster


def test_hero_defaults():
    hero = Hero()
    assert hero.name == "Heracles"
    assert hero.strength == 20
    assert hero.dexterity == 6
    assert hero.range == 1.0
    assert hero.life == 100
    assert hero.experience == 0
    assert hero.is_movable
    assert hero.has_tag("hero")


def test_damage_defense_range_with_equipment():
    hero = create_hero(
        weapon=Weapon(name="Bow", damage=8, range=5.0),
        shield=Shield(name="Aegis", protection=10),
    )
    assert hero.damage == 20 + 8
    assert hero.defense == 6 + 10
    assert hero.range == 1.0 + 5.0


def test_equip_routes_items_to_slots():
    hero = create_hero()
    sword = Weapon(name="Sword", damage=10)
    bow = Weapon(name="Bow", damage=8, range=5.0)
    shovel = Shovel()

    assert hero.equip(sword) is None
    assert hero.equip(bow) is sword
    assert hero.equip(shovel) is None

    assert hero.weapon is bow
    assert hero.second_hand is shovel
    assert hero.shield is None


def test_monster_capabilities():
    bird = create_monster("Bird", 1, 1, flying=True)
    hydra = create_monster("Hydra", 2, 2, movable=False)

    assert bird.has(Movable) and bird.has(Flying)
    assert bird.can_fly
    assert not hydra.is_movable
    assert hydra.has_tag("monster")
    assert hydra.sprite_id == "hydra"


def test_fight_subtracts_defense(max_rng):
    hero = create_hero()
    lion = create_monster("Lion", 1, 0, dexterity=5)

    dealt = hero.fight(lion, max_rng)

    max_rng.randint.assert_called_once_with(1, 20)
    assert dealt == 15
    assert lion.life == 85


def test_fight_never_heals(max_rng):
    hero = create_hero()
    armored = create_monster("Crab", 1, 0, dexterity=50)

    assert hero.fight(armored, max_rng) == 0
    assert armored.life == 100


def test_fight_floors_life_at_zero(max_rng):
    hero = create_hero(weapon=Weapon(damage=200))
    boar = create_monster("Boar", 1, 0, dexterity=0, life=10)

    assert hero.fight(boar, max_rng) == 10
    assert boar.life == 0
    assert not boar.is_alive


def test_distance_between_fighters():
    a = create_hero(0, 0)
    b = create_monster("Stag", 3, 4)
    assert a.distance_to(b) == 5.0
