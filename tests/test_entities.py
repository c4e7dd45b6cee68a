from __future__ import annotations

import pytest

from relicbar.core.rng import RNG
from relicbar.domain.entities import Enemy, PartyMember


def test_party_member_starts_at_full_hp() -> None:
    member = PartyMember(name="Vera", max_hp=24)
    assert member.current_hp == 24
    assert not member.is_down


def test_party_member_damage_floors_at_zero() -> None:
    member = PartyMember(name="Mira", max_hp=20)
    lost = member.take_damage(50)
    assert lost == 20
    assert member.current_hp == 0
    assert member.is_down


def test_party_member_heal_caps_at_max() -> None:
    member = PartyMember(name="Roland", max_hp=22, current_hp=20)
    restored = member.heal(6)
    assert restored == 2
    assert member.current_hp == 22


def test_non_positive_amounts_are_ignored() -> None:
    member = PartyMember(name="Vera", max_hp=24, current_hp=10)
    assert member.heal(0) == 0
    assert member.heal(-5) == 0
    assert member.take_damage(-5) == 0
    assert member.current_hp == 10


def test_heal_revives_downed_member() -> None:
    member = PartyMember(name="Mira", max_hp=20, current_hp=0)
    assert member.is_down
    member.heal(2)
    assert member.current_hp == 2
    assert not member.is_down


def test_hp_stays_in_bounds_for_random_sequences() -> None:
    rng = RNG(2024)
    member = PartyMember(name="Vera", max_hp=24)
    enemy = Enemy(name="Bandit Scout", max_hp=20, base_attack=6)
    for _ in range(500):
        amount = rng.randint(-10, 30)
        if rng.random() < 0.5:
            member.take_damage(amount)
        else:
            member.heal(amount)
        enemy.take_damage(amount)
        assert 0 <= member.current_hp <= member.max_hp
        assert 0 <= enemy.current_hp <= enemy.max_hp


def test_enemy_damage_floors_at_zero() -> None:
    enemy = Enemy(name="Ironclad Guardian", max_hp=31, base_attack=9)
    enemy.take_damage(40)
    assert enemy.current_hp == 0
    assert not enemy.is_alive


def test_entities_reject_non_positive_max_hp() -> None:
    with pytest.raises(ValueError):
        PartyMember(name="Nobody", max_hp=0)
    with pytest.raises(ValueError):
        Enemy(name="Nothing", max_hp=0, base_attack=1)
