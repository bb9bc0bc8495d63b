"""Playable characters: warriors carrying combat weapons and mages carrying magic ones."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import ClassVar, Optional, Tuple

from .weapons import CombatWeapon, MagicWeapon, Weapon

MAX_HP = 100
HP_LOSS = 10
HP_GAIN_MIN = 10
HP_GAIN_MAX = 30

WeaponSlots = Tuple[Optional[Weapon], Optional[Weapon]]


@dataclass(eq=False)
class Character:
    """A character with hit points, mana and two weapon slots."""

    name: str
    hp: int
    level: int
    category: str
    mana: int
    weapons: WeaponSlots = (None, None)

    weapon_type: ClassVar[type] = Weapon

    def __post_init__(self) -> None:
        slots = tuple(self.weapons)
        if len(slots) != 2:
            raise ValueError("a character has exactly two weapon slots")
        for weapon in slots:
            if weapon is not None:
                self._check_weapon(weapon)
        self.weapons = slots

    def _check_weapon(self, weapon: Weapon) -> None:
        if not isinstance(weapon, self.weapon_type):
            raise TypeError(
                f"{type(self).__name__} cannot carry {type(weapon).__name__}"
            )

    def gain_hp(self, rng: Optional[random.Random] = None) -> None:
        """Recover a random amount of hit points, never above the maximum."""
        source = rng if rng is not None else random
        self.hp = min(MAX_HP, self.hp + source.randint(HP_GAIN_MIN, HP_GAIN_MAX))

    def lose_hp(self) -> None:
        """Take a fixed amount of damage."""
        self.hp -= HP_LOSS

    def add_weapon(self, weapon: Weapon) -> bool:
        """Put ``weapon`` into the first free slot; False if both are taken."""
        self._check_weapon(weapon)
        first, second = self.weapons
        if first is None:
            self.weapons = (weapon, second)
            return True
        if second is None:
            self.weapons = (first, weapon)
            return True
        return False

    def remove_weapon(self, weapon: Weapon) -> bool:
        """Empty the slot holding this very weapon; False if it is not carried."""
        first, second = self.weapons
        if first is not None and first is weapon:
            self.weapons = (None, second)
            return True
        if second is not None and second is weapon:
            self.weapons = (first, None)
            return True
        return False


@dataclass(eq=False)
class Warrior(Character):
    """A fighter who carries combat weapons."""

    weapon_type: ClassVar[type] = CombatWeapon


@dataclass(eq=False)
class Mage(Character):
    """A spellcaster who carries magic weapons."""

    weapon_type: ClassVar[type] = MagicWeapon