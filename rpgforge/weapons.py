"""Weapons that characters can carry: combat weapons and magic weapons."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass

MAX_COMBAT_DURABILITY = 200
COMBAT_REPAIR_STEP = 10
MAGIC_FULL_DURABILITY = 100


@dataclass
class Weapon(ABC):
    """Common data shared by every weapon."""

    name: str
    durability: int
    level: int
    category: str

    @abstractmethod
    def repair(self) -> None:
        """Restore some or all of the weapon's durability."""


@dataclass
class CombatWeapon(Weapon):
    """A melee weapon such as a sword, club, axe or spear."""

    damage: int

    def repair(self) -> None:
        """Add a fixed amount of durability, up to the maximum."""
        self.durability = min(
            MAX_COMBAT_DURABILITY, self.durability + COMBAT_REPAIR_STEP
        )


@dataclass
class MagicWeapon(Weapon):
    """A magic item with a regular attack and a special attack."""

    damage: int
    special_attack: str
    special_attack_damage: int
    special_attack_effect: str

    @property
    def effect(self) -> str:
        """The effect the special attack applies."""
        return self.special_attack_effect

    def repair(self) -> None:
        """Restore the weapon to full durability."""
        self.durability = MAGIC_FULL_DURABILITY

    def get_damage(self, special: bool) -> int:
        """Damage of the special attack if ``special``, else the regular damage."""
        return self.special_attack_damage if special else self.damage