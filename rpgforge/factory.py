"""Builds the stock weapons and characters of the game."""

from __future__ import annotations

from enum import IntEnum
from typing import Optional, Tuple

from .characters import Mage, Warrior
from .weapons import CombatWeapon, MagicWeapon


class MagicWeaponKind(IntEnum):
    """The magic weapons the factory can build."""

    AMULET = 0
    SPELLBOOK = 1
    STAFF = 2
    POTION = 3


class CombatWeaponKind(IntEnum):
    """The combat weapons the factory can build."""

    SWORD = 0
    CLUB = 1
    DOUBLE_AXE = 2
    SINGLE_AXE = 3
    SPEAR = 4


class WarriorKind(IntEnum):
    """The warriors the factory can build."""

    BARBARIAN = 0
    KNIGHT = 1
    PALADIN = 2
    MERCENARY = 3
    GLADIATOR = 4


class MageKind(IntEnum):
    """The mages the factory can build."""

    WARLOCK = 0
    CONJURER = 1
    SORCERER = 2
    NECROMANCER = 3


WEAPON_DURABILITY = 100
WEAPON_LEVEL = 10
MAGIC_CATEGORY = "Mágica"
MAGIC_DAMAGE = 20
MAGIC_SPECIAL_DAMAGE = 30
COMBAT_CATEGORY = "Combate"
COMBAT_DAMAGE = 30

CHARACTER_HP = 100
CHARACTER_LEVEL = 20
CHARACTER_MANA = 25
WARRIOR_CATEGORY = "Guerrero"
MAGE_CATEGORY = "Mago"

# name, special attack, special attack effect
_MAGIC_WEAPONS = {
    MagicWeaponKind.AMULET: ("Amuleto", "Suerte", "Ataques Precisos"),
    MagicWeaponKind.STAFF: ("Bastón", "Terremoto", "Ataques Imprecisos"),
    MagicWeaponKind.SPELLBOOK: ("Libro de Hechizos", "Conjuro", "Debilidad"),
    MagicWeaponKind.POTION: ("Poción", "Veneno II", "Veneno"),
}

_COMBAT_WEAPONS = {
    CombatWeaponKind.SWORD: "Espada",
    CombatWeaponKind.CLUB: "Garrote",
    CombatWeaponKind.DOUBLE_AXE: "Hacha Doble",
    CombatWeaponKind.SINGLE_AXE: "Hacha Simple",
    CombatWeaponKind.SPEAR: "Lanza",
}

_WARRIORS = {
    WarriorKind.BARBARIAN: "Bárbaro",
    WarriorKind.KNIGHT: "Caballero",
    WarriorKind.GLADIATOR: "Gladiador",
    WarriorKind.MERCENARY: "Mercenario",
    WarriorKind.PALADIN: "Paladín",
}

_MAGES = {
    MageKind.WARLOCK: "Brujo",
    MageKind.CONJURER: "Conjurador",
    MageKind.SORCERER: "Hechizero",
    MageKind.NECROMANCER: "Nigromante",
}

MagicSlots = Tuple[Optional[MagicWeapon], Optional[MagicWeapon]]
CombatSlots = Tuple[Optional[CombatWeapon], Optional[CombatWeapon]]


def create_magic_weapon(kind: MagicWeaponKind | int) -> MagicWeapon:
    """Build a new magic weapon of the given kind; ValueError if unknown."""
    name, special_attack, effect = _MAGIC_WEAPONS[MagicWeaponKind(kind)]
    return MagicWeapon(
        name,
        WEAPON_DURABILITY,
        WEAPON_LEVEL,
        MAGIC_CATEGORY,
        MAGIC_DAMAGE,
        special_attack,
        MAGIC_SPECIAL_DAMAGE,
        effect,
    )


def create_combat_weapon(kind: CombatWeaponKind | int) -> CombatWeapon:
    """Build a new combat weapon of the given kind; ValueError if unknown."""
    name = _COMBAT_WEAPONS[CombatWeaponKind(kind)]
    return CombatWeapon(
        name, WEAPON_DURABILITY, WEAPON_LEVEL, COMBAT_CATEGORY, COMBAT_DAMAGE
    )


def create_mage(kind: MageKind | int, weapons: MagicSlots = (None, None)) -> Mage:
    """Build a mage of the given kind carrying ``weapons``; ValueError if unknown."""
    name = _MAGES[MageKind(kind)]
    return Mage(
        name, CHARACTER_HP, CHARACTER_LEVEL, MAGE_CATEGORY, CHARACTER_MANA, weapons
    )


def create_warrior(
    kind: WarriorKind | int, weapons: CombatSlots = (None, None)
) -> Warrior:
    """Build a warrior of the given kind carrying ``weapons``; ValueError if unknown."""
    name = _WARRIORS[WarriorKind(kind)]
    return Warrior(
        name, CHARACTER_HP, CHARACTER_LEVEL, WARRIOR_CATEGORY, CHARACTER_MANA, weapons
    )