"""Random rosters of armed mages and warriors, and their printed sheets."""

from __future__ import annotations

import argparse
import random
import sys
from typing import Callable, List, Optional, Sequence, Tuple, TypeVar

from .characters import Character, Mage, Warrior
from .factory import (
    CombatWeaponKind,
    MageKind,
    MagicWeaponKind,
    WarriorKind,
    create_combat_weapon,
    create_mage,
    create_magic_weapon,
    create_warrior,
)

MIN_PER_SIDE = 3
MAX_PER_SIDE = 7
MAX_WEAPONS = 2

HEADER = "Personaje Factory"
ROSTER_TITLE = "Personajes que salieron: "

_K = TypeVar("_K")
_W = TypeVar("_W")


def _random_slots(
    rng: random.Random, kinds: Sequence[_K], build: Callable[[_K], _W]
) -> Tuple[Optional[_W], Optional[_W]]:
    count = rng.randint(0, MAX_WEAPONS)
    first = build(rng.choice(kinds)) if count > 0 else None
    second = build(rng.choice(kinds)) if count > 1 else None
    return first, second


def random_roster(
    rng: Optional[random.Random] = None,
) -> Tuple[List[Mage], List[Warrior]]:
    """Build between three and seven mages and warriors, each with up to two weapons."""
    rng = rng if rng is not None else random.Random()
    mage_count = rng.randint(MIN_PER_SIDE, MAX_PER_SIDE)
    warrior_count = rng.randint(MIN_PER_SIDE, MAX_PER_SIDE)

    magic_kinds = list(MagicWeaponKind)
    combat_kinds = list(CombatWeaponKind)
    mage_kinds = list(MageKind)
    warrior_kinds = list(WarriorKind)

    mages = [
        create_mage(
            rng.choice(mage_kinds),
            _random_slots(rng, magic_kinds, create_magic_weapon),
        )
        for _ in range(mage_count)
    ]
    warriors = [
        create_warrior(
            rng.choice(warrior_kinds),
            _random_slots(rng, combat_kinds, create_combat_weapon),
        )
        for _ in range(warrior_count)
    ]
    return mages, warriors


def format_character(character: Character) -> str:
    """Describe a character and the weapons it carries, one field per line."""
    lines = [
        f"Nombre: {character.name}",
        f"Mana: {character.mana}",
        f"Tipo: {character.category}",
        f"HP: {character.hp}",
    ]
    for slot, weapon in enumerate(character.weapons, start=1):
        if weapon is not None:
            lines.append(f"Arma {slot}: {weapon.name}")
    return "\n".join(lines)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Print a randomly generated roster of characters."""
    parser = argparse.ArgumentParser(
        prog="rpgforge-roster",
        description="Generate a random roster of mages and warriors.",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    mages, warriors = random_roster(random.Random(args.seed))
    print(HEADER)
    print(ROSTER_TITLE)
    for character in [*mages, *warriors]:
        print(format_character(character))
    return 0


if __name__ == "__main__":
    sys.exit(main())