# rpgforge

A small role-playing toolkit: weapons, characters and a factory that builds
them, plus two console programs that use it. The game texts are in Spanish.

## Building blocks

- `rpgforge.weapons`: the abstract `Weapon` (name, durability, level,
  category) and its two families.
  - `CombatWeapon` adds `damage`; `repair()` adds 10 durability, up to 200.
  - `MagicWeapon` adds `damage`, `special_attack`, `special_attack_damage`
    and `special_attack_effect` (also readable as `effect`); `repair()` sets
    durability back to 100, and `get_damage(special)` returns the special
    attack's damage when `special` is true, the regular damage otherwise.
- `rpgforge.characters`: `Character` (name, hp, level, category, mana and a
  pair of weapon slots) and its two families `Warrior`, which carries only
  `CombatWeapon`s, and `Mage`, which carries only `MagicWeapon`s; giving a
  character the wrong kind of weapon raises `TypeError`.
  - `add_weapon(weapon)` fills the first free slot and returns `False` when
    both are taken.
  - `remove_weapon(weapon)` empties the slot holding that very weapon object
    and returns `False` when it is not carried.
  - `lose_hp()` takes 10 HP; `gain_hp(rng=None)` heals a random 10 to 30 HP,
    never above 100.
- `rpgforge.factory`: the enums `MagicWeaponKind` (`AMULET`, `SPELLBOOK`,
  `STAFF`, `POTION`), `CombatWeaponKind` (`SWORD`, `CLUB`, `DOUBLE_AXE`,
  `SINGLE_AXE`, `SPEAR`), `WarriorKind` (`BARBARIAN`, `KNIGHT`, `PALADIN`,
  `MERCENARY`, `GLADIATOR`) and `MageKind` (`WARLOCK`, `CONJURER`,
  `SORCERER`, `NECROMANCER`), and the functions `create_magic_weapon`,
  `create_combat_weapon`, `create_mage` and `create_warrior`. They build
  everything with its standard stats (characters: 100 HP, level 20, 25 mana;
  weapons: durability 100, level 10) and accept an enum member or its integer
  value; an unknown value raises `ValueError`.

```python
from rpgforge.factory import (
    CombatWeaponKind, WarriorKind, create_combat_weapon, create_warrior,
)

sword = create_combat_weapon(CombatWeaponKind.SWORD)
knight = create_warrior(WarriorKind.KNIGHT, (sword, None))
knight.lose_hp()
print(knight.name, knight.hp)   # Caballero 90
```

## Programs

After installing the package:

```
rpgforge-roster [--seed N]
```

prints a random roster of three to seven mages and three to seven warriors,
each with zero, one or two random weapons. In code the same comes from
`rpgforge.roster.random_roster(rng)`, and `format_character(character)`
gives the printed sheet of one character.

```
rpgforge-duel [--seed N]
```

starts an interactive duel read from standard input. Pick a mage (1) or a
warrior (anything else), then a character and a weapon; an out-of-range
choice is asked again. The opponent is a random character of the other
family. Each turn, choose a strike: (1) Golpe Fuerte, (2) Golpe Rápido or
(3) Defensa y Golpe. Strong beats quick, quick beats defend-and-strike, and
defend-and-strike beats strong; the loser of a turn takes 10 damage and equal
choices do nothing. The first character to drop to 0 HP loses. If the input
ends early the program exits with status 1.

The same rules are available in code through `rpgforge.duel.Attack`,
`calculate_damage(first, second)` (10, -10 or 0) and
`run_duel(player, opponent, choose, rng=None, out=None)`, which returns the
winner.

## What it does not do

Characters and rosters live only in memory: nothing is saved or loaded. The
duel uses only hit points and the first weapon's name; weapon damage,
durability, mana and healing play no part in it.

## Tests

```
pip install -e ".[test]"
pytest
```