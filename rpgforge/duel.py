"""A turn-based duel between a player's character and a random opponent."""

from __future__ import annotations

import argparse
import random
import sys
from enum import IntEnum
from typing import Callable, Iterator, Optional, Sequence, TextIO, Tuple

from .characters import Character
from .factory import (
    MageKind,
    MagicWeaponKind,
    WarriorKind,
    CombatWeaponKind,
    create_combat_weapon,
    create_mage,
    create_magic_weapon,
    create_warrior,
)

HIT_DAMAGE = 10


class Attack(IntEnum):
    """The three moves of the duel."""

    STRONG_HIT = 1
    QUICK_HIT = 2
    DEFEND_AND_HIT = 3


_BEATS = {
    (Attack.STRONG_HIT, Attack.QUICK_HIT),
    (Attack.QUICK_HIT, Attack.DEFEND_AND_HIT),
    (Attack.DEFEND_AND_HIT, Attack.STRONG_HIT),
}

OPTIONS_PROMPT = (
    "Su opción: (1) Golpe Fuerte, (2) Golpe Rápido, (3) Defensa y Golpe: "
)
TIE_MESSAGE = "Ambos eligieron la misma acción. ¡Empate! Sin daño.\n"
TYPE_PROMPT = "Eliga un tipo de personaje: (1) Mago, (2) Guerrero\n"
MAGE_PROMPT = "Eliga un Mago: (0) Brujo, (1) Conjurador, (2) Hechizero, (3) Nigromante\n"
MAGIC_WEAPON_PROMPT = (
    "Eliga arma para su personaje: (0) Amuleto, (1) Libro de Hechizos, "
    "(2) Bastón, (3) Poción\n"
)
WARRIOR_PROMPT = (
    "Eliga un Guerrero: (0) Bárbaro, (1) Caballero, (2) Paladín, "
    "(3) Mercenario, (4) Gladiador\n"
)
COMBAT_WEAPON_PROMPT = (
    "Eliga arma para su personaje: (0) Espada, (1) Garrote, (2) Hacha Doble, "
    "(3) Hacha Simple, (4) Lanza\n"
)

# The opponent only ever draws from the first few kinds.
_OPPONENT_WEAPON_CHOICES = 2
_OPPONENT_WARRIOR_CHOICES = 4
_OPPONENT_MAGE_CHOICES = 4


def calculate_damage(first: int, second: int) -> int:
    """Damage outcome of a round: 10 if ``first`` wins, -10 if it loses, 0 on a tie."""
    if first == second:
        return 0
    if (first, second) in _BEATS:
        return HIT_DAMAGE
    return -HIT_DAMAGE


def _first_weapon_name(character: Character) -> str:
    weapon = character.weapons[0]
    if weapon is None:
        raise ValueError(f"{character.name} needs a weapon in the first slot")
    return weapon.name


def run_duel(
    player: Character,
    opponent: Character,
    choose: Callable[[], int],
    rng: Optional[random.Random] = None,
    out: Optional[TextIO] = None,
) -> Character:
    """Fight rounds until one side has no hit points left and return the winner."""
    rng = rng if rng is not None else random.Random()
    out = out if out is not None else sys.stdout
    player_weapon = _first_weapon_name(player)
    opponent_weapon = _first_weapon_name(opponent)

    while player.hp > 0 and opponent.hp > 0:
        out.write(
            f"\n{player.name} tiene {player.hp} HP y "
            f"{opponent.name} tiene {opponent.hp} HP.\n"
        )
        out.write(OPTIONS_PROMPT)
        out.flush()
        player_move = choose()
        opponent_move = rng.randint(Attack.STRONG_HIT, Attack.DEFEND_AND_HIT)
        result = calculate_damage(player_move, opponent_move)

        if result > 0:
            opponent.lose_hp()
            out.write(
                f"{player.name} ataca con {player_weapon} y hace "
                f"{HIT_DAMAGE} puntos de daño a {opponent.name}.\n"
            )
        elif result < 0:
            player.lose_hp()
            out.write(
                f"{opponent.name} ataca con {opponent_weapon} y hace "
                f"{HIT_DAMAGE} puntos de daño a {player.name}.\n"
            )
        else:
            out.write(TIE_MESSAGE)

    winner = opponent if player.hp <= 0 else player
    out.write(f"Gana {winner.name}\n")
    return winner


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    for token in tokens:
        try:
            return int(token)
        except ValueError:
            continue
    raise EOFError("input ended")


def _ask_int(
    tokens: Iterator[str], out: TextIO, prompt: str, valid: Sequence[int]
) -> int:
    while True:
        out.write(prompt)
        out.flush()
        value = _read_int(tokens)
        if value in valid:
            return value


def _set_up(
    tokens: Iterator[str], out: TextIO, rng: random.Random
) -> Tuple[Character, Character]:
    out.write(TYPE_PROMPT)
    out.flush()
    if _read_int(tokens) == 1:
        kind = _ask_int(tokens, out, MAGE_PROMPT, range(len(MageKind)))
        weapon = _ask_int(
            tokens, out, MAGIC_WEAPON_PROMPT, range(len(MagicWeaponKind))
        )
        player = create_mage(kind, (create_magic_weapon(weapon), None))
        opponent_weapon = create_combat_weapon(rng.randrange(_OPPONENT_WEAPON_CHOICES))
        opponent = create_warrior(
            rng.randrange(_OPPONENT_WARRIOR_CHOICES), (opponent_weapon, None)
        )
    else:
        kind = _ask_int(tokens, out, WARRIOR_PROMPT, range(len(WarriorKind)))
        weapon = _ask_int(
            tokens, out, COMBAT_WEAPON_PROMPT, range(len(CombatWeaponKind))
        )
        player = create_warrior(kind, (create_combat_weapon(weapon), None))
        opponent_weapon = create_magic_weapon(rng.randrange(_OPPONENT_WEAPON_CHOICES))
        opponent = create_mage(
            rng.randrange(_OPPONENT_MAGE_CHOICES), (opponent_weapon, None)
        )
    return player, opponent


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Play an interactive duel read from standard input."""
    parser = argparse.ArgumentParser(
        prog="rpgforge-duel",
        description="Duel a random opponent with a character of your choice.",
    )
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    out = sys.stdout
    tokens = _tokens(sys.stdin)
    try:
        player, opponent = _set_up(tokens, out, rng)
        run_duel(player, opponent, lambda: _read_int(tokens), rng, out)
    except EOFError:
        out.write("\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())