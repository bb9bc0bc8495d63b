import io
import random
import sys

import pytest

from rpgforge.duel import Attack, calculate_damage, main, run_duel
from rpgforge.factory import (
    CombatWeaponKind,
    MageKind,
    MagicWeaponKind,
    WarriorKind,
    create_combat_weapon,
    create_mage,
    create_magic_weapon,
    create_warrior,
)


class _FixedRng:
    """Always returns the same move for the opponent."""

    def __init__(self, value):
        self.value = value

    def randint(self, low, high):
        assert low <= self.value <= high
        return self.value


class _SequenceRng:
    def __init__(self, values):
        self.values = iter(values)

    def randint(self, low, high):
        value = next(self.values)
        assert low <= value <= high
        return value


def _fighters():
    player = create_mage(
        MageKind.WARLOCK, (create_magic_weapon(MagicWeaponKind.AMULET), None)
    )
    opponent = create_warrior(
        WarriorKind.BARBARIAN, (create_combat_weapon(CombatWeaponKind.SWORD), None)
    )
    return player, opponent


@pytest.mark.parametrize("move", list(Attack))
def test_same_move_is_a_tie(move):
    assert calculate_damage(move, move) == 0


@pytest.mark.parametrize(
    "first, second",
    [
        (Attack.STRONG_HIT, Attack.QUICK_HIT),
        (Attack.QUICK_HIT, Attack.DEFEND_AND_HIT),
        (Attack.DEFEND_AND_HIT, Attack.STRONG_HIT),
    ],
)
def test_winning_pairs(first, second):
    assert calculate_damage(first, second) == 10
    assert calculate_damage(second, first) == -10


def test_unknown_move_loses():
    assert calculate_damage(5, Attack.STRONG_HIT) == -10


def test_attack_codes_map_to_moves():
    assert calculate_damage(Attack(1), Attack(2)) == 10
    assert calculate_damage(Attack(2), Attack(3)) == 10
    assert calculate_damage(Attack(3), Attack(1)) == 10


def test_player_wins_duel():
    player, opponent = _fighters()
    out = io.StringIO()
    winner = run_duel(
        player, opponent, lambda: Attack.STRONG_HIT, _FixedRng(Attack.QUICK_HIT), out
    )
    assert winner is player
    assert opponent.hp == 0
    assert player.hp == 100
    text = out.getvalue()
    assert text.endswith("Gana Brujo\n")
    assert "Brujo ataca con Amuleto y hace 10 puntos de daño a Bárbaro." in text


def test_player_loses_duel():
    player, opponent = _fighters()
    out = io.StringIO()
    winner = run_duel(
        player, opponent, lambda: Attack.QUICK_HIT, _FixedRng(Attack.STRONG_HIT), out
    )
    assert winner is opponent
    assert player.hp == 0
    assert out.getvalue().endswith("Gana Bárbaro\n")
    assert "Bárbaro ataca con Espada" in out.getvalue()


def test_tie_round_does_no_damage():
    player, opponent = _fighters()
    out = io.StringIO()
    moves = [Attack.STRONG_HIT] + [Attack.STRONG_HIT] * 10
    opponent_moves = [Attack.STRONG_HIT] + [Attack.QUICK_HIT] * 10
    choices = iter(moves)
    winner = run_duel(
        player, opponent, lambda: next(choices), _SequenceRng(opponent_moves), out
    )
    assert winner is player
    assert out.getvalue().count("¡Empate! Sin daño.") == 1
    assert player.hp == 100


def test_duel_requires_first_weapon():
    player = create_mage(MageKind.CONJURER)
    _, opponent = _fighters()
    with pytest.raises(ValueError):
        run_duel(player, opponent, lambda: Attack.STRONG_HIT, _FixedRng(2), io.StringIO())


def test_duel_prints_status_and_prompt():
    player, opponent = _fighters()
    out = io.StringIO()
    run_duel(player, opponent, lambda: 1, _FixedRng(2), out)
    text = out.getvalue()
    assert "Brujo tiene 100 HP y Bárbaro tiene 100 HP." in text
    assert "Su opción: (1) Golpe Fuerte" in text


def test_main_mage_duel(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n0\n0\n" + "1\n" * 1000))
    assert main(["--seed", "5"]) == 0
    out = capsys.readouterr().out
    last = out.strip().splitlines()[-1]
    assert last.startswith("Gana ")
    assert "Brujo tiene" in out


def test_main_warrior_duel(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("2\n1\n4\n" + "3\n" * 1000))
    assert main(["--seed", "9"]) == 0
    out = capsys.readouterr().out
    assert "Caballero tiene" in out
    assert out.strip().splitlines()[-1].startswith("Gana ")


def test_main_reprompts_invalid_choice(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO("1\n9\n0\n0\n" + "2\n" * 1000))
    assert main(["--seed", "1"]) == 0
    out = capsys.readouterr().out
    assert out.count("Eliga un Mago") == 2


def test_main_ends_on_missing_input(monkeypatch, capsys):
    monkeypatch.setattr(sys, "stdin", io.StringIO(""))
    assert main(["--seed", "1"]) == 1
    assert "Eliga un tipo de personaje" in capsys.readouterr().out