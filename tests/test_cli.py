"""Tests for the command-line wrapper."""

from __future__ import annotations

import json

from dicecore.cli import main
from dicecore.config import settings

_SEED_HEX = "2a" * 32


def test_seeded_roll_prints_result(capsys) -> None:
    assert main(["2d6+5", "--seed", _SEED_HEX]) == 0
    assert capsys.readouterr().out.strip() == "[3, 3] + 5 = 11"


def test_json_output(capsys) -> None:
    assert main(["2d6+5", "--seed", _SEED_HEX, "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload == {
        "expression": "2d6+5",
        "dice_rolls": [3, 3],
        "modifier": 5,
        "total": 11,
        "text": "[3, 3] + 5 = 11",
    }


def test_unseeded_roll(capsys) -> None:
    assert main(["1d1-1"]) == 0
    assert capsys.readouterr().out.strip() == "[1] - 1 = 0"


def test_dice_error_exit_code(capsys) -> None:
    assert main(["1001d6"]) == 2
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "Quantity limit exceeded: 1001" in captured.err


def test_bad_seed_exit_code(capsys) -> None:
    assert main(["d6", "--seed", "abc"]) == 2
    assert "seed" in capsys.readouterr().err


def test_default_seed_from_settings(monkeypatch, capsys) -> None:
    monkeypatch.setattr(settings, "default_seed", _SEED_HEX)
    assert main(["2d6+5"]) == 0
    assert capsys.readouterr().out.strip() == "[3, 3] + 5 = 11"


def test_explicit_seed_overrides_settings(monkeypatch, capsys) -> None:
    monkeypatch.setattr(settings, "default_seed", "00" * 32)
    assert main(["2d6+5", "--seed", _SEED_HEX]) == 0
    assert capsys.readouterr().out.strip() == "[3, 3] + 5 = 11"


def test_huge_number_exit_code(capsys) -> None:
    assert main(["9" * 5000 + "d6"]) == 2
    assert "number too large" in capsys.readouterr().err


def test_verbose_configures_debug_logging(monkeypatch) -> None:
    calls = []
    monkeypatch.setattr("dicecore.cli.configure_logging", lambda verbose=False: calls.append(verbose))
    assert main(["d6", "-v"]) == 0
    assert calls == [True]
