from __future__ import annotations

import pytest

import discs
from discs import (
    MINIMUM_TOTAL, TARGET, draw_probability, evaluate_draw, initial_blue_estimate, is_fair_draw, main,
)
from formats import get_float_format
from rational import Rational, DivisionByZeroError

KNOWN_BLUE = 756872327473
KNOWN_TOTAL = 1070379110497


def test_draw_probability_small_boxes() -> None:
    assert draw_probability(3, 4) == TARGET
    assert draw_probability(15, 21) == TARGET
    assert draw_probability(85, 120) == TARGET
    assert draw_probability(493, 697) == TARGET
    assert draw_probability(14, 21) == Rational(13, 30)


def test_one_blue_of_two_is_exactly_zero() -> None:
    p = draw_probability(1, 2)
    assert p == Rational.from_integer(0)
    assert (p.numerator, p.denominator) == (0, 1)


def test_single_disc_surfaces_division_by_zero() -> None:
    with pytest.raises(DivisionByZeroError):
        draw_probability(1, 1)


@pytest.mark.parametrize("blue, total", [(-1, 10), (11, 10)])
def test_blue_out_of_range(blue: int, total: int) -> None:
    with pytest.raises(ValueError):
        draw_probability(blue, total)


def test_initial_estimate() -> None:
    assert initial_blue_estimate(MINIMUM_TOTAL) == 714285714286
    assert initial_blue_estimate(100, Rational(1, 3)) == 33


def test_known_solution_is_fair() -> None:
    assert KNOWN_TOTAL >= 10**12
    assert is_fair_draw(KNOWN_BLUE, KNOWN_TOTAL)
    assert not is_fair_draw(KNOWN_BLUE + 1, KNOWN_TOTAL)
    assert not is_fair_draw(KNOWN_BLUE, KNOWN_TOTAL + 1)


def test_neighbours_bracket_the_target() -> None:
    assert draw_probability(KNOWN_BLUE - 1, KNOWN_TOTAL) < TARGET
    assert draw_probability(KNOWN_BLUE + 1, KNOWN_TOTAL) > TARGET


def test_evaluate_draw_report() -> None:
    report = evaluate_draw(85, 120, get_float_format("float32"))
    assert report.fair
    assert report.relation == 0
    assert report.probability == TARGET
    assert report.approx == 0.5
    assert report.fmt.name == "float32"

    report = evaluate_draw(84, 120)
    assert not report.fair
    assert report.relation == -1
    assert report.fmt.name == "float64"


def test_main_check_fair(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["discs.py", "check", "15", "21"])
    assert exc.value.code == 0
    out = capsys.readouterr().out
    assert "exact:         1/2" in out
    assert "exactly 1/2" in out


def test_main_check_unfair(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["discs.py", "check", str(KNOWN_BLUE + 1), str(KNOWN_TOTAL), "fp16"])
    assert exc.value.code == 2
    out = capsys.readouterr().out
    assert "above 1/2" in out
    assert "fp16:" in out


def test_main_estimate_default(capsys) -> None:
    main(["discs.py", "estimate"])
    out = capsys.readouterr().out
    assert "714285714286 blue" in out
    assert "ratio 5/7" in out


def test_main_estimate_with_ratio(capsys) -> None:
    main(["discs.py", "estimate", "21", "1/2"])
    assert "10 blue" in capsys.readouterr().out


@pytest.mark.parametrize("argv", [
    ["discs.py"],
    ["discs.py", "solve"],
    ["discs.py", "check", "15"],
    ["discs.py", "check", "x", "21"],
    ["discs.py", "check", "15", "21", "float8"],
    ["discs.py", "check", "30", "21"],
    ["discs.py", "check", "1", "1"],
    ["discs.py", "estimate", "21", "1/0"],
])
def test_main_errors_exit_1(argv, capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(argv)
    assert exc.value.code == 1
    assert capsys.readouterr().out


def test_main_defaults_to_sys_argv(monkeypatch, capsys) -> None:
    monkeypatch.setattr(discs.sys, "argv", ["discs.py", "estimate", "7"])
    main()
    assert "5 blue" in capsys.readouterr().out


def test_main_check_counts_past_float64_range(capsys) -> None:
    with pytest.raises(SystemExit) as exc:
        main(["discs.py", "check", str(10**400), str(10**400 + 1)])
    assert exc.value.code == 2
    out = capsys.readouterr().out
    assert "above 1/2" in out
    assert "float64:" in out
