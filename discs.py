from __future__ import annotations
from dataclasses import dataclass
from typing import List, Optional

import sys, time

from rational import Rational, DivisionByZeroError
from parsing import parse_integer, parse_rational, ParseError
from formats import FloatFormat, get_float_format, evaluate_draw_float

# Probability of drawing two blue discs we are looking for
TARGET = Rational(1, 2)
# 15 blue of 21 is the smallest non-trivial fair box; its ratio seeds estimates
STARTING_RATIO = Rational(15, 21)
MINIMUM_TOTAL = 10**12 + 1

RELATIONS = {-1: "below", 0: "exactly", 1: "above"}

def draw_probability(blue: int, total: int) -> Rational:
    """
    Exact probability that two discs drawn without replacement are both blue:

        (B/T) * ((B-1)/(T-1))

    Raises:
        ValueError: if blue is not in [0, total]
        DivisionByZeroError: if total == 1 (the second draw has no discs)
    """
    if not 0 <= blue <= total:
        raise ValueError(f"blue discs must be in [0, {total}], got {blue}")
    b = Rational.from_integer(blue)
    t = Rational.from_integer(total)
    return (b / t) * ((b - 1) / (t - 1))

def initial_blue_estimate(total: int, ratio: Rational = STARTING_RATIO) -> int:
    return (ratio * total).floor()

def is_fair_draw(blue: int, total: int) -> bool:
    return draw_probability(blue, total) == TARGET

@dataclass(frozen=True)
class DrawReport:
    blue: int
    total: int
    probability: Rational
    relation: int           # compare(probability, TARGET): -1, 0, 1
    approx: float           # probability.to_float()
    fmt: FloatFormat
    float_eval: float       # probability evaluated in fmt, may be inf/nan

    @property
    def fair(self) -> bool:
        return self.relation == 0

def evaluate_draw(blue: int, total: int, fmt: Optional[FloatFormat] = None) -> DrawReport:
    if fmt is None:
        fmt = get_float_format("float64")
    p = draw_probability(blue, total)
    return DrawReport(
        blue=blue, total=total, probability=p, relation=p.compare(TARGET),
        approx=p.to_float(), fmt=fmt, float_eval=evaluate_draw_float(blue, total, fmt),
    )

def print_report(report: DrawReport) -> None:
    print(f"({report.blue} / {report.total}) * ({report.blue - 1} / {report.total - 1})")
    print(f"  exact:         {report.probability}")
    print(f"  mixed:         {report.probability.format_mixed()}")
    print(f"  approx:        {report.approx:.17g}")
    print(f"  {report.fmt.name + ':':<14} {report.float_eval:.17g}")
    print(f"  {RELATIONS[report.relation]} {TARGET}")

def usage(prog: str) -> None:
    print(f"Usage: {prog} check <blue> <total> [float_format]")
    print(f"       {prog} estimate [total] [ratio]")

def main(argv: Optional[List[str]] = None):
    if argv is None:
        argv = sys.argv
    prog, args = argv[0], argv[1:]
    if not args or args[0] not in ("check", "estimate"):
        usage(prog)
        sys.exit(1)

    command, args = args[0], args[1:]
    try:
        if command == "check":
            if len(args) not in (2, 3):
                usage(prog)
                sys.exit(1)
            blue = parse_integer(args[0])
            total = parse_integer(args[1])
            fmt = get_float_format(args[2] if len(args) == 3 else "float64")
            t0 = time.perf_counter()
            report = evaluate_draw(blue, total, fmt)
            t1 = time.perf_counter()
            print_report(report)
            print(f"Evaluated in {(t1 - t0) * 1000:.3f}ms")
            sys.exit(0 if report.fair else 2)

        if len(args) > 2:
            usage(prog)
            sys.exit(1)
        total = parse_integer(args[0]) if args else MINIMUM_TOTAL
        ratio = parse_rational(args[1]) if len(args) == 2 else STARTING_RATIO
        blue = initial_blue_estimate(total, ratio)
        print(f"Starting estimate for {total} discs at ratio {ratio}: {blue} blue")
    except ParseError as e:
        print(f"Error parsing arguments: {e}"); sys.exit(1)
    except NotImplementedError as e:
        print(f"Error: {e}"); sys.exit(1)
    except (ValueError, DivisionByZeroError) as e:
        print(f"Error: {e}"); sys.exit(1)

if __name__ == "__main__":
    main()
