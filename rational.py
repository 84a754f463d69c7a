from __future__ import annotations
from dataclasses import dataclass
import operator


class DivisionByZeroError(ZeroDivisionError):
    pass


def gcd(a: int, b: int) -> int:
    """Greatest common divisor of |a| and |b| (Euclid). gcd(0, 0) == 0."""
    a, b = abs(a), abs(b)
    while b != 0:
        a, b = b, a % b
    return a

def lcm(a: int, b: int) -> int:
    g = gcd(a, b)
    if g == 0:
        return 0
    return abs(a) // g * abs(b)

def _as_int(x) -> int:
    # bool is an int subclass but never a disc count
    if isinstance(x, bool):
        raise TypeError("bool is not accepted as an integer operand")
    return operator.index(x)

def _lift(x):
    """Rational -> itself, integral index -> x/1, anything else -> None."""
    if isinstance(x, Rational):
        return x
    if isinstance(x, bool):
        return None
    try:
        n = operator.index(x)
    except TypeError:
        return None
    return Rational.raw(n, 1)


@dataclass(frozen=True, eq=False)
class Rational:
    """
    Exact fraction numerator/denominator.

    The constructor always reduces to lowest terms and keeps the sign on the
    numerator, so the denominator is strictly positive. Values are immutable;
    every operator returns a new Rational.
    """
    numerator: int
    denominator: int = 1

    def __post_init__(self):
        n = _as_int(self.numerator)
        d = _as_int(self.denominator)
        if d == 0:
            raise DivisionByZeroError(f"zero denominator in {n}/0")
        if d < 0:
            n, d = -n, -d
        g = gcd(n, d)
        if g > 1:
            n, d = n // g, d // g
        object.__setattr__(self, "numerator", n)
        object.__setattr__(self, "denominator", d)

    # ---- construction ----

    @classmethod
    def from_parts(cls, numerator: int, denominator: int) -> Rational:
        return cls(numerator, denominator)

    @classmethod
    def from_integer(cls, n: int) -> Rational:
        return cls.raw(_as_int(n), 1)

    @classmethod
    def raw(cls, numerator: int, denominator: int) -> Rational:
        """
        Build without gcd reduction. Only for intermediate values inside the
        operators below, which call simplify() before returning.
        A zero denominator is still rejected and the sign still moves onto
        the numerator.
        """
        if denominator == 0:
            raise DivisionByZeroError(f"zero denominator in {numerator}/0")
        if denominator < 0:
            numerator, denominator = -numerator, -denominator
        q = object.__new__(cls)
        object.__setattr__(q, "numerator", numerator)
        object.__setattr__(q, "denominator", denominator)
        return q

    def simplify(self) -> Rational:
        g = gcd(self.numerator, self.denominator)
        if g <= 1:
            return self
        return Rational.raw(self.numerator // g, self.denominator // g)

    # ---- arithmetic ----

    def add(self, other) -> Rational:
        other = _lift(other)
        if other is None:
            raise TypeError("add expects a Rational or an integer")
        if self.denominator == other.denominator:
            r = Rational.raw(self.numerator + other.numerator, self.denominator)
        else:
            r = Rational.raw(self.numerator * other.denominator + other.numerator * self.denominator,
                             self.denominator * other.denominator)
        return r.simplify()

    def subtract(self, other) -> Rational:
        other = _lift(other)
        if other is None:
            raise TypeError("subtract expects a Rational or an integer")
        if self.denominator == other.denominator:
            r = Rational.raw(self.numerator - other.numerator, self.denominator)
        else:
            r = Rational.raw(self.numerator * other.denominator - other.numerator * self.denominator,
                             self.denominator * other.denominator)
        return r.simplify()

    def multiply(self, other) -> Rational:
        other = _lift(other)
        if other is None:
            raise TypeError("multiply expects a Rational or an integer")
        return Rational.raw(self.numerator * other.numerator,
                            self.denominator * other.denominator).simplify()

    def reciprocal(self) -> Rational:
        if self.numerator == 0:
            raise DivisionByZeroError("reciprocal of zero")
        return Rational.from_parts(self.denominator, self.numerator)

    def divide(self, other) -> Rational:
        other = _lift(other)
        if other is None:
            raise TypeError("divide expects a Rational or an integer")
        return self.multiply(other.reciprocal())

    def negate(self) -> Rational:
        return Rational.raw(-self.numerator, self.denominator)

    def __add__(self, other):
        if _lift(other) is None:
            return NotImplemented
        return self.add(other)

    __radd__ = __add__

    def __sub__(self, other):
        if _lift(other) is None:
            return NotImplemented
        return self.subtract(other)

    def __rsub__(self, other):
        other = _lift(other)
        if other is None:
            return NotImplemented
        return other.subtract(self)

    def __mul__(self, other):
        if _lift(other) is None:
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other):
        if _lift(other) is None:
            return NotImplemented
        return self.divide(other)

    def __rtruediv__(self, other):
        other = _lift(other)
        if other is None:
            return NotImplemented
        return other.divide(self)

    def __neg__(self):
        return self.negate()

    def __pos__(self):
        return self

    def __abs__(self):
        return Rational.raw(abs(self.numerator), self.denominator)

    # ---- comparison ----

    def compare(self, other) -> int:
        """
        -1, 0 or 1 as self is below, equal to or above other.

        Both sides are lifted onto L = lcm(den_a, den_b) and the scaled
        numerators are compared as integers, so no rounding is involved.
        """
        other = _lift(other)
        if other is None:
            raise TypeError("compare expects a Rational or an integer")
        L = lcm(self.denominator, other.denominator)
        lhs = self.numerator * (L // self.denominator)
        rhs = other.numerator * (L // other.denominator)
        return (lhs > rhs) - (lhs < rhs)

    def __eq__(self, other):
        other = _lift(other)
        if other is None:
            return NotImplemented
        # raw values may still be unreduced
        a, b = self.simplify(), other.simplify()
        return a.numerator == b.numerator and a.denominator == b.denominator

    def __hash__(self):
        q = self.simplify()
        if q.denominator == 1:
            return hash(q.numerator)
        return hash((q.numerator, q.denominator))

    def __lt__(self, other):
        if _lift(other) is None:
            return NotImplemented
        return self.compare(other) < 0

    def __le__(self, other):
        if _lift(other) is None:
            return NotImplemented
        return self.compare(other) <= 0

    def __gt__(self, other):
        if _lift(other) is None:
            return NotImplemented
        return self.compare(other) > 0

    def __ge__(self, other):
        if _lift(other) is None:
            return NotImplemented
        return self.compare(other) >= 0

    # ---- conversions ----

    def to_float(self) -> float:
        """Lossy; for display only, never for equality or ordering."""
        return self.numerator / self.denominator

    __float__ = to_float

    def floor(self) -> int:
        return self.numerator // self.denominator

    __floor__ = floor

    def format_mixed(self) -> str:
        """
        "W" for whole values, "W r/d" when |num| >= den, otherwise "n/d".
        e.g. 22/7 -> "3 1/7", -7/3 -> "-2 1/3", 5/7 -> "5/7"
        """
        n, d = self.numerator, self.denominator
        if abs(n) < d:
            return f"{n}/{d}"
        sign = '-' if n < 0 else ''
        whole, rem = divmod(abs(n), d)
        if rem == 0:
            return f"{sign}{whole}"
        return f"{sign}{whole} {rem}/{d}"

    def __str__(self):
        return f"{self.numerator}/{self.denominator}"
