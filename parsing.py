from rational import Rational

ALLOWED_CHARS = set("0123456789-/")

class ParseError(ValueError):
    pass

def check_text_strict(s: str) -> str:
    s = s.strip()
    if any(c not in ALLOWED_CHARS for c in s):
        bad = sorted(set(c for c in s if c not in ALLOWED_CHARS))
        raise ParseError(f"Illegal character(s) found: {bad}. Allowed are only 0-9 - /")
    if not s:
        raise ParseError("Empty input.")
    return s

def parse_int_at(s: str, i: int):
    n = len(s)
    start = i
    # optional leading '-'
    if i < n and s[i] == '-':
        i += 1
        if i >= n or not s[i].isdigit():
            raise ParseError(f"'-' must be followed by digits at position {i}")
    if i >= n or not s[i].isdigit():
        raise ParseError(f"Expected digit at position {i}")
    while i < n and s[i].isdigit():
        i += 1
    return int(s[start:i]), i

def parse_integer(s: str) -> int:
    s = check_text_strict(s)
    value, i = parse_int_at(s, 0)
    if i != len(s):
        raise ParseError(f"Unexpected trailing content at position {i}: {s[i:]}")
    return value

def parse_rational(s: str) -> Rational:
    """
    Parse "n" or "n/d" into a canonical Rational.
    A zero denominator raises DivisionByZeroError from Rational itself.
    """
    s = check_text_strict(s)
    num, i = parse_int_at(s, 0)
    if i == len(s):
        return Rational.from_integer(num)
    if s[i] != '/':
        raise ParseError(f"Expected '/' at position {i}")
    den, i = parse_int_at(s, i + 1)
    if i != len(s):
        raise ParseError(f"Unexpected trailing content at position {i}: {s[i:]}")
    return Rational.from_parts(num, den)
