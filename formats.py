from dataclasses import dataclass
import math

import numpy as np

@dataclass(frozen=True)
class FloatFormat:
    name: str
    dtype: type         # numpy scalar type used for evaluation
    p: int              # precision in bits (incl. implicit 1)
    # Derived from np.finfo:
    eps: float          # machine epsilon = 2^(1-p)
    max_finite: float   # largest finite positive

def _derive(name: str, dtype: type) -> FloatFormat:
    info = np.finfo(dtype)
    return FloatFormat(
        name=name, dtype=dtype, p=info.nmant + 1,
        eps=float(info.eps), max_finite=float(info.max),
    )

# IEEE-754 binary formats numpy evaluates natively:
# - binary16:  p=11
# - binary32:  p=24
# - binary64:  p=53
_REGISTRY = {
    "float16":   np.float16,
    "fp16":      np.float16,
    "binary16":  np.float16,
    "half":      np.float16,

    "float32":   np.float32,
    "fp32":      np.float32,
    "binary32":  np.float32,
    "single":    np.float32,

    "float64":   np.float64,
    "fp64":      np.float64,
    "binary64":  np.float64,
    "double":    np.float64,
}

def get_float_format(name: str) -> FloatFormat:
    key = (name or "float64").lower()
    try:
        dtype = _REGISTRY[key]
    except KeyError:
        raise NotImplementedError(f"Format '{name}' not implemented. Supported formats {sorted(_REGISTRY.keys())}")
    return _derive(key, dtype)

def _count_to_float(x: int) -> float:
    # ints past the float64 range saturate instead of raising
    try:
        return float(x)
    except OverflowError:
        return math.inf if x > 0 else -math.inf

def evaluate_draw_float(blue: int, total: int, fmt: FloatFormat) -> float:
    """
    (B/T) * ((B-1)/(T-1)) evaluated entirely in fmt's dtype.

    Counts beyond fmt.max_finite round to inf, so the result may be inf or
    nan; numpy's overflow/invalid/divide warnings are silenced for that.
    Display only: equality decisions go through Rational.
    """
    t = fmt.dtype
    one = t(1)
    with np.errstate(over="ignore", invalid="ignore", divide="ignore"):
        b = np.array(_count_to_float(blue), dtype=np.float64).astype(t)
        n = np.array(_count_to_float(total), dtype=np.float64).astype(t)
        v = (b / n) * ((b - one) / (n - one))
    return float(v)
