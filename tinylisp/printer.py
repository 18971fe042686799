"""Printable form of tinylisp expressions."""

import math

from tinylisp.types.symbol import Symbol


def format_number(n: float) -> str:
    """Integral values print without a fractional part; others use repr."""
    if math.isfinite(n) and n == int(n) and abs(n) < 1e16:
        if n == 0 and math.copysign(1.0, n) < 0:
            return "-0"
        return str(int(n))
    return repr(n)


def to_string(expr) -> str:
    if isinstance(expr, Symbol):
        return str(expr)
    if isinstance(expr, list):
        return "(" + " ".join(to_string(e) for e in expr) + ")"
    if isinstance(expr, float):
        return format_number(expr)
    # Foreign values only reach here through direct builtin calls
    return str(expr)
