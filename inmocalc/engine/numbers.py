"""Locale-aware numeric helpers (es-ES: "." groups thousands, "," is the decimal mark).

Pure functions. No I/O. Missing values are NaN, never exceptions.
"""

import math
import re

NAN = float("nan")

# Longest leading float literal, mirroring a lenient parseFloat
_FLOAT_PREFIX = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")


def is_num(n) -> bool:
    """True for finite ints/floats (bools excluded)."""
    if isinstance(n, bool) or not isinstance(n, (int, float)):
        return False
    return math.isfinite(n)


def safe(n) -> float:
    """Coerce NaN/None to 0 so a missing field only drops its own term."""
    if n is None:
        return 0.0
    try:
        value = float(n)
    except (TypeError, ValueError):
        return 0.0
    return 0.0 if math.isnan(value) else value


def parse_locale_number(raw) -> float:
    """Convert es-ES text to a float.

    Whitespace is dropped, every "." is treated as a thousands separator and
    "," becomes the decimal point: "1.234.567,89" -> 1234567.89.
    Returns NaN for empty or non-numeric text.
    """
    if raw is None:
        return NAN
    text = re.sub(r"\s+", "", str(raw)).replace(".", "").replace(",", ".")
    match = _FLOAT_PREFIX.match(text)
    if not match:
        return NAN
    value = float(match.group(0))
    return value if math.isfinite(value) else NAN


def format_for_editing(n) -> str:
    """Render a number for a text field: "," decimal mark, no grouping."""
    if not is_num(n):
        return ""
    value = float(n)
    if value.is_integer() and abs(value) < 1e16:
        text = str(int(value))
    else:
        text = repr(value)
    return text.replace(".", ",")


def clamp_with_error(n, min_value: float | None = None, max_value: float | None = None) -> tuple:
    """Clamp a finite value to [min, max] and describe the violation.

    Returns (value, error); error is "" when nothing was clamped.
    """
    if not is_num(n):
        return n, ""
    if max_value is not None and n > max_value:
        return max_value, f"Value cannot be greater than {max_value}"
    if min_value is not None and n < min_value:
        return min_value, f"Value cannot be less than {min_value}"
    return n, ""


def round_half_up(n: float) -> int:
    """Round like Math.round: halves go towards +infinity."""
    return math.floor(n + 0.5)


def format_currency(n) -> str:
    """Whole euros with "." grouping: 250000 -> "250.000 €"."""
    if not is_num(n):
        return ""
    return f"{round_half_up(float(n)):,} €".replace(",", ".")


def format_pct(n) -> str:
    """Two-decimal percentage; "–" when the figure is undefined."""
    if n is None or not is_num(n):
        return "–"
    return f"{n:.2f}%"
