from __future__ import annotations

import math
import re
from typing import Any, NamedTuple

DEFAULT_TOLERANCE = 0.01

# Longest leading decimal literal: sign, digits with optional fraction, and an
# exponent only when digits follow it. Anything after the match is ignored.
_LEADING_NUMBER_RE = re.compile(
    r"[+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)"
)


class GradeResult(NamedTuple):
    correct: bool
    user_value: float
    correct_value: float


def _to_float(value: Any) -> float:
    # ints beyond float range overflow to infinity rather than raising
    try:
        return float(value)
    except OverflowError:
        return -math.inf if value < 0 else math.inf


def parse_float(raw: Any) -> float:
    """
    Loose numeric parse: "12.5 kN" -> 12.5, "  -3e2x" -> -300.0, "abc" -> nan.

    Numbers are returned as floats unchanged; None and unparsable text give nan.
    """
    if raw is None or isinstance(raw, bool):
        return math.nan
    if isinstance(raw, (int, float)):
        return _to_float(raw)

    m = _LEADING_NUMBER_RE.match(str(raw).lstrip())
    if not m:
        return math.nan
    text = m.group(0)
    if text.lstrip("+-") == "Infinity":
        return -math.inf if text.startswith("-") else math.inf
    return float(text)


def resolve_tolerance(value: Any) -> float:
    # Falsy tolerance (missing, 0, "", nan) falls back to the default. A
    # non-empty string is not falsy: "0" means zero, blank text means zero.
    if not value or (isinstance(value, float) and math.isnan(value)):
        return DEFAULT_TOLERANCE
    if isinstance(value, str):
        text = value.strip()
        if not text:
            return 0.0
        try:
            value = float(text)
        except ValueError:
            return math.nan
    try:
        tol = _to_float(value)
    except (TypeError, ValueError):
        return math.nan
    if math.isnan(tol):
        return math.nan
    return max(tol, 0.0)


def grade(user_raw: Any, correct_raw: Any, tolerance: Any = None) -> GradeResult:
    user_value = parse_float(user_raw)
    correct_value = parse_float(correct_raw)
    tol = resolve_tolerance(tolerance)
    # nan on either side (or in tol) makes the comparison False.
    correct = abs(user_value - correct_value) <= tol
    return GradeResult(bool(correct), user_value, correct_value)


def format_number(x: float) -> str:
    """
    Display form for messages: integral values without a fraction, fixed
    notation down to 1e-6, shortest exponent form ("1e-7") below that.
    """
    if math.isnan(x):
        return "NaN"
    if math.isinf(x):
        return "Infinity" if x > 0 else "-Infinity"
    if float(x).is_integer() and abs(x) < 1e21:
        return str(int(x))

    text = repr(float(x))
    if "e" not in text:
        return text
    mantissa, exp_text = text.split("e")
    exp = int(exp_text)
    sign = "-" if mantissa.startswith("-") else ""
    digits = mantissa.lstrip("-").replace(".", "")
    if -7 < exp < 0:
        return f"{sign}0.{'0' * (-exp - 1)}{digits}"
    return f"{mantissa}e{'+' if exp > 0 else '-'}{abs(exp)}"
