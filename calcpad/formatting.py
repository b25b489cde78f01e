from __future__ import annotations

import math
from decimal import ROUND_HALF_UP, Decimal

ROUNDING_SCALE = 10_000_000_000  # 10 decimal places
LARGE_RESULT_LIMIT = 999_999_999_999
SMALL_RESULT_LIMIT = 1e-9
EXPONENT_DIGITS = 6
DISPLAY_MAX_CHARS = 12


def _round_half_up(value: float) -> float:
    floor = math.floor(value)
    if value - floor >= 0.5:
        floor += 1
    return float(floor)


def round10(value: float) -> float:
    """Round to 10 decimal places, ties toward +infinity.

    Suppresses binary noise such as 0.1 + 0.2 == 0.30000000000000004.
    Values too large to scale are returned unchanged; they carry no fractional part.
    """

    scaled = value * ROUNDING_SCALE
    if not math.isfinite(scaled):
        return value
    rounded = _round_half_up(scaled) / ROUNDING_SCALE
    # -0.0 would otherwise print as "-0".
    return rounded + 0.0


def to_exponential(value: float, digits: int = EXPONENT_DIGITS) -> str:
    """Exponential notation with a fixed number of fractional digits: 1.000000e+13.

    Ties round away from zero on the exact binary value, so 1234566500000 gives
    1.234567e+12 rather than the round-half-even 1.234566e+12.
    """

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return f"{0:.{digits}f}e+0"

    exact = Decimal(value)
    exponent = exact.adjusted()
    rounded = exact.quantize(Decimal(1).scaleb(exponent - digits), rounding=ROUND_HALF_UP)
    if rounded.adjusted() > exponent:
        # 9999999.5 carries into the next power of ten.
        exponent += 1
        rounded = exact.quantize(Decimal(1).scaleb(exponent - digits), rounding=ROUND_HALF_UP)

    sign, digit_tuple, _ = rounded.as_tuple()
    coefficient = "".join(str(d) for d in digit_tuple)
    mantissa = f"{coefficient[0]}.{coefficient[1:]}" if digits else coefficient
    e_sign = "-" if exponent < 0 else "+"
    return f"{'-' if sign else ''}{mantissa}e{e_sign}{abs(exponent)}"


def to_plain(value: float) -> str:
    """Shortest round-trip decimal text.

    Integers print without a fractional part ("12", not "12.0"), magnitudes below 1e-6
    switch to a compact exponent ("5e-7") and magnitudes of 1e21 and above to "1e+21".
    """

    if math.isnan(value):
        return "NaN"
    if math.isinf(value):
        return "Infinity" if value > 0 else "-Infinity"
    if value == 0:
        return "0"

    sign = "-" if value < 0 else ""
    _, digit_tuple, exp = Decimal(repr(abs(value))).normalize().as_tuple()
    digits = "".join(str(d) for d in digit_tuple)
    k = len(digits)
    # Position of the decimal point relative to the start of `digits`.
    n = k + int(exp)

    if k <= n <= 21:
        return f"{sign}{digits}{'0' * (n - k)}"
    if 0 < n <= 21:
        return f"{sign}{digits[:n]}.{digits[n:]}"
    if -6 < n <= 0:
        return f"{sign}0.{'0' * -n}{digits}"

    e = n - 1
    e_sign = "-" if e < 0 else "+"
    if k == 1:
        return f"{sign}{digits}e{e_sign}{abs(e)}"
    return f"{sign}{digits[0]}.{digits[1:]}e{e_sign}{abs(e)}"


def format_result(value: float) -> str:
    """Text stored as the new current value after a successful evaluation."""

    magnitude = abs(value)
    if magnitude > LARGE_RESULT_LIMIT or 0 < magnitude < SMALL_RESULT_LIMIT:
        return to_exponential(value)
    return to_plain(value)


def display_text(current_text: str) -> str:
    """Shorten over-long values for display only; the stored text is left alone."""

    if len(current_text) <= DISPLAY_MAX_CHARS:
        return current_text
    try:
        value = float(current_text)
    except ValueError:
        return current_text
    return to_exponential(value)
