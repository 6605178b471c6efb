"""Numeric helpers: integration, interpolation and SI-prefix formatting."""

import math
from collections.abc import Callable, Iterable, Sequence

from treewalk.errors import InvalidInput, OutOfRange

_SI_PREFIXES: dict[int, str] = {
    -30: "q",
    -27: "r",
    -24: "y",
    -21: "z",
    -18: "a",
    -15: "f",
    -12: "p",
    -9: "n",
    -6: "µ",
    -3: "m",
    0: "",
    3: "k",
    6: "M",
    9: "G",
    12: "T",
    15: "P",
    18: "E",
    21: "Z",
    24: "Y",
    27: "R",
    30: "Q",
}
_MIN_EXPONENT = min(_SI_PREFIXES)
_MAX_EXPONENT = max(_SI_PREFIXES)


def integrate_trapezoidal(f: Callable[[float], float], x0: float, x1: float, n: int = 1000) -> float:
    """Approximate the integral of ``f`` over ``[x0, x1]`` with ``n`` trapezoids."""
    if n <= 0:
        raise InvalidInput("n must be greater than 0")

    dx = (x1 - x0) / n
    total = 0.5 * (f(x0) + f(x1))
    for i in range(1, n):
        total += f(x0 + i * dx)
    return total * dx


def create_interpolator(points: Iterable[Sequence[float]]) -> Callable[[float], float]:
    """Build a piecewise-linear interpolator over ``(x, y)`` samples.

    Samples are sorted by x. The returned callable raises OutOfRange for x
    outside the sampled interval.
    """
    ordered = sorted(((float(p[0]), float(p[1])) for p in points), key=lambda p: p[0])
    if not ordered:
        raise InvalidInput("no points given")

    def interpolate(x: float) -> float:
        if x < ordered[0][0] or x > ordered[-1][0]:
            raise OutOfRange(f"x = {x} is outside the sampled range")

        if len(ordered) == 1:
            return ordered[0][1]

        for (xa, ya), (xb, yb) in zip(ordered, ordered[1:]):
            if xa <= x <= xb:
                if xa == xb:
                    return ya
                t = (x - xa) / (xb - xa)
                return ya + t * (yb - ya)

        raise OutOfRange(f"x = {x} is outside the sampled range")

    return interpolate


def scale_value(value: float, unit: str, sig_digits: int = 3) -> str:
    """Format ``value`` in engineering notation with an SI prefix.

    >>> scale_value(15320, "Ω")
    '15.3kΩ'
    >>> scale_value(-0.0025, "m")
    '-2.5mm'
    """
    unit = unit.strip()

    if value == 0.0:
        return f"0{unit}"
    if not math.isfinite(value):
        return f"{value}{unit}"

    exponent = 3 * math.floor(math.log10(abs(value)) / 3)
    exponent = max(_MIN_EXPONENT, min(_MAX_EXPONENT, exponent))
    scaled = value / 10.0**exponent

    sig_digits = max(1, min(10, sig_digits))
    decimals = max(0, sig_digits - 1 - math.floor(math.log10(abs(scaled))))

    formatted = f"{scaled:.{decimals}f}"
    if "." in formatted:
        formatted = formatted.rstrip("0").rstrip(".")

    return f"{formatted}{_SI_PREFIXES[exponent]}{unit}"
