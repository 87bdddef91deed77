import math
import re

_DECIMAL = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)
_PREFIXED = re.compile(r"0([xX][0-9a-fA-F]+|[bB][01]+|[oO][0-7]+)")
_INFINITY = re.compile(r"[+-]?Infinity")


def to_number(value: object) -> float:
    """Coerce a cell value the way a JavaScript ``Number()`` call would.

    Blank strings become ``0.0``. Decimal and exponent literals use ASCII
    digits only; unsigned ``0x``/``0b``/``0o`` literals are read in their base.
    Anything else (including ``None``) becomes NaN, which compares unequal to
    everything.
    """
    if isinstance(value, bool):
        return float(value)
    if isinstance(value, int | float):
        return float(value)
    if not isinstance(value, str):
        return math.nan
    text = value.strip()
    if text == "":
        return 0.0
    if _DECIMAL.fullmatch(text):
        return float(text)
    if _PREFIXED.fullmatch(text):
        try:
            return float(int(text, 0))
        except OverflowError:
            return math.inf
    if _INFINITY.fullmatch(text):
        return -math.inf if text.startswith("-") else math.inf
    return math.nan
