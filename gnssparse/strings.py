"""Low-level conversions of text fields into numbers, with C-style strictness.

The conversions accept what the C library number scanners accept: optional
leading white space, an optional sign, and (for integers) an optional base
prefix. Trailing characters of any kind, including white space, make a
conversion fail, as do values that fall outside the representable range.
"""

from __future__ import annotations

import math
import re
import struct
import sys

__all__ = [
    "to_double",
    "to_float",
    "to_int32",
    "to_uint32",
    "to_int8",
    "to_uint8",
    "trim_decimal_places",
    "contains_space",
]

_C_SPACE = " \t\n\v\f\r"
_DIGITS = "0123456789abcdefghijklmnopqrstuvwxyz"

_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1
_INT32_MIN = -(2**31)
_INT32_MAX = 2**31 - 1
_UINT32_MAX = 2**32 - 1

_FLT_MIN = 1.1754943508222875e-38
_FLOAT32 = struct.Struct("<f")

_FLOAT_PATTERN = re.compile(
    r"[ \t\n\v\f\r]*"
    r"(?P<body>"
    r"(?P<hex>[+-]?0[xX](?:[0-9a-fA-F]+\.?[0-9a-fA-F]*|\.[0-9a-fA-F]+)(?:[pP][+-]?\d+)?)"
    r"|(?P<dec>[+-]?(?:\d+\.?\d*(?:[eE][+-]?\d+)?|\.\d+(?:[eE][+-]?\d+)?))"
    r"|(?P<special>[+-]?(?:[iI][nN][fF](?:[iI][nN][iI][tT][yY])?"
    r"|[nN][aA][nN](?:\([0-9A-Za-z_]*\))?))"
    r")"
)


def _digit_value(ch: str) -> int:
    if not ch.isascii():
        return -1
    return _DIGITS.find(ch.lower())


def _scan_integer(text: str, base: int) -> tuple[int, int, bool]:
    """Scan an integer the way ``strtol`` does.

    Returns the (clamped) value, the index just past the last consumed
    character (0 when nothing was converted) and whether the value overflowed
    a 64-bit signed integer.
    """
    if base != 0 and not 2 <= base <= 36:
        raise ValueError(f"invalid base: {base}")

    n = len(text)
    pos = 0
    while pos < n and text[pos] in _C_SPACE:
        pos += 1

    negative = False
    if pos < n and text[pos] in "+-":
        negative = text[pos] == "-"
        pos += 1

    has_hex_prefix = (
        text[pos : pos + 2].lower() == "0x"
        and pos + 2 < n
        and 0 <= _digit_value(text[pos + 2]) < 16
    )
    if base in (0, 16) and has_hex_prefix:
        base = 16
        pos += 2
    elif base == 0:
        base = 8 if text[pos : pos + 1] == "0" else 10

    start = pos
    value = 0
    while pos < n:
        digit = _digit_value(text[pos])
        if digit < 0 or digit >= base:
            break
        value = value * base + digit
        pos += 1

    if pos == start:
        return 0, 0, False

    if negative:
        value = -value
    overflowed = not _INT64_MIN <= value <= _INT64_MAX
    value = min(max(value, _INT64_MIN), _INT64_MAX)
    return value, pos, overflowed


def _strict_integer(text: str, base: int) -> int:
    if not text:
        raise ValueError("empty string is not a number")
    value, end, overflowed = _scan_integer(text, base)
    if overflowed:
        raise ValueError(f"integer out of range: {text!r}")
    if end != len(text):
        raise ValueError(f"not a valid integer: {text!r}")
    return value


def _mantissa_has_nonzero(body: str, is_hex: bool) -> bool:
    digits = body.lstrip("+-")
    if is_hex:
        digits = digits[2:].lower().split("p", 1)[0]
    else:
        digits = digits.lower().split("e", 1)[0]
    return any(ch not in "0." for ch in digits)


def _scan_double(text: str) -> tuple[float, bool]:
    """Parse ``text`` as a double; return the value and whether it was finite text."""
    if not text:
        raise ValueError("empty string is not a number")
    match = _FLOAT_PATTERN.fullmatch(text)
    if match is None:
        raise ValueError(f"not a valid number: {text!r}")

    body = match.group("body")
    if match.group("special") is not None:
        negative = body.startswith("-")
        word = body.lstrip("+-").lower()
        value = math.nan if word.startswith("nan") else math.inf
        return (-value if negative else value), False

    is_hex = match.group("hex") is not None
    try:
        value = float.fromhex(body) if is_hex else float(body)
    except OverflowError as exc:
        raise ValueError(f"number out of range: {text!r}") from exc

    if math.isinf(value):
        raise ValueError(f"number out of range: {text!r}")
    if value == 0.0 and _mantissa_has_nonzero(body, is_hex):
        raise ValueError(f"number out of range: {text!r}")
    if value != 0.0 and abs(value) < sys.float_info.min:
        raise ValueError(f"number out of range: {text!r}")
    return value, True


def to_double(text: str) -> float:
    """Convert the whole of ``text`` to a double, raising ValueError on failure."""
    value, _ = _scan_double(text)
    return value


def to_float(text: str) -> float:
    """Convert the whole of ``text`` to a single-precision value, raising ValueError on failure."""
    value, finite = _scan_double(text)
    if not finite:
        return value
    try:
        (single,) = _FLOAT32.unpack(_FLOAT32.pack(value))
    except OverflowError as exc:
        raise ValueError(f"number out of range: {text!r}") from exc
    if single == 0.0 and value != 0.0:
        raise ValueError(f"number out of range: {text!r}")
    if single != 0.0 and abs(single) < _FLT_MIN:
        raise ValueError(f"number out of range: {text!r}")
    return single


def to_int32(text: str, base: int = 10) -> int:
    """Convert the whole of ``text`` to a signed 32-bit integer, raising ValueError on failure."""
    value = _strict_integer(text, base)
    if not _INT32_MIN <= value <= _INT32_MAX:
        raise ValueError(f"integer out of 32-bit range: {text!r}")
    return value


def to_uint32(text: str, base: int = 10) -> int:
    """Convert the whole of ``text`` to an unsigned 32-bit integer, raising ValueError on failure."""
    value = _strict_integer(text, base)
    if not 0 <= value <= _UINT32_MAX:
        raise ValueError(f"integer out of unsigned 32-bit range: {text!r}")
    return value


def _lenient_integer(text: str, base: int) -> int:
    try:
        value, _, _ = _scan_integer(text, base)
    except ValueError:
        return 0
    return value


def to_int8(text: str, base: int = 10) -> int:
    """Convert the leading integer of ``text`` and wrap it to a signed byte.

    No validation is done: unparseable text gives 0.
    """
    return (_lenient_integer(text, base) + 128) % 256 - 128


def to_uint8(text: str, base: int = 10) -> int:
    """Convert the leading integer of ``text`` and wrap it to an unsigned byte.

    No validation is done: unparseable text gives 0.
    """
    return _lenient_integer(text, base) % 256


def _round_half_away(value: float) -> float:
    if not math.isfinite(value):
        return value
    magnitude = abs(value)
    whole = math.floor(magnitude)
    if magnitude - whole >= 0.5:
        whole += 1
    return math.copysign(float(whole), value)


def trim_decimal_places(num: float) -> str:
    """Round ``num`` to three decimals (half away from zero) and format it with three decimals."""
    rounded = _round_half_away(num * 1000) / 1000
    return f"{rounded:.3f}"


def contains_space(text: str) -> bool:
    """Tell whether ``text`` holds any C white-space character."""
    return any(ch in _C_SPACE for ch in text)