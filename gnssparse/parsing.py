"""Helpers for decoding binary block fields and NMEA text fields."""

from __future__ import annotations

import calendar
import struct
import time
from dataclasses import dataclass

from gnssparse.strings import to_double, to_float, to_int32, to_uint32

__all__ = [
    "ParseError",
    "MessageHeader",
    "unpack_double",
    "unpack_float",
    "unpack_int16",
    "unpack_int32",
    "unpack_uint16",
    "unpack_uint32",
    "parse_double",
    "parse_float",
    "parse_int16",
    "parse_int32",
    "parse_uint8",
    "parse_uint16",
    "parse_uint32",
    "convert_utc_double_to_seconds",
    "convert_dms_to_degrees",
    "convert_utc_to_unix",
    "convert_user_period_to_rx_command",
    "get_crc",
    "get_id",
    "get_length",
    "get_tow",
    "get_wnc",
]

_DOUBLE = struct.Struct("<d")
_FLOAT = struct.Struct("<f")
_INT16 = struct.Struct("<h")
_INT32 = struct.Struct("<i")
_UINT16 = struct.Struct("<H")
_UINT32 = struct.Struct("<I")

_BLOCK_NUMBER_MASK = 8191


class ParseError(ValueError):
    """Raised when a message or one of its fields cannot be parsed."""


@dataclass
class MessageHeader:
    """Frame and time stamp (nanoseconds since the Unix epoch) of a parsed message."""

    frame_id: str = ""
    stamp: int = 0


def _read(layout: struct.Struct, buffer: bytes, offset: int = 0):
    if len(buffer) < offset + layout.size:
        raise ParseError(
            f"buffer too short: need {offset + layout.size} bytes, have {len(buffer)}"
        )
    return layout.unpack_from(buffer, offset)[0]


def unpack_double(buffer: bytes) -> float:
    """Read a little-endian double from the start of ``buffer``."""
    return _read(_DOUBLE, buffer)


def unpack_float(buffer: bytes) -> float:
    """Read a little-endian single-precision float from the start of ``buffer``."""
    return _read(_FLOAT, buffer)


def unpack_int16(buffer: bytes) -> int:
    """Read a little-endian signed 16-bit integer from the start of ``buffer``."""
    return _read(_INT16, buffer)


def unpack_int32(buffer: bytes) -> int:
    """Read a little-endian signed 32-bit integer from the start of ``buffer``."""
    return _read(_INT32, buffer)


def unpack_uint16(buffer: bytes) -> int:
    """Read a little-endian unsigned 16-bit integer from the start of ``buffer``."""
    return _read(_UINT16, buffer)


def unpack_uint32(buffer: bytes) -> int:
    """Read a little-endian unsigned 32-bit integer from the start of ``buffer``."""
    return _read(_UINT32, buffer)


def parse_double(text: str) -> float:
    """Parse a text field as a double; an empty field gives 0.0."""
    if not text:
        return 0.0
    try:
        return to_double(text)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


def parse_float(text: str) -> float:
    """Parse a text field as a single-precision float; an empty field gives 0.0."""
    if not text:
        return 0.0
    try:
        return to_float(text)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc


def _parse_ranged(text: str, base: int, low: int, high: int, kind: str) -> int:
    if not text:
        return 0
    try:
        value = to_int32(text, base) if low < 0 else to_uint32(text, base)
    except ValueError as exc:
        raise ParseError(str(exc)) from exc
    if not low <= value <= high:
        raise ParseError(f"value {value} out of {kind} range")
    return value


def parse_int16(text: str, base: int = 10) -> int:
    """Parse a text field as a signed 16-bit integer; an empty field gives 0."""
    return _parse_ranged(text, base, -(2**15), 2**15 - 1, "int16")


def parse_int32(text: str, base: int = 10) -> int:
    """Parse a text field as a signed 32-bit integer; an empty field gives 0."""
    return _parse_ranged(text, base, -(2**31), 2**31 - 1, "int32")


def parse_uint8(text: str, base: int = 10) -> int:
    """Parse a text field as an unsigned 8-bit integer; an empty field gives 0."""
    return _parse_ranged(text, base, 0, 2**8 - 1, "uint8")


def parse_uint16(text: str, base: int = 10) -> int:
    """Parse a text field as an unsigned 16-bit integer; an empty field gives 0."""
    return _parse_ranged(text, base, 0, 2**16 - 1, "uint16")


def parse_uint32(text: str, base: int = 10) -> int:
    """Parse a text field as an unsigned 32-bit integer; an empty field gives 0."""
    return _parse_ranged(text, base, 0, 2**32 - 1, "uint32")


def _split_hhmmss(utc_double: float) -> tuple[int, int, int]:
    whole = int(utc_double)
    hours = whole // 10000
    minutes = (whole - hours * 10000) // 100
    seconds = whole - hours * 10000 - minutes * 100
    return hours, minutes, seconds


def convert_utc_double_to_seconds(utc_double: float) -> float:
    """Turn an NMEA ``hhmmss.ss`` time into seconds since midnight."""
    hours, minutes, _ = _split_hhmmss(utc_double)
    return utc_double - float(hours * 10000 + minutes * 100) + float(hours * 3600 + minutes * 60)


def convert_dms_to_degrees(dms: float) -> float:
    """Turn an NMEA ``dddmm.mmmm`` angle into decimal degrees."""
    whole_degrees = int(dms) // 100
    minutes = dms - float(whole_degrees * 100)
    return float(whole_degrees) + minutes / 60.0


def convert_utc_to_unix(utc_double: float, now: float | None = None) -> int:
    """Combine an NMEA ``hhmmss.ss`` time with the UTC date of ``now`` into Unix seconds.

    ``now`` is a Unix time in seconds and defaults to the current time. The
    fractional seconds of ``utc_double`` are dropped.
    """
    if now is None:
        now = time.time()
    today = time.gmtime(now)
    hours, minutes, seconds = _split_hhmmss(utc_double)
    return calendar.timegm(
        (today.tm_year, today.tm_mon, today.tm_mday, hours, minutes, seconds)
    )


def convert_user_period_to_rx_command(period_user: int) -> str:
    """Turn a period in milliseconds into the receiver's interval keyword."""
    if period_user == 0:
        return "OnChange"
    if period_user < 1000:
        return f"msec{period_user}"
    if period_user <= 60000:
        return f"sec{period_user // 1000}"
    return f"min{period_user // 60000}"


def get_crc(message: bytes) -> int:
    """CRC field of a binary block."""
    return _read(_UINT16, message, 2)


def get_id(message: bytes) -> int:
    """Block number of a binary block, without the revision bits."""
    return _read(_UINT16, message, 4) & _BLOCK_NUMBER_MASK


def get_length(message: bytes) -> int:
    """Length field of a binary block."""
    return _read(_UINT16, message, 6)


def get_tow(message: bytes) -> int:
    """Time-of-week field of a binary block."""
    return _read(_UINT32, message, 8)


def get_wnc(message: bytes) -> int:
    """Week-number field of a binary block."""
    return _read(_UINT16, message, 12)