"""Parser for RMC (recommended minimum) NMEA sentences."""

from __future__ import annotations

import struct
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from gnssparse.parsing import (
    MessageHeader,
    ParseError,
    convert_dms_to_degrees,
    convert_utc_double_to_seconds,
    convert_utc_to_unix,
    parse_double,
    parse_float,
)
from gnssparse.strings import to_double

__all__ = ["GprmcMessage", "GprmcParser"]

_LEN_MIN = 13
_LEN_MAX = 14
_FLOAT32 = struct.Struct("<f")


@dataclass
class GprmcMessage:
    """Contents of one RMC sentence."""

    header: MessageHeader = field(default_factory=MessageHeader)
    message_id: str = ""
    utc_seconds: float = 0.0
    position_status: str = ""
    lat: float = 0.0
    lon: float = 0.0
    lat_dir: str = ""
    lon_dir: str = ""
    speed: float = 0.0
    track: float = 0.0
    date: str = ""
    mag_var: float = 0.0
    mag_var_direction: str = ""
    mode_indicator: str = ""


def _to_float32(value: float) -> float:
    return _FLOAT32.unpack(_FLOAT32.pack(value))[0]


def _gnss_stamp(utc_double: float, now: float) -> int:
    unix_seconds = convert_utc_to_unix(utc_double, now)
    hundredths = int(utc_double * 100) % 100
    return unix_seconds * 1_000_000_000 + hundredths * 10_000


def _iso_date(ddmmyy: str) -> str:
    if len(ddmmyy) < 4:
        raise ParseError(f"GPRMC date field too short: {ddmmyy!r}")
    return f"20{ddmmyy[4:6]}-{ddmmyy[2:4]}-{ddmmyy[0:2]}"


class GprmcParser:
    """Parses RMC sentences and remembers whether the last one was usable.

    ``clock`` supplies the current Unix time, whose UTC date completes the
    sentence's time of day when GNSS time is used for stamping.
    """

    MESSAGE_ID = "$GPRMC"
    KNOTS_TO_MPS = 0.5144444

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self.was_last_valid = False

    def parse_ascii(
        self,
        body: Sequence[str],
        frame_id: str,
        use_gnss_time: bool,
        time_obj: int,
    ) -> GprmcMessage:
        """Parse the comma-separated fields of an RMC sentence, checksum field included."""
        if not _LEN_MIN <= len(body) <= _LEN_MAX:
            raise ParseError(
                f"Expected GPRMC length is between {_LEN_MIN} and {_LEN_MAX}. "
                f"The actual length is {len(body)}"
            )

        msg = GprmcMessage(header=MessageHeader(frame_id=frame_id), message_id=body[0])

        utc_text = body[1]
        if utc_text and utc_text != "0":
            try:
                utc_double = to_double(utc_text)
            except ValueError as exc:
                raise ParseError("Error parsing UTC seconds in GPRMC") from exc
            msg.utc_seconds = convert_utc_double_to_seconds(utc_double)
            if use_gnss_time:
                msg.header.stamp = _gnss_stamp(utc_double, self._clock())
            else:
                msg.header.stamp = time_obj

        msg.position_status = body[2]
        msg.lat_dir = body[4]
        msg.lon_dir = body[6]
        msg.mag_var_direction = body[11]
        if len(body) == _LEN_MAX:
            msg.mode_indicator = body[12]

        valid = True
        try:
            msg.lat = convert_dms_to_degrees(parse_double(body[3]))
            msg.lon = convert_dms_to_degrees(parse_double(body[5]))
            msg.speed = _to_float32(parse_float(body[7]) * self.KNOTS_TO_MPS)
            msg.track = parse_float(body[8])
        except ParseError:
            valid = False

        if body[9]:
            msg.date = _iso_date(body[9])

        if valid:
            try:
                msg.mag_var = parse_float(body[10])
            except ParseError:
                valid = False

        if not valid:
            self.was_last_valid = False
            raise ParseError("Error parsing GPRMC message.")

        # A void status does not mark the sentence as unusable.
        self.was_last_valid = True
        return msg