"""Parser for GGA (fix data) NMEA sentences."""

from __future__ import annotations

import math
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
    parse_uint32,
)
from gnssparse.strings import to_double

__all__ = ["GpggaMessage", "GpggaParser"]

_EXPECTED_LENGTH = 16


@dataclass
class GpggaMessage:
    """Contents of one GGA sentence."""

    header: MessageHeader = field(default_factory=MessageHeader)
    message_id: str = ""
    utc_seconds: float = 0.0
    lat: float = 0.0
    lon: float = 0.0
    lat_dir: str = ""
    lon_dir: str = ""
    gps_qual: int = 0
    num_sats: int = 0
    hdop: float = 0.0
    alt: float = 0.0
    altitude_units: str = ""
    undulation: float = 0.0
    undulation_units: str = ""
    diff_age: int = 0
    station_id: str = ""


def _round_half_away(value: float) -> int:
    magnitude = math.floor(abs(value) + 0.5)
    return int(math.copysign(magnitude, value))


def _gnss_stamp(utc_double: float, now: float) -> int:
    unix_seconds = convert_utc_to_unix(utc_double, now)
    hundredths = int(utc_double * 100) % 100
    return unix_seconds * 1_000_000_000 + hundredths * 10_000


class GpggaParser:
    """Parses GGA sentences and remembers whether the last one was valid.

    ``clock`` supplies the current Unix time, whose UTC date completes the
    sentence's time of day when GNSS time is used for stamping.
    """

    MESSAGE_ID = "$GPGGA"

    def __init__(self, clock: Callable[[], float] = time.time) -> None:
        self._clock = clock
        self.was_last_valid = False

    def parse_ascii(
        self,
        body: Sequence[str],
        frame_id: str,
        use_gnss_time: bool,
        time_obj: int,
    ) -> GpggaMessage:
        """Parse the comma-separated fields of a GGA sentence, checksum field included."""
        if len(body) != _EXPECTED_LENGTH:
            raise ParseError(
                f"GGA parsing failed: Expected GPGGA length is {_EXPECTED_LENGTH}, "
                f"but actual length is {len(body)}"
            )

        msg = GpggaMessage(header=MessageHeader(frame_id=frame_id), message_id=body[0])

        utc_text = body[1]
        if utc_text and utc_text != "0":
            try:
                utc_double = to_double(utc_text)
            except ValueError as exc:
                raise ParseError("Error parsing UTC seconds in GPGGA") from exc
            if use_gnss_time:
                msg.utc_seconds = convert_utc_double_to_seconds(utc_double)
                msg.header.stamp = _gnss_stamp(utc_double, self._clock())
            else:
                msg.header.stamp = time_obj

        try:
            msg.lat = convert_dms_to_degrees(parse_double(body[2]))
            msg.lon = convert_dms_to_degrees(parse_double(body[4]))
            msg.lat_dir = body[3]
            msg.lon_dir = body[5]
            msg.gps_qual = parse_uint32(body[6])
            msg.num_sats = parse_uint32(body[7])
            msg.hdop = parse_float(body[8])
            msg.alt = parse_float(body[9])
            msg.altitude_units = body[10]
            msg.undulation = parse_float(body[11])
            msg.undulation_units = body[12]
            msg.diff_age = _round_half_away(parse_double(body[13]))
        except ParseError as exc:
            self.was_last_valid = False
            raise ParseError("GPGGA message was invalid.") from exc
        msg.station_id = body[14]

        self.was_last_valid = True
        return msg