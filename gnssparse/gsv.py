"""Parser for GSV (satellites in view) NMEA sentences."""

from __future__ import annotations

import math
from collections.abc import Sequence
from dataclasses import dataclass, field

from gnssparse.parsing import MessageHeader, ParseError, parse_float, parse_uint8

__all__ = ["GsvSatellite", "GpgsvMessage", "GpgsvParser"]

_MIN_LENGTH = 4
_MAX_MESSAGES = 9
_FIELDS_PER_SATELLITE = 4


@dataclass
class GsvSatellite:
    """One satellite described in a GSV sentence; ``snr`` is -1 when not tracked."""

    prn: int = 0
    elevation: int = 0
    azimuth: int = 0
    snr: int = -1


@dataclass
class GpgsvMessage:
    """Contents of one GSV sentence."""

    header: MessageHeader = field(default_factory=MessageHeader)
    message_id: str = ""
    n_msgs: int = 0
    msg_number: int = 0
    n_satellites: int = 0
    satellites: list[GsvSatellite] = field(default_factory=list)


def _uint8(text: str, error: str) -> int:
    try:
        return parse_uint8(text)
    except ParseError as exc:
        raise ParseError(error) from exc


def _truncated(text: str, bits: int, error: str) -> int:
    try:
        value = parse_float(text)
    except ParseError as exc:
        raise ParseError(error) from exc
    if not math.isfinite(value):
        raise ParseError(error)
    return int(value) % (1 << bits)


def _satellites_in_sentence(msg_number: int, n_msgs: int, n_satellites: int) -> int:
    if msg_number != n_msgs:
        return _FIELDS_PER_SATELLITE
    if msg_number == 1:
        return n_satellites
    if n_satellites == 0:
        return 0
    return n_satellites % 4 or 4


class GpgsvParser:
    """Parses GSV sentences."""

    MESSAGE_ID = "$GPGSV"

    def parse_ascii(
        self,
        body: Sequence[str],
        frame_id: str,
        use_gnss_time: bool = False,
        time_obj: int = 0,
    ) -> GpgsvMessage:
        """Parse the comma-separated fields of a GSV sentence, checksum field included.

        ``use_gnss_time`` and ``time_obj`` are accepted for a uniform parser
        interface; GSV sentences carry no time and are not stamped.
        """
        if len(body) < _MIN_LENGTH:
            raise ParseError(
                f"Expected GSV length is at least {_MIN_LENGTH}. "
                f"The actual length is {len(body)}"
            )

        msg = GpgsvMessage(header=MessageHeader(frame_id=frame_id), message_id=body[0])

        msg.n_msgs = _uint8(body[1], "Error parsing n_msgs in GSV.")
        if msg.n_msgs > _MAX_MESSAGES:
            raise ParseError(f"n_msgs in GSV is too large: {msg.n_msgs}.")

        msg.msg_number = _uint8(body[2], "Error parsing msg_number in GSV.")
        if msg.msg_number > msg.n_msgs:
            raise ParseError(
                "msg_number in GSV is larger than n_msgs: "
                f"{msg.msg_number} > {msg.n_msgs}."
            )

        msg.n_satellites = _uint8(body[3], "Error parsing n_satellites in GSV.")

        n_sats = _satellites_in_sentence(msg.msg_number, msg.n_msgs, msg.n_satellites)
        # One extra field for the checksum; an empty sentence still holds
        # blank fields for one satellite.
        expected_length = _MIN_LENGTH + _FIELDS_PER_SATELLITE * n_sats + 1
        if n_sats == 0:
            expected_length += _FIELDS_PER_SATELLITE
        if len(body) not in (expected_length, expected_length - 1):
            raise ParseError(
                f"Expected GSV length is {expected_length} for message with "
                f"{n_sats} satellites. The actual length is {len(body)}.\n"
                + ",".join(body)
            )

        for sat in range(n_sats):
            index = _MIN_LENGTH + _FIELDS_PER_SATELLITE * sat
            prn = _uint8(body[index], f"Error parsing PRN for satellite {sat} in GSV.")
            elevation = _truncated(
                body[index + 1], 8, f"Error parsing elevation for satellite {sat} in GSV."
            )
            azimuth = _truncated(
                body[index + 2], 16, f"Error parsing azimuth for satellite {sat} in GSV."
            )
            snr = -1
            if index + 3 < len(body) and body[index + 3]:
                raw = _uint8(body[index + 3], f"Error parsing snr for satellite {sat} in GSV.")
                snr = raw - 256 if raw > 127 else raw
            msg.satellites.append(
                GsvSatellite(prn=prn, elevation=elevation, azimuth=azimuth, snr=snr)
            )
        return msg