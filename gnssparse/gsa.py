"""Parser for GSA (DOP and active satellites) NMEA sentences."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from gnssparse.parsing import MessageHeader, ParseError, parse_float, parse_uint8

__all__ = ["GpgsaMessage", "GpgsaParser"]

_EXPECTED_LENGTH = 19
_FIRST_SV_FIELD = 3
_LAST_SV_FIELD = 15  # exclusive


@dataclass
class GpgsaMessage:
    """Contents of one GSA sentence."""

    header: MessageHeader = field(default_factory=MessageHeader)
    message_id: str = ""
    auto_manual_mode: str = ""
    fix_mode: int = 0
    sv_ids: list[int] = field(default_factory=list)
    pdop: float = 0.0
    hdop: float = 0.0
    vdop: float = 0.0


def _parse_field(parser, text: str, name: str):
    try:
        return parser(text)
    except ParseError as exc:
        raise ParseError(f"GPGSA {name} parsing error.") from exc


class GpgsaParser:
    """Parses GSA sentences."""

    MESSAGE_ID = "$GPGSA"

    def parse_ascii(
        self,
        body: Sequence[str],
        frame_id: str,
        use_gnss_time: bool = False,
        time_obj: int = 0,
    ) -> GpgsaMessage:
        """Parse the comma-separated fields of a GSA sentence, checksum field included.

        ``use_gnss_time`` and ``time_obj`` are accepted for a uniform parser
        interface; GSA sentences carry no time and are not stamped.
        """
        if len(body) != _EXPECTED_LENGTH:
            raise ParseError(
                f"Expected GPGSA length is {_EXPECTED_LENGTH}. "
                f"The actual length is {len(body)}"
            )

        msg = GpgsaMessage(
            header=MessageHeader(frame_id=frame_id),
            message_id=body[0],
            auto_manual_mode=body[1],
        )
        msg.fix_mode = _parse_field(parse_uint8, body[2], "fix_mode")
        msg.sv_ids = [
            _parse_field(parse_uint8, sv_text, "sv_ids")
            for sv_text in body[_FIRST_SV_FIELD:_LAST_SV_FIELD]
            if sv_text
        ]
        msg.pdop = _parse_field(parse_float, body[15], "pdop")
        msg.hdop = _parse_field(parse_float, body[16], "hdop")
        msg.vdop = _parse_field(parse_float, body[17], "vdop")
        return msg