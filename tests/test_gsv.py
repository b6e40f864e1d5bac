import pytest

from gnssparse.gsv import GpgsvParser, GsvSatellite
from gnssparse.parsing import ParseError


def _first_of_three():
    return [
        "$GPGSV", "3", "1", "11",
        "03", "03", "111", "00",
        "04", "15", "270", "00",
        "06", "01", "010", "00",
        "13", "06", "292", "00",
        "74",
    ]


def _last_of_three():
    return [
        "$GPGSV", "3", "3", "11",
        "22", "42", "067", "42",
        "24", "14", "311", "43",
        "27", "05", "244", "00",
        "4D",
    ]


def test_message_id_matches_parsed_sentence():
    msg = GpgsvParser().parse_ascii(_first_of_three(), "gnss", False, 0)
    assert GpgsvParser.MESSAGE_ID == "$GPGSV"
    assert msg.message_id == GpgsvParser.MESSAGE_ID


def test_parses_full_sentence():
    msg = GpgsvParser().parse_ascii(_first_of_three(), "gnss", False, 0)
    assert msg.header.frame_id == "gnss"
    assert msg.message_id == "$GPGSV"
    assert (msg.n_msgs, msg.msg_number, msg.n_satellites) == (3, 1, 11)
    assert msg.satellites[0] == GsvSatellite(prn=3, elevation=3, azimuth=111, snr=0)
    assert [s.prn for s in msg.satellites] == [3, 4, 6, 13]
    assert [s.azimuth for s in msg.satellites] == [111, 270, 10, 292]


def test_last_sentence_holds_remainder():
    msg = GpgsvParser().parse_ascii(_last_of_three(), "gnss", False, 0)
    assert len(msg.satellites) == 3
    assert [s.snr for s in msg.satellites] == [42, 43, 0]


def test_length_without_checksum_accepted():
    body = _first_of_three()[:-1]
    msg = GpgsvParser().parse_ascii(body, "gnss", False, 0)
    assert len(msg.satellites) == 4
    assert msg.satellites[-1].snr == 0


def test_missing_snr_is_minus_one():
    body = _first_of_three()
    body[7] = ""
    msg = GpgsvParser().parse_ascii(body, "f", False, 0)
    assert msg.satellites[0].snr == -1


def test_large_snr_wraps_to_signed_byte():
    body = _first_of_three()
    body[7] = "200"
    msg = GpgsvParser().parse_ascii(body, "f", False, 0)
    assert msg.satellites[0].snr == -56


def test_no_satellites():
    body = ["$GPGSV", "1", "1", "00", "", "", "", "", "79"]
    msg = GpgsvParser().parse_ascii(body, "f", False, 0)
    assert msg.n_satellites == 0
    assert msg.satellites == []


def test_single_message_holds_all_satellites():
    body = ["$GPGSV", "1", "1", "02",
            "01", "10", "100", "30",
            "02", "20", "200", "40",
            "00"]
    msg = GpgsvParser().parse_ascii(body, "f", False, 0)
    assert [s.prn for s in msg.satellites] == [1, 2]
    assert [s.elevation for s in msg.satellites] == [10, 20]


def test_fractional_angles_are_truncated():
    body = _first_of_three()
    body[5] = "3.9"
    body[6] = "111.7"
    msg = GpgsvParser().parse_ascii(body, "f", False, 0)
    assert (msg.satellites[0].elevation, msg.satellites[0].azimuth) == (3, 111)


def test_too_short_raises():
    with pytest.raises(ParseError, match="at least 4"):
        GpgsvParser().parse_ascii(["$GPGSV", "1", "1"], "f", False, 0)


def test_too_many_messages_raises():
    body = _first_of_three()
    body[1] = "10"
    with pytest.raises(ParseError, match="n_msgs in GSV is too large"):
        GpgsvParser().parse_ascii(body, "f", False, 0)


def test_msg_number_beyond_n_msgs_raises():
    body = _first_of_three()
    body[2] = "4"
    with pytest.raises(ParseError, match="larger than n_msgs"):
        GpgsvParser().parse_ascii(body, "f", False, 0)


def test_bad_n_msgs_raises():
    body = _first_of_three()
    body[1] = "x"
    with pytest.raises(ParseError, match="n_msgs"):
        GpgsvParser().parse_ascii(body, "f", False, 0)


def test_wrong_length_raises():
    body = _first_of_three() + ["extra"]
    with pytest.raises(ParseError, match="Expected GSV length is 21"):
        GpgsvParser().parse_ascii(body, "f", False, 0)


def test_bad_prn_raises():
    body = _first_of_three()
    body[8] = "abc"
    with pytest.raises(ParseError, match="PRN for satellite 1"):
        GpgsvParser().parse_ascii(body, "f", False, 0)


def test_bad_elevation_raises():
    body = _first_of_three()
    body[5] = "up"
    with pytest.raises(ParseError, match="elevation for satellite 0"):
        GpgsvParser().parse_ascii(body, "f", False, 0)


def test_bad_snr_raises():
    body = _first_of_three()
    body[11] = "300"
    with pytest.raises(ParseError, match="snr for satellite 1"):
        GpgsvParser().parse_ascii(body, "f", False, 0)