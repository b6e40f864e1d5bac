import pytest

from gnssparse.parsing import (
    ParseError,
    convert_dms_to_degrees,
    convert_utc_double_to_seconds,
    convert_utc_to_unix,
)
from gnssparse.rmc import GprmcParser


def make_body(mode=None, **overrides):
    fields = [
        "$GPRMC",
        "123519.00",
        "A",
        "4807.038",
        "N",
        "01131.000",
        "E",
        "022.4",
        "084.4",
        "230394",
        "003.1",
        "W",
    ]
    names = {
        "utc": 1,
        "status": 2,
        "lat": 3,
        "lon": 5,
        "speed": 7,
        "track": 8,
        "date": 9,
        "mag_var": 10,
    }
    for name, value in overrides.items():
        fields[names[name]] = value
    if mode is not None:
        fields.append(mode)
    fields.append("*6A")
    return fields


def test_parses_fields():
    parser = GprmcParser()
    msg = parser.parse_ascii(make_body(), "gnss", False, 7)
    assert msg.message_id == "$GPRMC"
    assert msg.header.frame_id == "gnss"
    assert msg.position_status == "A"
    assert msg.lat == pytest.approx(convert_dms_to_degrees(4807.038))
    assert msg.lon == pytest.approx(convert_dms_to_degrees(1131.0))
    assert msg.lat_dir == "N"
    assert msg.lon_dir == "E"
    assert msg.track == pytest.approx(84.4)
    assert msg.mag_var == pytest.approx(3.1)
    assert msg.mag_var_direction == "W"
    assert msg.mode_indicator == ""
    assert parser.was_last_valid is True


def test_speed_is_converted_from_knots():
    msg = GprmcParser().parse_ascii(make_body(), "gnss", False, 0)
    assert msg.speed / GprmcParser.KNOTS_TO_MPS == pytest.approx(22.4, rel=1e-6)


def test_date_is_reformatted():
    msg = GprmcParser().parse_ascii(make_body(), "gnss", False, 0)
    assert msg.date == "2094-03-23"


def test_empty_date_stays_empty():
    msg = GprmcParser().parse_ascii(make_body(date=""), "gnss", False, 0)
    assert msg.date == ""


def test_short_date_raises():
    with pytest.raises(ParseError):
        GprmcParser().parse_ascii(make_body(date="23"), "gnss", False, 0)


def test_mode_indicator_in_long_sentence():
    msg = GprmcParser().parse_ascii(make_body(mode="D"), "gnss", False, 0)
    assert msg.mode_indicator == "D"
    assert msg.mag_var_direction == "W"


def test_utc_seconds_set_with_receiver_time():
    msg = GprmcParser().parse_ascii(make_body(), "gnss", False, 987654321)
    assert msg.utc_seconds == pytest.approx(convert_utc_double_to_seconds(123519.0))
    assert msg.header.stamp == 987654321


def test_gnss_time_stamp_uses_clock_date():
    parser = GprmcParser(clock=lambda: 0.0)
    msg = parser.parse_ascii(make_body(), "gnss", True, 5)
    assert msg.header.stamp == convert_utc_to_unix(123519.0, 0.0) * 1_000_000_000


@pytest.mark.parametrize("utc", ["", "0"])
def test_missing_utc_gives_zero(utc):
    msg = GprmcParser().parse_ascii(make_body(utc=utc), "gnss", False, 99)
    assert msg.utc_seconds == 0
    assert msg.header.stamp == 0


def test_bad_utc_raises():
    with pytest.raises(ParseError, match="UTC"):
        GprmcParser().parse_ascii(make_body(utc="abc"), "gnss", False, 0)


@pytest.mark.parametrize("length", [12, 15])
def test_wrong_length_raises(length):
    body = (make_body(mode="A") + ["extra"])[:length]
    with pytest.raises(ParseError):
        GprmcParser().parse_ascii(body, "gnss", False, 0)


@pytest.mark.parametrize(
    "override",
    [{"lat": "north"}, {"speed": "fast"}, {"track": "1e"}, {"mag_var": "W3"}],
)
def test_invalid_field_raises_and_marks_invalid(override):
    parser = GprmcParser()
    parser.parse_ascii(make_body(), "gnss", False, 0)
    with pytest.raises(ParseError, match="GPRMC"):
        parser.parse_ascii(make_body(**override), "gnss", False, 0)
    assert parser.was_last_valid is False


def test_void_status_still_counts_as_valid():
    parser = GprmcParser()
    msg = parser.parse_ascii(make_body(status="V", lat="", lon=""), "gnss", False, 0)
    assert msg.position_status == "V"
    assert (msg.lat, msg.lon) == (0.0, 0.0)
    assert parser.was_last_valid is True


def test_message_id_constant_matches_parsed_sentence():
    msg = GprmcParser().parse_ascii(make_body(), "gnss", False, 0)
    assert msg.message_id == GprmcParser.MESSAGE_ID