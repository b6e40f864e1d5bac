# gnssparse

Parsers and helpers for data coming from a GNSS receiver:

- NMEA sentence parsers for GGA, RMC, GSA and GSV (`gnssparse.gga`,
  `gnssparse.rmc`, `gnssparse.gsa`, `gnssparse.gsv`)
- strict numeric conversion of text fields (`gnssparse.strings`)
- little-endian field unpacking, SBF block header accessors and time and
  coordinate conversions (`gnssparse.parsing`)
- consistency checks and auto-publish defaults for receiver settings
  (`gnssparse.settings`)

The package has no dependencies outside the standard library.

## Installation

```
pip install gnssparse
```

For running the tests:

```
pip install "gnssparse[test]"
pytest
```

## Parsing NMEA sentences

Each parser's `parse_ascii(body, frame_id, use_gnss_time, time_obj)` takes the
comma-separated fields of a sentence as a list of strings, where the first
field is the message id and the last one is the checksum. A sentence that
cannot be parsed raises `gnssparse.parsing.ParseError` (a subclass of
`ValueError`).

```python
from gnssparse.gga import GpggaParser
from gnssparse.parsing import ParseError

sentence = "$GPGGA,123519.00,4807.038,N,01131.000,E,1,08,0.9,545.4,M,46.9,M,,*47"
fields = sentence.replace("*", ",").split(",")

parser = GpggaParser()
try:
    msg = parser.parse_ascii(fields, "gnss", use_gnss_time=False, time_obj=0)
except ParseError as err:
    print("bad sentence:", err)
else:
    print(msg.lat, msg.lon, msg.num_sats)   # 48.1173 11.5166... 8
    print(parser.was_last_valid)            # True
```

- `GpggaParser` returns a `GpggaMessage`; latitude and longitude are converted
  to decimal degrees, `diff_age` is rounded to a whole number.
- `GprmcParser` returns a `GprmcMessage`; `speed` is converted from knots to
  metres per second and `date` is written as `20yy-mm-dd`.
- `GpgsaParser` returns a `GpgsaMessage` whose `sv_ids` holds only the
  non-empty satellite fields.
- `GpgsvParser` returns a `GpgsvMessage` with a list of `GsvSatellite`
  (`snr` is -1 where the field is empty or missing).

`message.header` is a `MessageHeader` with the `frame_id` and a `stamp` in
nanoseconds since the Unix epoch. With `use_gnss_time=False` a sentence with a
time field is stamped with `time_obj`. With `use_gnss_time=True` the GGA and
RMC parsers build the stamp from the sentence's time of day and the UTC date
of their `clock` (a callable returning Unix seconds, `time.time` by default):

```python
parser = GpggaParser(clock=lambda: 1_700_000_000.0)
```

GSA and GSV sentences carry no time and are never stamped. `GpggaParser` and
`GprmcParser` keep `was_last_valid`, set by each call.

## Text fields

`gnssparse.strings` converts a whole string or raises `ValueError`, with the
strictness of the C library scanners (leading white space allowed, trailing
characters not, out-of-range values rejected):

```python
from gnssparse import strings

strings.to_double("12.5")          # 12.5
strings.to_int32("0x1f", 16)       # 31
strings.to_uint32("-1")            # ValueError
strings.to_uint8("300")            # 44: wraps, never raises
strings.trim_decimal_places(1.2345)  # "1.235"
strings.contains_space("a b")      # True
```

The `parse_*` functions of `gnssparse.parsing` take NMEA fields: an empty
field gives zero, anything else must convert and fit the type, or
`ParseError` is raised.

```python
from gnssparse import parsing

parsing.parse_uint8("", 10)      # 0
parsing.parse_uint8("256", 10)   # ParseError
parsing.parse_float("0.9")       # 0.8999999761581421 (single precision)
```

## Binary fields and conversions

```python
import struct
from gnssparse import parsing

block = b"$@" + struct.pack("<HHHIH", 0xABCD, 4007 | (1 << 13), 96, 345_600_000, 2280)

parsing.get_crc(block)     # 43981
parsing.get_id(block)      # 4007: revision bits removed
parsing.get_length(block)  # 96
parsing.get_tow(block)     # 345600000
parsing.get_wnc(block)     # 2280

parsing.unpack_uint16(b"\x01\x02")              # 513
parsing.convert_dms_to_degrees(4807.038)        # 48.1173
parsing.convert_utc_double_to_seconds(123519.0) # 45319.0
parsing.convert_utc_to_unix(123519.0, now=0)    # 45319
parsing.convert_user_period_to_rx_command(500)  # "msec500"
parsing.convert_user_period_to_rx_command(0)    # "OnChange"
```

A buffer too short for the field raises `ParseError`.

## Settings checks

`gnssparse.settings` holds `Settings` (with `RtkSettings`, `IpServer` and
`InsVsmSettings`) and checks that IP servers and ports are not claimed twice.
Each check logs the problems it finds at error level and returns them as a
list of strings.

```python
from gnssparse.settings import (
    Settings,
    auto_publish,
    check_uniqueness_of_ips,
    check_uniqueness_of_ips_ports,
    check_uniqueness_of_ips_ports_vsm,
    check_uniqueness_of_ips_vsm,
)

settings = Settings(tcp_ip_server="IPS1", udp_ip_server="IPS1")
for problem in check_uniqueness_of_ips(settings):
    print(problem)

settings = Settings(auto_publish=True, configure_rx=False)
auto_publish(settings)
print(settings.publish_gpgga, settings.publish_tf)   # True True
```

`auto_publish` switches on every `publish_*` flag, and `publish_tf` only when
`publish_tf_ecef` is off. When `configure_rx` is true it changes nothing and
logs a warning.

## What the package does not do

It does not talk to a receiver: there is no serial, TCP, UDP or file reading,
no command sending and no command-line program. It does not split raw NMEA
lines into fields or verify their checksums, does not check the CRC of SBF
blocks and does not decode SBF block contents beyond the header fields listed
above. Settings are plain dataclasses; nothing loads them from a file.