"""NMEA GGA, RMC, GSA and GSV parsers, text and SBF header field helpers, and receiver settings checks."""

__version__ = "0.1.0"

__all__ = ["strings", "parsing", "gga", "rmc", "gsa", "gsv", "settings"]