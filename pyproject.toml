[build-system]
requires = ["hatchling"]
build-backend = "hatchling.build"

[project]
name = "gnssparse"
version = "0.1.0"
description = "Parsers for NMEA GGA, RMC, GSA and GSV sentences, SBF header helpers and GNSS receiver settings checks"
requires-python = ">=3.10"
dependencies = []
keywords = ["gnss", "gps", "nmea", "sbf", "parser", "receiver"]
classifiers = [
    "Development Status :: 4 - Beta",
    "Intended Audience :: Developers",
    "Intended Audience :: Science/Research",
    "Operating System :: OS Independent",
    "Programming Language :: Python :: 3",
    "Programming Language :: Python :: 3 :: Only",
    "Programming Language :: Python :: 3.10",
    "Programming Language :: Python :: 3.11",
    "Programming Language :: Python :: 3.12",
    "Programming Language :: Python :: 3.13",
    "Topic :: Scientific/Engineering :: GIS",
]

[project.optional-dependencies]
test = ["pytest"]

[tool.hatch.build.targets.wheel]
packages = ["gnssparse"]

[tool.pytest.ini_options]
testpaths = ["tests"]
addopts = "-ra"
