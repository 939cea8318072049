"""Processing of NOAA GSL "GSD" formatted soundings.

This is the text format served by https://rucsoundings.noaa.gov for RAOBs
and model profiles.  A report looks like so::

  Op40 analysis valid for grid point 6.7 nm / 56 deg from SGU:
  Op40        14     16      Jun    2024
     CAPE      0    CIN      0  Helic  99999     PW     12
        1  23062  99999  37.06 113.58   1072  99999
        2  99999  99999  99999     37  99999  99999
        3           SGU                 12     kt
        9   8800   1072    322   -100    210      6
        4  10000    110  99999  99999  99999  99999

Reports are separated by blank lines.

---------------------
Line Type Format:
---------------------

-------------------------------------------------------------
LINTYP   Columns
-------------------------------------------------------------
   1     WBAN  WMO  LAT  LON  ELEV  RTIME
   2     HYDRO  MXWD  TROPL  LINES  TINDEX  SOURCE
   3     STAID  SONDE  WSUNITS
 4 5 9   PRESSURE  HEIGHT  TEMP  DEWPT  WIND_DIR  WIND_SPD
         [HHMM  BEARING  RANGE]
-------------------------------------------------------------

The value 99999 is used for missing or not applicable.
"""

import re
from typing import Optional

from pydantic import ValidationError

from pygsd.exceptions import GSDException, GSDReportException
from pygsd.models.gsd import (
    LineType,
    Sonde,
    SoundingDatum,
    SoundingReport,
    WindUnits,
)
from pygsd.reference import NOT_APPLICABLE, PARSE_FAILURE, month2int
from pygsd.util import LOG, utc

# A newline, optional whitespace, then a newline
BLANK_LINE_RE = re.compile(r"\n\s*\n")
LEVEL_FIELDS = [
    "pressure",
    "height",
    "temp",
    "dewpt",
    "wind_dir",
    "wind_spd",
    "hhmm",
    "bearing",
    "range",
]


def split_reports(text: str) -> list[str]:
    """Split the raw text into candidate report blocks."""
    return [blk for blk in BLANK_LINE_RE.split(text) if blk.strip()]


def split_line(line: str) -> list[str]:
    """Whitespace tokenize a line, an empty line yields an empty list."""
    return line.split()


def parse_int(text: Optional[str]) -> Optional[int]:
    """Convert a token into an int, with 99999 being missing."""
    if text is None:
        return None
    try:
        val = int(text)
    except ValueError:
        return None
    if val == NOT_APPLICABLE:
        return None
    return val


def _token(tokens: list[str], idx: int) -> Optional[str]:
    """Return the token at the given position or None."""
    return tokens[idx] if idx < len(tokens) else None


def classify(tokens: list[str]) -> Optional[LineType]:
    """Figure out the line type from the first token."""
    if not tokens:
        return None
    try:
        return LineType(tokens[0])
    except ValueError:
        return None


def parse_date_line(line: str) -> dict:
    """Parse the type and valid time.

    The line looks like ``Op40 14 16 Jun 2024`` for type, hour, day, month
    and year.
    """
    tokens = split_line(line)
    rtype = _token(tokens, 0)
    if not rtype:
        raise GSDReportException("Failed to parse type from date line")
    hour, day, month, year = (_token(tokens, i) for i in range(1, 5))
    if None in (hour, day, month, year):
        raise GSDReportException(f"Failed to parse date from line: {line}")
    mon = month2int.get(month.upper())
    if mon is None:
        raise GSDReportException(f"Invalid month: {month}")
    try:
        valid = utc(int(year), mon, int(day), int(hour))
    except ValueError as exp:
        raise GSDReportException(f"Failed to parse date line: {line}") from exp
    return {"date": valid, "type": rtype}


def parse_cape_cin_line(line: str) -> dict:
    """Parse the CAPE and CIN values."""
    tokens = split_line(line)
    cape = parse_int(_token(tokens, 1))
    cin = parse_int(_token(tokens, 3))
    if cape is None or cin is None:
        raise GSDReportException(f"Failed to parse cape/cin line: {line}")
    return {"cape": cape, "cin": cin}


def repair_latlon(tokens: list[str]) -> list[str]:
    """Split a latitude token that has the negative longitude stuck to it.

    ``40.78-111.97`` becomes ``40.78`` and ``-111.97`` with the remaining
    tokens shifted right.
    """
    latlon = _token(tokens, 3)
    if latlon is None:
        return tokens
    try:
        float(latlon)
        return tokens
    except ValueError:
        pass
    pos = latlon.rfind("-")
    if pos < 1:
        return tokens
    return [*tokens[:3], latlon[:pos], latlon[pos:], *tokens[4:]]


def parse_station_identification(tokens: list[str]) -> dict:
    """Parse the line type 1 tokens."""
    tokens = repair_latlon(tokens)
    try:
        lat = float(_token(tokens, 3))
        lon = float(_token(tokens, 4))
    except (TypeError, ValueError) as exp:
        raise GSDReportException(
            "Failed to parse lat/lon from station identification line"
        ) from exp
    return {
        "wban": parse_int(_token(tokens, 1)),
        "wmo": parse_int(_token(tokens, 2)),
        "lat": lat,
        "lon": lon,
        "elev": parse_int(_token(tokens, 5)),
        "rtime": parse_int(_token(tokens, 6)),
    }


def parse_station_identifier(tokens: list[str]) -> dict:
    """Parse the line type 3 tokens."""
    station_id = _token(tokens, 1)
    if not station_id:
        raise GSDReportException(
            "Failed to parse stationId from station identifier line"
        )
    sonde = _token(tokens, 2)
    try:
        sonde = Sonde(int(sonde))
    except (TypeError, ValueError) as exp:
        raise GSDReportException(f"Unrecognized sonde type: {sonde}") from exp
    wind_units = _token(tokens, 3)
    try:
        wind_units = WindUnits(wind_units)
    except ValueError as exp:
        raise GSDReportException(
            f"Unrecognized wind units: {wind_units}"
        ) from exp
    return {"station_id": station_id, "sonde": sonde, "wind_units": wind_units}


def parse_data_line(tokens: list[str]) -> dict:
    """Decode a level, any of the values may be None."""
    return {
        key: parse_int(_token(tokens, i))
        for i, key in enumerate(LEVEL_FIELDS, start=1)
    }


def parse_data_lines(lines: list[list[str]]) -> tuple[SoundingDatum, ...]:
    """Build the levels that have all the required values."""
    data = []
    for tokens in lines:
        record = parse_data_line(tokens)
        try:
            data.append(SoundingDatum(**record))
        except ValidationError:
            LOG.debug("Dropping incomplete level: %s", " ".join(tokens))
    return tuple(data)


def parse_report(text: str) -> Optional[SoundingReport]:
    """Process a single GSD report, returns None if too few lines."""
    lines = text.strip().split("\n")
    if len(lines) < 3:
        LOG.debug("Skipping block with only %s line(s)", len(lines))
        return None
    # The first line is a station meta line that we do not use
    res = parse_date_line(lines[1])
    res.update(parse_cape_cin_line(lines[2]))

    found = {}
    levels = []
    for line in lines[3:]:
        tokens = split_line(line)
        linetype = classify(tokens)
        if linetype is None:
            continue
        if linetype.is_data:
            levels.append(tokens)
        else:
            # first one wins
            found.setdefault(linetype, tokens)
    if (
        LineType.STATION_IDENTIFICATION not in found
        or LineType.STATION_IDENTIFIER not in found
    ):
        raise GSDReportException(
            "Failed to parse station identification lines"
        )
    res.update(
        parse_station_identification(found[LineType.STATION_IDENTIFICATION])
    )
    res.update(parse_station_identifier(found[LineType.STATION_IDENTIFIER]))
    res["data"] = parse_data_lines(levels)
    return SoundingReport(**res)


def parse(text: str, strict: bool = True) -> list[SoundingReport]:
    """Parse GSD formatted sounding reports.

    Args:
      text (str): One or more GSD reports separated by blank lines.
      strict (bool): When True, a malformed report raises
        :class:`GSDReportException` and aborts the parsing.  When False,
        the malformed report is logged and skipped.

    Returns:
      list of :class:`pygsd.models.gsd.SoundingReport`, in input order.

    Raises:
      TypeError: when ``text`` is not a string.
      GSDException: when no reports could be parsed.
    """
    if not isinstance(text, str):
        raise TypeError("Invalid input. Expected a string.")
    # Step 0 remove CR
    text = text.replace("\r", "")
    reports = []
    for block in split_reports(text):
        try:
            report = parse_report(block)
        except GSDReportException as exp:
            if strict:
                raise
            LOG.warning("Skipping malformed GSD report: %s", exp)
            continue
        if report is not None:
            reports.append(report)
    if not reports:
        raise GSDException(PARSE_FAILURE)
    return reports
