"""Data Model for GSD formatted soundings."""

from datetime import datetime
from enum import Enum
from typing import Optional

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field
from shapely.geometry import Point

from pygsd.util import convert_value

LEVEL_COLUMNS = [
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


class LineType(str, Enum):
    """GSD line type identifiers, the first token on each line."""

    def __str__(self):
        """When we want the str repr."""
        return str(self.value)

    STATION_IDENTIFICATION = "1"
    SOUNDING_CHECKS = "2"
    STATION_IDENTIFIER = "3"
    MANDATORY_LEVEL = "4"
    SIGNIFICANT_LEVEL = "5"
    WIND_LEVEL = "6"
    TROPOPAUSE_LEVEL = "7"
    MAX_WIND_LEVEL = "8"
    SURFACE_LEVEL = "9"

    @property
    def is_data(self) -> bool:
        """Is this a level we carry into the report."""
        return self in DATA_LINE_TYPES


DATA_LINE_TYPES = (
    LineType.MANDATORY_LEVEL,
    LineType.SIGNIFICANT_LEVEL,
    LineType.SURFACE_LEVEL,
)


class WindUnits(str, Enum):
    """Wind speed units."""

    def __str__(self):
        """When we want the str repr."""
        return str(self.value)

    KT = "kt"
    MS = "ms"  # tenths of meters per second


class Sonde(int, Enum):
    """Type of radiosonde code from TTBB, only reported with GTS data."""

    TYPE_A = 10  # VIZ "A"
    TYPE_B = 11  # VIZ "B"
    SPACE_DATA_CORP = 12


class SoundingDatum(BaseModel):
    """Represents a single level of a sounding."""

    model_config = ConfigDict(frozen=True)

    pressure: int = Field(
        ...,
        description=(
            "Pressure in whole millibars (original format) or tenths of "
            "millibars (new format)"
        ),
    )
    height: int = Field(..., description="Height in meters")
    temp: int = Field(..., description="Temperature in tenths of C")
    dewpt: Optional[int] = Field(None, description="Dewpoint in tenths of C")
    wind_dir: int = Field(..., description="Wind Direction in degrees")
    wind_spd: int = Field(..., description="Wind Speed in report units")
    hhmm: Optional[int] = Field(None, description="UTC hour and minute")
    bearing: Optional[int] = Field(
        None, description="Bearing from the ground point"
    )
    range: Optional[int] = Field(
        None, description="Range (nautical miles) from the ground point"
    )


class SoundingReport(BaseModel):
    """Represents a GSD sounding, for example a Rapid Refresh (RAP) profile.

    The Rapid Refresh is the continental-scale NOAA hourly-updated
    assimilation/modeling system operational at NCEP.
    """

    model_config = ConfigDict(frozen=True)

    cape: int
    cin: int
    data: tuple[SoundingDatum, ...] = ()
    date: datetime = Field(..., description="UTC valid time")
    elev: Optional[int] = Field(
        None, description="Elevation from station history in meters"
    )
    lat: float = Field(..., description="Latitude in degrees and hundredths")
    lon: float = Field(..., description="Longitude in degrees and hundredths")
    rtime: Optional[int] = Field(
        None, description="Actual release time of radiosonde from TTBB"
    )
    sonde: Sonde
    station_id: str
    type: str = Field(..., description="Report model type, RAP is Op40")
    wban: Optional[int] = None
    wind_units: WindUnits
    wmo: Optional[int] = None

    @property
    def geom(self) -> Point:
        """Station location."""
        return Point(self.lon, self.lat)

    def to_dataframe(self) -> pd.DataFrame:
        """Return the levels as a DataFrame with some derived columns.

        The ``tmpc`` and ``dwpc`` columns are in degrees C and ``sknt`` is
        the wind speed converted to knots.
        """
        df = pd.DataFrame(
            [datum.model_dump() for datum in self.data],
            columns=LEVEL_COLUMNS,
        ).astype(float)
        df["tmpc"] = df["temp"] / 10.0
        df["dwpc"] = df["dewpt"] / 10.0
        if self.wind_units == WindUnits.MS:
            df["sknt"] = convert_value(
                (df["wind_spd"] / 10.0).to_numpy(), "meter / second", "knot"
            )
        else:
            df["sknt"] = df["wind_spd"]
        return df
