"""Test GSD Model."""
# pylint: disable=redefined-outer-name

import math

import pytest
from pydantic import ValidationError

from pygsd.gsd import parse
from pygsd.models.gsd import (
    LEVEL_COLUMNS,
    Sonde,
    SoundingDatum,
    SoundingReport,
    WindUnits,
)
from pygsd.util import get_test_file, utc


@pytest.fixture
def report() -> SoundingReport:
    """Return a minimal report."""
    return SoundingReport(
        cape=0,
        cin=0,
        date=utc(2024, 6, 16, 14),
        lat=37.06,
        lon=-113.58,
        sonde=Sonde.SPACE_DATA_CORP,
        station_id="SGU",
        type="Op40",
        wind_units=WindUnits.KT,
    )


def test_datum_requires_values():
    """Test that a datum without required values is invalid."""
    with pytest.raises(ValidationError):
        SoundingDatum(
            pressure=1000, height=None, temp=1, wind_dir=0, wind_spd=0
        )
    datum = SoundingDatum(
        pressure=1000, height=1, temp=1, wind_dir=0, wind_spd=0
    )
    assert datum.dewpt is None


def test_frozen(report):
    """Test that a report can not be changed."""
    with pytest.raises(ValidationError):
        report.cape = 10


def test_geom(report):
    """Test the station geometry."""
    assert abs(report.geom.x - -113.58) < 0.001
    assert abs(report.geom.y - 37.06) < 0.001


def test_empty_dataframe(report):
    """Test that no levels gives an empty frame with columns."""
    df = report.to_dataframe()
    assert df.empty
    for col in [*LEVEL_COLUMNS, "tmpc", "dwpc", "sknt"]:
        assert col in df.columns


def test_json_dump(report):
    """Test that the date serializes to ISO-8601."""
    res = report.model_dump(mode="json")
    assert res["date"].startswith("2024-06-16T14:00:00")
    assert res["sonde"] == 12
    assert res["wind_units"] == "kt"


def test_dataframe_knots():
    """Test the DataFrame of a report reported in knots."""
    report = parse(get_test_file("GSD/SGU_RAP.txt"))[0]
    df = report.to_dataframe()
    assert len(df.index) == 8
    assert abs(df.iloc[0]["tmpc"] - 32.2) < 0.01
    assert abs(df.iloc[0]["dwpc"] - -10.0) < 0.01
    assert df.iloc[0]["sknt"] == 6
    assert math.isnan(df.iloc[-1]["dwpc"])
    assert math.isnan(df.iloc[0]["hhmm"])


def test_dataframe_ms():
    """Test that tenths of m/s are converted to knots."""
    report = parse(get_test_file("GSD/SLC_RAOB.txt"))[0]
    df = report.to_dataframe()
    # 1.5 m/s
    assert abs(df.iloc[0]["sknt"] - 2.916) < 0.01
    assert df.iloc[0]["wind_spd"] == 15
