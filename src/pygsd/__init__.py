"""Python parser of NOAA GSL "GSD" formatted sounding reports

The GSD format is the whitespace delimited text served by the NOAA Global
Systems Laboratory sounding service for RAOBs and model (RAP, HRRR, etc)
profiles.  The :func:`pygsd.gsd.parse` function converts such text into
:class:`pygsd.models.gsd.SoundingReport` objects.
"""

import os
from importlib.metadata import PackageNotFoundError, version

from pygsd.gsd import parse  # noqa: F401

try:
    __version__ = version("pygsd")
    pkgdir = os.path.dirname(os.path.dirname(os.path.realpath(__file__)))
    if not pkgdir.endswith("site-packages"):
        __version__ += "-dev"
except PackageNotFoundError:
    # package is not installed
    __version__ = "dev"
