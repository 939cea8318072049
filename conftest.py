"""Centralized Testing Stuff."""

# third party
import pytest

# This repo
from pygsd.util import get_test_file


@pytest.fixture()
def gsdtext(request):
    """Return the content of the GSD example named by the test param."""
    return get_test_file(f"GSD/{request.param}")
