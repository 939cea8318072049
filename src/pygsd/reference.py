"""Reference values and dictionaries

No functional code found within this module, just a bunch of statics

.. data:: NOT_APPLICABLE

    The GSD format encodes a missing or not applicable numeric value as
    99999.

.. data:: month2int

    A dictionary mapping three letter upper case month abbreviations to
    their month number.

"""

ISO8601 = "%Y-%m-%dT%H:%M:%SZ"

NOT_APPLICABLE = 99999

# Locale independent
month2int = {
    "JAN": 1,
    "FEB": 2,
    "MAR": 3,
    "APR": 4,
    "MAY": 5,
    "JUN": 6,
    "JUL": 7,
    "AUG": 8,
    "SEP": 9,
    "OCT": 10,
    "NOV": 11,
    "DEC": 12,
}

PARSE_FAILURE = (
    "Failed to parse. Ensure the input is a valid GSD formatted string."
)
