"""Custom Exceptions."""


class GSDException(Exception):
    """Exception for GSD text that yields no soundings."""


class GSDReportException(GSDException):
    """A single GSD report is structurally malformed."""
