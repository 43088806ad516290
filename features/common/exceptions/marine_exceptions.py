class MarineDataError(Exception):
    """Base exception for marine data errors."""
    pass

class ParseError(MarineDataError):
    """Raised when a buoy report is malformed or incomplete."""
    pass

class FetchError(MarineDataError):
    """Raised when a remote source fails or returns no usable data."""
    pass
