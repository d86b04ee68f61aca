class StationDataError(Exception):
    """Raised at the HTTP boundary when station data cannot be served.

    Rendered by the application as ``{"error": message}`` with ``status_code``.
    """

    def __init__(self, status_code: int, message: str):
        super().__init__(message)
        self.status_code = status_code
        self.message = message

class InvalidStationIdError(StationDataError):
    """Raised when a station identifier fails the syntactic check."""

    def __init__(self):
        super().__init__(400, "Invalid station ID")

class NoDataAvailableError(StationDataError):
    """Raised when NDBC has no usable report for a station."""

    def __init__(self):
        super().__init__(404, "No data available")

class UpstreamFailureError(StationDataError):
    """Raised when the NDBC request failed (bad status, timeout, transport)."""

    def __init__(self, message: str):
        super().__init__(502, message)
