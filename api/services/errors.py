"""Error taxonomy for natal chart requests.

Input errors are detected before the chart engine runs and name the
offending request field. Collaborator errors wrap failures of the
ephemeris or geocoding providers together with the operation that failed.
The chart engine itself never raises.
"""


class ChartError(Exception):
    """Base class for every error surfaced to API callers."""


class ChartInputError(ChartError):
    def __init__(self, field: str, message: str):
        super().__init__(message)
        self.field = field
        self.message = message

    def to_detail(self) -> dict:
        return {"field": self.field, "message": self.message}


class LocationNotFoundError(ChartInputError):
    def __init__(self, query: str):
        super().__init__(
            "location",
            f"Could not find coordinates for location: {query}. Check the "
            "format (e.g. 'City, Country') or provide exact coordinates.",
        )
        self.query = query


class TimezoneNotFoundError(ChartInputError):
    def __init__(self, lat: float, lon: float):
        super().__init__(
            "location",
            f"Could not determine timezone for coordinates: {lat}, {lon}",
        )


class InvalidLocalTimeError(ChartInputError):
    def __init__(self, message: str):
        super().__init__("datetime", message)


class CollaboratorError(ChartError):
    def __init__(self, operation: str, message: str):
        super().__init__(f"{operation}: {message}")
        self.operation = operation
        self.message = message

    def to_detail(self) -> dict:
        return {"operation": self.operation, "message": self.message}


class EphemerisError(CollaboratorError):
    pass


class GeocodingError(CollaboratorError):
    pass
