"""
Calculation error taxonomy
"""


class CalculationError(Exception):
    """Base class for a failed calculation attempt"""

    kind = 'CalculationError'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_dict(self):
        return {'kind': self.kind, 'message': self.message}


class ValidationError(CalculationError):
    """Missing or malformed user input, detected before any network call"""

    kind = 'ValidationError'


class NetworkError(CalculationError):
    """Transport failure, no response was received"""

    kind = 'NetworkError'


class UpstreamError(CalculationError):
    """The calculator answered with a failure or with an unexpected shape"""

    kind = 'UpstreamError'


class LocationError(Exception):
    """The location provider could not supply a position"""

    kind = 'LocationError'

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class LocationUnsupportedError(LocationError):
    """No location provider is available"""

    def __init__(self, message: str = "Geolocation is not supported by this browser."):
        super().__init__(message)
