"""
Domain Exceptions - Business Rule Violations
Clean Architecture: Domain layer exceptions
"""


class DomainException(Exception):
    """Base exception for all domain-level errors"""
    def __init__(self, message: str, details: dict = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class MissingParameterException(DomainException):
    """Raised when a required query parameter is absent"""
    pass


class InvalidCoordinatesException(DomainException):
    """Raised when latitude/longitude are outside valid range"""
    pass


class InvalidYearRangeException(DomainException):
    """Raised when requested years/decades are invalid"""
    pass


class InvalidDateRangeException(DomainException):
    """Raised when a historical date range is invalid"""
    pass


class InvalidScenarioException(DomainException):
    """Raised when the climate scenario is unknown"""
    pass


class InvalidPeriodException(DomainException):
    """Raised when a projection period label is unknown"""
    pass


class UpstreamServiceException(DomainException):
    """Raised when an upstream Open-Meteo call fails (timeout, 4xx/5xx)"""
    pass


class UpstreamPayloadException(UpstreamServiceException):
    """Raised when an upstream payload lacks the expected daily series"""
    pass
