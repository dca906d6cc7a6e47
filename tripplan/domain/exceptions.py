"""Domain semantic exceptions."""


class DomainError(Exception):
    """Base domain exception."""


class InvalidTripRequest(DomainError):
    """Raised when raw trip input cannot be turned into a TripRequest."""
