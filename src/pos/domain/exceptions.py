"""Domain-level exceptions.

Every rule violation is a DomainException subclass, so the session
boundary can catch them in one place and show the message to the cashier.
"""


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """Input or a business rule was rejected."""
