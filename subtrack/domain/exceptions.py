"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class InvalidArgumentError(DomainException):
    """Input is outside the documented domain (e.g. custom period of 0 days)"""

    pass


class CalendarArithmeticError(DomainException):
    """Calendar cannot represent the result of a date computation"""

    pass
