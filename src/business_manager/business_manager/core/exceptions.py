class DomainError(Exception):
    """Base exception for business rule violations."""


class ValidationError(DomainError):
    """Raised when input data is invalid or violates domain rules."""


class DataSourceError(Exception):
    """Raised when the attendance/employee store cannot be read.

    Not a DomainError: this is an infrastructure fault, and a payroll batch
    that hits it must fail as a whole instead of reporting zeros.
    """
