"""Domain-specific exceptions"""


class DomainException(Exception):
    """Base exception for domain layer"""

    pass


class ValidationError(DomainException):
    """Missing or invalid field on a transaction or goal"""

    def __init__(self, message: str, field: str | None = None):
        super().__init__(message)
        self.field = field


class DuplicateGoalError(DomainException):
    """A goal already exists for this kind (and category, for expenses)"""

    pass


class NotFoundError(DomainException):
    """No record with the given id"""

    pass
