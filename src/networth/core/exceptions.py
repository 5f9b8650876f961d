"""Application-level exceptions."""


class AppError(Exception):
    """Base exception for application errors."""

    def __init__(self, message: str, code: str = "APP_ERROR"):
        self.message = message
        self.code = code
        super().__init__(message)


class ValidationError(AppError):
    """Raised when input validation fails."""

    def __init__(self, message: str):
        super().__init__(message, code="VALIDATION_ERROR")


class NotFoundError(AppError):
    """Raised when a requested resource is not found."""

    def __init__(self, resource: str, identifier: str):
        super().__init__(f"{resource} not found: {identifier}", code="NOT_FOUND")


class ParseError(AppError):
    """Raised when a single ledger row cannot be turned into a record."""

    def __init__(self, message: str, line_number: int = 0):
        self.line_number = line_number
        super().__init__(message, code="PARSE_ERROR")


class ReconciliationError(AppError):
    """Raised when a store write issued during reconciliation fails."""

    def __init__(self, message: str, code: str = "RECONCILIATION_ERROR"):
        super().__init__(message, code=code)


class ConstraintViolation(ReconciliationError):
    """Raised when the store rejects a write on a uniqueness or ownership constraint."""

    def __init__(self, message: str):
        super().__init__(message, code="CONSTRAINT_VIOLATION")


class InvariantViolation(AppError):
    """Raised when a derived view fails its own consistency check."""

    def __init__(self, message: str):
        super().__init__(message, code="INVARIANT_VIOLATION")
