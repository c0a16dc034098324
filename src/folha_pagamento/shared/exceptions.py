"""Custom exceptions for the payroll core."""

from typing import Any, Optional


class FolhaPagamentoError(Exception):
    """Base exception for all payroll errors.

    ``context`` carries the figures that caused the failure so callers can
    report them without parsing the message.
    """

    def __init__(self, message: str, context: Optional[dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}


class InputValidationError(FolhaPagamentoError):
    """Core input rejected (reference month, gross salary, discount totals)."""

    pass


class NotFoundError(FolhaPagamentoError):
    """Referenced record does not exist."""

    pass


class PersistenceError(FolhaPagamentoError):
    """Failure raised by the persistence collaborator."""

    pass


class DataIntegrityError(PersistenceError):
    """Uniqueness or integrity constraint violated by the store."""

    pass


class DatabaseConnectionError(PersistenceError):
    """Store unreachable."""

    pass


class UnsupportedYearError(FolhaPagamentoError):
    """No tax table available for the requested fiscal year."""

    pass


class ParseError(FolhaPagamentoError):
    """Error parsing an employee file."""

    pass


class CorruptedFileError(ParseError):
    """File is not valid JSON or has an unexpected shape."""

    pass
