"""Exceptions related to Data Access Objects (DAO) operations.

Classes:
    DAOError:
        Generic base class for DAO-related exceptions.

    ShortlinkNotFoundError:
        Raised when a shortlink (URL or detail record) is not found in the data store.

    DataStoreError:
        Raised when there is an error in the data store (e.g., connection issues, timeouts, OOM, etc.).

Example:
    >>> from shortlinker.dao.exceptions import ShortlinkNotFoundError
    >>> raise ShortlinkNotFoundError("Unknown short URL 'abc'.")
    Traceback (most recent call last):
        ...
    shortlinker.dao.exceptions.ShortlinkNotFoundError: Unknown short URL 'abc'.
"""

from shortlinker.exceptions import ShortlinkerError


class DAOError(ShortlinkerError):
    """Generic base class for DAO-related exceptions."""

    error_code = 'dao:dao_error'


class ShortlinkNotFoundError(DAOError):
    """Raised when a shortlink is not found in the data store."""

    error_code = 'dao:shortlink_not_found_error'
    status = 404


class DataStoreError(DAOError):
    """Raised when the data store encounters an error.

    Examples include connection issues, timeouts, and out-of-memory failures.
    The failing store operation and key (when known) are kept on the exception
    so callers can log them.
    """

    error_code = 'dao:data_store_error'
    status = 503

    def __init__(self, message: str, operation: str | None = None, key: str | None = None):
        super().__init__(message)
        self.operation = operation
        self.key = key
