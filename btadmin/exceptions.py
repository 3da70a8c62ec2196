"""Custom exceptions for btadmin"""

from enum import Enum


class ErrorKind(str, Enum):
    """Category of a failed admin operation"""
    NOT_FOUND = "not_found"
    ALREADY_EXISTS = "already_exists"
    PERMISSION_DENIED = "permission_denied"
    INVALID_ARGUMENT = "invalid_argument"
    CREDENTIALS = "credentials"
    UNAVAILABLE = "unavailable"
    CONFIGURATION = "configuration"
    UNKNOWN = "unknown"


class BtadminError(Exception):
    """Base exception for all btadmin errors"""
    kind = ErrorKind.UNKNOWN


class BigtableError(BtadminError):
    """Base exception for Bigtable admin API errors"""
    pass


class BigtableCredentialsError(BigtableError):
    """Raised when Google Cloud credentials are missing or invalid"""
    kind = ErrorKind.CREDENTIALS


class BigtableConnectionError(BigtableError):
    """Raised when the admin API is unreachable or times out"""
    kind = ErrorKind.UNAVAILABLE


class BigtableNotFoundError(BigtableError):
    """Raised when an instance or cluster does not exist"""
    kind = ErrorKind.NOT_FOUND


class BigtableAlreadyExistsError(BigtableError):
    """Raised when creating an instance or cluster that already exists"""
    kind = ErrorKind.ALREADY_EXISTS


class BigtablePermissionError(BigtableError):
    """Raised when the caller lacks IAM permission for the operation"""
    kind = ErrorKind.PERMISSION_DENIED


class BigtableRequestError(BigtableError):
    """Raised when the admin API rejects a request as invalid"""
    kind = ErrorKind.INVALID_ARGUMENT


class ConfigurationError(BtadminError):
    """Raised when configuration is invalid"""
    kind = ErrorKind.CONFIGURATION
