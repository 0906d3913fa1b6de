"""
Custom exception classes for the package.

The conversion functions themselves never raise; these cover the
dispatcher and configuration lookups only.
"""

class BaseCustomException(Exception):
    """Base class for custom exceptions in this package."""
    pass

class UnknownCoordinateSystemError(BaseCustomException, ValueError):
    """Raised when a coordinate system name is not WGS84, GCJ02 or BD09."""
    pass

class ConfigurationError(BaseCustomException):
    """Raised when an unknown configuration name is requested."""
    pass
