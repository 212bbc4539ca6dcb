class CalgregError(Exception):
    """Base error."""

class ConfigurationError(CalgregError):
    """Raised when an engine cannot be built from the given storage types or epoch."""

class DomainError(CalgregError, ValueError):
    """Raised by checked conversions for arguments outside an engine's domain."""
