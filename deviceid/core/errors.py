"""
Exception types for device identifier generation.
"""


class DeviceIdError(Exception):
    """Base class for all deviceid errors."""
    pass


class InvalidArgumentError(DeviceIdError, ValueError):
    """Raised when a required argument or collaborator is missing or malformed."""
    pass


class ConfigurationError(DeviceIdError):
    """Raised when settings cannot be turned into a formatter."""
    pass


class UnsupportedHashAlgorithmError(ConfigurationError):
    """Raised when a hash algorithm name is not known to hashlib."""
    pass


class UnsupportedEncodingError(ConfigurationError):
    """Raised when an encoding name has no registered encoder."""
    pass


class HashAlgorithmClosedError(DeviceIdError):
    """Raised when a hash engine is used after it was closed."""
    pass


class FormatterNotConfiguredError(DeviceIdError):
    """Raised when a builder is asked for an identifier without a formatter."""
    pass
