"""Exceptions raised outside the pure VIN core (files, configuration, JSON)."""


class VINError(Exception):
    """Base exception for isovin errors."""
    pass


class LookupTableError(VINError):
    """Raised when a WMI lookup table cannot be loaded."""
    pass


class ConfigurationError(VINError):
    """Raised when configuration cannot be loaded or is invalid."""
    pass


class VINSerializationError(VINError, ValueError):
    """Raised when a serialized VIN is not a plain string."""
    pass
