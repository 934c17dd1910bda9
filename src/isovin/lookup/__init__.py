"""
WMI Lookup Module
=================

Names a VIN's World Manufacturer Identifier through a pluggable key/value
resolver. The lookup tables themselves are supplied by the caller.
"""

from .resolvers import (
    WMIResolver,
    DictResolver,
    FileResolver,
)
from .wmi import (
    DEFAULT_NAMESPACE,
    DEFAULT_PLACEHOLDER,
    WMIInfo,
    WMILookup,
    describe_wmi,
    lookup_with_fallback,
    region_key,
    country_key,
    manufacturer_key,
)

__all__ = [
    # Resolvers
    "WMIResolver",
    "DictResolver",
    "FileResolver",
    # Lookup
    "DEFAULT_NAMESPACE",
    "DEFAULT_PLACEHOLDER",
    "WMIInfo",
    "WMILookup",
    "describe_wmi",
    "lookup_with_fallback",
    "region_key",
    "country_key",
    "manufacturer_key",
]
