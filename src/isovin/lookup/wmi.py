"""
WMI Lookup
==========

Resolves a VIN's World Manufacturer Identifier to region, country and
manufacturer names through a WMIResolver.

Keys have the form:
    <NAMESPACE>_REGION_<wmi[0]>
    <NAMESPACE>_COUNTRY_<wmi[:2]>
    <NAMESPACE>_MANUFACTURER_<wmi>

On a miss the key is shortened by one trailing character and retried,
until a hit or until only the namespace prefix would remain.
"""

import logging
from dataclasses import dataclass, asdict
from typing import Callable, Dict, Optional, Union

from ..core.vin import VIN
from .resolvers import WMIResolver

logger = logging.getLogger(__name__)

DEFAULT_NAMESPACE = "ISO3780_WMI"
DEFAULT_PLACEHOLDER = "?"


def region_key(wmi: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    return f"{namespace}_REGION_{wmi[:1]}"


def country_key(wmi: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    return f"{namespace}_COUNTRY_{wmi[:2]}"


def manufacturer_key(wmi: str, namespace: str = DEFAULT_NAMESPACE) -> str:
    return f"{namespace}_MANUFACTURER_{wmi}"


def lookup_with_fallback(
    resolver: WMIResolver,
    key: str,
    min_length: int = 1,
    placeholder: str = DEFAULT_PLACEHOLDER,
) -> str:
    """
    Resolve key, dropping trailing characters on a miss.

    Args:
        resolver: Lookup backend
        key: Full lookup key
        min_length: Shortest key worth trying
        placeholder: Returned when no variant of the key resolves

    Returns:
        The first resolved value, or placeholder
    """
    candidate = key
    while candidate and len(candidate) >= min_length:
        value = resolver.resolve(candidate)
        if value is not None:
            if candidate != key:
                logger.debug(f"Resolved {key} via shortened key {candidate}")
            return value
        candidate = candidate[:-1]

    logger.debug(f"No entry for {key}")
    return placeholder


@dataclass
class WMIInfo:
    """Human-readable description of a WMI."""
    wmi: str
    region: str
    country: str
    manufacturer: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)


class WMILookup:
    """Names the WMI of a VIN using a resolver."""

    def __init__(
        self,
        resolver: WMIResolver,
        namespace: str = DEFAULT_NAMESPACE,
        placeholder: str = DEFAULT_PLACEHOLDER,
    ):
        self.resolver = resolver
        self.namespace = namespace
        self.placeholder = placeholder

    def region(self, vin: Union[VIN, str]) -> str:
        return self._lookup(vin, region_key)

    def country(self, vin: Union[VIN, str]) -> str:
        return self._lookup(vin, country_key)

    def manufacturer(self, vin: Union[VIN, str]) -> str:
        return self._lookup(vin, manufacturer_key)

    def describe(self, vin: Union[VIN, str]) -> WMIInfo:
        return WMIInfo(
            wmi=self._wmi(vin),
            region=self.region(vin),
            country=self.country(vin),
            manufacturer=self.manufacturer(vin),
        )

    @staticmethod
    def _wmi(vin: Union[VIN, str]) -> str:
        if isinstance(vin, str):
            vin = VIN(vin)
        return vin.wmi

    def _lookup(self, vin: Union[VIN, str], build_key: Callable[[str, str], str]) -> str:
        wmi = self._wmi(vin)
        if not wmi:
            return ""

        key = build_key(wmi, self.namespace)
        prefix = build_key("", self.namespace)
        return lookup_with_fallback(
            self.resolver,
            key,
            min_length=len(prefix) + 1,
            placeholder=self.placeholder,
        )


def describe_wmi(vin: Union[VIN, str], resolver: WMIResolver, namespace: Optional[str] = None) -> WMIInfo:
    """Describe a VIN's WMI with default placeholder handling."""
    return WMILookup(resolver, namespace=namespace or DEFAULT_NAMESPACE).describe(vin)
