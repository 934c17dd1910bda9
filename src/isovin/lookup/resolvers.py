"""
WMI Resolvers - Key/Value Lookup Backends
==========================================

A resolver maps a string key (e.g. "ISO3780_WMI_COUNTRY_1H") to a
human-readable string, or None on a miss. The VIN core never depends on
where the table comes from.

Usage:
    resolver = DictResolver({"ISO3780_WMI_REGION_1": "North America"})
    resolver = FileResolver("wmi_en.yaml")
    resolver.resolve("ISO3780_WMI_REGION_1")
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Mapping, Optional, Union

import yaml

from ..exceptions import LookupTableError

logger = logging.getLogger(__name__)


class WMIResolver(ABC):
    """Abstract key/value lookup used to name WMI codes."""

    @abstractmethod
    def resolve(self, key: str) -> Optional[str]:
        """Return the value for key, or None if the key is unknown."""
        pass


class DictResolver(WMIResolver):
    """Resolver backed by an in-memory mapping."""

    def __init__(self, table: Mapping[str, str]):
        self._table: Dict[str, str] = dict(table)

    def __len__(self) -> int:
        return len(self._table)

    def resolve(self, key: str) -> Optional[str]:
        return self._table.get(key)


class FileResolver(DictResolver):
    """
    Resolver backed by a flat key/value table on disk.

    Supported formats: .json, .yaml, .yml, UTF-8 encoded. The table is
    read once at construction.

    Raises:
        LookupTableError: If the file is missing, unparsable or not a
            mapping of strings
    """

    YAML_SUFFIXES = ('.yaml', '.yml')

    def __init__(self, path: Union[str, Path]):
        self.path = Path(path)
        super().__init__(self._load(self.path))
        logger.info(f"Loaded {len(self)} WMI entries from {self.path}")

    @classmethod
    def _load(cls, path: Path) -> Dict[str, str]:
        if not path.exists():
            raise LookupTableError(f"Lookup table not found: {path}")

        try:
            with open(path, encoding='utf-8') as f:
                if path.suffix.lower() in cls.YAML_SUFFIXES:
                    data = yaml.safe_load(f)
                else:
                    data = json.load(f)
        except OSError as e:
            raise LookupTableError(f"Cannot read lookup table {path}: {e}") from e
        except (UnicodeDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
            raise LookupTableError(f"Cannot parse lookup table {path}: {e}") from e

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise LookupTableError(
                f"Lookup table {path} must be a mapping, got {type(data).__name__}"
            )

        # YAML turns unquoted numeric values into ints
        return {str(key): str(value) for key, value in data.items()}
