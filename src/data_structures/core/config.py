"""Configuration for the data structures package.

Holds the tunable defaults used when building structures from the CLI,
and loads overrides from a TOML file.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Any, Dict

import tomllib  # Python 3.11+

from .errors import InvalidArgumentError

CONFIG_TABLE = "data_structures"


@dataclass
class StructuresConfig:
    """Configuration parameters for the data structures.

    Attributes:
        hash_table_capacity: Number of buckets in a new HashTable
        trie_root_marker: Character stored on the root node of a Trie
        log_level: Logging level name used by the CLI
    """

    hash_table_capacity: int = 128
    trie_root_marker: str = "*"
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        if self.hash_table_capacity <= 0:
            raise InvalidArgumentError(
                f"hash_table_capacity must be positive, got {self.hash_table_capacity}"
            )
        self.log_level = self.log_level.upper()
        if self.log_level not in logging.getLevelNamesMapping():
            raise InvalidArgumentError(f"Unknown log_level: {self.log_level!r}")

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> StructuresConfig:
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise InvalidArgumentError(f"Unknown configuration keys: {', '.join(unknown)}")
        return cls(**data)


def load_config(path: Path) -> StructuresConfig:
    """
    Reads a TOML file and returns the configuration it describes.
    Keys are taken from the [data_structures] table when present,
    otherwise from the top level of the document.
    """
    if not path.exists():
        raise FileNotFoundError(f"Config file not found: {path}")
    raw = path.read_text(encoding="utf-8")
    data = tomllib.loads(raw)
    return StructuresConfig.from_dict(data.get(CONFIG_TABLE, data))
