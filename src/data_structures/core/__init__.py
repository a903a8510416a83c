"""Core definitions: errors, configuration and shared types."""

from .config import StructuresConfig, load_config
from .errors import (
    DataStructureError,
    InvalidArgumentError,
    InvariantViolationError,
    NotFoundError,
)

__all__ = [
    "StructuresConfig",
    "load_config",
    "DataStructureError",
    "InvalidArgumentError",
    "InvariantViolationError",
    "NotFoundError",
]
