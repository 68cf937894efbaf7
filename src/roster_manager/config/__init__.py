"""
Configuration Package - Models and Loaders.

Configuration Structure:
    - RosterConfig: Root configuration object
    - QueryConfig: Default sort and "match all" labels
    - ExportConfig: CSV artifact name, MIME type and output directory
    - CacheConfig: Optional memoisation of derived views
"""

from roster_manager.config.loader import ConfigLoader, load_config
from roster_manager.config.models import (
    CacheConfig,
    ExportConfig,
    QueryConfig,
    RosterConfig,
)

__all__ = [
    "ConfigLoader",
    "load_config",
    "CacheConfig",
    "ExportConfig",
    "QueryConfig",
    "RosterConfig",
]
