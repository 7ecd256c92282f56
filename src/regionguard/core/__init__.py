"""Core models and errors.

Architecture Note:
    core/ holds stateless definitions only. Stateful services (the policy
    store, the enforcer, the plugin) live in their own packages.
"""

from regionguard.core.errors import (
    ConfigParseError,
    PersistError,
    RegionGuardError,
    StoreNotLoadedError,
    ValidationError,
)
from regionguard.core.models import RegionRule

__all__ = [
    "RegionRule",
    "RegionGuardError",
    "ValidationError",
    "ConfigParseError",
    "PersistError",
    "StoreNotLoadedError",
]
