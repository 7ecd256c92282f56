"""Region access enforcement."""

from regionguard.enforcement.enforcer import AccessEnforcer

__all__ = [
    "AccessEnforcer",
]
