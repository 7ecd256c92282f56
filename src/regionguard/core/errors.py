"""Error taxonomy for region access control.

Transient lookup misses (a player disconnecting mid-event, a region deleted
after its rule was added) are not errors and have no exception type here.
"""


class RegionGuardError(Exception):
    """Base class for all regionguard errors."""

    pass


class ValidationError(RegionGuardError):
    """Raised when a rule or command argument is rejected before any mutation."""

    pass


class ConfigParseError(RegionGuardError):
    """Raised when the persisted region document exists but is malformed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"Could not parse {path}: {reason}")
        self.path = path
        self.reason = reason


class PersistError(RegionGuardError):
    """Raised when the region document cannot be written to disk."""

    pass


class StoreNotLoadedError(RegionGuardError):
    """Raised when the store is used before a successful load."""

    pass
