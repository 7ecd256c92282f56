"""regionguard: permission-gated region access for multiplayer game servers.

Players entering a restricted region without the required permission group
are teleported back to world spawn and told why.

Usage:
    from regionguard import LocalHost, LocalRegion, RegionRestrictionPlugin
    from regionguard import GameInitializeEvent, HookKind

    host = LocalHost(spawn_tile=(100, 200))
    host.add_region(LocalRegion("Arena", x=0, y=0, width=40, height=20))

    plugin = RegionRestrictionPlugin()
    plugin.start(host)
    host.dispatch(HookKind.GAME_INITIALIZE, GameInitializeEvent())
    host.commands.run(host.console, "/regionadd Arena vip")
"""

__version__ = "1.0.0"

# Core primitives
from regionguard.core import (
    ConfigParseError,
    PersistError,
    RegionGuardError,
    RegionRule,
    StoreNotLoadedError,
    ValidationError,
)

# Configuration
from regionguard.config import RegionGuardSettings

# Host interfaces
from regionguard.host import (
    Host,
    LocalHost,
    LocalRegion,
    MessageTier,
    Subscription,
)

# Events
from regionguard.events import (
    GameInitializeEvent,
    GetDataEvent,
    GreetPlayerEvent,
    HookKind,
    PacketType,
    ReloadEvent,
)

# Services
from regionguard.storage import RegionPolicyStore
from regionguard.enforcement import AccessEnforcer
from regionguard.commands import Command, CommandArgs, RegionCommands
from regionguard.plugin import RegionRestrictionPlugin

__all__ = [
    # Version
    "__version__",
    # Core
    "RegionRule",
    "RegionGuardError",
    "ValidationError",
    "ConfigParseError",
    "PersistError",
    "StoreNotLoadedError",
    # Config
    "RegionGuardSettings",
    # Host
    "Host",
    "LocalHost",
    "LocalRegion",
    "MessageTier",
    "Subscription",
    # Events
    "HookKind",
    "PacketType",
    "GameInitializeEvent",
    "GreetPlayerEvent",
    "GetDataEvent",
    "ReloadEvent",
    # Services
    "RegionPolicyStore",
    "AccessEnforcer",
    "Command",
    "CommandArgs",
    "RegionCommands",
    "RegionRestrictionPlugin",
]
