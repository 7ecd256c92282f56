"""Host capability interfaces and the in-memory LocalHost."""

from regionguard.host.local import (
    ConsoleSender,
    LocalGroup,
    LocalHost,
    LocalPlayer,
    LocalRegion,
)
from regionguard.host.protocol import (
    CommandRouter,
    CommandSender,
    Host,
    HookBus,
    MessageTier,
    Player,
    Region,
    Subscription,
)

__all__ = [
    "Host",
    "HookBus",
    "CommandRouter",
    "CommandSender",
    "Player",
    "Region",
    "MessageTier",
    "Subscription",
    "LocalHost",
    "LocalGroup",
    "LocalRegion",
    "LocalPlayer",
    "ConsoleSender",
]
