"""Host event kinds and boundary filtering."""

from regionguard.events.models import (
    GameInitializeEvent,
    GetDataEvent,
    GreetPlayerEvent,
    HookKind,
    PacketType,
    ReloadEvent,
    is_position_update,
)

__all__ = [
    "HookKind",
    "PacketType",
    "GameInitializeEvent",
    "GreetPlayerEvent",
    "GetDataEvent",
    "ReloadEvent",
    "is_position_update",
]
