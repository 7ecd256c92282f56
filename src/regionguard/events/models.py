"""Host event models.

The host delivers four kinds of events to the plugin. Raw network traffic
arrives as GetDataEvent tagged with a PacketType; only PLAYER_UPDATE is
relevant for enforcement.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from regionguard.host.protocol import CommandSender


class HookKind(Enum):
    """Host lifecycle hooks the plugin subscribes to."""

    GAME_INITIALIZE = auto()
    GREET_PLAYER = auto()
    GET_DATA = auto()
    RELOAD = auto()


class PacketType(IntEnum):
    """Network message ids (subset)."""

    CONNECT_REQUEST = 1
    PLAYER_INFO = 4
    PLAYER_SLOT = 5
    WORLD_INFO = 7
    PLAYER_UPDATE = 13
    PLAYER_HP = 16
    TILE_EDIT = 17
    CHAT_TEXT = 25
    PLAYER_MANA = 42


@dataclass(frozen=True, slots=True)
class GameInitializeEvent:
    """Fired once when the world is ready."""


@dataclass(frozen=True, slots=True)
class GreetPlayerEvent:
    """Fired after a player's connection has been greeted.

    Attributes:
        who: Connection index of the joining player.
    """

    who: int


@dataclass(frozen=True, slots=True)
class GetDataEvent:
    """Raw inbound network message.

    Attributes:
        msg_id: Message kind; plain ints are accepted for unknown kinds.
        who: Connection index of the sender.
    """

    msg_id: PacketType | int
    who: int


@dataclass(frozen=True, slots=True)
class ReloadEvent:
    """Host-wide configuration reload requested by an operator."""

    sender: CommandSender


def is_position_update(event: GetDataEvent) -> bool:
    """Check whether a raw network event is a player-state update."""
    return event.msg_id == PacketType.PLAYER_UPDATE
