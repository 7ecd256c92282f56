"""Host capability protocols.

The game server owns players, region geometry, permission groups, event
dispatch and command routing. regionguard consumes them only through the
narrow interfaces below, so any server binding (or LocalHost for tests)
can be plugged in.

Usage:
    host = LocalHost(spawn_tile=(100, 200))
    plugin = RegionRestrictionPlugin()
    plugin.start(host)
"""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum
from typing import TYPE_CHECKING, Any, Protocol, runtime_checkable

if TYPE_CHECKING:
    from regionguard.commands.models import Command
    from regionguard.events.models import HookKind


class MessageTier(Enum):
    """Category of a chat message sent to a player or operator."""

    SUCCESS = "success"
    INFO = "info"
    ERROR = "error"


class Subscription:
    """Revocable handle returned by hook and command registration.

    Args:
        revoke: Callable that removes the registration from the host.
    """

    def __init__(self, revoke: Callable[[], None]):
        self._revoke: Callable[[], None] | None = revoke

    @property
    def active(self) -> bool:
        return self._revoke is not None

    def cancel(self) -> None:
        """Remove the registration. Safe to call more than once."""
        revoke, self._revoke = self._revoke, None
        if revoke is not None:
            revoke()


@runtime_checkable
class CommandSender(Protocol):
    """Anything that can invoke a command and receive a reply."""

    @property
    def name(self) -> str: ...

    def has_permission(self, permission: str) -> bool:
        """Hierarchical capability test (not exact string equality)."""
        ...

    def send_message(self, text: str, tier: MessageTier) -> None:
        """Send a categorized chat message."""
        ...


@runtime_checkable
class Player(CommandSender, Protocol):
    """Live connected player."""

    @property
    def index(self) -> int: ...

    @property
    def tile_x(self) -> int: ...

    @property
    def tile_y(self) -> int: ...

    def teleport(self, x: float, y: float) -> None:
        """Move the player to fine (sub-tile) world coordinates."""
        ...


@runtime_checkable
class Region(Protocol):
    """Named area of the world."""

    @property
    def name(self) -> str: ...

    def in_area(self, x: int, y: int) -> bool:
        """Inclusive containment test in tile coordinates."""
        ...


class HookBus(Protocol):
    """Host event dispatch."""

    def register(self, kind: HookKind, callback: Callable[[Any], None]) -> Subscription:
        """Subscribe to a hook. Cancel the returned handle to unsubscribe."""
        ...


class CommandRouter(Protocol):
    """Host chat-command routing."""

    def add(self, command: Command) -> Subscription:
        """Register a command. Cancel the returned handle to unregister."""
        ...


@runtime_checkable
class Host(Protocol):
    """Everything regionguard needs from the game server."""

    @property
    def hooks(self) -> HookBus: ...

    @property
    def commands(self) -> CommandRouter: ...

    @property
    def spawn_tile(self) -> tuple[int, int]:
        """World spawn point in tile coordinates."""
        ...

    def get_player(self, index: int) -> Player | None:
        """Look up a connected player by connection index."""
        ...

    def get_region(self, name: str) -> Region | None:
        """Look up a region by name."""
        ...
