"""Local in-memory host implementation.

Simple dict-based host suitable for single-process use and testing. Models
rectangular regions, hierarchical permission groups and a synchronous hook
bus; each event handler runs to completion before dispatch returns.

Usage:
    host = LocalHost(spawn_tile=(10, 20))
    host.add_region(LocalRegion("Arena", x=0, y=0, width=50, height=30))
    player = host.connect("alice", group=host.groups["default"], tile=(5, 5))
    host.dispatch(HookKind.GREET_PLAYER, GreetPlayerEvent(who=player.index))
"""

from __future__ import annotations

import logging
import shlex
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from regionguard.commands.models import Command, CommandArgs
from regionguard.events.models import HookKind
from regionguard.host.protocol import CommandSender, MessageTier, Subscription

logger = logging.getLogger(__name__)

SUPERUSER_PERMISSION = "*"


class LocalGroup:
    """Permission group with optional parent.

    Permissions prefixed with ``!`` are negations and win over grants,
    including grants inherited from a parent. ``a.b.*`` grants every
    permission under ``a.b``.

    Args:
        name: Group name.
        permissions: Granted (or ``!``-negated) permission strings.
        parent: Group to inherit from.
    """

    def __init__(
        self,
        name: str,
        permissions: set[str] | None = None,
        parent: LocalGroup | None = None,
    ):
        self.name = name
        self.permissions: set[str] = set(permissions or ())
        self.parent = parent

    def _chain(self) -> list[LocalGroup]:
        chain: list[LocalGroup] = []
        group: LocalGroup | None = self
        while group is not None and group not in chain:
            chain.append(group)
            group = group.parent
        return chain

    @staticmethod
    def _candidates(permission: str) -> list[str]:
        """Permission itself plus every wildcard that would cover it."""
        parts = permission.split(".")
        wildcards = [".".join(parts[:i]) + ".*" for i in range(len(parts) - 1, 0, -1)]
        return [permission, *wildcards]

    def has_permission(self, permission: str) -> bool:
        chain = self._chain()
        candidates = self._candidates(permission)
        if any(f"!{c}" in g.permissions for g in chain for c in candidates):
            return False
        if any(SUPERUSER_PERMISSION in g.permissions for g in chain):
            return True
        # Membership in the named group (or a descendant of it) counts as holding it
        if any(g.name == permission for g in chain):
            return True
        return any(c in g.permissions for g in chain for c in candidates)


@dataclass
class LocalRegion:
    """Axis-aligned rectangular region. Containment is inclusive on all edges."""

    name: str
    x: int
    y: int
    width: int
    height: int

    def in_area(self, x: int, y: int) -> bool:
        return self.x <= x <= self.x + self.width and self.y <= y <= self.y + self.height


@dataclass
class LocalPlayer:
    """Connected player that records teleports and messages it receives."""

    index: int
    name: str
    group: LocalGroup
    tile_x: int = 0
    tile_y: int = 0
    teleports: list[tuple[float, float]] = field(default_factory=list)
    messages: list[tuple[MessageTier, str]] = field(default_factory=list)

    def has_permission(self, permission: str) -> bool:
        return self.group.has_permission(permission)

    def teleport(self, x: float, y: float) -> None:
        self.teleports.append((x, y))

    def send_message(self, text: str, tier: MessageTier) -> None:
        self.messages.append((tier, text))

    def move_to(self, tile_x: int, tile_y: int) -> None:
        self.tile_x = tile_x
        self.tile_y = tile_y


@dataclass
class ConsoleSender:
    """Server console. Holds every permission."""

    name: str = "Server"
    messages: list[tuple[MessageTier, str]] = field(default_factory=list)

    def has_permission(self, permission: str) -> bool:
        return True

    def send_message(self, text: str, tier: MessageTier) -> None:
        self.messages.append((tier, text))


class LocalHookBus:
    """Synchronous hook bus. Callbacks run in registration order."""

    def __init__(self) -> None:
        self._callbacks: dict[HookKind, list[Callable[[Any], None]]] = {}

    def register(self, kind: HookKind, callback: Callable[[Any], None]) -> Subscription:
        callbacks = self._callbacks.setdefault(kind, [])
        callbacks.append(callback)
        return Subscription(lambda: callbacks.remove(callback))

    def count(self, kind: HookKind) -> int:
        return len(self._callbacks.get(kind, ()))

    def dispatch(self, kind: HookKind, event: Any) -> None:
        for callback in list(self._callbacks.get(kind, ())):
            callback(event)


class LocalCommandRouter:
    """Command router that tokenizes shell-style and checks permissions."""

    def __init__(self) -> None:
        self._commands: list[Command] = []

    def __len__(self) -> int:
        return len(self._commands)

    def add(self, command: Command) -> Subscription:
        self._commands.append(command)
        return Subscription(lambda: self._commands.remove(command))

    def find(self, name: str) -> Command | None:
        name = name.lower()
        for command in self._commands:
            if name in (n.lower() for n in command.names):
                return command
        return None

    def run(self, sender: CommandSender, text: str) -> bool:
        """Execute a command line such as ``/regionadd Arena vip``.

        Returns:
            True if a command matched and the sender was allowed to run it.
        """
        try:
            tokens = shlex.split(text.lstrip("/"))
        except ValueError:
            sender.send_message("Invalid command syntax.", MessageTier.ERROR)
            return False
        if not tokens:
            return False
        command = self.find(tokens[0])
        if command is None:
            sender.send_message("Invalid command entered.", MessageTier.ERROR)
            return False
        if not sender.has_permission(command.permission):
            sender.send_message("You do not have access to this command.", MessageTier.ERROR)
            return False
        logger.debug("%s executed /%s", sender.name, command.name)
        command.handler(CommandArgs(sender=sender, parameters=tuple(tokens[1:])))
        return True


class LocalHost:
    """In-memory game server.

    Args:
        spawn_tile: World spawn point in tile coordinates.
    """

    def __init__(self, spawn_tile: tuple[int, int] = (0, 0)):
        self._spawn_tile = spawn_tile
        self._players: dict[int, LocalPlayer] = {}
        self._regions: dict[str, LocalRegion] = {}
        self._next_index = 0
        self.hooks = LocalHookBus()
        self.commands = LocalCommandRouter()
        self.console = ConsoleSender()
        self.groups: dict[str, LocalGroup] = {"default": LocalGroup("default")}

    @property
    def spawn_tile(self) -> tuple[int, int]:
        return self._spawn_tile

    def add_group(
        self, name: str, permissions: set[str] | None = None, parent: str | None = None
    ) -> LocalGroup:
        group = LocalGroup(name, permissions, self.groups[parent] if parent else None)
        self.groups[name] = group
        return group

    def add_region(self, region: LocalRegion) -> None:
        self._regions[region.name] = region

    def delete_region(self, name: str) -> bool:
        return self._regions.pop(name, None) is not None

    def get_region(self, name: str) -> LocalRegion | None:
        return self._regions.get(name)

    def connect(
        self, name: str, group: LocalGroup | None = None, tile: tuple[int, int] = (0, 0)
    ) -> LocalPlayer:
        player = LocalPlayer(
            index=self._next_index,
            name=name,
            group=group or self.groups["default"],
            tile_x=tile[0],
            tile_y=tile[1],
        )
        self._players[player.index] = player
        self._next_index += 1
        return player

    def disconnect(self, index: int) -> None:
        self._players.pop(index, None)

    def get_player(self, index: int) -> LocalPlayer | None:
        return self._players.get(index)

    def dispatch(self, kind: HookKind, event: Any) -> None:
        self.hooks.dispatch(kind, event)
