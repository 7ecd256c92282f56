"""Region restriction plugin: wires the store, enforcer and commands to a host.

Usage:
    host = LocalHost(spawn_tile=(100, 200))
    plugin = RegionRestrictionPlugin(RegionGuardSettings(regions_file="regions.json"))
    plugin.start(host)
    host.dispatch(HookKind.GAME_INITIALIZE, GameInitializeEvent())
    ...
    plugin.stop()
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from regionguard import __version__
from regionguard.commands.region_commands import RegionCommands
from regionguard.config.settings import RegionGuardSettings
from regionguard.core.errors import ConfigParseError, PersistError
from regionguard.enforcement.enforcer import AccessEnforcer
from regionguard.events.models import (
    GameInitializeEvent,
    GetDataEvent,
    GreetPlayerEvent,
    HookKind,
    ReloadEvent,
    is_position_update,
)
from regionguard.host.protocol import MessageTier
from regionguard.storage.policy_store import RegionPolicyStore

if TYPE_CHECKING:
    from regionguard.host.protocol import Host, Subscription

logger = logging.getLogger(__name__)


class RegionRestrictionPlugin:
    """Teleports players to spawn if they enter restricted regions without the required group.

    The store is owned by the plugin and handed to the enforcer and the
    command handlers; nothing is process-global. ``start`` registers every
    hook and ``stop`` revokes each registration individually.

    Args:
        settings: Plugin configuration (defaults read from the environment).
        store: Pre-built store; by default one is created at
            ``settings.regions_file``.
    """

    name = "Region Restriction"
    author = "Verza"
    description = (
        "Teleports players to spawn if they enter restricted regions without the required group."
    )
    version = __version__

    def __init__(
        self,
        settings: RegionGuardSettings | None = None,
        store: RegionPolicyStore | None = None,
    ):
        self.settings = settings or RegionGuardSettings()
        self.store = store or RegionPolicyStore(
            self.settings.regions_file, indent=self.settings.json_indent
        )
        self._host: Host | None = None
        self._enforcer: AccessEnforcer | None = None
        self._subscriptions: list[Subscription] = []
        self._commands_registered = False

    @property
    def running(self) -> bool:
        return self._host is not None

    def start(self, host: Host) -> None:
        """Subscribe to host hooks. Commands are registered on game initialize."""
        if self._host is not None:
            raise RuntimeError(f"{self.name} is already started")
        self._host = host
        self._enforcer = AccessEnforcer(self.store, host, self.settings)
        hooks: list[tuple[HookKind, Callable[[Any], None]]] = [
            (HookKind.GAME_INITIALIZE, self._on_game_initialize),
            (HookKind.GREET_PLAYER, self._on_greet_player),
            (HookKind.GET_DATA, self._on_get_data),
            (HookKind.RELOAD, self._on_reload),
        ]
        for kind, callback in hooks:
            self._subscriptions.append(host.hooks.register(kind, callback))
        logger.info("%s v%s started", self.name, self.version)

    def stop(self) -> None:
        """Revoke every hook and command registration."""
        while self._subscriptions:
            self._subscriptions.pop().cancel()
        self._host = None
        self._enforcer = None
        self._commands_registered = False
        logger.info("%s stopped", self.name)

    def _on_game_initialize(self, event: GameInitializeEvent) -> None:
        if self._host is None:
            return
        try:
            self.store.load()
        except (ConfigParseError, PersistError) as e:
            # Stay loaded so an operator can fix the file and /reload
            logger.error("Region rules not loaded, enforcement is inactive: %s", e)
        if self._commands_registered:
            return
        commands = RegionCommands(self.store, self._host, self.settings)
        for command in commands.commands():
            self._subscriptions.append(self._host.commands.add(command))
        self._commands_registered = True

    def _on_greet_player(self, event: GreetPlayerEvent) -> None:
        if self._enforcer is None:
            return
        self._enforcer.on_player_join(event.who)

    def _on_get_data(self, event: GetDataEvent) -> None:
        if not is_position_update(event):
            return
        if self._enforcer is None:
            return
        self._enforcer.on_player_position_update(event.who, event.msg_id)

    def _on_reload(self, event: ReloadEvent) -> None:
        try:
            self.store.reload()
        except (ConfigParseError, PersistError) as e:
            event.sender.send_message(f"Failed to reload regions: {e}", MessageTier.ERROR)
            return
        event.sender.send_message("Regions reloaded from file.", MessageTier.SUCCESS)
