"""Region access enforcement.

Both entry points share one evaluation: for every stored rule, in region
name order, a player standing inside the region without the required
group is teleported to world spawn and told which region refused them.
Missing players and regions are expected (late events, deleted regions)
and are skipped, never raised.

Usage:
    enforcer = AccessEnforcer(store, host)
    enforcer.on_player_join(player_index)
    enforcer.on_player_position_update(player_index, PacketType.PLAYER_UPDATE)
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from regionguard.config.settings import RegionGuardSettings
from regionguard.events.models import PacketType
from regionguard.host.protocol import MessageTier

if TYPE_CHECKING:
    from regionguard.core.models import RegionRule
    from regionguard.host.protocol import Host, Player
    from regionguard.storage.policy_store import RegionPolicyStore

logger = logging.getLogger(__name__)


class AccessEnforcer:
    """Keeps players out of regions they lack the group for.

    Only reads the store. Holds no per-player state, so evaluations for
    different players are independent.

    Args:
        store: Rule source.
        host: Game server capabilities.
        settings: Tile size and denial message template.
    """

    def __init__(
        self,
        store: RegionPolicyStore,
        host: Host,
        settings: RegionGuardSettings | None = None,
    ):
        self._store = store
        self._host = host
        self._settings = settings or RegionGuardSettings()

    def on_player_join(self, player_ref: int) -> None:
        """Evaluate a player once after their connection is greeted."""
        self._evaluate(player_ref)

    def on_player_position_update(self, player_ref: int, kind: PacketType | int) -> None:
        """Evaluate a player on a player-state update; ignore any other kind."""
        if kind != PacketType.PLAYER_UPDATE:
            return
        self._evaluate(player_ref)

    def spawn_position(self) -> tuple[float, float]:
        """World spawn in fine position units."""
        tile_x, tile_y = self._host.spawn_tile
        size = self._settings.tile_size
        return tile_x * size, tile_y * size

    def _evaluate(self, player_ref: int) -> None:
        player = self._host.get_player(player_ref)
        if player is None:
            logger.debug("Player %s is not connected, skipping", player_ref)
            return
        if not self._store.is_loaded:
            return
        for rule in self._store.list():
            if self._violates(player, rule):
                self._deny(player, rule)

    def _violates(self, player: Player, rule: RegionRule) -> bool:
        region = self._host.get_region(rule.region_name)
        if region is None:
            logger.debug("Region %s no longer exists, skipping rule", rule.region_name)
            return False
        if not region.in_area(player.tile_x, player.tile_y):
            return False
        return not player.has_permission(rule.required_group)

    def _deny(self, player: Player, rule: RegionRule) -> None:
        x, y = self.spawn_position()
        player.teleport(x, y)
        player.send_message(
            self._settings.denial_message.format(region=rule.region_name), MessageTier.INFO
        )
        logger.debug(
            "Denied %s entry to %s (requires %s)",
            player.name,
            rule.region_name,
            rule.required_group,
        )
