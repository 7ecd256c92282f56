"""Administrative commands for region rules.

/regionadd <region_name> <required_group>
/regionlist
/regionremove <region_name>

Every outcome is echoed to the invoking operator only, in the success,
info or error tier.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from regionguard.commands.models import Command, CommandArgs
from regionguard.config.settings import RegionGuardSettings
from regionguard.core.errors import (
    PersistError,
    StoreNotLoadedError,
    ValidationError,
)
from regionguard.host.protocol import MessageTier

if TYPE_CHECKING:
    from regionguard.host.protocol import Host
    from regionguard.storage.policy_store import RegionPolicyStore

logger = logging.getLogger(__name__)

ADD_USAGE = "Usage: /regionadd <region name> <required group>"
REMOVE_USAGE = "Usage: /regionremove <region name>"
NO_REGIONS = "No regions have been added."
REGION_NOT_FOUND = "Region not found."


class RegionCommands:
    """Handlers for the region rule commands.

    Args:
        store: Rule store to read and mutate.
        host: Used to check that a region exists before a rule is added.
        settings: Supplies the permission required for every command.
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

    def commands(self) -> list[Command]:
        """Command descriptors for registration with the host router."""
        permission = self._settings.manage_permission
        return [
            Command(
                names=("regionadd",),
                permission=permission,
                handler=self.add_region,
                help_text=(
                    "Adds a region with a required group. "
                    "Usage: /regionadd <region_name> <required_group>"
                ),
            ),
            Command(
                names=("regionlist",),
                permission=permission,
                handler=self.list_regions,
                help_text="Lists all regions with required groups.",
            ),
            Command(
                names=("regionremove",),
                permission=permission,
                handler=self.remove_region,
                help_text="Removes the group requirement from a region. " + REMOVE_USAGE,
            ),
        ]

    def _validate_add(self, parameters: tuple[str, ...]) -> tuple[str, str]:
        if len(parameters) != 2:
            raise ValidationError(ADD_USAGE)
        region_name, required_group = parameters
        if not region_name or not required_group:
            raise ValidationError(ADD_USAGE)
        if self._host.get_region(region_name) is None:
            raise ValidationError(REGION_NOT_FOUND)
        return region_name, required_group

    def add_region(self, args: CommandArgs) -> None:
        try:
            region_name, required_group = self._validate_add(args.parameters)
            self._store.add(region_name, required_group)
        except ValidationError as e:
            args.sender.send_message(str(e), MessageTier.ERROR)
            return
        except StoreNotLoadedError:
            args.sender.send_message(
                f"Region rules are not loaded. Fix {self._store.path} and use /reload.",
                MessageTier.ERROR,
            )
            return
        except PersistError as e:
            args.sender.send_message(f"Failed to save region rules: {e}", MessageTier.ERROR)
            return
        logger.info("%s set region %s to require %s", args.sender.name, region_name, required_group)
        args.sender.send_message(
            f"Region {region_name} added with required group {required_group}.",
            MessageTier.SUCCESS,
        )

    def list_regions(self, args: CommandArgs) -> None:
        try:
            rules = self._store.list()
        except StoreNotLoadedError:
            args.sender.send_message(
                f"Region rules are not loaded. Fix {self._store.path} and use /reload.",
                MessageTier.ERROR,
            )
            return
        if not rules:
            args.sender.send_message(NO_REGIONS, MessageTier.INFO)
            return
        for rule in rules:
            args.sender.send_message(rule.describe(), MessageTier.INFO)

    def remove_region(self, args: CommandArgs) -> None:
        if len(args.parameters) != 1:
            args.sender.send_message(REMOVE_USAGE, MessageTier.ERROR)
            return
        region_name = args.parameters[0]
        try:
            removed = self._store.remove(region_name)
        except StoreNotLoadedError:
            args.sender.send_message(
                f"Region rules are not loaded. Fix {self._store.path} and use /reload.",
                MessageTier.ERROR,
            )
            return
        except PersistError as e:
            args.sender.send_message(f"Failed to save region rules: {e}", MessageTier.ERROR)
            return
        if not removed:
            args.sender.send_message(f"Region {region_name} has no access rule.", MessageTier.ERROR)
            return
        args.sender.send_message(f"Region {region_name} is no longer restricted.", MessageTier.SUCCESS)
