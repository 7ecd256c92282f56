"""Command descriptors passed to the host command router."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from regionguard.host.protocol import CommandSender


@dataclass(frozen=True, slots=True)
class CommandArgs:
    """Invocation context for a command handler.

    Attributes:
        sender: Operator (or console) that issued the command.
        parameters: Arguments after the command name, already tokenized.
    """

    sender: CommandSender
    parameters: tuple[str, ...] = ()


@dataclass(frozen=True, slots=True)
class Command:
    """Chat command registration.

    Attributes:
        names: Primary name first, then aliases. Matched case-insensitively.
        permission: Capability the sender must hold.
        handler: Called with a CommandArgs.
        help_text: One-line description shown by the host's help command.
    """

    names: tuple[str, ...]
    permission: str
    handler: Callable[[CommandArgs], None] = field(compare=False)
    help_text: str = ""

    @property
    def name(self) -> str:
        return self.names[0]
