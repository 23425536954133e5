"""Queue of accepted ``_gaq`` commands."""

import functools
import logging
from typing import Callable, List, Tuple, Union

from ga_snippet.analytics.commands import ArgValue, Command, CommandInvocation, resolve_command

logger = logging.getLogger(__name__)


class CommandRecorder:
    """Records allow-listed commands in call order.

    The allow-list is the only admission check: any arguments are stored
    as given. Every allow-listed name is also reachable as an attribute,
    with or without the leading marker:

        recorder.trackEvent("Videos", "Play", "intro")
        recorder._setCustomVar(1, "plan", "gold", 2)
        recorder.record(Command.TRACK_PAGEVIEW)
    """

    def __init__(self, debug_mode: bool = False, logger: logging.Logger = logger) -> None:
        """Start with an empty log."""
        self._debug_mode = debug_mode
        self._logger = logger
        self._invocations: List[CommandInvocation] = []

    def record(self, name: Union[str, Command], *args: ArgValue) -> bool:
        """Queue name with args if it is allow-listed.

        Returns:
            True if queued, False if the name is unknown (nothing is queued).
        """
        command = resolve_command(name)
        if command is None:
            if self._debug_mode:
                self._logger.info("Dropping unknown Google Analytics command %r", name)
            return False

        self._invocations.append(CommandInvocation(name=command, args=tuple(args)))
        return True

    @property
    def invocations(self) -> Tuple[CommandInvocation, ...]:
        """Queued invocations, oldest first."""
        return tuple(self._invocations)

    @property
    def called_commands(self) -> List[Command]:
        """Command of each queued invocation, oldest first."""
        return [invocation.name for invocation in self._invocations]

    def has_called(self, name: Union[str, Command]) -> bool:
        """Return True if name was queued at least once."""
        command = resolve_command(name)
        return command is not None and command in self.called_commands

    def clear(self) -> None:
        """Empty the log."""
        self._invocations.clear()

    def __len__(self) -> int:
        return len(self._invocations)

    def __getattr__(self, name: str) -> Callable[..., bool]:
        # Only reached for attributes not found normally; dunders stay untouched.
        if name.startswith("__"):
            raise AttributeError(name)
        command = resolve_command(name)
        if command is None:
            raise AttributeError(f"{type(self).__name__!r} has no command {name!r}")
        return functools.partial(self.record, command)
