"""
The command-manager boundary used when resolving invocations.

This package never executes commands; it only needs to ask *some* registry
which name a given command class was registered under. The protocols below
describe that minimal surface, and `CommandRegistry` is a small in-memory
implementation of it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Protocol, runtime_checkable

from .exceptions import CommandNotFound, DuplicateCommand
from .util import debug


@runtime_checkable
class CommandMetadata(Protocol):
    """Descriptive data attached to a command; only ``name`` is required."""

    @property
    def name(self) -> str: ...


@runtime_checkable
class Command(Protocol):
    """Anything exposing a `CommandMetadata` as ``metadata``."""

    @property
    def metadata(self) -> CommandMetadata: ...


@runtime_checkable
class CommandManager(Protocol):
    """
    A registry able to map a command implementation type to its instance.

    Implementations must raise (rather than return ``None``) when nothing is
    registered for ``command_type``.
    """

    def lookup_by_type(self, command_type: type) -> Command: ...


@dataclass(frozen=True)
class Metadata:
    """
    Plain `CommandMetadata` record.

    .. versionadded:: 0.25
    """

    name: str
    description: Optional[str] = None


def metadata(name: str, description: Optional[str] = None) -> Metadata:
    return Metadata(name=name, description=description)


class CommandRegistry:
    """
    In-memory `CommandManager`, keyed by command class and declared name.

    Population is expected to finish before the registry is shared; after
    that, concurrent lookups are safe since they never mutate it.

    .. versionadded:: 0.25
    """

    def __init__(self, *commands: Command) -> None:
        self._by_type: dict[type, Command] = {}
        self._by_name: dict[str, Command] = {}
        for command in commands:
            self.add(command)

    def add(self, command: Command) -> "CommandRegistry":
        """
        Register ``command`` under its class and its metadata name.

        When several instances of one class are added, type lookups return
        the most recently added one.

        :raises DuplicateCommand:
            if another command already uses the same name.
        """
        name = command.metadata.name
        if name in self._by_name:
            raise DuplicateCommand(name)
        debug(f"Registering command {command!r} as {name!r}")
        self._by_name[name] = command
        self._by_type[type(command)] = command
        return self

    def lookup_by_type(self, command_type: type) -> Command:
        try:
            return self._by_type[command_type]
        except KeyError:
            raise CommandNotFound(command_type) from None

    def lookup_by_name(self, name: str) -> Command:
        try:
            return self._by_name[name]
        except KeyError:
            raise CommandNotFound(name) from None

    def __contains__(self, key: object) -> bool:
        if isinstance(key, type):
            return key in self._by_type
        return key in self._by_name

    def __len__(self) -> int:
        return len(self._by_name)

    def __iter__(self) -> Iterator[Command]:
        return iter(self._by_name.values())

    def __repr__(self) -> str:
        return f"<CommandRegistry: {', '.join(self._by_name)}>"
