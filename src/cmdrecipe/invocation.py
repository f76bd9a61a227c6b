"""
Deferred command invocations.

An `Invocation` is a "recipe" for running a command with preset arguments:
it says which command to run, what to pass it and whether a failure should
take the whole program down. Nothing is looked up or executed when the recipe
is built, so lists of invocations (e.g. commands to run at startup) can be
assembled before the application's commands have been registered.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Iterable, Optional, Union

from .exceptions import InvalidInvocation
from .util import debug

if TYPE_CHECKING:
    from .manager import CommandManager


@dataclass(frozen=True)
class ByName:
    """
    Resolve to a command by its full declared name.

    .. versionadded:: 0.25
    """

    command_name: str

    def __post_init__(self) -> None:
        if self.command_name is None:
            raise InvalidInvocation("Command name must not be None")

    def resolve_command_name(self, manager: "CommandManager") -> str:
        # Deliberately unchecked; an unknown name surfaces when the command
        # is executed, not here.
        return self.command_name


@dataclass(frozen=True)
class ByType:
    """
    Resolve to whichever command ``manager`` has registered for a class.

    .. versionadded:: 0.25
    """

    command_type: type

    def __post_init__(self) -> None:
        if self.command_type is None:
            raise InvalidInvocation("Command type must not be None")

    def resolve_command_name(self, manager: "CommandManager") -> str:
        debug(f"Looking up command of type {self.command_type!r}")
        return manager.lookup_by_type(self.command_type).metadata.name


Resolution = Union[ByName, ByType]


@dataclass(frozen=True)
class Invocation:
    """
    An immutable recipe for invoking a command with preset arguments.

    Instances are normally obtained from a `Builder` (see `for_name` and
    `for_type`) rather than constructed directly.

    :param resolution:
        A `ByName` or `ByType` describing how to find the command.

    :param tuple arguments:
        Command line arguments for the command, in order. Any iterable is
        copied into a tuple; ``None`` means no arguments.

    :param bool terminate_on_failure:
        Whether the program should terminate when this invocation fails.
        Purely informational here; whoever executes the invocation decides
        what to do with it.

    .. versionadded:: 0.25
    """

    resolution: Resolution
    arguments: tuple[str, ...] = ()
    terminate_on_failure: bool = False

    def __post_init__(self) -> None:
        if not isinstance(self.resolution, (ByName, ByType)):
            raise InvalidInvocation(
                f"Expected ByName or ByType, got {self.resolution!r}"
            )
        if not isinstance(self.terminate_on_failure, bool):
            raise InvalidInvocation(
                "terminate_on_failure must be a bool, not "
                f"{self.terminate_on_failure!r}"
            )
        # Frozen dataclass, so normalize through object.__setattr__.
        object.__setattr__(self, "arguments", _as_args(self.arguments))

    @classmethod
    def for_name(cls, full_command_name: str) -> "Builder":
        """
        Start building an invocation of a named command.

        :param str full_command_name: full name of the command.
        """
        return Builder.for_name(full_command_name)

    @classmethod
    def for_type(cls, command_type: type) -> "Builder":
        """
        Start building an invocation of a command of a known type.
        """
        return Builder.for_type(command_type)

    def resolve_command_name(self, manager: "CommandManager") -> str:
        """
        Return the name of the command this invocation refers to.

        By-name invocations return their stored name without consulting
        ``manager``. By-type invocations ask ``manager.lookup_by_type`` and
        return the found command's ``metadata.name``; anything the manager
        raises for an unknown type propagates untouched.
        """
        return self.resolution.resolve_command_name(manager)

    def should_terminate_on_failure(self) -> bool:
        """
        Return ``True`` if the program should terminate when this invocation
        fails.
        """
        return self.terminate_on_failure


class Builder:
    """
    Accumulates settings for, and ultimately builds, an `Invocation`.

    Start one with `Builder.for_name` or `Builder.for_type`, chain
    `arguments` and/or `terminate_on_errors`, then call `build`::

        startup = [
            for_name("migrate").arguments(["--fake"]).build(),
            for_type(ServerCommand).terminate_on_errors().build(),
        ]

    Builders are meant to be used once and thrown away. They are **not**
    thread-safe: concurrent configuration of one builder from several threads
    gives undefined results. The invocations they build are immutable and may
    be shared freely.

    .. versionadded:: 0.25
    """

    def __init__(
        self,
        command_name: Optional[str] = None,
        command_type: Optional[type] = None,
    ) -> None:
        if (command_name is None) == (command_type is None):
            raise InvalidInvocation(
                "Exactly one of command_name or command_type is required"
            )
        self._command_name = command_name
        self._command_type = command_type
        self._arguments: tuple[str, ...] = ()
        self._terminate_on_failure = False

    @classmethod
    def for_name(cls, full_command_name: str) -> "Builder":
        if full_command_name is None:
            raise InvalidInvocation("Command name must not be None")
        debug(f"Builder for command named {full_command_name!r}")
        return cls(command_name=full_command_name)

    @classmethod
    def for_type(cls, command_type: type) -> "Builder":
        if command_type is None:
            raise InvalidInvocation("Command type must not be None")
        debug(f"Builder for command of type {command_type!r}")
        return cls(command_type=command_type)

    def arguments(self, args: Optional[Iterable[str]]) -> "Builder":
        """
        Set command line arguments for this invocation.

        Replaces anything set earlier. ``None`` is the same as no arguments.
        """
        self._arguments = _as_args(args)
        return self

    def terminate_on_errors(self) -> "Builder":
        """
        Indicate that the program should terminate when this invocation
        fails.
        """
        self._terminate_on_failure = True
        return self

    def build(self) -> Invocation:
        if self._command_type is not None:
            resolution: Resolution = ByType(self._command_type)
        else:
            resolution = ByName(self._command_name)
        invocation = Invocation(
            resolution=resolution,
            arguments=self._arguments,
            terminate_on_failure=self._terminate_on_failure,
        )
        debug(f"Built {invocation!r}")
        return invocation

    def __repr__(self) -> str:
        target = self._command_type or self._command_name
        return f"<Builder {target!r} args={self._arguments!r}>"


def for_name(full_command_name: str) -> Builder:
    """
    Start building an invocation of a named command.

    Shorthand for `Builder.for_name`.
    """
    return Builder.for_name(full_command_name)


def for_type(command_type: type) -> Builder:
    """
    Start building an invocation of a command of a known type.

    Shorthand for `Builder.for_type`.
    """
    return Builder.for_type(command_type)


def _as_args(args: Optional[Iterable[str]]) -> tuple[str, ...]:
    if args is None:
        return ()
    # Iterating a string would quietly split it into characters.
    if isinstance(args, (str, bytes)):
        raise InvalidInvocation(
            f"Arguments must be a list of strings, not {args!r}"
        )
    return tuple(args)
