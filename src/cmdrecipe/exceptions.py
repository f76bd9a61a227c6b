"""
Custom exception classes.

Everything raised on purpose by this package derives from `CmdRecipeError`;
errors raised by a caller-supplied command manager are left alone.
"""


class CmdRecipeError(Exception):
    """
    Base class for every error raised by this package.

    .. versionadded:: 0.25
    """

    pass


class InvalidInvocation(CmdRecipeError, ValueError):
    """
    An invocation (or its builder) was given an unusable argument.

    Raised eagerly, at the call which received the bad value, so that no
    half-configured builder or invocation ever exists. Typical causes are a
    ``None`` command name or type, a bare string passed where a list of
    arguments was expected, or a malformed configuration entry.

    .. versionadded:: 0.25
    """

    pass


class CommandNotFound(CmdRecipeError, LookupError):
    """
    A `.CommandRegistry` has nothing registered under the requested key.

    :param key:
        The command type or command name that was looked up. Also exposed as
        the ``key`` attribute.

    .. versionadded:: 0.25
    """

    def __init__(self, key: object) -> None:
        self.key = key
        super().__init__(key)

    def __str__(self) -> str:
        key = self.key
        if isinstance(key, type):
            return f"No command of type {key.__module__}.{key.__qualname__}"
        return f"No command named {key!r}"


class DuplicateCommand(CmdRecipeError, ValueError):
    """
    Two commands were registered under the same declared name.

    .. versionadded:: 0.25
    """

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(name)

    def __str__(self) -> str:
        return f"A command named {self.name!r} is already registered"
