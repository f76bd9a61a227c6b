"""
Build invocations from plain configuration data.

Applications commonly keep their list of startup commands in a config file.
Once such a file has been parsed (YAML, JSON, TOML, whatever the application
uses) each entry is a mapping like::

    {"command": "migrate", "args": ["--fake"], "terminate_on_errors": True}

or, to refer to a command by its implementation class::

    {"type": "myapp.commands:ServerCommand"}
"""

from __future__ import annotations

import importlib
from typing import Any, Iterable, Mapping, Optional

from .exceptions import InvalidInvocation
from .invocation import Builder, Invocation
from .util import debug

KEYS = frozenset(("command", "type", "args", "terminate_on_errors"))


def import_command_type(path: str) -> type:
    """
    Import and return the class named by ``path``.

    Accepts ``"package.module:Class"`` as well as ``"package.module.Class"``;
    nested attributes (``"module:Outer.Inner"``) are followed.

    :raises InvalidInvocation:
        if the module cannot be imported, the attribute is missing, or it is
        not a class.
    """
    if ":" in path:
        module_name, _, attr_path = path.partition(":")
    else:
        module_name, _, attr_path = path.rpartition(".")
    if not module_name or not attr_path:
        raise InvalidInvocation(
            f"Command type path {path!r} must name a module and a class"
        )
    # There is no package to anchor a relative import to.
    if module_name.startswith("."):
        raise InvalidInvocation(
            f"Command type path {path!r} must use an absolute module name"
        )
    debug(f"Importing command type {path!r}")
    try:
        obj: Any = importlib.import_module(module_name)
    except ImportError as e:
        msg = f"Unable to import {module_name!r}: {e}"
        raise InvalidInvocation(msg) from e
    for attr in attr_path.split("."):
        try:
            obj = getattr(obj, attr)
        except AttributeError:
            msg = f"{path!r}: no attribute {attr!r}"
            raise InvalidInvocation(msg) from None
    if not isinstance(obj, type):
        raise InvalidInvocation(f"{path!r} is not a class")
    return obj


def invocation_from_dict(data: Mapping[str, Any]) -> Invocation:
    """
    Turn a single configuration mapping into an `Invocation`.

    Exactly one of ``command`` (a name) and ``type`` (a class, or a dotted
    path to one) must be given. ``args`` and ``terminate_on_errors`` are
    optional; the latter must be an actual bool, so strings such as
    ``"false"`` are rejected rather than read as truthy.
    """
    if not isinstance(data, Mapping):
        raise InvalidInvocation(
            f"Invocation config must be a mapping, not {data!r}"
        )
    unknown = set(data) - KEYS
    if unknown:
        names = ", ".join(sorted(map(str, unknown)))
        raise InvalidInvocation(f"Unknown invocation config keys: {names}")
    if ("command" in data) == ("type" in data):
        raise InvalidInvocation(
            "Invocation config needs exactly one of 'command' or 'type'"
        )
    terminate = data.get("terminate_on_errors", False)
    if not isinstance(terminate, bool):
        raise InvalidInvocation(
            f"'terminate_on_errors' must be true or false, not {terminate!r}"
        )
    builder: Builder
    if "command" in data:
        builder = Builder.for_name(data["command"])
    else:
        command_type = data["type"]
        if isinstance(command_type, str):
            command_type = import_command_type(command_type)
        builder = Builder.for_type(command_type)
    builder.arguments(data.get("args"))
    if terminate:
        builder.terminate_on_errors()
    return builder.build()


def invocations_from_config(
    entries: Optional[Iterable[Mapping[str, Any]]],
) -> list[Invocation]:
    """
    Build an `Invocation` for each mapping in ``entries``, keeping order.

    ``None`` (e.g. an absent config section) yields an empty list.
    """
    if entries is None:
        return []
    invocations = []
    for i, entry in enumerate(entries):
        try:
            invocations.append(invocation_from_dict(entry))
        except InvalidInvocation as e:
            msg = f"Invocation config entry #{i}: {e}"
            raise InvalidInvocation(msg) from e
    debug(f"Loaded {len(invocations)} invocation(s) from config")
    return invocations
