from unittest.mock import Mock

from _util import Greet, Serve
from pytest import fixture

from cmdrecipe import CommandRegistry


@fixture
def registry():
    return CommandRegistry(Greet(), Serve())


@fixture
def manager():
    """
    A fake manager knowing a single command, named "fake".
    """
    manager = Mock()
    manager.lookup_by_type.return_value.metadata.name = "fake"
    return manager
