from _util import Greet, Serve, Unregistered
from pytest import raises

from cmdrecipe import (
    CommandManager,
    CommandMetadata,
    CommandNotFound,
    CommandRegistry,
    DuplicateCommand,
    Metadata,
    metadata,
)


class CommandRegistry_:
    "CommandRegistry"

    class init:
        def test_empty_by_default(self):
            assert len(CommandRegistry()) == 0

        def test_accepts_commands_positionally(self):
            greet, serve = Greet(), Serve()
            registry = CommandRegistry(greet, serve)
            assert list(registry) == [greet, serve]

    class add:
        def test_returns_self_for_chaining(self):
            registry = CommandRegistry()
            assert registry.add(Greet()) is registry

        def test_duplicate_names_rejected(self):
            registry = CommandRegistry(Greet())
            with raises(DuplicateCommand) as info:
                registry.add(Greet())
            assert info.value.name == "greet"
            assert "already registered" in str(info.value)

        def test_latest_instance_wins_for_type_lookups(self):
            class Renamable:
                def __init__(self, name):
                    self.metadata = metadata(name)

            first, second = Renamable("one"), Renamable("two")
            registry = CommandRegistry(first, second)
            assert registry.lookup_by_type(Renamable) is second
            assert registry.lookup_by_name("one") is first

    class lookup_by_type:
        def test_returns_registered_instance(self):
            serve = Serve()
            registry = CommandRegistry(Greet(), serve)
            assert registry.lookup_by_type(Serve) is serve

        def test_unknown_type_raises_CommandNotFound(self, registry):
            with raises(CommandNotFound) as info:
                registry.lookup_by_type(Unregistered)
            assert info.value.key is Unregistered
            assert str(info.value) == "No command of type _util.Unregistered"

        def test_CommandNotFound_is_a_LookupError(self, registry):
            with raises(LookupError):
                registry.lookup_by_type(Unregistered)

        def test_subclasses_do_not_match(self, registry):
            class LoudGreet(Greet):
                pass

            with raises(CommandNotFound):
                registry.lookup_by_type(LoudGreet)

    class lookup_by_name:
        def test_returns_registered_instance(self):
            greet = Greet()
            registry = CommandRegistry(greet)
            assert registry.lookup_by_name("greet") is greet

        def test_unknown_name_raises_CommandNotFound(self, registry):
            with raises(CommandNotFound) as info:
                registry.lookup_by_name("nope")
            assert str(info.value) == "No command named 'nope'"

    class dunders:
        def test_contains_checks_types_and_names(self, registry):
            assert Greet in registry
            assert "server" in registry
            assert Unregistered not in registry
            assert "orphan" not in registry

        def test_len_counts_commands(self, registry):
            assert len(registry) == 2

        def test_iterates_in_registration_order(self, registry):
            names = [x.metadata.name for x in registry]
            assert names == ["greet", "server"]

        def test_repr_lists_names(self, registry):
            assert repr(registry) == "<CommandRegistry: greet, server>"


class protocols:
    def test_registry_is_a_CommandManager(self, registry):
        assert isinstance(registry, CommandManager)

    def test_Metadata_is_CommandMetadata(self):
        assert isinstance(metadata("greet"), CommandMetadata)

    def test_metadata_helper_builds_Metadata(self):
        assert metadata("greet", "hi") == Metadata("greet", "hi")
        assert metadata("greet").description is None
