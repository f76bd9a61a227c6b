import logging
from unittest.mock import patch

from _util import Serve

from cmdrecipe import for_name, for_type
from cmdrecipe.util import LOG_FORMAT, enable_logging, log


class logging_:
    def test_logger_is_named_after_package(self):
        assert log.name == "cmdrecipe"

    @patch("cmdrecipe.util.logging.basicConfig")
    def test_enable_logging_turns_on_debug(self, basicConfig):
        enable_logging()
        basicConfig.assert_called_once_with(
            level=logging.DEBUG, format=LOG_FORMAT
        )

    def test_build_emits_debug_records(self, caplog):
        caplog.set_level(logging.DEBUG, logger="cmdrecipe")
        for_name("greet").arguments(["a"]).build()
        messages = [x.getMessage() for x in caplog.records]
        assert any(x.startswith("Built Invocation(") for x in messages)

    def test_type_lookups_emit_debug_records(self, caplog, registry):
        caplog.set_level(logging.DEBUG, logger="cmdrecipe")
        for_type(Serve).build().resolve_command_name(registry)
        messages = [x.getMessage() for x in caplog.records]
        assert any("Looking up command of type" in x for x in messages)

    def test_name_resolution_is_silent(self, caplog, registry):
        invocation = for_name("greet").build()
        caplog.set_level(logging.DEBUG, logger="cmdrecipe")
        invocation.resolve_command_name(registry)
        assert caplog.records == []
