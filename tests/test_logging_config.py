import io
import logging

import pytest
from rich.console import Console
from rich.logging import RichHandler

from identgen.core.naming import IdentifierNormalizer
from identgen.core.config import NamingConfig
from identgen.logging_config import get_logger, setup_logging


@pytest.fixture
def restore_root_logger():
    logger = logging.getLogger("identgen")
    handlers, level = list(logger.handlers), logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


def test_get_logger_namespacing():
    assert get_logger("identgen.core.naming").name == "identgen.core.naming"
    assert get_logger("identgen").name == "identgen"
    assert get_logger("plugin").name == "identgen.plugin"


def test_setup_logging_installs_single_rich_handler(restore_root_logger):
    stream = io.StringIO()
    setup_logging("debug", console=Console(file=stream, width=200))
    setup_logging(logging.DEBUG, console=Console(file=stream, width=200))

    rich_handlers = [h for h in restore_root_logger.handlers if isinstance(h, RichHandler)]
    assert len(rich_handlers) == 1
    assert restore_root_logger.level == logging.DEBUG

    IdentifierNormalizer(NamingConfig(reserved_words={"map"})).normalize("map", False)
    assert "Escaping reserved identifier: map" in stream.getvalue()


def test_setup_logging_unknown_level(restore_root_logger):
    with pytest.raises(ValueError):
        setup_logging("chatty")
