import argparse
import logging

import pytest

from core.log_config import CHATTY_LOGGERS, configure_logging, parse_level


@pytest.fixture(autouse=True)
def restore_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for h in list(root.handlers):
        if h not in handlers:
            root.removeHandler(h)
    root.setLevel(level)
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.NOTSET)


@pytest.mark.parametrize("value,expected", [
    ("debug", logging.DEBUG),
    ("WARNING", logging.WARNING),
    (" info ", logging.INFO),
    ("15", 15),
    (logging.ERROR, logging.ERROR),
])
def test_parse_level(value, expected):
    assert parse_level(value) == expected


def test_parse_level_rejects_unknown_names():
    with pytest.raises(argparse.ArgumentTypeError):
        parse_level("loud")


def test_repeated_configuration_keeps_one_handler():
    configure_logging("debug")
    root = configure_logging(logging.WARNING)

    assert len(root.handlers) == 1
    assert root.level == logging.WARNING


def test_frame_loggers_stay_quiet_at_debug():
    configure_logging(logging.DEBUG)
    assert not logging.getLogger("maps.map_base").isEnabledFor(logging.DEBUG)
    assert logging.getLogger("core.boundary").isEnabledFor(logging.DEBUG)

    configure_logging(logging.DEBUG, verbose_frames=True)
    assert logging.getLogger("maps.map_base").isEnabledFor(logging.DEBUG)


def test_frame_loggers_follow_a_higher_root_level():
    configure_logging(logging.ERROR)
    assert not logging.getLogger("core.player_base").isEnabledFor(logging.WARNING)
