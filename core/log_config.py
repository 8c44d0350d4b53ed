import argparse
import logging
import sys

from settings import LOG_LEVEL, LOG_FORMAT, LOG_DATE_FORMAT

# Per-frame loggers that drown the console at DEBUG unless asked for
CHATTY_LOGGERS = ("maps.map_base", "core.player_base")


def parse_level(value):
    """Level name ("debug", "INFO") or number -> logging level int.

    Used as the argparse type for --log-level.
    """
    if isinstance(value, int):
        return value
    text = str(value).strip()
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    if not isinstance(level, int):
        raise argparse.ArgumentTypeError("unknown log level: %r" % value)
    return level


def configure_logging(level=LOG_LEVEL, verbose_frames=False):
    """Send every cave logger to stdout at level.

    Unless verbose_frames is set, the per-frame tile/movement loggers
    stay at INFO even when the root is at DEBUG.
    """
    level = parse_level(level)

    handler = logging.StreamHandler(stream=sys.stdout)
    handler.setFormatter(logging.Formatter(fmt=LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    root = logging.getLogger()
    root.setLevel(level)
    # Reconfiguring replaces the handler instead of stacking another
    for h in list(root.handlers):
        root.removeHandler(h)
    root.addHandler(handler)

    frame_level = logging.NOTSET if verbose_frames else max(level, logging.INFO)
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(frame_level)
    return root
