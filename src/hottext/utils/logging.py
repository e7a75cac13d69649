import logging
import sys
import contextvars
from contextlib import contextmanager
from typing import IO, Iterator, Optional, Union

from colorlog import ColoredFormatter

LOGGER_NAME = "hottext"

# key of the line being picked/rendered, "-" outside of a render
line_key_var = contextvars.ContextVar("line_key", default="-")

_LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "bold_red",
}


class LineKeyFilter(logging.Filter):
    """Stamps record.line_key so the format string can show which key was in play."""

    def filter(self, record: logging.LogRecord) -> bool:
        record.line_key = line_key_var.get()
        return True


@contextmanager
def line_key_context(key: str) -> Iterator[str]:
    token = line_key_var.set(key)
    try:
        yield key
    finally:
        line_key_var.reset(token)


def _build_handler(level: Union[int, str], stream: IO[str]) -> logging.Handler:
    handler = logging.StreamHandler(stream)
    handler.setLevel(level)
    handler.addFilter(LineKeyFilter())
    handler.setFormatter(
        ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s "
            "%(light_black)s[%(line_key)s]%(reset)s %(name)s: %(message)s",
            datefmt="%H:%M:%S",
            log_colors=_LOG_COLORS,
        )
    )
    handler.hottext_handler = True  # type: ignore[attr-defined]
    return handler


def setup_logging(
    level: Optional[Union[int, str]] = None,
    stream: Optional[IO[str]] = None,
) -> logging.Logger:
    """
    Attach one colored handler to the "hottext" logger and return it.
    Repeated calls only adjust the level. level=None reads HOTTEXT_LOG_LEVEL.
    """
    if level is None:
        from hottext.config import Settings

        level = Settings.from_env().log_level

    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(level)

    ours = [h for h in logger.handlers if getattr(h, "hottext_handler", False)]
    if ours:
        for h in ours:
            h.setLevel(level)
    else:
        logger.addHandler(_build_handler(level, stream or sys.stderr))

    return logger
