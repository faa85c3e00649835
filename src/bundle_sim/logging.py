# Inspired / borrowed from the `click-logging` python package.
import logging
import sys
from collections.abc import Iterator
from contextlib import contextmanager
from enum import IntEnum
from typing import IO, Any, Optional, Union

import click
from yarl import URL


class LogLevel(IntEnum):
    ERROR = logging.ERROR
    WARNING = logging.WARNING
    INFO = logging.INFO
    DEBUG = logging.DEBUG


DEFAULT_LOG_LEVEL = LogLevel.INFO.name
DEFAULT_LOG_FORMAT = "%(levelname_semicolon_padded)s %(message)s"
HIDDEN_MESSAGE = "[hidden]"


CLICK_STYLE_KWARGS = {
    LogLevel.ERROR: dict(fg="bright_red"),
    LogLevel.WARNING: dict(fg="bright_yellow"),
    LogLevel.INFO: dict(fg="blue"),
    LogLevel.DEBUG: dict(fg="blue"),
}
CLICK_ECHO_KWARGS = {
    LogLevel.ERROR: dict(err=True),
    LogLevel.WARNING: dict(err=True),
    LogLevel.INFO: dict(),
    LogLevel.DEBUG: dict(),
}


def _isatty(stream: IO) -> bool:
    """Returns ``True`` if the stream is part of a tty.
    Borrowed from ``click._compat``."""
    # noinspection PyBroadException
    try:
        return stream.isatty()
    except Exception:
        return False


class SimColorFormatter(logging.Formatter):
    def __init__(self, fmt: Optional[str] = None):
        fmt = fmt or DEFAULT_LOG_FORMAT
        super().__init__(fmt=fmt)

    def format(self, record):
        record.levelname_semicolon_padded = f"{record.levelname}:".ljust(8)
        if _isatty(sys.stdout) and _isatty(sys.stderr):
            # Only color log messages when sys.stdout and sys.stderr are sent to the terminal.
            default_dict: dict[str, Any] = {}
            styles: dict[str, Any] = CLICK_STYLE_KWARGS.get(record.levelno, default_dict)
            record.levelname = click.style(record.levelname, **styles)
            record.levelname_semicolon_padded = click.style(
                record.levelname_semicolon_padded, **styles
            )

        return super().format(record)


class ClickHandler(logging.Handler):
    def __init__(self, echo_kwargs: dict):
        super().__init__()
        self.echo_kwargs = echo_kwargs

    def emit(self, record):
        try:
            msg = self.format(record)
            # Levels outside ``LogLevel`` (e.g. CRITICAL) echo to stderr.
            echo_kwargs = self.echo_kwargs.get(record.levelno, dict(err=True))
            click.echo(msg, **echo_kwargs)
        except Exception:
            self.handleError(record)


class SimLogger:
    def __init__(self, _logger: logging.Logger):
        self.error = _logger.error
        self.warning = _logger.warning
        self.info = _logger.info
        self.debug = _logger.debug
        self._logger = _logger

    @classmethod
    def create(cls, name: str = "bundle_sim", fmt: Optional[str] = None) -> "SimLogger":
        _logger = get_logger(name, fmt=fmt)
        _logger.setLevel(DEFAULT_LOG_LEVEL)
        return cls(_logger)

    @property
    def level(self) -> int:
        return self._logger.level

    def set_level(self, level: Union[str, int, LogLevel]):
        """
        Change the log-level of the bundle-sim logger.

        Args:
            level (Union[str, int, LogLevel]): The name of the level or the
              value of the log-level.
        """
        if level == self._logger.level:
            return
        elif isinstance(level, LogLevel):
            level = level.value
        elif isinstance(level, str) and level.lower().startswith("loglevel."):
            # Seen in some environments.
            level = level.split(".")[-1].strip()

        self._logger.setLevel(level)

    @contextmanager
    def at_level(self, level: Union[str, int, LogLevel]) -> Iterator:
        """
        Change the log-level in a context.

        Args:
            level (Union[str, int, LogLevel]): The level to use.

        Returns:
            Iterator
        """
        initial_level = self.level
        self.set_level(level)
        try:
            yield
        finally:
            self.set_level(initial_level)


def _format_logger(_logger: logging.Logger, fmt: str):
    handler = ClickHandler(echo_kwargs=CLICK_ECHO_KWARGS)
    handler.setFormatter(SimColorFormatter(fmt=fmt))

    # Remove existing handler(s)
    for existing_handler in _logger.handlers[:]:
        if isinstance(existing_handler, ClickHandler):
            _logger.removeHandler(existing_handler)

    _logger.addHandler(handler)


def get_logger(name: str, fmt: Optional[str] = None) -> logging.Logger:
    """
    Get a logger with the given ``name`` and configure it for usage with bundle-sim.

    Args:
        name (str): The name of the logger.
        fmt (Optional[str]): The format of the logger. Defaults to
          ``"%(levelname_semicolon_padded)s %(message)s"``.

    Returns:
        ``logging.Logger``
    """
    _logger = logging.getLogger(name)
    _format_logger(_logger, fmt=fmt or DEFAULT_LOG_FORMAT)
    return _logger


def sanitize_url(url: str) -> str:
    """Removes sensitive information from given URL"""

    url_obj = URL(url)
    if not url_obj.is_absolute():
        # Not a URL we can take apart; nothing to hide.
        return url

    has_credentials = url_obj.user is not None or url_obj.password is not None
    url_obj = url_obj.with_user(None).with_password(None)

    # If there is a path, hide it but show that you are hiding it.
    # Use string interpolation to prevent URL-character encoding.
    if url_obj.path and url_obj.path != "/":
        return f"{url_obj.with_path('')}/{HIDDEN_MESSAGE}"

    return f"{url_obj}" if has_credentials else url


logger = SimLogger.create()


__all__ = ["DEFAULT_LOG_LEVEL", "logger", "LogLevel", "SimLogger", "get_logger", "sanitize_url"]
