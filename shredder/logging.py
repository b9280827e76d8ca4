"""femtologging helpers shared across the shredder.

Log calls go through these wrappers so every message is pre-formatted with
percent-style interpolation before it reaches femtologging, which accepts
only finished strings.

Example:
>>> from shredder.logging import get_logger, log_info
>>> logger = get_logger(__name__)
>>> log_info(logger, "Shredded %d pairs", 3)

"""

from __future__ import annotations

import enum
import typing as typ

from femtologging import basicConfig, get_logger


class LogLevel(enum.StrEnum):
    """Log levels femtologging understands."""

    TRACE = "TRACE"
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARN = "WARN"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


def normalize_log_level(level: str | None) -> tuple[str, bool]:
    """Normalize a raw level name, falling back to INFO.

    Parameters
    ----------
    level : str | None
        Raw log level, typically from ``SHREDDER_LOG_LEVEL``.

    Returns
    -------
    tuple[str, bool]
        The normalized level and whether the input had to be replaced.

    """
    if not level:
        return ("INFO", True)

    normalized = level.strip().upper()
    if normalized in LogLevel.__members__:
        return (normalized, False)

    return ("INFO", True)


def configure_logging(level: str | None, *, force: bool = False) -> tuple[str, bool]:
    """Configure femtologging at the normalized level.

    Parameters
    ----------
    level : str | None
        Raw log level to normalize.
    force : bool, optional
        Replace any handler configuration already installed.

    Returns
    -------
    tuple[str, bool]
        The level applied and whether the input was invalid.

    """
    normalized, invalid = normalize_log_level(level)
    basicConfig(level=normalized, force=force)
    return (normalized, invalid)


class _SupportsLog(typ.Protocol):
    """Anything with femtologging's ``log`` signature."""

    def log(
        self,
        level: str,
        message: str,
        /,
        *,
        exc_info: object | None = None,
        stack_info: bool = False,
    ) -> str | None: ...


def _emit(
    logger: _SupportsLog,
    level: str,
    template: str,
    args: tuple[object, ...],
    exc_info: object | None,
) -> None:
    logger.log(level, template % args, exc_info=exc_info, stack_info=False)


def log_debug(logger: _SupportsLog, template: str, *args: object) -> None:
    """Log a DEBUG message with percent-style formatting."""
    _emit(logger, "DEBUG", template, args, None)


def log_info(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log an INFO message with percent-style formatting."""
    _emit(logger, "INFO", template, args, exc_info)


def log_warning(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log a WARNING message with percent-style formatting."""
    _emit(logger, "WARNING", template, args, exc_info)


def log_error(
    logger: _SupportsLog,
    template: str,
    *args: object,
    exc_info: object | None = None,
) -> None:
    """Log an ERROR message with percent-style formatting.

    Parameters
    ----------
    logger : _SupportsLog
        Logger that receives the formatted message.
    template : str
        Message template using percent-style placeholders.
    *args : object
        Values to interpolate into the template.
    exc_info : object | None, optional
        Exception to attach to the record.

    """
    _emit(logger, "ERROR", template, args, exc_info)


__all__ = [
    "LogLevel",
    "configure_logging",
    "get_logger",
    "log_debug",
    "log_error",
    "log_info",
    "log_warning",
    "normalize_log_level",
]
