"""Logging for the circulation CLI and API server.

Every `circulation` invocation installs the same root setup:

* a Rich console handler on stderr whose level follows ``-v``/``-q``;
* optionally, a "flight recorder": a `MemoryHandler` that keeps the most
  recent records at DEBUG and writes them to a file once a WARNING arrives
  (a rejected hold, an unhandled API error) or, if asked, on exit.

The root logger itself stays at DEBUG and the handlers do the filtering, so
``-L name=LEVEL`` can quieten noisy libraries such as SQLAlchemy or uvicorn
without hiding the desk's own messages.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from collections.abc import Mapping
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import alembic
import fastapi
import sqlalchemy
import uvicorn
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Handler, Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "circulation"
DEFAULT_CONSOLE_LEVEL = logging.WARNING
LEVEL_STEP = 10

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]


def console_level(verbose_count: int = 0, quiet_count: int = 0) -> int:
    """Turn ``-v``/``-q`` repetitions into a console level.

    Each ``-v`` lowers the WARNING default by one level and each ``-q`` raises
    it, clamped to DEBUG..CRITICAL.
    """
    level = DEFAULT_CONSOLE_LEVEL + LEVEL_STEP * (quiet_count - verbose_count)
    return max(logging.DEBUG, min(logging.CRITICAL, level))


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from outside the project with ``[library]``.

    Sets `record.prefix` for the console format; never drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            # "uvicorn.access" -> "[uvicorn]"
            record.prefix = f"[{record.name.partition('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Build the stderr console handler.

    Args:
        level: Minimum level shown. Ignored in debug mode, which shows DEBUG.
        debug_mode: Show timestamps, logger names and source locations
            instead of the short third-party prefix.
        color: Follows click-extra's ``--color/--no-color``.
    """
    color_system: ColorSystem | None = "auto" if color else None
    handler = RichHandler(
        level=logging.DEBUG if debug_mode else level,
        console=Console(color_system=color_system, stderr=True),
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    if debug_mode:
        handler.setFormatter(logging.Formatter(DEBUG_CONSOLE_FORMAT))
    else:
        handler.setFormatter(logging.Formatter(CONSOLE_FORMAT))
        handler.addFilter(ThirdPartyPrefixFilter())
    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Build the in-memory flight recorder.

    The target file is opened lazily, so a run that never flushes leaves no
    file behind.

    Args:
        path: File the buffered records are written to (truncated per run).
        capacity: Number of records kept in memory.
        flush_level: Records at or above this level trigger a flush.
        flush_on_close: Also flush when logging shuts down.
    """
    target = logging.FileHandler(path, mode="w", encoding="utf-8", delay=True)
    target.setLevel(logging.DEBUG)
    target.setFormatter(logging.Formatter(RECORDER_FORMAT))
    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=target,
        flushOnClose=flush_on_close,
    )


def configure_logging(
    handlers: list[Handler], logger_levels: Mapping[str, int]
) -> None:
    """Install `handlers` on the root logger and apply per-logger minimums.

    Replaces any handlers a previous invocation installed, which matters when
    the CLI is run repeatedly in one process (tests).
    """
    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)
    for name, level in logger_levels.items():
        logging.getLogger(name).setLevel(level)


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[Handler],
    log_path: Path | None,
    flight_recorder: bool,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: Mapping[str, int],
) -> None:
    """Log a one-line summary at INFO and the runtime environment at DEBUG.

    Args:
        logger: Where to log.
        app_version: The circulation version.
        level: Effective console level.
        handlers: Handlers installed on the root logger.
        log_path: Flight recorder file, if any.
        flight_recorder: Whether the flight recorder is on.
        flight_capacity: Flight recorder capacity, if it is on.
        force_flush_fr: Whether the flight recorder flushes on exit.
        logger_levels: Per-logger minimum levels.
    """
    logger.info(
        "circulation %s (console=%s, flight-recorder=%s)",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug(
        "Python %s on %s %s (pid %s, cwd %s)",
        sys.version.split()[0],
        platform.system(),
        platform.release(),
        os.getpid(),
        Path.cwd(),
    )
    logger.debug(
        "SQLAlchemy %s, Alembic %s, FastAPI %s, uvicorn %s",
        sqlalchemy.__version__,
        alembic.__version__,
        fastapi.__version__,
        uvicorn.__version__,
    )
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            log_path if log_path else "<none>",
            flight_capacity,
            force_flush_fr,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()},
    )
