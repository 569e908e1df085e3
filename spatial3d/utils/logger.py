# spatial3d/utils/logger.py
"""Single-source Loguru setup: callable console/file sinks, lazy configuration."""

from __future__ import annotations

import inspect
import sys
from contextlib import contextmanager
from datetime import datetime
from pathlib import Path
from typing import Iterator, Optional, TextIO

from loguru import logger as _root_logger
from loguru._logger import Logger as LoguruLogger

from spatial3d.config import LOG_FILE_PREFIX, get_settings

_CONFIGURED = False
_LOGGER: Optional[LoguruLogger] = None
_LOG_FILE: Optional[Path] = None
_FILE_HANDLE: Optional[TextIO] = None
_HANDLER_IDS: list[int] = []
# extra key marking records that went through get_logger()
_OWN_KEY = "spatial3d"


# ---------- sinks as callables ----------
def _console_sink(msg) -> None:
    r = msg.record
    module = r["extra"].get("module", r.get("name", "unknown"))
    # one record == one line
    sys.stderr.write(
        f"{r['time']:%H:%M:%S} | {r['level'].name: <3.3} | {module} | {r['message']}\n"
    )


def _make_file_sink(fh: TextIO):
    def _file_sink(msg) -> None:
        r = msg.record
        module = r["extra"].get("module", r.get("name", "unknown"))
        fh.write(
            f"{r['time'].isoformat()} | {r['level'].name} | {module} | {r['message']}\n"
        )
        fh.flush()

    return _file_sink


def _close_file_handle() -> None:
    global _FILE_HANDLE
    if _FILE_HANDLE is not None:
        _FILE_HANDLE.close()
        _FILE_HANDLE = None


def _own_records(record) -> bool:
    return record["extra"].get(_OWN_KEY, False)


def _remove_own_handlers() -> None:
    while _HANDLER_IDS:
        handler_id = _HANDLER_IDS.pop()
        try:
            _root_logger.remove(handler_id)
        except ValueError:
            # the host application already removed it
            continue


def _configure_logger(level: str | None = None, log_dir: Path | None = None) -> None:
    global _CONFIGURED, _LOGGER, _LOG_FILE, _FILE_HANDLE

    settings = get_settings().logging
    level = (level or settings.level.value).upper()
    log_dir = log_dir if log_dir is not None else settings.log_dir

    # only our own sinks are replaced; handlers added by the host stay
    _remove_own_handlers()
    _close_file_handle()

    def _inject_extras(record):
        record["extra"].setdefault("module", record.get("name", "unknown"))
        return record

    logger = _root_logger.patch(_inject_extras)
    _HANDLER_IDS.append(
        logger.add(_console_sink, level=level, filter=_own_records, catch=True)
    )

    _LOG_FILE = None
    if log_dir is not None:
        log_dir.mkdir(parents=True, exist_ok=True)
        timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")
        _LOG_FILE = log_dir / f"{LOG_FILE_PREFIX}_{timestamp}.log"
        _FILE_HANDLE = _LOG_FILE.open("a", encoding="utf-8")
        _HANDLER_IDS.append(
            logger.add(
                _make_file_sink(_FILE_HANDLE), level=level, filter=_own_records, catch=True
            )
        )

    _LOGGER = logger
    _CONFIGURED = True


def get_logger(name: str | None = None) -> LoguruLogger:
    if not _CONFIGURED:
        _configure_logger()

    # resolve the caller's module name when none is given
    module_name = name
    frame = inspect.currentframe()
    if module_name is None and frame is not None:
        caller_frame = frame.f_back
        if caller_frame is not None:
            module = inspect.getmodule(caller_frame)
            if module is not None and module.__name__ != "__main__":
                module_name = module.__name__

    if _LOGGER is None:
        raise RuntimeError("spatial3d logger is not configured")
    return _LOGGER.bind(module=module_name or "unknown", **{_OWN_KEY: True})


def configure(level: str | None = None, log_dir: Path | None = None) -> None:
    _configure_logger(level=level, log_dir=log_dir)


def log_file() -> Optional[Path]:
    """Path of the active file sink, if any."""
    return _LOG_FILE


@contextmanager
def logging_context(
    *, level: str | None = None, log_dir: Path | None = None
) -> Iterator[LoguruLogger]:
    configure(level=level, log_dir=log_dir)
    try:
        yield get_logger()
    finally:
        configure()


__all__ = ["get_logger", "configure", "log_file", "logging_context"]
