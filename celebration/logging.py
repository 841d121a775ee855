"""
Celebration logging.

Console output for the page games, one line per message:

    [heartcatch] INFO: session started (was idle)

Each module gets a level from CELEBRATION_LOG_<MODULE>, falling back to
CELEBRATION_LOG_LEVEL (default INFO). Levels can also be set from code:

    from celebration.logging import configure_logging
    configure_logging(level='DEBUG', modules={'scheduler': 'INFO'})

Session transitions are additionally recorded as structured JSON lines
through a sink registered per module. Recording is off unless enabled:

    CELEBRATION_LOGGING_HEARTCATCH_ENABLED=true
    CELEBRATION_LOGGING_HEARTCATCH_DIR=/tmp/heartcatch   # optional
    CELEBRATION_LOG_DIR=~/logs                           # default for all modules
"""

import json
import os
import time
import traceback
from abc import ABC, abstractmethod
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Any, Dict, IO, Optional


class LogLevel(IntEnum):
    """Console levels; values line up with the stdlib logging module."""
    TRACE = 5
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    OFF = 100


# Label printed for each level
_LABELS = {
    LogLevel.TRACE: 'TRACE',
    LogLevel.DEBUG: 'DEBUG',
    LogLevel.INFO: 'INFO',
    LogLevel.WARNING: 'WARN',
    LogLevel.ERROR: 'ERROR',
}

_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},     # module key -> LogLevel
    'log_dir': None,
    'modules': {},           # module key -> {'enabled': bool, 'dir': str, ...}
}


def _parse_level(name: str) -> LogLevel:
    name = name.strip().upper()
    if name == 'WARN':
        name = 'WARNING'
    return LogLevel.__members__.get(name, LogLevel.INFO)


def _parse_setting(value: str) -> Any:
    lowered = value.strip().lower()
    if lowered in ('true', '1', 'yes', 'on'):
        return True
    if lowered in ('false', '0', 'no', 'off'):
        return False
    return value


def _module_key(module: str) -> str:
    return module.lower().replace('.', '_')


# =============================================================================
# Structured records
# =============================================================================

class LogSink(ABC):
    """Destination for structured records."""

    @abstractmethod
    def emit(self, module: str, record: Dict[str, Any]) -> None:
        """Write one JSON-serializable record for a module."""

    @abstractmethod
    def close(self) -> None:
        """Release any open resources."""


class NullSink(LogSink):
    """Accepts records and drops them."""

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        pass

    def close(self) -> None:
        pass


class FileSink(LogSink):
    """
    JSON Lines files, one per module per session.

    The first line of each file is a header and close() appends a footer,
    so a truncated file is easy to spot.

    Args:
        log_dir: Output directory (created on first write); defaults to the
            configured log directory
        session_name: File name prefix; defaults to the start timestamp
    """

    def __init__(self, log_dir: Optional[str] = None, session_name: Optional[str] = None):
        self._dir = Path(log_dir).expanduser() if log_dir else default_log_dir()
        self._session = session_name or time.strftime("%Y%m%d_%H%M%S")
        self._handles: Dict[str, IO[str]] = {}

    def _path(self, module: str) -> Path:
        return self._dir / f"{self._session}_{module}.jsonl"

    def _write(self, handle: IO[str], record: Dict[str, Any]) -> None:
        handle.write(json.dumps(record) + "\n")

    def emit(self, module: str, record: Dict[str, Any]) -> None:
        handle = self._handles.get(module)
        if handle is None:
            self._dir.mkdir(parents=True, exist_ok=True)
            handle = open(self._path(module), 'a', encoding='utf-8')
            self._handles[module] = handle
            self._write(handle, {
                'type': 'header',
                'module': module,
                'session_name': self._session,
                'start_time': time.time(),
            })
        self._write(handle, {'wall_time': time.time(), **record})

    def close(self) -> None:
        for module, handle in self._handles.items():
            self._write(handle, {'type': 'footer', 'module': module, 'end_time': time.time()})
            handle.close()
        self._handles.clear()

    @property
    def log_paths(self) -> Dict[str, Path]:
        """Files written so far, by module."""
        return {module: self._path(module) for module in self._handles}


_sinks: Dict[str, LogSink] = {}


def default_log_dir() -> Path:
    """configure_logging(log_dir=...), then CELEBRATION_LOG_DIR, then ~/.celebration/logs."""
    configured = _config['log_dir'] or os.environ.get('CELEBRATION_LOG_DIR')
    if configured:
        return Path(configured).expanduser()
    return Path.home() / '.celebration' / 'logs'


def register_sink(module: str, sink: LogSink) -> None:
    """Route a module's structured records to sink."""
    _sinks[module] = sink


def emit_record(module: str, record: Dict[str, Any]) -> bool:
    """
    Send a structured record to the module's sink.

    Returns:
        False if no sink is registered for the module
    """
    sink = _sinks.get(module)
    if sink is None:
        return False
    sink.emit(module, record)
    return True


def close_all_sinks() -> None:
    """Close and unregister every sink."""
    for sink in _sinks.values():
        sink.close()
    _sinks.clear()


def create_sink_for_environment(module: str, session_name: Optional[str] = None) -> LogSink:
    """FileSink if recording is enabled for the module, NullSink otherwise."""
    settings = _config['modules'].get(_module_key(module), {})
    if not settings.get('enabled', False):
        return NullSink()
    return FileSink(log_dir=settings.get('dir'), session_name=session_name)


# =============================================================================
# Configuration
# =============================================================================

def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
    log_dir: Optional[str] = None,
) -> None:
    """
    Set console levels from code.

    Args:
        level: Default level for modules without their own
        modules: module name -> level overrides
        log_dir: Default FileSink directory
    """
    _config['default_level'] = _parse_level(level)
    for module, module_level in (modules or {}).items():
        _config['module_levels'][_module_key(module)] = _parse_level(module_level)
    if log_dir is not None:
        _config['log_dir'] = log_dir


def _load_env_config() -> None:
    for key, value in os.environ.items():
        if key == 'CELEBRATION_LOG_LEVEL':
            _config['default_level'] = _parse_level(value)
        elif key == 'CELEBRATION_LOG_DIR':
            continue
        elif key.startswith('CELEBRATION_LOG_'):
            module = key[len('CELEBRATION_LOG_'):].lower()
            _config['module_levels'][module] = _parse_level(value)
        elif key.startswith('CELEBRATION_LOGGING_'):
            module, _, setting = key[len('CELEBRATION_LOGGING_'):].lower().partition('_')
            if module and setting:
                _config['modules'].setdefault(module, {})[setting] = _parse_setting(value)


_load_env_config()


# =============================================================================
# Console loggers
# =============================================================================

class CelebrationLogger:
    """Printf-style console logger for one module."""

    def __init__(self, module: str):
        self.module = module
        self._key = _module_key(module)

    @property
    def level(self) -> LogLevel:
        return _config['module_levels'].get(self._key, _config['default_level'])

    def _log(self, level: LogLevel, msg: str, *args, label: Optional[str] = None) -> None:
        if level < self.level:
            return
        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"
        print(f"[{self.module}] {label or _LABELS[level]}: {msg}")

    def trace(self, msg: str, *args) -> None:
        self._log(LogLevel.TRACE, msg, *args)

    def debug(self, msg: str, *args) -> None:
        self._log(LogLevel.DEBUG, msg, *args)

    def info(self, msg: str, *args) -> None:
        self._log(LogLevel.INFO, msg, *args)

    def warning(self, msg: str, *args) -> None:
        self._log(LogLevel.WARNING, msg, *args)

    def exception(self, msg: str, *args) -> None:
        """Log at ERROR, followed by the traceback of the exception being handled."""
        self._log(LogLevel.ERROR, msg, *args)
        tb = traceback.format_exc().strip()
        if tb and tb != 'NoneType: None':
            for line in tb.splitlines():
                self._log(LogLevel.ERROR, line, label='TRACE')


@lru_cache(maxsize=64)
def get_logger(module: str) -> CelebrationLogger:
    """Cached logger for a module name such as 'heartcatch' or 'heartcatch.registry'."""
    return CelebrationLogger(module)
