"""
Pong Logging

Module-scoped loggers with per-module levels, configured from the
environment or programmatically.

Usage:
    from pong.logging import get_logger

    log = get_logger('world')
    log.debug("Tick %.1f", dt)
    log.info("Game started")

Configuration:
    Environment variables:
        PONG_LOG_LEVEL=DEBUG        # Global default level
        PONG_LOG_BALL=TRACE         # Module-specific level
        PONG_LOG_AUDIO=WARNING

    Or programmatically:
        from pong.logging import configure_logging
        configure_logging(level='DEBUG', modules={'audio': 'INFO'})
"""

import os
from enum import IntEnum
from functools import lru_cache
from typing import Any, Dict, Optional


class LogLevel(IntEnum):
    """Log levels matching Python's logging module."""
    TRACE = 5      # Per-tick detail
    DEBUG = 10
    INFO = 20
    WARNING = 30
    ERROR = 40
    CRITICAL = 50
    OFF = 100      # Disable logging


_config: Dict[str, Any] = {
    'default_level': LogLevel.INFO,
    'module_levels': {},
}

_RESERVED_ENV = ('PONG_LOG_LEVEL',)


def _format_message(module: str, level: str, msg: str) -> str:
    """Format a log message."""
    return f"[{module}] {level}: {msg}"


def _level_from_string(level_str: str) -> LogLevel:
    """Convert string to LogLevel, INFO when unrecognised."""
    mapping = {
        'TRACE': LogLevel.TRACE,
        'DEBUG': LogLevel.DEBUG,
        'INFO': LogLevel.INFO,
        'WARNING': LogLevel.WARNING,
        'WARN': LogLevel.WARNING,
        'ERROR': LogLevel.ERROR,
        'CRITICAL': LogLevel.CRITICAL,
        'OFF': LogLevel.OFF,
    }
    return mapping.get(level_str.upper(), LogLevel.INFO)


def configure_logging(
    level: str = 'INFO',
    modules: Optional[Dict[str, str]] = None,
) -> None:
    """
    Configure the logging system.

    Args:
        level: Default log level for all modules
        modules: Dict of module_name -> level for per-module configuration
    """
    _config['default_level'] = _level_from_string(level)

    if modules:
        for mod, mod_level in modules.items():
            _config['module_levels'][mod.lower()] = _level_from_string(mod_level)


def _load_env_config() -> None:
    """Load levels from PONG_LOG_* environment variables.

    PONG_LOG_LEVEL sets the default; PONG_LOG_<MODULE> sets one module
    (PONG_LOG_BALL=DEBUG -> ball: DEBUG).
    """
    if 'PONG_LOG_LEVEL' in os.environ:
        _config['default_level'] = _level_from_string(os.environ['PONG_LOG_LEVEL'])

    for key, value in os.environ.items():
        if key.startswith('PONG_LOG_') and key not in _RESERVED_ENV:
            module_name = key[len('PONG_LOG_'):].lower()
            _config['module_levels'][module_name] = _level_from_string(value)


# Load env config on import
_load_env_config()


class PongLogger:
    """
    Logger for a specific module.

    Messages at or above the module's effective level are printed to
    stdout as ``[module] LEVEL: message``.
    """

    def __init__(self, module: str):
        self.module = module
        self._module_key = module.lower().replace('.', '_').replace('/', '_')

    @property
    def level(self) -> LogLevel:
        """Get effective log level for this module."""
        if self._module_key in _config['module_levels']:
            return _config['module_levels'][self._module_key]
        return _config['default_level']

    def is_enabled_for(self, level: LogLevel) -> bool:
        """Check if a message at the given level would be emitted."""
        return level >= self.level

    def _log(self, level: LogLevel, level_name: str, msg: str, *args) -> None:
        if not self.is_enabled_for(level):
            return

        if args:
            try:
                msg = msg % args
            except (TypeError, ValueError):
                msg = f"{msg} {args}"

        print(_format_message(self.module, level_name, msg))

    def trace(self, msg: str, *args) -> None:
        """Log at TRACE level (very verbose)."""
        self._log(LogLevel.TRACE, 'TRACE', msg, *args)

    def debug(self, msg: str, *args) -> None:
        """Log at DEBUG level."""
        self._log(LogLevel.DEBUG, 'DEBUG', msg, *args)

    def info(self, msg: str, *args) -> None:
        """Log at INFO level."""
        self._log(LogLevel.INFO, 'INFO', msg, *args)

    def warning(self, msg: str, *args) -> None:
        """Log at WARNING level."""
        self._log(LogLevel.WARNING, 'WARN', msg, *args)

    def error(self, msg: str, *args) -> None:
        """Log at ERROR level."""
        self._log(LogLevel.ERROR, 'ERROR', msg, *args)


@lru_cache(maxsize=64)
def get_logger(module: str) -> PongLogger:
    """
    Get a logger for the specified module.

    Loggers are cached, so calling get_logger('foo') multiple times
    returns the same logger instance.

    Args:
        module: Module name (e.g., 'world', 'ball', 'audio')

    Returns:
        PongLogger instance for the module
    """
    return PongLogger(module)
