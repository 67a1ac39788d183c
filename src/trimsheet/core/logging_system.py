"""Logging setup for the TrimSheet command line and calculation components.

Configuration comes from a YAML file (or built-in defaults). Every run writes
a combined log in a platform-aware location, and the previous runs are kept
by rotating the file once at startup.

Platform-specific log locations:
    - macOS: ~/Library/Logs/TrimSheet/trimsheet.log
    - Linux: ~/.trimsheet/logs/trimsheet.log
    - Windows: %AppData%/TrimSheet/Logs/trimsheet.log

Typical usage example:
    from trimsheet.core.logging_system import get_logger, initialize_logging

    initialize_logging(get_config_path("logging.yaml"))
    log = get_logger("trimsheet.cli")
    log.info("Projected %d trim line points", len(points))
"""

import logging
import logging.handlers
import os
import platform
import time
from pathlib import Path
from typing import Any

import yaml

_logging_config: dict[str, Any] = {}
_loggers_cache: dict[str, logging.Logger] = {}
_component_loggers: set[str] = set()
_initialized = False

DEFAULT_LOG_FILENAME = "trimsheet.log"


class LoggingError(Exception):
    """Raised when logging system operations fail."""


def get_platform_log_dir() -> Path:
    """Get platform-specific log directory.

    Returns:
        Path to the platform-appropriate log directory:
        - macOS: ~/Library/Logs/TrimSheet
        - Linux: ~/.trimsheet/logs
        - Windows: %AppData%/TrimSheet/Logs
    """
    system = platform.system()

    if system == "Darwin":
        return Path.home() / "Library" / "Logs" / "TrimSheet"
    elif system == "Windows":
        appdata = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return appdata / "TrimSheet" / "Logs"
    else:
        return Path.home() / ".trimsheet" / "logs"


def rotate_logs(
    log_dir: Path, log_filename: str = DEFAULT_LOG_FILENAME, keep_count: int = 5
) -> None:
    """Rotate logs on startup, keeping the last N runs.

    The current log becomes ``<name>.1``, older logs shift up by one and
    anything beyond ``keep_count`` is deleted.

    Args:
        log_dir: Directory containing log files.
        log_filename: Base name of the log file.
        keep_count: Number of old logs to keep.
    """
    log_file = log_dir / log_filename

    if not log_file.exists():
        return

    oldest_log = log_dir / f"{log_filename}.{keep_count}"
    if oldest_log.exists():
        oldest_log.unlink()

    for i in range(keep_count - 1, 0, -1):
        old_log = log_dir / f"{log_filename}.{i}"
        if old_log.exists():
            old_log.rename(log_dir / f"{log_filename}.{i + 1}")

    log_file.rename(log_dir / f"{log_filename}.1")


def initialize_logging(
    config_path: str | Path | None = None, use_platform_dir: bool = True
) -> None:
    """Initialize the logging system from YAML configuration.

    Call once at startup, before any logging occurs.

    Args:
        config_path: Path to a logging configuration YAML file. If None, the
            built-in defaults are used.
        use_platform_dir: If True, write logs to the platform log directory.
            If False, use ``log_dir`` from the configuration.

    Raises:
        LoggingError: If the configuration file is missing or unreadable.
    """
    global _logging_config, _initialized

    if config_path:
        config_path = Path(config_path)
        if not config_path.exists():
            raise LoggingError(f"Logging config file not found: {config_path}")

        try:
            with config_path.open("r", encoding="utf-8") as f:
                _logging_config = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise LoggingError(f"Failed to load logging config: {e}") from e
    else:
        _logging_config = _get_default_config()

    if use_platform_dir:
        _logging_config["log_dir"] = str(get_platform_log_dir())

    log_dir = Path(_logging_config.get("log_dir", "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)

    combined = _logging_config.get("combined_log", {})
    rotate_logs(
        log_dir,
        combined.get("filename", DEFAULT_LOG_FILENAME),
        combined.get("backup_count", 5),
    )

    _loggers_cache.clear()
    _reset_component_loggers()
    _configure_root_logger()
    _configure_component_loggers()

    _initialized = True


def _get_default_config() -> dict[str, Any]:
    """Get default logging configuration."""
    return {
        "version": 1,
        "level": "INFO",
        "format": "%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        "date_format": "%Y-%m-%d %H:%M:%S",
        "log_dir": "logs",
        "combined_log": {
            "enabled": True,
            "filename": DEFAULT_LOG_FILENAME,
            "backup_count": 5,
        },
        "console": {
            "enabled": True,
            "level": "WARNING",
        },
        "components": {},
    }


def _configure_root_logger() -> None:
    """Configure the root logger with console and file handlers."""
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)  # filtering happens in the handlers
    root_logger.handlers.clear()

    console_config = _logging_config.get("console", {})
    if console_config.get("enabled", True):
        console_handler = logging.StreamHandler()
        console_handler.setLevel(getattr(logging, console_config.get("level", "WARNING")))
        console_handler.setFormatter(_get_formatter())
        root_logger.addHandler(console_handler)

    combined_config = _logging_config.get("combined_log", {})
    if combined_config.get("enabled", True):
        log_dir = Path(_logging_config.get("log_dir", "logs"))
        log_file = log_dir / combined_config.get("filename", DEFAULT_LOG_FILENAME)

        # Rotation already happened at startup, so always start a fresh file
        file_handler = logging.FileHandler(log_file, mode="w", encoding="utf-8")
        file_handler.setLevel(getattr(logging, _logging_config.get("level", "INFO")))
        file_handler.setFormatter(_get_formatter())
        root_logger.addHandler(file_handler)


class MillisecondFormatter(logging.Formatter):
    """Formatter that appends milliseconds with a dot separator."""

    def formatTime(self, record, datefmt=None):
        ct = self.converter(record.created)
        s = time.strftime(datefmt or "%Y-%m-%d %H:%M:%S", ct)
        return f"{s}.{int(record.msecs):03d}"


def _get_formatter() -> logging.Formatter:
    fmt = _logging_config.get("format", "%(asctime)s - %(name)s - %(levelname)s - %(message)s")
    datefmt = _logging_config.get("date_format", "%Y-%m-%d %H:%M:%S")
    return MillisecondFormatter(fmt, datefmt)


def _configure_component_loggers() -> None:
    """Apply the ``components`` section to the named module loggers.

    Library modules log through ``logging.getLogger(__name__)``, so levels
    are set on those loggers directly.
    """
    for name, component_config in (_logging_config.get("components") or {}).items():
        logger = logging.getLogger(name)
        component_config = component_config or {}

        if component_config.get("enabled", True):
            logger.disabled = False
            if "level" in component_config:
                logger.setLevel(getattr(logging, component_config["level"]))
        else:
            logger.disabled = True

        _component_loggers.add(name)


def _reset_component_loggers() -> None:
    for name in _component_loggers:
        logger = logging.getLogger(name)
        logger.setLevel(logging.NOTSET)
        logger.disabled = False
    _component_loggers.clear()


def get_logger(name: str) -> logging.Logger:
    """Get a logger for a component.

    Loggers are cached. A component can be given its own level, or switched
    off, under the ``components`` section of the logging YAML; that applies
    to module loggers from ``logging.getLogger(__name__)`` as well.

    Args:
        name: Logger name (usually a dotted module or component name).

    Returns:
        Configured logger instance.

    Examples:
        >>> log = get_logger("trimsheet.cli")
        >>> log.info("Loaded %d baselines", count)
    """
    if not _initialized:
        initialize_logging()

    if name not in _loggers_cache:
        _loggers_cache[name] = logging.getLogger(name)
    return _loggers_cache[name]


def shutdown_logging() -> None:
    """Flush and close all handlers. Call at application shutdown."""
    global _initialized

    logging.shutdown()
    logging.getLogger().handlers.clear()
    _reset_component_loggers()
    _loggers_cache.clear()
    _initialized = False
