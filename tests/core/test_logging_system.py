"""Unit tests for the logging system with platform-aware paths and rotation."""

import logging
from pathlib import Path
from unittest.mock import patch

import pytest

from trimsheet.core.logging_system import (
    LoggingError,
    get_logger,
    get_platform_log_dir,
    initialize_logging,
    rotate_logs,
    shutdown_logging,
)
from trimsheet.core.resource_path import get_config_path


class TestPlatformLogDir:
    """Tests for get_platform_log_dir function."""

    def test_macos_log_dir(self) -> None:
        with patch("platform.system", return_value="Darwin"):
            assert get_platform_log_dir() == Path.home() / "Library" / "Logs" / "TrimSheet"

    def test_linux_log_dir(self) -> None:
        with patch("platform.system", return_value="Linux"):
            assert get_platform_log_dir() == Path.home() / ".trimsheet" / "logs"

    def test_windows_log_dir(self) -> None:
        """Test Windows log directory is under APPDATA."""
        with patch("platform.system", return_value="Windows"):
            with patch.dict("os.environ", {"APPDATA": "C:/Users/Test/AppData/Roaming"}):
                log_dir = get_platform_log_dir()
                assert log_dir == Path("C:/Users/Test/AppData/Roaming") / "TrimSheet" / "Logs"

    def test_unknown_platform_defaults_to_linux(self) -> None:
        with patch("platform.system", return_value="FreeBSD"):
            assert ".trimsheet" in str(get_platform_log_dir())


class TestLogRotation:
    """Tests for startup log rotation."""

    def test_no_existing_log_does_nothing(self, tmp_path: Path) -> None:
        rotate_logs(tmp_path, "trimsheet.log", 5)
        assert list(tmp_path.iterdir()) == []

    def test_current_log_becomes_first_backup(self, tmp_path: Path) -> None:
        (tmp_path / "trimsheet.log").write_text("run 3")
        (tmp_path / "trimsheet.log.1").write_text("run 2")
        (tmp_path / "trimsheet.log.2").write_text("run 1")

        rotate_logs(tmp_path, "trimsheet.log", 5)

        assert not (tmp_path / "trimsheet.log").exists()
        assert (tmp_path / "trimsheet.log.1").read_text() == "run 3"
        assert (tmp_path / "trimsheet.log.2").read_text() == "run 2"
        assert (tmp_path / "trimsheet.log.3").read_text() == "run 1"

    def test_oldest_backup_is_dropped(self, tmp_path: Path) -> None:
        """Test that nothing beyond keep_count survives."""
        (tmp_path / "trimsheet.log").write_text("current")
        (tmp_path / "trimsheet.log.1").write_text("old-1")
        (tmp_path / "trimsheet.log.2").write_text("old-2")

        rotate_logs(tmp_path, "trimsheet.log", keep_count=2)

        assert (tmp_path / "trimsheet.log.1").read_text() == "current"
        assert (tmp_path / "trimsheet.log.2").read_text() == "old-1"
        assert not (tmp_path / "trimsheet.log.3").exists()


class TestLoggingInitialization:
    """Tests for logging system initialization."""

    def test_defaults_write_to_platform_dir(self, log_dir: Path) -> None:
        initialize_logging(use_platform_dir=True)

        logger = get_logger("trimsheet.test")
        logger.info("Loaded 10 baselines")
        logger.debug("Not written at INFO")
        shutdown_logging()

        content = (log_dir / "trimsheet.log").read_text()
        assert "Loaded 10 baselines" in content
        assert "Not written at INFO" not in content

    def test_packaged_config_logs_debug(self, log_dir: Path) -> None:
        initialize_logging(get_config_path("logging.yaml"))

        get_logger("trimsheet.test").debug("Projected 12 points")
        shutdown_logging()

        assert "Projected 12 points" in (log_dir / "trimsheet.log").read_text()

    def test_missing_config_raises(self) -> None:
        with pytest.raises(LoggingError, match="Logging config file not found"):
            initialize_logging(config_path="/nonexistent/logging.yaml")

    def test_malformed_config_raises(self, tmp_path: Path) -> None:
        config = tmp_path / "logging.yaml"
        config.write_text("level: [unclosed")

        with pytest.raises(LoggingError, match="Failed to load logging config"):
            initialize_logging(config_path=config)

    def test_second_run_rotates_previous_log(self, log_dir: Path) -> None:
        initialize_logging(use_platform_dir=True)
        get_logger("trimsheet.test").warning("First run")
        shutdown_logging()

        initialize_logging(use_platform_dir=True)
        get_logger("trimsheet.test").warning("Second run")
        shutdown_logging()

        assert "First run" in (log_dir / "trimsheet.log.1").read_text()
        current = (log_dir / "trimsheet.log").read_text()
        assert "Second run" in current
        assert "First run" not in current


class TestGetLogger:
    """Tests for logger creation and per-component settings."""

    def test_returns_named_logger(self, log_dir: Path) -> None:
        initialize_logging(use_platform_dir=True)

        logger = get_logger("trimsheet.cli")
        assert isinstance(logger, logging.Logger)
        assert logger.name == "trimsheet.cli"

    def test_loggers_are_cached(self, log_dir: Path) -> None:
        initialize_logging(use_platform_dir=True)
        assert get_logger("trimsheet.cli") is get_logger("trimsheet.cli")

    def test_auto_initializes(self, log_dir: Path) -> None:
        """Test that the first get_logger call initializes logging."""
        logger = get_logger("trimsheet.auto")
        logger.warning("auto")
        shutdown_logging()

        assert (log_dir / "trimsheet.log").exists()

    def test_component_level_and_disable(self, tmp_path: Path, log_dir: Path) -> None:
        config = tmp_path / "logging.yaml"
        config.write_text(
            "level: DEBUG\n"
            "console: {enabled: false}\n"
            "components:\n"
            "  trimsheet.quiet: {level: ERROR}\n"
            "  trimsheet.off: {enabled: false}\n"
        )
        initialize_logging(config)

        assert get_logger("trimsheet.quiet").level == logging.ERROR
        assert get_logger("trimsheet.off").disabled

        shutdown_logging()
        assert logging.getLogger("trimsheet.quiet").level == logging.NOTSET
        assert not logging.getLogger("trimsheet.off").disabled

    def test_component_level_applies_to_module_logger(self, log_dir: Path) -> None:
        """Test that module loggers pick up component levels without get_logger."""
        initialize_logging(get_config_path("logging.yaml"))

        module_logger = logging.getLogger("trimsheet.reference.dry_operating")
        assert module_logger.getEffectiveLevel() == logging.INFO

        module_logger.debug("Skipping invalid dry-operating row")
        module_logger.info("Loaded 10 dry-operating baselines")
        shutdown_logging()

        content = (log_dir / "trimsheet.log").read_text()
        assert "Loaded 10 dry-operating baselines" in content
        assert "Skipping invalid dry-operating row" not in content
