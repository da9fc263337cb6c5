"""Tests for logging setup."""

import logging
from logging.handlers import RotatingFileHandler

from design_patterns.config.schemas import LoggingConfig
from design_patterns.infrastructure.logging.logger import (
    PACKAGE_LOGGER,
    get_logger,
    get_structured_logger,
    setup_logging,
)


class TestSetupLogging:
    """Test handler configuration per destination."""

    def test_stdout_destination_logs_to_stderr(self, capsys):
        """Test console logs never reach stdout."""
        setup_logging(LoggingConfig(level="INFO", destination="stdout"))

        get_logger("tests").info("hello from the logger")

        captured = capsys.readouterr()
        assert "hello from the logger" not in captured.out
        assert "hello from the logger" in captured.err

    def test_file_destination(self, tmp_path):
        """Test the rotating file handler writes the detailed format."""
        log_file = tmp_path / "logs" / "app.log"
        setup_logging(LoggingConfig(level="DEBUG", destination="file",
                                    file={"path": str(log_file), "backup_count": 2}))

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        handler = package_logger.handlers[0]
        assert isinstance(handler, RotatingFileHandler)
        assert handler.backupCount == 2

        get_logger("tests").warning("written to file")
        handler.flush()

        content = log_file.read_text()
        assert "WARNING - design_patterns.tests [" in content
        assert "written to file" in content

    def test_both_destinations(self, tmp_path):
        """Test file and console handlers together."""
        setup_logging(LoggingConfig(destination="both", file={"path": str(tmp_path / "a.log")}))

        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 2

    def test_none_destination(self):
        """Test a disabled destination installs a null handler."""
        setup_logging(LoggingConfig(destination="none"))

        handlers = logging.getLogger(PACKAGE_LOGGER).handlers
        assert len(handlers) == 1
        assert isinstance(handlers[0], logging.NullHandler)

    def test_repeated_setup_replaces_handlers(self):
        """Test handlers do not pile up across calls."""
        setup_logging(LoggingConfig(destination="stdout"))
        setup_logging(LoggingConfig(destination="stdout"))

        assert len(logging.getLogger(PACKAGE_LOGGER).handlers) == 1

    def test_level_and_propagation(self):
        """Test the package logger level follows the configuration."""
        setup_logging(LoggingConfig(level="error", destination="none"))

        package_logger = logging.getLogger(PACKAGE_LOGGER)
        assert package_logger.level == logging.ERROR
        assert package_logger.propagate is False


class TestGetLogger:
    """Test logger naming."""

    def test_names_are_nested_under_the_package(self):
        """Test foreign names are nested under the package logger."""
        assert get_logger("tests").name == "design_patterns.tests"
        assert get_logger("design_patterns.cli").name == "design_patterns.cli"
        assert get_logger(PACKAGE_LOGGER).name == PACKAGE_LOGGER

    def test_structured_logger_renders_key_values(self, caplog):
        """Test structured events are rendered as key=value pairs."""
        setup_logging(LoggingConfig(level="INFO", destination="none"))
        package_logger = logging.getLogger(PACKAGE_LOGGER)
        package_logger.addHandler(caplog.handler)
        try:
            get_structured_logger("tests").info("Example finished", pattern="Proxy")
        finally:
            package_logger.removeHandler(caplog.handler)

        message = caplog.records[-1].getMessage()
        assert message.startswith("event='Example finished'")
        assert "pattern='Proxy'" in message
        assert "level='info'" in message
