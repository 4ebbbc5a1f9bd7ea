"""Unit tests for console formatting and logging setup."""

import logging
import re
from collections.abc import Iterator

import pytest
from checksymlinks.utils.formatting import (
    PACKAGE_LOGGER,
    configure_logging,
    format_elapsed,
    print_error,
)
from rich.logging import RichHandler


class TestFormatElapsed:
    """Tests for format_elapsed."""

    @pytest.mark.parametrize(
        ("seconds", "expected"),
        [
            (0.0, "0us"),
            (0.000850, "850us"),
            (0.0123, "12.3ms"),
            (0.5, "500.0ms"),
            (1.519, "1.52s"),
            (59.0, "59.00s"),
            (123.4, "2m03s"),
        ],
    )
    def test_format(self, seconds: float, expected: str) -> None:
        """Durations are rendered with a unit matching their magnitude."""
        assert format_elapsed(seconds) == expected


class TestConfigureLogging:
    """Tests for configure_logging."""

    @pytest.fixture(autouse=True)
    def _reset_logger(self) -> Iterator[None]:
        """Remove handlers installed by a test."""
        logger = logging.getLogger(PACKAGE_LOGGER)
        saved_level = logger.level
        yield
        for handler in list(logger.handlers):
            if isinstance(handler, RichHandler):
                logger.removeHandler(handler)
        logger.setLevel(saved_level)

    def test_default_level_is_debug(self) -> None:
        """Without quiet every note is shown."""
        logger = configure_logging()

        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.DEBUG

    def test_quiet_hides_debug(self) -> None:
        """Quiet mode raises the level to INFO."""
        logger = configure_logging(quiet=True)

        assert logger.level == logging.INFO
        assert not logger.isEnabledFor(logging.DEBUG)
        assert logger.isEnabledFor(logging.WARNING)

    def test_repeated_calls_keep_one_handler(self) -> None:
        """Calling twice does not stack handlers."""
        configure_logging()
        logger = configure_logging()

        rich_handlers = [h for h in logger.handlers if isinstance(h, RichHandler)]
        assert len(rich_handlers) == 1

    def test_time_column_is_clock_time(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Log lines start with an [HH:MM:SS] time column and no date."""
        logger = configure_logging()

        logger.info("inspected links: 2")

        captured = capsys.readouterr()
        assert re.match(r"\[\d{2}:\d{2}:\d{2}\] ", captured.err)


class TestPrintHelpers:
    """Tests for message helpers."""

    def test_print_error_goes_to_stderr(self, capsys: pytest.CaptureFixture[str]) -> None:
        """Errors are printed to stderr with an Error prefix."""
        print_error("Path [x] does not exist")

        captured = capsys.readouterr()
        assert "Error:" in captured.err
        assert "Path [x] does not exist" in captured.err
        assert captured.out == ""

    def test_print_error_long_message_not_wrapped(
        self, capsys: pytest.CaptureFixture[str]
    ) -> None:
        """Long error messages stay on a single line."""
        path = "/tmp/" + "nested/" * 30 + "missing"

        print_error(f"Path {path} does not exist")

        captured = capsys.readouterr()
        assert f"Error: Path {path} does not exist" in captured.err
        assert captured.err.count("\n") == 1
