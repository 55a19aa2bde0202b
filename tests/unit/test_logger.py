import logging

import pytest

from pdftext.logging.logger import Log


class TestLogConfigure:
    def test_sets_level_case_insensitively(self, pdftext_logger: logging.Logger) -> None:
        Log.configure("debug")
        assert pdftext_logger.level == logging.DEBUG

    def test_adds_single_stdout_handler(self, pdftext_logger: logging.Logger) -> None:
        Log.configure("INFO")
        Log.configure("WARNING")
        assert len(pdftext_logger.handlers) == 1
        assert isinstance(pdftext_logger.handlers[0], logging.StreamHandler)
        assert pdftext_logger.level == logging.WARNING


class TestLogMessages:
    def test_forwards_messages_to_logger(
        self, pdftext_logger: logging.Logger, caplog: pytest.LogCaptureFixture
    ) -> None:
        caplog.set_level(logging.DEBUG, logger="pdftext")
        Log.debug("debug message")
        Log.info("info message")
        Log.warning("warning message")
        Log.error("error message", page_number=3)

        levels = [(r.levelno, r.getMessage()) for r in caplog.records]
        assert levels == [
            (logging.DEBUG, "debug message"),
            (logging.INFO, "info message"),
            (logging.WARNING, "warning message"),
            (logging.ERROR, "error message"),
        ]
        assert caplog.records[-1].page_number == 3
