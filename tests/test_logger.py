import importlib
import logging

from py_vecmath.logger import logger, enable_file_logging, disable_file_logging

# the package re-exports the logger object under the module name
logger_module = importlib.import_module("py_vecmath.logger")


class TestFileLogging:

    def test_enable_and_disable(self, tmp_path):
        log_file = tmp_path / "vecmath.log"
        enable_file_logging(str(log_file))
        try:
            assert logger_module.file_handler is not None
            assert logger_module.file_handler in logger.handlers
            logger.debug("written to the log file")
        finally:
            disable_file_logging()
        assert logger_module.file_handler is None
        assert "written to the log file" in log_file.read_text()

    def test_enable_replaces_existing_handler(self, tmp_path):
        enable_file_logging(str(tmp_path / "first.log"))
        first = logger_module.file_handler
        enable_file_logging(str(tmp_path / "second.log"))
        try:
            assert first not in logger.handlers
            assert sum(isinstance(h, logging.FileHandler) for h in logger.handlers) == 1
        finally:
            disable_file_logging()

    def test_disable_without_handler(self):
        disable_file_logging()
        disable_file_logging()
        assert logger_module.file_handler is None
