"""
Tests for the logging helpers.

MIT License
"""

import logging

import pytest
from sincdelay import InvalidArgument, MultiTapSincDelay
from sincdelay.logger import (
    PACKAGE_LOGGER,
    get_logger,
    reset_logging,
    resolve_level,
    set_global_logging,
)


def _owned_handlers(logger):
    return [h for h in logger.handlers if not isinstance(h, logging.NullHandler)]


class TestGetLogger:
    def test_default_is_package_logger(self):
        assert get_logger().name == PACKAGE_LOGGER
        assert get_logger(PACKAGE_LOGGER).name == PACKAGE_LOGGER

    def test_module_names_kept(self):
        assert get_logger("sincdelay.sweep").name == "sincdelay.sweep"

    def test_foreign_names_nested_under_package(self):
        logger = get_logger("benchmarks")
        assert logger.name == "sincdelay.benchmarks"
        assert logger.parent is logging.getLogger(PACKAGE_LOGGER)

    def test_similar_prefix_is_not_a_child(self):
        assert get_logger("sincdelayx").name == "sincdelay.sincdelayx"

    def test_library_installs_null_handler(self):
        handlers = logging.getLogger(PACKAGE_LOGGER).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)


class TestResolveLevel:
    def test_names(self):
        assert resolve_level("DEBUG") == logging.DEBUG
        assert resolve_level("warning") == logging.WARNING
        assert resolve_level(" info ") == logging.INFO

    def test_numbers(self):
        assert resolve_level(logging.ERROR) == logging.ERROR
        assert resolve_level(5) == 5

    def test_unknown_name_rejected(self):
        with pytest.raises(InvalidArgument):
            resolve_level("LOUD")

    def test_wrong_type_rejected(self):
        with pytest.raises(InvalidArgument):
            resolve_level(None)
        with pytest.raises(InvalidArgument):
            resolve_level(True)


class TestSetGlobalLogging:
    def test_returns_package_logger_at_level(self):
        logger = set_global_logging(level="DEBUG")
        assert logger.name == PACKAGE_LOGGER
        assert logger.level == logging.DEBUG

    def test_accepts_numeric_level(self):
        assert set_global_logging(level=logging.WARNING).level == logging.WARNING

    def test_repeat_calls_do_not_stack_handlers(self):
        logger = set_global_logging()
        set_global_logging()
        set_global_logging(level="ERROR")
        assert len(_owned_handlers(logger)) == 1

    def test_root_logger_untouched(self):
        root_handlers = list(logging.getLogger().handlers)
        set_global_logging(level="DEBUG")
        assert logging.getLogger().handlers == root_handlers

    def test_writes_to_stdout(self, capsys):
        set_global_logging(level="INFO", format_string="%(name)s: %(message)s")
        get_logger("sincdelay.sweep").info("hello")
        assert "sincdelay.sweep: hello" in capsys.readouterr().out

    def test_log_file(self, tmp_path):
        path = tmp_path / "sincdelay.log"
        logger = set_global_logging(level="DEBUG", log_file=str(path))
        MultiTapSincDelay(64).set_k(3)
        for handler in logger.handlers:
            handler.flush()
        assert "K set to 3 (8 taps)" in path.read_text()

    def test_bad_level_rejected_before_changes(self):
        logger = set_global_logging(level="INFO")
        with pytest.raises(InvalidArgument):
            set_global_logging(level="LOUD")
        assert logger.level == logging.INFO
        assert len(_owned_handlers(logger)) == 1


class TestResetLogging:
    def test_removes_installed_handlers(self):
        set_global_logging(level="DEBUG")
        logger = reset_logging()
        assert _owned_handlers(logger) == []
        assert logger.level == logging.NOTSET

    def test_keeps_null_handler(self):
        set_global_logging()
        reset_logging()
        handlers = logging.getLogger(PACKAGE_LOGGER).handlers
        assert any(isinstance(h, logging.NullHandler) for h in handlers)

    def test_setter_debug_records_reach_caplog(self, caplog):
        with caplog.at_level(logging.DEBUG, logger=PACKAGE_LOGGER):
            delay = MultiTapSincDelay(64)
            with pytest.raises(InvalidArgument):
                delay.set_k(-2)
        assert "rejected K=-2" in caplog.text
