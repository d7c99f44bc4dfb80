"""setup_loggerのテスト"""

import logging

import pytest

from src.sticky_todo.logger import setup_logger


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    level = root.level
    yield root
    for handler in list(root.handlers):
        if type(handler) in (logging.FileHandler, logging.StreamHandler):
            root.removeHandler(handler)
            handler.close()
    root.setLevel(level)


def test_setup_logger_writes_file(tmp_path, restore_root_logger):
    """ファイルにはDEBUGも含めて出力される"""
    log_file = tmp_path / "logs" / "app.log"
    setup_logger(log_level="WARNING", log_file=str(log_file))

    logging.getLogger("src.todo_store.store").debug("debug line")
    for handler in restore_root_logger.handlers:
        handler.flush()

    text = log_file.read_text(encoding="utf-8")
    assert "src.todo_store.store - DEBUG - debug line" in text


def test_setup_logger_is_idempotent(tmp_path, restore_root_logger):
    """複数回呼んでもハンドラは重複しない"""
    log_file = tmp_path / "app.log"
    setup_logger(log_file=str(log_file))
    setup_logger(log_file=str(log_file))

    handler_types = [type(h) for h in restore_root_logger.handlers]
    assert handler_types.count(logging.FileHandler) == 1
    assert handler_types.count(logging.StreamHandler) == 1


def test_setup_logger_levels(tmp_path, restore_root_logger):
    setup_logger(log_level="error", log_file=str(tmp_path / "app.log"))

    console = next(h for h in restore_root_logger.handlers if type(h) is logging.StreamHandler)
    assert console.level == logging.ERROR
    assert logging.getLogger("uvicorn.access").level == logging.WARNING
