import logging

from config.logging_config import setup_logging


def test_setup_logging_writes_to_log_file(tmp_path):
    log_file = tmp_path / "logs" / "processing.log"
    try:
        setup_logging("INFO", log_file=log_file)
        logging.getLogger("src.processors").info("batch started")
        logging.getLogger("src.processors").debug("not at this level")
        for handler in logging.getLogger("src").handlers:
            handler.flush()

        contents = log_file.read_text(encoding="utf-8")
    finally:
        setup_logging()

    assert "[INFO] src.processors: batch started" in contents
    assert "not at this level" not in contents


def test_setup_logging_without_file_only_streams():
    try:
        setup_logging("DEBUG")
        handlers = logging.getLogger("src").handlers
        assert [type(handler) for handler in handlers] == [logging.StreamHandler]
        assert logging.getLogger("src").level == logging.DEBUG
    finally:
        setup_logging()
