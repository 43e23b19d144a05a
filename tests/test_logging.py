import logging

import pytest

from lingform import logging_
from lingform.logging_ import setup_logging


def test_setup_logging_installs_one_handler() -> None:
    root = logging.getLogger()
    before = [handler for handler in root.handlers if handler is not logging_._handler]

    setup_logging("debug")
    setup_logging("INFO")

    added = [handler for handler in root.handlers if handler not in before]
    assert added == [logging_._handler]
    assert added[0].level == logging.INFO
    assert logging.getLogger().level == logging.INFO


def test_setup_logging_writes_to_stderr(capsys) -> None:
    setup_logging("WARNING")

    logging.getLogger("lingform.test").warning("table %s missing", "rus_latn_bgn")
    captured = capsys.readouterr()

    assert "WARNING lingform.test | table rus_latn_bgn missing" in captured.err


def test_setup_logging_rejects_unknown_level() -> None:
    with pytest.raises(ValueError, match="Unknown log level"):
        setup_logging("chatty")
