import logging
from logging.handlers import RotatingFileHandler

from mexicanopairing.constants import ENV_LOG_DIR, ENV_LOG_LEVEL, LOG_FILE_NAME
from mexicanopairing.utils import setup_logger


def _close(lgr):
    for handler in list(lgr.handlers):
        handler.close()
        lgr.removeHandler(handler)


def test_console_only_by_default(monkeypatch):
    monkeypatch.delenv(ENV_LOG_DIR, raising=False)
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)

    lgr = setup_logger("mexicanopairing.tests.console")

    assert lgr.level == logging.INFO
    assert len(lgr.handlers) == 1
    assert not isinstance(lgr.handlers[0], RotatingFileHandler)
    _close(lgr)


def test_level_from_environment(monkeypatch):
    monkeypatch.setenv(ENV_LOG_LEVEL, "debug")
    lgr = setup_logger("mexicanopairing.tests.level")
    assert lgr.level == logging.DEBUG
    _close(lgr)

    monkeypatch.setenv(ENV_LOG_LEVEL, "chatty")
    lgr = setup_logger("mexicanopairing.tests.level")
    assert lgr.level == logging.INFO
    _close(lgr)


def test_file_handler_when_log_dir_is_set(monkeypatch, tmp_path):
    monkeypatch.setenv(ENV_LOG_DIR, str(tmp_path / "logs"))
    monkeypatch.delenv(ENV_LOG_LEVEL, raising=False)

    lgr = setup_logger("mexicanopairing.tests.file")
    lgr.info("round generated")
    for handler in lgr.handlers:
        handler.flush()

    assert any(isinstance(h, RotatingFileHandler) for h in lgr.handlers)
    assert "round generated" in (tmp_path / "logs" / LOG_FILE_NAME).read_text(
        encoding="utf-8"
    )
    _close(lgr)


def test_repeated_setup_does_not_duplicate_handlers(monkeypatch):
    monkeypatch.delenv(ENV_LOG_DIR, raising=False)

    setup_logger("mexicanopairing.tests.repeat")
    lgr = setup_logger("mexicanopairing.tests.repeat")

    assert len(lgr.handlers) == 1
    _close(lgr)
