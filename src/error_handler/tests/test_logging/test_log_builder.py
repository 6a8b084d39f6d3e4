import logging
from types import SimpleNamespace

import pytest

from error_handler.core.logging.builder import make_dict_config, setup_logging


def make_settings(**overrides):
    # Duck-typed settings: the builder only reads attributes.
    values = dict(
        ENV="testing",
        SERVICE_NAME="svc",
        LOG_FORMAT="json",
        LOG_LEVEL="INFO",
        LOG_TO_STDOUT=True,
        LOG_DIR=None,
        LOG_MAX_BYTES=1000,
        LOG_BACKUP_COUNT=1,
    )
    values.update(overrides)
    return SimpleNamespace(**values)


@pytest.fixture()
def restore_logging(test_settings):
    yield
    setup_logging(test_settings)


def test_stdout_config_uses_error_console(tmp_path):
    cfg = make_dict_config(make_settings(LOG_DIR=tmp_path))

    assert set(cfg["handlers"]) == {"console", "error_console"}
    assert cfg["formatters"]["json"]["service"] == "svc"
    assert cfg["loggers"]["error_handler"]["propagate"] is True


def test_file_config_adds_rotating_handlers(tmp_path):
    cfg = make_dict_config(make_settings(LOG_TO_STDOUT=False, LOG_DIR=tmp_path))

    assert set(cfg["handlers"]) == {"console", "file", "error_file"}
    assert cfg["handlers"]["error_file"]["level"] == "ERROR"
    assert cfg["handlers"]["file"]["filename"].endswith("app.log")


def test_text_format_uses_standard_formatter():
    cfg = make_dict_config(make_settings(LOG_FORMAT="text"))
    assert cfg["handlers"]["console"]["formatter"] == "standard"


def test_setup_logging_creates_log_dir_and_writes_errors(tmp_path, restore_logging):
    log_dir = tmp_path / "logs"
    setup_logging(make_settings(LOG_TO_STDOUT=False, LOG_DIR=log_dir))

    assert log_dir.exists()
    logging.getLogger("error_handler.api").error("contained fault", extra={"status": 500})
    for handler in logging.getLogger().handlers:
        handler.flush()

    assert "contained fault" in (log_dir / "errors.log").read_text()
