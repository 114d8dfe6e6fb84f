import logging

import pytest

from descstats import config
from descstats.observability.logging import reset_logging, setup_logging
from descstats.services.numeric import numeric_summary

@pytest.fixture(autouse=True)
def clean_logging():
    reset_logging()
    yield
    reset_logging()

def test_setup_logging_writes_to_stdout(capsys):
    setup_logging("DEBUG")
    numeric_summary([-3.0, 4.0])
    out = capsys.readouterr().out
    assert "[DEBUG] descstats.services.numeric - numeric_summary n=2" in out

def test_setup_logging_leaves_root_logger_alone():
    root_handlers = list(logging.getLogger().handlers)
    setup_logging()
    assert logging.getLogger().handlers == root_handlers
    assert logging.getLogger("descstats").propagate is False

def test_setup_logging_is_idempotent():
    setup_logging("WARNING")
    setup_logging("DEBUG")
    logger = logging.getLogger("descstats")
    assert len(logger.handlers) == 1
    assert logger.level == logging.WARNING

def test_setup_logging_default_level(monkeypatch):
    monkeypatch.setattr(config, "LOG_LEVEL", "error")
    setup_logging()
    assert logging.getLogger("descstats").level == logging.ERROR

def test_setup_logging_bad_level_leaves_logger_unconfigured():
    with pytest.raises(ValueError):
        setup_logging("LOUD")
    assert logging.getLogger("descstats").handlers == []
    setup_logging("INFO")
    assert logging.getLogger("descstats").level == logging.INFO

def test_info_level_hides_debug_output(capsys):
    setup_logging("INFO")
    numeric_summary([1.0])
    assert capsys.readouterr().out == ""

@pytest.mark.parametrize("name, expected", [
    ("DEBUG", logging.DEBUG),
    ("info", logging.INFO),
    (" Warning ", logging.WARNING),
    ("10", 10),
    (logging.ERROR, logging.ERROR),
])
def test_level_from_name(name, expected):
    assert config.level_from_name(name) == expected

def test_level_from_name_unknown():
    with pytest.raises(ValueError, match="LOUD"):
        config.level_from_name("LOUD")
