import logging
import sys

import pytest

from solax_cloud.logging import API_LOGGER, ConsoleLog


@pytest.fixture(autouse=True)
def _restore_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield
    root.handlers.clear()
    root.handlers.extend(handlers)
    root.setLevel(level)
    logging.getLogger("urllib3").setLevel(logging.NOTSET)


def test_quiet_mode_has_no_console_output():
    log = ConsoleLog(level="INFO", quiet=True).setup()

    assert log.name == "solax"
    assert logging.getLogger().handlers == []
    assert logging.getLogger(API_LOGGER).parent is log


def test_console_handler_writes_to_stderr():
    ConsoleLog(level="warning").setup()
    handlers = logging.getLogger().handlers

    assert len(handlers) == 1
    assert handlers[0].stream is sys.stderr
    assert handlers[0].level == logging.WARNING


def test_urllib3_is_capped_unless_requested():
    ConsoleLog(level="DEBUG", quiet=True).setup()
    assert logging.getLogger("urllib3").level == logging.WARNING

    ConsoleLog(level="DEBUG", quiet=True, debug_modules=["urllib3"]).setup()
    assert logging.getLogger("urllib3").level == logging.DEBUG


def test_client_records_reach_console(capsys):
    ConsoleLog(level="INFO").setup()
    logging.getLogger(API_LOGGER).warning("Solax API returned HTTP 502 for sn=ABC")

    captured = capsys.readouterr()
    assert captured.out == ""
    assert "WARNING [solax.api] Solax API returned HTTP 502 for sn=ABC" in captured.err
