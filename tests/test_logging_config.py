import logging

import pytest

from user_management_api.app.core.logging_config import HANDLER_PREFIX, setup_logging


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    saved_handlers, saved_level = list(root.handlers), root.level
    for handler in list(root.handlers):
        if (handler.get_name() or "").startswith(HANDLER_PREFIX):
            root.removeHandler(handler)
    yield root
    for handler in list(root.handlers):
        if handler not in saved_handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in saved_handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(saved_level)


def own(root):
    return [h for h in root.handlers if (h.get_name() or "").startswith(HANDLER_PREFIX)]


def test_setup_logging_writes_to_file(clean_root, tmp_path):
    logfile = tmp_path / "app.log"
    setup_logging("debug", str(logfile))

    logging.getLogger("user_management_api.test").info("hello %s", "file")
    for handler in own(clean_root):
        handler.flush()

    assert clean_root.level == logging.DEBUG
    assert len(own(clean_root)) == 2
    assert "[INFO] user_management_api.test: hello file" in logfile.read_text(encoding="utf-8")


def test_setup_logging_runs_once(clean_root):
    setup_logging("INFO")
    setup_logging("DEBUG")

    assert len(own(clean_root)) == 1
    assert clean_root.level == logging.INFO


def test_unknown_level_falls_back_to_info(clean_root):
    setup_logging("loud")
    assert clean_root.level == logging.INFO
