import json
import logging

import pytest
from loguru import logger

from ptlist.config import Settings
from ptlist.utils.logger import configure_logging


@pytest.fixture(autouse=True)
def restore_logging():
    yield
    configure_logging(app_name="ptlist", service="api")


def test_json_sink_on_stdout(capsys):
    configure_logging(app_name="ptlist", service="api", settings=Settings(log_json=True, app_env="test"))
    logger.bind(task_id="abc").info("timestamps computed")

    lines = [json.loads(line) for line in capsys.readouterr().out.splitlines()]
    record = lines[-1]["record"]
    assert record["message"] == "timestamps computed"
    assert record["extra"]["app"] == "ptlist"
    assert record["extra"]["env"] == "test"
    assert record["extra"]["service"] == "api"
    assert record["extra"]["task_id"] == "abc"


def test_pretty_sink_respects_level(capsys):
    configure_logging(app_name="ptlist", settings=Settings(log_json=False, log_level="WARNING"))
    logger.info("hidden")
    logger.warning("shown")

    err = capsys.readouterr().err
    assert "shown" in err
    assert "hidden" not in err


def test_stdlib_logging_is_intercepted(capsys):
    configure_logging(app_name="ptlist", settings=Settings(log_json=True))
    logging.getLogger("uvicorn.error").warning("from uvicorn")

    messages = [json.loads(line)["record"]["message"] for line in capsys.readouterr().out.splitlines()]
    assert "from uvicorn" in messages
