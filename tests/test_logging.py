import json
import logging

import pytest
import structlog

from daylog.core.logging import configure_logging, get_logger
from daylog.merge.clips import merge_clips


@pytest.fixture(autouse=True)
def reset_structlog():
    yield
    structlog.reset_defaults()


def test_json_lines_go_to_stderr(capsys, day_one, options):
    configure_logging(logging.DEBUG)

    merge_clips(day_one, options)

    captured = capsys.readouterr()
    assert captured.out == ""
    event = json.loads(captured.err.strip().splitlines()[-1])
    assert event["event"] == "clips_merged"
    assert event["component"] == "clip_merger"
    assert event["log_id"] == "D01_250601"
    assert event["clips"] == 2
    assert event["level"] == "debug"


def test_level_filters_debug(capsys, day_one, options):
    configure_logging(logging.INFO)

    merge_clips(day_one, options)
    get_logger(component="test").info("visible")

    err = capsys.readouterr().err
    assert "clips_merged" not in err
    assert "visible" in err


def test_console_renderer(capsys):
    configure_logging(logging.INFO, json_logs=False)

    get_logger(component="test").warning("plain_text")

    assert "plain_text" in capsys.readouterr().err
