from __future__ import annotations

import json
import logging
import sys
from typing import TYPE_CHECKING

import pytest

from notiboost.utils.structured_logging import (
    StructuredFormatter,
    clear_correlation_id,
    get_correlation_id,
    log_structured,
    set_correlation_id,
)

if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture(autouse=True)
def _reset_correlation_id() -> Generator[None, None, None]:
    clear_correlation_id()
    yield
    clear_correlation_id()


def make_record(**extra: object) -> logging.LogRecord:
    record = logging.LogRecord(
        name="notiboost.test",
        level=logging.DEBUG,
        pathname=__file__,
        lineno=10,
        msg="GET request to %s succeeded",
        args=("https://api.notiboost.test/x",),
        exc_info=None,
        func="test_func",
    )
    for key, value in extra.items():
        setattr(record, key, value)
    return record


####################################
#     Tests for correlation id     #
####################################


def test_correlation_id_default_none() -> None:
    assert get_correlation_id() is None


def test_correlation_id_set_and_clear() -> None:
    set_correlation_id("req-1")
    assert get_correlation_id() == "req-1"
    clear_correlation_id()
    assert get_correlation_id() is None


#########################################
#     Tests for StructuredFormatter     #
#########################################


def test_structured_formatter_basic_fields() -> None:
    data = json.loads(StructuredFormatter().format(make_record()))
    assert data["level"] == "DEBUG"
    assert data["logger"] == "notiboost.test"
    assert data["message"] == "GET request to https://api.notiboost.test/x succeeded"
    assert data["function"] == "test_func"
    assert data["line"] == 10
    assert data["timestamp"].endswith("Z")
    assert "correlation_id" not in data
    assert "msg" not in data
    assert "args" not in data


def test_structured_formatter_extra_fields() -> None:
    record = make_record(http_method="GET", attempt=2, status_code=429, sleep_time=1.0)
    data = json.loads(StructuredFormatter().format(record))
    assert data["http_method"] == "GET"
    assert data["attempt"] == 2
    assert data["status_code"] == 429
    assert data["sleep_time"] == 1.0


def test_structured_formatter_correlation_id() -> None:
    set_correlation_id("signup-42")
    data = json.loads(StructuredFormatter().format(make_record()))
    assert data["correlation_id"] == "signup-42"


def test_structured_formatter_non_serializable() -> None:
    data = json.loads(StructuredFormatter().format(make_record(error=ValueError("bad"))))
    assert data["error"] == "bad"


def test_structured_formatter_exception() -> None:
    try:
        msg = "boom"
        raise RuntimeError(msg)
    except RuntimeError:
        record = make_record()
        record.exc_info = sys.exc_info()
    data = json.loads(StructuredFormatter().format(record))
    assert "RuntimeError: boom" in data["exception"]


####################################
#     Tests for log_structured     #
####################################


def test_log_structured(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("notiboost.test_log_structured")
    with caplog.at_level(logging.DEBUG, logger="notiboost.test_log_structured"):
        log_structured(logger, logging.DEBUG, "Request completed", status_code=200)

    assert len(caplog.records) == 1
    assert caplog.records[0].message == "Request completed"
    assert caplog.records[0].status_code == 200


def test_log_structured_disabled_level(caplog: pytest.LogCaptureFixture) -> None:
    logger = logging.getLogger("notiboost.test_log_structured_disabled")
    with caplog.at_level(logging.WARNING, logger="notiboost.test_log_structured_disabled"):
        log_structured(logger, logging.DEBUG, "hidden", status_code=200)

    assert caplog.records == []
