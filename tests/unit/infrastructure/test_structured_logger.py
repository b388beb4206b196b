import io
import json
import uuid
from unittest.mock import Mock

from zfsquery.core.interfaces.logger_interface import ILogger
from zfsquery.infrastructure.fake_command import create_fake_command_port
from zfsquery.infrastructure.logging.structured_logger import StructuredLogger
from zfsquery.session import Session
from tests.fixtures.fake_pools import single_pool


def make_logger(level="DEBUG"):
    stream = io.StringIO()
    logger = StructuredLogger(name=f"zfsquery.test.{uuid.uuid4().hex}", level=level, stream=stream)
    return logger, stream


def entries(stream):
    return [json.loads(line) for line in stream.getvalue().splitlines()]


def test_json_entry_with_context():
    logger, stream = make_logger()

    logger.info("Listed pools", {"pool_name": "tank", "count": 2})

    [entry] = entries(stream)
    assert entry["level"] == "INFO"
    assert entry["message"] == "Listed pools"
    assert entry["pool_name"] == "tank"
    assert entry["count"] == 2
    assert "timestamp" in entry


def test_reserved_keys_are_prefixed():
    logger, stream = make_logger()

    logger.warning("clash", {"name": "tank", "message": "inner"})

    [entry] = entries(stream)
    assert entry["message"] == "clash"
    assert entry["ctx_name"] == "tank"
    assert entry["ctx_message"] == "inner"


def test_level_filtering():
    logger, stream = make_logger(level="WARNING")

    logger.debug("hidden")
    logger.info("hidden")
    logger.error("shown")

    assert [entry["message"] for entry in entries(stream)] == ["shown"]


def test_unserializable_values_are_stringified():
    logger, stream = make_logger()

    logger.debug("odd", {"value": object()})

    [entry] = entries(stream)
    assert entry["value"].startswith("<object object")


def test_exception_includes_traceback():
    logger, stream = make_logger()

    try:
        raise RuntimeError("boom")
    except RuntimeError:
        logger.exception("failed")

    [entry] = entries(stream)
    assert entry["level"] == "ERROR"
    assert "RuntimeError: boom" in entry["exception"]


def test_implements_logger_interface():
    logger, _ = make_logger()

    assert isinstance(logger, ILogger)
    assert not hasattr(ILogger, "critical")


def test_services_accept_any_logger_interface():
    logger = Mock(spec=ILogger)
    session = Session(command=create_fake_command_port({"TestPool1": single_pool()}), logger=logger)

    assert session.list_pools().is_success
    logger.info.assert_called()
