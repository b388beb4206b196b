"""
zfsquery Test Configuration and Fixtures

Most tests run against the in-memory fake command port; see
tests/fixtures/fake_pools.py for the pool models.
"""

import pytest
from unittest.mock import Mock

from zfsquery.config import ZfsQueryConfig
from zfsquery.infrastructure.fake_command import create_fake_command_port
from zfsquery.session import Session
from tests.fixtures.fake_pools import recursive_pool, single_pool


@pytest.fixture
def mock_logger():
    """Create mock logger."""
    logger = Mock()
    logger.info = Mock()
    logger.error = Mock()
    logger.warning = Mock()
    logger.debug = Mock()
    return logger


@pytest.fixture
def make_session(mock_logger):
    """Factory building a session over a fake backing store."""
    def _make(pools=None):
        return Session(
            command=create_fake_command_port(pools),
            logger=mock_logger,
            config=ZfsQueryConfig(),
        )
    return _make


@pytest.fixture
def session(make_session):
    """Session over a single pool, TestPool1."""
    return make_session({"TestPool1": single_pool()})


@pytest.fixture
def tank_session(make_session):
    """Session over the "tank" pool with recursive and partial snapshots."""
    return make_session({"tank": recursive_pool()})


@pytest.fixture
def tank(tank_session):
    return tank_session.get_pool("tank").unwrap()
