"""
Dependencies for API endpoints.
"""
from functools import lru_cache

from ..config import get_config
from ..factories.session_factory import SessionFactory, create_default_session_factory
from ..session import Session


@lru_cache()
def get_session_factory() -> SessionFactory:
    """Get the global session factory instance."""
    return create_default_session_factory(get_config())


def get_session() -> Session:
    """Get a Session bound to the shared command port."""
    return get_session_factory().create_session()
