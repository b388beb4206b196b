from .session_factory import SessionFactory, SessionFactoryBuilder, create_default_session_factory

__all__ = ['SessionFactory', 'SessionFactoryBuilder', 'create_default_session_factory']
