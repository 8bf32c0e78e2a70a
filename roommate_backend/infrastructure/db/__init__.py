from .database import (
    create_session_factory,
    dispose_engine,
    get_engine,
    get_session_factory,
    init_models,
)
from .models import Base, UserRecord
from .sqlalchemy_user_repository import SqlAlchemyUserRepository

__all__ = [
    "create_session_factory",
    "dispose_engine",
    "get_engine",
    "get_session_factory",
    "init_models",
    "Base",
    "UserRecord",
    "SqlAlchemyUserRepository",
]
