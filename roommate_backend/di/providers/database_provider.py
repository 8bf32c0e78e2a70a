from typing import TYPE_CHECKING
from ...infrastructure.db.database import get_engine, get_session_factory

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class DatabaseProvider:
    """Centralized database provider - single source of truth for the engine and sessions"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register the engine and session factory in the container.
        Repositories never build their own connections; they receive the
        session factory registered here.
        """
        container.register_singleton("engine", get_engine())
        container.register_singleton("session_factory", get_session_factory())
