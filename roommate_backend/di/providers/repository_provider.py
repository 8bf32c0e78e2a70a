from typing import TYPE_CHECKING
from ...domain.repositories.user_repository import UserRepository
from ...infrastructure.db.sqlalchemy_user_repository import SqlAlchemyUserRepository

if TYPE_CHECKING:
    from ..base_container import BaseContainer


class RepositoryProvider:
    """Repository registration provider - wires domain interfaces to infrastructure implementations"""
    
    @staticmethod
    def register(container: "BaseContainer") -> None:
        """
        Register all repository implementations.
        Gets the session factory from the database provider.
        """
        session_factory = container.get("session_factory")
        
        # Domain interfaces -> Infrastructure implementations
        container.register_singleton(
            UserRepository,
            SqlAlchemyUserRepository(session_factory=session_factory)
        )
