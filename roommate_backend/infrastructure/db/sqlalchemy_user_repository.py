# Standard library imports
import logging
import uuid
from typing import Any, List, Mapping, Optional, Union

# External package imports
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

# Local application imports
from ...domain.repositories.user_repository import UserRepository
from ...domain.models.user import User, validate_user_changes
from ...domain.constants import UserFields
from ...domain.exceptions import (
    DatabaseError,
    DuplicateEmailError,
    NotFoundError,
    ValidationError,
)
from .database import get_session_factory
from .models import UserRecord

logger = logging.getLogger(__name__)

EMAIL_CONSTRAINT = "uq_users_email"


class SqlAlchemyUserRepository(UserRepository):
    """SQLAlchemy (async) implementation of UserRepository"""

    def __init__(self, session_factory: Optional[async_sessionmaker[AsyncSession]] = None) -> None:
        self.session_factory = session_factory if session_factory is not None else get_session_factory()

    async def add(self, user: User) -> User:
        """
        Insert a user under a freshly generated ID

        Args:
            user: Complete User domain model that has not been stored yet

        Returns:
            The same User with user_id set

        Raises:
            ValidationError: If the user is incomplete or already stored
            DuplicateEmailError: If another user has the same email
        """
        if user is None:
            raise ValidationError("User cannot be None")
        if user.is_persisted:
            raise ValidationError("User is already stored", field=UserFields.USER_ID)
        if not user.is_complete:
            raise ValidationError(
                "hashed_password must be set before the user is stored",
                field=UserFields.HASHED_PASSWORD,
            )

        new_id = uuid.uuid4()
        record = UserRecord(
            user_id=new_id,
            firstname=user.firstname,
            lastname=user.lastname,
            email=user.email,
            hashed_password=user.hashed_password,
        )

        try:
            async with self.session_factory() as session:
                async with session.begin():
                    session.add(record)
        except IntegrityError as e:
            raise self._integrity_error(e, user.email, "create") from e
        except SQLAlchemyError as e:
            raise self._database_error(e, "create") from e

        user.assign_id(str(new_id))
        logger.info(f"Created user {user.user_id}")
        return user

    async def get_by_id(self, user_id: Union[str, uuid.UUID]) -> User:
        """
        Find user by ID

        Args:
            user_id: User ID to search for

        Returns:
            User domain model

        Raises:
            NotFoundError: If no user has this ID, or the ID is malformed
        """
        key = self._parse_id(user_id)
        if key is None:
            raise NotFoundError(UserFields.USER_ID, user_id)

        try:
            async with self.session_factory() as session:
                record = await session.get(UserRecord, key)
        except SQLAlchemyError as e:
            raise self._database_error(e, "get_by_id") from e

        if record is None:
            raise NotFoundError(UserFields.USER_ID, user_id)
        logger.debug(f"Loaded user {key}")
        return self._record_to_user(record)

    async def get_by_email(self, email: str) -> User:
        """
        Find user by email address

        Args:
            email: Email address to search for

        Returns:
            User domain model

        Raises:
            NotFoundError: If no user has this email
        """
        if not email:
            raise NotFoundError(UserFields.EMAIL, email)

        try:
            async with self.session_factory() as session:
                record = await session.scalar(
                    select(UserRecord).where(UserRecord.email == email)
                )
        except SQLAlchemyError as e:
            raise self._database_error(e, "get_by_email") from e

        if record is None:
            raise NotFoundError(UserFields.EMAIL, email)
        logger.debug(f"Loaded user {record.user_id} by email")
        return self._record_to_user(record)

    async def update(self, user_id: Union[str, uuid.UUID], fields: Mapping[str, Any]) -> User:
        """
        Apply field changes to an existing user

        The row is locked for the duration of the transaction on backends
        that support SELECT ... FOR UPDATE.

        Args:
            user_id: ID of the user to change
            fields: Mapping of updatable field names to new values

        Returns:
            The updated User domain model

        Raises:
            ValidationError: If a field is unknown, immutable or empty
            NotFoundError: If no user has this ID
            DuplicateEmailError: If the new email belongs to another user
        """
        changes = validate_user_changes(fields)
        key = self._parse_id(user_id)
        if key is None:
            raise NotFoundError(UserFields.USER_ID, user_id)

        try:
            async with self.session_factory() as session:
                async with session.begin():
                    record = await session.scalar(
                        select(UserRecord)
                        .where(UserRecord.user_id == key)
                        .with_for_update()
                    )
                    if record is None:
                        raise NotFoundError(UserFields.USER_ID, user_id)
                    for name, value in changes.items():
                        setattr(record, name, value)
        except IntegrityError as e:
            raise self._integrity_error(e, changes.get(UserFields.EMAIL), "update") from e
        except SQLAlchemyError as e:
            raise self._database_error(e, "update") from e

        if changes:
            logger.info(f"Updated user {key}: {', '.join(sorted(changes))}")
        return self._record_to_user(record)

    async def delete(self, user_id: Union[str, uuid.UUID]) -> None:
        """
        Remove a user

        Raises:
            NotFoundError: If no user has this ID
        """
        key = self._parse_id(user_id)
        if key is None:
            raise NotFoundError(UserFields.USER_ID, user_id)

        try:
            async with self.session_factory() as session:
                async with session.begin():
                    record = await session.scalar(
                        select(UserRecord)
                        .where(UserRecord.user_id == key)
                        .with_for_update()
                    )
                    if record is None:
                        raise NotFoundError(UserFields.USER_ID, user_id)
                    await session.delete(record)
        except SQLAlchemyError as e:
            raise self._database_error(e, "delete") from e

        logger.info(f"Deleted user {key}")

    async def list_all(self) -> List[User]:
        try:
            async with self.session_factory() as session:
                records = (await session.scalars(select(UserRecord))).all()
        except SQLAlchemyError as e:
            raise self._database_error(e, "list_all") from e

        return [self._record_to_user(record) for record in records]

    async def count(self) -> int:
        try:
            async with self.session_factory() as session:
                total = await session.scalar(select(func.count()).select_from(UserRecord))
        except SQLAlchemyError as e:
            raise self._database_error(e, "count") from e

        return int(total or 0)

    async def exists_by_id(self, user_id: Union[str, uuid.UUID]) -> bool:
        key = self._parse_id(user_id)
        if key is None:
            return False

        try:
            async with self.session_factory() as session:
                found = await session.scalar(
                    select(UserRecord.user_id).where(UserRecord.user_id == key).limit(1)
                )
        except SQLAlchemyError as e:
            raise self._database_error(e, "exists_by_id") from e

        return found is not None

    async def exists_by_email(self, email: str) -> bool:
        if not email:
            return False

        try:
            async with self.session_factory() as session:
                found = await session.scalar(
                    select(UserRecord.user_id).where(UserRecord.email == email).limit(1)
                )
        except SQLAlchemyError as e:
            raise self._database_error(e, "exists_by_email") from e

        return found is not None

    @staticmethod
    def _parse_id(user_id: Union[str, uuid.UUID, None]) -> Optional[uuid.UUID]:
        """Convert an external ID to a UUID, or None if it cannot name any user"""
        if isinstance(user_id, uuid.UUID):
            return user_id
        if not user_id:
            return None
        try:
            return uuid.UUID(str(user_id))
        except (ValueError, TypeError, AttributeError):
            return None

    def _record_to_user(self, record: UserRecord) -> User:
        """
        Convert a users row to the User domain model

        Goes through the same construct / set password / assign ID steps
        as a brand new user, so a stored row always yields a complete User.
        """
        user = User(
            firstname=record.firstname,
            lastname=record.lastname,
            email=record.email,
        )
        user.set_hashed_password(record.hashed_password)
        user.assign_id(str(record.user_id))
        return user

    def _integrity_error(
        self,
        error: IntegrityError,
        email: Optional[str],
        operation: str,
    ) -> Exception:
        detail = str(error.orig).lower()
        if email is not None and (EMAIL_CONSTRAINT in detail or "users.email" in detail):
            logger.warning(f"Rejected duplicate email on {operation}")
            return DuplicateEmailError(email)
        return self._database_error(error, operation)

    def _database_error(self, error: SQLAlchemyError, operation: str) -> DatabaseError:
        logger.error(f"Database error during {operation}: {error}", exc_info=True)
        return DatabaseError(f"Error during {operation}: {error}", operation=operation)
