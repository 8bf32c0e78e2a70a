from typing import Optional

from pydantic import BaseModel, Field

from ...domain.constants import UserFields
from ...domain.exceptions import ValidationError
from ...domain.models.user import User


class UserCreateRequest(BaseModel):
    """DTO for creating a user. The password arrives already hashed."""
    firstname: str = Field(min_length=1, max_length=255)
    lastname: str = Field(min_length=1, max_length=255)
    email: str = Field(min_length=1, max_length=320)
    hashed_password: str = Field(min_length=1, max_length=255)


class UserUpdateRequest(BaseModel):
    """DTO for a partial update; only fields explicitly set are applied"""
    firstname: Optional[str] = Field(default=None, max_length=255)
    lastname: Optional[str] = Field(default=None, max_length=255)
    email: Optional[str] = Field(default=None, max_length=320)
    hashed_password: Optional[str] = Field(default=None, max_length=255)


class UserResponse(BaseModel):
    """DTO for user response (no password)"""
    user_id: str
    firstname: str
    lastname: str
    email: str

    @classmethod
    def from_domain(cls, user: User) -> "UserResponse":
        """
        Raises:
            ValidationError: If the user has not been stored yet
        """
        if not user.is_persisted:
            raise ValidationError("User has not been stored yet", field=UserFields.USER_ID)
        return cls(
            user_id=user.user_id,
            firstname=user.firstname,
            lastname=user.lastname,
            email=user.email,
        )
