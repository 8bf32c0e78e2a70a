from dataclasses import dataclass, field
from typing import Any, Dict, Mapping, Optional

from ..constants import UserFields
from ..exceptions import ValidationError


def require_text(field_name: str, value: Any) -> str:
    """Return value unchanged if it is a non-blank string, else raise ValidationError."""
    if not isinstance(value, str) or not value.strip():
        raise ValidationError(f"{field_name} is required", field=field_name)
    return value


def validate_user_changes(fields: Mapping[str, Any]) -> Dict[str, str]:
    """
    Check a set of field changes before they are applied to a stored user

    Args:
        fields: Mapping of field name to new value

    Returns:
        A plain dict with the validated changes

    Raises:
        ValidationError: If a key is not updatable or a value is empty
    """
    changes: Dict[str, str] = {}
    for name, value in fields.items():
        if name == UserFields.USER_ID:
            raise ValidationError("user_id cannot be changed", field=name)
        if name not in UserFields.UPDATABLE:
            raise ValidationError(f"Unknown user field: {name}", field=name)
        changes[name] = require_text(name, value)
    return changes


@dataclass
class User:
    """
    Pure domain model for User entity - no external dependencies

    Construction takes only the name and email. The password digest is set
    afterwards with set_hashed_password(), and the identifier is assigned by
    the store the first time the record is persisted.
    """
    firstname: str
    lastname: str
    email: str
    user_id: Optional[str] = field(default=None, init=False)
    hashed_password: Optional[str] = field(default=None, init=False, repr=False)

    def __post_init__(self) -> None:
        require_text(UserFields.FIRSTNAME, self.firstname)
        require_text(UserFields.LASTNAME, self.lastname)
        require_text(UserFields.EMAIL, self.email)

    @property
    def is_complete(self) -> bool:
        """True once credentials are present and the account is usable."""
        return self.hashed_password is not None

    @property
    def is_persisted(self) -> bool:
        return self.user_id is not None

    def set_hashed_password(self, hashed_password: str) -> None:
        """Store a password digest. Never pass a plaintext password here."""
        self.hashed_password = require_text(UserFields.HASHED_PASSWORD, hashed_password)

    def assign_id(self, user_id: str) -> None:
        """Set the store-generated identifier. Allowed once per record."""
        if self.user_id is not None:
            raise ValidationError("user_id is already assigned", field=UserFields.USER_ID)
        self.user_id = require_text(UserFields.USER_ID, user_id)
