"""
Unit tests for the User domain model and its field validation.
"""
import pytest

from roommate_backend.domain.exceptions import ValidationError
from roommate_backend.domain.models.user import User, validate_user_changes


class TestUserConstruction:
    """Tests for the two-phase User lifecycle"""

    def test_constructor_leaves_id_and_password_unset(self):
        user = User(firstname="Ann", lastname="Lee", email="ann@x.com")
        assert user.user_id is None
        assert user.hashed_password is None
        assert user.is_complete is False
        assert user.is_persisted is False

    def test_constructor_rejects_id_argument(self):
        with pytest.raises(TypeError):
            User(firstname="Ann", lastname="Lee", email="ann@x.com", user_id="abc")

    def test_constructor_rejects_password_argument(self):
        with pytest.raises(TypeError):
            User(firstname="Ann", lastname="Lee", email="ann@x.com", hashed_password="h1")

    @pytest.mark.parametrize("field_name", ["firstname", "lastname", "email"])
    @pytest.mark.parametrize("bad_value", ["", "   ", None])
    def test_required_fields(self, field_name, bad_value):
        values = {"firstname": "Ann", "lastname": "Lee", "email": "ann@x.com"}
        values[field_name] = bad_value
        with pytest.raises(ValidationError) as exc_info:
            User(**values)
        assert exc_info.value.field == field_name

    def test_set_hashed_password_completes_record(self):
        user = User(firstname="Ann", lastname="Lee", email="ann@x.com")
        user.set_hashed_password("h1")
        assert user.hashed_password == "h1"
        assert user.is_complete is True

    def test_set_hashed_password_rejects_blank(self):
        user = User(firstname="Ann", lastname="Lee", email="ann@x.com")
        with pytest.raises(ValidationError):
            user.set_hashed_password("")
        assert user.is_complete is False

    def test_assign_id_only_once(self):
        user = User(firstname="Ann", lastname="Lee", email="ann@x.com")
        user.assign_id("id-1")
        assert user.user_id == "id-1"
        assert user.is_persisted is True
        with pytest.raises(ValidationError, match="already assigned"):
            user.assign_id("id-2")
        assert user.user_id == "id-1"

    def test_repr_hides_password(self):
        user = User(firstname="Ann", lastname="Lee", email="ann@x.com")
        user.set_hashed_password("super-secret-digest")
        assert "super-secret-digest" not in repr(user)

    def test_equality_covers_all_fields(self):
        a = User(firstname="Ann", lastname="Lee", email="ann@x.com")
        b = User(firstname="Ann", lastname="Lee", email="ann@x.com")
        assert a == b
        a.set_hashed_password("h1")
        assert a != b
        b.set_hashed_password("h1")
        a.assign_id("id-1")
        b.assign_id("id-2")
        assert a != b


class TestValidateUserChanges:
    """Tests for validate_user_changes"""

    def test_accepts_updatable_fields(self):
        changes = validate_user_changes({"firstname": "Bo", "email": "bo@x.com"})
        assert changes == {"firstname": "Bo", "email": "bo@x.com"}

    def test_empty_mapping(self):
        assert validate_user_changes({}) == {}

    def test_user_id_is_immutable(self):
        with pytest.raises(ValidationError, match="cannot be changed"):
            validate_user_changes({"user_id": "other"})

    def test_unknown_field(self):
        with pytest.raises(ValidationError, match="Unknown user field"):
            validate_user_changes({"nickname": "annie"})

    def test_null_value(self):
        with pytest.raises(ValidationError) as exc_info:
            validate_user_changes({"lastname": None})
        assert exc_info.value.field == "lastname"
