from .user import User, require_text, validate_user_changes

__all__ = ["User", "require_text", "validate_user_changes"]
