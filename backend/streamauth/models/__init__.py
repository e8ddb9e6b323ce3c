from streamauth.models.user import User

__all__ = ["User"]
