from streamauth.repositories.user import UserRepository

__all__ = ["UserRepository"]
