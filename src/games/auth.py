"""Identity lookup for user-scoped operations."""

from abc import ABC, abstractmethod
from typing import Optional


class AuthError(Exception):
    """Authentication or authorization failure."""


class AuthenticationRequired(AuthError):
    """Raised when an operation needs a signed-in user and there is none."""

    def __init__(self, operation: str) -> None:
        super().__init__(f"User not authenticated: {operation} requires a signed-in user")
        self.operation = operation


class IdentityProvider(ABC):
    """Abstract source of the currently signed-in user."""

    @abstractmethod
    def current_user_id(self) -> Optional[str]: ...

    def require_user_id(self, operation: str) -> str:
        """Return the current user id or raise AuthenticationRequired."""
        user_id = self.current_user_id()
        if not user_id:
            raise AuthenticationRequired(operation)
        return user_id


class StaticIdentity(IdentityProvider):
    """Identity fixed at construction; None means signed out."""

    def __init__(self, user_id: Optional[str] = None) -> None:
        self.user_id = user_id

    def current_user_id(self) -> Optional[str]:
        return self.user_id

    def sign_out(self) -> None:
        self.user_id = None
