from abc import ABC, abstractmethod

from techhub.domain.entities.admin_user import AdminUser


class TokenServicePort(ABC):
    @abstractmethod
    def issue(self, user: AdminUser) -> str:
        raise NotImplementedError

    @abstractmethod
    def verify(self, token: str) -> AdminUser:
        """Raises AuthenticationError for invalid, tampered or expired tokens."""
        raise NotImplementedError
