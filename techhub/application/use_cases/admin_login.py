from __future__ import annotations

import hmac
import logging
from dataclasses import dataclass

from techhub.application.exceptions import AuthenticationError
from techhub.application.ports.token_service import TokenServicePort
from techhub.domain.entities.admin_user import AdminUser


@dataclass(frozen=True)
class AdminAccount:
    user: AdminUser
    password: str


class AdminLoginUseCase:
    def __init__(self, accounts: list[AdminAccount], tokens: TokenServicePort) -> None:
        # Accounts without a password are disabled.
        self._accounts = [a for a in accounts if a.password]
        self._tokens = tokens
        self._logger = logging.getLogger(__name__)

    def execute(self, username: str, password: str) -> tuple[AdminUser, str]:
        """Returns (user, bearer token). Raises AuthenticationError on bad credentials."""
        for account in self._accounts:
            name_ok = hmac.compare_digest(account.user.username.encode(), username.encode())
            password_ok = hmac.compare_digest(account.password.encode(), password.encode())
            if name_ok and password_ok:
                self._logger.info("Admin login", extra={"role": account.user.role})
                return account.user, self._tokens.issue(account.user)

        self._logger.warning("Admin login rejected")
        raise AuthenticationError("Invalid username or password")

    def verify(self, token: str) -> AdminUser:
        return self._tokens.verify(token)
