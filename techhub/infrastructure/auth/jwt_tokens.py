from __future__ import annotations

from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt

from techhub.application.exceptions import AuthenticationError
from techhub.application.ports.token_service import TokenServicePort
from techhub.domain.entities.admin_user import AdminUser


class JwtTokenService(TokenServicePort):
    """Issues and verifies signed, expiring admin bearer tokens."""

    def __init__(self, secret: str, algorithm: str = "HS256", ttl_minutes: int = 480) -> None:
        if not secret:
            raise ValueError("JWT_SECRET is required to issue admin tokens")
        self._secret = secret
        self._algorithm = algorithm
        self._ttl = timedelta(minutes=ttl_minutes)

    def issue(self, user: AdminUser, now: datetime | None = None) -> str:
        issued_at = now or datetime.now(timezone.utc)
        claims = {
            "sub": user.username,
            "uid": user.id,
            "role": user.role,
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._ttl).timestamp()),
        }
        return jwt.encode(claims, self._secret, algorithm=self._algorithm)

    def verify(self, token: str) -> AdminUser:
        try:
            payload = jwt.decode(token, self._secret, algorithms=[self._algorithm])
        except JWTError as e:
            raise AuthenticationError("Invalid or expired token") from e

        username, uid, role = payload.get("sub"), payload.get("uid"), payload.get("role")
        if not (username and uid and role in ("admin", "staff")):
            raise AuthenticationError("Token is missing required claims")
        return AdminUser(id=str(uid), username=str(username), role=str(role))
