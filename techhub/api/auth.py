from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from techhub.api.schemas import LoginRequestSchema, LoginResponseSchema, AdminUserSchema
from techhub.application.exceptions import AuthenticationError
from techhub.domain.entities.admin_user import AdminUser
from techhub.wiring.dependencies import Container, get_container

router = APIRouter()
logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def require_admin(
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
    container: Container = Depends(get_container),
) -> AdminUser:
    """FastAPI dependency: verified admin/staff user from the bearer token, else 401."""
    if credentials is None or credentials.scheme.lower() != "bearer" or not credentials.credentials:
        raise _unauthorized("Unauthorized - Admin access required")
    try:
        return container.admin_login.verify(credentials.credentials)
    except AuthenticationError as e:
        logger.info("Admin token rejected", extra={"error": str(e)})
        raise _unauthorized("Invalid or expired token")


@router.post("/login", response_model=LoginResponseSchema)
async def login(req: LoginRequestSchema, container: Container = Depends(get_container)):
    try:
        user, token = container.admin_login.execute(req.username, req.password)
    except AuthenticationError:
        raise _unauthorized("Invalid username or password")
    return LoginResponseSchema(
        success=True,
        token=token,
        user=AdminUserSchema(id=user.id, username=user.username, role=user.role),
    )


@router.get("/me", response_model=AdminUserSchema)
async def me(user: AdminUser = Depends(require_admin)):
    return AdminUserSchema(id=user.id, username=user.username, role=user.role)
