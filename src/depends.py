from typing import Optional
from uuid import UUID

from fastapi import Depends, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ClientError
from src.api.utils.jwt import verify_jwt
from src.libs.result import Error, ErrorKind

security = HTTPBearer(auto_error=False)

TOKEN_REQUIRED = Error("TOKEN_REQUIRED", "Access token required", ErrorKind.unauthorized)
TOKEN_INVALID = Error("TOKEN_INVALID", "Invalid or expired token", ErrorKind.forbidden)


async def get_unit_of_work(request: Request):
    session_factory = request.app.state.session_factory
    async with session_factory() as session:
        yield SqlAlchemyUnitOfWork(session)


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
) -> dict:
    """
    Dependency to extract and verify JWT token from Authorization header.

    Args:
        credentials: Bearer token from Authorization header

    Returns:
        Decoded JWT payload containing user_id and email

    Raises:
        ClientError: 401 if the token is missing, 403 if invalid or expired
    """
    if credentials is None:
        raise ClientError(TOKEN_REQUIRED, status_code=status.HTTP_401_UNAUTHORIZED)

    payload = verify_jwt(credentials.credentials)
    if payload is None or "user_id" not in payload:
        raise ClientError(TOKEN_INVALID, status_code=status.HTTP_403_FORBIDDEN)

    return payload


async def get_current_user_id(current_user: dict = Depends(get_current_user)) -> UUID:
    try:
        return UUID(current_user["user_id"])
    except (TypeError, ValueError):
        raise ClientError(TOKEN_INVALID, status_code=status.HTTP_403_FORBIDDEN)


def get_config(request: Request):
    return request.app.state.config
