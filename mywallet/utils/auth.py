"""
mywallet/utils/auth.py

Bearer-token authorization for protected routes.

get_current_user resolves the 'Authorization: Bearer <token>' header through
the session store before the route body runs; any failure is a 401 and the
ledger is never touched.
"""

from fastapi import Depends, HTTPException, Request, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from mywallet.database import get_db
from mywallet.models.user import User
from mywallet.services.errors import InvalidSession
from mywallet.services.session import resolve_token
from mywallet.services.user import get_user_by_id

_bearer = HTTPBearer(auto_error=False)


def _unauthorized(detail: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail=detail,
        headers={"WWW-Authenticate": "Bearer"},
    )


async def get_bearer_token(request: Request) -> str:
    """
    Extract the raw token from the Authorization header.
    """
    credentials: HTTPAuthorizationCredentials | None = await _bearer(request)
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise _unauthorized("Missing bearer token")
    return credentials.credentials


def get_current_user(
    token: str = Depends(get_bearer_token),
    db: Session = Depends(get_db),
) -> User:
    """
    Resolve the bearer token to its User, or raise 401.
    A session whose user no longer exists counts as invalid.
    """
    try:
        user_id = resolve_token(token, db)
    except InvalidSession:
        raise _unauthorized("Invalid session")

    user = get_user_by_id(user_id, db)
    if user is None:
        raise _unauthorized("Invalid session")
    return user
