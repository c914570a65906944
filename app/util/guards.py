from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.data.user import TokenPayload, UserLogin
from app.database.index import get_db
from app.models.user import User
from app.services.auth_service import AuthService
from app.util.errors import UnauthorizedError

bearer_scheme = HTTPBearer(auto_error=False, description="JWT returned by /auth/register or /auth/login")


def local_auth(credentials: Optional[UserLogin] = None, db: Session = Depends(get_db)) -> User:
    """Email/password check guarding the login route."""
    credentials = credentials or UserLogin()
    user = AuthService(db_session=db).authenticate_user(credentials.email, credentials.password)
    if user is None:
        raise UnauthorizedError("Invalid credentials")
    return user


def jwt_auth(
        credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
        db: Session = Depends(get_db),
) -> TokenPayload:
    """Bearer token check; yields the token claims, `sub` being the user id."""
    if credentials is None or credentials.scheme.lower() != "bearer":
        raise UnauthorizedError("Unauthorized")
    return AuthService(db_session=db).decode_access_token(credentials.credentials)
