# app/core/security.py
from datetime import datetime, timedelta, timezone

from jose import JWTError, jwt
from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from app.core.config import settings, get_db
from app.core.exceptions import unauthorized
from app.crud.user import crud_user
from app.models.user import User


# =====================================================================
# PASSWORD HASHING
# =====================================================================

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")


def hash_password(password: str) -> str:
    """One-way hash for storage."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


# =====================================================================
# TOKEN CREATION
# =====================================================================

security = HTTPBearer()


def create_access_token(data: dict) -> str:
    """
    Create JWT access token.

    Args:
        data: Dictionary containing user data (typically {"sub": user_id})

    Returns:
        Encoded JWT access token
    """
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(
        minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES
    )
    to_encode.update({"exp": expire, "type": "access"})
    return jwt.encode(to_encode, settings.SECRET_KEY, algorithm=settings.ALGORITHM)


def create_refresh_token(data: dict) -> str:
    to_encode = data.copy()
    expire = datetime.now(timezone.utc) + timedelta(
        days=settings.REFRESH_TOKEN_EXPIRE_DAYS
    )
    to_encode.update({"exp": expire, "type": "refresh"})
    return jwt.encode(to_encode, settings.REFRESH_SECRET_KEY, algorithm=settings.ALGORITHM)


# =====================================================================
# TOKEN VERIFICATION
# =====================================================================

def verify_token(token: str, secret_key: str, token_type: str = "access") -> int:
    """
    Verify JWT token and return the user id it was issued for.

    Raises:
        HTTPException: If token is invalid, expired or of the wrong type
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    try:
        payload = jwt.decode(token, secret_key, algorithms=[settings.ALGORITHM])
    except JWTError:
        raise credentials_exception

    subject = payload.get("sub")
    if subject is None or not str(subject).isdigit():
        raise credentials_exception

    if payload.get("type") != token_type:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail=f"Invalid token type. Expected {token_type}",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return int(subject)


def verify_access_token(token: str) -> int:
    return verify_token(token, settings.SECRET_KEY, "access")


def verify_refresh_token(token: str) -> int:
    return verify_token(token, settings.REFRESH_SECRET_KEY, "refresh")


# =====================================================================
# USER AUTHENTICATION DEPENDENCIES
# =====================================================================

async def get_authenticated_user(
    credentials: HTTPAuthorizationCredentials = Depends(security),
    db: Session = Depends(get_db)
) -> User:
    """
    Resolve the acting user from the bearer token, active or not.

    Raises:
        HTTPException: If token is invalid or user not found
    """
    user_id = verify_access_token(credentials.credentials)

    user = crud_user.get(db, id=user_id)
    if user is None:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="User not found",
            headers={"WWW-Authenticate": "Bearer"},
        )
    return user


async def get_current_user(
    current_user: User = Depends(get_authenticated_user)
) -> User:
    """
    Acting user for every regular endpoint; deactivated accounts are refused.

    Raises:
        HTTPException: If the account is deactivated
    """
    if not current_user.is_active:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Account is deactivated",
        )

    return current_user


def ensure_acting_user(user_id: int, current_user: User) -> int:
    """
    The ``{user_id}`` path segment must name the authenticated user.

    Returns:
        The acting user id, handed to the service layer as-is
    """
    if user_id != current_user.id:
        raise unauthorized("Path user does not match the authenticated user")
    return current_user.id
