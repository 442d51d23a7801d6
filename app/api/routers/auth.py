# app/api/routers/auth.py
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.api.deps import get_user_service
from app.core.config import get_db
from app.core.exceptions import unauthorized
from app.core.security import (
    create_access_token,
    create_refresh_token,
    get_current_user,
    verify_refresh_token,
)
from app.models.user import User
from app.schemas.user import (
    LoginRequest,
    RefreshTokenRequest,
    TokenResponse,
    UserCreate,
    UserOut,
)
from app.services.user import UserService

router = APIRouter(prefix="/auth", tags=["Authentication"])


def _issue_tokens(user: User) -> TokenResponse:
    return TokenResponse(
        access_token=create_access_token(data={"sub": str(user.id)}),
        refresh_token=create_refresh_token(data={"sub": str(user.id)}),
        user=UserOut.model_validate(user),
    )


# =====================================================================
# PUBLIC ENDPOINTS - No authentication required
# =====================================================================

@router.post(
    "/signup",
    response_model=UserOut,
    status_code=status.HTTP_201_CREATED,
    summary="Register new user account",
)
def signup(
    user_data: UserCreate,
    db: Session = Depends(get_db),
    service: UserService = Depends(get_user_service),
):
    """
    Register a new user account.

    - **first_name**, **last_name**, **email**: required
    - **password**: required, at least 8 characters
    - **id**: optional, only when assigned by an upstream identity provider
    """
    return service.register_user(db, user_data)


@router.post("/login", response_model=TokenResponse, summary="Login to get access token")
def login(
    login_data: LoginRequest,
    db: Session = Depends(get_db),
    service: UserService = Depends(get_user_service),
):
    """Authenticate with email and password and receive access and refresh tokens."""
    user = service.authenticate_user(db, login_data)
    return _issue_tokens(user)


@router.post("/refresh", response_model=TokenResponse, summary="Refresh access token")
def refresh_token(
    refresh_data: RefreshTokenRequest,
    db: Session = Depends(get_db),
    service: UserService = Depends(get_user_service),
):
    user_id = verify_refresh_token(refresh_data.refresh_token)
    user = service.get_user(db, acting_user_id=user_id, user_id=user_id)
    if not user.is_active:
        raise unauthorized("Account is deactivated")
    return _issue_tokens(user)


# =====================================================================
# USER ENDPOINTS - Authentication required
# =====================================================================

@router.get("/me", response_model=UserOut, summary="Get current user profile")
def get_current_user_profile(current_user: User = Depends(get_current_user)):
    return current_user
