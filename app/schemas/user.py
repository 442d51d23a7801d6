# schemas/user.py
from pydantic import BaseModel, EmailStr, Field, ConfigDict, field_validator
from typing import Optional
from datetime import datetime


# =====================================================================
# 1. BASE SCHEMAS
# =====================================================================

class UserBase(BaseModel):
    """Public profile fields."""
    first_name: str = Field(..., max_length=100)
    last_name: str = Field(..., max_length=100)
    email: EmailStr

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v: str) -> str:
        return v.lower()


# =====================================================================
# 2. CREATE SCHEMAS
# =====================================================================

class UserCreate(UserBase):
    """Signup payload. ``id`` may be assigned by an upstream identity provider."""
    id: Optional[int] = Field(default=None, gt=0)
    password: Optional[str] = Field(default=None, max_length=128)


# =====================================================================
# 3. UPDATE SCHEMAS
# =====================================================================

class UserUpdate(BaseModel):
    """Partial profile update; ``None`` keeps the stored value."""
    first_name: Optional[str] = Field(default=None, max_length=100)
    last_name: Optional[str] = Field(default=None, max_length=100)
    email: Optional[EmailStr] = None
    password: Optional[str] = Field(default=None, min_length=8, max_length=128)

    @field_validator('email')
    @classmethod
    def normalize_email(cls, v: Optional[str]) -> Optional[str]:
        return v.lower() if v else v


# =====================================================================
# 4. READ SCHEMAS
# =====================================================================

class UserOut(UserBase):
    model_config = ConfigDict(from_attributes=True)

    id: int
    is_active: bool
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


# =====================================================================
# 5. AUTH SCHEMAS
# =====================================================================

class LoginRequest(BaseModel):
    email: EmailStr
    password: str


class RefreshTokenRequest(BaseModel):
    refresh_token: str


class TokenResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    user: UserOut
