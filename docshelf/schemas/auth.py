"""
Auth Schemas

Admin panel login. Both tokens are returned on login and on refresh; the
panel sends the access token as ``Authorization: Bearer <token>`` and
trades the refresh token for a new pair when the access token expires.
"""

from uuid import UUID

from pydantic import BaseModel, EmailStr, Field

from docshelf.schemas.common import BaseSchema


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class RefreshRequest(BaseModel):
    refresh_token: str = Field(..., min_length=1)


class AdminDetails(BaseSchema):
    """The signed-in admin, as shown in the panel header."""

    id: UUID
    email: str
    display_name: str


class AuthResponse(BaseModel):
    access_token: str
    refresh_token: str
    token_type: str = "bearer"
    admin: AdminDetails
