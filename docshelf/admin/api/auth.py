"""
Authentication Endpoints

Admin login, token refresh and session lookup.
"""

from fastapi import APIRouter

from docshelf.admin.api.dependencies import CurrentAdmin
from docshelf.core.exceptions import AuthenticationError
from docshelf.core.logging import logger
from docshelf.core.security import TokenType, issue_token, read_token, verify_password
from docshelf.db.repositories import AdminUserRepository
from docshelf.dependencies import DbSession
from docshelf.models import AdminUser
from docshelf.schemas.auth import AdminDetails, AuthResponse, LoginRequest, RefreshRequest
from docshelf.schemas.converters import to_admin_details


router = APIRouter()


def _issue_tokens(admin: AdminUser) -> AuthResponse:
    return AuthResponse(
        access_token=issue_token(admin.id, TokenType.ACCESS),
        refresh_token=issue_token(admin.id, TokenType.REFRESH),
        admin=to_admin_details(admin),
    )


@router.post("/login", response_model=AuthResponse)
async def login(
    request: LoginRequest,
    db: DbSession,
) -> AuthResponse:
    """Authenticate an admin and return tokens with admin details.

    Raises:
        AuthenticationError: Unknown email, inactive admin or wrong password
    """
    admin = await AdminUserRepository(db).get_by_email(request.email)

    if not admin or not admin.is_active:
        raise AuthenticationError("Invalid credentials")

    if not verify_password(request.password, admin.password_hash):
        logger.warning("Admin login failed", admin_id=str(admin.id))
        raise AuthenticationError("Invalid credentials")

    logger.info("Admin logged in", admin_id=str(admin.id))
    return _issue_tokens(admin)


@router.post("/refresh", response_model=AuthResponse)
async def refresh_tokens(
    request: RefreshRequest,
    db: DbSession,
) -> AuthResponse:
    """Exchange a refresh token for a new token pair.

    Raises:
        AuthenticationError: Invalid refresh token or admin gone
    """
    admin_id = read_token(request.refresh_token, TokenType.REFRESH)
    if not admin_id:
        raise AuthenticationError("Invalid refresh token")

    admin = await AdminUserRepository(db).get(admin_id)

    if not admin or not admin.is_active:
        raise AuthenticationError("Admin not found or inactive")

    return _issue_tokens(admin)


@router.get("/me", response_model=AdminDetails)
async def get_me(current_admin: CurrentAdmin) -> AdminDetails:
    """Get the authenticated admin."""
    return to_admin_details(current_admin)
