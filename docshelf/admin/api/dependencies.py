"""
API Dependencies

Bearer-token authentication for the admin API. Reader endpoints take no
credentials; every admin route resolves ``CurrentAdmin`` first.
"""

from typing import Annotated, Optional
from uuid import UUID

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from docshelf.core.exceptions import AuthenticationError
from docshelf.core.security import TokenType, read_token
from docshelf.db.repositories import AdminUserRepository
from docshelf.dependencies import DbSession
from docshelf.models import AdminUser


# Shows the "Authorize" button in Swagger UI
bearer_scheme = HTTPBearer(auto_error=False)


async def get_admin_id(
    credentials: Annotated[
        Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)
    ],
) -> UUID:
    """Read the admin id from the access token in the Authorization header.

    Raises:
        AuthenticationError: Header missing, or the token is invalid,
            expired or a refresh token
    """
    if not credentials:
        raise AuthenticationError("Authorization header required")

    admin_id = read_token(credentials.credentials, TokenType.ACCESS)
    if not admin_id:
        raise AuthenticationError("Invalid or expired token")

    return admin_id


async def get_current_admin(
    admin_id: Annotated[UUID, Depends(get_admin_id)],
    db: DbSession,
) -> AdminUser:
    """Load the authenticated admin.

    Raises:
        AuthenticationError: If the admin no longer exists or is inactive
    """
    admin = await AdminUserRepository(db).get(admin_id)

    if not admin or not admin.is_active:
        raise AuthenticationError("Admin not found or inactive")

    return admin


CurrentAdmin = Annotated[AdminUser, Depends(get_current_admin)]
