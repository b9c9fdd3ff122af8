"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing with bcrypt
- JWT token creation/verification
- FastAPI dependencies for protected routes
- Role capability checks for the admin panel
"""

import secrets
from datetime import datetime, timedelta
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPBearer, HTTPAuthorizationCredentials
from jose import JWTError, jwt
from passlib.context import CryptContext
from pymongo.database import Database

from careerion.core.config import get_settings
from careerion.core.errors import AuthenticationError, AuthorizationError
from careerion.db.mongodb import get_database
from careerion.services.mongo_service import UserService

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Bearer token extractor. auto_error is off so a missing header produces our
# own 401 body instead of FastAPI's 403.
bearer_scheme = HTTPBearer(auto_error=False)

TOKEN_MISSING = "Authorization token missing"
TOKEN_INVALID = "Invalid or expired token"

ADMIN_ROLES = ("admin", "superadmin")


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash. Malformed hashes never verify."""
    try:
        return pwd_context.verify(plain_password, hashed_password)
    except (ValueError, TypeError):
        return False


def unusable_password_hash() -> str:
    """Hash of a random secret nobody knows; for accounts created via OAuth."""
    return hash_password(secrets.token_urlsafe(32))


def create_access_token(user: dict, expires_delta: Optional[timedelta] = None) -> str:
    """Create JWT access token carrying userId, email and role."""
    settings = get_settings()
    expire = datetime.utcnow() + (expires_delta or timedelta(days=settings.jwt_expire_days))
    to_encode = {
        "userId": str(user["_id"]),
        "email": user["email"],
        "role": user.get("role", "user"),
        "exp": expire,
    }
    return jwt.encode(to_encode, settings.signing_secret, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> Optional[dict]:
    """Decode and verify JWT token. None on bad signature, expiry or garbage."""
    settings = get_settings()
    try:
        return jwt.decode(token, settings.signing_secret, algorithms=[settings.jwt_algorithm])
    except JWTError:
        return None


def _identity(payload: dict) -> Optional[dict]:
    user_id = payload.get("userId")
    if not user_id:
        return None
    return {
        "user_id": user_id,
        "email": payload.get("email"),
        "role": payload.get("role", "user"),
    }


async def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> dict:
    """
    FastAPI dependency - Get current authenticated user.

    Usage:
        @router.get("/protected")
        async def route(user: dict = Depends(get_current_user)):
            return user

    Only the token is checked here; handlers that need the stored record
    load it themselves.
    """
    if credentials is None or not credentials.credentials:
        raise AuthenticationError(TOKEN_MISSING)

    payload = decode_token(credentials.credentials)
    identity = _identity(payload) if payload else None
    if identity is None:
        raise AuthenticationError(TOKEN_INVALID)
    return identity


async def get_optional_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme)
) -> Optional[dict]:
    """Like get_current_user, but returns None instead of failing."""
    if credentials is None or not credentials.credentials:
        return None
    payload = decode_token(credentials.credentials)
    return _identity(payload) if payload else None


def can_assign_role(actor_role: str, target_role: str) -> bool:
    """Admins may hand out the user role; only superadmins may create admins."""
    if actor_role == "superadmin":
        return True
    if actor_role == "admin":
        return target_role == "user"
    return False


def can_manage_user(actor_role: str, target_role: str) -> bool:
    """Editing or deleting an admin account takes a superadmin."""
    return can_assign_role(actor_role, target_role)


def require_roles(*roles: str):
    """
    Dependency factory - authenticate, load the stored user and check role.

    The stored role wins over the one in the token, so demotions take effect
    without waiting for the token to expire.

    Usage:
        router = APIRouter(dependencies=[Depends(require_roles("admin"))])
    """
    async def dependency(
        identity: dict = Depends(get_current_user),
        db: Database = Depends(get_database)
    ) -> dict:
        user = UserService(db).get_by_id(identity["user_id"])
        if not user:
            raise AuthenticationError(TOKEN_INVALID)
        if not user.get("isActive", True):
            raise AuthorizationError("Account deactivated")
        role = user.get("role", "user")
        if role not in roles:
            raise AuthorizationError("Insufficient permissions")
        return {"user_id": str(user["_id"]), "email": user["email"], "role": role}

    return dependency


require_admin = require_roles(*ADMIN_ROLES)
