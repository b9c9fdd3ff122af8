"""
Authentication Routes

POST /auth/signup - Register and receive a token
POST /auth/login - Login and get JWT token
POST /auth/google - Login with a Google access or ID token
GET /auth/me - Get current user info
POST /auth/logout - Stateless; the client discards its token
"""

import logging

from fastapi import APIRouter, Depends

from careerion.api.deps import get_user_service
from careerion.core.auth import (
    hash_password, verify_password, unusable_password_hash, create_access_token, get_current_user
)
from careerion.core.errors import AuthenticationError, AuthorizationError, NotFoundError, ValidationError
from careerion.schemas.schemas import SignupRequest, LoginRequest, GoogleAuthRequest, MessageResponse
from careerion.services.google_oauth import GoogleTokenVerifier, get_google_verifier
from careerion.services.mongo_service import UserService, public_user

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])

MIN_PASSWORD_LENGTH = 6
BAD_CREDENTIALS = "Invalid email or password"


def _session_payload(message: str, user: dict, **extra) -> dict:
    summary = {
        "_id": str(user["_id"]),
        "name": user.get("name"),
        "email": user["email"],
        "role": user.get("role", "user"),
        "createdAt": user.get("createdAt"),
    }
    summary.update(extra)
    return {"message": message, "user": summary, "token": create_access_token(user)}


@router.post("/signup", status_code=201)
def signup(request: SignupRequest, users: UserService = Depends(get_user_service)):
    """
    Register a new user account and log it in.
    """
    if not request.name or not request.email or not request.password:
        raise ValidationError("All fields are required")
    if len(request.password) < MIN_PASSWORD_LENGTH:
        raise ValidationError(f"Password must be at least {MIN_PASSWORD_LENGTH} characters long")

    user = users.create_user(
        name=request.name,
        email=request.email,
        password_hash=hash_password(request.password),
    )
    logger.info("New user signed up: %s", user["email"])
    return _session_payload("User created successfully", user)


@router.post("/login")
def login(request: LoginRequest, users: UserService = Depends(get_user_service)):
    """
    Login and receive JWT access token.

    Include token in requests: Authorization: Bearer <token>
    Unknown email and wrong password fail identically.
    """
    if not request.email or not request.password:
        raise ValidationError("Email and password are required")

    user = users.find_by_email(request.email)
    if not user or not verify_password(request.password, user.get("password", "")):
        raise AuthenticationError(BAD_CREDENTIALS)

    if not user.get("isActive", True):
        raise AuthorizationError("Account deactivated")

    return _session_payload("Login successful", user)


@router.post("/google")
def google_login(
    request: GoogleAuthRequest,
    users: UserService = Depends(get_user_service),
    verifier: GoogleTokenVerifier = Depends(get_google_verifier)
):
    """
    Exchange a Google token for a Careerion session.

    First login creates the account with an unusable password.
    """
    if not request.token:
        raise ValidationError("token is required")

    profile = verifier.verify(request.token)

    user = users.find_by_email(profile["email"])
    if not user:
        user = users.create_user(
            name=profile.get("name") or "Google User",
            email=profile["email"],
            password_hash=unusable_password_hash(),
        )
        logger.info("Created account from Google login: %s", user["email"])

    if not user.get("isActive", True):
        raise AuthorizationError("Account deactivated")

    return _session_payload("Google login successful", user, avatar=profile.get("picture"))


@router.get("/me")
async def get_me(user: dict = Depends(get_current_user), users: UserService = Depends(get_user_service)):
    """Get current authenticated user's record."""
    doc = users.get_by_id(user["user_id"])
    if not doc:
        raise NotFoundError("User not found")
    return public_user(doc)


@router.post("/logout", response_model=MessageResponse)
async def logout():
    """Nothing to revoke server-side; the client drops its token."""
    return MessageResponse(message="Logged out")
