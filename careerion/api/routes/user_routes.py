"""
User Profile Routes

GET /user/profile - Get own career profile
POST /user/profile - Replace own career profile
"""

from fastapi import APIRouter, Depends

from careerion.api.deps import get_user_service
from careerion.core.auth import get_current_user
from careerion.core.errors import NotFoundError
from careerion.schemas.schemas import ProfileUpdate
from careerion.services.mongo_service import UserService

router = APIRouter(prefix="/user", tags=["Profile"])


@router.get("/profile")
async def get_profile(user: dict = Depends(get_current_user), users: UserService = Depends(get_user_service)):
    doc = users.get_by_id(user["user_id"])
    if not doc:
        raise NotFoundError("User not found")
    return {"profile": doc.get("profile") or {}, "profileComplete": bool(doc.get("profileComplete"))}


@router.post("/profile")
async def update_profile(
    data: ProfileUpdate,
    user: dict = Depends(get_current_user),
    users: UserService = Depends(get_user_service)
):
    """
    Replace the profile with the allow-listed fields present in the body.
    Fields left out of the body are cleared.
    """
    updated = users.update_profile(user["user_id"], data.model_dump(exclude_unset=True))
    return {
        "message": "Profile updated",
        "profile": updated.get("profile") or {},
        "profileComplete": bool(updated.get("profileComplete")),
    }
