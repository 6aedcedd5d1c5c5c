# jobboard/routes/profile_routes.py
from typing import Any, Dict

from fastapi import APIRouter, Body, Depends, HTTPException, status
from pydantic import TypeAdapter, ValidationError
from sqlalchemy.orm import Session

from jobboard.crud import profile_crud, user_crud
from jobboard.database import get_db
from jobboard.exceptions import JobBoardError
from jobboard.models.user import UserRole
from jobboard.routes.errors import to_http_exception
from jobboard.schema.auth_schema import CurrentUser
from jobboard.schema.profile_schema import (
    JobProviderProfileUpdate,
    JobSeekerProfileUpdate,
    SuccessResponse,
)
from jobboard.schema.user_schema import UserProfileResponse
from jobboard.utils.security import get_current_user

router = APIRouter(prefix="/profile", tags=["profile"])

user_profile_adapter = TypeAdapter(UserProfileResponse)


@router.get("", response_model=UserProfileResponse)
def get_profile(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Current user with the profile of its role"""
    user = user_crud.get_user_profile(db, current_user)
    if not user:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="User not found")
    return user_profile_adapter.validate_python(user, from_attributes=True)


@router.put("", response_model=SuccessResponse)
def update_profile(
    data: Dict[str, Any] = Body(...),
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Save profile fields - the profile row is created on first save"""
    # The body shape depends on the caller's role
    schema = JobSeekerProfileUpdate if current_user.role == UserRole.JOB_SEEKER else JobProviderProfileUpdate
    try:
        update_data = schema.model_validate(data).model_dump(exclude_unset=True)
    except ValidationError as e:
        raise HTTPException(
            status_code=422,
            detail=e.errors(include_url=False, include_context=False)
        )

    try:
        return profile_crud.update_profile(db, current_user, update_data, current_user.role)
    except JobBoardError as e:
        raise to_http_exception(e)
