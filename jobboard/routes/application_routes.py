# jobboard/routes/application_routes.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from typing import List
import uuid

from jobboard.crud import application_crud
from jobboard.database import get_db
from jobboard.exceptions import JobBoardError
from jobboard.routes.errors import to_http_exception
from jobboard.schema.application_schema import (
    ApplicationCreate,
    ApplicationResponse,
    ApplicationStatusUpdate,
    ApplicationWithJobResponse,
    ReceivedApplicationResponse,
)
from jobboard.schema.auth_schema import CurrentUser
from jobboard.schema.profile_schema import SuccessResponse
from jobboard.utils.security import get_current_user

router = APIRouter(prefix="/applications", tags=["applications"])


# ===== JOB SEEKER ROUTES =====

@router.post("", response_model=ApplicationResponse, status_code=201)
def apply_to_job(
    application_data: ApplicationCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Job seeker applies to a job"""
    try:
        return application_crud.apply_for_job(
            db,
            current_user,
            job_id=application_data.job_id,
            cover_letter=application_data.cover_letter
        )
    except JobBoardError as e:
        raise to_http_exception(e)


@router.get("/mine", response_model=List[ApplicationWithJobResponse])
def get_my_applications(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Get all applications by current job seeker"""
    try:
        return application_crud.get_job_seeker_applications(db, current_user)
    except JobBoardError as e:
        raise to_http_exception(e)


# ===== JOB PROVIDER ROUTES =====

@router.get("/received", response_model=List[ReceivedApplicationResponse])
def get_received_applications(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Get all applications across the provider's jobs"""
    try:
        return application_crud.get_job_provider_applications(db, current_user)
    except JobBoardError as e:
        raise to_http_exception(e)


@router.patch("/{application_id}/status", response_model=SuccessResponse)
def update_application_status(
    application_id: uuid.UUID,
    update_data: ApplicationStatusUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Job provider updates application status"""
    try:
        return application_crud.update_application_status(
            db,
            current_user,
            application_id=application_id,
            status=update_data.status
        )
    except JobBoardError as e:
        raise to_http_exception(e)
