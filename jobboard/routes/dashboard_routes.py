from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from jobboard.crud import dashboard_crud
from jobboard.database import get_db
from jobboard.exceptions import JobBoardError
from jobboard.routes.errors import to_http_exception
from jobboard.schema.auth_schema import CurrentUser
from jobboard.schema.dashboard_schema import JobProviderDashboardResponse, JobSeekerDashboardResponse
from jobboard.utils.security import get_current_user

router = APIRouter(prefix="/dashboard", tags=["dashboard"])


@router.get("/job-seeker", response_model=JobSeekerDashboardResponse)
def job_seeker_dashboard(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    try:
        return dashboard_crud.get_job_seeker_dashboard_data(db, current_user)
    except JobBoardError as e:
        raise to_http_exception(e)


@router.get("/job-provider", response_model=JobProviderDashboardResponse)
def job_provider_dashboard(
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    try:
        return dashboard_crud.get_job_provider_dashboard_data(db, current_user)
    except JobBoardError as e:
        raise to_http_exception(e)
