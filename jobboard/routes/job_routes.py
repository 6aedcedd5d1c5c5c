from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy.orm import Session
from typing import List, Optional
import uuid

from jobboard.crud import job_crud
from jobboard.database import get_db
from jobboard.exceptions import JobBoardError
from jobboard.models.job import JobType
from jobboard.routes.errors import to_http_exception
from jobboard.schema.auth_schema import CurrentUser
from jobboard.schema.job_schema import JobCreate, JobFilters, JobResponse, JobUpdate
from jobboard.utils.security import get_current_user


router = APIRouter(prefix="/jobs", tags=["jobs"])


@router.post("", response_model=JobResponse, status_code=201)
def create_job(
    job_data: JobCreate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Post a new job (job providers only)"""
    try:
        return job_crud.create_job(db, current_user, **job_data.model_dump())
    except JobBoardError as e:
        raise to_http_exception(e)


@router.get("", response_model=List[JobResponse])
def list_jobs(
    search: Optional[str] = Query(None),
    location: Optional[str] = Query(None),
    job_type: Optional[JobType] = Query(None, alias="jobType"),
    remote: Optional[bool] = Query(None),
    featured: bool = Query(False),
    limit: Optional[int] = Query(None, ge=1),
    db: Session = Depends(get_db)
):
    """Active jobs matching the filters, most recent first"""
    filters = JobFilters(
        search=search,
        location=location,
        job_type=job_type,
        remote=remote,
        featured=featured,
        limit=limit
    )
    return job_crud.get_jobs(db, filters)


@router.get("/featured", response_model=List[JobResponse])
def list_featured_jobs(db: Session = Depends(get_db)):
    return job_crud.get_featured_jobs(db)


@router.get("/{job_id}", response_model=JobResponse)
def get_job(job_id: uuid.UUID, db: Session = Depends(get_db)):
    job = job_crud.get_job_by_id(db, job_id)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job


@router.patch("/{job_id}", response_model=JobResponse)
def update_job(
    job_id: uuid.UUID,
    job_data: JobUpdate,
    db: Session = Depends(get_db),
    current_user: CurrentUser = Depends(get_current_user)
):
    """Edit or archive (status=CLOSED) a posting you own"""
    try:
        job = job_crud.update_job(db, current_user, job_id, **job_data.model_dump(exclude_unset=True))
    except JobBoardError as e:
        raise to_http_exception(e)
    if not job:
        raise HTTPException(status_code=404, detail="Job not found")
    return job
