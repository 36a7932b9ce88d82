import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user
from app.crud import job as job_crud
from app.models.user import User
from app.schemas.job import JobCreateRequest, JobEnvelope, JobListResponse, JobUpdateRequest

router = APIRouter(prefix="/jobs", tags=["Jobs"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=JobEnvelope)
def create_job(
    request: JobCreateRequest,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """Create a job posting for an existing company. Admin only."""
    new_job = job_crud.create(db, request)
    logger.info(f"Created job {new_job.id}: {new_job.title} ({new_job.company_handle})")
    return {"job": new_job}


@router.get("/", response_model=JobListResponse)
def list_jobs(
    min_salary: Optional[str] = Query(None, alias="minSalary"),
    has_equity: Optional[str] = Query(None, alias="hasEquity"),
    title: Optional[str] = None,
    db: Session = Depends(get_db)
):
    """
    List jobs, optionally filtered.

    Args:
        minSalary: Only jobs paying at least this much
        hasEquity: When true, only jobs offering a non-zero equity share
        title: Case-insensitive substring of the job title
    """
    filters = {
        "minSalary": min_salary,
        "hasEquity": has_equity,
        "title": title,
    }
    return {"jobs": job_crud.get_multi(db, filters)}


@router.get("/{job_id}", response_model=JobEnvelope)
def get_job(job_id: int, db: Session = Depends(get_db)):
    """Retrieve a job by ID."""
    return {"job": job_crud.get(db, job_id)}


@router.patch("/{job_id}", response_model=JobEnvelope)
def update_job(
    job_id: int,
    request: JobUpdateRequest,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """Update title, salary and/or equity. Admin only."""
    data = request.model_dump(exclude_unset=True, by_alias=True)
    job = job_crud.update(db, job_id, data)
    logger.info(f"Updated job {job_id}: {sorted(data)}")
    return {"job": job}


@router.delete("/{job_id}")
def delete_job(
    job_id: int,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """Delete a job by ID. Admin only."""
    job_crud.delete(db, job_id)
    logger.info(f"Deleted job {job_id}")
    return {"deleted": job_id}
