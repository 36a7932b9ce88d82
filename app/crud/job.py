"""
CRUD operations for Job model.

Implements the Repository pattern to encapsulate all database operations
for jobs, providing a clean interface for the API layer.
"""

from typing import Any, List, Mapping, Optional
from sqlalchemy.orm import Session

from app.core.exceptions import NotFoundError
from app.core.sql import bind_params, sql_for_job_filter, sql_for_partial_update
from app.crud import company as company_crud
from app.models.job import Job
from app.schemas.job import JobCreateRequest

# title, salary and equity are stored under their own names
COLUMN_ALIASES: Mapping[str, str] = {}


def create(db: Session, job_data: JobCreateRequest) -> Job:
    """
    Create a new job for an existing company.

    Raises:
        NotFoundError: If the company does not exist
    """
    company_crud.get(db, job_data.company_handle)

    db_job = Job(
        title=job_data.title,
        salary=job_data.salary,
        equity=job_data.equity,
        company_handle=job_data.company_handle,
    )

    db.add(db_job)
    db.commit()
    db.refresh(db_job)

    return db_job


def get_by_id(db: Session, job_id: int) -> Optional[Job]:
    return db.get(Job, job_id)


def get(db: Session, job_id: int) -> Job:
    """
    Retrieve a job by its ID.

    Raises:
        NotFoundError: If no such job exists
    """
    job = get_by_id(db, job_id)
    if job is None:
        raise NotFoundError(f"No job: {job_id}")
    return job


def get_multi(db: Session, filters: Optional[Mapping[str, Any]] = None) -> List[Job]:
    """
    List jobs ordered by title, optionally filtered.

    Args:
        db: Database session
        filters: Raw query parameters (minSalary, hasEquity, title)

    Raises:
        BadParameterError: If minSalary is not a number
    """
    query = db.query(Job)

    clause = sql_for_job_filter(filters or {})
    if clause is not None:
        where, params = bind_params(clause.where_clause, clause.values)
        query = query.filter(where.bindparams(**params))

    return query.order_by(Job.title, Job.id).all()


def update(db: Session, job_id: int, data: Mapping[str, Any]) -> Job:
    """
    Update only the supplied fields of a job.

    Raises:
        InvalidInputError: If data is empty
        NotFoundError: If no such job exists
    """
    clause = sql_for_partial_update(data, COLUMN_ALIASES)
    id_idx = len(clause.values) + 1
    statement, params = bind_params(
        f"UPDATE jobs SET {clause.set_clause} WHERE id = ${id_idx}",
        [*clause.values, job_id],
    )

    result = db.execute(statement, params)
    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError(f"No job: {job_id}")

    db.commit()
    return get(db, job_id)


def delete(db: Session, job_id: int) -> None:
    """
    Delete a job by ID.

    Raises:
        NotFoundError: If no such job exists
    """
    job = get(db, job_id)
    db.delete(job)
    db.commit()
