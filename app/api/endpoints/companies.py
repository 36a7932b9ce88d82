"""
Company endpoints.

Reads are public; writes require an admin.
"""

import logging
from typing import Optional
from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from app.core.database import get_db
from app.core.deps import get_admin_user
from app.crud import company as company_crud
from app.models.user import User
from app.schemas.company import (
    CompanyCreateRequest,
    CompanyDetailEnvelope,
    CompanyEnvelope,
    CompanyListResponse,
    CompanyUpdateRequest,
)

router = APIRouter(prefix="/companies", tags=["Companies"])
logger = logging.getLogger(__name__)


@router.post("/", status_code=201, response_model=CompanyEnvelope)
def create_company(
    request: CompanyCreateRequest,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """Create a company. Admin only."""
    company = company_crud.create(db, request)
    logger.info(f"Admin {admin_user.username} created company {company.handle}")
    return {"company": company}


@router.get("/", response_model=CompanyListResponse)
def list_companies(
    min_employees: Optional[str] = Query(None, alias="minEmployees"),
    max_employees: Optional[str] = Query(None, alias="maxEmployees"),
    name_like: Optional[str] = Query(None, alias="nameLike"),
    db: Session = Depends(get_db)
):
    """
    List companies, optionally filtered.

    Args:
        minEmployees: Only companies with at least this many employees
        maxEmployees: Only companies with at most this many employees
        nameLike: Case-insensitive substring of the company handle

    Numeric filters are validated here rather than by FastAPI so that a bad
    value is reported with the parameter name.
    """
    filters = {
        "minEmployees": min_employees,
        "maxEmployees": max_employees,
        "nameLike": name_like,
    }
    return {"companies": company_crud.get_multi(db, filters)}


@router.get("/{handle}", response_model=CompanyDetailEnvelope)
def get_company(handle: str, db: Session = Depends(get_db)):
    """Retrieve a company with its jobs."""
    return {"company": company_crud.get(db, handle)}


@router.patch("/{handle}", response_model=CompanyEnvelope)
def update_company(
    handle: str,
    request: CompanyUpdateRequest,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """
    Update the fields present in the body. Admin only.

    An empty body is rejected with 400.
    """
    data = request.model_dump(exclude_unset=True, by_alias=True)
    company = company_crud.update(db, handle, data)
    logger.info(f"Admin {admin_user.username} updated company {handle}: {sorted(data)}")
    return {"company": company}


@router.delete("/{handle}")
def delete_company(
    handle: str,
    db: Session = Depends(get_db),
    admin_user: User = Depends(get_admin_user)
):
    """Delete a company and its jobs. Admin only."""
    company_crud.delete(db, handle)
    logger.info(f"Admin {admin_user.username} deleted company {handle}")
    return {"deleted": handle}
