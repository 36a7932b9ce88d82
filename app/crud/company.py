"""
CRUD operations for Company model.

Partial updates and filtered listings are expressed as SQL fragments built by
app.core.sql and executed as text clauses.
"""

from typing import Any, List, Mapping, Optional
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.exceptions import ConflictError, NotFoundError
from app.core.sql import bind_params, sql_for_company_filter, sql_for_partial_update
from app.models.company import Company
from app.schemas.company import CompanyCreateRequest

# Request field name -> column name, for fields whose names differ
COLUMN_ALIASES = {
    "numEmployees": "num_employees",
    "logoUrl": "logo_url",
}


def create(db: Session, company_data: CompanyCreateRequest) -> Company:
    """
    Create a new company.

    Raises:
        ConflictError: If the handle or name is already taken
    """
    if get_by_handle(db, company_data.handle):
        raise ConflictError(f"Duplicate company: {company_data.handle}")

    db_company = Company(**company_data.model_dump())
    db.add(db_company)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise ConflictError(f"Duplicate company name: {company_data.name}")
    db.refresh(db_company)

    return db_company


def get_by_handle(db: Session, handle: str) -> Optional[Company]:
    return db.get(Company, handle)


def get(db: Session, handle: str) -> Company:
    """
    Retrieve a company by handle.

    Raises:
        NotFoundError: If no such company exists
    """
    company = get_by_handle(db, handle)
    if company is None:
        raise NotFoundError(f"No company: {handle}")
    return company


def get_multi(db: Session, filters: Optional[Mapping[str, Any]] = None) -> List[Company]:
    """
    List companies ordered by name, optionally filtered.

    Args:
        db: Database session
        filters: Raw query parameters (minEmployees, maxEmployees, nameLike)

    Raises:
        BadParameterError: If a numeric filter is not a number
    """
    query = db.query(Company)

    clause = sql_for_company_filter(filters or {})
    if clause is not None:
        where, params = bind_params(clause.where_clause, clause.values)
        query = query.filter(where.bindparams(**params))

    return query.order_by(Company.name).all()


def update(db: Session, handle: str, data: Mapping[str, Any]) -> Company:
    """
    Update only the supplied fields of a company.

    Args:
        db: Database session
        handle: Company to update
        data: Request field name -> new value (camelCase names)

    Raises:
        InvalidInputError: If data is empty
        NotFoundError: If no such company exists
        ConflictError: If the new name is already taken
    """
    clause = sql_for_partial_update(data, COLUMN_ALIASES)
    handle_idx = len(clause.values) + 1
    statement, params = bind_params(
        f"UPDATE companies SET {clause.set_clause} WHERE handle = ${handle_idx}",
        [*clause.values, handle],
    )

    try:
        result = db.execute(statement, params)
    except IntegrityError:
        db.rollback()
        raise ConflictError(f"Duplicate company name: {data.get('name')}")

    if result.rowcount == 0:
        db.rollback()
        raise NotFoundError(f"No company: {handle}")

    db.commit()
    return get(db, handle)


def delete(db: Session, handle: str) -> None:
    """
    Delete a company and its jobs.

    Raises:
        NotFoundError: If no such company exists
    """
    company = get(db, handle)
    db.delete(company)
    db.commit()
