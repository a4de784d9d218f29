"""Routes that raise every salary of a company."""

from __future__ import annotations

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from payroll_api.application.use_cases.salaries import (
    increase_salaries as increase_salaries_uc,
    increase_salaries_with_sql as increase_salaries_with_sql_uc,
)
from payroll_api.infrastructure.database import get_db

router = APIRouter(tags=["salaries"])

@router.put("/increase-salaries", status_code=status.HTTP_204_NO_CONTENT)
def increase_salaries(
    company_id: int = Query(..., alias="companyId", description="Company identifier"),
    db: Session = Depends(get_db),
) -> Response:
    """Raise salaries by loading every employee and saving each change.

    Issues one ``UPDATE`` per employee plus one for the company.
    """

    try:
        increase_salaries_uc(db, company_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.put("/increase-salaries-sql", status_code=status.HTTP_204_NO_CONTENT)
def increase_salaries_with_sql(
    company_id: int = Query(..., alias="companyId", description="Company identifier"),
    db: Session = Depends(get_db),
) -> Response:
    """Raise salaries with one bulk ``UPDATE`` inside a transaction."""

    try:
        increase_salaries_with_sql_uc(db, company_id)
    except ValueError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc
    return Response(status_code=status.HTTP_204_NO_CONTENT)
