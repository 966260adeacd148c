"""API router for the reporting module."""

from typing import Any, List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import PlainTextResponse

from webstore.core.dependencies import get_report_service
from webstore.core.exceptions import DataUnavailable, InvalidParameter
from webstore.reporting.formatting import render_report
from webstore.reporting.queries import REPORTS
from webstore.reporting.schemas import ReportInfo
from webstore.reporting.service import ReportService

router = APIRouter(prefix="/reports", tags=["reporting"])


def _run_report(
    service: ReportService,
    report_key: str,
    n: Optional[int],
    window_days: Optional[int],
    category: Optional[str],
) -> list:
    if report_key not in REPORTS:
        raise HTTPException(status_code=404, detail=f"Report '{report_key}' not found")
    try:
        return service.run(report_key, n=n, window_days=window_days, category_name=category)
    except InvalidParameter as e:
        raise HTTPException(status_code=400, detail=str(e))
    except DataUnavailable as e:
        raise HTTPException(status_code=503, detail=str(e))


@router.get("/", response_model=List[ReportInfo])
def get_all_reports(service: ReportService = Depends(get_report_service)) -> List[ReportInfo]:
    """List the available reports."""
    return service.list_reports()


@router.get("/{report_key}", response_model=None)
def run_report(
    report_key: str,
    n: Optional[int] = Query(None, description="Number of customers for top-customers"),
    window_days: Optional[int] = Query(None, description="Trailing window for recent-orders"),
    category: Optional[str] = Query(None, description="Category name for category-orders"),
    service: ReportService = Depends(get_report_service),
) -> List[Any]:
    """Run a report and return its rows as JSON."""
    return _run_report(service, report_key, n, window_days, category)


@router.get("/{report_key}/text", response_class=PlainTextResponse, response_model=None)
def run_report_text(
    report_key: str,
    n: Optional[int] = Query(None),
    window_days: Optional[int] = Query(None),
    category: Optional[str] = Query(None),
    service: ReportService = Depends(get_report_service),
) -> str:
    """Run a report and return the console-style text rendering."""
    rows = _run_report(service, report_key, n, window_days, category)
    return render_report(report_key, rows)
