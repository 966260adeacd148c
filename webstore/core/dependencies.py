"""FastAPI dependencies for the reporting API"""

from typing import Annotated
from fastapi import Depends
from sqlalchemy.orm import Session
from webstore.core.database import get_db

# Core database dependency
SessionDep = Annotated[Session, Depends(get_db)]


def get_report_service(db: SessionDep):
    """Get report service backed by a snapshot of the WebStore database"""
    from webstore.reporting.service import ReportService
    from webstore.store.dao import SnapshotDAO

    return ReportService(SnapshotDAO(db))
