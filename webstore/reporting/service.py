# webstore/reporting/service.py
"""Service layer tying the snapshot loader to the report queries."""

import time
import logging
from typing import Iterable, List, Optional, Tuple

from webstore.core.exceptions import InvalidParameter, ReportError
from webstore.store.dao import SnapshotDAO
from webstore.store.snapshot import Snapshot
from webstore.reporting.queries import REPORTS, ReportDefinition, iter_reports
from webstore.reporting.schemas import ReportInfo

logger = logging.getLogger(__name__)


class ReportService:
    """Runs named reports against a snapshot loaded once per call."""

    def __init__(self, snapshot_dao: SnapshotDAO):
        self.snapshot_dao = snapshot_dao

    def list_reports(self) -> List[ReportInfo]:
        return [ReportInfo(key=d.key, title=d.title) for d in iter_reports()]

    def get_definition(self, key: str) -> ReportDefinition:
        try:
            return REPORTS[key]
        except KeyError:
            raise InvalidParameter("report", key, "unknown report key") from None

    def load_snapshot(self) -> Snapshot:
        return self.snapshot_dao.load_snapshot()

    def run(self, key: str, snapshot: Optional[Snapshot] = None, **params) -> list:
        """Run one report, loading a fresh snapshot unless one is given."""
        definition = self.get_definition(key)
        if snapshot is None:
            snapshot = self.load_snapshot()
        return self._execute(definition, snapshot, params)

    def run_many(self, keys: Optional[Iterable[str]] = None, **params) -> List[Tuple[ReportDefinition, list]]:
        """Run several reports (all by default) against one shared snapshot."""
        definitions = iter_reports(keys)
        snapshot = self.load_snapshot()
        return [(definition, self._execute(definition, snapshot, params)) for definition in definitions]

    def _execute(self, definition: ReportDefinition, snapshot: Snapshot, params: dict) -> list:
        start_time = time.time()
        try:
            rows = definition.run(snapshot, **params)
        except ReportError as e:
            logger.error(f"Report '{definition.key}' failed: {e}")
            raise
        elapsed_ms = (time.time() - start_time) * 1000
        logger.info(f"Report '{definition.key}' returned {len(rows)} rows in {elapsed_ms:.1f} ms")
        return rows
