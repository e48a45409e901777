"""
service.py - Violation service.

Validates incoming reports, resolves statute metadata, builds immutable
records and answers read / query / aggregation requests.

INVARIANTS:
1. violation.* is a snapshot of the registry entry at submission time
2. Rejected reports (missing field, unknown statute) persist nothing
3. Listings are most-recent-first (index order)
4. Every query reads the full index and every record (no caching)
"""

import logging
import uuid
from collections import Counter
from collections.abc import Callable
from dataclasses import dataclass
from datetime import UTC, datetime, timedelta

from mcpolice.errors import NotFoundError, UnknownStatuteError, ValidationError
from mcpolice.models.statute import Severity, StatuteInfo, get_all_statutes, get_statute_info
from mcpolice.schemas.violation import (
    ViolationDetails,
    ViolationMetadata,
    ViolationReport,
    ViolationStats,
)
from mcpolice.store.violation_store import ViolationStore

logger = logging.getLogger(__name__)

REPORT_PROTOCOL_VERSION = "1.0"
RECENT_WINDOW = timedelta(hours=24)

Clock = Callable[[], datetime]


def _utcnow() -> datetime:
    return datetime.now(UTC)


@dataclass
class QueryResult:
    """A page of violations plus the filtered total."""

    violations: list[ViolationReport]
    total: int
    has_more: bool


class ViolationService:
    """
    Entry point for both transports.

    The store is injected; nothing here holds process-wide state.
    """

    def __init__(self, store: ViolationStore, clock: Clock = _utcnow):
        self.store = store
        self.clock = clock

    def submit(
        self,
        statute: str | None,
        responsible_organization: str | None,
        offending_content: str | None,
    ) -> ViolationReport:
        """
        Validate and persist a violation report.

        Raises:
            ValidationError: any of the three fields is empty or absent
            UnknownStatuteError: statute has no registry entry
            StoreError: backend failure
        """
        fields = {
            "statute": statute,
            "responsible_organization": responsible_organization,
            "offending_content": offending_content,
        }
        missing = [name for name, value in fields.items() if not value]
        if missing:
            raise ValidationError(missing)

        statute_info = get_statute_info(statute)
        if statute_info is None:
            raise UnknownStatuteError(statute)

        # timestamp and reportedAt are read from the clock separately
        record = ViolationReport(
            id=str(uuid.uuid4()),
            timestamp=self.clock().isoformat(),
            statute=statute,
            responsible_organization=responsible_organization,
            offending_content=offending_content,
            violation=ViolationDetails(
                description=statute_info.description,
                severity=statute_info.severity,
                jurisdiction=list(statute_info.jurisdiction),
            ),
            metadata=ViolationMetadata(
                reported_at=self.clock().isoformat(),
                protocol_version=REPORT_PROTOCOL_VERSION,
                detected_by=f"{responsible_organization} Safety System",
            ),
        )

        self.store.append(record)
        logger.info(
            "Violation reported: id=%s statute=%r severity=%s by=%s",
            record.id,
            statute,
            statute_info.severity.value,
            responsible_organization,
        )
        return record

    def get(self, violation_id: str) -> ViolationReport:
        record = self.store.get_by_id(violation_id)
        if record is None:
            raise NotFoundError(violation_id)
        return record

    def query(
        self,
        severity: Severity | str | None = None,
        jurisdiction: str | None = None,
        limit: int = 50,
        offset: int = 0,
    ) -> QueryResult:
        """
        Filter all violations and return one page.

        `total` counts matches before pagination; `has_more` is
        offset + limit < total.
        """
        filtered = list(self.store.iter_records())

        if severity:
            filtered = [v for v in filtered if v.violation.severity == severity]
        if jurisdiction:
            filtered = [v for v in filtered if jurisdiction in v.violation.jurisdiction]

        total = len(filtered)
        return QueryResult(
            violations=filtered[offset : offset + limit],
            total=total,
            has_more=offset + limit < total,
        )

    def stats(self) -> ViolationStats:
        """Aggregate counts in a single pass over every stored record."""
        cutoff = self.clock() - RECENT_WINDOW

        total = 0
        by_severity: Counter[str] = Counter()
        by_jurisdiction: Counter[str] = Counter()
        by_organization: Counter[str] = Counter()
        recent = 0

        for v in self.store.iter_records():
            total += 1
            by_severity[v.violation.severity.value] += 1
            for j in v.violation.jurisdiction:
                by_jurisdiction[j] += 1
            by_organization[v.responsible_organization] += 1
            if _parse_timestamp(v.timestamp) > cutoff:
                recent += 1

        return ViolationStats(
            total=total,
            by_severity=dict(by_severity),
            by_jurisdiction=dict(by_jurisdiction),
            by_organization=dict(by_organization),
            recent_24h=recent,
        )

    def clear(self) -> int:
        """Remove every violation. Returns how many ids the index held."""
        count = self.store.clear_all()
        logger.warning("Administrative clear removed %d violations", count)
        return count

    def list_statutes(self) -> list[StatuteInfo]:
        return get_all_statutes()


def _parse_timestamp(value: str) -> datetime:
    parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=UTC)
    return parsed
