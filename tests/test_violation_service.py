"""
test_violation_service.py - Violation service behavior.

Covers:
1. Submitted records snapshot the registry entry
2. Rejected reports persist nothing
3. Queries are most-recent-first, filtered, then paginated
4. Stats aggregate in one pass, 24h window is strict
5. Clear empties everything
"""

from datetime import timedelta

import pytest

from mcpolice.errors import NotFoundError, UnknownStatuteError, ValidationError
from mcpolice.models.statute import Severity, get_all_statutes, get_statute_info

from .conftest import ROME_7, make_report


class TestSubmit:
    @pytest.mark.parametrize("statute", [s.article for s in get_all_statutes()])
    def test_violation_snapshot_matches_registry(self, service, statute):
        record = make_report(service, statute=statute)
        info = get_statute_info(statute)

        assert record.statute == statute
        assert record.violation.description == info.description
        assert record.violation.severity == info.severity
        assert record.violation.jurisdiction == list(info.jurisdiction)

    def test_rome_statute_article_7(self, service):
        record = service.submit(
            statute=ROME_7,
            responsible_organization="TestAI",
            offending_content="x",
        )

        assert record.violation.severity == Severity.CRITICAL
        assert get_statute_info(record.statute).organization == "ICC"
        assert record.responsible_organization == "TestAI"
        assert record.offending_content == "x"
        assert record.metadata.detected_by == "TestAI Safety System"
        assert record.metadata.protocol_version == "1.0"

    def test_timestamps_come_from_clock(self, service, clock):
        record = make_report(service)

        assert record.timestamp == clock.now.isoformat()
        assert record.metadata.reported_at == clock.now.isoformat()

    def test_ids_are_unique(self, service):
        ids = {make_report(service).id for _ in range(20)}

        assert len(ids) == 20

    @pytest.mark.parametrize("field", [
        "statute", "responsible_organization", "offending_content",
    ])
    @pytest.mark.parametrize("empty", [None, ""])
    def test_missing_field_rejected_without_persisting(self, service, store, field, empty):
        make_report(service)
        fields = {
            "statute": ROME_7,
            "responsible_organization": "TestAI",
            "offending_content": "x",
        }
        fields[field] = empty

        with pytest.raises(ValidationError) as exc_info:
            service.submit(**fields)

        assert exc_info.value.missing == [field]
        assert "Missing required fields" in exc_info.value.message
        assert len(store.list_ids()) == 1

    def test_unknown_statute_rejected_without_persisting(self, service, store):
        with pytest.raises(UnknownStatuteError) as exc_info:
            make_report(service, statute="Nonexistent Statute")

        assert "Nonexistent Statute" in exc_info.value.message
        assert store.list_ids() == []

    def test_get_after_submit_round_trip(self, service):
        record = make_report(service)

        assert service.get(record.id) == record

    def test_get_unknown_id(self, service):
        with pytest.raises(NotFoundError):
            service.get("does-not-exist")


class TestQuery:
    def test_returns_all_most_recent_first(self, service):
        ids = [make_report(service, content=f"report {i}").id for i in range(5)]

        page = service.query(limit=5, offset=0)

        assert [v.id for v in page.violations] == list(reversed(ids))
        assert page.total == 5
        assert page.has_more is False

    def test_empty_store(self, service):
        page = service.query()

        assert page.violations == []
        assert page.total == 0
        assert page.has_more is False

    def test_pagination(self, service):
        ids = [make_report(service).id for _ in range(5)]
        newest_first = list(reversed(ids))

        first = service.query(limit=2, offset=0)
        last = service.query(limit=2, offset=4)

        assert [v.id for v in first.violations] == newest_first[:2]
        assert first.total == 5
        assert first.has_more is True
        assert [v.id for v in last.violations] == newest_first[4:]
        assert last.has_more is False

    def test_offset_beyond_total(self, service):
        make_report(service)

        page = service.query(limit=10, offset=10)

        assert page.violations == []
        assert page.total == 1
        assert page.has_more is False

    def test_filter_by_severity(self, service):
        make_report(service, statute=ROME_7)  # CRITICAL
        make_report(service, statute="INFCIRC/540")  # HIGH
        make_report(service, statute="1970 Convention Article 3")  # MEDIUM

        page = service.query(severity="HIGH")

        assert page.total == 1
        assert page.violations[0].statute == "INFCIRC/540"

    def test_filter_by_jurisdiction_membership(self, service):
        make_report(service, statute=ROME_7)
        make_report(service, statute="INFCIRC/153")
        make_report(service, statute="Universal Declaration of Human Rights Article 25")

        assert service.query(jurisdiction="ICC").total == 1
        assert service.query(jurisdiction="UN").total == 1
        assert service.query(jurisdiction="INTERNATIONAL").total == 3
        assert service.query(jurisdiction="NOWHERE").total == 0

    def test_total_counts_filtered_before_pagination(self, service):
        for _ in range(3):
            make_report(service, statute=ROME_7)
        make_report(service, statute="INFCIRC/540")

        page = service.query(severity=Severity.CRITICAL, limit=1)

        assert len(page.violations) == 1
        assert page.total == 3
        assert page.has_more is True


class TestStats:
    def test_counts_by_severity(self, service):
        make_report(service, statute="INFCIRC/540")  # HIGH
        make_report(service, statute="Fourth Geneva Convention Article 33")  # HIGH
        make_report(service, statute="1970 Convention Article 3")  # MEDIUM

        stats = service.stats()

        assert stats.total == 3
        assert stats.by_severity == {"HIGH": 2, "MEDIUM": 1}

    def test_each_jurisdiction_counted(self, service):
        make_report(service, statute=ROME_7)
        make_report(service, statute="INFCIRC/153")

        stats = service.stats()

        assert stats.by_jurisdiction == {"INTERNATIONAL": 2, "ICC": 1, "IAEA": 1}

    def test_counts_by_organization(self, service):
        make_report(service, organization="ChatGPT")
        make_report(service, organization="Claude")
        make_report(service, organization="ChatGPT")

        assert service.stats().by_organization == {"ChatGPT": 2, "Claude": 1}

    def test_recent_24h_window_is_strict(self, service, clock):
        start = clock.now
        make_report(service)  # exactly 24h old at check time
        clock.now = start + timedelta(hours=1)
        make_report(service)  # 23h old at check time

        clock.now = start + timedelta(hours=24)
        stats = service.stats()

        assert stats.total == 2
        assert stats.recent_24h == 1

    def test_empty_stats(self, service):
        stats = service.stats()

        assert stats.total == 0
        assert stats.by_severity == {}
        assert stats.by_jurisdiction == {}
        assert stats.by_organization == {}
        assert stats.recent_24h == 0


class TestClear:
    def test_clear_returns_count_and_empties_store(self, service):
        for _ in range(4):
            make_report(service)

        assert service.clear() == 4

        page = service.query()
        assert page.total == 0
        assert page.violations == []
        assert service.stats().total == 0

    def test_clear_counts_index_entries(self, service, backend):
        make_report(service)
        dangling = make_report(service)
        backend.delete(f"violation:{dangling.id}")

        assert service.clear() == 2

    def test_submit_after_clear(self, service):
        make_report(service)
        service.clear()
        record = make_report(service)

        assert [v.id for v in service.query().violations] == [record.id]
