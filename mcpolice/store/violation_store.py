"""
violation_store.py - Violation records and the chronological id index.

KEY LAYOUT:
- violation:<id>   -> JSON-serialized ViolationReport (camelCase)
- violation_list   -> JSON array of ids, most-recent-first

CONSISTENCY:
append() writes the record first and then prepends the id to the index.
The two writes are not a transaction: a crash in between leaves a record
that no index entry points to. The index update itself is atomic in every
backend, so concurrent appends never drop an id.
"""

import json
import logging
from collections.abc import Iterator

from mcpolice.schemas.violation import ViolationReport
from mcpolice.store.base import KeyValueBackend

logger = logging.getLogger(__name__)

RECORD_KEY_PREFIX = "violation:"
INDEX_KEY = "violation_list"


def record_key(violation_id: str) -> str:
    return f"{RECORD_KEY_PREFIX}{violation_id}"


def _decode_index(raw: str | None) -> list[str]:
    return json.loads(raw) if raw else []


class ViolationStore:
    def __init__(self, backend: KeyValueBackend) -> None:
        self.backend = backend

    def append(self, record: ViolationReport) -> None:
        """Persist a record, then prepend its id to the index."""
        self.backend.put(record_key(record.id), record.model_dump_json(by_alias=True))

        def _prepend(raw: str | None) -> str:
            ids = _decode_index(raw)
            ids.insert(0, record.id)
            return json.dumps(ids)

        self.backend.update(INDEX_KEY, _prepend)
        logger.debug("Stored violation %s", record.id)

    def get_by_id(self, violation_id: str) -> ViolationReport | None:
        raw = self.backend.get(record_key(violation_id))
        if raw is None:
            return None
        return ViolationReport.model_validate_json(raw)

    def list_ids(self) -> list[str]:
        return _decode_index(self.backend.get(INDEX_KEY))

    def iter_records(self) -> Iterator[ViolationReport]:
        """Yield records in index order. Ids without a record are skipped."""
        for violation_id in self.list_ids():
            record = self.get_by_id(violation_id)
            if record is None:
                logger.warning("Index entry %s has no stored record", violation_id)
                continue
            yield record

    def clear_all(self) -> int:
        """
        Delete every indexed record, then the index itself.

        Returns:
            Number of ids the index held before clearing.

        Raises:
            StoreError: If the backend fails part-way. Records already
                deleted stay deleted and the index is left in place.
        """
        ids = self.list_ids()
        for violation_id in ids:
            self.backend.delete(record_key(violation_id))
        self.backend.delete(INDEX_KEY)
        logger.info("Cleared %d violations", len(ids))
        return len(ids)
