"""
Record Store

Authoritative in-memory list of session records. Writes always swap in a
new tuple so readers holding the previous sequence never see it change.
"""

from typing import Iterable, Optional, Tuple

from ..models import SessionRecord


class RecordStore:
    """Ordered, id-unique collection of SessionRecords."""

    def __init__(self) -> None:
        self._records: Tuple[SessionRecord, ...] = ()

    def __len__(self) -> int:
        return len(self._records)

    def get_all(self) -> Tuple[SessionRecord, ...]:
        return self._records

    def get(self, record_id) -> Optional[SessionRecord]:
        for record in self._records:
            if record.id == record_id:
                return record
        return None

    def replace_all(self, records: Iterable[SessionRecord]) -> None:
        """Replace the whole store. Raises ValueError on duplicate ids."""
        new_records = tuple(records)
        ids = [r.id for r in new_records]
        if len(ids) != len(set(ids)):
            raise ValueError("Duplicate session ids in replacement set")
        self._records = new_records

    def toggle_completed(self, record_id) -> bool:
        """
        Flip `completed` on the record with this id.

        Returns False (and leaves the store untouched) when the id is unknown.
        """
        if self.get(record_id) is None:
            return False
        self._records = tuple(
            r.model_copy(update={"completed": not r.completed}) if r.id == record_id else r
            for r in self._records
        )
        return True
