"""
In-memory learner storage

- Records live for the lifetime of the process only (no disk or network)
- Insertion order is kept for listing; updates replace in place
- One store instance is created by the app and handed to the routes
"""
import logging
from typing import Dict, List, Optional

from app.database.schemas import Learner

logger = logging.getLogger(__name__)


class LearnerStore:
    """
    Ordered collection of learner records keyed by id
    """
    def __init__(self):
        self._records: Dict[str, Learner] = {}

    def __len__(self) -> int:
        return len(self._records)

    def __contains__(self, learner_id: object) -> bool:
        return learner_id in self._records

    def upsert(self, record: Learner) -> bool:
        """
        Insert a new learner or replace the one with the same id

        A replaced record keeps its position in the listing.
        Returns True when an existing record was replaced.
        """
        replaced = record.id in self._records
        self._records[record.id] = record
        logger.info("%s learner %s", "Updated" if replaced else "Added", record.id)
        return replaced

    def delete_by_id(self, learner_id: str) -> bool:
        """
        Remove a learner; deleting an unknown id is a no-op

        Returns True if a record was removed.
        """
        removed = self._records.pop(learner_id, None)
        if removed is not None:
            logger.info("Deleted learner %s", learner_id)
        return removed is not None

    def find_by_id(self, learner_id: str) -> Optional[Learner]:
        return self._records.get(learner_id)

    def list_all(self) -> List[Learner]:
        return list(self._records.values())

    def search(self, query: str) -> List[Learner]:
        """
        Learners whose "last first middle" name contains query (case-insensitive)
        """
        needle = (query or "").strip().lower()
        if not needle:
            return self.list_all()
        return [
            record for record in self._records.values()
            if needle in f"{record.last_name} {record.first_name} {record.middle_name}".lower()
        ]

    def clear(self):
        self._records.clear()
