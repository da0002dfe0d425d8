"""Repository for job data access operations."""

from typing import Dict, List, Optional, Any

from talentai.database.store import InMemoryStore
from talentai.repositories.base_repository import BaseRepository


class JobRepository(BaseRepository):
    """Repository for managing job postings."""

    def __init__(self, store: InMemoryStore):
        super().__init__(store, "jobs", "job")

    def get_all(self, status: Optional[str] = None) -> List[Dict[str, Any]]:
        """Retrieve all jobs in display order.

        Args:
            status: Optional status filter.

        Returns:
            List of job records.
        """
        if status:
            return self.find_by("status", status)
        return super().get_all()
