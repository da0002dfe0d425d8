"""Repository for candidate data access operations."""

from typing import Dict, List, Optional, Any

from talentai.database.store import InMemoryStore
from talentai.repositories.base_repository import BaseRepository


class CandidateRepository(BaseRepository):
    """Repository for managing candidate records.

    Foreign-key lookups are linear scans over the stored rows.
    """

    def __init__(self, store: InMemoryStore):
        super().__init__(store, "candidates", "cand")

    def get_by_job(self, job_id: str) -> List[Dict[str, Any]]:
        """Retrieve all candidates who applied for a job."""
        return self.find_by("job_id", job_id)

    def get_by_email(self, email: str) -> Optional[Dict[str, Any]]:
        """Retrieve the first candidate whose email matches, ignoring case.

        Args:
            email: Email address to look up.

        Returns:
            Candidate record if found, None otherwise.
        """
        needle = email.strip().lower()
        with self.store.lock:
            for row in self.rows:
                if (row.get("email") or "").lower() == needle:
                    return dict(row)
        return None
