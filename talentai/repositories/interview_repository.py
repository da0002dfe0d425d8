"""Repository for interview booking data access operations."""

from typing import Dict, List, Optional, Any

from talentai.database.store import InMemoryStore
from talentai.models.interview import InterviewStatus
from talentai.repositories.base_repository import BaseRepository


class InterviewRepository(BaseRepository):
    """Repository for interview bookings.

    Interview rows are the single source of truth for which interviewer slots
    are taken; a slot is occupied by any row whose status is not Cancelled.
    """

    def __init__(self, store: InMemoryStore):
        super().__init__(store, "interviews", "int")

    def get_by_candidate(self, candidate_id: str) -> List[Dict[str, Any]]:
        """Retrieve all interviews for a candidate in booking order."""
        return self.find_by("candidate_id", candidate_id)

    def get_by_interviewer_and_date(self, interviewer_id: str, slot_date: str) -> List[Dict[str, Any]]:
        """Retrieve an interviewer's bookings on a date, cancelled ones included.

        Args:
            interviewer_id: The interviewer's unique identifier.
            slot_date: ISO date ("YYYY-MM-DD").

        Returns:
            List of interview records.
        """
        with self.store.lock:
            return [
                dict(row) for row in self.rows
                if row.get("interviewer_id") == interviewer_id and row.get("date") == slot_date
            ]

    def find_active_booking(
        self,
        interviewer_id: str,
        slot_date: str,
        slot_time: str,
        exclude_interview_id: Optional[str] = None
    ) -> Optional[Dict[str, Any]]:
        """Find a non-cancelled interview holding an interviewer's slot.

        Args:
            interviewer_id: The interviewer's unique identifier.
            slot_date: ISO date of the slot.
            slot_time: Time of day of the slot.
            exclude_interview_id: Interview to ignore, used when moving it.

        Returns:
            The occupying interview record, or None if the slot is free.
        """
        with self.store.lock:
            for row in self.rows:
                if row.get("id") == exclude_interview_id:
                    continue
                if row.get("status") == InterviewStatus.CANCELLED.value:
                    continue
                if (
                    row.get("interviewer_id") == interviewer_id
                    and row.get("date") == slot_date
                    and row.get("time") == slot_time
                ):
                    return dict(row)
        return None
