"""Pydantic model for interviewers and their declared availability."""

from pydantic import BaseModel
from typing import Dict, List, Optional


class Interviewer(BaseModel):
    """Represents a member of the interview panel.

    Attributes:
        id: Unique interviewer identifier.
        name: Full name.
        role: Job role of the interviewer.
        availability: Maps an ISO date ("YYYY-MM-DD") to the open times of day
            ("HH:MM"). This is the declared pool; bookings live on Interview records.
    """
    id: Optional[str] = None
    name: str
    role: str
    availability: Dict[str, List[str]] = {}

    def is_open_at(self, slot_date: str, slot_time: str) -> bool:
        return slot_time in self.availability.get(slot_date, [])
