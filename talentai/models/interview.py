"""Pydantic models for booked interviews."""

from pydantic import BaseModel
from typing import Optional
from enum import Enum

from talentai.models.interviewer import Interviewer


class InterviewStatus(str, Enum):
    """Status of a booked interview."""
    SCHEDULED = "Scheduled"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


class InterviewResult(str, Enum):
    """Outcome recorded with interview feedback."""
    PASS = "Pass"
    FAIL = "Fail"


class Interview(BaseModel):
    """A booked interview slot for one round of a candidate's pipeline.

    Attributes:
        id: Unique interview identifier.
        candidate_id: Candidate being interviewed.
        interviewer_id: Interviewer assigned to the slot.
        job_id: Job the interview belongs to.
        date: ISO date of the slot ("YYYY-MM-DD").
        time: Time of day of the slot ("HH:MM").
        meet_link: Generated video meeting link.
        status: Scheduled, Completed or Cancelled.
        round_number: Candidate's round at booking time.
        feedback: Interviewer feedback, once submitted.
        result: Pass or Fail, once submitted.
    """
    id: Optional[str] = None
    candidate_id: str
    interviewer_id: str
    job_id: str
    date: str
    time: str
    meet_link: str
    status: InterviewStatus = InterviewStatus.SCHEDULED
    round_number: int = 1
    feedback: Optional[str] = None
    result: Optional[InterviewResult] = None

    class Config:
        """Pydantic configuration."""
        use_enum_values = True


class ScheduledInterview(BaseModel):
    """A newly booked interview together with the interviewer picked for it."""
    interview: Interview
    interviewer: Interviewer
