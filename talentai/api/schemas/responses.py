"""Response schemas for API endpoints."""

from pydantic import BaseModel
from typing import List, Dict, Any, Optional

from talentai.models.candidate import Candidate
from talentai.models.interview import Interview
from talentai.models.interviewer import Interviewer


class DaySchedule(BaseModel):
    """Calendar entry for one interviewer on one date."""
    interviewer: Interviewer
    declared_slots: List[str]
    bookings: List[Interview]
    open_slots: List[str]


class FeedbackResponse(BaseModel):
    """Interview and candidate state after feedback."""
    interview: Interview
    candidate: Optional[Candidate] = None


class EmailDraftResponse(BaseModel):
    """Prefilled email draft."""
    to: str
    subject: str
    body: str
    compose_link: str


class ChatResponse(BaseModel):
    """Assistant reply."""
    reply: str


class OfferLetterResponse(BaseModel):
    """Drafted offer letter."""
    candidate_id: str
    letter: str


class DashboardResponse(BaseModel):
    """Pipeline overview."""
    total_candidates: int
    active_jobs: int
    hired: int
    pipeline: Dict[str, int]
    jobs: List[Dict[str, Any]]
