"""Pydantic models for candidates moving through a job's pipeline."""

from pydantic import BaseModel
from typing import List, Optional
from datetime import date
from enum import Enum


class CandidateStatus(str, Enum):
    """Pipeline status of a candidate."""
    APPLIED = "Applied"
    SCREENING = "Screening"
    INTERVIEW = "Interview"
    OFFER = "Offer"
    REJECTED = "Rejected"
    HIRED = "Hired"


TERMINAL_STATUSES = (CandidateStatus.REJECTED, CandidateStatus.HIRED)


class VoiceSentiment(str, Enum):
    """Sentiment detected during a voice screening."""
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"


class Candidate(BaseModel):
    """Represents an applicant for a single job.

    Attributes:
        id: Unique candidate identifier.
        name: Full name.
        email: Contact email, also used for candidate portal lookup.
        phone: Optional phone number.
        skills: Skills extracted from the resume.
        experience_years: Years of professional experience.
        summary: Short profile summary.
        match_score: Fit score against the job (0-100).
        ai_reasoning: One-line explanation of the match score.
        status: Current pipeline status.
        job_id: ID of the job applied for.
        applied_date: Date the application was received.
        resume_text: Raw resume text kept for chat context.
        interview_id: ID of the active interview, if one is booked.
        current_round: Round the candidate is currently in (starts at 1).
        voice_screening_completed: Whether the voice screening was taken.
        voice_transcript: Transcript of the voice screening answers.
        voice_confidence_score: Confidence score from the voice screening (0-100).
        voice_sentiment: Sentiment detected during the voice screening.
    """
    id: Optional[str] = None
    name: str
    email: str = ""
    phone: Optional[str] = None
    skills: List[str] = []
    experience_years: float = 0
    summary: str = ""
    match_score: int = 0
    ai_reasoning: str = ""
    status: CandidateStatus = CandidateStatus.APPLIED
    job_id: str
    applied_date: Optional[date] = None
    resume_text: Optional[str] = None
    interview_id: Optional[str] = None
    current_round: int = 1
    voice_screening_completed: bool = False
    voice_transcript: Optional[str] = None
    voice_confidence_score: Optional[int] = None
    voice_sentiment: Optional[VoiceSentiment] = None

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
