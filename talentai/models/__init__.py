"""Pydantic models for the recruiting pipeline."""

from talentai.models.job import JobStatus, Round, Job
from talentai.models.candidate import (
    CandidateStatus,
    TERMINAL_STATUSES,
    VoiceSentiment,
    Candidate
)
from talentai.models.interviewer import Interviewer
from talentai.models.interview import (
    InterviewStatus,
    InterviewResult,
    Interview,
    ScheduledInterview
)
from talentai.models.screening import ParsedResume, CandidateRanking, ChatRole, ChatMessage

__all__ = [
    "JobStatus",
    "Round",
    "Job",
    "CandidateStatus",
    "TERMINAL_STATUSES",
    "VoiceSentiment",
    "Candidate",
    "Interviewer",
    "InterviewStatus",
    "InterviewResult",
    "Interview",
    "ScheduledInterview",
    "ParsedResume",
    "CandidateRanking",
    "ChatRole",
    "ChatMessage"
]
