"""Pydantic models for job postings and their interview rounds."""

from pydantic import BaseModel
from typing import List, Optional
from datetime import date
from enum import Enum

from talentai.constants import MISSING_ROUND_DESCRIPTION


class JobStatus(str, Enum):
    """Status of a job posting."""
    ACTIVE = "Active"
    CLOSED = "Closed"


class Round(BaseModel):
    """One stage of a job's interview sequence.

    Attributes:
        round_number: 1-based position in the job's round list.
        topic: What the round focuses on (e.g., "System Design").
        description: Free-text description shown to interviewers and candidates.
    """
    round_number: int
    topic: str
    description: str = MISSING_ROUND_DESCRIPTION


class Job(BaseModel):
    """Represents a job posting with an ordered interview process.

    Attributes:
        id: Unique job identifier.
        title: Job title/position.
        department: Department or team.
        location: Job location (city, remote, hybrid).
        description: Full job description.
        requirements: Ordered list of requirement strings.
        rounds: Ordered interview rounds, numbered 1..N.
        posted_date: Date the job was posted.
        status: Current status of the posting.
    """
    id: Optional[str] = None
    title: str
    department: str = ""
    location: str = ""
    description: str
    requirements: List[str] = []
    rounds: List[Round] = []
    posted_date: Optional[date] = None
    status: JobStatus = JobStatus.ACTIVE

    class Config:
        """Pydantic configuration."""
        use_enum_values = True
