"""Request schemas for API endpoints."""

from pydantic import BaseModel, Field
from typing import Optional, List, Dict

from talentai.models.candidate import CandidateStatus, VoiceSentiment
from talentai.models.interview import InterviewResult
from talentai.models.job import JobStatus
from talentai.models.screening import ChatMessage
from talentai.services.ingestion_service import ResumeDocument


class RoundRequest(BaseModel):
    """A round as entered when creating or editing a job."""
    topic: str
    description: Optional[str] = None


class CreateJobRequest(BaseModel):
    """Request model for creating a new job."""
    title: str
    description: str
    department: str = ""
    location: str = ""
    requirements: List[str] = []
    rounds: List[RoundRequest] = []


class UpdateJobRequest(BaseModel):
    """Request model for updating a job."""
    title: Optional[str] = None
    description: Optional[str] = None
    department: Optional[str] = None
    location: Optional[str] = None
    requirements: Optional[List[str]] = None
    rounds: Optional[List[RoundRequest]] = None
    status: Optional[JobStatus] = None


class CreateCandidateRequest(BaseModel):
    """Request model for adding a candidate by hand."""
    name: str
    job_id: str
    email: str = ""
    phone: Optional[str] = None
    skills: List[str] = []
    experience_years: float = 0
    summary: str = ""


class UpdateCandidateStatusRequest(BaseModel):
    """Request model for a manual status change."""
    status: CandidateStatus


class VoiceScreeningRequest(BaseModel):
    """Request model for storing a voice screening result."""
    transcript: str
    confidence: int = Field(ge=0, le=100)
    sentiment: Optional[VoiceSentiment] = None


class IngestResumeRequest(BaseModel):
    """Request model for ingesting one resume."""
    job_id: str
    filename: str = "resume.txt"
    text: str = ""


class IngestBatchRequest(BaseModel):
    """Request model for a bulk resume upload."""
    job_id: str
    resumes: List[ResumeDocument]


class CreateInterviewerRequest(BaseModel):
    """Request model for adding an interviewer."""
    name: str
    role: str
    availability: Dict[str, List[str]] = {}


class SetAvailabilityRequest(BaseModel):
    """Request model for replacing an interviewer's times on one date."""
    date: str
    times: List[str]


class ScheduleInterviewRequest(BaseModel):
    """Request model for booking an interview."""
    candidate_id: str
    date: str
    time: str
    job_id: Optional[str] = None


class RescheduleInterviewRequest(BaseModel):
    """Request model for moving an interview."""
    date: str
    time: str


class SubmitFeedbackRequest(BaseModel):
    """Request model for interview feedback."""
    feedback: str = ""
    result: InterviewResult


class ChatRequest(BaseModel):
    """Request model for the HR assistant chat."""
    message: str
    history: List[ChatMessage] = []
    job_id: Optional[str] = None
