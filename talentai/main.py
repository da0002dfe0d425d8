"""FastAPI application for the recruiting pipeline: jobs, candidates and interviews."""

import logging
import os
from typing import List, Optional

from fastapi import FastAPI, HTTPException, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from talentai.constants import NO_INTERVIEWER_MESSAGE
from talentai.database.store import store
from talentai.gateway.client import gateway
from talentai.models import Candidate, Interview, InterviewStatus, Interviewer, Job, JobStatus, ScheduledInterview
from talentai.repositories.candidate_repository import CandidateRepository
from talentai.repositories.interview_repository import InterviewRepository
from talentai.repositories.interviewer_repository import InterviewerRepository
from talentai.repositories.job_repository import JobRepository
from talentai.services.assistant_service import AssistantService
from talentai.services.candidate_service import CandidateService
from talentai.services.dashboard_service import DashboardService
from talentai.services.feedback_service import FeedbackService
from talentai.services.ingestion_service import BatchIngestionResult, ResumeIngestionService
from talentai.services.interviewer_service import InterviewerService
from talentai.services.job_service import JobService
from talentai.services.scheduling_service import SchedulingService
from talentai.utils.email_drafts import build_invitation_email, build_rejection_email
from talentai.api.schemas.requests import (
    ChatRequest,
    CreateCandidateRequest,
    CreateInterviewerRequest,
    CreateJobRequest,
    IngestBatchRequest,
    IngestResumeRequest,
    RescheduleInterviewRequest,
    ScheduleInterviewRequest,
    SetAvailabilityRequest,
    SubmitFeedbackRequest,
    UpdateCandidateStatusRequest,
    UpdateJobRequest,
    VoiceScreeningRequest
)
from talentai.api.schemas.responses import (
    ChatResponse,
    DashboardResponse,
    DaySchedule,
    EmailDraftResponse,
    FeedbackResponse,
    OfferLetterResponse
)

logging.basicConfig(
    level=logging.INFO,
    format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
)

logger = logging.getLogger(__name__)

app = FastAPI(title="TalentAI")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=[
        origin.strip()
        for origin in os.environ.get(
            "TALENTAI_CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000"
        ).split(",")
        if origin.strip()
    ],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# Global exception handlers
@app.exception_handler(ValueError)
async def value_error_handler(request: Request, exc: ValueError):
    """Convert ValueError to appropriate HTTP exception.

    Automatically handles common patterns:
    - "not found" → 404 Not Found
    - "duplicate" or "already exists" → 409 Conflict
    - Everything else → 400 Bad Request
    """
    error_msg = str(exc).lower()

    if "not found" in error_msg:
        status_code = 404
    elif "duplicate" in error_msg or "already exists" in error_msg:
        status_code = 409
    else:
        status_code = 400

    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc)}
    )


@app.exception_handler(Exception)
async def generic_exception_handler(request: Request, exc: Exception):
    """Convert unhandled exceptions to 500 Internal Server Error.

    Prevents stack traces from being exposed to clients.
    """
    logger.exception(f"Unhandled error on {request.url.path}")
    return JSONResponse(
        status_code=500,
        content={"detail": f"Internal server error: {str(exc)}"}
    )


# Initialize repositories and services
job_repository = JobRepository(store)
candidate_repository = CandidateRepository(store)
interviewer_repository = InterviewerRepository(store)
interview_repository = InterviewRepository(store)
job_service = JobService(job_repository)
candidate_service = CandidateService(candidate_repository, job_repository)
interviewer_service = InterviewerService(interviewer_repository, interview_repository)
scheduling_service = SchedulingService(store, interview_repository, interviewer_repository, candidate_repository)
feedback_service = FeedbackService(store, interview_repository, candidate_repository, job_repository)
ingestion_service = ResumeIngestionService(gateway, job_service, candidate_service)
assistant_service = AssistantService(gateway, job_service, candidate_service)
dashboard_service = DashboardService(candidate_repository, job_repository)


@app.get("/")
def root():
    """Health check endpoint.

    Returns:
        Dictionary with status indicator.
    """
    return {"status": "ok"}


# Job endpoints

@app.post("/jobs", response_model=Job, status_code=201)
def create_job(request: CreateJobRequest):
    """Create a job posting. A job without rounds gets a default screening round."""
    return job_service.create_job(
        title=request.title,
        description=request.description,
        department=request.department,
        location=request.location,
        requirements=request.requirements,
        rounds=[r.model_dump() for r in request.rounds]
    )


@app.get("/jobs", response_model=List[Job])
def list_jobs(status: Optional[JobStatus] = None):
    """List job postings, newest first."""
    return job_service.list_jobs(status)


@app.get("/jobs/{job_id}", response_model=Job)
def get_job(job_id: str):
    """Get a single job posting."""
    return job_service.get_job(job_id)


@app.put("/jobs/{job_id}", response_model=Job)
def update_job(job_id: str, request: UpdateJobRequest):
    """Update a job posting. Only fields present in the request are changed."""
    updates = {key: value for key, value in request.model_dump(exclude_unset=True).items() if value is not None}
    return job_service.update_job(job_id, updates)


@app.post("/jobs/{job_id}/close", response_model=Job)
def close_job(job_id: str):
    """Close a job posting."""
    return job_service.close_job(job_id)


@app.post("/jobs/{job_id}/reopen", response_model=Job)
def reopen_job(job_id: str):
    """Reopen a closed job posting."""
    return job_service.reopen_job(job_id)


# Candidate endpoints

@app.post("/candidates", response_model=Candidate, status_code=201)
def create_candidate(request: CreateCandidateRequest):
    """Add a candidate by hand, without AI screening."""
    return candidate_service.create_candidate(**request.model_dump())


@app.get("/candidates", response_model=List[Candidate])
def list_candidates(job_id: Optional[str] = None, search: Optional[str] = None):
    """List candidates, optionally for one job and/or matching a search term."""
    return candidate_service.list_candidates(job_id, search)


@app.get("/candidates/by-email", response_model=Candidate)
def get_candidate_by_email(email: str):
    """Look up a candidate by email for the candidate portal."""
    candidate = candidate_service.find_by_email(email)
    if not candidate:
        raise HTTPException(status_code=404, detail=f"No candidate with email {email}")
    return candidate


@app.get("/candidates/{candidate_id}", response_model=Candidate)
def get_candidate(candidate_id: str):
    """Get a single candidate."""
    return candidate_service.get_candidate(candidate_id)


@app.put("/candidates/{candidate_id}/status", response_model=Candidate)
def update_candidate_status(candidate_id: str, request: UpdateCandidateStatusRequest):
    """Manually change a candidate's status (e.g., Offer to Hired)."""
    return candidate_service.set_status(candidate_id, request.status)


@app.post("/candidates/{candidate_id}/voice-screening", response_model=Candidate)
def record_voice_screening(candidate_id: str, request: VoiceScreeningRequest):
    """Store a completed voice screening."""
    return candidate_service.record_voice_screening(
        candidate_id, request.transcript, request.confidence, request.sentiment
    )


@app.post("/candidates/{candidate_id}/offer-letter", response_model=OfferLetterResponse)
async def generate_offer_letter(candidate_id: str):
    """Draft an offer letter; the candidate moves to Offer when drafting succeeds."""
    letter = await assistant_service.generate_offer_letter(candidate_id)
    return OfferLetterResponse(candidate_id=candidate_id, letter=letter)


@app.get("/candidates/{candidate_id}/emails/{kind}", response_model=EmailDraftResponse)
def get_email_draft(candidate_id: str, kind: str):
    """Build an invitation or rejection email draft for a candidate.

    Raises:
        HTTPException: 400 for an unknown kind, or an invitation without a
            booked interview.
    """
    candidate = candidate_service.get_candidate(candidate_id)
    job_row = job_repository.get_by_id(candidate.job_id)
    job = Job(**job_row) if job_row else None

    if kind == "rejection":
        return build_rejection_email(candidate, job)

    if kind == "invitation":
        if not candidate.interview_id:
            raise HTTPException(status_code=400, detail="Candidate has no scheduled interview")
        interview = scheduling_service.get_interview(candidate.interview_id)
        return build_invitation_email(candidate, job, interview)

    raise HTTPException(status_code=400, detail=f"Unknown email kind: {kind}")


# Resume ingestion endpoints

@app.post("/resumes", response_model=Candidate, status_code=201)
async def ingest_resume(request: IngestResumeRequest):
    """Parse, rank and auto-screen one resume."""
    return await ingestion_service.ingest_resume(request.job_id, request.text, request.filename)


@app.post("/resumes/batch", response_model=BatchIngestionResult)
async def ingest_resume_batch(request: IngestBatchRequest):
    """Ingest many resumes, a few at a time."""
    if not request.resumes:
        raise HTTPException(status_code=400, detail="No resumes provided")
    return await ingestion_service.ingest_batch(request.job_id, request.resumes)


# Interviewer and calendar endpoints

@app.post("/interviewers", response_model=Interviewer, status_code=201)
def create_interviewer(request: CreateInterviewerRequest):
    """Add an interviewer with declared availability."""
    return interviewer_service.add_interviewer(request.name, request.role, request.availability)


@app.get("/interviewers", response_model=List[Interviewer])
def list_interviewers():
    """List interviewers in scheduling order."""
    return interviewer_service.list_interviewers()


@app.put("/interviewers/{interviewer_id}/availability", response_model=Interviewer)
def set_interviewer_availability(interviewer_id: str, request: SetAvailabilityRequest):
    """Replace an interviewer's declared times for one date."""
    return interviewer_service.set_availability(interviewer_id, request.date, request.times)


@app.get("/calendar/{slot_date}", response_model=List[DaySchedule])
def get_calendar(slot_date: str):
    """Declared slots, bookings and open slots for every interviewer on a date."""
    return interviewer_service.get_day_schedule(slot_date)


# Interview endpoints

@app.post("/interviews", response_model=ScheduledInterview, status_code=201)
def schedule_interview(request: ScheduleInterviewRequest):
    """Book the candidate's current round with the first free interviewer.

    Raises:
        HTTPException: 409 if no interviewer is available at the slot.
    """
    candidate = candidate_service.get_candidate(request.candidate_id)
    job_id = request.job_id or candidate.job_id

    result = scheduling_service.schedule_interview(candidate.id, request.date, request.time, job_id)
    if result is None:
        raise HTTPException(status_code=409, detail=NO_INTERVIEWER_MESSAGE)
    return result


@app.get("/interviews/{interview_id}", response_model=Interview)
def get_interview(interview_id: str):
    """Get a single interview."""
    return scheduling_service.get_interview(interview_id)


@app.put("/interviews/{interview_id}/reschedule", response_model=Interview)
def reschedule_interview(interview_id: str, request: RescheduleInterviewRequest):
    """Move an interview to a new slot; the interviewer may change.

    Raises:
        HTTPException: 409 if no interviewer is available at the new slot.
    """
    scheduling_service.get_interview(interview_id)

    result = scheduling_service.reschedule_interview(interview_id, request.date, request.time)
    if result is None:
        raise HTTPException(status_code=409, detail=NO_INTERVIEWER_MESSAGE)
    return result


@app.post("/interviews/{interview_id}/cancel", response_model=Interview)
def cancel_interview(interview_id: str):
    """Cancel an interview and free its slot."""
    return scheduling_service.cancel_interview(interview_id)


@app.post("/interviews/{interview_id}/feedback", response_model=FeedbackResponse)
def submit_feedback(interview_id: str, request: SubmitFeedbackRequest):
    """Record Pass/Fail feedback and advance the candidate's rounds."""
    interview = scheduling_service.get_interview(interview_id)
    if interview.status != InterviewStatus.SCHEDULED.value:
        raise ValueError(f"Interview {interview_id} is {interview.status.lower()}, feedback not accepted")

    candidate = feedback_service.submit_feedback(interview_id, request.feedback, request.result)
    return FeedbackResponse(
        interview=scheduling_service.get_interview(interview_id),
        candidate=candidate
    )


# Assistant and dashboard endpoints

@app.post("/chat", response_model=ChatResponse)
async def chat(request: ChatRequest):
    """Ask the HR assistant a question, optionally about one job."""
    reply = await assistant_service.chat(request.history, request.message, request.job_id)
    return ChatResponse(reply=reply)


@app.get("/dashboard", response_model=DashboardResponse)
def get_dashboard():
    """Candidate pipeline counts overall and per job."""
    return dashboard_service.overview()
