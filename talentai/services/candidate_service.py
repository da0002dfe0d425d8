"""Service layer for candidate operations."""

import logging
from typing import List, Optional, Dict, Any
from datetime import date

from talentai.repositories.candidate_repository import CandidateRepository
from talentai.repositories.job_repository import JobRepository
from talentai.models.candidate import Candidate, CandidateStatus, VoiceSentiment

logger = logging.getLogger(__name__)


class CandidateService:
    """Service for managing candidates and their pipeline records.

    Round progression and interview booking are owned by FeedbackService and
    SchedulingService; this service handles intake, lookups and manual edits.

    Attributes:
        candidate_repository: Repository for candidate data access.
        job_repository: Repository used to check the owning job exists.
    """

    def __init__(self, candidate_repository: CandidateRepository, job_repository: JobRepository):
        """Initialize the service with its repositories.

        Args:
            candidate_repository: CandidateRepository instance.
            job_repository: JobRepository instance.
        """
        self.candidate_repository = candidate_repository
        self.job_repository = job_repository

    def create_candidate(
        self,
        name: str,
        job_id: str,
        email: str = "",
        phone: Optional[str] = None,
        skills: Optional[List[str]] = None,
        experience_years: float = 0,
        summary: str = "",
        match_score: int = 0,
        ai_reasoning: str = "",
        status: CandidateStatus = CandidateStatus.APPLIED,
        resume_text: Optional[str] = None
    ) -> Candidate:
        """Add a candidate to a job's pipeline.

        New candidates are listed first and start at round 1.

        Returns:
            Created Candidate.

        Raises:
            ValueError: If name missing or job not found.
        """
        if not name or not name.strip():
            raise ValueError("name is required")

        if not self.job_repository.get_by_id(job_id):
            raise ValueError(f"Job with ID {job_id} not found")

        candidate = Candidate(
            name=name.strip(),
            email=email.strip(),
            phone=phone,
            skills=skills or [],
            experience_years=experience_years,
            summary=summary,
            match_score=match_score,
            ai_reasoning=ai_reasoning,
            status=status,
            job_id=job_id,
            applied_date=date.today(),
            resume_text=resume_text,
            current_round=1
        )

        result = self.candidate_repository.create(candidate.model_dump(exclude={"id"}), at_front=True)
        logger.info(f"Candidate {result['id']} added to job {job_id} with status {result['status']}")
        return Candidate(**result)

    def get_candidate(self, candidate_id: str) -> Candidate:
        """Get a candidate by ID.

        Raises:
            ValueError: If candidate not found.
        """
        candidate = self.candidate_repository.get_by_id(candidate_id)
        if not candidate:
            raise ValueError(f"Candidate with ID {candidate_id} not found")
        return Candidate(**candidate)

    def list_candidates(self, job_id: Optional[str] = None, search: Optional[str] = None) -> List[Candidate]:
        """List candidates with optional filters.

        Args:
            job_id: Only candidates for this job.
            search: Case-insensitive text matched against name and skills.

        Returns:
            Candidates in display order.
        """
        rows = self.candidate_repository.get_by_job(job_id) if job_id else self.candidate_repository.get_all()
        candidates = [Candidate(**row) for row in rows]

        if search:
            needle = search.strip().lower()
            candidates = [
                candidate for candidate in candidates
                if needle in candidate.name.lower()
                or any(needle in skill.lower() for skill in candidate.skills)
            ]

        return candidates

    def find_by_email(self, email: str) -> Optional[Candidate]:
        """Find a candidate by email, ignoring case. First match wins."""
        row = self.candidate_repository.get_by_email(email)
        return Candidate(**row) if row else None

    def update_candidate(self, candidate: Candidate) -> Candidate:
        """Replace a candidate record as a whole.

        Raises:
            ValueError: If candidate not found.
        """
        if not candidate.id:
            raise ValueError("candidate id is required")
        return Candidate(**self.candidate_repository.replace(candidate.id, candidate.model_dump()))

    def set_status(self, candidate_id: str, status: CandidateStatus) -> Candidate:
        """Manually move a candidate to a status (e.g., Offer to Hired).

        Leaving the Interview status drops the active interview link.

        Raises:
            ValueError: If candidate not found.
        """
        candidate = self.get_candidate(candidate_id)

        updates: Dict[str, Any] = {"status": CandidateStatus(status).value}
        if status != CandidateStatus.INTERVIEW:
            updates["interview_id"] = None

        logger.info(f"Candidate {candidate_id} status {candidate.status} -> {updates['status']}")
        return Candidate(**self.candidate_repository.update(candidate_id, updates))

    def record_voice_screening(
        self,
        candidate_id: str,
        transcript: str,
        confidence: int,
        sentiment: Optional[VoiceSentiment] = None
    ) -> Candidate:
        """Store the result of a candidate's voice screening.

        Args:
            candidate_id: Candidate who took the screening.
            transcript: Collected answers.
            confidence: Confidence score from 0 to 100.
            sentiment: Optional detected sentiment.

        Raises:
            ValueError: If candidate not found or confidence out of range.
        """
        self.get_candidate(candidate_id)

        if confidence < 0 or confidence > 100:
            raise ValueError("confidence must be between 0 and 100")

        updates = {
            "voice_screening_completed": True,
            "voice_transcript": transcript,
            "voice_confidence_score": confidence,
            "voice_sentiment": VoiceSentiment(sentiment).value if sentiment else None
        }
        return Candidate(**self.candidate_repository.update(candidate_id, updates))
