"""Service for turning uploaded resumes into screened candidates."""

import asyncio
import logging
from typing import List

from pydantic import BaseModel

from talentai.constants import (
    FALLBACK_CANDIDATE_EMAIL,
    FALLBACK_CANDIDATE_NAME,
    FALLBACK_REASONING,
    FALLBACK_SCORE,
    FALLBACK_SUMMARY,
    MIN_RESUME_TEXT_LENGTH,
    RESUME_BATCH_SIZE,
    RESUME_TEXT_LIMIT
)
from talentai.gateway.base import AIGateway, GatewayError
from talentai.models.candidate import Candidate, CandidateStatus
from talentai.models.job import Job
from talentai.models.screening import CandidateRanking, ParsedResume
from talentai.services.candidate_service import CandidateService
from talentai.services.feedback_service import auto_screen_status
from talentai.services.job_service import JobService

logger = logging.getLogger(__name__)


class ResumeDocument(BaseModel):
    """Text already extracted from one uploaded resume file."""
    filename: str
    text: str = ""


class BatchIngestionResult(BaseModel):
    """Outcome of a bulk resume upload."""
    total: int
    processed: int
    interview: int
    rejected: int
    failed: int
    candidates: List[Candidate] = []


class ResumeIngestionService:
    """Parses, ranks and auto-screens resumes through the AI gateway.

    Gateway failures never abort ingestion: parsing falls back to an
    "Unknown Candidate" record and ranking to a neutral score, so the
    candidate is still created with degraded data.

    Attributes:
        gateway: AI gateway used for parsing and ranking.
        job_service: JobService used to resolve the target job.
        candidate_service: CandidateService used to store candidates.
    """

    def __init__(self, gateway: AIGateway, job_service: JobService, candidate_service: CandidateService):
        self.gateway = gateway
        self.job_service = job_service
        self.candidate_service = candidate_service

    async def ingest_resume(self, job_id: str, text: str, filename: str = "resume.txt") -> Candidate:
        """Create one candidate from resume text.

        Text too short to be useful is replaced by the filename. A score of
        80 or more fast-tracks the candidate to Interview at round 1; anything
        lower rejects them.

        Args:
            job_id: Job the resume was uploaded for.
            text: Extracted resume text.
            filename: Original file name.

        Returns:
            The created Candidate.

        Raises:
            ValueError: If the job does not exist.
        """
        job = self.job_service.get_job(job_id)

        context_text = text if len(text.strip()) > MIN_RESUME_TEXT_LENGTH else f"Resume Filename: {filename}."
        context_text = context_text[:RESUME_TEXT_LIMIT]

        resume = await self._parse(context_text)
        ranking = await self._rank(resume, job)
        status = auto_screen_status(ranking.score)

        return self.candidate_service.create_candidate(
            name=resume.name or FALLBACK_CANDIDATE_NAME,
            job_id=job.id,
            email=resume.email or "",
            phone=resume.phone,
            skills=resume.skills,
            experience_years=resume.experience_years,
            summary=resume.summary,
            match_score=ranking.score,
            ai_reasoning=ranking.reasoning,
            status=status,
            resume_text=context_text
        )

    async def ingest_batch(self, job_id: str, documents: List[ResumeDocument]) -> BatchIngestionResult:
        """Ingest many resumes, RESUME_BATCH_SIZE at a time.

        Batches run one after another; resumes inside a batch run
        concurrently. A resume that raises is skipped and counted as failed,
        and candidates created before it are kept.

        Raises:
            ValueError: If the job does not exist.
        """
        self.job_service.get_job(job_id)

        created: List[Candidate] = []
        failed = 0

        for start in range(0, len(documents), RESUME_BATCH_SIZE):
            batch = documents[start:start + RESUME_BATCH_SIZE]
            results = await asyncio.gather(
                *(self.ingest_resume(job_id, document.text, document.filename) for document in batch),
                return_exceptions=True
            )

            for document, result in zip(batch, results):
                if isinstance(result, Exception):
                    logger.error(f"Failed to ingest resume {document.filename}: {result}")
                    failed += 1
                    continue
                created.append(result)

        return BatchIngestionResult(
            total=len(documents),
            processed=len(created),
            interview=sum(1 for c in created if c.status == CandidateStatus.INTERVIEW),
            rejected=sum(1 for c in created if c.status == CandidateStatus.REJECTED),
            failed=failed,
            candidates=created
        )

    async def _parse(self, text: str) -> ParsedResume:
        try:
            return await self.gateway.parse_resume(text)
        except GatewayError as error:
            logger.warning(f"Resume parsing failed, using placeholder candidate: {error}")
            return ParsedResume(
                name=FALLBACK_CANDIDATE_NAME,
                email=FALLBACK_CANDIDATE_EMAIL,
                skills=[],
                experience_years=0,
                summary=FALLBACK_SUMMARY
            )

    async def _rank(self, resume: ParsedResume, job: Job) -> CandidateRanking:
        try:
            return await self.gateway.rank_candidate(resume, job)
        except GatewayError as error:
            logger.warning(f"Candidate ranking failed, using neutral score: {error}")
            return CandidateRanking(score=FALLBACK_SCORE, reasoning=FALLBACK_REASONING)
