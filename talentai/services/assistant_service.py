"""Service for the HR chat assistant and offer letter drafting."""

import logging
from datetime import date
from typing import List, Optional

from talentai.constants import FALLBACK_CHAT_REPLY, FALLBACK_OFFER_LETTER
from talentai.gateway.base import AIGateway, GatewayError
from talentai.models.candidate import CandidateStatus
from talentai.models.job import Job
from talentai.models.screening import ChatMessage
from talentai.services.candidate_service import CandidateService
from talentai.services.job_service import JobService

logger = logging.getLogger(__name__)


def build_job_context(job: Job) -> str:
    """Describe a job as plain text for the chat system prompt."""
    rounds = "; ".join(f"Round {r.round_number}: {r.topic} - {r.description}" for r in job.rounds)
    return (
        f"Job Title: {job.title}\n"
        f"Department: {job.department}\n"
        f"Location: {job.location}\n"
        f"Description: {job.description}\n"
        f"Requirements: {', '.join(job.requirements)}\n"
        f"Interview Rounds: {rounds}"
    )


def format_letter_date(value: date) -> str:
    """Format a date like "Mon Oct 19 2026"."""
    return value.strftime("%a %b %d %Y")


class AssistantService:
    """Chat replies and offer letters, with fallbacks when the AI is down.

    Attributes:
        gateway: AI gateway.
        job_service: JobService for job context.
        candidate_service: CandidateService for offer letters.
    """

    def __init__(self, gateway: AIGateway, job_service: JobService, candidate_service: CandidateService):
        self.gateway = gateway
        self.job_service = job_service
        self.candidate_service = candidate_service

    async def chat(self, history: List[ChatMessage], message: str, job_id: Optional[str] = None) -> str:
        """Answer a chat message, optionally grounded on one job.

        Raises:
            ValueError: If message is empty or job_id does not resolve.
        """
        if not message or not message.strip():
            raise ValueError("message is required")

        context = build_job_context(self.job_service.get_job(job_id)) if job_id else None

        try:
            return await self.gateway.chat(history, message, context)
        except GatewayError as error:
            logger.error(f"Chat Error: {error}")
            return FALLBACK_CHAT_REPLY

    async def generate_offer_letter(self, candidate_id: str) -> str:
        """Draft an offer letter and move the candidate to Offer.

        When the AI fails the fallback text is returned and the candidate's
        status is left as it was.

        Raises:
            ValueError: If candidate or job not found.
        """
        candidate = self.candidate_service.get_candidate(candidate_id)
        job = self.job_service.get_job(candidate.job_id)

        try:
            letter = await self.gateway.generate_offer_letter(
                candidate.name, job.title, format_letter_date(date.today())
            )
        except GatewayError as error:
            logger.error(f"Offer letter generation failed for {candidate_id}: {error}")
            return FALLBACK_OFFER_LETTER

        if candidate.status != CandidateStatus.OFFER:
            self.candidate_service.set_status(candidate_id, CandidateStatus.OFFER)
        return letter
