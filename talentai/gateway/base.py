"""Capability interface for the external AI service."""

from typing import List, Optional, Protocol

from talentai.models.job import Job
from talentai.models.screening import CandidateRanking, ChatMessage, ParsedResume


class GatewayError(Exception):
    """Raised when the AI service cannot produce a usable answer.

    Covers missing credentials, transport and quota errors, and responses that
    fail to parse. Callers pick their own fallback value when catching it.
    """


class AIGateway(Protocol):
    """Protocol for the language-model backed operations the pipeline needs."""

    async def parse_resume(self, text: str) -> ParsedResume:
        ...

    async def rank_candidate(self, resume: ParsedResume, job: Job) -> CandidateRanking:
        ...

    async def chat(self, history: List[ChatMessage], message: str, context: Optional[str] = None) -> str:
        ...

    async def generate_offer_letter(self, candidate_name: str, job_title: str, offer_date: str) -> str:
        ...
