"""Shared fixtures: a fresh in-memory store, services wired to it, and a fake AI gateway."""

import asyncio

import pytest
from fastapi.testclient import TestClient

from talentai.database.store import InMemoryStore
from talentai.gateway.base import GatewayError
from talentai.models.screening import CandidateRanking, ParsedResume
from talentai.repositories.candidate_repository import CandidateRepository
from talentai.repositories.interview_repository import InterviewRepository
from talentai.repositories.interviewer_repository import InterviewerRepository
from talentai.repositories.job_repository import JobRepository
from talentai.services.assistant_service import AssistantService
from talentai.services.candidate_service import CandidateService
from talentai.services.dashboard_service import DashboardService
from talentai.services.feedback_service import FeedbackService
from talentai.services.ingestion_service import ResumeIngestionService
from talentai.services.interviewer_service import InterviewerService
from talentai.services.job_service import JobService
from talentai.services.scheduling_service import SchedulingService

SLOT_DATE = "2024-01-01"
NEXT_DATE = "2024-01-02"


class FakeGateway:
    """In-process stand-in for the AI service.

    The first line of the resume text is used as the candidate name; scores
    are looked up by name in ``scores`` and default to ``default_score``.
    """

    def __init__(self):
        self.default_score = 85
        self.scores = {}
        self.fail_parse = False
        self.fail_rank = False
        self.fail_chat = False
        self.fail_offer = False
        self.crash_on = set()
        self.parse_calls = []
        self.chat_calls = []
        self.active_parses = 0
        self.max_active_parses = 0

    async def parse_resume(self, text):
        self.parse_calls.append(text)
        self.active_parses += 1
        self.max_active_parses = max(self.max_active_parses, self.active_parses)
        try:
            await asyncio.sleep(0)
            name = text.splitlines()[0].strip()
            if name in self.crash_on:
                raise RuntimeError(f"unexpected failure for {name}")
            if self.fail_parse:
                raise GatewayError("parse unavailable")
            return ParsedResume(
                name=name,
                email=f"{name.lower().replace(' ', '.')}@example.com",
                skills=["Python", "FastAPI"],
                experience_years=4,
                summary=f"{name} is a backend engineer."
            )
        finally:
            self.active_parses -= 1

    async def rank_candidate(self, resume, job):
        if self.fail_rank:
            raise GatewayError("rank unavailable")
        return CandidateRanking(
            score=self.scores.get(resume.name, self.default_score),
            reasoning=f"{resume.name} fits {job.title}."
        )

    async def chat(self, history, message, context=None):
        self.chat_calls.append((history, message, context))
        if self.fail_chat:
            raise GatewayError("chat unavailable")
        return f"Echo: {message}"

    async def generate_offer_letter(self, candidate_name, job_title, offer_date):
        if self.fail_offer:
            raise GatewayError("offer unavailable")
        return f"Offer for {candidate_name} as {job_title} on {offer_date}"


@pytest.fixture
def store():
    return InMemoryStore()


@pytest.fixture
def job_repository(store):
    return JobRepository(store)


@pytest.fixture
def candidate_repository(store):
    return CandidateRepository(store)


@pytest.fixture
def interviewer_repository(store):
    return InterviewerRepository(store)


@pytest.fixture
def interview_repository(store):
    return InterviewRepository(store)


@pytest.fixture
def job_service(job_repository):
    return JobService(job_repository)


@pytest.fixture
def candidate_service(candidate_repository, job_repository):
    return CandidateService(candidate_repository, job_repository)


@pytest.fixture
def interviewer_service(interviewer_repository, interview_repository):
    return InterviewerService(interviewer_repository, interview_repository)


@pytest.fixture
def scheduling_service(store, interview_repository, interviewer_repository, candidate_repository):
    return SchedulingService(store, interview_repository, interviewer_repository, candidate_repository)


@pytest.fixture
def feedback_service(store, interview_repository, candidate_repository, job_repository):
    return FeedbackService(store, interview_repository, candidate_repository, job_repository)


@pytest.fixture
def dashboard_service(candidate_repository, job_repository):
    return DashboardService(candidate_repository, job_repository)


@pytest.fixture
def fake_gateway():
    return FakeGateway()


@pytest.fixture
def ingestion_service(fake_gateway, job_service, candidate_service):
    return ResumeIngestionService(fake_gateway, job_service, candidate_service)


@pytest.fixture
def assistant_service(fake_gateway, job_service, candidate_service):
    return AssistantService(fake_gateway, job_service, candidate_service)


@pytest.fixture
def two_round_job(job_service):
    return job_service.create_job(
        title="Backend Engineer",
        description="Build APIs.",
        department="Engineering",
        location="Remote",
        requirements=["Python", "FastAPI"],
        rounds=[
            {"topic": "Technical Screening", "description": "Python basics."},
            {"topic": "System Design", "description": "Design a service."}
        ]
    )


@pytest.fixture
def candidate(candidate_service, two_round_job):
    return candidate_service.create_candidate(
        name="Ada Lovelace",
        job_id=two_round_job.id,
        email="ada@example.com",
        skills=["Python"]
    )


@pytest.fixture
def client(monkeypatch, fake_gateway):
    from talentai import main

    main.store.reset()
    monkeypatch.setattr(main.ingestion_service, "gateway", fake_gateway)
    monkeypatch.setattr(main.assistant_service, "gateway", fake_gateway)

    with TestClient(main.app) as test_client:
        yield test_client

    main.store.reset()
