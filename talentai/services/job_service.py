"""Service for job management and business logic."""

from typing import List, Dict, Optional, Any
from datetime import date

from talentai.constants import DEFAULT_ROUND_DESCRIPTION, DEFAULT_ROUND_TOPIC, MISSING_ROUND_DESCRIPTION
from talentai.repositories.job_repository import JobRepository
from talentai.models.job import Job, JobStatus, Round


def normalize_rounds(rounds: Optional[List[Dict[str, Any]]]) -> List[Round]:
    """Renumber rounds 1..N in list order, synthesizing a default when empty.

    Args:
        rounds: Round dictionaries with at least a "topic"; any "round_number"
            supplied by the caller is ignored.

    Returns:
        Contiguous list of Round models.
    """
    if not rounds:
        return [Round(round_number=1, topic=DEFAULT_ROUND_TOPIC, description=DEFAULT_ROUND_DESCRIPTION)]

    normalized = []
    for position, round_data in enumerate(rounds, start=1):
        topic = (round_data.get("topic") or "").strip()
        if not topic:
            raise ValueError(f"Round {position} topic is required")
        normalized.append(Round(
            round_number=position,
            topic=topic,
            description=(round_data.get("description") or "").strip() or MISSING_ROUND_DESCRIPTION
        ))
    return normalized


class JobService:
    """Service for managing job postings with business logic.

    Attributes:
        job_repository: Repository for job data access.
    """

    def __init__(self, job_repository: JobRepository):
        """Initialize the service with a repository.

        Args:
            job_repository: JobRepository instance.
        """
        self.job_repository = job_repository

    def create_job(
        self,
        title: str,
        description: str,
        department: str = "",
        location: str = "",
        requirements: Optional[List[str]] = None,
        rounds: Optional[List[Dict[str, Any]]] = None
    ) -> Job:
        """Create a new job posting.

        New jobs are listed first. A job without rounds gets a single
        "General Screening" round.

        Args:
            title: Job title/position.
            description: Full job description.
            department: Department or team.
            location: Job location.
            requirements: Ordered requirement strings.
            rounds: Ordered round dictionaries with "topic" and "description".

        Returns:
            Created Job.

        Raises:
            ValueError: If title or description is missing.
        """
        if not title or not title.strip() or not description or not description.strip():
            raise ValueError("title and description are required")

        job = Job(
            title=title.strip(),
            department=department,
            location=location,
            description=description.strip(),
            requirements=[req.strip() for req in (requirements or []) if req.strip()],
            rounds=normalize_rounds(rounds),
            posted_date=date.today(),
            status=JobStatus.ACTIVE
        )

        result = self.job_repository.create(job.model_dump(exclude={"id"}), at_front=True)
        return Job(**result)

    def get_job(self, job_id: str) -> Job:
        """Get a job by ID.

        Raises:
            ValueError: If job not found.
        """
        job = self.job_repository.get_by_id(job_id)
        if not job:
            raise ValueError(f"Job with ID {job_id} not found")
        return Job(**job)

    def list_jobs(self, status: Optional[JobStatus] = None) -> List[Job]:
        """List jobs, optionally filtered by status."""
        status_value = status.value if status else None
        return [Job(**row) for row in self.job_repository.get_all(status_value)]

    def update_job(self, job_id: str, updates: Dict[str, Any]) -> Job:
        """Update a job.

        Args:
            job_id: Job ID.
            updates: Fields to update. A "rounds" entry is renumbered; an empty
                round list is rejected because every job needs at least one round.

        Returns:
            Updated Job.

        Raises:
            ValueError: If job not found or data invalid.
        """
        self.get_job(job_id)

        updates = dict(updates)
        if "rounds" in updates:
            if not updates["rounds"]:
                raise ValueError("A job must keep at least one round")
            updates["rounds"] = [r.model_dump() for r in normalize_rounds(updates["rounds"])]

        for field in ("title", "description"):
            if field in updates and not (updates[field] or "").strip():
                raise ValueError(f"{field} is required")

        if "status" in updates and isinstance(updates["status"], JobStatus):
            updates["status"] = updates["status"].value

        return Job(**self.job_repository.update(job_id, updates))

    def close_job(self, job_id: str) -> Job:
        """Close a job posting."""
        self.get_job(job_id)
        return Job(**self.job_repository.update(job_id, {"status": JobStatus.CLOSED.value}))

    def reopen_job(self, job_id: str) -> Job:
        """Reopen a closed job posting."""
        self.get_job(job_id)
        return Job(**self.job_repository.update(job_id, {"status": JobStatus.ACTIVE.value}))

    @staticmethod
    def get_round(job: Job, round_number: int) -> Optional[Round]:
        for job_round in job.rounds:
            if job_round.round_number == round_number:
                return job_round
        return None
