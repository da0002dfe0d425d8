"""Service for pipeline statistics shown on the dashboard."""

from typing import Any, Dict, Optional

from talentai.models.candidate import CandidateStatus
from talentai.models.job import JobStatus
from talentai.repositories.candidate_repository import CandidateRepository
from talentai.repositories.job_repository import JobRepository


class DashboardService:
    """Aggregates candidate counts per status, overall and per job."""

    def __init__(self, candidate_repository: CandidateRepository, job_repository: JobRepository):
        self.candidate_repository = candidate_repository
        self.job_repository = job_repository

    def pipeline_stats(self, job_id: Optional[str] = None) -> Dict[str, int]:
        """Count candidates by status.

        Args:
            job_id: Restrict the counts to one job.

        Returns:
            Dictionary with "total" and one lower-case key per status.
        """
        rows = self.candidate_repository.get_by_job(job_id) if job_id else self.candidate_repository.get_all()

        stats = {"total": len(rows)}
        for status in CandidateStatus:
            stats[status.value.lower()] = sum(1 for row in rows if row.get("status") == status.value)
        return stats

    def overview(self) -> Dict[str, Any]:
        jobs = self.job_repository.get_all()
        overall = self.pipeline_stats()

        return {
            "total_candidates": overall["total"],
            "active_jobs": sum(1 for job in jobs if job.get("status") == JobStatus.ACTIVE.value),
            "hired": overall[CandidateStatus.HIRED.value.lower()],
            "pipeline": overall,
            "jobs": [
                {"job_id": job["id"], "title": job["title"], "stats": self.pipeline_stats(job["id"])}
                for job in jobs
            ]
        }
