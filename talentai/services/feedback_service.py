"""Service for interview feedback and round progression."""

import logging
from typing import Any, Dict, Optional

from talentai.database.store import InMemoryStore
from talentai.models.candidate import TERMINAL_STATUSES, Candidate, CandidateStatus
from talentai.models.interview import InterviewResult, InterviewStatus
from talentai.repositories.candidate_repository import CandidateRepository
from talentai.repositories.interview_repository import InterviewRepository
from talentai.repositories.job_repository import JobRepository
from talentai.constants import AUTO_SCREEN_THRESHOLD

logger = logging.getLogger(__name__)


def next_round_state(current_round: int, total_rounds: int, result: InterviewResult) -> Dict[str, Any]:
    """Compute the candidate fields that follow an interview result.

    Fail rejects the candidate. Pass on the final round moves them to Offer.
    Pass on an earlier round advances current_round by one and returns them to
    Screening to be scheduled again. The active interview link is always
    cleared, and current_round never exceeds total_rounds.

    Args:
        current_round: Round the candidate was interviewed for.
        total_rounds: Number of rounds in the job.
        result: Pass or Fail.

    Returns:
        Dictionary of candidate field updates.
    """
    if InterviewResult(result) == InterviewResult.FAIL:
        return {"status": CandidateStatus.REJECTED.value, "interview_id": None}

    if current_round >= total_rounds:
        return {"status": CandidateStatus.OFFER.value, "interview_id": None}

    return {
        "status": CandidateStatus.SCREENING.value,
        "current_round": current_round + 1,
        "interview_id": None
    }


def auto_screen_status(score: int) -> CandidateStatus:
    """Map an AI match score to the status a new candidate starts in."""
    if score >= AUTO_SCREEN_THRESHOLD:
        return CandidateStatus.INTERVIEW
    return CandidateStatus.REJECTED


class FeedbackService:
    """Records interview feedback and advances candidates through job rounds.

    Each candidate follows a linear path: Screening and Interview alternate
    once per round, ending in Offer after the last passed round or Rejected
    after any failed round. Rounds cannot be skipped and rejected candidates
    are never reopened here.

    Attributes:
        store: InMemoryStore whose lock guards the read-modify-write.
        interview_repository: Repository for interviews.
        candidate_repository: Repository for candidates.
        job_repository: Repository for jobs.
    """

    def __init__(
        self,
        store: InMemoryStore,
        interview_repository: InterviewRepository,
        candidate_repository: CandidateRepository,
        job_repository: JobRepository
    ):
        self.store = store
        self.interview_repository = interview_repository
        self.candidate_repository = candidate_repository
        self.job_repository = job_repository

    def submit_feedback(self, interview_id: str, feedback: str, result: InterviewResult) -> Optional[Candidate]:
        """Complete an interview and move its candidate to the next state.

        Unknown interview, candidate or job ids are ignored: the interview is
        still marked completed when it exists, but no candidate changes.
        Feedback is only accepted while the interview is Scheduled, and a
        Rejected or Hired candidate is never moved again.

        Args:
            interview_id: Interview the feedback is for.
            feedback: Interviewer's notes.
            result: Pass or Fail.

        Returns:
            The updated Candidate, or None when a reference did not resolve.
        """
        result = InterviewResult(result)

        with self.store.lock:
            interview = self.interview_repository.get_by_id(interview_id)
            if not interview:
                logger.warning(f"Feedback ignored: interview {interview_id} not found")
                return None
            if interview["status"] != InterviewStatus.SCHEDULED.value:
                logger.warning(f"Feedback ignored: interview {interview_id} is {interview['status']}")
                return None

            self.interview_repository.update(interview_id, {
                "feedback": feedback,
                "result": result.value,
                "status": InterviewStatus.COMPLETED.value
            })

            candidate = self.candidate_repository.get_by_id(interview["candidate_id"])
            if not candidate:
                logger.warning(f"Feedback for {interview_id}: candidate {interview['candidate_id']} not found")
                return None

            job = self.job_repository.get_by_id(candidate["job_id"])
            if not job:
                logger.warning(f"Feedback for {interview_id}: job {candidate['job_id']} not found")
                return None

            if candidate["status"] in TERMINAL_STATUSES:
                logger.warning(f"Feedback for {interview_id}: candidate {candidate['id']} is already {candidate['status']}")
                return None

            current_round = candidate.get("current_round") or 1
            updates = next_round_state(current_round, len(job["rounds"]), result)
            updated = self.candidate_repository.update(candidate["id"], updates)

        logger.info(
            f"Candidate {candidate['id']} round {current_round} {result.value}: "
            f"{candidate['status']} -> {updated['status']}"
        )
        return Candidate(**updated)
