"""Service for booking, moving and cancelling interviews."""

import logging
from typing import Optional

from talentai.database.store import InMemoryStore
from talentai.models.candidate import CandidateStatus
from talentai.models.interview import Interview, InterviewStatus, ScheduledInterview
from talentai.models.interviewer import Interviewer
from talentai.repositories.candidate_repository import CandidateRepository
from talentai.repositories.interview_repository import InterviewRepository
from talentai.repositories.interviewer_repository import InterviewerRepository
from talentai.utils.slots import generate_meet_link, normalize_date, normalize_time

logger = logging.getLogger(__name__)


class SchedulingService:
    """Assigns interviewers to requested slots without double-booking.

    Interviewer selection is first-fit: interviewers are tried in pool order
    and the first one that declared the slot and has no active booking in it
    is picked. There is no load balancing or role matching.

    Every check-then-book sequence runs under the store lock, so no two
    non-cancelled interviews ever share (interviewer_id, date, time).

    Attributes:
        store: InMemoryStore whose lock guards booking.
        interview_repository: Repository for interview bookings.
        interviewer_repository: Repository for the interviewer pool.
        candidate_repository: Repository for candidates being scheduled.
    """

    def __init__(
        self,
        store: InMemoryStore,
        interview_repository: InterviewRepository,
        interviewer_repository: InterviewerRepository,
        candidate_repository: CandidateRepository
    ):
        self.store = store
        self.interview_repository = interview_repository
        self.interviewer_repository = interviewer_repository
        self.candidate_repository = candidate_repository

    def find_available_interviewer(
        self,
        slot_date: str,
        slot_time: str,
        exclude_interview_id: Optional[str] = None
    ) -> Optional[Interviewer]:
        """Pick the first interviewer, in pool order, who is free at a slot.

        Args:
            slot_date: ISO date of the slot.
            slot_time: Time of day of the slot.
            exclude_interview_id: Interview whose own booking should not count
                as occupying the slot (used when rescheduling it).

        Returns:
            The chosen Interviewer, or None if nobody is free.
        """
        with self.store.lock:
            for row in self.interviewer_repository.get_all():
                interviewer = Interviewer(**row)
                if not interviewer.is_open_at(slot_date, slot_time):
                    continue
                booking = self.interview_repository.find_active_booking(
                    interviewer.id, slot_date, slot_time, exclude_interview_id
                )
                if booking is None:
                    return interviewer
        return None

    def schedule_interview(
        self,
        candidate_id: str,
        slot_date: str,
        slot_time: str,
        job_id: str
    ) -> Optional[ScheduledInterview]:
        """Book an interview for a candidate's current round.

        On success the candidate moves to Interview and points at the new
        booking. Interviewers and jobs are not modified.

        Args:
            candidate_id: Candidate being interviewed; their current round
                becomes the interview's round (1 if the candidate is unknown).
            slot_date: Requested ISO date.
            slot_time: Requested time of day.
            job_id: Job the interview is for.

        Returns:
            ScheduledInterview with the booking and the chosen interviewer, or
            None when no interviewer is available. Callers surface None as
            "no interviewer available" and do not retry.

        Raises:
            ValueError: If the date or time is malformed.
        """
        slot_date = normalize_date(slot_date)
        slot_time = normalize_time(slot_time)

        with self.store.lock:
            candidate = self.candidate_repository.get_by_id(candidate_id)
            round_number = (candidate or {}).get("current_round") or 1

            interviewer = self.find_available_interviewer(slot_date, slot_time)
            if interviewer is None:
                logger.info(f"No interviewer available on {slot_date} at {slot_time} for candidate {candidate_id}")
                return None

            interview = Interview(
                candidate_id=candidate_id,
                interviewer_id=interviewer.id,
                job_id=job_id,
                date=slot_date,
                time=slot_time,
                meet_link=generate_meet_link(),
                status=InterviewStatus.SCHEDULED,
                round_number=round_number
            )
            created = self.interview_repository.create(interview.model_dump(exclude={"id"}))

            if candidate:
                self.candidate_repository.update(candidate_id, {
                    "status": CandidateStatus.INTERVIEW.value,
                    "interview_id": created["id"]
                })

        logger.info(
            f"Interview {created['id']} booked with {interviewer.id} on {slot_date} at {slot_time} "
            f"(candidate {candidate_id}, round {round_number})"
        )
        return ScheduledInterview(interview=Interview(**created), interviewer=interviewer)

    def reschedule_interview(self, interview_id: str, new_date: str, new_time: str) -> Optional[Interview]:
        """Move an interview to a new slot, possibly with a different interviewer.

        The interview's own booking is ignored in the availability check, so
        moving it to its current slot succeeds. Only date, time and
        interviewer change; candidate state is not touched.

        Returns:
            The updated Interview, or None if the interview does not exist or
            no interviewer is available.

        Raises:
            ValueError: If the date or time is malformed.
        """
        new_date = normalize_date(new_date)
        new_time = normalize_time(new_time)

        with self.store.lock:
            existing = self.interview_repository.get_by_id(interview_id)
            if not existing:
                return None

            interviewer = self.find_available_interviewer(new_date, new_time, exclude_interview_id=interview_id)
            if interviewer is None:
                logger.info(f"Cannot move interview {interview_id}: nobody free on {new_date} at {new_time}")
                return None

            updated = self.interview_repository.update(interview_id, {
                "date": new_date,
                "time": new_time,
                "interviewer_id": interviewer.id
            })

        logger.info(f"Interview {interview_id} moved to {new_date} {new_time} with {interviewer.id}")
        return Interview(**updated)

    def cancel_interview(self, interview_id: str) -> Interview:
        """Cancel an interview and free its slot.

        If the candidate's active interview is this one, the link is cleared
        and a candidate waiting in Interview goes back to Screening.

        Raises:
            ValueError: If interview not found or already completed.
        """
        with self.store.lock:
            existing = self.interview_repository.get_by_id(interview_id)
            if not existing:
                raise ValueError(f"Interview with ID {interview_id} not found")
            if existing["status"] == InterviewStatus.COMPLETED.value:
                raise ValueError(f"Interview {interview_id} is already completed")

            updated = self.interview_repository.update(interview_id, {"status": InterviewStatus.CANCELLED.value})

            candidate = self.candidate_repository.get_by_id(existing["candidate_id"])
            if candidate and candidate.get("interview_id") == interview_id:
                updates = {"interview_id": None}
                if candidate.get("status") == CandidateStatus.INTERVIEW.value:
                    updates["status"] = CandidateStatus.SCREENING.value
                self.candidate_repository.update(candidate["id"], updates)

        logger.info(f"Interview {interview_id} cancelled")
        return Interview(**updated)

    def get_interview(self, interview_id: str) -> Interview:
        """Get an interview by ID.

        Raises:
            ValueError: If interview not found.
        """
        row = self.interview_repository.get_by_id(interview_id)
        if not row:
            raise ValueError(f"Interview with ID {interview_id} not found")
        return Interview(**row)
