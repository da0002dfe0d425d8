"""Service for interviewers and their declared availability."""

from typing import List, Dict, Any

from talentai.models.interview import Interview, InterviewStatus
from talentai.models.interviewer import Interviewer
from talentai.repositories.interview_repository import InterviewRepository
from talentai.repositories.interviewer_repository import InterviewerRepository
from talentai.utils.slots import normalize_date, normalize_times


class InterviewerService:
    """Service for the interviewer pool and the availability index.

    Declared availability is never reduced by bookings; open slots are always
    computed as declared slots minus non-cancelled interviews.

    Attributes:
        interviewer_repository: Repository for interviewer data access.
        interview_repository: Repository used to read bookings.
    """

    def __init__(self, interviewer_repository: InterviewerRepository, interview_repository: InterviewRepository):
        self.interviewer_repository = interviewer_repository
        self.interview_repository = interview_repository

    def add_interviewer(self, name: str, role: str, availability: Dict[str, List[str]] = None) -> Interviewer:
        """Add an interviewer to the end of the pool.

        Args:
            name: Full name.
            role: Job role.
            availability: ISO date to list of "HH:MM" times.

        Returns:
            Created Interviewer.

        Raises:
            ValueError: If name or role missing, or a date/time is malformed.
        """
        if not name or not name.strip() or not role or not role.strip():
            raise ValueError("name and role are required")

        normalized = {}
        for slot_date, times in (availability or {}).items():
            normalized[normalize_date(slot_date)] = normalize_times(times)

        interviewer = Interviewer(name=name.strip(), role=role.strip(), availability=normalized)
        result = self.interviewer_repository.create(interviewer.model_dump(exclude={"id"}))
        return Interviewer(**result)

    def get_interviewer(self, interviewer_id: str) -> Interviewer:
        """Get an interviewer by ID.

        Raises:
            ValueError: If interviewer not found.
        """
        row = self.interviewer_repository.get_by_id(interviewer_id)
        if not row:
            raise ValueError(f"Interviewer with ID {interviewer_id} not found")
        return Interviewer(**row)

    def list_interviewers(self) -> List[Interviewer]:
        return [Interviewer(**row) for row in self.interviewer_repository.get_all()]

    def set_availability(self, interviewer_id: str, slot_date: str, times: List[str]) -> Interviewer:
        """Replace an interviewer's declared times for one date.

        An empty list removes the date.

        Raises:
            ValueError: If interviewer not found or a date/time is malformed.
        """
        interviewer = self.get_interviewer(interviewer_id)
        slot_date = normalize_date(slot_date)

        availability = dict(interviewer.availability)
        normalized_times = normalize_times(times)
        if normalized_times:
            availability[slot_date] = normalized_times
        else:
            availability.pop(slot_date, None)

        return Interviewer(**self.interviewer_repository.update(interviewer_id, {"availability": availability}))

    def get_open_slots(self, interviewer_id: str, slot_date: str) -> List[str]:
        """Declared times on a date that no active interview occupies."""
        interviewer = self.get_interviewer(interviewer_id)
        slot_date = normalize_date(slot_date)
        booked = {
            row["time"] for row in self.interview_repository.get_by_interviewer_and_date(interviewer_id, slot_date)
            if row.get("status") != InterviewStatus.CANCELLED.value
        }
        return [time for time in interviewer.availability.get(slot_date, []) if time not in booked]

    def get_day_schedule(self, slot_date: str) -> List[Dict[str, Any]]:
        """Build the calendar view for one date.

        Returns:
            One entry per interviewer, in pool order, with declared slots,
            active bookings and remaining open slots.
        """
        slot_date = normalize_date(slot_date)
        schedule = []

        for interviewer in self.list_interviewers():
            bookings = [
                Interview(**row)
                for row in self.interview_repository.get_by_interviewer_and_date(interviewer.id, slot_date)
                if row.get("status") != InterviewStatus.CANCELLED.value
            ]
            booked_times = {booking.time for booking in bookings}
            declared = interviewer.availability.get(slot_date, [])

            schedule.append({
                "interviewer": interviewer,
                "declared_slots": declared,
                "bookings": sorted(bookings, key=lambda booking: booking.time),
                "open_slots": [time for time in declared if time not in booked_times]
            })

        return schedule
