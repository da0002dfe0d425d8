"""Tests for round progression driven by interview feedback."""

import pytest

from talentai.models.candidate import CandidateStatus
from talentai.models.interview import InterviewResult, InterviewStatus
from talentai.services.feedback_service import auto_screen_status, next_round_state

from tests.conftest import NEXT_DATE, SLOT_DATE


@pytest.fixture
def interviewer(interviewer_service):
    return interviewer_service.add_interviewer("Aarav Patel", "Backend Engineer", {
        SLOT_DATE: ["10:00"],
        NEXT_DATE: ["14:00"],
        "2024-01-03": ["09:00"]
    })


def test_fail_rejects_and_clears_interview():
    assert next_round_state(1, 3, InterviewResult.FAIL) == {"status": "Rejected", "interview_id": None}


def test_pass_before_last_round_advances():
    assert next_round_state(1, 3, InterviewResult.PASS) == {
        "status": "Screening",
        "current_round": 2,
        "interview_id": None
    }


def test_pass_on_last_round_offers():
    assert next_round_state(3, 3, InterviewResult.PASS) == {"status": "Offer", "interview_id": None}


def test_pass_beyond_last_round_never_advances():
    assert "current_round" not in next_round_state(4, 3, InterviewResult.PASS)


@pytest.mark.parametrize("score, expected", [
    (85, CandidateStatus.INTERVIEW),
    (80, CandidateStatus.INTERVIEW),
    (79, CandidateStatus.REJECTED),
    (60, CandidateStatus.REJECTED)
])
def test_auto_screen_threshold(score, expected):
    assert auto_screen_status(score) == expected


def test_two_round_pipeline_reaches_offer(
    scheduling_service, feedback_service, interview_repository, candidate, interviewer
):
    first = scheduling_service.schedule_interview(candidate.id, SLOT_DATE, "10:00", candidate.job_id)

    after_first = feedback_service.submit_feedback(first.interview.id, "Solid fundamentals.", InterviewResult.PASS)

    assert after_first.status == CandidateStatus.SCREENING
    assert after_first.current_round == 2
    assert after_first.interview_id is None

    completed = interview_repository.get_by_id(first.interview.id)
    assert completed["status"] == InterviewStatus.COMPLETED.value
    assert completed["result"] == InterviewResult.PASS.value
    assert completed["feedback"] == "Solid fundamentals."

    second = scheduling_service.schedule_interview(candidate.id, NEXT_DATE, "14:00", candidate.job_id)
    assert second.interview.round_number == 2

    after_second = feedback_service.submit_feedback(second.interview.id, "Great design.", InterviewResult.PASS)

    assert after_second.status == CandidateStatus.OFFER
    assert after_second.current_round == 2
    assert after_second.interview_id is None


def test_three_passes_on_three_rounds_never_exceed_round_count(
    job_service, candidate_service, scheduling_service, feedback_service, interviewer
):
    job = job_service.create_job(
        title="Data Engineer",
        description="Pipelines.",
        rounds=[{"topic": "Screen"}, {"topic": "SQL"}, {"topic": "Final"}]
    )
    applicant = candidate_service.create_candidate(name="Alan Turing", job_id=job.id)
    slots = [(SLOT_DATE, "10:00"), (NEXT_DATE, "14:00"), ("2024-01-03", "09:00")]

    seen_rounds = []
    for slot_date, slot_time in slots:
        booked = scheduling_service.schedule_interview(applicant.id, slot_date, slot_time, job.id)
        seen_rounds.append(booked.interview.round_number)
        applicant = feedback_service.submit_feedback(booked.interview.id, "ok", InterviewResult.PASS)
        assert applicant.current_round <= 3

    assert seen_rounds == [1, 2, 3]
    assert applicant.status == CandidateStatus.OFFER
    assert applicant.current_round == 3


def test_fail_in_later_round_rejects(scheduling_service, feedback_service, candidate, interviewer):
    first = scheduling_service.schedule_interview(candidate.id, SLOT_DATE, "10:00", candidate.job_id)
    feedback_service.submit_feedback(first.interview.id, "good", InterviewResult.PASS)
    second = scheduling_service.schedule_interview(candidate.id, NEXT_DATE, "14:00", candidate.job_id)

    result = feedback_service.submit_feedback(second.interview.id, "Weak design.", "Fail")

    assert result.status == CandidateStatus.REJECTED
    assert result.interview_id is None
    assert result.current_round == 2


def test_unknown_interview_is_ignored(feedback_service, candidate_repository, candidate):
    before = candidate_repository.get_by_id(candidate.id)

    assert feedback_service.submit_feedback("int-missing", "n/a", InterviewResult.PASS) is None
    assert candidate_repository.get_by_id(candidate.id) == before


def test_unknown_candidate_still_completes_interview(
    scheduling_service, feedback_service, interview_repository, two_round_job, interviewer
):
    booked = scheduling_service.schedule_interview("cand-missing", SLOT_DATE, "10:00", two_round_job.id)

    assert feedback_service.submit_feedback(booked.interview.id, "n/a", InterviewResult.PASS) is None
    assert interview_repository.get_by_id(booked.interview.id)["status"] == InterviewStatus.COMPLETED.value


def test_missing_job_leaves_candidate_unchanged(
    scheduling_service, feedback_service, job_repository, candidate_repository, candidate, interviewer
):
    booked = scheduling_service.schedule_interview(candidate.id, SLOT_DATE, "10:00", candidate.job_id)
    job_repository.delete(candidate.job_id)

    assert feedback_service.submit_feedback(booked.interview.id, "n/a", InterviewResult.FAIL) is None
    assert candidate_repository.get_by_id(candidate.id)["status"] == CandidateStatus.INTERVIEW.value


def test_feedback_on_cancelled_interview_keeps_slot_single_booked(
    scheduling_service, feedback_service, candidate_service, interview_repository, candidate, interviewer
):
    cancelled = scheduling_service.schedule_interview(candidate.id, SLOT_DATE, "10:00", candidate.job_id)
    scheduling_service.cancel_interview(cancelled.interview.id)
    other = candidate_service.create_candidate(name="Grace Hopper", job_id=candidate.job_id)
    rebooked = scheduling_service.schedule_interview(other.id, SLOT_DATE, "10:00", candidate.job_id)

    assert feedback_service.submit_feedback(cancelled.interview.id, "late notes", InterviewResult.PASS) is None

    active = [
        row["id"] for row in interview_repository.get_by_interviewer_and_date(interviewer.id, SLOT_DATE)
        if row["time"] == "10:00" and row["status"] != InterviewStatus.CANCELLED.value
    ]
    assert active == [rebooked.interview.id]
    assert interview_repository.get_by_id(cancelled.interview.id)["result"] is None
    assert candidate_service.get_candidate(candidate.id).status == CandidateStatus.SCREENING


def test_second_feedback_does_not_reopen_rejected_candidate(
    scheduling_service, feedback_service, candidate_repository, interview_repository, candidate, interviewer
):
    booked = scheduling_service.schedule_interview(candidate.id, SLOT_DATE, "10:00", candidate.job_id)
    feedback_service.submit_feedback(booked.interview.id, "Weak.", InterviewResult.FAIL)

    assert feedback_service.submit_feedback(booked.interview.id, "Changed my mind.", InterviewResult.PASS) is None

    stored = candidate_repository.get_by_id(candidate.id)
    assert stored["status"] == CandidateStatus.REJECTED.value
    assert stored["current_round"] == 1
    assert interview_repository.get_by_id(booked.interview.id)["result"] == InterviewResult.FAIL.value


def test_feedback_for_manually_rejected_candidate_leaves_status(
    scheduling_service, feedback_service, candidate_service, candidate, interviewer
):
    booked = scheduling_service.schedule_interview(candidate.id, SLOT_DATE, "10:00", candidate.job_id)
    candidate_service.set_status(candidate.id, CandidateStatus.REJECTED)

    assert feedback_service.submit_feedback(booked.interview.id, "Good.", InterviewResult.PASS) is None
    assert candidate_service.get_candidate(candidate.id).status == CandidateStatus.REJECTED
