"""Builds candidate email drafts with a browser compose link.

Emails are not sent; the compose link opens a prefilled Gmail draft.
"""

from typing import Dict, Optional
from urllib.parse import quote

from talentai.constants import COMPANY_NAME
from talentai.models.candidate import Candidate
from talentai.models.interview import Interview
from talentai.models.job import Job

GMAIL_COMPOSE_URL = "https://mail.google.com/mail/?view=cm&fs=1"


def build_compose_link(to: str, subject: str, body: str) -> str:
    return f"{GMAIL_COMPOSE_URL}&to={quote(to, safe='')}&su={quote(subject, safe='')}&body={quote(body, safe='')}"


def _draft(to: str, subject: str, body: str) -> Dict[str, str]:
    return {
        "to": to,
        "subject": subject,
        "body": body,
        "compose_link": build_compose_link(to, subject, body)
    }


def build_rejection_email(candidate: Candidate, job: Optional[Job]) -> Dict[str, str]:
    """Draft a rejection email quoting the AI reasoning as feedback."""
    job_title = job.title if job else "Job Application"
    subject = f"Update on your application for {job_title}"
    body = (
        f"Dear {candidate.name},\n\n"
        f"Thank you for giving us the opportunity to consider your application for the {job_title} "
        f"position at {COMPANY_NAME}.\n\n"
        "We have reviewed your qualifications and experience. While we were impressed with your "
        "background, we have decided to move forward with other candidates who more closely match "
        "our current requirements.\n\n"
        f"Feedback from our hiring team:\n\"{candidate.ai_reasoning}\"\n\n"
        "We wish you the best in your job search.\n\n"
        f"Sincerely,\n{COMPANY_NAME} Recruiting Team"
    )
    return _draft(candidate.email, subject, body)


def build_invitation_email(candidate: Candidate, job: Optional[Job], interview: Interview) -> Dict[str, str]:
    """Draft an interview invitation for the candidate's booked round."""
    job_title = job.title if job else "Job Application"
    round_topic = "Assessment"
    if job:
        for job_round in job.rounds:
            if job_round.round_number == interview.round_number:
                round_topic = job_round.topic

    subject = f"Invitation: {round_topic} Interview - {job_title}"
    body = (
        f"Dear {candidate.name},\n\n"
        f"We are pleased to invite you to the next round of interviews for the {job_title} position.\n\n"
        f"This round will focus on: {round_topic}.\n\n"
        "Your interview has been scheduled for:\n"
        f"Date: {interview.date}\n"
        f"Time: {interview.time}\n"
        f"Meeting Link: {interview.meet_link}\n\n"
        "We look forward to speaking with you.\n\n"
        f"Best regards,\n{COMPANY_NAME} Recruiting Team"
    )
    return _draft(candidate.email, subject, body)
