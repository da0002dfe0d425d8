"""Demo records for running the service without any prior data."""

from datetime import date, timedelta
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from talentai.database.store import InMemoryStore


def seed_demo_data(store: "InMemoryStore", today: date = None) -> None:
    """Load two jobs, two candidates, two interviewers and one booked interview.

    Interviewer availability is generated relative to ``today`` so the demo
    calendar always has open slots.
    """
    today = today or date.today()
    day_0 = today.isoformat()
    day_1 = (today + timedelta(days=1)).isoformat()
    day_2 = (today + timedelta(days=2)).isoformat()

    with store.lock:
        store.table("jobs").extend([
            {
                "id": "job-1",
                "title": "Senior Frontend Engineer",
                "department": "Engineering",
                "location": "Remote",
                "description": "We are looking for a React expert with Tailwind experience to build world-class interfaces.",
                "requirements": ["React", "TypeScript", "Tailwind CSS", "Performance Optimization"],
                "rounds": [
                    {"round_number": 1, "topic": "Technical Screening", "description": "Basic JS/CSS questions and culture fit."},
                    {"round_number": 2, "topic": "System Design", "description": "Design a scalable frontend architecture."},
                    {"round_number": 3, "topic": "Coding Challenge", "description": "Live coding session in React."}
                ],
                "posted_date": date(2023, 10, 15),
                "status": "Active"
            },
            {
                "id": "job-2",
                "title": "AI Product Manager",
                "department": "Product",
                "location": "San Francisco, CA",
                "description": "Lead the vision for our generative AI features.",
                "requirements": ["Product Management", "LLM knowledge", "Agile", "User Research"],
                "rounds": [
                    {"round_number": 1, "topic": "Product Sense", "description": "Product thinking and strategy."},
                    {"round_number": 2, "topic": "Technical Depth", "description": "Understanding of LLM capabilities."}
                ],
                "posted_date": date(2023, 10, 20),
                "status": "Active"
            }
        ])

        store.table("candidates").extend([
            {
                "id": "cand-1",
                "name": "Sarah Jenkins",
                "email": "sarah.j@example.com",
                "skills": ["React", "Node.js", "Figma"],
                "experience_years": 5,
                "summary": "Full stack developer with a passion for UX design.",
                "match_score": 88,
                "ai_reasoning": "Strong match for frontend role due to React experience, though TypeScript is not explicitly mentioned.",
                "status": "Interview",
                "job_id": "job-1",
                "applied_date": date(2023, 10, 22),
                "interview_id": "int-1",
                "current_round": 1
            },
            {
                "id": "cand-2",
                "name": "Michael Chen",
                "email": "m.chen@example.com",
                "skills": ["Python", "Django", "AWS"],
                "experience_years": 3,
                "summary": "Backend focused engineer.",
                "match_score": 45,
                "ai_reasoning": "Low match for Frontend role; skills are primarily backend focused.",
                "status": "Rejected",
                "job_id": "job-1",
                "applied_date": date(2023, 10, 23),
                "current_round": 1
            }
        ])

        store.table("interviewers").extend([
            {
                "id": "intv-1",
                "name": "Aarav Patel",
                "role": "Senior Backend Engineer",
                "availability": {
                    day_0: ["10:00", "11:00", "14:00", "15:00"],
                    day_1: ["09:00", "10:00", "16:00"],
                    day_2: ["11:00", "13:00"]
                }
            },
            {
                "id": "intv-2",
                "name": "Emily Stone",
                "role": "Engineering Manager",
                "availability": {
                    day_0: ["09:00", "13:00"],
                    day_1: ["10:00", "11:00", "14:00"]
                }
            }
        ])

        store.table("interviews").append({
            "id": "int-1",
            "candidate_id": "cand-1",
            "interviewer_id": "intv-1",
            "job_id": "job-1",
            "date": day_0,
            "time": "10:00",
            "meet_link": "https://meet.google.com/abc-defg-hij",
            "status": "Scheduled",
            "round_number": 1
        })
