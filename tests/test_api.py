"""End-to-end tests through the HTTP API."""

SLOT_DATE = "2024-01-01"
NEXT_DATE = "2024-01-02"


def create_job(client, rounds=None):
    response = client.post("/jobs", json={
        "title": "Backend Engineer",
        "description": "Build APIs.",
        "requirements": ["Python"],
        "rounds": rounds if rounds is not None else [
            {"topic": "Technical Screening"},
            {"topic": "System Design", "description": "Design a service."}
        ]
    })
    assert response.status_code == 201
    return response.json()


def create_interviewer(client, name, availability):
    response = client.post("/interviewers", json={"name": name, "role": "Engineer", "availability": availability})
    assert response.status_code == 201
    return response.json()


def test_health(client):
    assert client.get("/").json() == {"status": "ok"}


def test_job_without_rounds_gets_default(client):
    job = create_job(client, rounds=[])

    assert job["rounds"] == [{"round_number": 1, "topic": "General Screening", "description": "Initial discussion."}]


def test_missing_job_title_is_rejected(client):
    response = client.post("/jobs", json={"title": "", "description": "x"})

    assert response.status_code == 400


def test_unknown_ids_return_404(client):
    assert client.get("/jobs/job-missing").status_code == 404
    assert client.get("/candidates/cand-missing").status_code == 404
    assert client.get("/interviews/int-missing").status_code == 404
    assert client.post("/interviews/int-missing/feedback", json={"result": "Pass"}).status_code == 404


def test_full_pipeline_to_offer(client):
    job = create_job(client)
    interviewer = create_interviewer(client, "Aarav", {SLOT_DATE: ["10:00"], NEXT_DATE: ["14:00"]})

    response = client.post("/resumes", json={
        "job_id": job["id"],
        "filename": "ada.pdf",
        "text": "Ada Lovelace\nAnalytical engine programmer and mathematician."
    })
    assert response.status_code == 201
    candidate = response.json()
    assert candidate["status"] == "Interview"
    assert candidate["current_round"] == 1

    booked = client.post("/interviews", json={"candidate_id": candidate["id"], "date": SLOT_DATE, "time": "10:00"})
    assert booked.status_code == 201
    booked = booked.json()
    assert booked["interviewer"]["id"] == interviewer["id"]
    assert booked["interview"]["round_number"] == 1
    assert booked["interview"]["job_id"] == job["id"]

    invitation = client.get(f"/candidates/{candidate['id']}/emails/invitation").json()
    assert invitation["subject"] == "Invitation: Technical Screening Interview - Backend Engineer"

    first = client.post(f"/interviews/{booked['interview']['id']}/feedback", json={
        "feedback": "Strong.",
        "result": "Pass"
    }).json()
    assert first["interview"]["status"] == "Completed"
    assert first["candidate"]["status"] == "Screening"
    assert first["candidate"]["current_round"] == 2
    assert first["candidate"]["interview_id"] is None

    second = client.post("/interviews", json={"candidate_id": candidate["id"], "date": NEXT_DATE, "time": "14:00"})
    assert second.json()["interview"]["round_number"] == 2

    final = client.post(f"/interviews/{second.json()['interview']['id']}/feedback", json={
        "feedback": "Hire.",
        "result": "Pass"
    }).json()
    assert final["candidate"]["status"] == "Offer"

    hired = client.put(f"/candidates/{candidate['id']}/status", json={"status": "Hired"})
    assert hired.json()["status"] == "Hired"
    assert client.get("/dashboard").json()["hired"] == 1


def test_booked_slot_returns_409(client):
    job = create_job(client)
    create_interviewer(client, "Solo", {SLOT_DATE: ["10:00"]})
    first = client.post("/candidates", json={"name": "Ada", "job_id": job["id"]}).json()
    second = client.post("/candidates", json={"name": "Grace", "job_id": job["id"]}).json()

    ok = client.post("/interviews", json={"candidate_id": first["id"], "date": SLOT_DATE, "time": "10:00"})
    taken = client.post("/interviews", json={"candidate_id": second["id"], "date": SLOT_DATE, "time": "10:00"})

    assert ok.status_code == 201
    assert taken.status_code == 409
    assert "No interviewer available" in taken.json()["detail"]


def test_reschedule_and_cancel(client):
    job = create_job(client)
    create_interviewer(client, "Aarav", {SLOT_DATE: ["10:00"]})
    other = create_interviewer(client, "Emily", {NEXT_DATE: ["14:00"]})
    candidate = client.post("/candidates", json={"name": "Ada", "job_id": job["id"]}).json()
    booked = client.post("/interviews", json={
        "candidate_id": candidate["id"], "date": SLOT_DATE, "time": "10:00"
    }).json()
    interview_id = booked["interview"]["id"]

    same = client.put(f"/interviews/{interview_id}/reschedule", json={"date": SLOT_DATE, "time": "10:00"})
    assert same.status_code == 200

    moved = client.put(f"/interviews/{interview_id}/reschedule", json={"date": NEXT_DATE, "time": "14:00"})
    assert moved.json()["interviewer_id"] == other["id"]

    unavailable = client.put(f"/interviews/{interview_id}/reschedule", json={"date": NEXT_DATE, "time": "09:00"})
    assert unavailable.status_code == 409

    cancelled = client.post(f"/interviews/{interview_id}/cancel")
    assert cancelled.json()["status"] == "Cancelled"
    assert client.get(f"/candidates/{candidate['id']}").json()["status"] == "Screening"


def test_calendar_shows_open_slots(client):
    job = create_job(client)
    interviewer = create_interviewer(client, "Aarav", {SLOT_DATE: ["10:00", "11:00"]})
    candidate = client.post("/candidates", json={"name": "Ada", "job_id": job["id"]}).json()
    client.post("/interviews", json={"candidate_id": candidate["id"], "date": SLOT_DATE, "time": "10:00"})

    calendar = client.get(f"/calendar/{SLOT_DATE}").json()

    assert calendar[0]["interviewer"]["id"] == interviewer["id"]
    assert calendar[0]["open_slots"] == ["11:00"]
    assert calendar[0]["bookings"][0]["time"] == "10:00"


def test_batch_upload(client, fake_gateway):
    job = create_job(client)
    fake_gateway.scores = {"Low Score": 30}

    response = client.post("/resumes/batch", json={
        "job_id": job["id"],
        "resumes": [
            {"filename": "a.txt", "text": "High Score\nTwenty years building distributed systems."},
            {"filename": "b.txt", "text": "Low Score\nSome unrelated experience in retail."}
        ]
    })

    body = response.json()
    assert body["processed"] == 2
    assert body["interview"] == 1
    assert body["rejected"] == 1


def test_chat_falls_back_when_ai_is_down(client, fake_gateway):
    fake_gateway.fail_chat = True

    response = client.post("/chat", json={"message": "Who is next?"})

    assert response.json() == {"reply": "I'm having trouble connecting to the HR database right now."}


def test_candidate_lookup_by_email(client):
    job = create_job(client)
    created = client.post("/candidates", json={"name": "Ada", "job_id": job["id"], "email": "ada@example.com"}).json()

    assert client.get("/candidates/by-email", params={"email": "ADA@example.com"}).json()["id"] == created["id"]
    assert client.get("/candidates/by-email", params={"email": "x@example.com"}).status_code == 404


def test_feedback_on_finished_interviews_is_refused(client):
    job = create_job(client)
    create_interviewer(client, "Aarav", {SLOT_DATE: ["10:00", "11:00"]})
    candidate = client.post("/candidates", json={"name": "Ada", "job_id": job["id"]}).json()

    cancelled = client.post("/interviews", json={
        "candidate_id": candidate["id"], "date": SLOT_DATE, "time": "10:00"
    }).json()["interview"]["id"]
    client.post(f"/interviews/{cancelled}/cancel")

    response = client.post(f"/interviews/{cancelled}/feedback", json={"result": "Pass"})
    assert response.status_code == 400
    assert "cancelled" in response.json()["detail"]

    failed = client.post("/interviews", json={
        "candidate_id": candidate["id"], "date": SLOT_DATE, "time": "11:00"
    }).json()["interview"]["id"]
    client.post(f"/interviews/{failed}/feedback", json={"result": "Fail"})

    assert client.post(f"/interviews/{failed}/feedback", json={"result": "Pass"}).status_code == 400
    assert client.get(f"/candidates/{candidate['id']}").json()["status"] == "Rejected"
