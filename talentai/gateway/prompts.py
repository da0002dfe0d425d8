"""Prompt templates sent to the language model."""

PARSE_RESUME_PROMPT = """Extract candidate information from the following resume text.
If specific fields are missing, infer reasonable defaults or leave empty.

Strictly respond with a valid JSON object with these keys and no additional text:
"name" (string), "email" (string), "phone" (string or null),
"skills" (list of strings), "experience_years" (number), "summary" (string).

RESUME TEXT:
{resume_text}"""

RANK_CANDIDATE_PROMPT = """Evaluate the candidate against the job description.

JOB TITLE: {title}
JOB REQUIREMENTS: {requirements}
JOB DESCRIPTION: {description}

CANDIDATE SKILLS: {skills}
CANDIDATE EXPERIENCE: {experience_years} years
CANDIDATE SUMMARY: {summary}

Strictly respond with a valid JSON object with these keys and no additional text:
"score" (number from 0 to 100 indicating fit),
"reasoning" (a one sentence explanation of the score)."""

CHAT_SYSTEM_PROMPT = (
    "You are a helpful HR Assistant for {company}. You answer questions about candidates, "
    "interview scheduling, and company policies."
)

CHAT_NO_CONTEXT_SUFFIX = " Keep answers professional and concise."

CHAT_CONTEXT_SUFFIX = " \n\nCONTEXT:\n{context}"

OFFER_LETTER_PROMPT = """Write a professional job offer letter for {candidate_name} for the position of {job_title}. Date: {offer_date}.
Include placeholders for salary and start date. Keep it warm and professional. Return raw text."""
