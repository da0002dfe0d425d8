"""Application-wide constants and pipeline policy values."""

# Screening policy
AUTO_SCREEN_THRESHOLD = 80

# Resume ingestion
RESUME_BATCH_SIZE = 3
RESUME_TEXT_LIMIT = 20000
MIN_RESUME_TEXT_LENGTH = 20

# Job defaults
DEFAULT_ROUND_TOPIC = "General Screening"
DEFAULT_ROUND_DESCRIPTION = "Initial discussion."
MISSING_ROUND_DESCRIPTION = "No description provided."

# Calendar
STANDARD_TIME_SLOTS = ["09:00", "10:00", "11:00", "13:00", "14:00", "15:00", "16:00"]
DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M"

# Meetings
MEET_LINK_BASE = "https://meet.google.com/"
MEET_CODE_LENGTH = 9

# Gateway fallbacks
FALLBACK_CANDIDATE_NAME = "Unknown Candidate"
FALLBACK_CANDIDATE_EMAIL = "unknown@example.com"
FALLBACK_SUMMARY = "Failed to parse resume."
FALLBACK_SCORE = 50
FALLBACK_REASONING = "AI service unavailable."
FALLBACK_CHAT_REPLY = "I'm having trouble connecting to the HR database right now."
FALLBACK_OFFER_LETTER = "Error generating offer letter."

COMPANY_NAME = "TalentAI"
NO_INTERVIEWER_MESSAGE = "No interviewer available for the selected slot. Please select another slot."
