"""Pydantic models exchanged with the AI gateway."""

from pydantic import BaseModel
from typing import List, Optional
from enum import Enum


class ParsedResume(BaseModel):
    """Structured candidate data extracted from resume text."""
    name: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    skills: List[str] = []
    experience_years: float = 0
    summary: str = ""


class CandidateRanking(BaseModel):
    """Fit score of a parsed resume against a job.

    Attributes:
        score: Match score from 0 to 100.
        reasoning: One sentence explanation of the score.
    """
    score: int
    reasoning: str


class ChatRole(str, Enum):
    """Author of a chat message."""
    USER = "user"
    MODEL = "model"


class ChatMessage(BaseModel):
    """A single turn of assistant chat history."""
    role: ChatRole
    text: str
