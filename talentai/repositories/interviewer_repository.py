"""Repository for interviewer data access operations."""

from talentai.database.store import InMemoryStore
from talentai.repositories.base_repository import BaseRepository


class InterviewerRepository(BaseRepository):
    """Repository for interviewers.

    Stored order is the order the scheduler walks when picking an interviewer.
    """

    def __init__(self, store: InMemoryStore):
        super().__init__(store, "interviewers", "intv")
