"""In-memory application state shared by all repositories."""

import os
import threading
from typing import Any, Dict, List

from dotenv import load_dotenv

load_dotenv()

TABLE_NAMES = ("jobs", "candidates", "interviewers", "interviews")


class InMemoryStore:
    """Ordered in-memory tables standing in for a database.

    Each table is a list of row dictionaries kept in insertion order, which is
    also the display order and the interviewer first-fit order. The re-entrant
    lock guards check-then-write sequences against concurrent requests.

    Attributes:
        tables: Mapping of table name to its rows.
        lock: Re-entrant lock held by services around multi-step mutations.
    """

    def __init__(self):
        self.tables: Dict[str, List[Dict[str, Any]]] = {name: [] for name in TABLE_NAMES}
        self.lock = threading.RLock()

    def table(self, table_name: str) -> List[Dict[str, Any]]:
        """Return the live row list for a table.

        Raises:
            ValueError: If the table does not exist.
        """
        if table_name not in self.tables:
            raise ValueError(f"Unknown table: {table_name}")
        return self.tables[table_name]

    def reset(self) -> None:
        """Drop every row from every table."""
        with self.lock:
            for rows in self.tables.values():
                rows.clear()


store = InMemoryStore()

if os.environ.get("TALENTAI_SEED_DEMO_DATA", "false").lower() == "true":
    from talentai.database.seed import seed_demo_data
    seed_demo_data(store)
