"""Base repository with common CRUD operations for all repositories."""

import uuid
from typing import Dict, List, Optional, Any

from talentai.database.store import InMemoryStore


class BaseRepository:
    """Base repository providing common CRUD operations over one store table.

    Rows are returned as shallow copies so callers never mutate stored state
    except through ``create``, ``update``, ``replace`` and ``delete``.

    Attributes:
        store: InMemoryStore holding the table.
        table_name: Name of the table this repository manages.
        id_prefix: Prefix for generated record IDs (e.g., "job").
    """

    def __init__(self, store: InMemoryStore, table_name: str, id_prefix: str):
        """Initialize the base repository.

        Args:
            store: InMemoryStore instance.
            table_name: Name of the table (e.g., "candidates", "interviews").
            id_prefix: Prefix used when generating record IDs.
        """
        self.store = store
        self.table_name = table_name
        self.id_prefix = id_prefix

    @property
    def rows(self) -> List[Dict[str, Any]]:
        return self.store.table(self.table_name)

    def generate_id(self) -> str:
        return f"{self.id_prefix}-{uuid.uuid4().hex[:12]}"

    def get_by_id(self, record_id: str) -> Optional[Dict[str, Any]]:
        """Retrieve a single record by its ID.

        Args:
            record_id: The unique identifier of the record.

        Returns:
            Record as dictionary if found, None otherwise.
        """
        with self.store.lock:
            for row in self.rows:
                if row.get("id") == record_id:
                    return dict(row)
        return None

    def get_all(self) -> List[Dict[str, Any]]:
        """Retrieve all records in stored order.

        Returns:
            List of records as dictionaries.
        """
        with self.store.lock:
            return [dict(row) for row in self.rows]

    def find_by(self, field: str, value: Any) -> List[Dict[str, Any]]:
        """Retrieve all records whose field equals value, in stored order.

        Args:
            field: Column name to compare.
            value: Value to match.

        Returns:
            Matching records as dictionaries.
        """
        with self.store.lock:
            return [dict(row) for row in self.rows if row.get(field) == value]

    def create(self, data: Dict[str, Any], at_front: bool = False) -> Dict[str, Any]:
        """Insert a new record into the table.

        Args:
            data: Dictionary containing record data. An ID is generated when absent.
            at_front: Insert before existing rows instead of appending.

        Returns:
            Dictionary containing the inserted record.

        Raises:
            ValueError: If a record with the same ID already exists.
        """
        record = dict(data)
        if not record.get("id"):
            record["id"] = self.generate_id()

        with self.store.lock:
            if any(row.get("id") == record["id"] for row in self.rows):
                raise ValueError(f"{self._label()} with ID {record['id']} already exists")

            if at_front:
                self.rows.insert(0, record)
            else:
                self.rows.append(record)

        return dict(record)

    def update(self, record_id: str, updates: Dict[str, Any]) -> Dict[str, Any]:
        """Merge new field values into a record.

        Args:
            record_id: The unique identifier of the record to update.
            updates: Dictionary of fields to update.

        Returns:
            Updated record as dictionary.

        Raises:
            ValueError: If record not found.
        """
        with self.store.lock:
            index = self._index_of(record_id)
            merged = {**self.rows[index], **updates, "id": record_id}
            self.rows[index] = merged
            return dict(merged)

    def replace(self, record_id: str, record: Dict[str, Any]) -> Dict[str, Any]:
        """Replace a whole record, keeping its position and ID.

        Raises:
            ValueError: If record not found.
        """
        with self.store.lock:
            index = self._index_of(record_id)
            replacement = {**record, "id": record_id}
            self.rows[index] = replacement
            return dict(replacement)

    def delete(self, record_id: str) -> bool:
        """Delete a record from the table.

        Args:
            record_id: The unique identifier of the record to delete.

        Returns:
            True if deletion was successful.

        Raises:
            ValueError: If record not found.
        """
        with self.store.lock:
            index = self._index_of(record_id)
            del self.rows[index]
        return True

    def _index_of(self, record_id: str) -> int:
        for index, row in enumerate(self.rows):
            if row.get("id") == record_id:
                return index
        raise ValueError(f"{self._label()} with ID {record_id} not found")

    def _label(self) -> str:
        return self.table_name.rstrip("s").capitalize()
