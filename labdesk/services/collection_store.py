import json
import os
import tempfile
from pathlib import Path
from typing import Any, Dict, List

from labdesk.core.errors import NotFoundError, StorageError
from labdesk.core.logger import logger

BOOKINGS = "bookings.json"
CONTACTS = "contacts.json"

Document = Dict[str, Any]


class CollectionStore:
    """
    Named collections of JSON documents, one file per collection.

    Every mutation reads the whole file, changes the list in memory and writes
    the whole list back. There is no locking: two processes writing the same
    collection can lose an update.
    """

    def __init__(self, data_dir):
        self.data_dir = Path(data_dir)

    def ensure_data_dir(self) -> None:
        try:
            self.data_dir.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            logger.opt(exception=e).error("❌ Cannot create data directory {}", self.data_dir)
            raise StorageError("Data directory unavailable") from e

    def path_for(self, name: str) -> Path:
        return self.data_dir / name

    def exists(self, name: str) -> bool:
        return self.path_for(name).exists()

    def load(self, name: str) -> List[Document]:
        """
        Returns the whole collection in insertion order, or [] if it was never written.
        Raises StorageError if the file cannot be read or decoded.
        """
        path = self.path_for(name)
        if not path.exists():
            return []

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logger.opt(exception=e).error("❌ Failed to read collection {}", name)
            raise StorageError(f"Failed to read {name}") from e

        if data is None:
            return []
        if not isinstance(data, list):
            logger.error(f"❌ Collection {name} does not hold a JSON list")
            raise StorageError(f"Failed to read {name}")
        return data

    def _load_lenient(self, name: str) -> List[Document]:
        # A corrupt or foreign file is treated as an empty collection on append.
        try:
            return self.load(name)
        except StorageError:
            logger.warning(f"⚠️ Collection {name} unreadable, starting it over")
            return []

    def append(self, name: str, record: Document) -> None:
        documents = self._load_lenient(name)
        documents.append(record)
        self._write(name, documents)

    def remove_by_id(self, name: str, record_id: str) -> int:
        """
        Drops every document whose id equals `record_id` and rewrites the collection.
        Returns how many documents were removed (0 still rewrites the file).
        Raises NotFoundError if the collection does not exist.
        """
        if not self.exists(name):
            raise NotFoundError()

        documents = self.load(name)
        kept = [doc for doc in documents if not (isinstance(doc, dict) and doc.get("id") == record_id)]
        self._write(name, kept)
        return len(documents) - len(kept)

    def _write(self, name: str, documents: List[Document]) -> None:
        path = self.path_for(name)
        payload = json.dumps(documents, indent=2, ensure_ascii=False)

        tmp_path = None
        try:
            fd, tmp_path = tempfile.mkstemp(dir=self.data_dir, prefix=f".{name}.", suffix=".tmp")
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                f.write(payload)
            os.replace(tmp_path, path)
        except OSError as e:
            logger.opt(exception=e).error("❌ Failed to write collection {}", name)
            if tmp_path and os.path.exists(tmp_path):
                os.unlink(tmp_path)
            raise StorageError(f"Failed to write {name}") from e
