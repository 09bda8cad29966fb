"""Service for storing uploaded file records in a single JSON document.

The whole collection lives in one JSON file of the form ``{"files": [...]}``
that is rewritten on every mutation. Physical uploads live next to it in the
upload directory and are deleted together with their record. Concurrent
read-modify-write cycles are serialised with a thread lock.
"""

import json
import logging
import os
import re
import threading
import time
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from goncalinho.conf.config import Config
from goncalinho.src.data_classes import FileRecord

logger = logging.getLogger(__name__)


class DocumentStore:
    """JSON-backed store for file records.

    Read failures (missing or corrupt document) are treated as an empty
    collection and write failures are logged and reported through the return
    value, so callers never see storage exceptions.

    Attributes:
        file_path (Path): Path to the JSON document
        upload_dir (Path): Directory holding the uploaded files
        lock (threading.Lock): Guards every read-modify-write of the document
    """

    def __init__(
        self,
        file_path: Optional[Union[str, Path]] = None,
        upload_dir: Optional[Union[str, Path]] = None,
    ) -> None:
        """Initialize the store, defaulting to the paths from Config.

        Args:
            file_path: Location of the JSON document
            upload_dir: Directory where uploaded files are stored
        """
        self.file_path = Path(file_path) if file_path else Config.DB_FILE
        self.upload_dir = Path(upload_dir) if upload_dir else Config.UPLOAD_DIR
        self.lock = threading.Lock()
        self.initialize_storage()

    def initialize_storage(self) -> None:
        """Create the data directories and an empty document if needed."""
        try:
            self.file_path.parent.mkdir(parents=True, exist_ok=True)
            self.upload_dir.mkdir(parents=True, exist_ok=True)
            if not self.file_path.exists():
                logger.info(f"Creating document store at {self.file_path}")
                self._write({"files": []})
        except OSError as e:
            logger.error(f"Error initializing document store: {str(e)}")

    def build_upload_path(self, original_name: str) -> Path:
        """Build a unique location in the upload directory for a new file.

        The name is sanitised to ``[a-zA-Z0-9.-]`` and prefixed with the
        current time in milliseconds.

        Args:
            original_name: Filename sent by the client

        Returns:
            Path: Where the uploaded file should be saved
        """
        safe_name = re.sub(r"[^a-zA-Z0-9.-]", "_", os.path.basename(original_name))
        return self.upload_dir / f"{int(time.time() * 1000)}-{safe_name}"

    def _read(self) -> List[Dict[str, Any]]:
        """Read the raw file entries, falling back to an empty list."""
        try:
            if not self.file_path.exists() or self.file_path.stat().st_size == 0:
                return []
            with open(self.file_path, "r", encoding="utf-8") as f:
                data = json.load(f)
            files = data.get("files", []) if isinstance(data, dict) else []
            return [entry for entry in files if isinstance(entry, dict)]
        except (OSError, json.JSONDecodeError) as e:
            logger.error(f"Error reading document store: {str(e)}")
            return []

    def _write(self, data: Dict[str, Any]) -> bool:
        """Write the whole document back to disk.

        Returns:
            bool: True if the write succeeded, False otherwise
        """
        try:
            with open(self.file_path, "w", encoding="utf-8") as f:
                json.dump(data, f, indent=2, ensure_ascii=False)
            return True
        except (OSError, TypeError) as e:
            logger.error(f"Error saving document store: {str(e)}")
            return False

    def load_all(self) -> List[FileRecord]:
        """Load every stored record in insertion order.

        Returns:
            List of FileRecord objects, empty if the document is missing or corrupt
        """
        with self.lock:
            entries = self._read()
        logger.debug(f"Loaded {len(entries)} file records")
        return [FileRecord.from_dict(entry) for entry in entries]

    def get(self, file_id: str) -> Optional[FileRecord]:
        """Look up a single record by id.

        Args:
            file_id: Identifier of the record

        Returns:
            The record, or None if no record has this id
        """
        for record in self.load_all():
            if record.id == file_id:
                return record
        return None

    def append(self, record: FileRecord) -> bool:
        """Append a record to the collection.

        Args:
            record: The record to persist

        Returns:
            bool: True if the record was written, False otherwise
        """
        with self.lock:
            entries = self._read()
            entries.append(record.to_dict())
            written = self._write({"files": entries})

        if written:
            logger.info(f"Stored file record {record.id} ({record.name})")
        return written

    def remove(self, file_id: str) -> Optional[FileRecord]:
        """Remove a record and, best effort, its uploaded file.

        Args:
            file_id: Identifier of the record to delete

        Returns:
            The removed record, or None if no record has this id
        """
        with self.lock:
            entries = self._read()
            index = next(
                (i for i, entry in enumerate(entries) if entry.get("id") == file_id),
                None,
            )
            if index is None:
                logger.debug(f"No file record with id {file_id}")
                return None

            record = FileRecord.from_dict(entries.pop(index))
            self.delete_upload(record.path)
            self._write({"files": entries})

        logger.info(f"Removed file record {record.id} ({record.name})")
        return record

    @staticmethod
    def delete_upload(path: str) -> None:
        """Delete an uploaded file, tolerating a file that is already gone."""
        if not path or not os.path.exists(path):
            logger.warning(f"Uploaded file not found on disk: {path}")
            return
        try:
            os.remove(path)
        except OSError as e:
            logger.warning(f"Could not delete uploaded file {path}: {str(e)}")
