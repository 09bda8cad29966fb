"""Unit tests for the DocumentStore service."""

import json
import os
import tempfile
import threading
import unittest
from pathlib import Path

from goncalinho.src.data_classes import FileRecord
from goncalinho.src.services.store import DocumentStore


class TestDocumentStore(unittest.TestCase):
    """Test cases for the JSON-backed DocumentStore."""

    def setUp(self) -> None:
        """Set up a store in a temporary data directory."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.data_dir = Path(self.temp_dir.name)
        self.db_file = self.data_dir / "db.json"
        self.upload_dir = self.data_dir / "uploads"
        self.store = DocumentStore(file_path=self.db_file, upload_dir=self.upload_dir)

    def tearDown(self) -> None:
        """Remove the temporary data directory."""
        self.temp_dir.cleanup()

    def _make_record(self, name: str = "populacao.csv", **kwargs) -> FileRecord:
        path = self.upload_dir / f"123-{name}"
        path.write_text("ano,valor\n2020,10\n", encoding="utf-8")
        return FileRecord(
            name=name, path=str(path), type="csv", content="ano,valor", **kwargs
        )

    def test_initialize_storage_creates_empty_document(self) -> None:
        """Test that a fresh store writes an empty collection."""
        self.assertTrue(self.upload_dir.is_dir())
        with open(self.db_file, "r", encoding="utf-8") as f:
            self.assertEqual(json.load(f), {"files": []})
        self.assertEqual(self.store.load_all(), [])

    def test_append_then_load(self) -> None:
        """Test that appended records come back in insertion order."""
        first = self._make_record("a.csv", category="Saúde")
        second = self._make_record("b.csv")

        self.assertTrue(self.store.append(first))
        self.assertTrue(self.store.append(second))

        records = self.store.load_all()
        self.assertEqual([r.id for r in records], [first.id, second.id])
        self.assertEqual(records[0].category, "Saúde")
        self.assertEqual(records[0].content, "ano,valor")

    def test_document_is_written_as_files_object(self) -> None:
        """Test the on-disk layout of the document."""
        record = self._make_record(caseName="IDEB")
        self.store.append(record)

        with open(self.db_file, "r", encoding="utf-8") as f:
            data = json.load(f)

        self.assertEqual(len(data["files"]), 1)
        self.assertEqual(data["files"][0]["caseName"], "IDEB")
        self.assertEqual(data["files"][0]["path"], record.path)

    def test_corrupt_document_loads_as_empty(self) -> None:
        """Test that a corrupt document does not raise."""
        self.db_file.write_text("{not json", encoding="utf-8")
        self.assertEqual(self.store.load_all(), [])

    def test_missing_document_loads_as_empty(self) -> None:
        """Test that a deleted document does not raise."""
        os.remove(self.db_file)
        self.assertEqual(self.store.load_all(), [])

    def test_remove_deletes_record_and_file(self) -> None:
        """Test that removing a record deletes the uploaded file too."""
        record = self._make_record()
        self.store.append(record)

        removed = self.store.remove(record.id)

        self.assertIsNotNone(removed)
        self.assertEqual(removed.id, record.id)
        self.assertFalse(os.path.exists(record.path))
        self.assertEqual(self.store.load_all(), [])

    def test_remove_unknown_id_returns_none(self) -> None:
        """Test that removing an unknown id changes nothing."""
        record = self._make_record()
        self.store.append(record)

        self.assertIsNone(self.store.remove("does-not-exist"))
        self.assertEqual(len(self.store.load_all()), 1)

    def test_remove_twice_is_noop(self) -> None:
        """Test that a second removal of the same id returns None."""
        record = self._make_record()
        self.store.append(record)

        self.assertIsNotNone(self.store.remove(record.id))
        self.assertIsNone(self.store.remove(record.id))

    def test_remove_tolerates_missing_physical_file(self) -> None:
        """Test that a record whose file is already gone is still removed."""
        record = self._make_record()
        self.store.append(record)
        os.remove(record.path)

        self.assertIsNotNone(self.store.remove(record.id))
        self.assertEqual(self.store.load_all(), [])

    def test_get(self) -> None:
        """Test lookup by id."""
        record = self._make_record()
        self.store.append(record)

        self.assertEqual(self.store.get(record.id).name, record.name)
        self.assertIsNone(self.store.get("unknown"))

    def test_write_failure_returns_false(self) -> None:
        """Test that a failed write is reported instead of raised."""
        record = self._make_record()
        self.store.file_path = self.data_dir / "missing-dir" / "db.json"

        self.assertFalse(self.store.append(record))

    def test_build_upload_path_sanitises_name(self) -> None:
        """Test the generated upload location."""
        path = self.store.build_upload_path("Relatório 2023 (final).pdf")

        self.assertEqual(path.parent, self.upload_dir)
        prefix, _, safe_name = path.name.partition("-")
        self.assertTrue(prefix.isdigit())
        self.assertEqual(safe_name, "Relat_rio_2023__final_.pdf")

    def test_concurrent_appends_keep_every_record(self) -> None:
        """Test that parallel appends do not lose updates."""
        records = [self._make_record(f"file{i}.csv") for i in range(20)]
        threads = [
            threading.Thread(target=self.store.append, args=(record,))
            for record in records
        ]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        stored_ids = {r.id for r in self.store.load_all()}
        self.assertEqual(stored_ids, {r.id for r in records})


if __name__ == "__main__":
    unittest.main()
