"""Unit tests for the FileRecord data class."""

import unittest

from goncalinho.src.data_classes import FileMetadata, FileRecord


class TestFileRecord(unittest.TestCase):
    """Test cases for building and serializing file records."""

    def test_defaults(self) -> None:
        record = FileRecord(name="a.csv", path="/tmp/a.csv", type="csv")

        self.assertEqual(record.category, "Geral")
        self.assertEqual(record.content, "")
        self.assertTrue(record.id)
        self.assertGreater(record.timestamp, 0)

    def test_ids_are_unique(self) -> None:
        first = FileRecord(name="a.csv", path="/tmp/a.csv", type="csv")
        second = FileRecord(name="a.csv", path="/tmp/a.csv", type="csv")
        self.assertNotEqual(first.id, second.id)

    def test_to_dict_without_content(self) -> None:
        record = FileRecord(name="a.csv", path="/tmp/a.csv", type="csv", content="x")

        self.assertEqual(record.to_dict()["content"], "x")
        self.assertNotIn("content", record.to_dict(include_content=False))

    def test_from_dict_fills_missing_keys(self) -> None:
        record = FileRecord.from_dict(
            {"id": "abc", "name": "antigo.txt", "path": "/x", "type": "txt"}
        )

        self.assertEqual(record.id, "abc")
        self.assertEqual(record.category, "Geral")
        self.assertEqual(record.caseName, "")
        self.assertEqual(record.content, "")

    def test_from_upload_applies_metadata(self) -> None:
        metadata = FileMetadata(category="Saúde", caseName="Vacinação", period=None)

        record = FileRecord.from_upload(
            name="vacinas.xlsx",
            path="/uploads/1-vacinas.xlsx",
            extension=".xlsx",
            content="texto",
            metadata=metadata,
        )

        self.assertEqual(record.type, "xlsx")
        self.assertEqual(record.category, "Saúde")
        self.assertEqual(record.caseName, "Vacinação")
        self.assertEqual(record.period, "")

    def test_from_upload_empty_category_defaults(self) -> None:
        record = FileRecord.from_upload(
            name="a.txt",
            path="/a",
            extension=".txt",
            content="",
            metadata=FileMetadata(category=""),
        )
        self.assertEqual(record.category, "Geral")


class TestFileMetadata(unittest.TestCase):
    """Test cases for parsing the upload metadata field."""

    def test_scalar_fields_are_stringified(self) -> None:
        metadata = FileMetadata.model_validate_json(
            '{"category": "Saúde", "period": 2022, "description": 1.5, "source": true}'
        )

        self.assertEqual(metadata.category, "Saúde")
        self.assertEqual(metadata.period, "2022")
        self.assertEqual(metadata.description, "1.5")
        self.assertEqual(metadata.source, "true")

    def test_only_structured_fields_are_dropped(self) -> None:
        metadata = FileMetadata.model_validate_json(
            '{"caseName": "IDEB", "source": ["INEP"], "period": {"ano": 2021}}'
        )

        self.assertEqual(metadata.caseName, "IDEB")
        self.assertIsNone(metadata.source)
        self.assertIsNone(metadata.period)


if __name__ == "__main__":
    unittest.main()
