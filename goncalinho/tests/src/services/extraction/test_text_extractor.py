"""Unit tests for the TextExtractor service."""

import tempfile
import unittest
from pathlib import Path
from unittest.mock import MagicMock, patch

import pandas as pd
from docx import Document
from pypdf import PdfWriter

from goncalinho.src.services.extraction import TextExtractor


class TestTextExtractor(unittest.TestCase):
    """Test cases for extension-based text extraction."""

    def setUp(self) -> None:
        """Set up a temporary directory for the generated files."""
        self.temp_dir = tempfile.TemporaryDirectory()
        self.dir = Path(self.temp_dir.name)
        self.extractor = TextExtractor()

    def tearDown(self) -> None:
        """Remove the generated files."""
        self.temp_dir.cleanup()

    def test_plain_text_formats(self) -> None:
        """Test that csv, txt and json are read as text."""
        for name, body in [
            ("dados.csv", "ano,valor\n2020,10\n"),
            ("notas.txt", "São Gonçalo dos Campos"),
            ("dados.json", '{"populacao": 39000}'),
        ]:
            with self.subTest(name=name):
                path = self.dir / name
                path.write_text(body, encoding="utf-8")

                result = self.extractor.extract(path, name)

                self.assertTrue(result.ok)
                self.assertEqual(result.text, body)

    def test_extension_is_case_insensitive(self) -> None:
        """Test that the dispatch ignores the extension's case."""
        path = self.dir / "upload"
        path.write_text("conteudo", encoding="utf-8")

        self.assertEqual(self.extractor.extract(path, "DADOS.TXT").text, "conteudo")

    def test_invalid_utf8_is_replaced(self) -> None:
        """Test that undecodable bytes do not fail the extraction."""
        path = self.dir / "latin1.csv"
        path.write_bytes("população".encode("latin-1"))

        result = self.extractor.extract(path, "latin1.csv")

        self.assertTrue(result.ok)
        self.assertIn("popula", result.text)

    def test_spreadsheet_sheets_become_csv(self) -> None:
        """Test that every sheet is converted to CSV under a header line."""
        path = self.dir / "indicadores.xlsx"
        with pd.ExcelWriter(path) as writer:
            pd.DataFrame({"ano": [2020, 2021], "valor": [10, 12]}).to_excel(
                writer, sheet_name="Saude", index=False
            )
            pd.DataFrame({"escola": ["A"], "ideb": [5]}).to_excel(
                writer, sheet_name="Educacao", index=False
            )

        result = self.extractor.extract(path, "indicadores.xlsx")

        self.assertTrue(result.ok)
        self.assertTrue(result.text.startswith("Arquivo Excel: indicadores.xlsx\n"))
        self.assertIn("\n--- Planilha: Saude ---\nano,valor\n2020,10\n2021,12\n", result.text)
        self.assertIn("\n--- Planilha: Educacao ---\nescola,ideb\nA,5\n", result.text)
        self.assertLess(
            result.text.index("Planilha: Saude"), result.text.index("Planilha: Educacao")
        )

    def test_docx_paragraphs_and_tables(self) -> None:
        """Test that Word paragraphs and table rows are extracted."""
        path = self.dir / "relatorio.docx"
        document = Document()
        document.add_paragraph("Relatório anual")
        document.add_paragraph("Indicadores de saúde")
        table = document.add_table(rows=1, cols=2)
        table.rows[0].cells[0].text = "Ano"
        table.rows[0].cells[1].text = "2023"
        document.save(str(path))

        result = self.extractor.extract(path, "relatorio.docx")

        self.assertTrue(result.ok)
        self.assertIn("Relatório anual\n\nIndicadores de saúde", result.text)
        self.assertIn("Ano | 2023", result.text)

    @patch("goncalinho.src.services.extraction.text_extractor.PdfReader")
    def test_pdf_pages_are_joined(self, mock_reader_cls: MagicMock) -> None:
        """Test that the text of every page is joined."""
        page1, page2, blank = MagicMock(), MagicMock(), MagicMock()
        page1.extract_text.return_value = "Página 1 "
        page2.extract_text.return_value = "Página 2"
        blank.extract_text.return_value = None
        mock_reader_cls.return_value.pages = [page1, blank, page2]

        result = self.extractor.extract(self.dir / "doc.pdf", "doc.pdf")

        self.assertTrue(result.ok)
        self.assertEqual(result.text, "Página 1\nPágina 2")

    def test_pdf_without_text(self) -> None:
        """Test that a PDF with only blank pages gives an empty text."""
        path = self.dir / "blank.pdf"
        writer = PdfWriter()
        writer.add_blank_page(width=200, height=200)
        with open(path, "wb") as f:
            writer.write(f)

        result = self.extractor.extract(path, "blank.pdf")

        self.assertTrue(result.ok)
        self.assertEqual(result.text, "")

    def test_unsupported_extension_gives_empty_text(self) -> None:
        """Test that unsupported formats are silently skipped."""
        path = self.dir / "arquivo.zip"
        path.write_bytes(b"PK\x03\x04")

        result = self.extractor.extract(path, "arquivo.zip")

        self.assertTrue(result.ok)
        self.assertEqual(result.text, "")
        self.assertFalse(self.extractor.is_supported("arquivo.zip"))

    def test_corrupt_file_gives_placeholder(self) -> None:
        """Test that reader failures become a placeholder text."""
        for name in ["quebrado.xlsx", "quebrado.docx", "quebrado.pdf"]:
            with self.subTest(name=name):
                path = self.dir / name
                path.write_bytes(b"this is not a real document")

                result = self.extractor.extract(path, name)

                self.assertFalse(result.ok)
                self.assertTrue(result.text.startswith("Erro ao ler arquivo: "))
                self.assertIsNotNone(result.error)

    def test_missing_file_gives_placeholder(self) -> None:
        """Test that a vanished upload does not raise."""
        result = self.extractor.extract(self.dir / "nope.txt", "nope.txt")

        self.assertFalse(result.ok)
        self.assertTrue(result.text.startswith("Erro ao ler arquivo: "))

    def test_supported_extensions(self) -> None:
        """Test the list of supported extensions."""
        self.assertEqual(
            self.extractor.supported_extensions,
            [".csv", ".docx", ".json", ".pdf", ".txt", ".xls", ".xlsx"],
        )


if __name__ == "__main__":
    unittest.main()
