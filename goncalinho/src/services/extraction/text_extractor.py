"""Text extraction from uploaded files.

Dispatches purely on the extension of the original filename:

- ``.csv``, ``.txt``, ``.json``: read as UTF-8 text
- ``.xlsx``, ``.xls``: every sheet converted to CSV (pandas)
- ``.docx``: paragraphs and tables (python-docx)
- ``.pdf``: page text (pypdf)

Other extensions produce an empty text. Reader failures never propagate:
they become a placeholder text stored as the file's content.
"""

import logging
import os
from pathlib import Path
from typing import Callable, Dict, List, Union

import pandas as pd
from docx import Document as DocxDocument
from pypdf import PdfReader

from goncalinho.conf.prompts import EXTRACTION_ERROR_TEMPLATE
from goncalinho.src.data_classes import ExtractionResult

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]


class TextExtractor:
    """Extracts plain text from the supported file formats."""

    def __init__(self) -> None:
        self._readers: Dict[str, Callable[[Path, str], str]] = {
            ".csv": self._read_plain_text,
            ".txt": self._read_plain_text,
            ".json": self._read_plain_text,
            ".xlsx": self._read_spreadsheet,
            ".xls": self._read_spreadsheet,
            ".docx": self._read_docx,
            ".pdf": self._read_pdf,
        }

    @property
    def supported_extensions(self) -> List[str]:
        """Extensions (with leading dot) that produce text."""
        return sorted(self._readers)

    def is_supported(self, original_name: str) -> bool:
        """Check whether a filename has a supported extension."""
        return os.path.splitext(original_name)[1].lower() in self._readers

    def extract(self, path: PathLike, original_name: str) -> ExtractionResult:
        """Extract the text of a stored upload.

        Args:
            path: Where the uploaded file was saved
            original_name: Filename sent by the client, used for dispatch

        Returns:
            ExtractionResult: The text, an empty text for unsupported
            extensions, or a placeholder text and the error on failure
        """
        extension = os.path.splitext(original_name)[1].lower()
        reader = self._readers.get(extension)
        if reader is None:
            logger.debug(f"No text extraction for '{extension}' ({original_name})")
            return ExtractionResult(text="")

        try:
            text = reader(Path(path), original_name)
        except Exception as e:
            logger.error(f"Error parsing {original_name}: {str(e)}")
            return ExtractionResult(
                text=EXTRACTION_ERROR_TEMPLATE.format(reason=str(e)), error=str(e)
            )

        logger.info(f"Extracted {len(text)} characters from {original_name}")
        return ExtractionResult(text=text)

    @staticmethod
    def _read_plain_text(path: Path, original_name: str) -> str:
        with open(path, "r", encoding="utf-8", errors="replace") as f:
            return f.read()

    @staticmethod
    def _read_spreadsheet(path: Path, original_name: str) -> str:
        # CSV is cheaper in tokens than a JSON dump of the rows
        sheets: Dict[str, pd.DataFrame] = pd.read_excel(
            path, sheet_name=None, header=None, dtype=str
        )
        full_text = f"Arquivo Excel: {original_name}\n"
        for sheet_name, frame in sheets.items():
            csv = frame.to_csv(index=False, header=False)
            full_text += f"\n--- Planilha: {sheet_name} ---\n{csv}"
        return full_text

    @staticmethod
    def _read_docx(path: Path, original_name: str) -> str:
        document = DocxDocument(str(path))
        paragraphs = [p.text.strip() for p in document.paragraphs if p.text.strip()]

        for table in document.tables:
            rows = [" | ".join(cell.text.strip() for cell in row.cells) for row in table.rows]
            if rows:
                paragraphs.append("\n".join(rows))

        return "\n\n".join(paragraphs)

    @staticmethod
    def _read_pdf(path: Path, original_name: str) -> str:
        reader = PdfReader(str(path))
        pages = [page.extract_text() or "" for page in reader.pages]
        return "\n".join(text.strip() for text in pages if text.strip())
