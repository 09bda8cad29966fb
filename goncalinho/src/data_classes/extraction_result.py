from dataclasses import dataclass
from typing import Optional


@dataclass
class ExtractionResult:
    """Outcome of extracting text from an uploaded file.

    Attributes:
        text: Text to store as the record's content. On failure this holds
            a human readable placeholder instead of the file text
        error: Reason of the failure, None when extraction succeeded
    """

    text: str
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        """Whether the extraction succeeded."""
        return self.error is None
