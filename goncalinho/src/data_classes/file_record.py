"""Data class representing an uploaded file and the text extracted from it."""

import time
import uuid
from dataclasses import asdict, dataclass, field
from typing import Any, Dict, Optional

from pydantic import BaseModel, field_validator

from goncalinho.conf.config import Config


def _now_ms() -> int:
    return int(time.time() * 1000)


@dataclass
class FileRecord:
    """An uploaded file as persisted in the JSON document.

    Attributes:
        id: Unique identifier (uuid4 string)
        name: Original filename as uploaded
        path: Location of the stored file on disk
        type: Extension without the leading dot
        content: Extracted text, empty or an error placeholder
        timestamp: Creation time in milliseconds since the epoch
        category: Free-text category, "Geral" by default
        description: Free-text description
        source: Where the data comes from
        period: Period the data covers
        caseName: Name of the indicator the file describes
    """

    name: str
    path: str
    type: str
    content: str = ""
    id: str = field(default_factory=lambda: str(uuid.uuid4()))
    timestamp: int = field(default_factory=_now_ms)
    category: str = Config.DEFAULT_CATEGORY
    description: str = ""
    source: str = ""
    period: str = ""
    caseName: str = ""

    def to_dict(self, include_content: bool = True) -> Dict[str, Any]:
        """Convert the record to a JSON-serializable dictionary.

        Args:
            include_content: Whether to include the (possibly large) extracted text

        Returns:
            Dictionary with the persisted keys
        """
        result = asdict(self)
        if not include_content:
            result.pop("content")
        return result

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "FileRecord":
        """Create a FileRecord from a dictionary, filling in missing keys.

        Args:
            data: Dictionary as stored in the JSON document
        """
        return cls(
            id=str(data.get("id") or uuid.uuid4()),
            name=data.get("name", ""),
            path=data.get("path", ""),
            type=data.get("type", ""),
            content=data.get("content") or "",
            timestamp=data.get("timestamp") or 0,
            category=data.get("category") or Config.DEFAULT_CATEGORY,
            description=data.get("description") or "",
            source=data.get("source") or "",
            period=data.get("period") or "",
            caseName=data.get("caseName") or "",
        )

    @classmethod
    def from_upload(
        cls,
        name: str,
        path: str,
        extension: str,
        content: str,
        metadata: Optional["FileMetadata"] = None,
    ) -> "FileRecord":
        """Create a new record for a freshly uploaded file.

        Args:
            name: Original filename
            path: Where the upload was stored
            extension: File extension, with or without the leading dot
            content: Extracted text
            metadata: Metadata sent along with the upload
        """
        metadata = metadata or FileMetadata()
        return cls(
            name=name,
            path=path,
            type=extension.lstrip("."),
            content=content,
            category=metadata.category or Config.DEFAULT_CATEGORY,
            description=metadata.description or "",
            source=metadata.source or "",
            period=metadata.period or "",
            caseName=metadata.caseName or "",
        )

    def __repr__(self) -> str:
        return f"FileRecord(id={self.id}, name={self.name})"


class FileMetadata(BaseModel):
    """Metadata sent by the client as a JSON string next to the uploaded file."""

    category: Optional[str] = None
    description: Optional[str] = None
    source: Optional[str] = None
    period: Optional[str] = None
    caseName: Optional[str] = None

    @field_validator("*", mode="before")
    @classmethod
    def stringify_scalar(cls, v: Any) -> Optional[str]:
        """Keep a field sent as a number or boolean, drop objects and arrays.

        Args:
            v: The raw field value

        Returns:
            The value as a string, or None if it is not a scalar
        """
        if v is None or isinstance(v, str):
            return v
        if isinstance(v, bool):
            return "true" if v else "false"
        if isinstance(v, (int, float)):
            return str(v)
        return None
