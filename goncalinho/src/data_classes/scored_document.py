from dataclasses import dataclass

from goncalinho.src.data_classes.file_record import FileRecord


@dataclass
class ScoredDocument:
    """A file record together with its keyword relevance score.

    Attributes:
        record: The stored file record
        score: Keyword points matched in the record's metadata
    """

    record: FileRecord
    score: int

    def __repr__(self) -> str:
        return f"ScoredDocument(name={self.record.name}, score={self.score})"
