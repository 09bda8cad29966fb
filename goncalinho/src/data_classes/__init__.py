"""Data classes module for uploaded files, conversations and answers.

Classes:
    - FileRecord: An uploaded file with its metadata and extracted text
    - FileMetadata: Metadata sent by the client next to an upload
    - ConversationMessage: One turn of the conversation history
    - ScoredDocument: A file record with its keyword relevance score
    - ExtractionResult: Outcome of extracting text from a file
    - ChartData / ChartPoint: Chart descriptor embedded in an answer
    - ChartExtraction: Display text plus the chart found in an answer
"""

from goncalinho.src.data_classes.chart import ChartData, ChartExtraction, ChartPoint
from goncalinho.src.data_classes.conversation import (
    MODEL_ROLE,
    USER_ROLE,
    ConversationMessage,
)
from goncalinho.src.data_classes.extraction_result import ExtractionResult
from goncalinho.src.data_classes.file_record import FileMetadata, FileRecord
from goncalinho.src.data_classes.scored_document import ScoredDocument

__all__ = [
    "FileRecord",
    "FileMetadata",
    "ConversationMessage",
    "USER_ROLE",
    "MODEL_ROLE",
    "ScoredDocument",
    "ExtractionResult",
    "ChartData",
    "ChartPoint",
    "ChartExtraction",
]
