"""Query processing service."""

from goncalinho.src.services.query_processing.query_processing_service import (
    QueryProcessingService,
    is_rate_limit_error,
)

__all__ = ["QueryProcessingService", "is_rate_limit_error"]
