"""API utilities."""

from .streaming import TEXT_STREAM_MIMETYPE, create_text_stream_response

__all__ = ["TEXT_STREAM_MIMETYPE", "create_text_stream_response"]
