"""Chunked plain-text streaming utilities.

Answers are streamed as raw text so the browser can render them while they
are generated. Once the headers are sent the status is 200; failures later in
the stream are reported as text.
"""

import logging
from typing import Callable, Iterable

from flask import Response, stream_with_context

logger = logging.getLogger(__name__)

TEXT_STREAM_MIMETYPE = "text/plain; charset=utf-8"


def create_text_stream_response(
    generator_func: Callable[[], Iterable[str]],
) -> Response:
    """Create a chunked plain-text response.

    Args:
        generator_func: Function returning the text increments to send

    Returns:
        Flask Response streaming the increments as they are produced
    """
    return Response(
        stream_with_context(generator_func()),
        content_type=TEXT_STREAM_MIMETYPE,
        headers={
            "Cache-Control": "no-cache",
            "X-Accel-Buffering": "no",
        },
    )
