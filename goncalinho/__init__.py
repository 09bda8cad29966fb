"""
Gonçalinho: chat backend for São Gonçalo dos Campos municipal data.

This package contains:
- Flask application and API routes
- JSON document store for uploaded files and their extracted text
- Keyword relevance selection of the model context
- Gemini integration with streamed answers and an answer cache
- A Python client mirroring the browser client, including chart extraction
"""

import logging
import os

# Configure logging with clickable paths before anything else imports logging
logging.basicConfig(
    level=logging.INFO, format="%(levelname)s: %(pathname)s:%(lineno)d %(message)s"
)


class ClickablePathFilter(logging.Filter):
    """Filter to make file paths clickable in the terminal."""

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "pathname"):
            # Convert absolute path to relative path from workspace root
            workspace_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
            try:
                record.pathname = os.path.relpath(record.pathname, workspace_root)
            except ValueError:
                # Path on another drive
                pass
        return True


# Apply filter to root logger
logging.getLogger().addFilter(ClickablePathFilter())
