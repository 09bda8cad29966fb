"""Client package for the HTTP API.

Mirrors what the browser does: file management, streamed answers and the
extraction of the chart descriptor from a complete answer.
"""

from .api_client import GoncalinhoClient
from .chart_extractor import extract_chart, iter_json_candidates

__all__ = ["GoncalinhoClient", "extract_chart", "iter_json_candidates"]
