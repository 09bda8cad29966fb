"""Client for the Gonçalinho HTTP API."""

import json
import logging
from pathlib import Path
from typing import Any, Callable, Dict, List, Optional, Sequence, Union

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from goncalinho.conf.prompts import CONNECTION_ERROR_TEXT
from goncalinho.src.client.chart_extractor import extract_chart
from goncalinho.src.data_classes import MODEL_ROLE, ChartExtraction

logger = logging.getLogger(__name__)

HistoryEntry = Dict[str, Any]


class GoncalinhoClient:
    """Client managing files and streaming answers from a running backend."""

    def __init__(
        self, base_url: str = "", max_retries: int = 3, retry_delay: float = 1.0
    ):
        """
        Initialize the client.

        Args:
            base_url: Base URL of the backend (e.g., "http://localhost:3001")
            max_retries: Maximum number of retries for failed idempotent requests
            retry_delay: Backoff factor between retries in seconds
        """
        self.base_url = base_url.rstrip("/")

        # Retries only apply to idempotent methods; uploads and questions are not retried
        self.session = requests.Session()
        retry_strategy = Retry(
            total=max_retries,
            backoff_factor=retry_delay,
            status_forcelist=[502, 503, 504],
            allowed_methods=["GET", "DELETE"],
        )
        adapter = HTTPAdapter(max_retries=retry_strategy)
        self.session.mount("http://", adapter)
        self.session.mount("https://", adapter)

    def _url(self, path: str) -> str:
        return f"{self.base_url}{path}"

    def get_all_files(self) -> List[Dict[str, Any]]:
        """Fetch the metadata of every stored file.

        Returns:
            List of file records without content, empty on any failure
        """
        try:
            response = self.session.get(self._url("/files"), timeout=30)
            response.raise_for_status()
            return response.json()
        except (requests.exceptions.RequestException, ValueError) as e:
            logger.error(f"Failed to fetch files: {str(e)}")
            return []

    def upload_file(
        self, path: Union[str, Path], metadata: Optional[Dict[str, Any]] = None
    ) -> Dict[str, Any]:
        """Upload a file with its metadata.

        Args:
            path: Local file to upload
            metadata: category, description, source, period and caseName

        Returns:
            The stored record without its content

        Raises:
            RuntimeError: If the backend rejects the upload
        """
        path = Path(path)
        with open(path, "rb") as f:
            response = self.session.post(
                self._url("/api/upload"),
                files={"file": (path.name, f)},
                data={"metadata": json.dumps(metadata or {})},
                timeout=300,
            )

        if not response.ok:
            logger.error(f"Upload failed ({response.status_code}): {response.text}")
            raise RuntimeError("Upload failed")
        return response.json()["file"]

    def delete_file(self, file_id: str) -> None:
        """Delete a stored file.

        Args:
            file_id: Identifier of the record
        """
        response = self.session.delete(self._url(f"/files/{file_id}"), timeout=30)
        response.raise_for_status()

    def stream_response(
        self,
        history: Sequence[HistoryEntry],
        prompt: str,
        on_chunk: Optional[Callable[[str], None]] = None,
    ) -> ChartExtraction:
        """Ask a question and stream the answer.

        Model turns still marked ``isLoading`` are left out of the history.
        Once the stream ends the chart descriptor, if any, is extracted.

        Args:
            history: Previous turns as ``{"role", "text", ...}`` dictionaries
            prompt: The new question
            on_chunk: Called with every text increment as it arrives

        Returns:
            ChartExtraction: Display text and chart of the complete answer
        """
        payload = {
            "message": prompt,
            "history": [
                turn
                for turn in history
                if turn.get("role") != MODEL_ROLE or not turn.get("isLoading")
            ],
        }

        full_text = ""
        try:
            with self.session.post(
                self._url("/api/ask"), json=payload, stream=True, timeout=None
            ) as response:
                response.encoding = response.encoding or "utf-8"
                for chunk in response.iter_content(chunk_size=None, decode_unicode=True):
                    if not chunk:
                        continue
                    full_text += chunk
                    if on_chunk is not None:
                        on_chunk(chunk)
        except requests.exceptions.RequestException as e:
            logger.error(f"Stream error: {str(e)}")
            return ChartExtraction(text=CONNECTION_ERROR_TEXT)

        return extract_chart(full_text)
