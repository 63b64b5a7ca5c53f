"""
HTTP client used by the upload form to call the summarize endpoint
"""

import mimetypes
import os
from typing import Optional

import requests
from loguru import logger

from ..config import settings
from ..models.requests import SummarizeResponse
from ..models.schemas import SummaryMode

SUMMARIZE_PATH = "/api/summarize"

REQUEST_FAILED_MESSAGE = "Request failed"
UNEXPECTED_ERROR_MESSAGE = "Unexpected error"


class SummarizerClientError(Exception):
    """Error with a message that can be shown to the user as-is"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SummarizerClient:
    """Posts a recording to the backend and returns the structured summary"""

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or settings.backend_base_url).rstrip('/')
        self.timeout = timeout if timeout is not None else settings.frontend_request_timeout

    @property
    def endpoint(self) -> str:
        return f"{self.base_url}{SUMMARIZE_PATH}"

    def summarize(self, file_path: str, mode: SummaryMode) -> SummarizeResponse:
        """Upload one file with its mode. Raises SummarizerClientError on any failure."""
        filename = os.path.basename(file_path)
        content_type = mimetypes.guess_type(filename)[0] or "application/octet-stream"

        logger.info(f"Uploading {filename} ({content_type}) to {self.endpoint} in {mode.value} mode")
        try:
            with open(file_path, 'rb') as f:
                files = {'file': (filename, f, content_type)}
                response = requests.post(
                    self.endpoint,
                    files=files,
                    data={'mode': mode.value},
                    timeout=self.timeout
                )
        except (requests.exceptions.RequestException, OSError) as e:
            logger.error(f"Error connecting to backend: {e}")
            raise SummarizerClientError(UNEXPECTED_ERROR_MESSAGE) from e

        if not response.ok:
            message = self._error_message(response)
            logger.error(f"Backend returned {response.status_code}: {message}")
            raise SummarizerClientError(message)

        try:
            return SummarizeResponse.model_validate(response.json())
        except ValueError as e:
            logger.error(f"Error processing response: {e}")
            raise SummarizerClientError(UNEXPECTED_ERROR_MESSAGE) from e

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            data = response.json()
        except ValueError:
            return UNEXPECTED_ERROR_MESSAGE

        if isinstance(data, dict) and data.get("error"):
            return str(data["error"])
        return REQUEST_FAILED_MESSAGE
