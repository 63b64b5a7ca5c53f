"""
Upload form state.

The form holds a single immutable FormState. Every user action or backend
reply produces a new instance instead of mutating the current one.
"""

from typing import Optional

from pydantic import BaseModel

from ..models.requests import SummarizeResponse
from ..models.schemas import SummaryMode
from .api_client import SummarizerClient, SummarizerClientError

NO_FILE_SELECTED_MESSAGE = "Please select an audio or video file."


class FormState(BaseModel):
    file_path: Optional[str] = None
    mode: SummaryMode = SummaryMode.MEETING
    loading: bool = False
    error: Optional[str] = None
    result: Optional[SummarizeResponse] = None

    class Config:
        frozen = True

    def with_file(self, file_path: Optional[str]) -> "FormState":
        return self.model_copy(update={"file_path": file_path or None})

    def with_mode(self, mode: str) -> "FormState":
        return self.model_copy(update={"mode": SummaryMode(mode) if mode else SummaryMode.MEETING})

    def missing_file(self) -> "FormState":
        return self.model_copy(update={"error": NO_FILE_SELECTED_MESSAGE})

    def submit_started(self) -> "FormState":
        return self.model_copy(update={"loading": True, "error": None, "result": None})

    def submit_failed(self, message: str) -> "FormState":
        return self.model_copy(update={"loading": False, "error": message})

    def submit_succeeded(self, result: SummarizeResponse) -> "FormState":
        return self.model_copy(update={"loading": False, "result": result})


def run_submission(state: FormState, client: SummarizerClient) -> FormState:
    """Send the selected file and return the resulting state"""
    if not state.file_path:
        return state.missing_file()

    try:
        result = client.summarize(state.file_path, state.mode)
    except SummarizerClientError as e:
        return state.submit_failed(e.message)
    return state.submit_succeeded(result)
