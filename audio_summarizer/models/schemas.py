"""
Data models for uploaded media and structured summaries
"""

from enum import Enum
from typing import List, Optional, Tuple

from pydantic import BaseModel

from ..config import DEFAULT_UPLOAD_NAME


class SummaryMode(str, Enum):
    """Kind of recording, selects the summarization instruction"""
    MEETING = "meeting"
    PODCAST = "podcast"
    GENERIC = "generic"


class UploadedMedia(BaseModel):
    """Audio or video payload received from the upload form"""
    content: bytes
    size_bytes: int
    content_type: Optional[str] = None
    filename: Optional[str] = None

    @property
    def upload_name(self) -> str:
        return self.filename or DEFAULT_UPLOAD_NAME

    def as_file_tuple(self) -> Tuple[str, bytes, Optional[str]]:
        """File tuple in the shape the OpenAI SDK accepts for uploads"""
        return (self.upload_name, self.content, self.content_type or None)


class SummaryResult(BaseModel):
    """Structured summary returned by the text-generation model"""
    summary: str
    key_points: List[str]
    action_items: List[str]
    decisions: List[str]


# Strict JSON schema sent with the summarization request.
# Must stay in step with SummaryResult.
SUMMARY_SCHEMA_NAME = "audio_summary"

SUMMARY_JSON_SCHEMA = {
    "type": "object",
    "properties": {
        "summary": {"type": "string"},
        "key_points": {
            "type": "array",
            "items": {"type": "string"},
        },
        "action_items": {
            "type": "array",
            "items": {"type": "string"},
        },
        "decisions": {
            "type": "array",
            "items": {"type": "string"},
        },
    },
    "required": ["summary", "key_points", "action_items", "decisions"],
    "additionalProperties": False,
}
