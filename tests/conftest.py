"""
Test configuration and fixtures
"""

import os

# Keep test runs from writing the rotating log file
os.environ["LOG_FILE"] = ""

import pytest
from unittest.mock import AsyncMock, patch
from httpx import AsyncClient, ASGITransport

from audio_summarizer.main import app
from audio_summarizer.models.schemas import SummaryResult
from audio_summarizer.services.transcription_service import transcription_service
from audio_summarizer.services.summary_service import summary_service

MB = 1024 * 1024


@pytest.fixture
async def async_client():
    """Create an async HTTP client for testing."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as client:
        yield client


@pytest.fixture
def sample_result():
    """Structured summary as returned by the summarization model."""
    return SummaryResult(
        summary="The team agreed on the Q3 launch plan.",
        key_points=["Launch moves to September", "Budget approved"],
        action_items=["Anna drafts the announcement"],
        decisions=["Ship in September"],
    )


@pytest.fixture
def mock_transcribe():
    """Replace the transcription call with an AsyncMock."""
    with patch.object(transcription_service, "transcribe", new_callable=AsyncMock) as mocked:
        mocked.return_value = "Let's move the launch to September."
        yield mocked


@pytest.fixture
def mock_summarize(sample_result):
    """Replace the summarization call with an AsyncMock."""
    with patch.object(summary_service, "summarize", new_callable=AsyncMock) as mocked:
        mocked.return_value = sample_result
        yield mocked


def audio_upload(size_bytes: int, filename: str = "meeting.mp3", content_type: str = "audio/mpeg"):
    """Multipart file entry of the given size."""
    return {"file": (filename, b"\x00" * size_bytes, content_type)}
