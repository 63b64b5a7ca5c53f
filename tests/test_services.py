"""
Test the transcription and summary services against a fake OpenAI client
"""

import json
from types import SimpleNamespace
from typing import List
from unittest.mock import AsyncMock, MagicMock

import pytest
from openai import AsyncOpenAI
from openai.types.responses import ResponseOutputRefusal, ResponseOutputText
from pydantic import BaseModel, ValidationError

from audio_summarizer.config import settings, MODE_INSTRUCTIONS
from audio_summarizer.models.schemas import (
    SummaryMode, SummaryResult, UploadedMedia, SUMMARY_JSON_SCHEMA, SUMMARY_SCHEMA_NAME
)
from audio_summarizer.services.openai_client import ServiceNotConfiguredError, create_openai_client
from audio_summarizer.services.summary_service import SummaryService, SYSTEM_PROMPT
from audio_summarizer.services.transcription_service import TranscriptionService


def fake_response(content):
    """Responses API result with a single output message."""
    return SimpleNamespace(output=[SimpleNamespace(type="message", content=[content])])


def text_content(payload: dict) -> ResponseOutputText:
    return ResponseOutputText(type="output_text", text=json.dumps(payload), annotations=[])


SUMMARY_PAYLOAD = {
    "summary": "A short greeting.",
    "key_points": ["Greeting"],
    "action_items": [],
    "decisions": [],
}


class TestSummaryService:
    """Test prompt building, request shape and output parsing."""

    @pytest.mark.parametrize("mode", list(SummaryMode))
    def test_instruction_per_mode(self, mode):
        messages = SummaryService.build_messages("Hello world.", mode)

        assert messages[0] == {"role": "system", "content": SYSTEM_PROMPT}
        assert messages[1]["role"] == "user"
        assert messages[1]["content"] == (
            f"Instructions: {MODE_INSTRUCTIONS[mode.value]}\n\nTranscript:\nHello world."
        )

    def test_meeting_and_podcast_instructions(self):
        meeting = SummaryService.build_messages("t", SummaryMode.MEETING)[1]["content"]
        podcast = SummaryService.build_messages("t", SummaryMode.PODCAST)[1]["content"]
        generic = SummaryService.build_messages("t", SummaryMode.GENERIC)[1]["content"]

        assert "Focus on decisions, responsibilities and next steps." in meeting
        assert "Focus on main themes and interesting insights." in podcast
        assert "Provide a general useful summary." in generic

    def test_schema_matches_result_model(self):
        assert SUMMARY_JSON_SCHEMA["additionalProperties"] is False
        assert set(SUMMARY_JSON_SCHEMA["required"]) == set(SummaryResult.model_fields)
        assert SUMMARY_JSON_SCHEMA["properties"]["summary"] == {"type": "string"}
        for field in ("key_points", "action_items", "decisions"):
            assert SUMMARY_JSON_SCHEMA["properties"][field] == {"type": "array", "items": {"type": "string"}}

    async def test_summarize_request_shape(self):
        service = SummaryService()
        service.client = MagicMock()
        service.client.responses.create = AsyncMock(return_value=fake_response(text_content(SUMMARY_PAYLOAD)))

        result = await service.summarize("Hello world.", SummaryMode.PODCAST)

        assert result == SummaryResult(**SUMMARY_PAYLOAD)
        kwargs = service.client.responses.create.await_args.kwargs
        assert kwargs["model"] == settings.summary_model
        assert kwargs["input"] == SummaryService.build_messages("Hello world.", SummaryMode.PODCAST)
        assert kwargs["text"] == {
            "format": {
                "type": "json_schema",
                "name": SUMMARY_SCHEMA_NAME,
                "strict": True,
                "schema": SUMMARY_JSON_SCHEMA,
            }
        }

    async def test_summarize_propagates_upstream_error(self):
        service = SummaryService()
        service.client = MagicMock()
        service.client.responses.create = AsyncMock(side_effect=RuntimeError("rate limited"))

        with pytest.raises(RuntimeError, match="rate limited"):
            await service.summarize("Hello world.", SummaryMode.MEETING)

    def test_parse_output_text(self):
        result = SummaryService.parse_output(fake_response(text_content(SUMMARY_PAYLOAD)))

        assert result.summary == "A short greeting."
        assert result.action_items == []
        assert result.decisions == []

    def test_parse_output_invalid_json(self):
        content = ResponseOutputText(type="output_text", text="not json", annotations=[])

        with pytest.raises(json.JSONDecodeError):
            SummaryService.parse_output(fake_response(content))

    def test_parse_output_missing_field(self):
        payload = {"summary": "Only a summary"}

        with pytest.raises(ValidationError):
            SummaryService.parse_output(fake_response(text_content(payload)))

    def test_parse_output_structured_content(self):
        """Non-text content is serialized and parsed as-is."""

        class StructuredContent(BaseModel):
            type: str
            summary: str
            key_points: List[str]
            action_items: List[str]
            decisions: List[str]

        content = StructuredContent(type="output_json", **SUMMARY_PAYLOAD)

        result = SummaryService.parse_output(fake_response(content))

        assert result == SummaryResult(**SUMMARY_PAYLOAD)

    def test_parse_output_refusal(self):
        content = ResponseOutputRefusal(type="refusal", refusal="I can't help with that.")

        with pytest.raises(ValidationError):
            SummaryService.parse_output(fake_response(content))

    async def test_not_configured(self, monkeypatch):
        monkeypatch.setattr(settings, "openai_api_key", None)
        service = SummaryService()

        with pytest.raises(ServiceNotConfiguredError):
            await service.summarize("Hello world.", SummaryMode.MEETING)
        assert service.is_configured is False


class TestTranscriptionService:
    """Test the transcription request."""

    def make_service(self, text: str = "Hello world."):
        service = TranscriptionService()
        service.client = MagicMock()
        service.client.audio.transcriptions.create = AsyncMock(return_value=SimpleNamespace(text=text))
        return service

    async def test_transcribe(self):
        service = self.make_service()
        media = UploadedMedia(content=b"abc", size_bytes=3, content_type="audio/mp4", filename="standup.m4a")

        transcript = await service.transcribe(media)

        assert transcript == "Hello world."
        kwargs = service.client.audio.transcriptions.create.await_args.kwargs
        assert kwargs["file"] == ("standup.m4a", b"abc", "audio/mp4")
        assert kwargs["model"] == settings.transcription_model
        assert "language" not in kwargs

    async def test_default_upload_name(self):
        service = self.make_service()
        media = UploadedMedia(content=b"abc", size_bytes=3, content_type="audio/mpeg")

        await service.transcribe(media)

        kwargs = service.client.audio.transcriptions.create.await_args.kwargs
        assert kwargs["file"] == ("audio.mp3", b"abc", "audio/mpeg")

    async def test_language_hint(self, monkeypatch):
        monkeypatch.setattr(settings, "transcription_language", "en")
        service = self.make_service()
        media = UploadedMedia(content=b"abc", size_bytes=3)

        await service.transcribe(media)

        kwargs = service.client.audio.transcriptions.create.await_args.kwargs
        assert kwargs["language"] == "en"
        assert kwargs["file"] == ("audio.mp3", b"abc", None)

    async def test_not_configured(self, monkeypatch):
        monkeypatch.setattr(settings, "openai_api_key", None)
        service = TranscriptionService()
        media = UploadedMedia(content=b"abc", size_bytes=3)

        with pytest.raises(ServiceNotConfiguredError):
            await service.transcribe(media)


class TestOpenAIClient:
    """Test client construction from settings."""

    def test_no_api_key(self, monkeypatch):
        monkeypatch.setattr(settings, "openai_api_key", None)
        assert create_openai_client() is None

    def test_client_without_retries(self, monkeypatch):
        from pydantic import SecretStr

        monkeypatch.setattr(settings, "openai_api_key", SecretStr("sk-test-1234"))

        client = create_openai_client()

        assert isinstance(client, AsyncOpenAI)
        assert client.api_key == "sk-test-1234"
        assert client.max_retries == 0

    def test_api_key_not_logged(self, monkeypatch):
        from loguru import logger
        from pydantic import SecretStr

        monkeypatch.setattr(settings, "openai_api_key", SecretStr("sk-test-9876"))
        messages = []
        handler_id = logger.add(messages.append, format="{message}")
        try:
            create_openai_client()
        finally:
            logger.remove(handler_id)

        assert any("API key found" in message for message in messages)
        assert not any("9876" in message for message in messages)
