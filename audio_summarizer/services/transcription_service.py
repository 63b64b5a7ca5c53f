"""
Speech-to-text service backed by OpenAI Whisper
"""

from typing import Any, Dict

from loguru import logger

from ..config import settings
from ..models.schemas import UploadedMedia
from .openai_client import ServiceNotConfiguredError, create_openai_client


class TranscriptionService:
    """Service for transcribing uploaded recordings"""

    def __init__(self):
        self.client = None
        self.model_name = settings.transcription_model

    async def initialize(self):
        """Initialize the OpenAI client"""
        logger.info("🔄 Initializing transcription service...")
        self.client = create_openai_client()
        if self.client:
            logger.info(f"✅ Transcription service initialized (model: {self.model_name})")

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    async def transcribe(self, media: UploadedMedia) -> str:
        """Send the recording to the transcription model and return its text"""
        if not self.client:
            await self.initialize()
        if not self.client:
            raise ServiceNotConfiguredError("Transcription service is not configured: OPENAI_API_KEY is missing")

        request: Dict[str, Any] = {
            "file": media.as_file_tuple(),
            "model": self.model_name,
        }
        if settings.transcription_language:
            request["language"] = settings.transcription_language

        logger.info(f"Transcribing '{media.upload_name}' with {self.model_name}")
        transcription = await self.client.audio.transcriptions.create(**request)

        transcript_text = transcription.text
        logger.info(f"Transcription received: {len(transcript_text)} characters")
        return transcript_text


# Global service instance
transcription_service = TranscriptionService()
