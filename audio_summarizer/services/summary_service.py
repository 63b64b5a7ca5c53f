"""
Structured summarization service using the OpenAI Responses API
"""

import json
from typing import Any, Dict, List

from loguru import logger

from ..config import settings
from ..models.schemas import SummaryMode, SummaryResult, SUMMARY_JSON_SCHEMA, SUMMARY_SCHEMA_NAME
from ..utils.validators import RequestValidator
from .openai_client import ServiceNotConfiguredError, create_openai_client


SYSTEM_PROMPT = """
You are an expert AI assistant that summarizes audio transcripts.

Return a structured JSON object with the following shape:

{
  "summary": "short paragraph",
  "key_points": ["...", "..."],
  "action_items": ["...", "..."],
  "decisions": ["...", "..."]
}

Rules:
- Write in the same language as the transcript.
- Be concise but informative.
- "action_items" and "decisions" can be empty arrays if not applicable.
"""


class SummaryService:
    """Service for turning transcripts into structured summaries"""

    def __init__(self):
        self.client = None
        self.model_name = settings.summary_model

    async def initialize(self):
        """Initialize the OpenAI client"""
        logger.info("🔄 Initializing summary service...")
        self.client = create_openai_client()
        if self.client:
            logger.info(f"✅ Summary service initialized (model: {self.model_name})")

    @property
    def is_configured(self) -> bool:
        return self.client is not None

    @staticmethod
    def build_messages(transcript: str, mode: SummaryMode) -> List[Dict[str, str]]:
        """Build the system and user messages for a transcript"""
        instructions = RequestValidator.instruction_for(mode)
        return [
            {
                "role": "system",
                "content": SYSTEM_PROMPT,
            },
            {
                "role": "user",
                "content": f"Instructions: {instructions}\n\nTranscript:\n{transcript}",
            },
        ]

    @staticmethod
    def response_format() -> Dict[str, Any]:
        """Structured output contract for the text-generation model"""
        return {
            "format": {
                "type": "json_schema",
                "name": SUMMARY_SCHEMA_NAME,
                "strict": True,
                "schema": SUMMARY_JSON_SCHEMA,
            }
        }

    async def summarize(self, transcript: str, mode: SummaryMode) -> SummaryResult:
        """Summarize a transcript according to the selected mode"""
        if not self.client:
            await self.initialize()
        if not self.client:
            raise ServiceNotConfiguredError("Summary service is not configured: OPENAI_API_KEY is missing")

        logger.info(f"Summarizing transcript ({len(transcript)} characters, mode: {mode.value}) with {self.model_name}")
        response = await self.client.responses.create(
            model=self.model_name,
            input=self.build_messages(transcript, mode),
            text=self.response_format(),
        )

        result = self.parse_output(response)
        logger.info(
            f"Summary generated: {len(result.key_points)} key points, "
            f"{len(result.action_items)} action items, {len(result.decisions)} decisions"
        )
        return result

    @staticmethod
    def parse_output(response: Any) -> SummaryResult:
        """Parse the first content item of the first output message"""
        content = response.output[0].content[0]

        if content.type == "output_text":
            json_text = content.text
        else:
            # Unreachable while the strict schema is requested
            logger.warning(f"Unexpected summary content type '{content.type}', parsing raw content")
            json_text = content.model_dump_json()

        return SummaryResult.model_validate(json.loads(json_text))


# Global service instance
summary_service = SummaryService()
