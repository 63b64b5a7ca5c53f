"""
Shared OpenAI client construction
"""

from typing import Optional

from openai import AsyncOpenAI
from loguru import logger

from ..config import settings


class ServiceNotConfiguredError(Exception):
    """Raised when an external AI service is called without credentials"""
    pass


def create_openai_client() -> Optional[AsyncOpenAI]:
    """
    Build an async OpenAI client from settings.

    Returns None when no API key is configured. Retries are disabled so a
    failed upstream call fails the request immediately.
    """
    if not settings.openai_api_key:
        logger.error("❌ OPENAI_API_KEY not configured!")
        logger.error("   Set OPENAI_API_KEY in your .env file")
        return None

    api_key = settings.openai_api_key.get_secret_value()
    logger.info("✅ OpenAI API key found")

    return AsyncOpenAI(
        api_key=api_key,
        base_url=settings.openai_base_url,
        organization=settings.openai_organization,
        max_retries=0,
    )
