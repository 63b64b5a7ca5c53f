"""
Services package initialization
"""

from .openai_client import ServiceNotConfiguredError
from .transcription_service import transcription_service
from .summary_service import summary_service

__all__ = [
    "ServiceNotConfiguredError",
    "transcription_service",
    "summary_service"
]
