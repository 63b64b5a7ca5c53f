"""
Validation utilities for the Audio Summarizer application
"""

from typing import Any, Optional

from loguru import logger

from ..config import DEFAULT_SUMMARY_MODE, MODE_INSTRUCTIONS
from ..models.schemas import SummaryMode


class RequestValidator:
    """Utility class for validating API requests"""

    @staticmethod
    def resolve_mode(raw_mode: Any) -> SummaryMode:
        """
        Resolve the submitted mode field.

        An absent or empty value means a meeting. "meeting" and "podcast" are
        matched exactly; every other value falls back to a generic summary.
        """
        if not isinstance(raw_mode, str) or not raw_mode:
            return SummaryMode(DEFAULT_SUMMARY_MODE)

        if raw_mode == SummaryMode.MEETING.value:
            return SummaryMode.MEETING
        if raw_mode == SummaryMode.PODCAST.value:
            return SummaryMode.PODCAST

        if raw_mode != SummaryMode.GENERIC.value:
            log_validation_warning("Unrecognized mode, using generic summary", {"mode": raw_mode})
        return SummaryMode.GENERIC

    @staticmethod
    def instruction_for(mode: SummaryMode) -> str:
        """Instruction text interpolated into the summarization prompt"""
        return MODE_INSTRUCTIONS[mode.value]


def log_validation_warning(message: str, context: Optional[dict] = None):
    """Log validation warnings with context"""
    log_message = f"Validation warning: {message}"
    if context:
        log_message += f" | Context: {context}"
    logger.warning(log_message)
