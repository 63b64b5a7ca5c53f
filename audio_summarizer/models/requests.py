"""
Request and Response models for API endpoints
"""

from datetime import datetime
from typing import Dict, List

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from .schemas import SummaryResult


class SummarizeResponse(BaseModel):
    """Response model for audio summarization, serialized with camelCase keys"""
    transcript: str
    summary: str
    key_points: List[str]
    action_items: List[str]
    decisions: List[str]

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    @classmethod
    def from_result(cls, transcript: str, result: SummaryResult) -> "SummarizeResponse":
        return cls(
            transcript=transcript,
            summary=result.summary,
            key_points=result.key_points,
            action_items=result.action_items,
            decisions=result.decisions,
        )


class ErrorResponse(BaseModel):
    """Response model for errors"""
    error: str


class HealthResponse(BaseModel):
    """Response model for health check"""
    status: str
    timestamp: datetime
    version: str
    services: Dict[str, str]
    uptime_seconds: float
