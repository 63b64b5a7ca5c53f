"""
Models package initialization
"""

from .schemas import *
from .requests import *

__all__ = [
    "SummaryMode",
    "UploadedMedia",
    "SummaryResult",
    "SUMMARY_SCHEMA_NAME",
    "SUMMARY_JSON_SCHEMA",
    "SummarizeResponse",
    "ErrorResponse",
    "HealthResponse"
]
