"""
Utilities package initialization
"""

from .file_handler import FileHandler, FileValidator
from .validators import RequestValidator, log_validation_warning

__all__ = [
    "FileHandler",
    "FileValidator",
    "RequestValidator",
    "log_validation_warning"
]
