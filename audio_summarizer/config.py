"""
Configuration settings for the Audio Summarizer API
"""

# Load environment variables FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

from typing import List, Optional

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings with environment variable support"""

    # API Configuration
    api_version: str = Field(default="v1")
    debug_mode: bool = Field(default=False)
    log_level: str = Field(default="INFO")
    log_file: Optional[str] = Field(default="logs/api.log")

    # Security Settings
    cors_origins: List[str] = ["*"]
    allowed_hosts: List[str] = ["*"]

    # OpenAI Configuration
    openai_api_key: Optional[SecretStr] = Field(default=None)
    openai_base_url: Optional[str] = Field(default=None)
    openai_organization: Optional[str] = Field(default=None)
    transcription_model: str = Field(default="whisper-1")
    transcription_language: Optional[str] = Field(default=None)
    summary_model: str = Field(default="gpt-4.1-mini")

    # Upload Configuration
    max_file_size_mb: int = Field(default=25)
    enforce_media_types: bool = Field(default=False)

    # Frontend Configuration
    backend_base_url: str = Field(default="http://localhost:8000")
    frontend_host: str = Field(default="0.0.0.0")
    frontend_port: int = Field(default=7860)
    frontend_request_timeout: Optional[float] = Field(default=None)

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = False
        extra = "ignore"  # Allow extra fields from environment

    @property
    def max_file_size_bytes(self) -> int:
        return self.max_file_size_mb * 1024 * 1024


# Global settings instance
settings = Settings()

# Name given to uploads that arrive without a filename
DEFAULT_UPLOAD_NAME = "audio.mp3"

# Media type prefixes accepted when ENFORCE_MEDIA_TYPES is on
SUPPORTED_MEDIA_PREFIXES = (
    "audio/",
    "video/",
)

# Summary modes and the instruction each one adds to the prompt
DEFAULT_SUMMARY_MODE = "meeting"

MODE_INSTRUCTIONS = {
    "meeting": "This transcript is from a business meeting. Focus on decisions, responsibilities and next steps.",
    "podcast": "This transcript is from a podcast episode. Focus on main themes and interesting insights.",
    "generic": "This transcript is a generic audio recording. Provide a general useful summary.",
}

# Labels shown by the upload form
MODE_LABELS = {
    "meeting": "Meeting",
    "podcast": "Podcast",
    "generic": "Generic recording",
}
