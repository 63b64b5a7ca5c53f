"""
File handling utilities for the Audio Summarizer application
"""

from typing import Optional, Dict, Any

from starlette.datastructures import UploadFile
from loguru import logger

from ..config import settings, SUPPORTED_MEDIA_PREFIXES
from ..models.schemas import UploadedMedia


class FileHandler:
    """Utility class for file operations"""

    @staticmethod
    async def read_upload(file: UploadFile) -> UploadedMedia:
        """Materialize an uploaded form part into memory"""
        content = await file.read()
        media = UploadedMedia(
            content=content,
            size_bytes=len(content),
            content_type=file.content_type,
            filename=file.filename,
        )
        logger.debug(f"Read upload '{file.filename}' ({FileHandler.format_file_size(media.size_bytes)})")
        return media

    @staticmethod
    def validate_file_size(file_size: int, max_size_mb: Optional[int] = None) -> bool:
        """Validate file size against limits"""
        max_size = max_size_mb or settings.max_file_size_mb
        max_bytes = max_size * 1024 * 1024
        return file_size <= max_bytes

    @staticmethod
    def is_supported_media_type(content_type: Optional[str]) -> bool:
        """Check if the declared media type is audio or video"""
        if not content_type:
            return False
        return content_type.lower().startswith(SUPPORTED_MEDIA_PREFIXES)

    @staticmethod
    def format_file_size(size_bytes: int) -> str:
        """Format file size in human-readable format"""
        for unit in ['B', 'KB', 'MB', 'GB']:
            if size_bytes < 1024.0:
                return f"{size_bytes:.1f} {unit}"
            size_bytes /= 1024.0
        return f"{size_bytes:.1f} TB"


class FileValidator:
    """Upload validation run before any external call"""

    @staticmethod
    def too_large_message() -> str:
        return f"File is too large (max {settings.max_file_size_mb} MB)"

    @staticmethod
    def check_declared_size(file: UploadFile) -> Optional[str]:
        """
        Check the size recorded while parsing the form, before the part is read.

        Returns the error message, or None when the size is within the limit
        or was not recorded.
        """
        if file.size is None:
            return None
        if not FileHandler.validate_file_size(file.size):
            return FileValidator.too_large_message()
        return None

    @staticmethod
    def validate_upload(media: UploadedMedia) -> Dict[str, Any]:
        """
        Validate an uploaded media file.

        The size ceiling is always enforced. The media type is only checked when
        ENFORCE_MEDIA_TYPES is on; otherwise an unexpected type is a warning.
        """
        validation_result = {
            'valid': True,
            'errors': [],
            'warnings': [],
            'info': {}
        }

        if not FileHandler.validate_file_size(media.size_bytes):
            validation_result['errors'].append(FileValidator.too_large_message())
            validation_result['valid'] = False

        if not FileHandler.is_supported_media_type(media.content_type):
            if settings.enforce_media_types:
                validation_result['errors'].append(
                    f"Unsupported file type: {media.content_type or 'unknown'}"
                )
                validation_result['valid'] = False
            else:
                validation_result['warnings'].append(
                    f"Unexpected media type: {media.content_type or 'unknown'}"
                )

        if media.size_bytes == 0:
            validation_result['warnings'].append("File is empty")

        validation_result['info'] = {
            'filename': media.upload_name,
            'size_bytes': media.size_bytes,
            'size_formatted': FileHandler.format_file_size(media.size_bytes),
            'content_type': media.content_type,
        }

        return validation_result
