"""
Summarize router: transcribe an uploaded recording and summarize the transcript
"""

import time
import traceback

from fastapi import APIRouter, HTTPException, Request
from starlette.datastructures import UploadFile
from loguru import logger

from ..models.requests import ErrorResponse, SummarizeResponse
from ..services.transcription_service import transcription_service
from ..services.summary_service import summary_service
from ..utils.file_handler import FileHandler, FileValidator
from ..utils.validators import RequestValidator

router = APIRouter(prefix="/api", tags=["summarize"])

NO_FILE_MESSAGE = "No file uploaded"
UNKNOWN_ERROR_MESSAGE = "Unknown error"


def error_message(exc: Exception) -> str:
    """Message reported to the client for an unexpected failure"""
    # SDK errors carry the upstream message separately from the status prefix
    message = getattr(exc, "message", None)
    if isinstance(message, str) and message:
        return message
    return str(exc) or UNKNOWN_ERROR_MESSAGE


@router.post(
    "/summarize",
    response_model=SummarizeResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def summarize_recording(request: Request):
    """
    Transcribe an audio or video file and return a structured summary.

    Multipart fields: ``file`` (required, at most 25 MB) and ``mode``
    (``meeting``, ``podcast`` or anything else for a generic summary).

    This endpoint:
    1. Validates the upload
    2. Transcribes it with the speech-to-text model
    3. Summarizes the transcript with a strict JSON schema
    4. Returns transcript, summary, key points, action items and decisions
    """
    request_start_time = time.time()

    try:
        logger.info("=== SUMMARIZE REQUEST STARTED ===")

        async with request.form() as form:
            upload = form.get("file")
            raw_mode = form.get("mode")

            if not isinstance(upload, UploadFile):
                logger.error("Request has no file part")
                raise HTTPException(status_code=400, detail=NO_FILE_MESSAGE)

            size_error = FileValidator.check_declared_size(upload)
            if size_error:
                logger.error(f"Upload rejected before reading: {upload.size} bytes")
                raise HTTPException(status_code=400, detail=size_error)

            media = await FileHandler.read_upload(upload)

        logger.info(f"Uploaded file: {media.upload_name}, content_type: {media.content_type}")

        file_validation = FileValidator.validate_upload(media)
        if not file_validation['valid']:
            logger.error(f"File validation failed: {file_validation['errors']}")
            raise HTTPException(status_code=400, detail=file_validation['errors'][0])

        if file_validation['warnings']:
            logger.warning(f"Processing warnings: {file_validation['warnings']}")

        mode = RequestValidator.resolve_mode(raw_mode)
        logger.info(f"Processing {media.upload_name} ({file_validation['info']['size_formatted']}) in {mode.value} mode")

        logger.info("Step 1: Transcribing recording")
        transcript_text = await transcription_service.transcribe(media)

        logger.info("Step 2: Generating structured summary")
        result = await summary_service.summarize(transcript_text, mode)

        processing_time = time.time() - request_start_time
        logger.info(f"=== SUMMARIZE REQUEST COMPLETED in {processing_time:.2f}s ===")

        return SummarizeResponse.from_result(transcript_text, result)

    except HTTPException:
        raise
    except Exception as e:
        logger.error("=== SUMMARIZE REQUEST FAILED ===")
        logger.error(f"Summarize error: {e}")
        logger.error(f"Error type: {type(e).__name__}")
        logger.error(f"Traceback: {traceback.format_exc()}")

        raise HTTPException(status_code=500, detail=error_message(e))
