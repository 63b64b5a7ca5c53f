"""
AI Audio & Meeting Summarizer FastAPI Application

Accepts an uploaded recording, transcribes it with OpenAI Whisper and returns a
structured summary (summary, key points, action items, decisions) generated
with OpenAI structured outputs.
"""

# Load environment variables FIRST before any other imports
from dotenv import load_dotenv
load_dotenv()

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from starlette.exceptions import HTTPException as StarletteHTTPException
from loguru import logger
import uvicorn

from . import __version__
from .config import settings, MODE_INSTRUCTIONS
from .routers import health_router, summarize_router
from .routers.summarize import error_message
from .services import transcription_service, summary_service
from .models.requests import ErrorResponse


# Application lifespan management
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager for startup and shutdown events
    """
    # Startup
    logger.info("Starting Audio Summarizer API...")

    try:
        logger.info("🚀 Starting service initialization...")

        await transcription_service.initialize()
        await summary_service.initialize()

        logger.info("━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")
        logger.info("📊 SERVICE STATUS SUMMARY:")
        logger.info(f"   🎙️  Transcription ({settings.transcription_model}): {'✅ Ready' if transcription_service.is_configured else '❌ Not configured'}")
        logger.info(f"   🤖 Summarization ({settings.summary_model}): {'✅ Ready' if summary_service.is_configured else '❌ Not configured'}")
        logger.info("━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━━")

        if not (transcription_service.is_configured and summary_service.is_configured):
            logger.warning("⚠️  Requests to /api/summarize will fail until OPENAI_API_KEY is set")

        logger.info("🎯 API is ready to process requests!")

    except Exception as e:
        logger.error(f"Failed to initialize services: {e}")
        # Continue startup even if some services fail

    yield

    # Shutdown
    logger.info("Shutting down Audio Summarizer API...")

    for service in (transcription_service, summary_service):
        if service.client is not None:
            try:
                await service.client.close()
            except Exception as e:
                logger.error(f"Error during shutdown: {e}")


# Create FastAPI application
app = FastAPI(
    title="AI Audio & Meeting Summarizer API",
    description="""
    Upload a meeting, podcast, or any other recording and get a clean, structured
    summary with key points, action items, and decisions.

    ## Features

    * **Transcription**: Speech-to-text with OpenAI Whisper
    * **Structured Summaries**: Summary, key points, action items and decisions
      generated under a strict JSON schema
    * **Modes**: Meeting, podcast or generic recording prompts

    ## Supported File Types

    Any audio or video format accepted by the transcription model
    (mp3, m4a, wav, mp4, webm, and more), up to 25 MB.

    Uploads are processed in memory and not stored after summarization.
    """,
    version=__version__,
    docs_url="/docs",
    redoc_url="/redoc",
    lifespan=lifespan
)

# Configure logging
if settings.log_file:
    logger.add(
        settings.log_file,
        rotation="1 day",
        retention="30 days",
        level=settings.log_level,
        format="{time:YYYY-MM-DD HH:mm:ss} | {level} | {name}:{function}:{line} | {message}"
    )

# Add middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

if settings.allowed_hosts != ["*"]:
    app.add_middleware(
        TrustedHostMiddleware,
        allowed_hosts=settings.allowed_hosts
    )


# Request ID middleware
@app.middleware("http")
async def add_request_id(request: Request, call_next):
    """Add unique request ID to each request for tracking"""
    request_id = str(uuid.uuid4())
    request.state.request_id = request_id

    start_time = time.time()

    # Add request ID to logger context
    with logger.contextualize(request_id=request_id):
        logger.info(f"Request started: {request.method} {request.url}")

        response = await call_next(request)

        process_time = time.time() - start_time
        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = str(process_time)

        logger.info(
            f"Request completed: {request.method} {request.url} "
            f"(status: {response.status_code}, time: {process_time:.3f}s)"
        )

    return response


# Exception handlers
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    """Handle HTTP exceptions with consistent error format"""
    logger.warning(f"HTTP Exception: {exc.status_code} - {exc.detail}")

    error_response = ErrorResponse(error=str(exc.detail))
    return JSONResponse(
        status_code=exc.status_code,
        content=error_response.model_dump(),
        headers=getattr(exc, "headers", None)
    )


@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Handle request validation errors"""
    logger.warning(f"Validation Error: {exc.errors()}")

    error_response = ErrorResponse(error="Request validation failed")
    return JSONResponse(
        status_code=422,
        content=error_response.model_dump()
    )


@app.exception_handler(Exception)
async def general_exception_handler(request: Request, exc: Exception):
    """Handle unexpected exceptions"""
    logger.exception(f"Unexpected error: {exc}")

    error_response = ErrorResponse(error=error_message(exc))
    return JSONResponse(
        status_code=500,
        content=error_response.model_dump()
    )


# Include routers
app.include_router(health_router)
app.include_router(summarize_router)


# Root endpoint
@app.get("/", tags=["root"])
async def root():
    """
    Root endpoint with API information
    """
    return {
        "name": "AI Audio & Meeting Summarizer API",
        "version": __version__,
        "description": "Transcribe a recording and get a structured summary",
        "docs_url": "/docs",
        "health_check": "/health",
        "endpoints": {
            "summarize": "/api/summarize",
            "health": "/health"
        }
    }


@app.get("/api", tags=["api"])
async def api_info():
    """
    API information and available endpoints
    """
    return {
        "api_version": settings.api_version,
        "endpoints": {
            "summarize": "/api/summarize",
            "health": {
                "status": "/health",
                "detailed": "/health/detailed"
            }
        },
        "limits": {
            "max_file_size_mb": settings.max_file_size_mb
        },
        "modes": list(MODE_INSTRUCTIONS)
    }


# Development server
if __name__ == "__main__":
    uvicorn.run(
        "audio_summarizer.main:app",
        host="0.0.0.0",
        port=8000,
        reload=settings.debug_mode,
        log_level=settings.log_level.lower(),
        access_log=True
    )
