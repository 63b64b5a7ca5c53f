"""
Main entry point for the AI Audio & Meeting Summarizer API
This file allows running the application with 'uvicorn main:app'
"""

from audio_summarizer.main import app

# Re-export the FastAPI app instance for uvicorn
__all__ = ["app"]
