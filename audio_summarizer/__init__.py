"""
AI Audio & Meeting Summarizer

Upload a meeting, podcast or any other recording and get a structured summary
with key points, action items and decisions, using OpenAI transcription and
structured outputs.
"""

__version__ = "1.0.0"
