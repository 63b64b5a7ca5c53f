"""
Browser upload form for the summarize endpoint
"""
