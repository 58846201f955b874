"""
FastAPI backend server for SlideMarkup.

Provides REST endpoints for:
- .pptx upload and conversion to HTML
- Settings inspection
"""

__version__ = "0.1.0"
