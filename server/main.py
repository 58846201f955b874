"""
Main FastAPI application.
"""

import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.middleware.cors import CORSMiddleware
from pydantic import ValidationError

from slidemarkup import __version__
from slidemarkup.config import ConversionSettings
from slidemarkup.exceptions import SlideMarkupError
from slidemarkup.pipeline import ConversionPipeline
from server.models import ConversionResponse, ErrorResponse, SettingsResponse

load_dotenv()

logger = logging.getLogger(__name__)

app = FastAPI(
    title="SlideMarkup API",
    description="Convert PowerPoint presentations to HTML",
    version=__version__,
)

# CORS middleware
app.add_middleware(
    CORSMiddleware,
    allow_origins=["http://localhost:3000", "http://localhost:3001"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


# --- API Endpoints ---

@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "SlideMarkup API is running"}


@app.post(
    "/api/convert",
    response_model=ConversionResponse,
    responses={400: {"model": ErrorResponse}, 422: {"model": ErrorResponse}},
)
def convert_presentation(
    file: UploadFile = File(...),
    page_tag: Optional[str] = Form(default=None),
    full_page: Optional[bool] = Form(default=None),
):
    """
    Upload a .pptx file and convert it to HTML.

    The upload is converted in memory and never written to disk.
    """
    # Validate file type
    if not file.filename or not file.filename.lower().endswith(".pptx"):
        raise HTTPException(status_code=400, detail="Only .pptx files are allowed")

    try:
        settings = ConversionSettings.from_env(page_tag=page_tag, full_page=full_page)
    except ValidationError as e:
        raise HTTPException(status_code=422, detail=f"Invalid settings: {e}")

    content = file.file.read()

    try:
        result = ConversionPipeline(settings).convert(content, title=Path(file.filename).stem)
    except SlideMarkupError as e:
        logger.warning("Rejected %s: %s", file.filename, e)
        raise HTTPException(status_code=422, detail=str(e))

    return ConversionResponse(
        filename=file.filename,
        slide_count=result.slide_count,
        html=result.html,
    )


@app.get("/api/settings", response_model=SettingsResponse)
async def get_settings():
    """Get the conversion defaults derived from the environment."""
    return SettingsResponse(**ConversionSettings.from_env().model_dump())


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
