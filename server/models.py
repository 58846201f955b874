"""
Pydantic models for API requests/responses.
"""

from typing import Optional
from pydantic import BaseModel, Field


class ConversionResponse(BaseModel):
    """Result of converting an uploaded presentation."""
    filename: str
    slide_count: int = Field(ge=0)
    html: str


class ErrorResponse(BaseModel):
    """Error detail returned for rejected uploads."""
    detail: str


class SettingsResponse(BaseModel):
    """Conversion defaults currently in effect."""
    page_tag: str
    tag_left_delim: str
    tag_right_delim: str
    explicit_left_alignment: bool
    include_masters: bool
    max_workers: int
    full_page: bool
    stylesheet_href: Optional[str] = None

    model_config = {
        "json_schema_extra": {
            "example": {
                "page_tag": "div",
                "tag_left_delim": "<",
                "tag_right_delim": ">",
                "explicit_left_alignment": False,
                "include_masters": False,
                "max_workers": 1,
                "full_page": False,
                "stylesheet_href": None,
            }
        }
    }
