"""
Conversion settings.

Settings come from keyword arguments or from ``SLIDEMARKUP_*`` environment
variables (entry points call ``load_dotenv()`` first, so a ``.env`` file
works too).
"""

import os
from typing import Optional

from pydantic import BaseModel, Field

ENV_PREFIX = "SLIDEMARKUP_"


class ConversionSettings(BaseModel):
    """Settings for one conversion."""

    page_tag: str = Field(default="div", min_length=1, description="Tag wrapping each slide")
    tag_left_delim: str = Field(default="<", description="Left delimiter of the page tag")
    tag_right_delim: str = Field(default=">", description="Right delimiter of the page tag")
    explicit_left_alignment: bool = Field(default=False, description='Emit align="left" too')
    include_masters: bool = Field(default=False, description="Render slide masters before the slides")
    max_workers: int = Field(default=1, ge=1, description="Threads used to build slides")
    full_page: bool = Field(default=False, description="Wrap the output in a complete HTML page")
    stylesheet_href: Optional[str] = Field(default=None, description="Stylesheet linked from the page")

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
                "stylesheet_href": "presentation.css",
            }
        }
    }

    @classmethod
    def from_env(cls, prefix: str = ENV_PREFIX, **overrides) -> "ConversionSettings":
        """
        Read settings from the environment; ``overrides`` win over it.

        Raises:
            pydantic.ValidationError: if a variable holds an invalid value
        """
        values = {}
        for name in cls.model_fields:
            raw = os.getenv(prefix + name.upper())
            if raw is not None:
                values[name] = raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls.model_validate(values)
