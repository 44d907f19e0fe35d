"""Core configuration.

`ConverterSettings` groups the few knobs the flow and the formatter share.
It is built in code with defaults; the converter reads no environment
variables and no configuration file.
"""

from __future__ import annotations

from pydantic import BaseModel, Field
from pydantic.config import ConfigDict


class ConverterSettings(BaseModel):
    """Central settings for one converter run."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    quit_token: str = Field(
        default="quit",
        min_length=1,
        pattern=r"^[a-z]+$",
        description="Reserved token that ends the program at any prompt (compared after lowercasing).",
    )
    decimal_places: int = Field(
        default=2,
        ge=1,
        le=10,
        description="Maximum fractional digits shown for non-whole values.",
    )
    header_text: str = Field(
        default="--- Temperature Conversion ---",
        min_length=1,
        description="Header printed when the run starts.",
    )
