"""
Color model shared by widget appearance settings.
"""

from pydantic import BaseModel, Field, ConfigDict


class RgbaColor(BaseModel):
    """RGB color with an alpha channel."""

    r: int = Field(ge=0, le=255, description="Red component (0-255)")
    g: int = Field(ge=0, le=255, description="Green component (0-255)")
    b: int = Field(ge=0, le=255, description="Blue component (0-255)")
    a: float = Field(
        ge=0, le=1,
        description="Alpha channel (0 = transparent, 1 = opaque)",
        json_schema_extra={
            "x-unit": "ratio (0-1)",
            "x-validation-hint": "Must be between 0 and 1"
        }
    )

    model_config = ConfigDict(frozen=True)
