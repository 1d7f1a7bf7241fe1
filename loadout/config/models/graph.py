"""
Graph widget configuration models.

The field defaults are the settings of a freshly created graph widget. A
stored graph that lacks a field is filled with the same default when it is
loaded.
"""

from typing import Optional
from pydantic import BaseModel, Field, ConfigDict, ValidationInfo, field_validator

from .color import RgbaColor
from .widget import QualifiedMetric, Widget, WidgetType, make_default_widget_metric


class GraphType(BaseModel):
    """Plot kind and value/histogram ranges of a graph."""

    name: str = Field(
        default="Line",
        description="Plot kind (e.g. 'Line')"
    )
    range: tuple[float, float] = Field(
        default=(0, 150),
        description="Fixed [low, high] range of the left axis",
        json_schema_extra={
            "x-validation-hint": "Low must not exceed high"
        }
    )
    range_right: tuple[float, float] = Field(
        default=(0, 150),
        alias="rangeRight",
        description="Fixed [low, high] range of the right axis"
    )
    bin_count: int = Field(
        default=40,
        ge=0,
        alias="binCount",
        description="Number of histogram bins"
    )
    count_range: tuple[float, float] = Field(
        default=(0, 1000),
        alias="countRange",
        description="Fixed [low, high] range of the histogram count axis"
    )
    auto_left: bool = Field(
        default=True,
        alias="autoLeft",
        description="Compute the left axis range from the data instead of 'range'"
    )
    auto_right: bool = Field(
        default=True,
        alias="autoRight",
        description="Compute the right axis range from the data instead of 'rangeRight'"
    )
    auto_count: bool = Field(
        default=False,
        alias="autoCount",
        description="Compute the count axis range from the data instead of 'countRange'"
    )

    model_config = ConfigDict(
        extra='allow',
        populate_by_name=True,
        validate_assignment=True
    )

    @field_validator('range', 'range_right', 'count_range', mode='after')
    @classmethod
    def validate_range_order(cls, v: tuple[float, float], info: ValidationInfo) -> tuple[float, float]:
        """Ensure a range is ordered low to high."""
        if v[0] > v[1]:
            raise ValueError(f"'{info.field_name}' lower bound {v[0]} exceeds upper bound {v[1]}")
        return v


class GraphConfig(Widget):
    """Persisted settings of a graph widget."""

    widget_type: WidgetType = Field(
        default=WidgetType.GRAPH,
        alias="widgetType",
        description="Widget kind, always 'Graph'"
    )
    height: float = Field(
        default=80,
        ge=0,
        description="Height of the plot area in pixels",
        json_schema_extra={"x-unit": "px"}
    )
    v_divs: int = Field(
        default=4,
        ge=0,
        alias="vDivs",
        description="Number of vertical grid divisions"
    )
    h_divs: int = Field(
        default=40,
        ge=0,
        alias="hDivs",
        description="Number of horizontal grid divisions"
    )
    show_bottom_axis: bool = Field(
        default=False,
        alias="showBottomAxis",
        description="Show the time axis below the plot"
    )
    graph_type: GraphType = Field(
        default_factory=GraphType,
        alias="graphType",
        description="Plot kind and axis ranges"
    )
    grid_color: RgbaColor = Field(
        default_factory=lambda: RgbaColor(r=47, g=120, b=190, a=40 / 255),
        alias="gridColor",
        description="Color of the grid lines"
    )
    divider_color: RgbaColor = Field(
        default_factory=lambda: RgbaColor(r=57, g=126, b=150, a=220 / 255),
        alias="dividerColor",
        description="Color of the line dividing the plot from the axes"
    )
    background_color: RgbaColor = Field(
        default_factory=lambda: RgbaColor(r=0, g=0, b=0, a=0),
        alias="backgroundColor",
        description="Fill color behind the plot"
    )
    border_color: RgbaColor = Field(
        default_factory=lambda: RgbaColor(r=0, g=0, b=0, a=0),
        alias="borderColor",
        description="Color of the widget border"
    )
    text_color: RgbaColor = Field(
        default_factory=lambda: RgbaColor(r=242, g=242, b=242, a=1.0),
        alias="textColor",
        description="Color of axis labels and legend text"
    )
    text_size: float = Field(
        default=11,
        ge=0,
        alias="textSize",
        description="Font size of axis labels and legend text",
        json_schema_extra={"x-unit": "pt"}
    )

    @field_validator('widget_type', mode='after')
    @classmethod
    def require_graph_type(cls, v: WidgetType) -> WidgetType:
        """Reject records tagged as another widget kind."""
        if v != WidgetType.GRAPH:
            raise ValueError(f"Expected widgetType 'Graph', got '{v.value}'")
        return v


def make_default_graph(metric: Optional[QualifiedMetric] = None) -> GraphConfig:
    """
    Create a graph widget with default settings and a new key.

    Args:
        metric: Metric for the widget's single binding; a placeholder
            binding is used when omitted
    """
    return GraphConfig(metrics=[make_default_widget_metric(metric)])
