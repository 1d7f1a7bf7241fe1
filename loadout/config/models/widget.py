"""
Widget base model and metric bindings.
"""

import uuid
from enum import Enum
from typing import Literal, Optional

from pydantic import BaseModel, Field, ConfigDict

from .color import RgbaColor


class WidgetType(str, Enum):
    """Kinds of widget that can appear in a loadout."""

    GRAPH = "Graph"
    READOUT = "Readout"


def generate_key() -> str:
    """Return a new unique widget key."""
    return uuid.uuid4().hex


class QualifiedMetric(BaseModel):
    """A metric together with the device, array element and statistic it is read from."""

    metric_id: int = Field(
        ge=0,
        alias="metricId",
        description="Metric identifier"
    )
    array_index: int = Field(
        default=0,
        ge=0,
        alias="arrayIndex",
        description="Element index for array metrics"
    )
    device_id: int = Field(
        default=0,
        ge=0,
        alias="deviceId",
        description="Device the metric is read from (0 = device independent)"
    )
    stat_id: int = Field(
        default=0,
        ge=0,
        alias="statId",
        description="Statistic applied to the metric"
    )
    desired_unit_id: Optional[int] = Field(
        default=None,
        alias="desiredUnitId",
        description="Unit to convert the metric to (null = native unit)"
    )

    model_config = ConfigDict(
        extra='allow',
        populate_by_name=True
    )


class WidgetMetric(BaseModel):
    """Binding of a widget to one metric series."""

    metric: QualifiedMetric = Field(
        description="Metric displayed by this binding"
    )
    line_color: RgbaColor = Field(
        default_factory=lambda: RgbaColor(r=0, g=220, b=255, a=1.0),
        alias="lineColor",
        description="Color of the plotted line"
    )
    fill_color: RgbaColor = Field(
        default_factory=lambda: RgbaColor(r=0, g=220, b=255, a=0.25),
        alias="fillColor",
        description="Color of the area under the plotted line"
    )
    axis_affinity: Literal['Left', 'Right'] = Field(
        default='Left',
        alias="axisAffinity",
        description="Vertical axis the series is scaled against"
    )

    model_config = ConfigDict(
        extra='allow',
        populate_by_name=True
    )


def make_default_widget_metric(metric: Optional[QualifiedMetric] = None) -> WidgetMetric:
    """
    Build a metric binding with default styling.

    Args:
        metric: Metric to bind; a placeholder metric is used when omitted

    Returns:
        New WidgetMetric
    """
    if metric is None:
        metric = QualifiedMetric(metric_id=0)
    else:
        metric = metric.model_copy()
    return WidgetMetric(metric=metric)


class Widget(BaseModel):
    """Fields shared by every widget kind."""

    key: str = Field(
        default_factory=generate_key,
        description="Unique widget key"
    )
    metrics: list[WidgetMetric] = Field(
        default_factory=lambda: [make_default_widget_metric()],
        description="Metric bindings displayed by the widget"
    )
    widget_type: WidgetType = Field(
        alias="widgetType",
        description="Widget kind"
    )

    model_config = ConfigDict(
        extra='allow',
        populate_by_name=True,
        validate_assignment=True
    )
