"""Pydantic models for widget configuration."""

from .color import RgbaColor
from .graph import GraphConfig, GraphType, make_default_graph
from .widget import (
    QualifiedMetric,
    Widget,
    WidgetMetric,
    WidgetType,
    generate_key,
    make_default_widget_metric,
)

__all__ = [
    "GraphConfig",
    "GraphType",
    "QualifiedMetric",
    "RgbaColor",
    "Widget",
    "WidgetMetric",
    "WidgetType",
    "generate_key",
    "make_default_graph",
    "make_default_widget_metric",
]
