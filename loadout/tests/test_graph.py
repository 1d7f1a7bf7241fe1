import pytest
from pydantic import ValidationError

from loadout.config.models import (
    GraphConfig,
    GraphType,
    QualifiedMetric,
    RgbaColor,
    WidgetType,
    make_default_graph,
)


def test_default_geometry(graph):
    assert graph.widget_type == WidgetType.GRAPH
    assert graph.height == 80
    assert graph.v_divs == 4
    assert graph.h_divs == 40
    assert graph.show_bottom_axis is False


def test_default_graph_type(graph):
    gt = graph.graph_type
    assert gt.name == "Line"
    assert tuple(gt.range) == (0, 150)
    assert tuple(gt.range_right) == (0, 150)
    assert gt.bin_count == 40
    assert tuple(gt.count_range) == (0, 1000)
    assert (gt.auto_left, gt.auto_right, gt.auto_count) == (True, True, False)


def test_default_colors(graph):
    assert (graph.grid_color.r, graph.grid_color.g, graph.grid_color.b) == (47, 120, 190)
    assert graph.grid_color.a == pytest.approx(0.157, abs=1e-3)
    assert (graph.divider_color.r, graph.divider_color.g, graph.divider_color.b) == (57, 126, 150)
    assert graph.divider_color.a == pytest.approx(0.863, abs=1e-3)
    assert graph.background_color == RgbaColor(r=0, g=0, b=0, a=0)
    assert graph.border_color == RgbaColor(r=0, g=0, b=0, a=0)
    assert graph.text_color == RgbaColor(r=242, g=242, b=242, a=1.0)
    assert graph.text_size == 11


def test_default_factory_is_deterministic():
    first = make_default_graph()
    second = make_default_graph()
    assert first.key != second.key
    assert first.model_dump(exclude={"key"}) == second.model_dump(exclude={"key"})


def test_placeholder_metric_binding(graph):
    assert len(graph.metrics) == 1
    assert graph.metrics[0].metric.metric_id == 0


def test_metric_binding_from_metric():
    metric = QualifiedMetric(metric_id=12, device_id=1, stat_id=3)
    graph = make_default_graph(metric)
    assert len(graph.metrics) == 1
    bound = graph.metrics[0].metric
    assert (bound.metric_id, bound.device_id, bound.stat_id) == (12, 1, 3)
    assert bound is not metric


def test_inverted_ranges_rejected():
    with pytest.raises(ValidationError):
        GraphType(range=(10, 5))
    with pytest.raises(ValidationError):
        GraphType(rangeRight=(1, 0))
    with pytest.raises(ValidationError):
        GraphType(count_range=(1000, 0))


def test_inverted_range_rejected_on_assignment(graph):
    with pytest.raises(ValidationError):
        graph.graph_type.count_range = (5, 1)
    assert tuple(graph.graph_type.count_range) == (0, 1000)


def test_zero_height_and_text_size_accepted():
    graph = GraphConfig.model_validate({"height": 0, "textSize": 0})
    assert graph.height == 0
    assert graph.text_size == 0
    with pytest.raises(ValidationError):
        GraphConfig.model_validate({"height": -1})


@pytest.mark.parametrize("field", ["vDivs", "hDivs"])
def test_negative_divisions_rejected(field):
    with pytest.raises(ValidationError):
        GraphConfig.model_validate({field: -1})


def test_negative_bin_count_rejected():
    with pytest.raises(ValidationError):
        GraphType(binCount=-1)


@pytest.mark.parametrize("values", [
    {"r": 256, "g": 0, "b": 0, "a": 1},
    {"r": 0, "g": -1, "b": 0, "a": 1},
    {"r": 0, "g": 0, "b": 0, "a": 1.5},
])
def test_color_components_bounded(values):
    with pytest.raises(ValidationError):
        RgbaColor(**values)


def test_dump_uses_stored_field_names(graph):
    data = graph.model_dump(mode="json", by_alias=True)
    assert data["widgetType"] == "Graph"
    assert data["vDivs"] == 4
    assert data["showBottomAxis"] is False
    assert data["graphType"]["rangeRight"] == [0, 150]
    assert data["graphType"]["autoCount"] is False
    assert data["gridColor"]["r"] == 47


def test_stored_record_fills_missing_fields():
    graph = GraphConfig.model_validate({"key": "abc", "widgetType": "Graph", "height": 120, "legacyField": 7})
    assert graph.key == "abc"
    assert graph.height == 120
    assert graph.v_divs == 4
    assert graph.model_extra["legacyField"] == 7


def test_other_widget_type_rejected():
    with pytest.raises(ValidationError):
        GraphConfig.model_validate({"widgetType": "Readout"})
