import json

import pytest

from loadout.config.models.graph import make_default_graph


@pytest.fixture
def graph():
    return make_default_graph()


@pytest.fixture
def write_loadout(tmp_path):
    """Write a loadout file and return its path."""
    def _write(version, widgets, code="loadout", name="loadout.json"):
        path = tmp_path / name
        data = {"signature": {"code": code, "version": version}, "widgets": widgets}
        path.write_text(json.dumps(data), encoding="utf-8")
        return path
    return _write


@pytest.fixture
def record():
    """A default graph as stored in a loadout file."""
    return make_default_graph().model_dump(mode="json", by_alias=True)
