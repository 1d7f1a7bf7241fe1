import json

from loadout.config import generate_docs


def test_every_field_documented():
    content, errors = generate_docs.render_markdown(generate_docs.build_schema())
    assert errors == []
    assert "`vDivs`" in content
    assert "`rangeRight`" in content
    assert "### GraphType" in content


def test_schema_uses_stored_field_names():
    schema = generate_docs.build_schema()
    assert "graphType" in schema["properties"]
    assert schema["properties"]["vDivs"]["default"] == 4


def test_main_writes_files(tmp_path, capsys):
    assert generate_docs.main(tmp_path) == 0
    schema = json.loads((tmp_path / "graph_schema.json").read_text(encoding="utf-8"))
    assert schema["title"] == "Graph Widget Configuration"
    assert (tmp_path / "GRAPH_SETTINGS.md").read_text(encoding="utf-8").startswith("# Graph Widget")
    assert "generation complete" in capsys.readouterr().out
