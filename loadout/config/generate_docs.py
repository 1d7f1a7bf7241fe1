#!/usr/bin/env python3
"""Generate graph widget documentation and JSON schema from the Pydantic models.

Writes graph_schema.json and GRAPH_SETTINGS.md to the repository root so
both always match the models.

Usage:
    python -m loadout.config.generate_docs

Exit codes:
    0: Success - all fields have documentation
    1: Failure - one or more fields missing description
"""

import json
import sys
from pathlib import Path
from typing import Any, Optional

from loadout.config.migrations import GRAPH_MIGRATIONS
from loadout.config.models.graph import GraphConfig
from loadout.version import __version__


def build_schema() -> dict[str, Any]:
    """Return the JSON schema of a persisted graph widget."""
    schema = GraphConfig.model_json_schema(mode='serialization', by_alias=True)
    schema['$schema'] = 'https://json-schema.org/draft/2020-12/schema'
    schema['title'] = 'Graph Widget Configuration'
    schema['description'] = (
        'Settings of a graph widget as stored in a loadout file. '
        f'Valid for loadouts saved by version {__version__}.'
    )
    return schema


def _ref_name(field_schema: dict[str, Any]) -> Optional[str]:
    if '$ref' in field_schema:
        return field_schema['$ref'].split('/')[-1]
    # Older pydantic releases wrap a described $ref in allOf
    all_of = field_schema.get('allOf', [])
    if len(all_of) == 1 and '$ref' in all_of[0]:
        return all_of[0]['$ref'].split('/')[-1]
    return None


def get_type_from_schema(field_schema: dict[str, Any]) -> str:
    """Extract human-readable type description from JSON schema."""
    ref = _ref_name(field_schema)
    if ref:
        return f"[{ref}](#{ref.lower()})"

    if 'anyOf' in field_schema:
        types = [get_type_from_schema(s) for s in field_schema['anyOf'] if s.get('type') != 'null']
        type_str = " or ".join(types) if types else "unknown"
        if any(s.get('type') == 'null' for s in field_schema['anyOf']):
            return f"{type_str} (optional)"
        return type_str

    if field_schema.get('type') == 'array':
        # Fixed-length tuples, e.g. [low, high] ranges
        if 'prefixItems' in field_schema:
            items = ", ".join(get_type_from_schema(s) for s in field_schema['prefixItems'])
            return f"[{items}]"
        return f"list[{get_type_from_schema(field_schema.get('items', {}))}]"

    return field_schema.get('type', 'unknown')


def get_default_from_schema(field_schema: dict[str, Any], is_required: bool) -> str:
    """Extract default value representation from JSON schema."""
    if is_required:
        return "—"
    if 'default' not in field_schema:
        # default_factory fields (colors, nested models, generated keys)
        return "_See model defaults_"

    default = field_schema['default']
    if default is None:
        return "`null`"
    if isinstance(default, str):
        return f'`"{default}"`'
    if isinstance(default, bool):
        return f"`{str(default).lower()}`"
    return f"`{json.dumps(default)}`"


def generate_markdown_from_schema(schema: dict[str, Any], title_prefix: str = "") -> tuple[str, list[str]]:
    """Generate a markdown section from a model's JSON schema.

    Args:
        schema: The JSON schema dictionary of one model
        title_prefix: Prefix for markdown headers (e.g., "##" or "###")

    Returns:
        Tuple of (markdown_string, validation_errors)
    """
    validation_errors = []
    lines = []

    model_title = schema.get('title', 'Unknown')
    if title_prefix:
        lines.append(f"{title_prefix} {model_title}\n")
        if schema.get('description'):
            lines.append(f"{schema['description']}\n")

    if 'enum' in schema:
        lines.append("Options: " + ", ".join(f"`{v}`" for v in schema['enum']) + "\n")
        return "\n".join(lines), validation_errors

    properties = schema.get('properties', {})
    required = set(schema.get('required', []))
    if not properties:
        lines.append("*No configuration fields.*\n")
        return "\n".join(lines), validation_errors

    lines.append("| Field | Type | Required | Default | Description |")
    lines.append("|-------|------|----------|---------|-------------|")

    for field_name, field_schema in properties.items():
        description = field_schema.get('description', '')
        if not description:
            validation_errors.append(f"ERROR: {model_title}.{field_name} - Missing description")
            description = "MISSING DESCRIPTION"

        if 'enum' in field_schema:
            enum_str = ', '.join(f'`{v}`' for v in field_schema['enum'])
            description = f"{description}. Options: {enum_str}"

        field_type = get_type_from_schema(field_schema)
        is_required = field_name in required
        required_mark = "Yes" if is_required else "No"
        default = get_default_from_schema(field_schema, is_required)
        lines.append(f"| `{field_name}` | {field_type} | {required_mark} | {default} | {description} |")

    lines.append("")
    return "\n".join(lines), validation_errors


def render_markdown(schema: dict[str, Any]) -> tuple[str, list[str]]:
    """Render the full settings document for a graph schema."""
    lines = [
        "# Graph Widget - Configuration Settings",
        "",
        "**Auto-generated from Pydantic models using JSON Schema**",
        f"**Software Version**: {__version__}",
        f"**Newest Schema Migration**: {GRAPH_MIGRATIONS.newest_version or 'none'}",
        "",
        "> ⚠️ **Do not edit this file manually!**",
        "> To update, modify the Field descriptions in the models, then run:",
        "> ```bash",
        "> python -m loadout.config.generate_docs",
        "> ```",
        "",
    ]
    all_errors = []

    doc, errors = generate_markdown_from_schema(schema, title_prefix="##")
    lines.append(doc)
    all_errors.extend(errors)

    for model_schema in schema.get('$defs', {}).values():
        doc, errors = generate_markdown_from_schema(model_schema, title_prefix="###")
        lines.append(doc)
        all_errors.extend(errors)

    return "\n".join(lines), all_errors


def main(output_dir: Optional[Path] = None) -> int:
    """Generate both JSON schema and markdown documentation."""
    if output_dir is None:
        output_dir = Path(__file__).parent.parent.parent

    print("Generating JSON schema from Pydantic models...")
    schema = build_schema()
    schema_path = output_dir / 'graph_schema.json'
    with open(schema_path, 'w', encoding='utf-8') as f:
        json.dump(schema, f, indent=2, ensure_ascii=False)
    print(f"Schema saved to: {schema_path}")
    print(f"Definitions: {len(schema.get('$defs', {}))} models defined")

    print("Generating GRAPH_SETTINGS.md from JSON schema...")
    content, all_errors = render_markdown(schema)
    output_path = output_dir / "GRAPH_SETTINGS.md"
    output_path.write_text(content, encoding='utf-8')
    print(f"Documentation saved to: {output_path}")

    if all_errors:
        print(f"\nERROR: Found {len(all_errors)} validation errors:\n")
        for error in all_errors:
            print(f"  {error}")
        print("\nAdd Field(description='...') to fix these errors")
        return 1

    print("\nDocumentation and schema generation complete!")
    return 0


if __name__ == "__main__":
    sys.exit(main())
