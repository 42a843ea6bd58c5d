"""
Tests for rendering a single schema section.
"""

import pytest

from json_schema_to_docs.config import DocsConfig
from json_schema_to_docs.errors import DocAnnotationError
from json_schema_to_docs.nodes import SchemaNode
from json_schema_to_docs.renderer import NO_DESCRIPTION, SchemaRenderer, render_schema, required_text


def _render(schema, schema_id="/Thing", config=None):
    return render_schema(SchemaNode(id=schema_id, schema=schema), config)


class TestRenderSchema:
    """Test the Markdown section produced for one schema"""

    def test_minimal_schema(self):
        rendered = _render({"type": "string"}, "/Foo")
        assert rendered == (
            "## /Foo\n"
            "\n"
            "_No description given._\n"
            "\n"
            "#### Details\n"
            "\n"
            "* **Type** - `string`\n"
            "* **Pattern** - _n/a_\n"
            "* **Source Code** - [schemas/Foo.json](schemas/Foo.json)"
        )

    def test_full_schema(self):
        schema = {
            "description": "A thing.",
            "type": "object",
            "examples": [{"a": 1}],
            "properties": {
                "b": {"type": "string", "description": "B."},
                "a": {"type": "integer"},
            },
            "required": ["a"],
        }
        assert _render(schema) == (
            "## /Thing\n"
            "\n"
            "A thing.\n"
            "\n"
            "#### Details\n"
            "\n"
            "* **Type** - `object`\n"
            "* **Pattern** - _n/a_\n"
            "* **Source Code** - [schemas/Thing.json](schemas/Thing.json)\n"
            "\n"
            "#### Examples\n"
            "\n"
            "* `{'a': 1}`\n"
            "\n"
            "#### Properties\n"
            "\n"
            "Key | Required | Type | Description\n"
            "--- | -------- | ---- | -----------\n"
            "`b` | no | `string` | B.\n"
            "`a` | **yes** | `integer` | _No description given._"
        )

    def test_pattern(self):
        rendered = _render({"type": "string", "pattern": "^[a-z]+$"})
        assert "* **Pattern** - `^[a-z]+$`" in rendered

    def test_examples_and_anti_examples(self):
        rendered = _render({"type": "string", "examples": ["1.0.0", "2.11.3"], "antiExamples": ["1"]})
        assert "#### Examples\n\n* `'1.0.0'`\n* `'2.11.3'`\n\n#### Anti-Examples\n\n* `'1'`" in rendered

    def test_anti_examples_only(self):
        rendered = _render({"antiExamples": [{"x": 1, "_skipTest": True}]})
        assert "#### Examples" not in rendered
        assert rendered.endswith("#### Anti-Examples\n\n* `{'x': 1}`")

    def test_empty_sections_are_omitted(self):
        rendered = _render({"type": "object", "examples": [], "antiExamples": [], "properties": {}})
        assert "#### Examples" not in rendered
        assert "#### Anti-Examples" not in rendered
        assert "#### Properties" not in rendered
        assert rendered.endswith("(schemas/Thing.json)")

    def test_pattern_properties(self):
        schema = {"patternProperties": {"^[a-z]+$": {"$ref": "/TriggerSchema", "description": "Any key."}}}
        rendered = _render(schema)
        assert "`^[a-z]+$` | no | [/TriggerSchema](#triggerschema) | Any key." in rendered

    def test_properties_win_over_pattern_properties(self):
        schema = {"properties": {"a": {"type": "string"}}, "patternProperties": {"^b$": {"type": "string"}}}
        rendered = _render(schema)
        assert "`a` | no |" in rendered
        assert "`^b$`" not in rendered

    def test_property_order_is_source_order(self):
        schema = {"properties": {"zeta": {}, "alpha": {}, "mid": {}}}
        rendered = _render(schema)
        assert rendered.index("`zeta`") < rendered.index("`alpha`") < rendered.index("`mid`")

    def test_boolean_property_schema(self):
        rendered = _render({"properties": {"anything": True}})
        assert f"`anything` | no | _n/a_ | {NO_DESCRIPTION}" in rendered

    def test_required_annotations(self):
        schema = {
            "properties": {
                "x": {"type": "string", "docAnnotation": {"required": {"type": "append", "value": "*"}}},
                "y": {"type": "string", "docAnnotation": {"required": {"type": "replace", "value": "sometimes"}}},
            },
            "required": ["x", "y"],
        }
        rendered = _render(schema)
        assert "`x` | **yes*** | `string` |" in rendered
        assert "`y` | sometimes | `string` |" in rendered

    def test_invalid_annotation_fails(self):
        schema = {"properties": {"x": {"docAnnotation": {"required": {"type": "bogus"}}}}}
        with pytest.raises(DocAnnotationError, match="bogus"):
            _render(schema)

    def test_source_code_link(self):
        config = DocsConfig(
            source_base_url="https://github.com/me/schemas/blob/main/",
            source_path_template="lib/schemas{id}.js",
        )
        rendered = _render({"type": "string"}, "/Foo", config)
        assert "* **Source Code** - [lib/schemas/Foo.js](https://github.com/me/schemas/blob/main/lib/schemas/Foo.js)" in rendered

    def test_schema_is_not_mutated(self):
        schema = {"examples": [{"a": 1, "_skipTest": True}], "properties": {"a": {"type": "string"}}}
        _render(schema)
        assert schema == {"examples": [{"a": 1, "_skipTest": True}], "properties": {"a": {"type": "string"}}}

    def test_renderer_is_reusable(self):
        renderer = SchemaRenderer()
        first = renderer.render(SchemaNode(id="/A", schema={}))
        second = renderer.render(SchemaNode(id="/B", schema={}))
        assert first.startswith("## /A")
        assert second.startswith("## /B")


class TestRequiredText:
    """Test the Required column text"""

    def test_defaults(self):
        assert required_text("x", {}, True) == "**yes**"
        assert required_text("x", {}, False) == "no"

    def test_append_to_optional(self):
        prop = {"docAnnotation": {"required": {"type": "append", "value": " (with exceptions)"}}}
        assert required_text("x", prop, False) == "no (with exceptions)"

    def test_replace(self):
        prop = {"docAnnotation": {"required": {"type": "replace", "value": "**yes** (with exceptions)"}}}
        assert required_text("x", prop, False) == "**yes** (with exceptions)"
