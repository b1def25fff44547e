"""Tests for schema-driven argument extraction."""

from toolchat.core.matching import extract_argument
from toolchat.protocols.mcp.models import ToolInputSchema


def _schema(properties: dict, required: list[str] | None = None) -> ToolInputSchema:
    return ToolInputSchema.model_validate({"properties": properties, "required": required or []})


class TestExtractArgument:
    def test_first_required_string(self) -> None:
        schema = _schema(
            {"a": {"type": "string"}, "b": {"type": "string"}, "c": {"type": "string"}},
            ["c", "b"],
        )
        # Declaration order decides, not the order of ``required``.
        assert extract_argument("text", schema) == {"b": "text"}

    def test_first_string_when_none_required(self) -> None:
        schema = _schema({"n": {"type": "integer"}, "s": {"type": "string"}})
        assert extract_argument("text", schema) == {"s": "text"}

    def test_union_type_is_not_string(self) -> None:
        schema = _schema({"s": {"type": ["string", "null"]}})
        assert extract_argument("text", schema) == {}

    def test_empty_rest(self) -> None:
        assert extract_argument("", _schema({"s": {"type": "string"}}, ["s"])) == {}

    def test_no_properties(self) -> None:
        assert extract_argument("text", ToolInputSchema()) == {}

    def test_untyped_property(self) -> None:
        assert extract_argument("text", _schema({"s": {}})) == {}
