"""Tests for the generic JSON Schema converter."""

import sys

import pytest

from toolwire.core import SchemaError
from toolwire.formats import JsonSchemaConverter
from toolwire.formats.generic import looks_like_json_schema, schema_to_json_schema


def test_convert_without_schema(base_structured_tool):
    """Test that a tool without arguments gets an empty object schema."""
    tool_def = JsonSchemaConverter().convert(base_structured_tool(name="ping", description="health check"))
    
    assert tool_def == {
        "type": "function",
        "function": {
            "name": "ping",
            "description": "health check",
            "parameters": {"type": "object", "properties": {}}
        }
    }


def test_convert_parameter_map(base_structured_tool, base_tool_parameter):
    """Test conversion of ToolParameter mappings."""
    tool = base_structured_tool(args_schema={
        "city": base_tool_parameter(description="City name"),
        "units": base_tool_parameter(
            description="Temperature units",
            required=False,
            enum=["celsius", "fahrenheit"],
            default="celsius"
        )
    })
    
    parameters = JsonSchemaConverter().convert(tool)["function"]["parameters"]
    
    assert parameters == {
        "type": "object",
        "properties": {
            "city": {"type": "string", "description": "City name"},
            "units": {
                "type": "string",
                "description": "Temperature units",
                "enum": ["celsius", "fahrenheit"],
                "default": "celsius"
            }
        },
        "required": ["city"]
    }


def test_convert_parameter_dicts():
    """Test that plain dicts are validated as ToolParameter."""
    parameters = schema_to_json_schema({"count": {"type": "integer", "required": True}})
    
    assert parameters["properties"]["count"] == {"type": "integer", "description": ""}
    assert parameters["required"] == ["count"]


def test_invalid_parameter_raises_schema_error(base_structured_tool):
    """Test that a parameter without a type is reported with the tool name."""
    tool = base_structured_tool(args_schema={"city": {"description": "no type"}})
    
    with pytest.raises(SchemaError, match=r"\[get_weather\] Invalid parameter 'city'"):
        JsonSchemaConverter().convert(tool)


def test_convert_json_schema_is_copied(base_structured_tool):
    """Test that JSON Schema input is used as-is without being modified."""
    schema = {
        "title": "Weather",
        "type": "object",
        "properties": {"city": {"type": "string"}},
        "required": ["city"]
    }
    
    parameters = JsonSchemaConverter().convert(base_structured_tool(args_schema=schema))["function"]["parameters"]
    parameters["properties"]["city"]["type"] = "number"
    
    assert parameters == {
        "type": "object",
        "properties": {"city": {"type": "number"}},
        "required": ["city"]
    }
    assert schema["title"] == "Weather"
    assert schema["properties"]["city"]["type"] == "string"


def test_convert_pydantic_v2_model(base_structured_tool, search_model):
    """Test that pydantic v2 models render through model_json_schema."""
    tool_def = JsonSchemaConverter().convert(base_structured_tool(name="search", args_schema=search_model))
    
    function = tool_def["function"]
    assert "strict" not in function
    assert "title" not in function["parameters"]
    assert function["parameters"]["required"] == ["query"]
    assert function["parameters"]["properties"]["limit"]["default"] == 10


@pytest.mark.skipif(sys.version_info >= (3, 14), reason="pydantic.v1 does not support Python 3.14+")
def test_convert_pydantic_v1_model(base_structured_tool):
    """Test that pydantic.v1 models render through schema()."""
    from pydantic.v1 import BaseModel as BaseModelV1

    class Lookup(BaseModelV1):
        key: str

    tool_def = JsonSchemaConverter().convert(base_structured_tool(name="lookup", args_schema=Lookup))
    
    parameters = tool_def["function"]["parameters"]
    assert parameters["properties"]["key"]["type"] == "string"
    assert parameters["required"] == ["key"]
    assert "title" not in parameters


@pytest.mark.parametrize("schema", [42, "string", ["city"], object()])
def test_unsupported_schema(schema):
    """Test that unknown representations raise SchemaError."""
    assert not JsonSchemaConverter().supports(schema)
    with pytest.raises(SchemaError, match="Unsupported argument schema"):
        schema_to_json_schema(schema)


@pytest.mark.parametrize("schema, expected", [
    ({"type": "object"}, True),
    ({"properties": {}}, True),
    ({"anyOf": [{"type": "string"}]}, True),
    ({"$ref": "#/$defs/Weather"}, True),
    ({"type": ["object", "null"]}, True),
    ({"required": [], "additionalProperties": False}, True),
    ({"$defs": {"City": {"type": "string"}}}, True),
    ({"items": {"type": "string"}}, True),
    ({"not": {"type": "null"}}, True),
    ({"required": {"type": "boolean"}}, False),
    ({"city": {"type": "string"}}, False),
    ({"type": {"type": "string"}}, False),
])
def test_looks_like_json_schema(schema, expected):
    """Test telling JSON Schema apart from parameter maps."""
    assert looks_like_json_schema(schema) is expected


def test_empty_mapping_is_empty_object_schema():
    """Test that an empty mapping declares no arguments."""
    assert schema_to_json_schema({}) == {"type": "object", "properties": {}}


def test_convert_union_type_schema(base_structured_tool):
    """Test that a schema with a list of types is passed through."""
    schema = {"type": ["object", "null"], "required": []}
    
    parameters = JsonSchemaConverter().convert(base_structured_tool(name="n", args_schema=schema))["function"]["parameters"]
    
    assert parameters == {"type": ["object", "null"], "required": []}


def test_convert_schema_without_type_or_properties(base_structured_tool):
    """Test that a schema using only required and additionalProperties is passed through."""
    schema = {"required": ["city"], "additionalProperties": False}
    
    parameters = JsonSchemaConverter().convert(base_structured_tool(args_schema=schema))["function"]["parameters"]
    
    assert parameters == {"required": ["city"], "additionalProperties": False}


def test_parameter_named_required_stays_a_parameter(base_tool_parameter):
    """Test that a parameter called "required" is not mistaken for the keyword."""
    parameters = schema_to_json_schema({"required": base_tool_parameter(param_type="boolean")})
    
    assert parameters["properties"]["required"]["type"] == "boolean"
    assert parameters["required"] == ["required"]
