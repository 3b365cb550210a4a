"""Dialect-agnostic conversion of argument schemas to JSON Schema."""

import copy
import logging
from collections.abc import Mapping
from typing import Any, Dict

from pydantic import ValidationError

from toolwire.core.errors import SchemaError
from toolwire.formats.base import (
    SchemaToToolConverter,
    is_pydantic_v1_model,
    is_pydantic_v2_model,
)
from toolwire.types import StructuredTool, ToolDefinition, ToolParameter

logger = logging.getLogger(__name__)

JSON_SCHEMA_KEYS = frozenset({
    "properties", "patternProperties", "additionalProperties",
    "$schema", "$id", "$ref", "$defs", "definitions",
    "anyOf", "oneOf", "allOf", "not",
    "items", "enum", "const",
})


def _strip_title(schema: Dict[str, Any]) -> Dict[str, Any]:
    schema.pop("title", None)
    return schema


def looks_like_json_schema(schema: Mapping) -> bool:
    """Check whether a mapping is a JSON Schema rather than a parameter map."""
    if isinstance(schema.get("type"), (str, list)):
        return True
    # a parameter may be named "required"; the keyword always holds a list
    if isinstance(schema.get("required"), list):
        return True
    return any(
        key in schema and not isinstance(schema[key], ToolParameter)
        for key in JSON_SCHEMA_KEYS
    )


def parameters_to_json_schema(parameters: Mapping) -> Dict[str, Any]:
    """Convert a mapping of parameter names to ``ToolParameter`` into an object schema.
    
    Args:
        parameters: Parameter names mapped to ToolParameter objects or dicts
        
    Returns:
        JSON Schema object with ``properties`` and ``required``
        
    Raises:
        SchemaError: If a parameter is not a valid ToolParameter
    """
    properties = {}
    required = []
    
    for name, param in parameters.items():
        if not isinstance(param, ToolParameter):
            try:
                param = ToolParameter.model_validate(param)
            except ValidationError as e:
                raise SchemaError(f"Invalid parameter '{name}': {e}") from e
        properties[name] = {
            "type": param.type,
            "description": param.description
        }
        if param.enum:
            properties[name]["enum"] = param.enum
        if param.default is not None:
            properties[name]["default"] = param.default
        if param.required:
            required.append(name)
            
    return {
        "type": "object",
        "properties": properties,
        "required": required
    }


def schema_to_json_schema(schema: Any) -> Dict[str, Any]:
    """Render any supported argument schema representation as JSON Schema.
    
    Args:
        schema: None, a pydantic model class (v2 or v1), a JSON Schema
            mapping, or a mapping of ToolParameter objects
        
    Returns:
        A new JSON Schema dict; the input is never modified
        
    Raises:
        SchemaError: If the representation is not recognised
    """
    if schema is None:
        return {"type": "object", "properties": {}}
    if is_pydantic_v2_model(schema):
        return _strip_title(schema.model_json_schema())
    if is_pydantic_v1_model(schema):
        return _strip_title(schema.schema())
    if isinstance(schema, Mapping):
        if not schema:
            return {"type": "object", "properties": {}}
        if looks_like_json_schema(schema):
            return _strip_title(copy.deepcopy(dict(schema)))
        return parameters_to_json_schema(schema)
    raise SchemaError(f"Unsupported argument schema of type {type(schema).__name__}")


class JsonSchemaConverter(SchemaToToolConverter):
    """Converts structured tools through a plain JSON Schema rendering.
    
    The output never carries a ``strict`` key.
    """
    
    def supports(self, schema: Any) -> bool:
        return (
            schema is None
            or is_pydantic_v2_model(schema)
            or is_pydantic_v1_model(schema)
            or isinstance(schema, Mapping)
        )
    
    def convert(self, tool: StructuredTool) -> ToolDefinition:
        logger.debug("[flow.generic] Converting %s", tool.name)
        try:
            parameters = schema_to_json_schema(tool.args_schema)
        except SchemaError as e:
            if e.tool_name is None:
                e.tool_name = tool.name
            raise
        return {
            "type": "function",
            "function": {
                "name": tool.name,
                "description": tool.description,
                "parameters": parameters
            }
        }
