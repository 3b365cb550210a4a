"""Format converters for toolwire.

This module contains the tool format adapter and the converters it
delegates to:
- PydanticFunctionConverter for pydantic v2 schemas (OpenAI SDK helper)
- JsonSchemaConverter for every other schema representation
"""

from .base import SchemaToToolConverter, classify_tool, tool_name
from .native import PydanticFunctionConverter
from .generic import JsonSchemaConverter
from .adapter import (
    ToolFormatAdapter,
    convert_to_openai_tool,
    convert_tools,
    convert_to_openai_function
)

__all__ = [
    "SchemaToToolConverter",
    "classify_tool",
    "tool_name",
    "PydanticFunctionConverter",
    "JsonSchemaConverter",
    "ToolFormatAdapter",
    "convert_to_openai_tool",
    "convert_tools",
    "convert_to_openai_function"
]
