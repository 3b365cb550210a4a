"""toolwire: Normalize tool descriptions into the OpenAI tool-calling format.

Tools reach an agent in two shapes: already-native OpenAI tool definitions,
and ``StructuredTool`` objects that carry a name, a description and an
argument schema. This package converts either shape into the ``tools``
entries the chat-completions API expects.

Key Components:
    - StructuredTool, ToolParameter: wire-format independent tool types
    - ToolFormatAdapter: classifies a tool and picks a converter
    - PydanticFunctionConverter: pydantic v2 schemas through the OpenAI SDK
    - JsonSchemaConverter: fallback for every other schema representation
    - ToolRegistry: assembles a tool list and renders it in one step

Example:
    ```python
    from pydantic import BaseModel
    from toolwire import StructuredTool, convert_to_openai_tool

    class GetWeather(BaseModel):
        city: str

    tool = StructuredTool(
        name="get_weather",
        description="fetch weather",
        args_schema=GetWeather
    )

    tool_def = convert_to_openai_tool(tool, strict=True)
    ```
"""

# core first: its registry imports the formats package
from toolwire.core import (
    ToolFormatError,
    ToolShapeError,
    SchemaError,
    AdapterSettings,
    ToolRegistry
)
from toolwire.types import (
    ToolParameter,
    StructuredTool,
    FunctionDefinition,
    ToolDefinition,
    ToolInput
)
from toolwire.formats import (
    SchemaToToolConverter,
    PydanticFunctionConverter,
    JsonSchemaConverter,
    ToolFormatAdapter,
    classify_tool,
    convert_to_openai_tool,
    convert_tools,
    convert_to_openai_function
)
from toolwire.logging_config import setup_logging

__all__ = [
    "ToolFormatError",
    "ToolShapeError",
    "SchemaError",
    "AdapterSettings",
    "ToolRegistry",
    "ToolParameter",
    "StructuredTool",
    "FunctionDefinition",
    "ToolDefinition",
    "ToolInput",
    "SchemaToToolConverter",
    "PydanticFunctionConverter",
    "JsonSchemaConverter",
    "ToolFormatAdapter",
    "classify_tool",
    "convert_to_openai_tool",
    "convert_tools",
    "convert_to_openai_function",
    "setup_logging",
]

__version__ = "0.1.0"
