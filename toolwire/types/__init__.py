from toolwire.types.models import (
    ToolParameter,
    StructuredTool,
    FunctionDefinition,
    ToolDefinition,
    ToolInput,
    ToolKind
)

__all__ = [
    "ToolParameter",
    "StructuredTool",
    "FunctionDefinition",
    "ToolDefinition",
    "ToolInput",
    "ToolKind"
]
