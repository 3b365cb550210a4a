"""Converter interface and tool classification helpers."""

import inspect
import types
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel

from toolwire.core.errors import ToolShapeError
from toolwire.types import StructuredTool, ToolDefinition, ToolKind


def _is_plain_class(schema: Any) -> bool:
    # list[int] passes isclass on Python 3.9 and 3.10 but breaks issubclass
    return inspect.isclass(schema) and not isinstance(schema, types.GenericAlias)


def is_pydantic_v2_model(schema: Any) -> bool:
    """Check whether ``schema`` is a pydantic v2 model class."""
    return _is_plain_class(schema) and issubclass(schema, BaseModel)


def is_pydantic_v1_model(schema: Any) -> bool:
    """Check whether ``schema`` is a model class from the ``pydantic.v1`` namespace."""
    if not _is_plain_class(schema) or issubclass(schema, BaseModel):
        return False
    # pydantic.v1 is only imported when a caller already uses it
    return any(
        klass.__name__ == "BaseModel" and klass.__module__.startswith("pydantic.v1")
        for klass in inspect.getmro(schema)
    )


def is_tool_definition(tool: Any) -> bool:
    """Check whether ``tool`` is already shaped as an OpenAI tool definition.
    
    Only the discriminating fields are checked: ``type`` must be
    ``"function"`` and ``function`` must be a mapping with a string name.
    """
    if not isinstance(tool, Mapping) or tool.get("type") != "function":
        return False
    function = tool.get("function")
    return isinstance(function, Mapping) and isinstance(function.get("name"), str)


def classify_tool(tool: Any) -> ToolKind:
    """Classify a tool as structured or native.
    
    Args:
        tool: The tool to classify
        
    Returns:
        ``"structured"`` for a StructuredTool, ``"native"`` for a tool definition
        
    Raises:
        ToolShapeError: If the tool matches neither shape
    """
    if isinstance(tool, StructuredTool):
        return "structured"
    if is_tool_definition(tool):
        return "native"
    raise ToolShapeError(
        f"Expected a StructuredTool or an OpenAI tool definition, got {_describe(tool)}"
    )


def tool_name(tool: Any) -> str:
    """Get the name of a tool in either shape."""
    if classify_tool(tool) == "structured":
        return tool.name
    return tool["function"]["name"]


def _describe(value: Any) -> str:
    if isinstance(value, Mapping):
        keys = ", ".join(sorted(str(key) for key in value.keys()))
        return f"mapping with keys [{keys}]"
    return type(value).__name__


class SchemaToToolConverter(ABC):
    """Base interface for schema-to-tool converters."""
    
    @abstractmethod
    def supports(self, schema: Any) -> bool:
        """Check whether this converter understands a schema representation.
        
        Args:
            schema: The ``args_schema`` of a structured tool
            
        Returns:
            True if ``convert`` can handle tools carrying this schema
        """
        pass
    
    @abstractmethod
    def convert(self, tool: StructuredTool) -> ToolDefinition:
        """Convert a structured tool to an OpenAI tool definition.
        
        Args:
            tool: The structured tool to convert
            
        Returns:
            A new tool definition
        """
        pass
