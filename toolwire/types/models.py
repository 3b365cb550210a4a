"""Type definitions for toolwire.

This module contains the two shapes a tool can arrive in: an already-native
OpenAI tool definition, or a ``StructuredTool`` carrying a name, a
description and an argument schema.
"""

from typing import (
    Any,
    Dict,
    List,
    Literal,
    Optional,
    TypedDict,
    Union,
)

from pydantic import BaseModel, ConfigDict


class ToolParameter(BaseModel):
    """Definition of a tool parameter.
    
    Attributes:
        type: The JSON Schema type of the parameter (string, number, boolean, etc.)
        description: A human-readable description of the parameter
        required: Whether the parameter is required (default: False)
        default: Default value for the parameter if not provided
        enum: Optional list of allowed values for the parameter
    """
    
    type: str
    description: str = ""
    required: bool = False
    default: Optional[Any] = None
    enum: Optional[List[str]] = None


class StructuredTool(BaseModel):
    """A tool described independently of any wire format.
    
    Attributes:
        name: The name of the tool
        description: A human-readable description of what the tool does
        args_schema: The argument schema. One of a pydantic model class
            (v2 or v1), a JSON Schema mapping, a mapping of parameter names
            to ``ToolParameter`` objects, or None for a tool without arguments
    """
    
    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)
    
    name: str
    description: str = ""
    args_schema: Any = None


class _FunctionDefinitionBase(TypedDict):
    name: str


class FunctionDefinition(_FunctionDefinitionBase, total=False):
    """The ``function`` member of an OpenAI tool definition.
    
    Attributes:
        name: Name of the function
        description: What the function does
        parameters: JSON Schema object describing the arguments
        strict: Whether generated arguments must match the schema exactly
    """
    
    description: str
    parameters: Dict[str, Any]
    strict: bool


class ToolDefinition(TypedDict):
    """An OpenAI chat-completions tool definition."""
    
    type: Literal["function"]
    function: FunctionDefinition


# A tool as accepted by the adapter
ToolInput = Union[ToolDefinition, StructuredTool, Dict[str, Any]]

ToolKind = Literal["structured", "native"]
