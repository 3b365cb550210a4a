"""Tool format adapter.

This module normalizes tools into the OpenAI chat-completions ``tools``
format. A tool is either already an OpenAI tool definition, which passes
through untouched, or a ``StructuredTool``, which is converted by one of two
converters:

- the native converter, for pydantic v2 models, backed by
  ``openai.pydantic_function_tool``
- the generic converter, for every other schema representation
"""

import logging
from typing import Any, Dict, List, Optional, Sequence

from toolwire.core.errors import SchemaError, ToolShapeError
from toolwire.core.settings import AdapterSettings
from toolwire.formats.base import SchemaToToolConverter, classify_tool
from toolwire.formats.generic import JsonSchemaConverter
from toolwire.formats.native import PydanticFunctionConverter
from toolwire.types import FunctionDefinition, ToolDefinition, ToolInput

logger = logging.getLogger(__name__)


class ToolFormatAdapter:
    """Converts tools of either shape into OpenAI tool definitions.
    
    Attributes:
        native: Converter tried first for structured tools
        generic: Fallback converter for schemas the native converter rejects
        default_strict: Strict value applied when a call does not pass one.
            When set, every result carries ``function.strict``: a call has no
            way to ask for the key to be left absent, and native tools are
            returned as copies instead of passing through unchanged.
    """
    
    def __init__(
        self,
        native: Optional[SchemaToToolConverter] = None,
        generic: Optional[SchemaToToolConverter] = None,
        default_strict: Optional[bool] = None
    ) -> None:
        self.native = native or PydanticFunctionConverter()
        self.generic = generic or JsonSchemaConverter()
        self.default_strict = default_strict
    
    @classmethod
    def from_settings(cls, settings: Optional[AdapterSettings] = None) -> "ToolFormatAdapter":
        """Create an adapter from settings.
        
        Args:
            settings: Optional settings instance, will load from env if not provided
            
        Returns:
            An adapter whose default strict value comes from the settings
        """
        if settings is None:
            settings = AdapterSettings()
        return cls(default_strict=settings.strict)
    
    def convert(self, tool: ToolInput, strict: Optional[bool] = None) -> ToolDefinition:
        """Convert a tool to the OpenAI tool format.
        
        Args:
            tool: A StructuredTool or an OpenAI tool definition
            strict: When not None, written to ``function.strict`` of the
                result, replacing whatever the conversion produced. False is
                written too.
            
        Returns:
            The tool definition. A native input is returned as the same
            object unless a strict value has to be written, in which case a
            copy is returned.
            
        Raises:
            ToolShapeError: If the tool matches neither accepted shape
            SchemaError: If neither converter supports the tool's schema
        """
        if strict is None:
            strict = self.default_strict
        
        if classify_tool(tool) == "structured":
            if self.native.supports(tool.args_schema):
                tool_def = self.native.convert(tool)
            elif self.generic.supports(tool.args_schema):
                logger.debug("[flow.convert] Native converter rejected schema of %s, using fallback", tool.name)
                tool_def = self.generic.convert(tool)
            else:
                raise SchemaError(
                    f"Unsupported argument schema of type {type(tool.args_schema).__name__}",
                    tool_name=tool.name
                )
        else:
            if strict is None:
                return tool
            # Never write into the caller's definition
            tool_def = {**tool, "function": dict(tool["function"])}
        
        if strict is not None:
            tool_def["function"]["strict"] = strict
            
        return tool_def
    
    def convert_all(self, tools: Sequence[ToolInput], strict: Optional[bool] = None) -> List[ToolDefinition]:
        """Convert a list of tools, failing on the first malformed one.
        
        Args:
            tools: Tools in either shape
            strict: Strict override applied to every tool
            
        Returns:
            One tool definition per input, in order
            
        Raises:
            ToolShapeError: If any tool matches neither shape; the message
                names its position in the list
        """
        converted = []
        for index, tool in enumerate(tools):
            try:
                converted.append(self.convert(tool, strict=strict))
            except ToolShapeError as e:
                raise ToolShapeError(f"Tool at index {index}: {e}") from e
        return converted


_default_adapter = ToolFormatAdapter()


def convert_to_openai_tool(tool: ToolInput, *, strict: Optional[bool] = None) -> ToolDefinition:
    """Convert a tool to the OpenAI tool format with the default adapter.
    
    Args:
        tool: A StructuredTool or an OpenAI tool definition
        strict: Optional strict override; None leaves the converted value alone
        
    Returns:
        The OpenAI tool definition
    """
    return _default_adapter.convert(tool, strict=strict)


def convert_tools(tools: Sequence[ToolInput], *, strict: Optional[bool] = None) -> List[ToolDefinition]:
    """Convert a list of tools with the default adapter."""
    return _default_adapter.convert_all(tools, strict=strict)


def convert_to_openai_function(tool: ToolInput, *, strict: Optional[bool] = None) -> FunctionDefinition:
    """Convert a tool to the legacy ``functions`` request format.
    
    Returns:
        The ``function`` member of the converted tool definition
    """
    return convert_to_openai_tool(tool, strict=strict)["function"]
