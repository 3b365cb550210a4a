"""Tool registry for toolwire.

This module provides the place where a tool list is assembled before it is
sent to the API. Tools are classified when they are registered, so a
malformed entry is reported at registration rather than when the request is
built.
"""

from typing import Dict, List, Optional

from toolwire.formats.adapter import ToolFormatAdapter
from toolwire.formats.base import tool_name
from toolwire.types import ToolDefinition, ToolInput


class ToolRegistry:
    """Registry for managing tools of either shape.
    
    Tool names are unique. The registry keeps registration order, which is
    the order tools are rendered in.
    """
    
    def __init__(self, adapter: Optional[ToolFormatAdapter] = None) -> None:
        """Initialize an empty tool registry.
        
        Args:
            adapter: Adapter used to render tools; a default one if omitted
        """
        self._tools: Dict[str, ToolInput] = {}
        self._adapter = adapter or ToolFormatAdapter()
        
    def register_tool(self, tool: ToolInput) -> None:
        """Register a new tool in the registry.
        
        Args:
            tool: A StructuredTool or an OpenAI tool definition
            
        Raises:
            ToolShapeError: If the tool matches neither shape
            ValueError: If a tool with the same name already exists
        """
        name = tool_name(tool)
        if name in self._tools:
            raise ValueError(f"Tool '{name}' is already registered")
            
        self._tools[name] = tool
        
    def get_tool(self, name: str) -> ToolInput:
        """Get a tool by name.
        
        Raises:
            KeyError: If no tool with the given name exists
        """
        if name not in self._tools:
            raise KeyError(f"No tool named '{name}' is registered")
        return self._tools[name]
    
    def remove_tool(self, name: str) -> None:
        """Remove a tool by name.
        
        Raises:
            KeyError: If no tool with the given name exists
        """
        if name not in self._tools:
            raise KeyError(f"No tool named '{name}' is registered")
        del self._tools[name]
        
    def list_tools(self) -> List[ToolInput]:
        """Get a list of all registered tools, in registration order."""
        return list(self._tools.values())
    
    def clear(self) -> None:
        """Remove every registered tool."""
        self._tools.clear()
    
    def format_tools(self, strict: Optional[bool] = None) -> List[ToolDefinition]:
        """Render every registered tool in the OpenAI tool format.
        
        Args:
            strict: Optional strict override applied to every tool
            
        Returns:
            One tool definition per registered tool
        """
        return self._adapter.convert_all(self.list_tools(), strict=strict)
    
    def __len__(self) -> int:
        return len(self._tools)
    
    def __contains__(self, name: str) -> bool:
        return name in self._tools
