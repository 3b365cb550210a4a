"""Error classes for the toolwire package."""

class ToolFormatError(Exception):
    """Base exception for all tool formatting errors."""
    
    def __init__(self, message: str, *, tool_name: str = None):
        self.tool_name = tool_name
        super().__init__(message)

    def __str__(self) -> str:
        if self.tool_name:
            return f"[{self.tool_name}] {super().__str__()}"
        return super().__str__()


class ToolShapeError(ToolFormatError, TypeError):
    """Raised when a tool is neither a structured tool nor a native definition."""
    pass


class SchemaError(ToolFormatError, ValueError):
    """Raised when a tool's argument schema cannot be read."""
    pass
