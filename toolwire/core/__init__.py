"""Core module for toolwire."""

from .errors import ToolFormatError, ToolShapeError, SchemaError
from .settings import AdapterSettings
from .registry import ToolRegistry

__all__ = [
    "ToolFormatError",
    "ToolShapeError",
    "SchemaError",
    "AdapterSettings",
    "ToolRegistry"
]
