"""Common test fixtures for the entire test suite."""

import pytest
from typing import Any, Dict, List, Optional
from pydantic import BaseModel, Field

from toolwire.types import StructuredTool, ToolParameter


class GetWeather(BaseModel):
    """Arguments for the weather tool."""
    
    city: str


class SearchDocuments(BaseModel):
    query: str = Field(description="Search terms")
    limit: int = Field(10, description="Maximum number of results")


@pytest.fixture
def weather_model():
    """Pydantic v2 schema with one required string field."""
    return GetWeather


@pytest.fixture
def search_model():
    """Pydantic v2 schema with a defaulted field."""
    return SearchDocuments


@pytest.fixture
def base_tool_parameter():
    """Base fixture for creating tool parameters.
    
    Returns:
        Callable: A factory function that creates ToolParameter instances with the given configuration.
    """
    def _make_parameter(
        param_type: str = "string",
        description: str = "Test parameter",
        required: bool = True,
        enum: Optional[List[str]] = None,
        default: Any = None
    ) -> ToolParameter:
        return ToolParameter(
            type=param_type,
            description=description,
            required=required,
            enum=enum,
            default=default
        )
    return _make_parameter


@pytest.fixture
def base_structured_tool():
    """Base fixture for creating structured tools.
    
    Returns:
        Callable: A factory function that creates StructuredTool instances.
        
    Example:
        def test_something(base_structured_tool, weather_model):
            tool = base_structured_tool(args_schema=weather_model)
    """
    def _make_tool(
        name: str = "get_weather",
        description: str = "fetch weather",
        args_schema: Any = None
    ) -> StructuredTool:
        return StructuredTool(
            name=name,
            description=description,
            args_schema=args_schema
        )
    return _make_tool


@pytest.fixture
def native_tool() -> Dict[str, Any]:
    """A tool already in the OpenAI tool format."""
    return {
        "type": "function",
        "function": {
            "name": "x",
            "parameters": {}
        }
    }


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Fixture to ensure no environment variables affect tests."""
    for var in ["TOOLWIRE_STRICT", "TOOLWIRE_LOG_LEVEL", "TOOLWIRE_LOG_DIR"]:
        monkeypatch.delenv(var, raising=False)
