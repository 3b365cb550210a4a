"""Native conversion through the OpenAI SDK's pydantic helper."""

import logging
from typing import Any

from openai import pydantic_function_tool

from toolwire.formats.base import SchemaToToolConverter, is_pydantic_v2_model
from toolwire.types import StructuredTool, ToolDefinition

logger = logging.getLogger(__name__)


class PydanticFunctionConverter(SchemaToToolConverter):
    """Converts tools whose schema is a pydantic v2 model.
    
    ``openai.pydantic_function_tool`` emits a strict-mode JSON Schema that the
    API accepts as-is, and marks the function ``strict``. It only understands
    pydantic v2 models, so every other representation goes to the generic
    converter.
    """
    
    def supports(self, schema: Any) -> bool:
        return is_pydantic_v2_model(schema)
    
    def convert(self, tool: StructuredTool) -> ToolDefinition:
        logger.debug("[flow.native] Converting %s with model %s", tool.name, tool.args_schema.__name__)
        return pydantic_function_tool(
            tool.args_schema,
            name=tool.name,
            description=tool.description,
        )
