"""
Tool schema definitions for Exa Search Agent.

ToolSchema: JSON-serializable format for MCP responses.
ToolDefinition: Internal storage that includes the handler and its arguments model.
"""

from typing import Any, Awaitable, Callable, Optional

from pydantic import BaseModel, Field

from exasearch.workspace import WorkspaceId

ToolHandler = Callable[[Any, Optional[WorkspaceId]], Awaitable[str]]


class ToolSchema(BaseModel):
    """
    MCP-compliant tool format.
    Sent to agents via tools/list response.
    """
    name: str = Field(..., description="Unique tool identifier")
    description: str = Field(..., description="What the tool does")
    inputSchema: dict[str, Any] = Field(..., description="JSON Schema for parameters")


class ToolDefinition:
    """
    Internal tool storage.
    Includes the arguments model used to validate calls and the handler to run.
    """
    def __init__(
        self,
        name: str,
        description: str,
        arguments: type[BaseModel],
        function: ToolHandler
    ):
        self.name = name
        self.description = description
        self.arguments = arguments
        self.inputSchema = arguments.model_json_schema(by_alias=True)
        self.function = function

    def parse_arguments(self, raw: Optional[dict[str, Any]]) -> BaseModel:
        """Validate raw call arguments. Raises pydantic.ValidationError."""
        return self.arguments.model_validate(raw or {})

    async def run(self, raw: Optional[dict[str, Any]], workspace_id: Optional[WorkspaceId]) -> str:
        return await self.function(self.parse_arguments(raw), workspace_id)

    def to_schema(self) -> ToolSchema:
        """Convert to MCP-compliant format (drops handler)."""
        return ToolSchema(
            name=self.name,
            description=self.description,
            inputSchema=self.inputSchema
        )
