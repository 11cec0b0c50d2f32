"""
Tool catalog for the tools advertised to the model.

Provides the ToolDefinition dataclass, the built-in ``think`` tool and the
ToolCatalog class that supplies the ``tools`` list of a request.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from ..constants import THINK_TOOL_NAME


THINK_TOOL_DESCRIPTION = "A tool to analyze and verify thinking processes"

THINK_TOOL_INPUT_SCHEMA = {
    "type": "object",
    "properties": {
        "thought": {
            "type": "string",
            "description": "The thought content to be analyzed and verified",
        }
    },
    "required": ["thought"],
}


@dataclass(frozen=True)
class ToolDefinition:
    """Definition of a tool available to the model.

    Attributes:
        name: Unique identifier for the tool.
        description: Human-readable description of what the tool does.
        input_schema: JSON schema for the tool's input.
        kind: Tool type as sent on the wire ("custom" for client tools).
    """
    name: str
    description: str
    input_schema: dict[str, Any] = field(default_factory=dict)
    kind: str = "custom"

    def to_dict(self) -> dict[str, Any]:
        """Convert this ToolDefinition to its wire format."""
        return {
            "type": self.kind,
            "name": self.name,
            "description": self.description,
            "input_schema": self.input_schema,
        }


def build_think_tool() -> ToolDefinition:
    """Build the ``think`` tool definition.

    Returns:
        A fresh ToolDefinition requiring a single ``thought`` string.
    """
    schema = {
        "type": THINK_TOOL_INPUT_SCHEMA["type"],
        "properties": {
            name: dict(prop) for name, prop in THINK_TOOL_INPUT_SCHEMA["properties"].items()
        },
        "required": list(THINK_TOOL_INPUT_SCHEMA["required"]),
    }
    return ToolDefinition(
        name=THINK_TOOL_NAME,
        description=THINK_TOOL_DESCRIPTION,
        input_schema=schema,
    )


class ToolCatalog:
    """Holds the tools advertised in a request.

    Example:
        request = Request(model, max_tokens, messages, tools=ToolCatalog().tools)
    """

    def __init__(self, tools: Optional[list[ToolDefinition]] = None) -> None:
        """Initialize the catalog.

        Args:
            tools: Tools to advertise. Defaults to the think tool alone.
        """
        self._tools: list[ToolDefinition] = list(tools) if tools is not None else [build_think_tool()]

    @property
    def tools(self) -> list[ToolDefinition]:
        """Get the advertised tools in registration order."""
        return list(self._tools)

