"""
Request and response data model for the Messages API.

Content blocks are a tagged variant keyed by their ``type`` discriminator.
Payloads decoded from the wire keep a ``raw`` copy so that fields this
module does not model survive a round-trip.
"""
from dataclasses import dataclass, field
from typing import Any, ClassVar, Optional, Union


@dataclass(frozen=True)
class TextBlock:
    """Plain text produced by the model."""
    type: ClassVar[str] = "text"
    text: str

    def to_dict(self) -> dict:
        return {"type": self.type, "text": self.text}


@dataclass(frozen=True)
class ToolUseBlock:
    """The model's request to invoke a tool."""
    type: ClassVar[str] = "tool_use"
    id: str
    name: str
    input: Any = None

    def to_dict(self) -> dict:
        return {"type": self.type, "id": self.id, "name": self.name, "input": self.input}


@dataclass(frozen=True)
class ToolResultBlock:
    """The caller's answer to a ToolUseBlock, keyed by its id."""
    type: ClassVar[str] = "tool_result"
    tool_use_id: str
    content: str

    def to_dict(self) -> dict:
        return {"type": self.type, "tool_use_id": self.tool_use_id, "content": self.content}


@dataclass(frozen=True)
class UnknownBlock:
    """A block with a discriminator this client does not model."""
    block_type: str
    raw: dict = field(default_factory=dict)

    @property
    def type(self) -> str:
        return self.block_type

    def to_dict(self) -> dict:
        return dict(self.raw)


ContentBlock = Union[TextBlock, ToolUseBlock, ToolResultBlock, UnknownBlock]


@dataclass
class Message:
    """
    One conversation turn.

    ``content`` is either a plain string or an ordered list whose items are
    ContentBlock objects or already-serialised block dicts (the assistant
    turn echoes the raw content of a previous response verbatim).
    """
    role: str
    content: Union[str, list]

    def to_dict(self) -> dict:
        """Convert to dictionary for API calls."""
        if isinstance(self.content, str):
            content: Any = self.content
        else:
            content = [
                item.to_dict() if hasattr(item, "to_dict") else item
                for item in self.content
            ]
        return {"role": self.role, "content": content}


@dataclass
class Request:
    """A Messages API request body."""
    model: str
    max_tokens: int
    messages: list[Message]
    tools: Optional[list] = None

    def to_dict(self) -> dict:
        """Build the exact wire payload."""
        payload: dict[str, Any] = {
            "model": self.model,
            "max_tokens": self.max_tokens,
            "messages": [message.to_dict() for message in self.messages],
        }
        if self.tools:
            payload["tools"] = [
                tool.to_dict() if hasattr(tool, "to_dict") else tool
                for tool in self.tools
            ]
        return payload


@dataclass
class ModelResponse:
    """A decoded Messages API response."""
    id: str
    role: str
    content: list[ContentBlock]
    stop_reason: str
    raw: dict = field(default_factory=dict)
    model: Optional[str] = None
    type: Optional[str] = None
    usage: dict = field(default_factory=dict)

    @property
    def raw_content(self) -> list:
        """The content list exactly as it appeared on the wire."""
        return self.raw.get("content", [])


@dataclass
class NormalizedResult:
    """
    Final outcome of a conversation run.

    Attributes:
        raw: The last decoded payload
        text: Every text block of that payload, each followed by a newline
        tool_used: Whether the model invoked the tool (two round-trips)
        request_count: Number of requests sent
    """
    raw: dict
    text: str
    tool_used: bool = False
    request_count: int = 1
