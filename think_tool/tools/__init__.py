"""
Tool module.

Provides the think tool definition, the response parser and the executors
that answer tool calls.
"""

from .catalog import ToolCatalog, ToolDefinition, build_think_tool, THINK_TOOL_DESCRIPTION
from .executor import ToolExecutor, PlaceholderAnalysisExecutor
from .parser import (
    decode_payload,
    extract_text,
    find_first_tool_use,
    parse_block,
    parse_content,
    parse_response,
)

__all__ = [
    "ToolCatalog",
    "ToolDefinition",
    "build_think_tool",
    "THINK_TOOL_DESCRIPTION",
    "ToolExecutor",
    "PlaceholderAnalysisExecutor",
    "decode_payload",
    "extract_text",
    "find_first_tool_use",
    "parse_block",
    "parse_content",
    "parse_response",
]
