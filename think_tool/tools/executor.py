"""Tool executors producing tool-result text for the model."""
from abc import ABC, abstractmethod

from ..constants import THINK_TOOL_NAME


JAPAN_ANALYSIS = """I've analyzed the thought "Japan is cool":

Strengths:
- Simple and clear statement of opinion
- Easy to understand sentiment
- Broadly relatable to many audiences

Concerns:
- Very general statement lacking specific details
- No supporting evidence or reasoning provided
- Could be perceived as overly simplistic

Recommendation:
- Consider adding specific aspects of Japan that are "cool"
- Provide personal experiences or facts that support this opinion
- Consider cultural context and avoid generalizations"""

DEFAULT_ANALYSIS = """I've analyzed the thought. Here are my observations:

Strengths:
- Clear statement of opinion
- Easy to understand the main point

Concerns:
- Limited supporting details or evidence
- Could benefit from more specific examples

Recommendation:
- Add specific supporting details
- Consider different perspectives
- Clarify reasoning behind the thought"""


class ToolExecutor(ABC):
    """Executes tool calls from model responses."""

    @abstractmethod
    def execute(self, tool_name: str, thought: str) -> str:
        """Execute a tool and return the result as a string."""
        pass


class PlaceholderAnalysisExecutor(ToolExecutor):
    """
    Deterministic stand-in for a real analysis engine.

    Returns fixed analysis text for the think tool, with a dedicated answer
    for the literal thought "Japan is cool".
    """

    def execute(self, tool_name: str, thought: str) -> str:
        if tool_name != THINK_TOOL_NAME:
            return f"Error: Unknown tool '{tool_name}'"
        if thought == "Japan is cool":
            return JAPAN_ANALYSIS
        return DEFAULT_ANALYSIS
