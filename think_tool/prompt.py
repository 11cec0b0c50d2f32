"""
Prompt composition for the initial user message.
"""
from typing import Optional

from .constants import DEFAULT_PROMPT_PREFIX


def compose_prompt(thought: str, template: Optional[str] = None) -> str:
    """
    Build the user prompt for a thought.

    Args:
        thought: The raw thought text
        template: Optional prefix placed before the thought

    Returns:
        ``template + " " + thought`` when a template is given, otherwise the
        default analysis request followed by the thought
    """
    if template:
        return f"{template} {thought}"
    return f"{DEFAULT_PROMPT_PREFIX} {thought}"
