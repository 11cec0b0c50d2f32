"""Rich UI components for think_tool."""
from .renderer import RichRenderer
from .prompt_input import PromptInput

__all__ = ['RichRenderer', 'PromptInput']
