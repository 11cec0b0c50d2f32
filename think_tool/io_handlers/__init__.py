"""IO handlers for think_tool."""
from .file_storage import FileStorage
from .formatter import format_output

__all__ = ['FileStorage', 'format_output']
