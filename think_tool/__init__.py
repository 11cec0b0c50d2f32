"""
think_tool - Two-turn tool-use conversations with Claude's think tool.
"""
from .constants import APP_NAME, APP_VERSION, APP_DESCRIPTION
from .config import ConversationConfig
from .errors import ConfigError, ProtocolError, ThinkToolError, TransportError
from .messages import NormalizedResult
from .orchestrator import ConversationOrchestrator, run_conversation

__version__ = APP_VERSION
__all__ = [
    'APP_NAME', 'APP_VERSION', 'APP_DESCRIPTION',
    'ConversationConfig', 'ConversationOrchestrator', 'run_conversation',
    'NormalizedResult',
    'ThinkToolError', 'ConfigError', 'TransportError', 'ProtocolError',
]
