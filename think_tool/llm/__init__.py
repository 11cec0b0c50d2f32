"""API client modules for think_tool."""
from .base import APIClient, ClientConfig
from .anthropic import AnthropicClient

__all__ = ['APIClient', 'ClientConfig', 'AnthropicClient']
