"""
Shared fixtures for think_tool tests.
"""
import pytest

from think_tool.config import ConversationConfig


@pytest.fixture
def config() -> ConversationConfig:
    return ConversationConfig(model="test-model", max_tokens=1024, timeout=30.0)
