"""
Constants and configuration defaults for think_tool.
"""
from pathlib import Path
from typing import Final

APP_NAME: Final[str] = "think_tool"
APP_VERSION: Final[str] = "0.1.0"
APP_DESCRIPTION: Final[str] = "A tool for analyzing and verifying thinking processes with Claude"

CONFIG_DIR: Final[Path] = Path.home() / ".think_tool"
CONFIG_FILE: Final[Path] = CONFIG_DIR / "config.json"

ANTHROPIC_API_URL: Final[str] = "https://api.anthropic.com/v1/messages"
ANTHROPIC_API_VERSION: Final[str] = "2023-06-01"
API_KEY_ENV_VAR: Final[str] = "ANTHROPIC_API_KEY"

DEFAULT_MODEL: Final[str] = "claude-3-7-sonnet-20250219"
DEFAULT_MAX_TOKENS: Final[int] = 1024
DEFAULT_TIMEOUT_SECONDS: Final[float] = 30.0
DEFAULT_OUTPUT_FORMAT: Final[str] = "text"
OUTPUT_FORMATS: Final[tuple] = ("text", "json")

DEFAULT_PROMPT_PREFIX: Final[str] = "Please analyze the following thought:"

# Stop reason signalling that the model wants the tool invoked
STOP_REASON_TOOL_USE: Final[str] = "tool_use"

THINK_TOOL_NAME: Final[str] = "think"

DEFAULT_THOUGHT: Final[str] = (
    "I believe we should launch the new feature next week because our testing "
    "shows it improves user engagement by 23% and reduces load times by 15%, "
    "which addresses our Q2 goals. The only concern is that we haven't completed "
    "security testing, but I think we can do that in parallel during a limited rollout."
)

EXIT_COMMANDS: Final[frozenset] = frozenset({"exit", "quit"})
