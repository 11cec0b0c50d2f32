"""
CLI loop for think_tool.
Runs single-shot analyses and the line-by-line interactive mode.
"""
import asyncio
import logging
from typing import Callable, Optional

from .config import ConversationConfig
from .constants import EXIT_COMMANDS
from .errors import StorageError, ThinkToolError
from .io_handlers import FileStorage, format_output
from .llm.base import APIClient
from .messages import NormalizedResult
from .orchestrator import ConversationOrchestrator
from .rich_ui import PromptInput, RichRenderer
from .tools.executor import PlaceholderAnalysisExecutor, ToolExecutor


logger = logging.getLogger(__name__)

LineReader = Callable[[str], Optional[str]]


class CLI:
    """
    Coordinates input, the conversation orchestrator and output.

    The orchestrator and client are shared across thoughts; every thought
    gets its own run and its own deadline.
    """

    def __init__(
        self,
        config: ConversationConfig,
        client: APIClient,
        output_format: str = "text",
        renderer: Optional[RichRenderer] = None,
        storage: Optional[FileStorage] = None,
        executor: Optional[ToolExecutor] = None,
        read_line: Optional[LineReader] = None,
    ) -> None:
        self._config = config
        self._client = client
        self._output_format = output_format
        self._renderer = renderer or RichRenderer()
        self._storage = storage or FileStorage()
        self._executor = executor or PlaceholderAnalysisExecutor()
        self._orchestrator = ConversationOrchestrator()
        self._read_line = read_line or PromptInput().get_input

    def analyze(self, thought: str) -> NormalizedResult:
        """Run one conversation to completion."""
        return asyncio.run(
            self._orchestrator.run(thought, self._config, self._client, self._executor)
        )

    def run_once(self, thought: str, output_file: Optional[str] = None) -> int:
        """
        Analyze a single thought and emit the result.

        Returns:
            Process exit status
        """
        try:
            result = self.analyze(thought)
        except ThinkToolError as e:
            logger.debug(f"Conversation failed: {e!r}")
            self._renderer.print_error(str(e), title="Think tool call error")
            return 1

        output = format_output(result, self._output_format)

        if output_file:
            try:
                self._storage.write(output_file, output)
            except StorageError as e:
                self._renderer.print_error(str(e), title="Error writing output file")
                return 1
            self._renderer.print_success(f"Analysis written to {output_file}")
        else:
            self._renderer.print_output(output, self._output_format)
        return 0

    def run_interactive(self) -> int:
        """
        Read thoughts one line at a time until 'exit', 'quit' or end of input.

        Errors are reported and the loop carries on with the next line.
        """
        self._renderer.print("[bold]Think Tool Interactive Mode[/bold]")
        self._renderer.print_info("Type 'exit' or 'quit' to exit")
        self._renderer.print("Enter a thought to analyze:")

        while True:
            line = self._read_line("> ")
            if line is None:
                break

            thought = line.strip()
            if not thought:
                continue
            if thought.lower() in EXIT_COMMANDS:
                break

            try:
                result = self.analyze(thought)
            except ThinkToolError as e:
                self._renderer.print_error(str(e))
                continue

            self._renderer.print_output(format_output(result, self._output_format), self._output_format)

        self._renderer.print("Goodbye!")
        return 0
