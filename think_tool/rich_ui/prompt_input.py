"""
Line input handler using prompt_toolkit for think_tool.
Reads exactly one line per call, so interactive sessions see each thought
separately.
"""
from typing import Optional

from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory
from prompt_toolkit.styles import Style


PROMPT_STYLE = Style.from_dict({
    'prompt': '#00ff00',
})


class PromptInput:
    """Reads thoughts from the terminal one line at a time."""

    def __init__(self) -> None:
        self._history = InMemoryHistory()
        self._session: Optional[PromptSession] = None

    def _create_session(self) -> PromptSession:
        """Create a new prompt session."""
        return PromptSession(
            history=self._history,
            style=PROMPT_STYLE,
            mouse_support=False,
        )

    def get_input(self, prompt: str = '> ') -> Optional[str]:
        """
        Read one line.

        Args:
            prompt: Prompt string to display

        Returns:
            The line without its newline, '' on Ctrl-C, None at end of input
        """
        if self._session is None:
            self._session = self._create_session()

        try:
            return self._session.prompt(prompt)
        except EOFError:
            return None
        except KeyboardInterrupt:
            return ''
