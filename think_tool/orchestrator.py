"""
Conversation orchestrator for the think tool.

Runs one two-turn tool-use conversation:

1. Send the composed prompt together with the think tool definition.
2. If the model stops for any reason other than ``tool_use``, return its answer.
3. Otherwise answer the first tool_use block with the executor's result and
   send a follow-up request carrying the whole exchange.
4. Return the model's final answer.

Every failure is terminal; nothing is retried.
"""

import asyncio
import logging
import time
from typing import Any, Optional

import httpx

from .config import ConversationConfig
from .constants import STOP_REASON_TOOL_USE
from .errors import APIError, ConfigError, ErrorPhase, ProtocolError, TransportError
from .llm.base import APIClient
from .messages import Message, ModelResponse, NormalizedResult, Request, ToolResultBlock
from .prompt import compose_prompt
from .tools.catalog import ToolCatalog
from .tools.executor import PlaceholderAnalysisExecutor, ToolExecutor
from .tools.parser import decode_payload, extract_text, find_first_tool_use, parse_response


logger = logging.getLogger(__name__)

# Failures raised by a client that count as transport errors
TRANSPORT_FAILURES = (APIError, httpx.HTTPError, asyncio.TimeoutError, OSError)


class ConversationOrchestrator:
    """
    Drives the initial request, the optional tool round-trip and the
    follow-up request.

    The orchestrator keeps no state between runs; a single instance can be
    shared by concurrent callers.
    """

    async def run(
        self,
        thought: str,
        config: ConversationConfig,
        client: APIClient,
        executor: ToolExecutor,
    ) -> NormalizedResult:
        """
        Run one conversation about ``thought``.

        Args:
            thought: The thought to analyze
            config: Model, token limit, prompt template and timeout
            client: Transport used for both requests
            executor: Produces the tool result text

        Returns:
            NormalizedResult built from the last response

        Raises:
            ConfigError: Propagated unchanged from the client
            TransportError: A request failed or the deadline elapsed
            ProtocolError: A response could not be interpreted
        """
        deadline = time.monotonic() + config.timeout

        catalog = ToolCatalog()
        user_message = Message(role="user", content=compose_prompt(thought, config.prompt_template))
        initial_request = Request(
            model=config.model,
            max_tokens=config.max_tokens,
            messages=[user_message],
            tools=catalog.tools,
        )

        logger.debug("Sending initial request")
        initial = await self._exchange(client, initial_request, deadline, ErrorPhase.INITIAL)

        if initial.stop_reason != STOP_REASON_TOOL_USE:
            logger.debug(f"Model stopped with '{initial.stop_reason}', no tool use requested")
            return self._normalize(initial, tool_used=False, request_count=1)

        tool_use = find_first_tool_use(initial.content)
        if tool_use is None or not tool_use.id or not tool_use.name:
            raise ProtocolError("no valid tool-use block", ErrorPhase.INITIAL)
        logger.debug(f"Found tool use: id={tool_use.id}, name={tool_use.name}")

        try:
            tool_result = executor.execute(tool_use.name, thought)
        except Exception as e:
            raise ProtocolError(f"tool '{tool_use.name}' failed: {e}", ErrorPhase.INITIAL) from e

        follow_up_request = Request(
            model=config.model,
            max_tokens=config.max_tokens,
            messages=[
                user_message,
                Message(role="assistant", content=initial.raw_content),
                Message(
                    role="user",
                    content=[ToolResultBlock(tool_use_id=tool_use.id, content=tool_result)],
                ),
            ],
            tools=catalog.tools,
        )

        logger.debug("Sending follow-up request with tool result")
        final = await self._exchange(client, follow_up_request, deadline, ErrorPhase.FOLLOW_UP)

        logger.debug("Tool use cycle complete")
        return self._normalize(final, tool_used=True, request_count=2)

    async def _exchange(
        self,
        client: APIClient,
        request: Request,
        deadline: float,
        phase: ErrorPhase,
    ) -> ModelResponse:
        """Send one request within the deadline and decode the answer."""
        payload: dict[str, Any] = request.to_dict()
        remaining = deadline - time.monotonic()
        if remaining <= 0:
            raise TransportError(phase, asyncio.TimeoutError("deadline exceeded"))

        try:
            data = await asyncio.wait_for(
                client.send_request(payload, timeout=remaining),
                timeout=remaining,
            )
        except ConfigError:
            raise
        except asyncio.TimeoutError as e:
            raise TransportError(phase, asyncio.TimeoutError("deadline exceeded")) from e
        except TRANSPORT_FAILURES as e:
            raise TransportError(phase, e) from e

        return parse_response(decode_payload(data, phase), phase)

    @staticmethod
    def _normalize(response: ModelResponse, tool_used: bool, request_count: int) -> NormalizedResult:
        return NormalizedResult(
            raw=response.raw,
            text=extract_text(response.content),
            tool_used=tool_used,
            request_count=request_count,
        )


async def run_conversation(
    thought: str,
    config: ConversationConfig,
    client: APIClient,
    executor: Optional[ToolExecutor] = None,
) -> NormalizedResult:
    """Run a conversation with a throwaway orchestrator."""
    return await ConversationOrchestrator().run(
        thought, config, client, executor or PlaceholderAnalysisExecutor()
    )
