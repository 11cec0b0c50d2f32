"""
Payload builders and a scripted APIClient shared by the test modules.
"""
import asyncio
import json
from typing import Any, Optional, Union

from think_tool.llm.base import APIClient, ClientConfig


def text_block(text: str) -> dict:
    return {"type": "text", "text": text}


def tool_use_block(block_id: str, name: str = "think", thought: str = "x") -> dict:
    return {"type": "tool_use", "id": block_id, "name": name, "input": {"thought": thought}}


def response_payload(stop_reason: str, *content: dict, **extra: Any) -> dict:
    """Build a Messages API response body."""
    payload = {
        "id": "msg_test",
        "type": "message",
        "role": "assistant",
        "content": list(content),
        "stop_reason": stop_reason,
        "model": "test-model",
    }
    payload.update(extra)
    return payload


class FakeAPIClient(APIClient):
    """
    Replays scripted answers and records every request body.

    Each scripted item is either a payload dict (JSON-encoded on send),
    raw bytes, or an exception instance to raise.
    """

    def __init__(self, *answers: Union[dict, bytes, BaseException]) -> None:
        super().__init__()
        self._answers = list(answers)
        self.requests: list[dict] = []
        self.timeouts: list[Optional[float]] = []

    def _default_config(self) -> ClientConfig:
        return ClientConfig(name="Fake", base_url="fake://messages")

    async def send_request(self, payload: dict, timeout: Optional[float] = None) -> bytes:
        self.requests.append(json.loads(json.dumps(payload)))
        self.timeouts.append(timeout)
        if not self._answers:
            raise AssertionError("unexpected request")
        answer = self._answers.pop(0)
        if isinstance(answer, BaseException):
            raise answer
        if isinstance(answer, bytes):
            return answer
        return json.dumps(answer).encode("utf-8")


class YieldingAPIClient(FakeAPIClient):
    """FakeAPIClient that hands control back to the event loop before answering."""

    def __init__(self, *answers: Union[dict, bytes, BaseException], log: Optional[list] = None) -> None:
        super().__init__(*answers)
        self.log = log if log is not None else []

    async def send_request(self, payload: dict, timeout: Optional[float] = None) -> bytes:
        self.log.append(("start", id(self)))
        await asyncio.sleep(0)
        self.log.append(("end", id(self)))
        return await super().send_request(payload, timeout)
