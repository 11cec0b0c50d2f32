"""
Response parser for Messages API payloads.

Decodes raw content lists into typed content blocks and extracts the parts
the conversation needs: the concatenated text and the first tool invocation.
Block decoders are looked up by the ``type`` discriminator; blocks of any
other type decode to UnknownBlock.
"""

import json
import logging
from typing import Any, Callable, Optional

from ..errors import ErrorPhase, ProtocolError
from ..messages import (
    ContentBlock,
    ModelResponse,
    TextBlock,
    ToolResultBlock,
    ToolUseBlock,
    UnknownBlock,
)


logger = logging.getLogger(__name__)


def _str_field(item: dict[str, Any], key: str) -> str:
    value = item.get(key)
    return value if isinstance(value, str) else ""


def _decode_text(item: dict[str, Any]) -> ContentBlock:
    text = item.get("text")
    if not isinstance(text, str):
        return UnknownBlock(block_type=TextBlock.type, raw=dict(item))
    return TextBlock(text=text)


def _decode_tool_use(item: dict[str, Any]) -> ContentBlock:
    return ToolUseBlock(
        id=_str_field(item, "id"),
        name=_str_field(item, "name"),
        input=item.get("input"),
    )


def _decode_tool_result(item: dict[str, Any]) -> ContentBlock:
    content = item.get("content")
    if not isinstance(content, str):
        content = json.dumps(content) if content is not None else ""
    return ToolResultBlock(tool_use_id=_str_field(item, "tool_use_id"), content=content)


BLOCK_DECODERS: dict[str, Callable[[dict[str, Any]], ContentBlock]] = {
    TextBlock.type: _decode_text,
    ToolUseBlock.type: _decode_tool_use,
    ToolResultBlock.type: _decode_tool_result,
}


def parse_block(item: dict[str, Any]) -> ContentBlock:
    """Decode one raw content block by its discriminator."""
    block_type = item.get("type")
    decoder = BLOCK_DECODERS.get(block_type) if isinstance(block_type, str) else None
    if decoder is None:
        return UnknownBlock(block_type=str(block_type or ""), raw=dict(item))
    return decoder(item)


def parse_content(items: list) -> list[ContentBlock]:
    """Decode a raw content list, preserving order.

    Items that are not JSON objects are skipped.
    """
    blocks: list[ContentBlock] = []
    for index, item in enumerate(items):
        if not isinstance(item, dict):
            logger.debug(f"Skipping non-object content item at index {index}")
            continue
        blocks.append(parse_block(item))
    return blocks


def extract_text(content: list[ContentBlock]) -> str:
    """Concatenate the text of every TextBlock, each followed by a newline.

    Args:
        content: Decoded content blocks in document order.

    Returns:
        The joined text; empty when there are no text blocks.
    """
    return "".join(f"{block.text}\n" for block in content if isinstance(block, TextBlock))


def find_first_tool_use(content: list[ContentBlock]) -> Optional[ToolUseBlock]:
    """Return the first ToolUseBlock in document order, or None."""
    for block in content:
        if isinstance(block, ToolUseBlock):
            return block
    return None


def decode_payload(data: bytes, phase: Optional[ErrorPhase] = None) -> dict[str, Any]:
    """Decode raw response bytes into a JSON object.

    Raises:
        ProtocolError: If the bytes are not a JSON object.
    """
    try:
        payload = json.loads(data)
    except (TypeError, ValueError) as e:
        raise ProtocolError(f"failed to parse response: {e}", phase) from e
    if not isinstance(payload, dict):
        raise ProtocolError("response is not a JSON object", phase)
    return payload


def parse_response(payload: dict[str, Any], phase: Optional[ErrorPhase] = None) -> ModelResponse:
    """Build a ModelResponse from a decoded payload.

    Raises:
        ProtocolError: If ``content`` is not a list or ``stop_reason`` is
            missing.
    """
    content = payload.get("content")
    if not isinstance(content, list):
        raise ProtocolError("content field missing or invalid", phase)

    stop_reason = payload.get("stop_reason")
    if not isinstance(stop_reason, str):
        raise ProtocolError("stop_reason field missing or invalid", phase)

    usage = payload.get("usage")
    return ModelResponse(
        id=_str_field(payload, "id"),
        role=_str_field(payload, "role") or "assistant",
        content=parse_content(content),
        stop_reason=stop_reason,
        raw=payload,
        model=payload.get("model"),
        type=payload.get("type"),
        usage=usage if isinstance(usage, dict) else {},
    )
