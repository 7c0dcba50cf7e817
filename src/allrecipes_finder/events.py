"""Normalized events re-exposed from the agent's raw message stream.

The agent runtime emits nested, runtime-specific messages. Consumers only see
five event kinds:

- ``text``: a non-empty text block from the assistant
- ``tool``: the assistant invoked a tool (input payload is not surfaced)
- ``usage``: token counts reported with a message
- ``result``: the final answer of the session
- ``done``: the raw stream finished normally; always last, exactly once

Raw messages may be SDK message objects or the equivalent stream-json dicts.
A message missing the fields an event needs simply produces no event.
"""

from collections.abc import AsyncIterable, AsyncIterator, Mapping
from typing import Annotated, Any, Literal, Union

from claude_agent_sdk import AssistantMessage, TextBlock, ToolUseBlock
from pydantic import BaseModel, ConfigDict, Field


class _Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    def to_dict(self) -> dict[str, Any]:
        """Wire representation handed to front-ends."""
        return self.model_dump()


class TextEvent(_Event):
    type: Literal["text"] = "text"
    text: str


class ToolEvent(_Event):
    type: Literal["tool"] = "tool"
    name: str


class UsageEvent(_Event):
    type: Literal["usage"] = "usage"
    input_tokens: int = 0
    output_tokens: int = 0

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.type, "input": self.input_tokens, "output": self.output_tokens}


class ResultEvent(_Event):
    type: Literal["result"] = "result"
    text: str


class DoneEvent(_Event):
    type: Literal["done"] = "done"


NormalizedEvent = Annotated[
    Union[TextEvent, ToolEvent, UsageEvent, ResultEvent, DoneEvent],
    Field(discriminator="type"),
]


def _field(obj: Any, name: str) -> Any:
    """Read a field from either a mapping or an object, None when absent."""
    if obj is None:
        return None
    if isinstance(obj, Mapping):
        return obj.get(name)
    return getattr(obj, name, None)


def _message_type(message: Any) -> str | None:
    if isinstance(message, AssistantMessage):
        return "assistant"
    kind = _field(message, "type")
    return kind if isinstance(kind, str) else None


def _block_type(block: Any) -> str | None:
    if isinstance(block, TextBlock):
        return "text"
    if isinstance(block, ToolUseBlock):
        return "tool_use"
    kind = _field(block, "type")
    return kind if isinstance(kind, str) else None


def _content_blocks(message: Any) -> list[Any]:
    """Content blocks of an assistant message, or an empty list."""
    if _message_type(message) != "assistant":
        return []
    inner = _field(message, "message")
    content = _field(inner, "content") if inner is not None else _field(message, "content")
    if isinstance(content, (list, tuple)):
        return list(content)
    return []


def _usage(message: Any) -> Any:
    """Per-turn usage: nested under "message" in stream-json, direct on SDK assistant messages.

    Result messages carry the session total, which would double count.
    """
    inner = _field(message, "message")
    if inner is not None:
        return _field(inner, "usage")
    if _message_type(message) == "assistant":
        return _field(message, "usage")
    return None


def _token_count(usage: Any, name: str) -> int:
    value = _field(usage, name)
    try:
        return int(value or 0)
    except (TypeError, ValueError):
        return 0


def events_for_message(message: Any) -> list[NormalizedEvent]:
    """Translate one raw message into its normalized events.

    Text events come before tool events within a message, whatever the
    interleaving of the blocks, because blocks are scanned once per kind.
    Usage precedes the result.
    """
    events: list[NormalizedEvent] = []
    blocks = _content_blocks(message)

    for block in blocks:
        if _block_type(block) == "text":
            text = _field(block, "text")
            if isinstance(text, str) and text:
                events.append(TextEvent(text=text))

    for block in blocks:
        if _block_type(block) == "tool_use":
            name = _field(block, "name")
            if isinstance(name, str):
                events.append(ToolEvent(name=name))

    usage = _usage(message)
    if usage is not None:
        events.append(
            UsageEvent(
                input_tokens=_token_count(usage, "input_tokens"),
                output_tokens=_token_count(usage, "output_tokens"),
            )
        )

    result = _field(message, "result")
    if isinstance(result, str) and result:
        events.append(ResultEvent(text=result))

    return events


async def normalize_messages(messages: AsyncIterable[Any]) -> AsyncIterator[NormalizedEvent]:
    """Stream normalized events for a raw agent message sequence.

    Pulls one raw message at a time and yields its events before pulling the
    next. ``DoneEvent`` is yielded once the source is exhausted. If the source
    raises, the error propagates and no ``DoneEvent`` is produced; the same
    holds when the consumer stops iterating early.
    """
    async for message in messages:
        for event in events_for_message(message):
            yield event
    yield DoneEvent()
