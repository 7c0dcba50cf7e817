"""Drive one agent session and stream its normalized events."""

import uuid
from collections.abc import AsyncIterable, AsyncIterator, Callable
from typing import Any

from claude_agent_sdk import ClaudeAgentOptions
from claude_agent_sdk import query as sdk_query

from .events import DoneEvent, NormalizedEvent, ToolEvent, UsageEvent, normalize_messages
from .observability import bind_session_context, clear_session_context, get_session_logger
from .session import SessionConfig, build_session_config

QueryFn = Callable[..., AsyncIterable[Any]]


async def stream_agent(
    prompt: str,
    *,
    standalone: bool = True,
    config: SessionConfig | None = None,
    query: QueryFn | None = None,
) -> AsyncIterator[NormalizedEvent]:
    """Run the agent on ``prompt`` and yield normalized events.

    Args:
        prompt: User request, e.g. "find a banana bread recipe"
        standalone: Launch a tool process owned by this session. Ignored when
            ``config`` is given.
        config: Prebuilt session configuration
        query: Agent runtime entry point (defaults to ``claude_agent_sdk.query``)

    Yields:
        Normalized events, ending with ``DoneEvent`` when the session
        completes. Runtime failures propagate unchanged.
    """
    if config is None:
        config = build_session_config(standalone)
    query = query or sdk_query
    options: ClaudeAgentOptions = config.to_agent_options()

    session_id = uuid.uuid4().hex[:12]
    bind_session_context(session_id)
    log = get_session_logger(__name__)
    log.info("session_started", model=config.model, standalone=config.standalone, max_turns=config.max_turns)

    tool_calls = 0
    try:
        async for event in normalize_messages(query(prompt=prompt, options=options)):
            if isinstance(event, ToolEvent):
                tool_calls += 1
                log.debug("tool_invoked", tool=event.name)
            elif isinstance(event, UsageEvent):
                log.debug("token_usage", input_tokens=event.input_tokens, output_tokens=event.output_tokens)
            elif isinstance(event, DoneEvent):
                log.info("session_completed", tool_calls=tool_calls)
            yield event
    except Exception:
        log.exception("session_failed", tool_calls=tool_calls)
        raise
    finally:
        clear_session_context()
