"""Session configuration for the AllRecipes finder agent."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

from claude_agent_sdk import ClaudeAgentOptions

from .capabilities import ALLOWED_TOOLS, TOOL_SERVER_NAME
from .launch import build_tool_server_config
from .prompts import SYSTEM_PROMPT

MODEL = "haiku"
MAX_TURNS = 50


def _freeze_server(server: Mapping[str, Any]) -> Mapping[str, Any]:
    return MappingProxyType({**server, "args": tuple(server.get("args", ()))})


@dataclass(frozen=True)
class SessionConfig:
    """Everything the agent runtime needs to start one session.

    ``tool_servers`` is set only for standalone sessions, which launch their
    own browser tool process. Other sessions share a tool process supplied
    elsewhere. Containers are copied into read-only views on construction.
    """

    env: Mapping[str, str]
    instructions: str
    model: str
    allowed_tools: tuple[str, ...]
    max_turns: int
    tool_servers: Mapping[str, Mapping[str, Any]] | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "env", MappingProxyType(dict(self.env)))
        object.__setattr__(self, "allowed_tools", tuple(self.allowed_tools))
        if self.tool_servers is not None:
            servers = {name: _freeze_server(server) for name, server in self.tool_servers.items()}
            object.__setattr__(self, "tool_servers", MappingProxyType(servers))

    @property
    def standalone(self) -> bool:
        return self.tool_servers is not None

    def to_agent_options(self) -> ClaudeAgentOptions:
        """Map this configuration onto the agent SDK's options.

        The SDK layers ``env`` over the parent process environment when it
        spawns the CLI, so these values add to or override what the runtime
        inherits; they cannot hide inherited variables.
        """
        kwargs: dict[str, Any] = {
            "env": dict(self.env),
            "system_prompt": self.instructions,
            "model": self.model,
            "allowed_tools": list(self.allowed_tools),
            "max_turns": self.max_turns,
        }
        if self.tool_servers is not None:
            kwargs["mcp_servers"] = {name: {**server, "args": list(server["args"])} for name, server in self.tool_servers.items()}
        return ClaudeAgentOptions(**kwargs)


def snapshot_environment(environ: Mapping[str, str] | None = None) -> dict[str, str]:
    """Copy the environment forwarded to the agent runtime (defaults to ``os.environ``)."""
    if environ is None:
        environ = os.environ
    return dict(environ)


def build_session_config(
    standalone: bool = False,
    *,
    environ: Mapping[str, str] | None = None,
    instructions: str | None = None,
) -> SessionConfig:
    """Build the session configuration.

    Args:
        standalone: Attach a chrome-devtools tool process owned by this session.
            When False no tool server is configured and the caller provides one.
        environ: Environment to snapshot and to read CHROME_PATH from
            (defaults to ``os.environ``)
        instructions: Replacement for the built-in agent instructions

    Returns:
        Immutable SessionConfig
    """
    tool_servers = None
    if standalone:
        tool_servers = {TOOL_SERVER_NAME: build_tool_server_config(environ)}

    return SessionConfig(
        env=snapshot_environment(environ),
        instructions=SYSTEM_PROMPT if instructions is None else instructions,
        model=MODEL,
        allowed_tools=ALLOWED_TOOLS,
        max_turns=MAX_TURNS,
        tool_servers=tool_servers,
    )
