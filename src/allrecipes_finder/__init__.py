"""Browser-driving agent that finds recipes on AllRecipes.com."""

from .capabilities import ALLOWED_TOOLS, BROWSER_CAPABILITIES, CAPABILITY_NAMES
from .events import DoneEvent, NormalizedEvent, ResultEvent, TextEvent, ToolEvent, UsageEvent, normalize_messages
from .exceptions import AgentRunError, InstructionsError, RecipeFinderError
from .launch import build_launch_args, build_tool_server_config
from .runner import stream_agent
from .session import SessionConfig, build_session_config

__all__ = [
    "ALLOWED_TOOLS",
    "BROWSER_CAPABILITIES",
    "CAPABILITY_NAMES",
    "AgentRunError",
    "DoneEvent",
    "InstructionsError",
    "NormalizedEvent",
    "RecipeFinderError",
    "ResultEvent",
    "SessionConfig",
    "TextEvent",
    "ToolEvent",
    "UsageEvent",
    "build_launch_args",
    "build_session_config",
    "build_tool_server_config",
    "normalize_messages",
    "stream_agent",
]
