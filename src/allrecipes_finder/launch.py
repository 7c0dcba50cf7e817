"""Launch configuration for the chrome-devtools MCP tool process."""

import os
from collections.abc import Mapping
from typing import Literal, TypedDict

TOOL_SERVER_COMMAND = "npx"

BASE_ARGS: tuple[str, ...] = (
    "-y",
    "chrome-devtools-mcp@latest",
    "--headless",
    "--isolated",
    "--no-category-emulation",
    "--no-category-performance",
    "--no-category-network",
)

# Chromium path inside the container image
CONTAINER_CHROME_PATH = "/usr/bin/chromium"

CONTAINER_ARGS: tuple[str, ...] = (
    f"--executable-path={CONTAINER_CHROME_PATH}",
    "--chrome-arg=--no-sandbox",
    "--chrome-arg=--disable-setuid-sandbox",
    "--chrome-arg=--disable-dev-shm-usage",
    "--chrome-arg=--disable-gpu",
)


class ToolServerConfig(TypedDict):
    """Stdio MCP server entry, in the shape the agent SDK accepts."""

    type: Literal["stdio"]
    command: str
    args: list[str]


def is_container_environment(environ: Mapping[str, str] | None = None) -> bool:
    """Check whether CHROME_PATH points at the container's Chromium."""
    if environ is None:
        environ = os.environ
    return environ.get("CHROME_PATH") == CONTAINER_CHROME_PATH


def build_launch_args(environ: Mapping[str, str] | None = None) -> tuple[str, ...]:
    """Build the argument list used to start the browser tool process.

    Containers need an explicit executable path and Chrome's sandboxing turned
    off; a developer machine lets chrome-devtools-mcp find Chrome by itself.

    Args:
        environ: Environment to inspect (defaults to ``os.environ``). Only
            ``CHROME_PATH`` is consulted.

    Returns:
        Base arguments, followed by the container arguments when running in
        the container.
    """
    if is_container_environment(environ):
        return BASE_ARGS + CONTAINER_ARGS
    return BASE_ARGS


def build_tool_server_config(environ: Mapping[str, str] | None = None) -> ToolServerConfig:
    """Wrap the launch arguments in a stdio tool server entry."""
    return ToolServerConfig(
        type="stdio",
        command=TOOL_SERVER_COMMAND,
        args=list(build_launch_args(environ)),
    )
