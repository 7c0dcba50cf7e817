"""Browser capabilities the agent is allowed to invoke.

``BROWSER_CAPABILITIES`` is the only place the capability names are written
down. Both the permission list handed to the agent runtime and the tool list in
the instruction text are rendered from it.
"""

from dataclasses import dataclass

TOOL_SERVER_NAME = "chrome-devtools"


@dataclass(frozen=True)
class Capability:
    """A browser automation primitive exposed by the tool server."""

    name: str
    description: str


BROWSER_CAPABILITIES: tuple[Capability, ...] = (
    Capability("click", "Click elements on the page (search buttons, recipe links)"),
    Capability("fill", "Fill input fields (search boxes)"),
    Capability("fill_form", "Fill multiple form fields at once"),
    Capability("hover", "Hover over elements"),
    Capability("press_key", "Press keyboard keys (Enter to submit search)"),
    Capability("navigate_page", "Navigate to URLs (use for going to AllRecipes.com)"),
    Capability("new_page", "Open new browser tab"),
    Capability("list_pages", "List all open tabs"),
    Capability("select_page", "Switch between tabs"),
    Capability("close_page", "Close browser tabs"),
    Capability("wait_for", "Wait for elements to load"),
    Capability("take_screenshot", "Capture page screenshots for debugging"),
    Capability("take_snapshot", "Get page HTML/text content"),
)

CAPABILITY_NAMES: tuple[str, ...] = tuple(c.name for c in BROWSER_CAPABILITIES)


def qualified_tool_name(name: str, server: str = TOOL_SERVER_NAME) -> str:
    """Namespace a capability the way the agent runtime registers MCP tools."""
    return f"mcp__{server}__{name}"


ALLOWED_TOOLS: tuple[str, ...] = tuple(qualified_tool_name(name) for name in CAPABILITY_NAMES)


def render_capability_list() -> str:
    """Render the capabilities as markdown bullets for the instruction text."""
    return "\n".join(f"- **{c.name}**: {c.description}" for c in BROWSER_CAPABILITIES)
