"""Tests for the browser capability allow-list."""

from allrecipes_finder.capabilities import (
    ALLOWED_TOOLS,
    BROWSER_CAPABILITIES,
    CAPABILITY_NAMES,
    TOOL_SERVER_NAME,
    qualified_tool_name,
    render_capability_list,
)


class TestAllowList:
    """The fixed set of capabilities the agent may invoke."""

    def test_thirteen_unique_capabilities(self):
        assert len(CAPABILITY_NAMES) == 13
        assert len(set(CAPABILITY_NAMES)) == 13

    def test_order(self):
        assert CAPABILITY_NAMES == (
            "click",
            "fill",
            "fill_form",
            "hover",
            "press_key",
            "navigate_page",
            "new_page",
            "list_pages",
            "select_page",
            "close_page",
            "wait_for",
            "take_screenshot",
            "take_snapshot",
        )

    def test_allowed_tools_are_namespaced(self):
        assert ALLOWED_TOOLS[0] == "mcp__chrome-devtools__click"
        assert all(tool.startswith(f"mcp__{TOOL_SERVER_NAME}__") for tool in ALLOWED_TOOLS)
        assert [tool.rsplit("__", 1)[1] for tool in ALLOWED_TOOLS] == list(CAPABILITY_NAMES)

    def test_allowed_tools_unique(self):
        assert len(ALLOWED_TOOLS) == len(set(ALLOWED_TOOLS)) == 13

    def test_qualified_tool_name_custom_server(self):
        assert qualified_tool_name("click", server="other") == "mcp__other__click"

    def test_every_capability_described(self):
        assert all(c.description for c in BROWSER_CAPABILITIES)


class TestRenderCapabilityList:
    """Markdown rendering used in the instruction text."""

    def test_one_bullet_per_capability_in_order(self):
        lines = render_capability_list().splitlines()
        assert len(lines) == 13
        for line, capability in zip(lines, BROWSER_CAPABILITIES):
            assert line == f"- **{capability.name}**: {capability.description}"
