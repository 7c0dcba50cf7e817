"""CLI for the AllRecipes finder agent."""

import asyncio
import json

import typer

from .capabilities import ALLOWED_TOOLS
from .config import settings
from .events import ResultEvent, TextEvent, ToolEvent, UsageEvent
from .exceptions import AgentRunError, InstructionsError
from .launch import build_launch_args, is_container_environment
from .observability import setup_structured_logging
from .session import MAX_TURNS, MODEL, build_session_config

app = typer.Typer(help="Find and read AllRecipes.com recipes with a browser-driving agent")


def _load_instructions() -> str:
    try:
        return settings.session.load_instructions()
    except InstructionsError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=2) from e


@app.command()
def run(
    prompt: str = typer.Argument(..., help="What to look for, e.g. 'easy banana bread'"),
    json_output: bool = typer.Option(False, "--json", help="Print one JSON event per line"),
    embedded: bool = typer.Option(
        False, "--embedded", help="Do not launch chrome-devtools-mcp; use a tool server provided by the runtime"
    ),
) -> None:
    """Run a recipe search session and stream its events."""
    from .runner import stream_agent

    setup_structured_logging(settings.log.level, settings.log.json_output)
    config = build_session_config(
        not embedded,
        instructions=_load_instructions(),
    )

    async def _run() -> None:
        async for event in stream_agent(prompt, config=config):
            if json_output:
                typer.echo(json.dumps(event.to_dict()))
            elif isinstance(event, TextEvent):
                typer.echo(event.text)
            elif isinstance(event, ToolEvent):
                typer.echo(f"[tool] {event.name}", err=True)
            elif isinstance(event, UsageEvent):
                typer.echo(f"[usage] in={event.input_tokens} out={event.output_tokens}", err=True)
            elif isinstance(event, ResultEvent):
                typer.echo("---")
                typer.echo(event.text)

    try:
        asyncio.run(_run())
    except Exception as e:
        raise AgentRunError(f"Agent session failed: {e}") from e


@app.command()
def config() -> None:
    """Show the session configuration."""
    print(f"Model: {MODEL}")
    print(f"Max Turns: {MAX_TURNS}")
    print(f"Container: {is_container_environment()}")
    print(f"Launch Args: {' '.join(build_launch_args())}")
    print(f"Instructions: {settings.session.instructions_file or '(built-in)'}")
    print("Allowed Tools:")
    for tool in ALLOWED_TOOLS:
        print(f"  {tool}")


@app.command()
def instructions() -> None:
    """Print the instructions given to the agent."""
    print(_load_instructions())


def main() -> None:
    app()


if __name__ == "__main__":
    main()
