"""Custom exceptions for the AllRecipes finder agent."""


class RecipeFinderError(Exception):
    """Base exception for AllRecipes finder errors."""

    pass


class InstructionsError(RecipeFinderError):
    """Raised when a custom instructions file cannot be loaded."""

    pass


class AgentRunError(RecipeFinderError):
    """Raised when the agent stream ends with a failure instead of completing."""

    pass
