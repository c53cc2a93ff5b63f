"""cmd-advisor - suggest packages for commands that were not found."""

__version__ = "0.1.0"

# Public API - lazy imports so the CLI loads only what it uses
def __getattr__(name: str):
    """Lazy import of the public advisor API."""
    if name == "Advisor":
        from cmd_advisor.advisor.engine import Advisor
        return Advisor
    elif name == "Suggestion":
        from cmd_advisor.advisor.finder import Suggestion
        return Suggestion
    elif name == "Finder":
        from cmd_advisor.advisor.finder import Finder
        return Finder
    elif name == "similar_words":
        from cmd_advisor.advisor.candidates import similar_words
        return similar_words
    raise AttributeError(f"module '{__name__}' has no attribute '{name}'")


__all__ = [
    "Advisor",
    "Suggestion",
    "Finder",
    "similar_words",
]
