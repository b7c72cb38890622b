"""
Human-readable rendering of calls, interactions and verification failures.

Example failure message:

    Wanted 2 invocations but got 1: obj.farewell(<equal to 'x'>, <anything>)

    Interactions are:
      obj.farewell('x', 'y', 67)
      obj.greeting() (verified)
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, List, Sequence

from stubwright.config.settings import get_config
from stubwright.matchers import MatcherSet

if TYPE_CHECKING:
    from stubwright.core.interaction import Interaction
    from stubwright.exceptions import VerificationError


def describe_matchers(matchers: MatcherSet) -> str:
    """Describe the argument matchers, e.g. ``<equal to 42>, key=<anything>``."""
    parts = [f"<{m.describe()}>" for m in matchers.arg_matchers]
    parts.extend(f"{name}=<{m.describe()}>" for name, m in matchers.kwarg_matchers.items())
    return ", ".join(parts)


def describe_call(function_label: str, matchers: MatcherSet) -> str:
    """Describe an expected call, e.g. ``obj.greeting(<equal to 'hi'>)``."""
    return f"{function_label}({describe_matchers(matchers)})"


def describe_arguments(args: Sequence[Any], kwargs: Dict[str, Any]) -> str:
    parts = [repr(a) for a in args]
    parts.extend(f"{name}={value!r}" for name, value in kwargs.items())
    return ", ".join(parts)


def describe_interaction(interaction: Interaction) -> str:
    """Describe a recorded call, e.g. ``obj.farewell('x', 'y', 67)``."""
    call = f"{interaction.function_label}({describe_arguments(interaction.args, interaction.kwargs)})"
    if interaction.verified:
        call += " (verified)"
    return call


def describe_interactions(interactions: Sequence[Interaction], limit: int | None = None) -> List[str]:
    """One line per interaction, truncated to *limit* lines plus a summary."""
    shown = list(interactions) if limit is None else list(interactions)[:limit]
    lines = [f"  {describe_interaction(i)}" for i in shown]
    hidden = len(interactions) - len(shown)
    if hidden > 0:
        lines.append(f"  ... and {hidden} more")
    return lines


def render_failure(error: VerificationError) -> str:
    """Render the full message of a verification failure."""
    config = get_config()
    message = error.headline
    if error.describe_context:
        message += f", 'self' being {error.matchers.context_matcher.describe()}"

    if not config.show_interactions:
        return message
    if error.interactions:
        lines = describe_interactions(error.interactions, config.max_interactions)
        message += "\n\nInteractions are:\n" + "\n".join(lines)
    elif error.hint:
        message += "\n\n" + error.hint
    return message
