"""
Structured error codes and exceptions for placement and run failures.
Use the keys in reports and map them to user-facing messages in the CLI/UI.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from tipplace.core.types import Size

# Known error keys
VIEWPORT_TOO_SMALL = "viewport_too_small"
SCENARIO_INVALID = "scenario_invalid"
RUN_FAILED = "run_failed"

# User-facing messages (short, actionable)
USER_MESSAGES: dict[str, str] = {
    VIEWPORT_TOO_SMALL: "Viewport is too small to show the tooltip near its trigger. Try a smaller margin or shorter content.",
    SCENARIO_INVALID: "Scenario could not be read. Check the trigger, content and viewport values.",
    RUN_FAILED: "Run failed. Check scenario and inputs.",
}


def user_message(error_key: str | None, fallback: str = "Something went wrong.") -> str:
    """Return a user-facing message for the given error key."""
    if not error_key:
        return fallback
    return USER_MESSAGES.get(error_key, fallback)


class TooltipError(Exception):
    """Base class for errors raised by tipplace."""
    error_key: str = RUN_FAILED


class ViewportTooSmall(TooltipError):
    """No candidate placement (even after correction) fits inside the viewport."""
    error_key = VIEWPORT_TOO_SMALL

    def __init__(self, viewport_size: Size, content_size: Size) -> None:
        self.viewport_size = viewport_size
        self.content_size = content_size
        super().__init__(
            f"Viewport size {viewport_size} is too small to contain the content {content_size}."
        )


class ScenarioError(TooltipError, ValueError):
    """Malformed scenario file or CLI value."""
    error_key = SCENARIO_INVALID
