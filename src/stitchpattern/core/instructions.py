"""Stitching instructions from an external text service.

The text is treated as opaque content: it is passed through unchanged and
never parsed.
"""

from typing import Protocol

import structlog

from stitchpattern.domain import StitchPattern

DEFAULT_THREAD_COUNT = "14-count"
FALLBACK_INSTRUCTIONS = "Failed to generate instructions."

logger = structlog.get_logger(__name__)


class InstructionsProvider(Protocol):
    """Produces plain-text stitching instructions for a pattern."""

    def __call__(
        self,
        stitches_x: int,
        stitches_y: int,
        thread_count: str,
        color_name: str,
        color_code: str,
    ) -> str: ...


def request_instructions(
    provider: InstructionsProvider,
    pattern: StitchPattern,
    thread_count: str = DEFAULT_THREAD_COUNT,
) -> str:
    """Ask a provider for instructions, falling back to a fixed message.

    Args:
        provider: External text generator
        pattern: Pattern the instructions are for
        thread_count: Fabric count, e.g. "14-count"

    Returns:
        Provider text verbatim, or the fallback message if it failed
    """
    color = pattern.style.color
    try:
        return provider(
            pattern.width,
            pattern.height,
            thread_count,
            color.label,
            f"#{color.code}",
        )
    except Exception as e:
        logger.warning(
            "Instructions unavailable",
            error=str(e),
            error_type=type(e).__name__,
        )
        return FALLBACK_INSTRUCTIONS
