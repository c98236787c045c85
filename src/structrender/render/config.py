"""Render configuration.

Provides a single frozen dataclass passed to Renderer at construction, in
place of process-wide debug flags.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

__all__ = ["RenderConfig"]


@dataclass(frozen=True, slots=True)
class RenderConfig:
    """Immutable configuration for a Renderer.

    Constructing ``RenderConfig()`` with no arguments reproduces the
    unconfigured behaviour: traversal depth is bounded only by the input.

    Attributes:
        max_depth: Maximum container nesting depth (default: None, no
            limit). When set, a DepthGuard is installed per render call and
            DepthLimitExceededError is raised past the limit. Values above
            what the interpreter stack allows are clamped with a warning.

    Example:
        >>> from structrender import Renderer, StringifyHooks
        >>> renderer = Renderer(StringifyHooks(), RenderConfig(max_depth=10))
        >>> renderer.render({1: {1: "x"}})
        '{{x}}'
    """

    max_depth: int | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If max_depth is set and not positive
        """
        if self.max_depth is not None and self.max_depth <= 0:
            msg = "max_depth must be positive"
            raise ValueError(msg)
