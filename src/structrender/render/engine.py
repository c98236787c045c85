"""Cycle-safe structural renderer.

Walks nested containers depth first and assembles text through FormatHooks.

Cycle protection:
    Each container on the current root-to-node path is registered in a
    visited map (id -> placeholder text). A key or value already on the path
    renders as its placeholder instead of recursing. The map is copied for
    every child, so two siblings that share a sub-container both render it
    in full; only a true ancestor reference is treated as a cycle.

Thread-safe: no instance state changes during render(); visited maps and
depth guards are created per call.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import Any

from structrender.core import DepthGuard
from structrender.sequence import lookup, pairs

from .config import RenderConfig
from .hooks import MISSING, FormatHooks

__all__ = ["Renderer", "render"]

logger = logging.getLogger(__name__)

# id(container) -> placeholder text, for containers on the current path.
Visited = dict[int, str]


class Renderer:
    """Render values to text with a fixed set of hooks.

    Usage:
        >>> renderer = Renderer()
        >>> renderer.render({"a": 1})
        '{a=1}'

    Attributes:
        hooks: FormatHooks instance shaping the output
        config: RenderConfig controlling traversal limits
    """

    __slots__ = ("config", "hooks")

    def __init__(
        self,
        hooks: FormatHooks | None = None,
        config: RenderConfig | None = None,
    ) -> None:
        self.hooks = hooks if hooks is not None else FormatHooks()
        self.config = config if config is not None else RenderConfig()

    def render(self, x: Any) -> str:
        """Render x to text.

        Args:
            x: Any value; containers are traversed, everything else is
               passed to hooks.elem()

        Returns:
            Rendered text

        Raises:
            DepthLimitExceededError: If config.max_depth is set and exceeded
            UnpicklableValueError: Raised through hooks that reject a value
        """
        guard = None
        if self.config.max_depth is not None:
            guard = DepthGuard(max_depth=self.config.max_depth)
        return self._render(x, {}, guard)

    def _render(self, x: Any, visited: Visited, guard: DepthGuard | None) -> str:
        if self.hooks.term(x):
            return self.hooks.elem(x)
        if guard is None:
            return self._render_container(x, visited, guard)
        with guard:
            return self._render_container(x, visited, guard)

    def _render_container(self, x: Any, visited: Visited, guard: DepthGuard | None) -> str:
        hooks = self.hooks
        buf = [hooks.open(x)]
        visited[id(x)] = hooks.elem(x)

        keys = hooks.sort([key for key, _ in pairs(x)])

        prev_key: Any = MISSING
        prev_value: Any = MISSING
        for key in keys:
            value = lookup(x, key)
            buf.append(hooks.sep(x, prev_key, prev_value, key, value))
            key_text = self._render_child(key, visited, guard)
            value_text = self._render_child(value, visited, guard)
            buf.append(hooks.pair(x, prev_key, prev_value, key, value, key_text, value_text))
            prev_key, prev_value = key, value

        buf.append(hooks.sep(x, prev_key, prev_value, MISSING, MISSING))
        buf.append(hooks.close(x))
        return "".join(buf)

    def _render_child(self, x: Any, visited: Visited, guard: DepthGuard | None) -> str:
        placeholder = visited.get(id(x))
        if placeholder is not None:
            logger.debug("Cycle through %s; substituting placeholder", type(x).__name__)
            return placeholder
        return self._render(x, dict(visited), guard)


def render(
    x: Any,
    hooks: FormatHooks | None = None,
    *,
    config: RenderConfig | None = None,
) -> str:
    """Render x with the given hooks (default: FormatHooks()).

    Example:
        >>> render({1: "a", "b": {2: True}})
        '{1=a,b={2=True}}'
    """
    return Renderer(hooks, config).render(x)
