"""Domain-level error types for the layout engine.

Malformed but structurally valid input (empty layer sets, inverted date
ranges, activities outside the window) never raises; only caller bugs do.
"""

from __future__ import annotations


class LayoutPreconditionError(ValueError):
    """Raised when the engine is called with arguments no caller should pass.

    Examples are a non-positive sub-lane count, negative radii, or an outer
    radius smaller than the inner radius.
    """


def require(condition: bool, message: str) -> None:
    """Raise ``LayoutPreconditionError`` with ``message`` unless ``condition`` holds."""
    if not condition:
        raise LayoutPreconditionError(message)


__all__ = ["LayoutPreconditionError", "require"]
