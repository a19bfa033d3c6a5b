"""UI layer: render context wiring and the element catalogue."""

from .context import create_render_context

__all__ = ["create_render_context"]
