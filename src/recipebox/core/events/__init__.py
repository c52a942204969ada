"""Application lifecycle events."""

from recipebox.core.events.lifespan import lifespan


__all__ = ["lifespan"]
