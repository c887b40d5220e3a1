"""Canvas render command queues, style options and a flexbox-like box layout engine."""

__version__ = "0.1.0"
__all__ = ["layout", "render_queue", "style"]