"""Terminal text-art editor with drawing tools, undo/redo and clip animation."""

__version__ = "0.1.0"