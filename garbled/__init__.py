"""Boolean circuits, fixed-width unsigned integers evaluated through them, and message framing."""

__version__ = "0.1.0"
__all__ = ["bitwise", "builder", "circuit", "framing", "uint"]