"""Widget toolkit for 15-bit colour framebuffers driven by stylus and buttons."""

__version__ = "0.5.2"