"""HWP export plugin for PyMarkdownEditor."""

__version__ = "1.0.0"
