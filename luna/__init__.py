"""Terminal markup, prompt rendering, configuration and command-line helpers for a shell."""

__version__ = "0.1.0"