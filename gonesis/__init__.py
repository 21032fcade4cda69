"""gonesis -- create a Go project structure ready to be pushed on GitHub."""

__version__ = "0.1.0"
