"""Terminal helpers, rust-analyzer project generation and worked drills for an exercise course."""

__version__ = "5.2.1"

__all__ = ["__version__"]