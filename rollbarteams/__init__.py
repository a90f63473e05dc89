"""Client for managing Rollbar teams, their members and their project access."""

__version__ = "0.1.0"
__all__ = ["team"]