"""Content database loading."""

from engine.resources.database import Database

__all__ = ["Database"]
