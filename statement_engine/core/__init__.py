"""Core utilities shared across the engine."""

from .config import GenerationTuning, Settings, get_settings  # noqa: F401
from .log import get_logger  # noqa: F401

__all__ = ["GenerationTuning", "Settings", "get_settings", "get_logger"]
