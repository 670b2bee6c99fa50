"""Time-unit, frame-rate, vector/matrix formatting and identifier helpers."""

__version__ = "0.1.0"

__all__ = ["fps", "glm_string", "identifiers", "times"]