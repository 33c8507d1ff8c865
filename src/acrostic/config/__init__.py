"""
Configuration schemas for acrostic.
"""

from .schemas import (
    NextCharModelConfig,
    CharLSTMConfig,
    GenerationConfig,
    AppConfig,
    MIN_TEMPERATURE,
)

__all__ = [
    "NextCharModelConfig",
    "CharLSTMConfig",
    "GenerationConfig",
    "AppConfig",
    "MIN_TEMPERATURE",
]
