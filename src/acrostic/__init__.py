"""
acrostic: initial-letter text generation with next-character models

Drives a pre-trained next-character network to write one word per
initial letter, using temperature-scaled sampling and PyTorch.
"""

__version__ = "1.0.0"

from .generation import sample, generate_text, generate_text_sync, resolve_seed
from .data.text_data import TextData
from .models import NextCharModel, CharLSTM
from .config.schemas import AppConfig, GenerationConfig, CharLSTMConfig
from .utils.common import set_seed, setup_device

__all__ = [
    # Generation
    "sample",
    "generate_text",
    "generate_text_sync",
    "resolve_seed",

    # Collaborators
    "TextData",
    "NextCharModel",
    "CharLSTM",

    # Config
    "AppConfig",
    "GenerationConfig",
    "CharLSTMConfig",

    # Key Utilities
    "set_seed",
    "setup_device",

    "__version__",
]
