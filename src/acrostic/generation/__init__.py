"""
Generation subsystem: temperature sampling and initial-letter text generation.
"""

from .sampling import sample
from .generator import generate_text, generate_text_sync, encode_window, make_echo_callback
from .seeding import resolve_seed

__all__ = [
    "sample",
    "resolve_seed",
    "generate_text",
    "generate_text_sync",
    "encode_window",
    "make_echo_callback",
]
