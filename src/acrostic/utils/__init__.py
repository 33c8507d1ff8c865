from .common import set_seed, setup_device, make_generator
from .logging import setup_logging

__all__ = [
    "set_seed",
    "setup_device",
    "make_generator",
    "setup_logging",
]
