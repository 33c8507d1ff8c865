"""
Random sources and device selection.
"""
import logging
import random
from typing import Optional

import numpy as np
import torch

logger = logging.getLogger(__name__)


def set_seed(seed: int) -> None:
    """Seed Python, numpy and torch global random state."""
    random.seed(seed)
    np.random.seed(seed)
    torch.manual_seed(seed)
    if torch.cuda.is_available():
        torch.cuda.manual_seed_all(seed)
    logger.info(f"Global random seed set to {seed}")


def make_generator(seed: Optional[int] = None) -> torch.Generator:
    """
    Create the CPU random source used for seed slices and sampling draws.

    Args:
        seed: Seed for the generator. A non-deterministic seed is used if None.
    """
    generator = torch.Generator()
    if seed is None:
        generator.seed()
    else:
        generator.manual_seed(seed)
    return generator


def setup_device(device_name: str = "auto") -> torch.device:
    """
    Resolve a device name ('auto', 'cpu', 'cuda', 'cuda:1', ...) to a torch.device.

    'auto' picks CUDA when available and falls back to the CPU.
    """
    if device_name == "auto":
        device_name = "cuda" if torch.cuda.is_available() else "cpu"
    device = torch.device(device_name)

    if device.type == "cuda":
        logger.info(f"Generating on GPU: {torch.cuda.get_device_name(device)}")
    else:
        logger.info("Generating on CPU")
    return device
