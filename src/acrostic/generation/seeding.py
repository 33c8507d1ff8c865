"""
Seed window selection for initial-letter generation.
"""

import logging
from typing import List, Optional, Tuple

import torch

from ..data.text_data import TextData

logger = logging.getLogger(__name__)


def resolve_seed(
    text_data: TextData,
    seed_text: Optional[str] = None,
    generator: Optional[torch.Generator] = None,
) -> Tuple[str, List[int]]:
    """
    Pick the seed window for generation.

    A user seed must be at least sample_len characters long; its last
    sample_len characters are used. Without one, a random slice of the
    corpus is drawn.

    Returns:
        The seed text and its char-set indices.
    """
    sample_len = text_data.sample_len
    if seed_text is None:
        seed_text, seed_indices = text_data.get_random_slice(generator=generator)
        logger.info(f"Using random corpus slice as seed: {seed_text!r}")
        return seed_text, seed_indices

    if len(seed_text) < sample_len:
        raise ValueError(
            f"Seed text must have a length of at least {sample_len}, but has a length of {len(seed_text)}."
        )
    seed_text = seed_text[len(seed_text) - sample_len:]
    logger.info(f"Using seed text: {seed_text!r}")
    return seed_text, text_data.text_to_indices(seed_text)
