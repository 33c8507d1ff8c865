"""
Temperature-scaled sampling from a next-character distribution.
"""

import logging
from typing import Optional, Sequence, Union

import torch

from ..config.schemas import MIN_TEMPERATURE

logger = logging.getLogger(__name__)


def sample(
    probs: Union[torch.Tensor, Sequence[float]],
    temperature: float,
    generator: Optional[torch.Generator] = None,
) -> int:
    """
    Draw a sample based on probabilities.

    The probabilities are moved to the log domain and divided by the
    temperature; the result is treated as unnormalized log-probabilities
    of a categorical distribution. Zero entries become -inf logits and
    are never drawn.

    Args:
        probs: Predicted probability scores of shape [char_set_size].
        temperature: Sampling temperature. Values <= 0 are clamped to 1e-6.
        generator: Optional random source for reproducible draws.

    Returns:
        The 0-based index of the drawn sample, in [0, char_set_size - 1].
    """
    with torch.no_grad():
        probs_tensor = torch.as_tensor(probs).detach().to(device="cpu", dtype=torch.float64)
        logits = torch.log(probs_tensor) / max(temperature, MIN_TEMPERATURE)
        # softmax subtracts the max logit, so small temperatures stay finite
        weights = torch.softmax(logits, dim=-1)
        winner = torch.multinomial(weights, 1, generator=generator)
        return int(winner.item())
