"""
Base model class for next-character prediction.

A next-character model consumes a one-hot window of shape
[batch, sample_len, char_set_size] and returns a probability
distribution over the char set of shape [batch, char_set_size].
"""
from abc import ABC, abstractmethod
import logging
from typing import Any, Dict, Optional, Tuple

import torch
import torch.nn as nn

from acrostic.config.schemas import NextCharModelConfig

logger = logging.getLogger(__name__)


class NextCharModel(nn.Module, ABC):
    """
    Abstract base class for next-character models.
    Inherits from nn.Module and ABC, and holds a validated config.
    """

    def __init__(self, config: NextCharModelConfig):
        super().__init__()

        if not isinstance(config, NextCharModelConfig):
            logger.error("Model received an invalid config object that is not a NextCharModelConfig subclass.")
            raise TypeError(f"Expected config to be a NextCharModelConfig instance, got {type(config)}")

        self.config = config
        self.architecture = self.config.architecture

    @property
    def input_shape(self) -> Tuple[Optional[int], int, int]:
        """Expected input shape, batch dimension first (None = any)."""
        return (None, self.config.sample_len, self.config.char_set_size)

    @abstractmethod
    def forward(self, x: torch.Tensor) -> torch.Tensor:
        """
        Args:
            x: One-hot windows of shape [batch, sample_len, char_set_size].

        Returns:
            Next-character probabilities of shape [batch, char_set_size].
        """
        pass

    def predict(self, x: torch.Tensor) -> torch.Tensor:
        """Run inference on a one-hot window batch."""
        self.eval()
        device = next(self.parameters()).device
        with torch.no_grad():
            return self(x.to(device))

    def _log_model_size(self) -> None:
        n_params = sum(p.numel() for p in self.parameters())
        logger.info(f"Model initialized with {n_params:,} parameters")

    def get_config(self) -> Dict[str, Any]:
        return self.config.model_dump(mode='json')
