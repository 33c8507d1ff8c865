import torch
from torch import nn
import torch.nn.functional as F

from .base import NextCharModel
from ..config.schemas import CharLSTMConfig


class CharLSTM(NextCharModel):
    """
    Stacked-LSTM next-character model.

    Each LSTM layer feeds its full output sequence to the next; the last
    time step of the final layer goes through a linear layer and softmax.
    """
    def __init__(self, config: CharLSTMConfig):
        super().__init__(config)
        self.config = config

        layers = []
        input_size = config.char_set_size
        for hidden_size in config.lstm_layer_sizes:
            layers.append(nn.LSTM(input_size=input_size, hidden_size=hidden_size, batch_first=True))
            input_size = hidden_size
        self.lstm_layers = nn.ModuleList(layers)

        # Output layer - maps last hidden state to the char set
        self.fc = nn.Linear(input_size, config.char_set_size)

        self.apply(self._init_weights)
        self._log_model_size()

    def _init_weights(self, module):
        """Initialize weights."""
        if isinstance(module, nn.Linear):
            torch.nn.init.xavier_uniform_(module.weight)
            if module.bias is not None:
                torch.nn.init.zeros_(module.bias)
        elif isinstance(module, nn.LSTM):
            for name, param in module.named_parameters():
                if 'bias' in name:
                    torch.nn.init.zeros_(param)
                elif 'weight' in name:
                    torch.nn.init.xavier_uniform_(param)

    def forward(self, x: torch.Tensor) -> torch.Tensor:
        """
        Args:
            x: One-hot input of shape [batch_size, sample_len, char_set_size]
        Returns:
            Probabilities [batch_size, char_set_size]
        """
        if x.dim() != 3 or x.size(-1) != self.config.char_set_size:
            raise ValueError(
                f"Expected input of shape [batch, seq_len, {self.config.char_set_size}], got {tuple(x.shape)}"
            )

        out = x.float()
        for lstm in self.lstm_layers:
            out, _ = lstm(out) # [batch_size, seq_len, hidden_size]

        logits = self.fc(out[:, -1, :]) # [batch_size, char_set_size]
        return F.softmax(logits, dim=-1)
