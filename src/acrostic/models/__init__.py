from .base import NextCharModel
from .char_lstm import CharLSTM

__all__ = ["NextCharModel", "CharLSTM"]
