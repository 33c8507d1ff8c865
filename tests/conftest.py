"""
Configuration and fixtures for pytest.

Shared fixtures defined here are available to all tests.
"""

import pytest
from pathlib import Path
from typing import List, Optional

import torch

from acrostic.config.schemas import CharLSTMConfig
from acrostic.data.text_data import TextData
from acrostic.models.char_lstm import CharLSTM
from acrostic.utils.model_io import save_model_for_inference

CORPUS = "hello world how are you doing today "
SAMPLE_LEN = 5


class ScriptedModel:
    """
    Next-character model stand-in that returns scripted distributions.

    Each predict() call pops the next peaked distribution from `script`;
    once the script is exhausted the distribution peaks at `default_index`.
    """

    def __init__(self, sample_len: int, char_set_size: int, script: Optional[List[int]] = None, default_index: int = 0):
        self.input_shape = (None, sample_len, char_set_size)
        self.script = list(script or [])
        self.default_index = default_index
        self.inputs: List[torch.Tensor] = []

    def predict(self, x: torch.Tensor) -> torch.Tensor:
        self.inputs.append(x.clone())
        index = self.script.pop(0) if self.script else self.default_index
        probs = torch.zeros(1, self.input_shape[2])
        probs[0, index] = 1.0
        return probs


@pytest.fixture
def text_data() -> TextData:
    return TextData(CORPUS, SAMPLE_LEN, data_identifier="tiny")


@pytest.fixture
def seed_indices(text_data) -> List[int]:
    return text_data.text_to_indices("hello")


@pytest.fixture
def scripted_model(text_data):
    def _make(script_text: str = "", default_char: str = " ") -> ScriptedModel:
        return ScriptedModel(
            SAMPLE_LEN,
            text_data.char_set_size,
            script=text_data.text_to_indices(script_text),
            default_index=text_data.text_to_indices(default_char)[0],
        )
    return _make


@pytest.fixture
def char_lstm(text_data) -> CharLSTM:
    torch.manual_seed(0)
    config = CharLSTMConfig(sample_len=SAMPLE_LEN, char_set_size=text_data.char_set_size, lstm_layer_sizes=[16, 8])
    return CharLSTM(config)


@pytest.fixture
def space_model(char_lstm, text_data) -> CharLSTM:
    """CharLSTM whose output always puts all probability mass on the space character."""
    space_index = text_data.text_to_indices(" ")[0]
    with torch.no_grad():
        char_lstm.fc.weight.zero_()
        char_lstm.fc.bias.fill_(-100.0)
        char_lstm.fc.bias[space_index] = 100.0
    return char_lstm


@pytest.fixture
def model_dir(tmp_path, space_model, text_data) -> Path:
    path = tmp_path / "model"
    save_model_for_inference(space_model, text_data, path)
    return path


@pytest.fixture
def corpus_file(tmp_path) -> Path:
    path = tmp_path / "corpus.txt"
    path.write_text(CORPUS, encoding='utf-8')
    return path
